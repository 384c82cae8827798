"""HTML fragments for declarations: signatures, docstrings, fields and constructors."""

from __future__ import annotations

from typing import List, Optional, Sequence

import markdown

from ..models import DeclarationInfo, FieldInfo, TypeFragment, format_name
from .context import RenderContext
from .document import Element, Node, Raw, Text, el

_MARKDOWN_EXTENSIONS = ["fenced_code", "tables"]


def info_format_to_html(ctx: RenderContext, fragments: Sequence[TypeFragment]) -> List[Node]:
    """Render a type, linking fragments whose reference is documented in this site."""
    nodes: List[Node] = []
    for fragment in fragments:
        href = ctx.declaration_link(fragment.ref) if fragment.ref else None
        if href is None:
            nodes.append(Text(fragment.text))
        else:
            nodes.append(el("a", {"href": href}, fragment.text))
    return nodes


def docstring_to_html(doc: Optional[str]) -> List[Node]:
    if not doc or not doc.strip():
        return []
    rendered = markdown.markdown(doc, extensions=_MARKDOWN_EXTENSIONS)
    return [el("div", {"class": "doc"}, Raw(rendered))]


def field_to_html(ctx: RenderContext, field: FieldInfo) -> Element:
    short_name = field.name[-1]
    return el(
        "li",
        {"class": "structure_field", "id": format_name(field.name)},
        f"{short_name} : ",
        info_format_to_html(ctx, field.type),
    )


def structure_to_html(ctx: RenderContext, info: DeclarationInfo) -> List[Node]:
    """Field list anchored at ``<name>.mk``; fields keep declaration order."""
    return [
        el(
            "ul",
            {"class": "structure_fields", "id": f"{format_name(info.name)}.mk"},
            [field_to_html(ctx, field) for field in info.fields],
        )
    ]


def constructor_to_html(ctx: RenderContext, ctor: FieldInfo) -> Element:
    return el(
        "li",
        {"class": "constructor", "id": format_name(ctor.name)},
        f"{ctor.name[-1]} : ",
        info_format_to_html(ctx, ctor.type),
    )


def inductive_to_html(ctx: RenderContext, info: DeclarationInfo) -> List[Node]:
    return [
        el(
            "ul",
            {"class": "constructors"},
            [constructor_to_html(ctx, ctor) for ctor in info.constructors],
        )
    ]


def _signature(ctx: RenderContext, decl: DeclarationInfo) -> Element:
    dotted = format_name(decl.name)
    href = ctx.declaration_link(decl.name) or f"#{dotted}"
    parts: List[Node] = [
        el("span", {"class": "decl_kind"}, decl.kind),
        Text(" "),
        el("span", {"class": "decl_name"}, el("a", {"class": "break_within", "href": href}, dotted)),
    ]
    if decl.type:
        parts.append(el("span", {"class": "decl_type"}, " : ", info_format_to_html(ctx, decl.type)))
    return el("div", {"class": "decl_header"}, parts)


def declaration_to_html(ctx: RenderContext, decl: DeclarationInfo) -> Element:
    body: List[Node] = [_signature(ctx, decl)]
    body.extend(docstring_to_html(decl.doc))
    if decl.kind in ("structure", "class") and decl.fields:
        body.extend(structure_to_html(ctx, decl))
    elif decl.kind == "inductive" and decl.constructors:
        body.extend(inductive_to_html(ctx, decl))
    return el(
        "div",
        {"class": "decl", "id": format_name(decl.name)},
        el("div", {"class": decl.kind}, body),
    )


__all__ = [
    "constructor_to_html",
    "declaration_to_html",
    "docstring_to_html",
    "field_to_html",
    "inductive_to_html",
    "info_format_to_html",
    "structure_to_html",
]

"""In-memory HTML document tree and its serializer."""

from __future__ import annotations

import html
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Union

# Elements that never carry children or a closing tag.
VOID_ELEMENTS = frozenset(
    {"area", "base", "br", "col", "embed", "hr", "img", "input", "link", "meta", "source", "wbr"}
)
# Elements whose text content is emitted unescaped.
RAW_TEXT_ELEMENTS = frozenset({"script", "style"})

DOCTYPE = "<!DOCTYPE html>"


@dataclass(frozen=True)
class Text:
    """Leaf text, escaped on output."""

    value: str


@dataclass(frozen=True)
class Raw:
    """Trusted, already-rendered markup emitted verbatim."""

    markup: str


@dataclass
class Element:
    """An element node. Attribute order is preserved; ``""`` marks a bare attribute."""

    tag: str
    attributes: Dict[str, str] = field(default_factory=dict)
    children: List["Node"] = field(default_factory=list)


Node = Union[Text, Raw, Element]
Child = Union[Node, str]


def el(
    tag: str,
    attributes: Optional[Dict[str, str]] = None,
    *children: Union[Child, Iterable[Child]],
) -> Element:
    """Build an element; plain strings become :class:`Text`, iterables are flattened."""
    return Element(tag, dict(attributes or {}), list(_flatten(children)))


def _flatten(children: Iterable[object]) -> Iterable[Node]:
    for child in children:
        if isinstance(child, str):
            yield Text(child)
        elif isinstance(child, (Text, Raw, Element)):
            yield child
        else:
            yield from _flatten(child)  # type: ignore[arg-type]


def serialize(node: Node) -> str:
    parts: List[str] = []
    _write(node, parts, raw_text=False)
    return "".join(parts)


def serialize_document(root: Element) -> str:
    """Serialize a full page with its doctype and a trailing newline."""
    return f"{DOCTYPE}\n{serialize(root)}\n"


def _write(node: Node, out: List[str], *, raw_text: bool) -> None:
    if isinstance(node, Text):
        out.append(node.value if raw_text else html.escape(node.value, quote=False))
        return
    if isinstance(node, Raw):
        out.append(node.markup)
        return

    out.append(f"<{node.tag}")
    for key, value in node.attributes.items():
        if value == "":
            out.append(f" {key}")
        else:
            out.append(f' {key}="{html.escape(value, quote=True)}"')
    out.append(">")
    if node.tag in VOID_ELEMENTS:
        return
    child_raw = node.tag in RAW_TEXT_ELEMENTS
    for child in node.children:
        _write(child, out, raw_text=child_raw)
    out.append(f"</{node.tag}>")


__all__ = [
    "DOCTYPE",
    "Element",
    "Node",
    "Raw",
    "Text",
    "el",
    "serialize",
    "serialize_document",
]

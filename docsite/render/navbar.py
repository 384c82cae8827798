"""Sidebar navigation rendered from the module hierarchy."""

from __future__ import annotations

from typing import List

from ..hierarchy import Hierarchy
from ..models import Name, format_name, is_prefix
from .context import RenderContext
from .document import Element, Node, el


def module_list_file(ctx: RenderContext, name: Name) -> Element:
    """Link to a module page; marked ``visible`` when it is the page being rendered."""
    css_class = "nav_link visible" if ctx.current_name == name else "nav_link"
    return el(
        "div",
        {"class": css_class},
        el("a", {"href": ctx.module_link(name)}, format_name(name)),
    )


def _is_open(ctx: RenderContext, node: Hierarchy) -> bool:
    return ctx.current_name is not None and is_prefix(node.get_name(), ctx.current_name)


def module_list_dir(ctx: RenderContext, node: Hierarchy) -> Element:
    """Collapsible section for ``node``.

    Sub-directories are listed before leaf files. A child counts as a
    directory when it has children of its own or is not a module at all; the
    latter renders as an empty section.
    """
    children = list(node.get_children().values())
    dirs = [child for child in children if child.get_children() or not child.is_file()]
    files = [child for child in children if child.is_file() and not child.get_children()]

    if node.is_file():
        summary = el("summary", None, module_list_file(ctx, node.get_name()))
    else:
        summary = el("summary", None, format_name(node.get_name()))

    attributes = {"class": "nav_sect", "data-path": ctx.module_link(node.get_name())}
    if _is_open(ctx, node):
        attributes["open"] = ""

    return el(
        "details",
        attributes,
        summary,
        [module_list_dir(ctx, child) for child in dirs],
        [module_list_file(ctx, child.get_name()) for child in files],
    )


def module_list(ctx: RenderContext) -> List[Node]:
    """One heading and one section per top-level namespace."""
    nodes: List[Node] = []
    for segment, child in ctx.result.hierarchy.get_children().items():
        nodes.append(el("h4", None, segment))
        nodes.append(module_list_dir(ctx, child))
    return nodes


def navbar(ctx: RenderContext) -> Element:
    return el(
        "nav",
        {"class": "nav"},
        el("h3", None, "General documentation"),
        el("div", {"class": "nav_link"}, el("a", {"href": ctx.root}, "index")),
        el("h3", None, "Library"),
        module_list(ctx),
    )


__all__ = ["module_list", "module_list_dir", "module_list_file", "navbar"]

"""Shared page shell and the composition helper that wraps page content in it."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Callable, List, Sequence

from .context import RenderContext, RenderFn
from .document import Element, Node, el
from .navbar import navbar


@dataclass(frozen=True)
class Page:
    """What a page contributes to the layout: a title and its inner content."""

    title: str
    content: Sequence[Node]


Layout = Callable[[RenderContext, str, Sequence[Node]], Element]


def _script_literal(value: str) -> str:
    """JSON string literal that cannot close the surrounding ``<script>``."""
    return json.dumps(value).replace("<", "\\u003c")


def base_html(ctx: RenderContext, title: str, content: Sequence[Node]) -> Element:
    """Full ``<html>`` document around ``content``, sharing chrome across pages."""
    root = ctx.root
    head = el(
        "head",
        None,
        el("link", {"rel": "stylesheet", "href": f"{root}style.css"}),
        el("link", {"rel": "shortcut icon", "href": f"{root}favicon.ico"}),
        el("title", None, title),
        el("meta", {"charset": "UTF-8"}),
        el("meta", {"name": "viewport", "content": "width=device-width, initial-scale=1"}),
    )
    header = el(
        "header",
        None,
        el("h1", None, el("label", {"for": "nav_toggle"}), ctx.title),
        el("p", {"class": "header_filename break_within"}, title),
        el(
            "form",
            {"action": "https://google.com/search", "method": "get", "id": "search_form"},
            el("input", {"type": "hidden", "name": "sitesearch", "value": root}),
            el("input", {"type": "text", "name": "q", "autocomplete": "off"}),
            el("button", None, "Google site search"),
        ),
    )
    body = el(
        "body",
        None,
        el("input", {"id": "nav_toggle", "type": "checkbox"}),
        header,
        list(content),
        navbar(ctx),
        el("script", None, f"siteRoot = {_script_literal(root)}"),
        el("script", {"type": "module", "async": "", "src": f"{root}nav.js"}),
    )
    return el("html", {"lang": "en"}, head, body)


def compose(layout: Layout, page: RenderFn[Page]) -> RenderFn[Element]:
    """Return a render function that places ``page`` inside ``layout``.

    The page is rendered to completion first, then handed to the layout under
    the same context.
    """

    def render(ctx: RenderContext) -> Element:
        rendered = page(ctx)
        content: List[Node] = list(rendered.content)
        return layout(ctx, rendered.title, content)

    return render


__all__ = ["Layout", "Page", "base_html", "compose"]

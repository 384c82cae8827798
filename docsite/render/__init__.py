"""HTML rendering for docsite pages."""

from .context import RenderContext, with_current_name
from .document import Element, Raw, Text, el, serialize, serialize_document
from .layout import Page, base_html, compose
from .pages import index_page, module_page, not_found_page

__all__ = [
    "Element",
    "Page",
    "Raw",
    "RenderContext",
    "Text",
    "base_html",
    "compose",
    "el",
    "index_page",
    "module_page",
    "not_found_page",
    "serialize",
    "serialize_document",
    "with_current_name",
]

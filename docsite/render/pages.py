"""Page renderers: site index, not-found page and one page per module."""

from __future__ import annotations

from ..models import ModuleInfo, format_name
from .context import RenderContext, RenderFn, with_current_name
from .declarations import declaration_to_html, docstring_to_html
from .document import Element, el
from .layout import Page, base_html, compose


def _index_content(ctx: RenderContext) -> Page:
    return Page(
        title="Index",
        content=[
            el(
                "main",
                None,
                el("a", {"id": "top"}),
                el("h1", None, f"Welcome to the {ctx.title}"),
                el(
                    "p",
                    None,
                    "Pick a module from the navigation to browse its declarations.",
                ),
            )
        ],
    )


def _not_found_content(ctx: RenderContext) -> Page:
    return Page(
        title="404",
        content=[
            el(
                "main",
                None,
                el("h1", None, "404 Not Found"),
                el("p", None, "Unfortunately, the page you were looking for is no longer here."),
                el("div", {"id": "did_you_mean"}),
            )
        ],
    )


index_page: RenderFn[Element] = compose(base_html, _index_content)
not_found_page: RenderFn[Element] = compose(base_html, _not_found_content)


def module_content(module: ModuleInfo) -> RenderFn[Page]:
    dotted = format_name(module.name)

    def render(ctx: RenderContext) -> Page:
        return Page(
            title=dotted,
            content=[
                el(
                    "main",
                    None,
                    el("h1", None, dotted),
                    docstring_to_html(module.doc),
                    [declaration_to_html(ctx, decl) for decl in module.members],
                )
            ],
        )

    return render


def module_page(module: ModuleInfo) -> RenderFn[Element]:
    """Render ``module`` with the context narrowed to it, navigation included."""
    return with_current_name(module.name, compose(base_html, module_content(module)))


__all__ = ["index_page", "module_content", "module_page", "not_found_page"]

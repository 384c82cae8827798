"""Tests for docsite.render.navbar."""

from __future__ import annotations

from docsite.hierarchy import Hierarchy
from docsite.models import AnalysisResult, ModuleInfo
from docsite.render.context import RenderContext
from docsite.render.navbar import module_list, module_list_dir, module_list_file, navbar
from tests._fixtures.analysis_builder import find_all, text_of


def _active_links(node) -> list[str]:
    return [
        link.children[0].attributes["href"]
        for link in find_all(node, "div", "visible")
    ]


def _open_sections(node) -> list[str]:
    return [d.attributes["data-path"] for d in find_all(node, "details") if "open" in d.attributes]


def test_module_list_file_marks_only_current_page(ctx: RenderContext) -> None:
    current = ctx.with_current_name(("A", "B"))
    active = module_list_file(current, ("A", "B"))
    inactive = module_list_file(current, ("A",))

    assert active.attributes["class"] == "nav_link visible"
    assert inactive.attributes["class"] == "nav_link"
    assert active.children[0].attributes["href"] == "/docs/A/B.html"
    assert text_of(active) == "A.B"


def test_module_page_navigation_opens_prefix_sections(ctx: RenderContext) -> None:
    nav = navbar(ctx.with_current_name(("A", "B")))

    assert _active_links(nav) == ["/docs/A/B.html"]
    assert _open_sections(nav) == ["/docs/A.html", "/docs/A/B.html"]


def test_leaf_module_opens_every_ancestor(ctx: RenderContext) -> None:
    nav = navbar(ctx.with_current_name(("A", "B", "C")))

    assert _active_links(nav) == ["/docs/A/B/C.html"]
    assert _open_sections(nav) == ["/docs/A.html", "/docs/A/B.html"]


def test_synthetic_namespace_opens_for_its_modules(ctx: RenderContext) -> None:
    nav = navbar(ctx.with_current_name(("Other", "Util")))

    assert _active_links(nav) == ["/docs/Other/Util.html"]
    assert _open_sections(nav) == ["/docs/Other.html"]


def test_no_current_name_means_nothing_active_or_open(ctx: RenderContext) -> None:
    nav = navbar(ctx)

    assert _active_links(nav) == []
    assert _open_sections(nav) == []


def test_every_module_is_linked_exactly_once(ctx: RenderContext) -> None:
    nav = navbar(ctx)
    hrefs = [a.attributes["href"] for a in find_all(nav, "a")]

    assert hrefs == [
        "/docs/",
        "/docs/A.html",
        "/docs/A/B.html",
        "/docs/A/B/C.html",
        "/docs/Other/Util.html",
    ]


def test_top_level_namespaces_get_headings(ctx: RenderContext) -> None:
    nodes = module_list(ctx)

    assert [node.tag for node in nodes] == ["h4", "details", "h4", "details"]
    assert [text_of(node) for node in nodes if node.tag == "h4"] == ["A", "Other"]


def test_directories_render_before_files() -> None:
    names = [("Pkg",), ("Pkg", "a"), ("Pkg", "z", "Inner"), ("Pkg", "b")]
    result = AnalysisResult.from_modules(ModuleInfo(name=name) for name in names)
    ctx = RenderContext(result=result)

    section = module_list_dir(ctx, result.hierarchy.get_children()["Pkg"])

    assert [child.tag for child in section.children] == ["summary", "details", "div", "div"]
    assert section.children[1].attributes["data-path"] == "/Pkg/z.html"
    assert [text_of(child) for child in section.children[2:]] == ["Pkg.a", "Pkg.b"]


def test_empty_non_file_node_renders_empty_section() -> None:
    hierarchy = Hierarchy.from_names([("Pkg", "Mod")])
    hierarchy.get_children()["Pkg"].children["Empty"] = Hierarchy(name=("Pkg", "Empty"))
    result = AnalysisResult(
        modules={("Pkg", "Mod"): ModuleInfo(name=("Pkg", "Mod"))},
        hierarchy=hierarchy,
    )

    section = module_list_dir(RenderContext(result=result), hierarchy.get_children()["Pkg"])

    empty = section.children[1]
    assert empty.tag == "details"
    assert [child.tag for child in empty.children] == ["summary"]
    assert text_of(empty) == "Pkg.Empty"

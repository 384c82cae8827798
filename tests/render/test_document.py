"""Tests for docsite.render.document."""

from __future__ import annotations

from docsite.render.document import Element, Raw, Text, el, serialize, serialize_document


def test_el_wraps_strings_and_flattens_iterables() -> None:
    node = el("ul", {"id": "x"}, [el("li", None, "one"), el("li", None, "two")], "tail")
    assert [type(child) for child in node.children] == [Element, Element, Text]
    assert node.children[2] == Text("tail")


def test_text_and_attributes_are_escaped() -> None:
    node = el("a", {"href": '/x?a=1&b="2"'}, "<List α>")
    assert serialize(node) == '<a href="/x?a=1&amp;b=&quot;2&quot;">&lt;List α&gt;</a>'


def test_empty_attribute_serializes_as_bare_name() -> None:
    node = el("details", {"class": "nav_sect", "open": ""})
    assert serialize(node) == '<details class="nav_sect" open></details>'


def test_attribute_order_is_preserved() -> None:
    node = el("input", {"type": "text", "name": "q", "autocomplete": "off"})
    assert serialize(node) == '<input type="text" name="q" autocomplete="off">'


def test_void_elements_have_no_closing_tag() -> None:
    assert serialize(el("meta", {"charset": "UTF-8"})) == '<meta charset="UTF-8">'


def test_script_content_is_not_escaped() -> None:
    assert serialize(el("script", None, 'siteRoot = "/"')) == '<script>siteRoot = "/"</script>'


def test_raw_markup_is_emitted_verbatim() -> None:
    assert serialize(el("div", None, Raw("<p>hi</p>"))) == "<div><p>hi</p></div>"


def test_serialize_document_prefixes_doctype() -> None:
    output = serialize_document(el("html", {"lang": "en"}))
    assert output == '<!DOCTYPE html>\n<html lang="en"></html>\n'

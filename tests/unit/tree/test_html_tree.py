"""Tests for the selectolax-backed HTML adapter."""

from __future__ import annotations

import pytest

from spananchor.anchoring.indexer import text_content
from spananchor.tree.html import parse_html, to_html
from spananchor.tree.memory import Element, MemoryTree, Node, Text


class TestParseHtml:
    """Tests for parse_html()."""

    def test_empty_input(self) -> None:
        root = parse_html("")
        assert root.tag == "body"
        assert root.children == []

    def test_fragment_structure(self) -> None:
        root = parse_html("<p>Hello <b>world</b></p>")
        (p,) = root.children
        assert isinstance(p, Element)
        assert p.tag == "p"
        assert isinstance(p.children[0], Text)
        assert p.children[0].data == "Hello "
        assert p.children[1].tag == "b"

    def test_full_document_uses_body(self) -> None:
        root = parse_html(
            "<!DOCTYPE html><html><head><title>T</title></head>"
            "<body><p>Body text</p></body></html>"
        )
        assert text_content(MemoryTree(), root) == "Body text"

    def test_strips_script_and_style(self) -> None:
        root = parse_html(
            "<p>A</p><script>var x=1;</script><style>.c{}</style><p>B</p>"
        )
        assert text_content(MemoryTree(), root) == "AB"

    def test_entities_decoded(self) -> None:
        root = parse_html("<p>a &amp; b</p>")
        assert text_content(MemoryTree(), root) == "a & b"

    def test_comments_dropped(self) -> None:
        root = parse_html("<p>a<!-- hidden -->b</p>")
        assert text_content(MemoryTree(), root) == "ab"

    def test_attributes_preserved(self) -> None:
        root = parse_html('<p class="x" id="p1">t</p>')
        assert root.children[0].attributes == {"class": "x", "id": "p1"}


class TestToHtml:
    """Tests for to_html()."""

    def test_round_trip_simple_fragment(self) -> None:
        html = '<p class="x">Hello <b>world</b></p>'
        assert to_html(parse_html(html)) == html

    def test_escapes_text_and_attributes(self) -> None:
        root = Element("div", {"title": 'a "q"'}, children=["1 < 2 & 3"])
        assert (
            to_html(root, include_root=True)
            == '<div title="a &quot;q&quot;">1 &lt; 2 &amp; 3</div>'
        )

    def test_void_elements_have_no_closing_tag(self) -> None:
        root = parse_html("<p>a<br>b</p>")
        assert to_html(root) == "<p>a<br>b</p>"

    def test_text_node_serialises_alone(self) -> None:
        assert to_html(Text("x > y")) == "x &gt; y"

    def test_unknown_node_type_raises(self) -> None:
        root = Element("div")
        root.children.append(Node())
        with pytest.raises(TypeError, match="Cannot serialise node of type Node"):
            to_html(root)

"""HTML adapter: build an in-memory tree from HTML and serialise it back.

Parsing goes through selectolax so that malformed markup is normalised the
same way a browser would.  The resulting ``Element`` tree is what the
anchoring engine mutates; ``to_html`` renders wrappers as
``<span class="annotation" data-id="...">``.
"""

# Pattern: Functional Core (pure conversion functions)

from __future__ import annotations

import html as html_module
import logging
from typing import Any

from selectolax.lexbor import LexborHTMLParser

from spananchor.tree.memory import Element, Node, Text

logger = logging.getLogger(__name__)

# Tags whose content is never part of the annotatable text
_STRIP_TAGS = frozenset(("script", "style", "noscript", "template"))

# Void elements serialise without a closing tag
_VOID_TAGS = frozenset(
    (
        "area",
        "base",
        "br",
        "col",
        "embed",
        "hr",
        "img",
        "input",
        "link",
        "meta",
        "source",
        "track",
        "wbr",
    )
)

# selectolax reports text nodes as "-text"; comments and doctypes carry
# other non-name prefixes
_NON_ELEMENT_PREFIXES = ("-", "_", "!", "#")


def _convert(node: Any) -> Node | None:
    """Convert a selectolax node into a memory node (None = dropped)."""
    tag = node.tag

    if tag == "-text":
        text = node.text_content
        if not text:
            return None
        return Text(text)

    if not tag or tag.startswith(_NON_ELEMENT_PREFIXES):
        return None

    if tag in _STRIP_TAGS:
        return None

    attributes = {
        name: value if value is not None else ""
        for name, value in node.attributes.items()
    }
    element = Element(tag, attributes)

    child = node.child
    while child is not None:
        converted = _convert(child)
        if converted is not None:
            element.append(converted)
        child = child.next
    return element


def parse_html(html: str) -> Element:
    """Parse HTML into an in-memory tree rooted at a ``body`` element.

    Args:
        html: A full document or a fragment.

    Returns:
        ``Element("body")`` whose children mirror the document body.
        Script, style, noscript and template content is dropped, as are
        comments and empty text nodes.
    """
    root = Element("body")
    if not html:
        return root

    tree = LexborHTMLParser(html)
    body = tree.body
    source = body if body is not None else tree.root
    if source is None:
        return root

    child = source.child
    while child is not None:
        converted = _convert(child)
        if converted is not None:
            root.append(converted)
        child = child.next

    logger.debug("Parsed HTML into %d top-level nodes", len(root.children))
    return root


def _render_attributes(attributes: dict[str, str]) -> str:
    return "".join(
        f' {name}="{html_module.escape(value, quote=True)}"'
        for name, value in attributes.items()
    )


def _render(node: Node, parts: list[str]) -> None:
    if isinstance(node, Text):
        parts.append(html_module.escape(node.data, quote=False))
        return

    if not isinstance(node, Element):
        msg = f"Cannot serialise node of type {type(node).__name__}"
        raise TypeError(msg)

    parts.append(f"<{node.tag}{_render_attributes(node.attributes)}>")
    if node.tag in _VOID_TAGS:
        return
    for child in node.children:
        _render(child, parts)
    parts.append(f"</{node.tag}>")


def to_html(node: Node, *, include_root: bool = False) -> str:
    """Serialise a memory tree to HTML.

    By default the root element itself is omitted (inner HTML), which is
    what callers want for the ``body`` element returned by ``parse_html``.
    """
    parts: list[str] = []
    if include_root or not isinstance(node, Element):
        _render(node, parts)
    else:
        for child in node.children:
            _render(child, parts)
    return "".join(parts)

"""Tree abstraction and its implementations."""

from spananchor.tree.html import parse_html, to_html
from spananchor.tree.memory import Element, MemoryTree, Node, Text
from spananchor.tree.protocol import TreeAdapter

__all__ = [
    "Element",
    "MemoryTree",
    "Node",
    "Text",
    "TreeAdapter",
    "parse_html",
    "to_html",
]

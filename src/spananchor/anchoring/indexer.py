"""Offset indexing: text leaves in document order, with early termination.

All functions here are pure reads of tree shape and leaf text.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from spananchor.anchoring.types import TextSegmentRecord

if TYPE_CHECKING:
    from collections.abc import Iterable

    from spananchor.tree.protocol import TreeAdapter

logger = logging.getLogger(__name__)


def walk_text_nodes(
    tree: TreeAdapter,
    root: Any,
    stop_offset: int | None = None,
) -> list[Any]:
    """Collect the text leaves under *root*, depth-first in document order.

    Before each node is visited, the walk stops if the combined text length
    of the leaves collected so far exceeds *stop_offset*.  The early stop
    only saves work: callers must not rely on anything past *stop_offset*
    being indexed.

    Args:
        tree: Tree adapter used for navigation.
        root: Container to walk.  A root that is itself a leaf yields ``[root]``.
        stop_offset: Optional character offset bounding the walk.

    Returns:
        Text leaves in document order (empty when there are none).
    """
    nodes: list[Any] = []
    collected = 0

    # Explicit stack of child iterators; bounded by tree size
    stack = [iter((root,))]
    while stack:
        node = next(stack[-1], None)
        if node is None:
            stack.pop()
            continue

        if stop_offset is not None and collected > stop_offset:
            break

        if tree.is_text(node):
            nodes.append(node)
            collected += len(tree.text(node))
            continue

        stack.append(iter(tree.children(node)))

    logger.debug(
        "Indexed %d text nodes (%d chars, stop_offset=%s)",
        len(nodes),
        collected,
        stop_offset,
    )
    return nodes


def index_text_nodes(
    tree: TreeAdapter,
    nodes: Iterable[Any],
) -> list[TextSegmentRecord]:
    """Assign cumulative ``(start, end)`` bounds to leaves; the first starts at 0."""
    segments: list[TextSegmentRecord] = []
    start = 0
    for node in nodes:
        end = start + len(tree.text(node))
        segments.append(TextSegmentRecord(node=node, start=start, end=end))
        start = end
    return segments


def text_content(tree: TreeAdapter, node: Any) -> str:
    """Return the concatenated text of every leaf under *node*."""
    return "".join(tree.text(leaf) for leaf in walk_text_nodes(tree, node))


def offset_within(tree: TreeAdapter, root: Any, node: Any) -> int:
    """Return the cumulative offset at which *node* starts inside *root*.

    Sums the text of preceding siblings along the ancestor chain, so only
    the part of the tree before *node* is read.

    Raises:
        ValueError: If *node* is not *root* or one of its descendants.
    """
    offset = 0
    current = node
    while current is not root:
        parent = tree.parent(current)
        if parent is None:
            msg = "node is not inside the given root"
            raise ValueError(msg)
        for sibling in tree.children(parent):
            if sibling is current:
                break
            offset += len(text_content(tree, sibling))
        current = parent
    return offset

"""Range splitting and wrapping.

Turns a ``(start, end)`` position pair into wrapper nodes whose combined
content is exactly the text between the two positions.  A range inside one
leaf gets one wrapper; a range crossing leaves is decomposed into a tail
wrapper on the start leaf, one wrapper per whole interior unit and a head
wrapper on the end leaf.  An interior unit is a text leaf, or the outermost
wrapper chain whose only content is that leaf.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from spananchor.anchoring.indexer import offset_within, walk_text_nodes

if TYPE_CHECKING:
    from spananchor.anchoring.types import Position
    from spananchor.tree.protocol import TreeAdapter

logger = logging.getLogger(__name__)


def text_nodes_between(
    tree: TreeAdapter,
    start_node: Any,
    end_node: Any,
    root: Any,
) -> list[Any]:
    """Return the text leaves strictly between *start_node* and *end_node*.

    The walk is bounded by the offset at which *end_node* ends inside
    *root*, so nothing after the range is indexed.
    """
    stop_offset = offset_within(tree, root, end_node) + len(tree.text(end_node))

    between: list[Any] = []
    take = False
    for node in walk_text_nodes(tree, root, stop_offset):
        if node is end_node:
            break
        if take:
            between.append(node)
        if node is start_node:
            take = True
    return between


def _surround(tree: TreeAdapter, node: Any) -> Any:
    """Replace *node* in place with a wrapper that owns it."""
    wrapper = tree.create_wrapper()
    tree.insert_before(wrapper, node)
    tree.reparent_into(wrapper, node)
    return wrapper


def _interior_unit(tree: TreeAdapter, node: Any, root: Any) -> Any:
    """Climb from a leaf through wrappers that hold nothing but it."""
    current = node
    while True:
        parent = tree.parent(current)
        if parent is None or parent is root or not tree.is_wrapper(parent):
            return current
        if list(tree.children(parent)) != [current]:
            return current
        current = parent


def _surround_text(tree: TreeAdapter, node: Any, start: int, end: int) -> Any:
    """Wrap ``text[start:end]`` of a leaf, splitting it as needed."""
    if end < len(tree.text(node)):
        tree.split_text(node, end)
    middle = tree.split_text(node, start) if start > 0 else node
    return _surround(tree, middle)


def wrap_range(
    tree: TreeAdapter,
    start: Position,
    end: Position,
    root: Any,
) -> list[Any]:
    """Wrap the content between *start* and *end* in annotation wrappers.

    Args:
        tree: Tree adapter performing the mutations.
        start: Start position (inclusive).
        end: End position (exclusive local offset on the end leaf).
        root: Container bounding the interior-leaf search.

    Returns:
        Wrappers in left-to-right document order; never empty.  A zero-length
        range yields a single empty wrapper.
    """
    if start.node is end.node:
        logger.debug("Wrapping [%d, %d) within one text node", start.offset, end.offset)
        return [_surround_text(tree, start.node, start.offset, end.offset)]

    # Resolve the interior before any mutation changes node boundaries
    interior = text_nodes_between(tree, start.node, end.node, root)

    start_wrapper = _surround_text(
        tree, start.node, start.offset, len(tree.text(start.node))
    )
    end_wrapper = _surround_text(tree, end.node, 0, end.offset)

    # An already-wrapped leaf is surrounded as a whole, outside its wrappers
    units = [_interior_unit(tree, node, root) for node in interior]
    interior_wrappers = [_surround(tree, unit) for unit in reversed(units)]
    interior_wrappers.reverse()

    logger.debug("Wrapped range across %d interior text nodes", len(interior))
    return [start_wrapper, *interior_wrappers, end_wrapper]

"""Position resolution: abstract character offsets to (leaf, local offset)."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from spananchor.anchoring.indexer import index_text_nodes, walk_text_nodes
from spananchor.anchoring.types import Position

if TYPE_CHECKING:
    from collections.abc import Sequence

    from spananchor.anchoring.types import TextSegmentRecord
    from spananchor.tree.protocol import TreeAdapter

logger = logging.getLogger(__name__)


def resolve_positions(
    segments: Sequence[TextSegmentRecord],
    char_offsets: Sequence[int],
) -> list[Position | None]:
    """Map each offset to the first segment whose inclusive bounds contain it.

    An offset sitting exactly on a boundary between two leaves resolves to
    the end of the earlier leaf.  Scanning stops as soon as every offset is
    resolved.  Offsets outside the indexed text resolve to None.

    Returns:
        One entry per input offset, in input order.
    """
    positions: list[Position | None] = [None] * len(char_offsets)
    unresolved = len(char_offsets)

    for segment in segments:
        if unresolved == 0:
            break
        for i, char_offset in enumerate(char_offsets):
            if positions[i] is None and segment.start <= char_offset <= segment.end:
                positions[i] = Position(
                    node=segment.node,
                    offset=char_offset - segment.start,
                )
                unresolved -= 1

    return positions


def char_offsets_to_positions(
    tree: TreeAdapter,
    root: Any,
    char_offsets: Sequence[int],
) -> list[Position | None]:
    """Resolve character offsets within *root* to concrete positions.

    Only the prefix of the tree up to the largest requested offset is walked.

    Args:
        tree: Tree adapter used for navigation.
        root: Container the offsets are measured against.
        char_offsets: Offsets into the container's flattened text.

    Returns:
        A ``Position`` per offset (input order), or None where the offset lies
        beyond the container's text.
    """
    if not char_offsets:
        return []

    max_offset = max(char_offsets)
    segments = index_text_nodes(tree, walk_text_nodes(tree, root, max_offset))
    positions = resolve_positions(segments, char_offsets)

    missing = [o for o, p in zip(char_offsets, positions, strict=True) if p is None]
    if missing:
        logger.debug(
            "Offsets %s beyond indexed text (%d chars)",
            missing,
            segments[-1].end if segments else 0,
        )
    return positions

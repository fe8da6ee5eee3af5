"""Anchoring engine: offsets to positions, positions to wrappers."""

from spananchor.anchoring.binder import (
    AnchoringError,
    AnnotationBinder,
    DegenerateSpanError,
    OffsetOutOfRangeError,
)
from spananchor.anchoring.indexer import (
    index_text_nodes,
    offset_within,
    text_content,
    walk_text_nodes,
)
from spananchor.anchoring.nesting import annotations_at
from spananchor.anchoring.positions import char_offsets_to_positions, resolve_positions
from spananchor.anchoring.types import Position, TextSegmentRecord
from spananchor.anchoring.wrapping import text_nodes_between, wrap_range

__all__ = [
    "AnchoringError",
    "AnnotationBinder",
    "DegenerateSpanError",
    "OffsetOutOfRangeError",
    "Position",
    "TextSegmentRecord",
    "annotations_at",
    "char_offsets_to_positions",
    "index_text_nodes",
    "offset_within",
    "resolve_positions",
    "text_content",
    "text_nodes_between",
    "walk_text_nodes",
    "wrap_range",
]

"""Ephemeral value types produced while anchoring a span.

Nothing here is cached across calls: segment records and positions are
recomputed from the live tree for every query.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class TextSegmentRecord:
    """A text leaf and its cumulative ``[start, end]`` offsets in the container."""

    node: Any
    start: int
    end: int

    @property
    def length(self) -> int:
        return self.end - self.start


@dataclass(frozen=True, slots=True)
class Position:
    """A concrete location: a text leaf plus a local index into its text."""

    node: Any
    offset: int

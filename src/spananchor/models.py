"""Annotation records as seen by the anchoring engine.

The engine reads exactly three facts from a record: where its span starts,
how long the quoted text is, and a stable key that survives updates.
``AnnotationRecord`` is that contract; ``TextAnnotation`` is the concrete
record for annotations anchored as ``char-offset:<N>``.
"""

from __future__ import annotations

import re
from collections.abc import Hashable
from typing import Protocol, runtime_checkable

from pydantic import BaseModel, ConfigDict, field_validator

CHAR_OFFSET_PREFIX = "char-offset:"

_ANCHOR_RE = re.compile(r"^char-offset:(\d+)$")


@runtime_checkable
class AnnotationRecord(Protocol):
    """Read-only view of an annotation."""

    @property
    def anchor_key(self) -> Hashable: ...

    @property
    def char_offset(self) -> int: ...

    @property
    def quote_length(self) -> int: ...

    @property
    def annotation_id(self) -> str | None: ...


class TextAnnotation(BaseModel):
    """An annotation on a text, anchored by character offset.

    Attributes:
        anchor: ``"char-offset:<N>"``; also the stable identity across updates.
        quote: The quoted text.  Only its length is used for placement.
        annotation_id: Persistent identifier, stamped onto wrappers when set.
        body: Free-form payload (comments, tags); opaque to the engine.
    """

    model_config = ConfigDict(frozen=True)

    anchor: str
    quote: str
    annotation_id: str | None = None
    body: tuple[str, ...] = ()

    @field_validator("anchor")
    @classmethod
    def _valid_anchor(cls, value: str) -> str:
        if _ANCHOR_RE.match(value) is None:
            msg = f"anchor must look like 'char-offset:<N>', got {value!r}"
            raise ValueError(msg)
        return value

    @classmethod
    def at(
        cls,
        char_offset: int,
        quote: str,
        annotation_id: str | None = None,
        **kwargs: object,
    ) -> TextAnnotation:
        """Build an annotation from a numeric offset."""
        return cls(
            anchor=f"{CHAR_OFFSET_PREFIX}{char_offset}",
            quote=quote,
            annotation_id=annotation_id,
            **kwargs,
        )

    @property
    def anchor_key(self) -> str:
        return self.anchor

    @property
    def char_offset(self) -> int:
        return int(self.anchor.removeprefix(CHAR_OFFSET_PREFIX))

    @property
    def quote_length(self) -> int:
        return len(self.quote)

    @property
    def span(self) -> tuple[int, int]:
        """``(start, end)`` character offsets of the quoted text."""
        return self.char_offset, self.char_offset + self.quote_length

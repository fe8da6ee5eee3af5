"""Annotation binding: place annotations on a container and keep them current.

``AnnotationBinder`` owns one container.  New annotations are resolved,
wrapped and bound; updates to an annotation already on the page swap the
bound record on its existing wrappers without touching the tree.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from spananchor.anchoring.nesting import annotations_at
from spananchor.anchoring.positions import char_offsets_to_positions
from spananchor.anchoring.wrapping import wrap_range
from spananchor.config import get_settings

if TYPE_CHECKING:
    from collections.abc import Hashable, Iterable

    from spananchor.config import Settings
    from spananchor.models import AnnotationRecord
    from spananchor.tree.protocol import TreeAdapter

logger = logging.getLogger(__name__)


class AnchoringError(Exception):
    """An annotation could not be placed on its container."""

    def __init__(self, message: str, annotation: AnnotationRecord) -> None:
        self.annotation = annotation
        super().__init__(message)


class OffsetOutOfRangeError(AnchoringError):
    """The annotation's span extends beyond the container's text."""


class DegenerateSpanError(AnchoringError):
    """The annotation's span is empty and policy rejects empty spans."""


class AnnotationBinder:
    """Places annotations on a container and tracks their wrappers.

    Wrappers are indexed by ``anchor_key`` as they are bound, so updates are
    a dictionary lookup rather than a scan of the rendered tree.

    Args:
        tree: Tree adapter performing reads and mutations.
        root: The container all offsets are measured against.
        settings: Optional settings; defaults to ``get_settings()``.
    """

    def __init__(
        self,
        tree: TreeAdapter,
        root: Any,
        settings: Settings | None = None,
    ) -> None:
        self.tree = tree
        self.root = root
        self.settings = settings if settings is not None else get_settings()
        self._wrappers: dict[Hashable, list[Any]] = {}

    def init(self, annotations: Iterable[AnnotationRecord]) -> int:
        """Place an initial batch of annotations; returns how many were placed."""
        placed = 0
        for annotation in annotations:
            if self.add_annotation(annotation):
                placed += 1
        logger.info("Placed %d annotations", placed)
        return placed

    def _skip(self, error: AnchoringError) -> list[Any]:
        if self.settings.policy.strict:
            raise error
        logger.warning("Skipping annotation %r: %s", error.annotation.anchor_key, error)
        return []

    def add_annotation(self, annotation: AnnotationRecord) -> list[Any]:
        """Wrap and bind a new annotation.

        Both endpoints are resolved before the tree is touched, so a span that
        cannot be placed leaves the container unchanged.

        Returns:
            The new wrappers, or an empty list when the annotation was skipped.

        Raises:
            OffsetOutOfRangeError: In strict mode, if the span overruns the text.
            DegenerateSpanError: In strict mode, if the span is empty and
                ``policy.skip_degenerate_spans`` is set.
        """
        start = annotation.char_offset
        end = start + annotation.quote_length

        if start == end and self.settings.policy.skip_degenerate_spans:
            return self._skip(
                DegenerateSpanError(f"empty span at offset {start}", annotation)
            )

        dom_start, dom_end = char_offsets_to_positions(
            self.tree, self.root, [start, end]
        )
        if dom_start is None or dom_end is None:
            return self._skip(
                OffsetOutOfRangeError(
                    f"span [{start}, {end}) extends beyond container", annotation
                )
            )

        wrappers = wrap_range(self.tree, dom_start, dom_end, self.root)
        self.bind_annotation(annotation, wrappers)
        return wrappers

    def add_or_update_annotation(self, annotation: AnnotationRecord) -> list[Any]:
        """Rebind existing wrappers for this anchor, or place it if new."""
        existing = self._wrappers.get(annotation.anchor_key)
        if existing:
            for wrapper in existing:
                self._bind_one(annotation, wrapper)
            logger.debug(
                "Updated %d wrappers for %r", len(existing), annotation.anchor_key
            )
            return list(existing)
        return self.add_annotation(annotation)

    def _bind_one(self, annotation: AnnotationRecord, wrapper: Any) -> None:
        self.tree.set_annotation(wrapper, annotation)
        if annotation.annotation_id:
            self.tree.set_attribute(
                wrapper, self.settings.wrapper.id_attribute, annotation.annotation_id
            )
        else:
            self.tree.remove_attribute(wrapper, self.settings.wrapper.id_attribute)

    def bind_annotation(
        self,
        annotation: AnnotationRecord,
        wrappers: Iterable[Any],
    ) -> None:
        """Attach *annotation* to each wrapper and index them by anchor key."""
        bound = self._wrappers.setdefault(annotation.anchor_key, [])
        for wrapper in wrappers:
            self._bind_one(annotation, wrapper)
            bound.append(wrapper)

    def wrappers_for(self, anchor_key: Hashable) -> list[Any]:
        """Return the wrappers currently bound to *anchor_key*."""
        return list(self._wrappers.get(anchor_key, ()))

    def annotations_at(self, node: Any) -> list[AnnotationRecord]:
        """Annotations covering *node*, most specific first."""
        return annotations_at(self.tree, node)

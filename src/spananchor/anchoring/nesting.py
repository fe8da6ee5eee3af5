"""Nested region resolution: every annotation covering a wrapped point."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from spananchor.models import AnnotationRecord
    from spananchor.tree.protocol import TreeAdapter


def annotations_at(tree: TreeAdapter, node: Any) -> list[AnnotationRecord]:
    """Collect the annotations of all wrappers enclosing *node*.

    Starts at *node* when it is a wrapper, otherwise at its parent, and walks
    up while each ancestor is a wrapper.  Reaching the root ends the walk.

    Returns:
        Annotations ordered by ascending quote length (most specific first);
        ties keep discovery order, innermost first.
    """
    current = node if tree.is_wrapper(node) else tree.parent(node)

    found: list[AnnotationRecord] = []
    while current is not None and tree.is_wrapper(current):
        annotation = tree.get_annotation(current)
        if annotation is not None:
            found.append(annotation)
        current = tree.parent(current)

    return sorted(found, key=lambda a: a.quote_length)

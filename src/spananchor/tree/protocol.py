"""Protocol defining the tree interface the anchoring engine runs against.

The engine never touches a concrete document API.  Anything that can
navigate parent/child links, read leaf text and perform the three
mutations below (create a wrapper, insert it, move a node into it) can
host annotations.  ``MemoryTree`` is the reference implementation.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from collections.abc import Sequence


class TreeAdapter(Protocol):
    """Protocol for text-bearing trees.

    Nodes are opaque; the engine only compares them by identity.
    """

    def parent(self, node: Any) -> Any | None:
        """Return the parent of *node*, or None at the root."""
        ...

    def children(self, node: Any) -> Sequence[Any]:
        """Return the children of *node* in document order."""
        ...

    def is_text(self, node: Any) -> bool:
        """Return True if *node* is a text-bearing leaf."""
        ...

    def text(self, node: Any) -> str:
        """Return the text held by a leaf (empty for non-leaves)."""
        ...

    def create_wrapper(self) -> Any:
        """Create a detached wrapper node carrying the annotation marker."""
        ...

    def insert_before(self, new: Any, reference: Any) -> None:
        """Insert detached node *new* directly before *reference*."""
        ...

    def reparent_into(self, wrapper: Any, node: Any) -> None:
        """Detach *node* and append it as the last child of *wrapper*."""
        ...

    def split_text(self, node: Any, offset: int) -> Any:
        """Split a leaf at *offset*.

        The leaf keeps ``text[:offset]``; a new leaf holding ``text[offset:]``
        is inserted directly after it and returned.
        """
        ...

    def is_wrapper(self, node: Any) -> bool:
        """Return True if *node* is an annotation wrapper."""
        ...

    def get_annotation(self, wrapper: Any) -> Any | None:
        """Return the annotation bound to *wrapper*, if any."""
        ...

    def set_annotation(self, wrapper: Any, annotation: Any) -> None:
        """Bind *annotation* to *wrapper*, replacing any previous binding."""
        ...

    def set_attribute(self, node: Any, name: str, value: str) -> None:
        """Set a persistent attribute on *node*."""
        ...

    def remove_attribute(self, node: Any, name: str) -> None:
        """Drop *name* from *node* if present."""
        ...

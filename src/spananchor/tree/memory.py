"""In-memory tree model implementing ``TreeAdapter``.

Two node kinds: ``Element`` (tag, attributes, ordered children) and
``Text`` (a leaf holding a string).  Wrappers are ordinary elements whose
``class`` attribute contains the wrapper class name; the bound annotation
lives on the element itself, outside the attribute map.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Sequence

    from spananchor.config import WrapperConfig


class Node:
    """Base class for tree nodes.  Identity is object identity."""

    __slots__ = ("parent",)

    def __init__(self) -> None:
        self.parent: Element | None = None


class Text(Node):
    """A text-bearing leaf."""

    __slots__ = ("data",)

    def __init__(self, data: str = "") -> None:
        super().__init__()
        self.data = data

    def __repr__(self) -> str:
        return f"Text({self.data!r})"


class Element(Node):
    """An element with a tag, attributes and ordered children."""

    __slots__ = ("annotation", "attributes", "children", "tag")

    def __init__(
        self,
        tag: str,
        attributes: dict[str, str] | None = None,
        children: Sequence[Node | str] = (),
    ) -> None:
        super().__init__()
        self.tag = tag
        self.attributes: dict[str, str] = dict(attributes or {})
        self.children: list[Node] = []
        self.annotation: Any | None = None
        for child in children:
            self.append(Text(child) if isinstance(child, str) else child)

    def append(self, child: Node) -> None:
        """Detach *child* from its current parent and append it here."""
        _detach(child)
        child.parent = self
        self.children.append(child)

    def class_list(self) -> list[str]:
        return self.attributes.get("class", "").split()

    def __repr__(self) -> str:
        return f"Element({self.tag!r}, children={len(self.children)})"


def _index_in_parent(node: Node) -> int:
    parent = node.parent
    if parent is None:
        msg = f"{node!r} has no parent"
        raise ValueError(msg)
    for i, sibling in enumerate(parent.children):
        if sibling is node:
            return i
    msg = f"{node!r} not found among its parent's children"
    raise ValueError(msg)


def _detach(node: Node) -> None:
    if node.parent is not None:
        del node.parent.children[_index_in_parent(node)]
        node.parent = None


class MemoryTree:
    """``TreeAdapter`` over ``Element``/``Text`` nodes."""

    def __init__(
        self,
        wrapper_tag: str = "span",
        wrapper_class: str = "annotation",
    ) -> None:
        self.wrapper_tag = wrapper_tag
        self.wrapper_class = wrapper_class

    @classmethod
    def from_config(cls, config: WrapperConfig) -> MemoryTree:
        return cls(wrapper_tag=config.tag, wrapper_class=config.class_name)

    def parent(self, node: Node) -> Element | None:
        return node.parent

    def children(self, node: Node) -> Sequence[Node]:
        if isinstance(node, Element):
            return node.children
        return ()

    def is_text(self, node: Node) -> bool:
        return isinstance(node, Text)

    def text(self, node: Node) -> str:
        if isinstance(node, Text):
            return node.data
        return ""

    def create_wrapper(self) -> Element:
        return Element(self.wrapper_tag, {"class": self.wrapper_class})

    def insert_before(self, new: Node, reference: Node) -> None:
        parent = reference.parent
        if parent is None:
            msg = "Cannot insert before a node without a parent"
            raise ValueError(msg)
        _detach(new)
        parent.children.insert(_index_in_parent(reference), new)
        new.parent = parent

    def reparent_into(self, wrapper: Element, node: Node) -> None:
        wrapper.append(node)

    def split_text(self, node: Text, offset: int) -> Text:
        if not 0 <= offset <= len(node.data):
            msg = f"Split offset {offset} outside text of length {len(node.data)}"
            raise ValueError(msg)
        parent = node.parent
        tail = Text(node.data[offset:])
        node.data = node.data[:offset]
        if parent is not None:
            parent.children.insert(_index_in_parent(node) + 1, tail)
            tail.parent = parent
        return tail

    def is_wrapper(self, node: Node) -> bool:
        return (
            isinstance(node, Element)
            and node.tag == self.wrapper_tag
            and self.wrapper_class in node.class_list()
        )

    def get_annotation(self, wrapper: Element) -> Any | None:
        return wrapper.annotation

    def set_annotation(self, wrapper: Element, annotation: Any) -> None:
        wrapper.annotation = annotation

    def set_attribute(self, node: Element, name: str, value: str) -> None:
        node.attributes[name] = value

    def remove_attribute(self, node: Element, name: str) -> None:
        node.attributes.pop(name, None)

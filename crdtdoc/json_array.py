"""The array element of a document."""

from __future__ import annotations

from typing import Callable

from .element import Container, Element
from .rga_tree_list import RGATreeList, RGATreeListNode
from .ticket import Ticket


class Array(Container):
    """A JSON array whose elements carry logical times."""

    def __init__(self, elements: RGATreeList | None, created_at: Ticket) -> None:
        super().__init__(created_at)
        self._elements = elements if elements is not None else RGATreeList()

    def purge(self, elem: Element) -> None:
        """Physically remove the given child."""
        self._elements.purge(elem)

    def add(self, elem: Element) -> Array:
        """Append the element and return this array."""
        self._elements.add(elem)
        return self

    def get(self, index: int) -> Element:
        """The index-th live element."""
        return self._elements.get(index).elem

    def find_prev_created_at(self, created_at: Ticket) -> Ticket:
        return self._elements.find_prev_created_at(created_at)

    def delete(self, index: int, deleted_at: Ticket) -> Element:
        """Remove the index-th live element and return it."""
        return self._elements.delete(index, deleted_at).elem

    def move_after(
        self, prev_created_at: Ticket, created_at: Ticket, executed_at: Ticket
    ) -> None:
        self._elements.move_after(prev_created_at, created_at, executed_at)

    def elements(self) -> list[Element]:
        """The live elements in order."""
        return [n.elem for n in self._elements.nodes() if not n.is_removed]

    def marshal(self) -> str:
        return self._elements.marshal()

    def annotated_string(self) -> str:
        return self._elements.annotated_string()

    def deep_copy(self) -> Array:
        elements = RGATreeList()
        for node in self._elements.nodes():
            elements.add(node.elem.deep_copy())
        array = Array(elements, self.created_at)
        array.removed_at = self.removed_at
        return array

    def last_created_at(self) -> Ticket:
        return self._elements.last_created_at()

    def insert_after(self, prev_created_at: Ticket, elem: Element) -> None:
        self._elements.insert_after(prev_created_at, elem)

    def delete_by_created_at(self, created_at: Ticket, deleted_at: Ticket) -> Element:
        return self._elements.delete_by_created_at(created_at, deleted_at).elem

    def descendants(self, callback: Callable[[Element, Container], bool]) -> None:
        """Visit every descendant; a true result from the callback stops this level."""
        for node in self._elements.nodes():
            if callback(node.elem, self):
                return
            if isinstance(node.elem, Container):
                node.elem.descendants(callback)

    def rga_nodes(self) -> list[RGATreeListNode]:
        return self._elements.nodes()

    def __len__(self) -> int:
        return len(self._elements)
"""A replicated growable array: a linked list with logical clocks and tombstones."""

from __future__ import annotations

from typing import Iterator

from .element import Element
from .primitive import Primitive
from .ticket import INITIAL_TICKET, Ticket


class RGATreeListNode:
    """A node of an RGATreeList, holding one element."""

    __slots__ = ("elem", "prev", "next")

    def __init__(self, elem: Element) -> None:
        self.elem = elem
        self.prev: RGATreeListNode | None = None
        self.next: RGATreeListNode | None = None

    @property
    def created_at(self) -> Ticket:
        return self.elem.created_at

    @property
    def is_removed(self) -> bool:
        return self.elem.removed_at is not None

    def positioned_at(self) -> Ticket:
        """The time the element took its place: its move time or creation time."""
        if self.elem.moved_at is not None:
            return self.elem.moved_at
        return self.elem.created_at

    def __len__(self) -> int:
        return 0 if self.is_removed else 1

    def __str__(self) -> str:
        return self.elem.marshal()


class RGATreeList:
    """An ordered list of elements that merges concurrent edits by logical time."""

    def __init__(self) -> None:
        dummy = Primitive(0, INITIAL_TICKET)
        dummy.removed_at = INITIAL_TICKET
        self._head = RGATreeListNode(dummy)
        self._last = self._head
        self._size = 0
        self._nodes_by_created_at: dict[str, RGATreeListNode] = {
            self._head.created_at.key(): self._head
        }

    def _iter_nodes(self) -> Iterator[RGATreeListNode]:
        node = self._head.next
        while node is not None:
            yield node
            node = node.next

    def _find(self, created_at: Ticket, label: str) -> RGATreeListNode:
        node = self._nodes_by_created_at.get(created_at.key())
        if node is None:
            raise KeyError(f"fail to find the given {label}: {created_at.key()}")
        return node

    def marshal(self) -> str:
        """The JSON encoding of the live elements."""
        parts = ["["]
        for node in self._iter_nodes():
            if node.is_removed:
                continue
            parts.append(node.elem.marshal())
            if node is not self._last:
                parts.append(",")
        parts.append("]")
        return "".join(parts)

    def add(self, elem: Element) -> None:
        """Append the element after the last node."""
        self._insert_after(self._last.created_at, elem, elem.created_at)

    def nodes(self) -> list[RGATreeListNode]:
        """Every node in order, removed ones included."""
        return list(self._iter_nodes())

    def last_created_at(self) -> Ticket:
        return self._last.created_at

    def insert_after(self, prev_created_at: Ticket, elem: Element) -> None:
        """Insert the element after the element created at the given time."""
        self._insert_after(prev_created_at, elem, elem.created_at)

    def get(self, index: int) -> RGATreeListNode:
        """The node of the index-th live element."""
        if index < 0:
            raise IndexError("index out of range")
        for position, node in enumerate(n for n in self._iter_nodes() if not n.is_removed):
            if position == index:
                return node
        raise IndexError("index out of range")

    def delete_by_created_at(
        self, created_at: Ticket, deleted_at: Ticket
    ) -> RGATreeListNode:
        """Mark the element created at the given time as removed."""
        node = self._find(created_at, "createdAt")
        already_removed = node.is_removed
        if node.elem.remove(deleted_at) and not already_removed:
            self._size -= 1
        return node

    def delete(self, index: int, deleted_at: Ticket) -> RGATreeListNode:
        """Mark the index-th live element as removed."""
        target = self.get(index)
        return self.delete_by_created_at(target.created_at, deleted_at)

    def move_after(
        self, prev_created_at: Ticket, created_at: Ticket, executed_at: Ticket
    ) -> None:
        """Move an element after another, unless a later move already won."""
        prev_node = self._find(prev_created_at, "prevCreatedAt")
        node = self._find(created_at, "createdAt")
        moved_at = node.elem.moved_at
        if moved_at is None or executed_at.after(moved_at):
            self._release(node)
            self._insert_after(prev_node.created_at, node.elem, executed_at)
            node.elem.moved_at = executed_at

    def find_prev_created_at(self, created_at: Ticket) -> Ticket:
        """The creation time of the nearest live element before the given one."""
        node = self._find(created_at, "prevCreatedAt")
        while True:
            node = node.prev
            if node is self._head or not node.is_removed:
                break
        return node.created_at

    def purge(self, elem: Element) -> None:
        """Physically remove the given element."""
        self._release(self._find(elem.created_at, "createdAt"))

    def annotated_string(self) -> str:
        """Every node with its length, for debugging."""
        node: RGATreeListNode | None = self._head
        parts = []
        while node is not None:
            parts.append(f"[{len(node)}]{node}")
            node = node.next
        return "".join(parts)

    def __len__(self) -> int:
        return self._size

    def _find_next_before_executed_at(
        self, created_at: Ticket, executed_at: Ticket
    ) -> RGATreeListNode:
        node = self._find(created_at, "createdAt")
        while node.next is not None and node.next.positioned_at().after(executed_at):
            node = node.next
        return node

    def _release(self, node: RGATreeListNode) -> None:
        if self._last is node:
            self._last = node.prev
        node.prev.next = node.next
        if node.next is not None:
            node.next.prev = node.prev
        node.prev = node.next = None
        self._nodes_by_created_at.pop(node.created_at.key(), None)
        if not node.is_removed:
            self._size -= 1

    def _insert_after(
        self, prev_created_at: Ticket, elem: Element, executed_at: Ticket
    ) -> None:
        prev_node = self._find_next_before_executed_at(prev_created_at, executed_at)
        new_node = RGATreeListNode(elem)
        following = prev_node.next
        prev_node.next = new_node
        new_node.prev = prev_node
        new_node.next = following
        if following is not None:
            following.prev = new_node
        if prev_node is self._last:
            self._last = new_node
        self._nodes_by_created_at[elem.created_at.key()] = new_node
        self._size += 1
"""A replicated hashtable keeping every value of a key in a priority queue."""

from __future__ import annotations

import heapq

from .element import Element
from .ticket import Ticket


class RHTPQMapNode:
    """A key and one of the elements set for it."""

    __slots__ = ("key", "elem")

    def __init__(self, key: str, elem: Element) -> None:
        self.key = key
        self.elem = elem

    def remove(self, removed_at: Ticket) -> bool:
        """Mark the element removed (tombstone)."""
        return self.elem.remove(removed_at)

    @property
    def is_removed(self) -> bool:
        return self.elem.removed_at is not None

    def __lt__(self, other: RHTPQMapNode) -> bool:
        # Later elements rise to the top of the queue.
        return self.elem.created_at.after(other.elem.created_at)


class RHTPriorityQueueMap:
    """A hashtable with a logical clock that exposes the latest value per key."""

    def __init__(self) -> None:
        self._queues: dict[str, list[RHTPQMapNode]] = {}
        self._nodes_by_created_at: dict[str, RHTPQMapNode] = {}

    def _top(self, key: str) -> RHTPQMapNode | None:
        queue = self._queues.get(key)
        return queue[0] if queue else None

    def get(self, key: str) -> Element | None:
        """The live element of the key, or None."""
        node = self._top(key)
        if node is None or node.is_removed:
            return None
        return node.elem

    def has(self, key: str) -> bool:
        node = self._top(key)
        return node is not None and not node.is_removed

    def set(self, key: str, elem: Element) -> Element | None:
        """Set the element; return the element it removed, if any."""
        removed = None
        node = self._top(key)
        if node is not None and not node.is_removed and node.remove(elem.created_at):
            removed = node.elem
        self.set_internal(key, elem)
        return removed

    def set_internal(self, key: str, elem: Element) -> None:
        """Add the element under the key without removing anything."""
        node = RHTPQMapNode(key, elem)
        heapq.heappush(self._queues.setdefault(key, []), node)
        self._nodes_by_created_at[elem.created_at.key()] = node

    def delete(self, key: str, deleted_at: Ticket) -> Element | None:
        """Remove the top element of the key; return it if removed."""
        node = self._top(key)
        if node is None or not node.remove(deleted_at):
            return None
        return node.elem

    def delete_by_created_at(
        self, created_at: Ticket, deleted_at: Ticket
    ) -> Element | None:
        """Remove the element created at the given time; return it if removed."""
        node = self._nodes_by_created_at.get(created_at.key())
        if node is None or not node.remove(deleted_at):
            return None
        return node.elem

    def elements(self) -> dict[str, Element]:
        """The live element of every key."""
        members = {}
        for queue in self._queues.values():
            if queue and not queue[0].is_removed:
                members[queue[0].key] = queue[0].elem
        return members

    def nodes(self) -> list[RHTPQMapNode]:
        """Every node, removed ones included."""
        return [node for queue in self._queues.values() for node in queue]

    def purge(self, elem: Element) -> None:
        """Physically remove the given element."""
        created_key = elem.created_at.key()
        node = self._nodes_by_created_at.get(created_key)
        if node is None:
            raise KeyError(f"fail to find: {created_key}")
        queue = self._queues.get(node.key)
        if queue is None:
            raise KeyError(f"fail to find queue: {node.key}")
        for index, candidate in enumerate(queue):
            if candidate is node:
                del queue[index]
                break
        heapq.heapify(queue)
        del self._nodes_by_created_at[created_key]

    def marshal(self) -> str:
        members = self.elements()
        body = ",".join(
            f'"{key}":{members[key].marshal()}' for key in sorted(members)
        )
        return "{" + body + "}"
"""A replicated hashtable of string keys and string values."""

from __future__ import annotations

from .ticket import Ticket


class RHTNode:
    """A key, its value and the logical times of its update and removal."""

    __slots__ = ("key", "value", "updated_at", "removed_at")

    def __init__(self, key: str, value: str, updated_at: Ticket) -> None:
        self.key = key
        self.value = value
        self.updated_at = updated_at
        self.removed_at: Ticket | None = None

    @property
    def is_removed(self) -> bool:
        return self.removed_at is not None

    def remove(self, removed_at: Ticket) -> None:
        """Mark this node removed (tombstone) unless a later removal exists."""
        if self.removed_at is None or removed_at.after(self.removed_at):
            self.removed_at = removed_at


class RHT:
    """A hashtable whose entries are ordered by a logical clock."""

    def __init__(self) -> None:
        self._nodes_by_key: dict[str, RHTNode] = {}
        self._nodes_by_created_at: dict[str, RHTNode] = {}

    def get(self, key: str) -> str:
        """The live value of the key, or an empty string."""
        node = self._nodes_by_key.get(key)
        if node is None or node.is_removed:
            return ""
        return node.value

    def has(self, key: str) -> bool:
        """Whether the key holds a live value."""
        node = self._nodes_by_key.get(key)
        return node is not None and not node.is_removed

    def set(self, key: str, value: str, executed_at: Ticket) -> None:
        """Set the value unless the key was updated later."""
        node = self._nodes_by_key.get(key)
        if node is None or executed_at.after(node.updated_at):
            new_node = RHTNode(key, value, executed_at)
            self._nodes_by_key[key] = new_node
            self._nodes_by_created_at[executed_at.key()] = new_node

    def remove(self, key: str, executed_at: Ticket) -> str:
        """Remove the value of the key; return it, or an empty string."""
        node = self._nodes_by_key.get(key)
        if node is not None and (
            node.removed_at is None or executed_at.after(node.removed_at)
        ):
            node.remove(executed_at)
            return node.value
        return ""

    def elements(self) -> dict[str, str]:
        """The live values by key."""
        return {
            node.key: node.value
            for node in self._nodes_by_key.values()
            if not node.is_removed
        }

    def nodes(self) -> list[RHTNode]:
        """Every node, removed ones included."""
        return list(self._nodes_by_key.values())

    def deep_copy(self) -> RHT:
        """A copy holding every key with its value and update time."""
        instance = RHT()
        for node in self.nodes():
            instance.set(node.key, node.value, node.updated_at)
        return instance

    def marshal(self) -> str:
        """The JSON encoding of the live values, keys sorted."""
        members = self.elements()
        body = ",".join(f'"{key}":"{members[key]}"' for key in sorted(members))
        return "{" + body + "}"
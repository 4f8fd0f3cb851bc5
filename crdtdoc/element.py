"""Base classes for the elements of a JSON-like document."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable

from .ticket import Ticket


class Element(ABC):
    """A document element stamped with creation, move and removal times."""

    def __init__(self, created_at: Ticket) -> None:
        self.created_at = created_at
        self.moved_at: Ticket | None = None
        self.removed_at: Ticket | None = None

    @property
    def is_removed(self) -> bool:
        return self.removed_at is not None

    @abstractmethod
    def marshal(self) -> str:
        """The JSON encoding of this element."""

    @abstractmethod
    def deep_copy(self) -> Element:
        """A deep copy of this element."""

    def remove(self, removed_at: Ticket | None) -> bool:
        """Mark this element removed if the ticket is late enough."""
        if (
            removed_at is not None
            and removed_at.after(self.created_at)
            and (self.removed_at is None or removed_at.after(self.removed_at))
        ):
            self.removed_at = removed_at
            return True
        return False


class Container(Element):
    """An element holding other elements: an array or an object."""

    @abstractmethod
    def purge(self, child: Element) -> None:
        """Physically remove the given child."""

    @abstractmethod
    def descendants(
        self, callback: Callable[[Element, Container], bool]
    ) -> None:
        """Visit every descendant; a true result from the callback stops."""

    @abstractmethod
    def delete_by_created_at(
        self, created_at: Ticket, deleted_at: Ticket
    ) -> Element | None:
        """Remove the child created at the given time."""


class TextElement(Element):
    """A text element whose removed nodes can be collected."""

    @abstractmethod
    def removed_nodes_len(self) -> int:
        """Number of removed nodes awaiting collection."""

    @abstractmethod
    def purge_text_nodes_with_garbage(self, ticket: Ticket) -> int:
        """Purge nodes removed at or before the ticket; return the count."""
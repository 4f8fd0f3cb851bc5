"""Logical clock timestamps."""

from __future__ import annotations

import functools
from dataclasses import dataclass

from .actor_id import INITIAL_ACTOR_ID, MAX_ACTOR_ID, ActorID

MAX_LAMPORT = 2**64 - 1
MAX_DELIMITER = 2**32 - 1


@functools.total_ordering
@dataclass(frozen=True)
class Ticket:
    """An immutable timestamp of the logical clock."""

    lamport: int
    delimiter: int
    actor_id: ActorID | None

    def __post_init__(self) -> None:
        if not 0 <= self.lamport <= MAX_LAMPORT:
            raise ValueError(f"lamport out of range: {self.lamport}")
        if not 0 <= self.delimiter <= MAX_DELIMITER:
            raise ValueError(f"delimiter out of range: {self.delimiter}")

    def annotated_string(self) -> str:
        """Short description for debugging."""
        if self.actor_id is None:
            return f"{self.lamport}:{self.delimiter}:nil"
        return f"{self.lamport}:{self.delimiter}:{str(self.actor_id)[22:24]}"

    def key(self) -> str:
        """The string that identifies this ticket in maps."""
        return f"{self.lamport}:{self.delimiter}:{self.actor_id_hex()}"

    def actor_id_hex(self) -> str:
        return "" if self.actor_id is None else str(self.actor_id)

    def actor_id_bytes(self) -> bytes | None:
        return None if self.actor_id is None else bytes(self.actor_id)

    def after(self, other: Ticket) -> bool:
        """Whether this ticket was issued later than the other."""
        return self.compare(other) > 0

    def compare(self, other: Ticket) -> int:
        """Compare by lamport, then actor, then delimiter: -1, 0 or 1."""
        if self.lamport != other.lamport:
            return 1 if self.lamport > other.lamport else -1
        if self.actor_id is None:
            raise ValueError("actorID cannot be null")
        result = self.actor_id.compare(other.actor_id)
        if result != 0:
            return result
        if self.delimiter != other.delimiter:
            return 1 if self.delimiter > other.delimiter else -1
        return 0

    def with_actor_id(self, actor_id: ActorID | None) -> Ticket:
        """A copy of this ticket carrying the given actor."""
        return Ticket(self.lamport, self.delimiter, actor_id)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Ticket):
            return NotImplemented
        return self.compare(other) < 0


INITIAL_TICKET = Ticket(0, 0, INITIAL_ACTOR_ID)
MAX_TICKET = Ticket(MAX_LAMPORT, MAX_DELIMITER, MAX_ACTOR_ID)
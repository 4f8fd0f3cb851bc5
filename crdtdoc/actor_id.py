"""Actor identifiers: twelve bytes that name the author of a change."""

from __future__ import annotations

import re
from dataclasses import dataclass

ACTOR_ID_SIZE = 12

_HEX_PATTERN = re.compile(r"(?:[0-9a-fA-F]{2})*")


class InvalidHexStringError(ValueError):
    """Raised when a hex string or byte sequence is not a valid actor id."""


@dataclass(frozen=True)
class ActorID:
    """An immutable twelve-byte identifier, shown as lower-case hex."""

    value: bytes = bytes(ACTOR_ID_SIZE)

    def __post_init__(self) -> None:
        data = bytes(self.value)
        if len(data) != ACTOR_ID_SIZE:
            raise InvalidHexStringError(
                f"bytes length {len(data)}: invalid hex string"
            )
        object.__setattr__(self, "value", data)

    def __str__(self) -> str:
        return self.value.hex()

    def __bytes__(self) -> bytes:
        return self.value

    def compare(self, other: ActorID | None) -> int:
        """Compare lexicographically: -1, 0 or 1."""
        if other is None:
            raise ValueError("actorID cannot be null")
        return (self.value > other.value) - (self.value < other.value)


INITIAL_ACTOR_ID = ActorID(bytes(ACTOR_ID_SIZE))
MAX_ACTOR_ID = ActorID(b"\xff" * ACTOR_ID_SIZE)


def actor_id_from_hex(value: str) -> ActorID | None:
    """Parse a hex string; an empty string gives None."""
    if value == "":
        return None
    if not _HEX_PATTERN.fullmatch(value):
        raise InvalidHexStringError(f"{value}: invalid hex string")
    decoded = bytes.fromhex(value)
    if len(decoded) != ACTOR_ID_SIZE:
        raise InvalidHexStringError(
            f"decoded length {len(decoded)}: invalid hex string"
        )
    return ActorID(decoded)


def actor_id_from_bytes(data: bytes) -> ActorID | None:
    """Build an actor id from raw bytes; empty input gives None."""
    if len(data) == 0:
        return None
    if len(data) != ACTOR_ID_SIZE:
        raise InvalidHexStringError(f"bytes length {len(data)}: invalid hex string")
    return ActorID(bytes(data))
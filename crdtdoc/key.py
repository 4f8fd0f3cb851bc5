"""Document keys made of a collection name and a document name."""

from __future__ import annotations

from dataclasses import dataclass

BSON_SPLITTER = "$"
_TOKEN_LEN = 2


class InvalidBSONKeyError(ValueError):
    """Raised when a BSON key string cannot be parsed."""


@dataclass(frozen=True)
class Key:
    """The key of a document: its collection and its own name."""

    collection: str
    document: str

    def bson_key(self) -> str:
        """The string form of this key."""
        return self.collection + BSON_SPLITTER + self.document


def from_bson_key(bson_key: str) -> Key:
    """Parse a key of the form ``collection$document``."""
    splits = bson_key.split(BSON_SPLITTER)
    if len(splits) != _TOKEN_LEN:
        raise InvalidBSONKeyError(f"{bson_key}: invalid bson key")
    return Key(collection=splits[0], document=splits[1])
"""Primitive values: null, booleans, numbers, strings, bytes and dates."""

from __future__ import annotations

import copy
import enum
import struct
from datetime import datetime, timedelta, timezone
from typing import Any

from .element import Element
from .ticket import Ticket

_INT32_MIN, _INT32_MAX = -(2**31), 2**31 - 1
_INT64_MIN, _INT64_MAX = -(2**63), 2**63 - 1
_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


class ValueType(enum.IntEnum):
    """The type of a primitive value."""

    NULL = 0
    BOOLEAN = 1
    INTEGER = 2
    LONG = 3
    DOUBLE = 4
    STRING = 5
    BYTES = 6
    DATE = 7


def _infer_type(value: Any) -> ValueType:
    if value is None:
        return ValueType.NULL
    if isinstance(value, bool):
        return ValueType.BOOLEAN
    if isinstance(value, int):
        if not _INT64_MIN <= value <= _INT64_MAX:
            raise OverflowError(f"integer out of 64-bit range: {value}")
        if _INT32_MIN <= value <= _INT32_MAX:
            return ValueType.INTEGER
        return ValueType.LONG
    if isinstance(value, float):
        return ValueType.DOUBLE
    if isinstance(value, str):
        return ValueType.STRING
    if isinstance(value, (bytes, bytearray, memoryview)):
        return ValueType.BYTES
    if isinstance(value, datetime):
        return ValueType.DATE
    raise TypeError("unsupported type")


def _coerce(value: Any, value_type: ValueType | None) -> tuple[ValueType, Any]:
    inferred = _infer_type(value)
    if value_type is None:
        value_type = inferred
    elif value_type is ValueType.LONG and inferred in (
        ValueType.INTEGER,
        ValueType.LONG,
    ):
        pass
    elif value_type is ValueType.DOUBLE and inferred in (
        ValueType.INTEGER,
        ValueType.LONG,
        ValueType.DOUBLE,
    ):
        value = float(value)
    elif value_type is not inferred:
        raise TypeError(
            f"{type(value).__name__} cannot be stored as {value_type.name}"
        )
    if value_type is ValueType.BYTES:
        value = bytes(value)
    return value_type, value


def _as_aware(moment: datetime) -> datetime:
    return moment if moment.tzinfo is not None else moment.replace(tzinfo=timezone.utc)


def _unix_seconds(moment: datetime) -> int:
    return (_as_aware(moment) - _EPOCH) // timedelta(seconds=1)


def _rfc3339(moment: datetime) -> str:
    moment = _as_aware(moment)
    base = (
        f"{moment.year:04d}-{moment.month:02d}-{moment.day:02d}"
        f"T{moment.hour:02d}:{moment.minute:02d}:{moment.second:02d}"
    )
    offset = moment.utcoffset()
    if not offset:
        return base + "Z"
    minutes = int(offset.total_seconds()) // 60
    sign = "+" if minutes >= 0 else "-"
    hours, mins = divmod(abs(minutes), 60)
    return f"{base}{sign}{hours:02d}:{mins:02d}"


def value_from_bytes(value_type: ValueType, value: bytes) -> Any:
    """Decode a primitive value from its byte form."""
    try:
        if value_type is ValueType.NULL:
            return None
        if value_type is ValueType.BOOLEAN:
            return value[0] == 1
        if value_type is ValueType.INTEGER:
            return struct.unpack_from("<i", value)[0]
        if value_type is ValueType.LONG:
            return struct.unpack_from("<q", value)[0]
        if value_type is ValueType.DOUBLE:
            return struct.unpack_from("<d", value)[0]
        if value_type is ValueType.STRING:
            return bytes(value).decode("utf-8")
        if value_type is ValueType.BYTES:
            return bytes(value)
        if value_type is ValueType.DATE:
            seconds = struct.unpack_from("<q", value)[0]
            return _EPOCH + timedelta(seconds=seconds)
    except (struct.error, IndexError) as exc:
        raise ValueError(f"malformed {value_type.name} bytes") from exc
    raise ValueError("unsupported type")


class Primitive(Element):
    """A primitive JSON value stamped with logical times."""

    def __init__(
        self,
        value: Any,
        created_at: Ticket,
        value_type: ValueType | None = None,
    ) -> None:
        super().__init__(created_at)
        self.value_type, self.value = _coerce(value, value_type)

    def to_bytes(self) -> bytes:
        """Encode the value as bytes."""
        vt = self.value_type
        if vt is ValueType.NULL:
            return b""
        if vt is ValueType.BOOLEAN:
            return b"\x01" if self.value else b"\x00"
        if vt is ValueType.INTEGER:
            return struct.pack("<i", self.value)
        if vt is ValueType.LONG:
            return struct.pack("<q", self.value)
        if vt is ValueType.DOUBLE:
            return struct.pack("<d", self.value)
        if vt is ValueType.STRING:
            return self.value.encode("utf-8")
        if vt is ValueType.BYTES:
            return self.value
        if vt is ValueType.DATE:
            return struct.pack("<q", _unix_seconds(self.value))
        raise ValueError("unsupported type")

    def marshal(self) -> str:
        vt = self.value_type
        if vt is ValueType.NULL:
            return "null"
        if vt is ValueType.BOOLEAN:
            return "true" if self.value else "false"
        if vt in (ValueType.INTEGER, ValueType.LONG):
            return str(self.value)
        if vt is ValueType.DOUBLE:
            return f"{self.value:f}"
        if vt is ValueType.STRING:
            return f'"{self.value}"'
        if vt is ValueType.BYTES:
            return '"' + self.value.decode("utf-8", errors="replace") + '"'
        if vt is ValueType.DATE:
            return _rfc3339(self.value)
        raise ValueError("unsupported type")

    def deep_copy(self) -> Primitive:
        return copy.copy(self)

    def is_numeric_type(self) -> bool:
        return self.value_type in (
            ValueType.INTEGER,
            ValueType.LONG,
            ValueType.DOUBLE,
        )
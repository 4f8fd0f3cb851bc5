"""Counters: numeric elements that can be increased."""

from __future__ import annotations

import copy
import enum
import struct
from typing import Any

from .element import Element
from .primitive import Primitive, ValueType
from .ticket import Ticket

_INT32_MIN, _INT32_MAX = -(2**31), 2**31 - 1
_INT64_MIN, _INT64_MAX = -(2**63), 2**63 - 1


class CounterType(enum.IntEnum):
    """The numeric type held by a counter."""

    INTEGER = 0
    LONG = 1
    DOUBLE = 2


def _wrap64(value: int) -> int:
    return ((value + 2**63) % 2**64) - 2**63


def counter_value_from_bytes(counter_type: CounterType, value: bytes) -> Any:
    """Decode a counter value from its byte form."""
    try:
        if counter_type is CounterType.INTEGER:
            return struct.unpack_from("<i", value)[0]
        if counter_type is CounterType.LONG:
            return struct.unpack_from("<q", value)[0]
        if counter_type is CounterType.DOUBLE:
            return struct.unpack_from("<d", value)[0]
    except struct.error as exc:
        raise ValueError(f"malformed {counter_type.name} bytes") from exc
    raise ValueError("unsupported type")


def _infer(value: Any, counter_type: CounterType | None) -> tuple[CounterType, Any]:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError("unsupported type")
    if isinstance(value, int):
        if not _INT64_MIN <= value <= _INT64_MAX:
            raise OverflowError(f"integer out of 64-bit range: {value}")
        inferred = (
            CounterType.INTEGER
            if _INT32_MIN <= value <= _INT32_MAX
            else CounterType.LONG
        )
    else:
        inferred = CounterType.DOUBLE

    if counter_type is None or counter_type is inferred:
        return inferred, value
    if counter_type is CounterType.LONG and inferred is CounterType.INTEGER:
        return CounterType.LONG, value
    if counter_type is CounterType.DOUBLE:
        return CounterType.DOUBLE, float(value)
    raise TypeError(
        f"{type(value).__name__} cannot be stored as {counter_type.name}"
    )


class Counter(Element):
    """A numeric element that changes by increments."""

    def __init__(
        self,
        value: Any,
        created_at: Ticket,
        counter_type: CounterType | None = None,
    ) -> None:
        super().__init__(created_at)
        self.value_type, self.value = _infer(value, counter_type)

    def to_bytes(self) -> bytes:
        """Encode the value as little-endian bytes."""
        if self.value_type is CounterType.INTEGER:
            return struct.pack("<i", self.value)
        if self.value_type is CounterType.LONG:
            return struct.pack("<q", self.value)
        if self.value_type is CounterType.DOUBLE:
            return struct.pack("<d", self.value)
        raise ValueError("unsupported type")

    def marshal(self) -> str:
        if self.value_type in (CounterType.INTEGER, CounterType.LONG):
            return str(self.value)
        if self.value_type is CounterType.DOUBLE:
            return f"{self.value:f}"
        raise ValueError("unsupported type")

    def deep_copy(self) -> Counter:
        return copy.copy(self)

    def is_numeric_type(self) -> bool:
        return self.value_type in (
            CounterType.INTEGER,
            CounterType.LONG,
            CounterType.DOUBLE,
        )

    def increase(self, operand: Primitive) -> Counter:
        """Add the operand; an integer counter widens to long on overflow."""
        if not self.is_numeric_type() or not operand.is_numeric_type():
            raise TypeError("unsupported type")

        amount = operand.value
        is_double = operand.value_type is ValueType.DOUBLE
        if self.value_type is CounterType.DOUBLE:
            self.value = self.value + float(amount)
            return self

        delta = int(amount) if is_double else amount
        self.value = _wrap64(self.value + delta)
        if self.value_type is CounterType.INTEGER and not (
            _INT32_MIN <= self.value <= _INT32_MAX
        ):
            self.value_type = CounterType.LONG
        return self
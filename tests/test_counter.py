from datetime import datetime

import pytest

from crdtdoc.counter import Counter, CounterType, counter_value_from_bytes
from crdtdoc.primitive import Primitive, ValueType
from crdtdoc.ticket import INITIAL_TICKET

MAX_INT32 = 2**31 - 1


def test_new_counter_types():
    assert Counter(MAX_INT32, INITIAL_TICKET).value_type is CounterType.INTEGER
    assert Counter(MAX_INT32 + 1, INITIAL_TICKET).value_type is CounterType.LONG
    assert Counter(0.5, INITIAL_TICKET).value_type is CounterType.DOUBLE


def _operands():
    return (
        Primitive(5, INITIAL_TICKET),
        Primitive(10, INITIAL_TICKET, ValueType.LONG),
        Primitive(3.14, INITIAL_TICKET),
    )


def test_increase():
    integer = Counter(5, INITIAL_TICKET)
    long = Counter(10, INITIAL_TICKET, CounterType.LONG)
    double = Counter(3.14, INITIAL_TICKET)

    for counter in (integer, long, double):
        for operand in _operands():
            counter.increase(operand)

    assert integer.marshal() == "23"
    assert long.marshal() == "28"
    assert double.marshal() == "21.280000"


@pytest.mark.parametrize("value", ["str", True, b"\x02", datetime.now()])
def test_unsupported_values(value):
    with pytest.raises(TypeError, match="unsupported type"):
        Counter(value, INITIAL_TICKET)


def test_unsupported_operand():
    counter = Counter(1, INITIAL_TICKET)
    with pytest.raises(TypeError, match="unsupported type"):
        counter.increase(Primitive("x", INITIAL_TICKET))
    assert counter.marshal() == "1"


def test_integer_becomes_long_on_overflow():
    counter = Counter(MAX_INT32, INITIAL_TICKET)
    assert counter.value_type is CounterType.INTEGER
    counter.increase(Primitive(1, INITIAL_TICKET))
    assert counter.value_type is CounterType.LONG
    assert counter.value == MAX_INT32 + 1


@pytest.mark.parametrize(
    "value,counter_type",
    [(5, None), (MAX_INT32 + 1, None), (10, CounterType.LONG), (3.14, None)],
)
def test_bytes_round_trip(value, counter_type):
    counter = Counter(value, INITIAL_TICKET, counter_type)
    decoded = counter_value_from_bytes(counter.value_type, counter.to_bytes())
    assert decoded == counter.value


def test_deep_copy_is_independent():
    counter = Counter(5, INITIAL_TICKET)
    copied = counter.deep_copy()
    counter.increase(Primitive(5, INITIAL_TICKET))
    assert copied.value == 5
    assert copied.created_at == counter.created_at
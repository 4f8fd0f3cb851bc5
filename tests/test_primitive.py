from datetime import datetime, timedelta, timezone

import pytest

from crdtdoc.primitive import Primitive, ValueType, value_from_bytes
from crdtdoc.ticket import INITIAL_TICKET, Ticket

_EPOCH = datetime.fromtimestamp(0, timezone.utc)

CASES = [
    (None, None, ValueType.NULL, "null"),
    (False, None, ValueType.BOOLEAN, "false"),
    (True, None, ValueType.BOOLEAN, "true"),
    (0, None, ValueType.INTEGER, "0"),
    (0, ValueType.LONG, ValueType.LONG, "0"),
    (float(0), None, ValueType.DOUBLE, "0.000000"),
    ("0", None, ValueType.STRING, '"0"'),
    (b"", None, ValueType.BYTES, '""'),
    (_EPOCH, None, ValueType.DATE, "1970-01-01T00:00:00Z"),
]


@pytest.mark.parametrize("value,explicit,value_type,marshal", CASES)
def test_creation_and_deep_copy(value, explicit, value_type, marshal):
    prim = Primitive(value, INITIAL_TICKET, explicit)
    assert prim.value_type == value_type
    assert prim.value == value_from_bytes(prim.value_type, prim.to_bytes())
    assert prim.marshal() == marshal

    copied = prim.deep_copy()
    assert copied.created_at == prim.created_at
    assert copied.moved_at == prim.moved_at
    assert copied.marshal() == prim.marshal()

    prim.moved_at = Ticket(0, 0, None)
    assert prim.moved_at == Ticket(0, 0, None)
    assert copied.moved_at is None


def test_int_beyond_int32_is_long():
    long_prim = Primitive(2**31 - 1 + 1, INITIAL_TICKET)
    assert long_prim.value_type == ValueType.LONG
    assert value_from_bytes(ValueType.LONG, long_prim.to_bytes()) == 2**31


def test_integer_bytes_are_little_endian():
    assert Primitive(1, INITIAL_TICKET).to_bytes() == b"\x01\x00\x00\x00"
    assert Primitive(True, INITIAL_TICKET).to_bytes() == b"\x01"


def test_negative_numbers_round_trip():
    for value in (-1, -(2**31), -(2**40)):
        prim = Primitive(value, INITIAL_TICKET)
        assert value_from_bytes(prim.value_type, prim.to_bytes()) == value


def test_double_round_trip():
    prim = Primitive(3.14, INITIAL_TICKET)
    assert value_from_bytes(ValueType.DOUBLE, prim.to_bytes()) == 3.14
    assert prim.marshal() == "3.140000"


def test_explicit_double_from_int():
    prim = Primitive(5, INITIAL_TICKET, ValueType.DOUBLE)
    assert prim.value == 5.0
    assert prim.marshal() == "5.000000"


def test_string_round_trip():
    prim = Primitive("한글", INITIAL_TICKET)
    assert value_from_bytes(ValueType.STRING, prim.to_bytes()) == "한글"


def test_date_with_offset_marshal_and_round_trip():
    tz = timezone(timedelta(hours=9))
    moment = datetime(2021, 1, 2, 3, 4, 5, tzinfo=tz)
    prim = Primitive(moment, INITIAL_TICKET)
    assert prim.marshal() == "2021-01-02T03:04:05+09:00"
    assert value_from_bytes(ValueType.DATE, prim.to_bytes()) == moment


def test_numeric_type_check():
    assert Primitive(1, INITIAL_TICKET).is_numeric_type()
    assert Primitive(1.5, INITIAL_TICKET).is_numeric_type()
    assert not Primitive("1", INITIAL_TICKET).is_numeric_type()
    assert not Primitive(None, INITIAL_TICKET).is_numeric_type()


@pytest.mark.parametrize("value", [object(), [1], {"a": 1}])
def test_unsupported_type_raises(value):
    with pytest.raises(TypeError):
        Primitive(value, INITIAL_TICKET)


def test_mismatched_explicit_type_raises():
    with pytest.raises(TypeError):
        Primitive("x", INITIAL_TICKET, ValueType.INTEGER)
    with pytest.raises(TypeError):
        Primitive(2**40, INITIAL_TICKET, ValueType.INTEGER)


def test_integer_beyond_int64_raises():
    with pytest.raises(OverflowError):
        Primitive(2**63, INITIAL_TICKET)


def test_malformed_bytes_raise():
    with pytest.raises(ValueError):
        value_from_bytes(ValueType.LONG, b"\x00")
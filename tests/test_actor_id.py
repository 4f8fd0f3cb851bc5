import os

import pytest

from crdtdoc.actor_id import (
    ActorID,
    InvalidHexStringError,
    INITIAL_ACTOR_ID,
    MAX_ACTOR_ID,
    actor_id_from_bytes,
    actor_id_from_hex,
)


def test_from_hex_round_trip():
    actor_id = ActorID(os.urandom(12))
    expected = str(actor_id)
    actual = actor_id_from_hex(expected)
    assert str(actual) == expected
    assert actual == actor_id


def test_from_hex_invalid_hexadecimal_string():
    with pytest.raises(InvalidHexStringError):
        actor_id_from_hex("testID")


def test_from_hex_invalid_decoded_length():
    invalid_id = os.urandom(5).hex()
    with pytest.raises(InvalidHexStringError):
        actor_id_from_hex(invalid_id)


def test_from_hex_odd_length_is_invalid():
    with pytest.raises(InvalidHexStringError):
        actor_id_from_hex("0")


def test_from_hex_empty_is_none():
    assert actor_id_from_hex("") is None


def test_from_bytes_round_trip():
    actor_id = ActorID(os.urandom(12))
    expected = bytes(actor_id)
    actual = actor_id_from_bytes(expected)
    assert bytes(actual) == expected


def test_from_bytes_invalid_length():
    with pytest.raises(InvalidHexStringError):
        actor_id_from_bytes(bytes(5))


def test_from_bytes_empty_is_none():
    assert actor_id_from_bytes(b"") is None


def test_compare_ordering():
    assert INITIAL_ACTOR_ID.compare(MAX_ACTOR_ID) == -1
    assert MAX_ACTOR_ID.compare(INITIAL_ACTOR_ID) == 1
    assert MAX_ACTOR_ID.compare(MAX_ACTOR_ID) == 0


def test_compare_with_none_raises():
    with pytest.raises(ValueError):
        INITIAL_ACTOR_ID.compare(None)


def test_wrong_size_construction_raises():
    with pytest.raises(InvalidHexStringError):
        ActorID(bytes(3))
"""Tests for the wire-format field conversions."""

from datetime import datetime, timedelta, timezone

import pytest

from pdum.gapi.base import (
    deserialize_bytes,
    deserialize_datetime,
    deserialize_duration,
    deserialize_int64,
    serialize_bytes,
    serialize_datetime,
    serialize_duration,
    serialize_int64,
)


def test_int64_survives_beyond_double_precision():
    big = 2**63 - 1
    assert serialize_int64(big) == "9223372036854775807"
    assert deserialize_int64("9223372036854775807") == big


def test_deserialize_int64_accepts_numbers():
    assert deserialize_int64(5) == 5


def test_serialize_datetime_utc():
    value = datetime(2024, 5, 6, 7, 8, 9, tzinfo=timezone.utc)
    assert serialize_datetime(value) == "2024-05-06T07:08:09Z"


def test_serialize_datetime_keeps_microseconds():
    value = datetime(2024, 5, 6, 7, 8, 9, 120000, tzinfo=timezone.utc)
    assert serialize_datetime(value) == "2024-05-06T07:08:09.120000Z"


def test_serialize_datetime_naive_is_utc():
    assert serialize_datetime(datetime(2024, 1, 1)) == "2024-01-01T00:00:00Z"


def test_serialize_datetime_converts_offsets_to_utc():
    value = datetime(2024, 1, 1, 1, 0, tzinfo=timezone(timedelta(hours=1)))
    assert serialize_datetime(value) == "2024-01-01T00:00:00Z"


def test_deserialize_datetime_truncates_nanoseconds():
    parsed = deserialize_datetime("2024-05-06T07:08:09.123456789Z")
    assert parsed == datetime(2024, 5, 6, 7, 8, 9, 123456, tzinfo=timezone.utc)
    assert parsed.tzinfo is not None


def test_deserialize_datetime_without_fraction():
    assert deserialize_datetime("2024-05-06T07:08:09Z") == datetime(2024, 5, 6, 7, 8, 9, tzinfo=timezone.utc)


def test_deserialize_datetime_with_offset_and_short_fraction():
    parsed = deserialize_datetime("2024-05-06T07:08:09.5+02:00")
    assert parsed == datetime(2024, 5, 6, 5, 8, 9, 500000, tzinfo=timezone.utc)


def test_bytes_base64():
    assert serialize_bytes(b"hi") == "aGk="
    assert deserialize_bytes("aGk=") == b"hi"


def test_deserialize_bytes_accepts_unpadded_urlsafe():
    assert deserialize_bytes("aGk") == b"hi"
    assert deserialize_bytes("-_8") == b"\xfb\xff"


def test_serialize_duration():
    assert serialize_duration(timedelta(seconds=90)) == "90s"
    assert serialize_duration(timedelta(seconds=3.5)) == "3.5s"
    assert serialize_duration(timedelta(seconds=-1.5)) == "-1.5s"
    assert serialize_duration(timedelta(microseconds=1)) == "0.000001s"


def test_deserialize_duration():
    assert deserialize_duration("3.5s") == timedelta(seconds=3.5)
    assert deserialize_duration("-1.5s") == timedelta(seconds=-1.5)
    assert deserialize_duration("0.000000001s") == timedelta(0)
    assert deserialize_duration(2) == timedelta(seconds=2)


@pytest.mark.parametrize("value", [0, 1, -1, 2**53 + 1, -(2**63), 2**63 - 1, 2**64 - 1])
def test_int64_round_trip(value):
    assert deserialize_int64(serialize_int64(value)) == value


@pytest.mark.parametrize(
    "value",
    [
        datetime(2024, 1, 1, tzinfo=timezone.utc),
        datetime(2024, 2, 29, 23, 59, 59, 999999, tzinfo=timezone.utc),
        datetime(2024, 6, 30, 22, 15, 0, 500000, tzinfo=timezone(timedelta(hours=5, minutes=30))),
        datetime(1999, 12, 31, 18, 0, tzinfo=timezone(timedelta(hours=-8))),
    ],
)
def test_datetime_round_trip_preserves_instant(value):
    parsed = deserialize_datetime(serialize_datetime(value))
    assert parsed == value
    assert parsed.utcoffset() == timedelta(0)


@pytest.mark.parametrize("value", [b"", b"a", b"hi", b"\x00\xff\xfe", bytes(range(256))])
def test_bytes_round_trip(value):
    assert deserialize_bytes(serialize_bytes(value)) == value


@pytest.mark.parametrize(
    "value",
    [timedelta(0), timedelta(seconds=90), timedelta(seconds=3.5), timedelta(microseconds=1), timedelta(seconds=-1.5)],
)
def test_duration_round_trip(value):
    assert deserialize_duration(serialize_duration(value)) == value

"""Field conversions between Google's JSON wire format and Python values.

JSON cannot carry 64-bit integers, timestamps, raw bytes or durations
natively, so Google APIs send them as strings:

* ``int64``/``uint64``: decimal strings (``"1234"``)
* ``date-time``/``google-datetime``: RFC 3339 timestamps
* ``byte``: base64
* ``google-duration``: seconds with an ``s`` suffix (``"3.5s"``)

Generated modules call these helpers from their ``serialize_*`` and
``deserialize_*`` functions.
"""

from __future__ import annotations

import base64
import re
from datetime import datetime, timedelta, timezone
from decimal import Decimal
from typing import Union

_FRACTION = re.compile(r"\.(\d+)")
_ONE_MICROSECOND = timedelta(microseconds=1)


def serialize_int64(value: int) -> str:
    return str(int(value))


def deserialize_int64(value: Union[str, int]) -> int:
    return int(value)


def serialize_datetime(value: datetime) -> str:
    """Render ``value`` as an RFC 3339 UTC timestamp.

    Naive datetimes are taken to be in UTC.
    """
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc).isoformat().replace("+00:00", "Z")


def deserialize_datetime(value: str) -> datetime:
    """Parse an RFC 3339 timestamp into an aware datetime.

    Fractions finer than a microsecond (Google sends up to nanoseconds) are
    truncated.
    """
    text = value.strip()
    if text[-1:] in ("Z", "z"):
        text = text[:-1] + "+00:00"
    text = _FRACTION.sub(lambda m: "." + m.group(1)[:6].ljust(6, "0"), text, count=1)
    parsed = datetime.fromisoformat(text)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def serialize_bytes(value: bytes) -> str:
    return base64.b64encode(value).decode("ascii")


def deserialize_bytes(value: str) -> bytes:
    """Decode standard or URL-safe base64, padded or not."""
    text = value.strip().replace("-", "+").replace("_", "/")
    text += "=" * (-len(text) % 4)
    return base64.b64decode(text)


def serialize_duration(value: timedelta) -> str:
    micros = value // _ONE_MICROSECOND
    sign = "-" if micros < 0 else ""
    seconds, fraction = divmod(abs(micros), 1_000_000)
    if fraction:
        return f"{sign}{seconds}.{fraction:06d}".rstrip("0") + "s"
    return f"{sign}{seconds}s"


def deserialize_duration(value: Union[str, int, float]) -> timedelta:
    """Parse ``"3.5s"`` (or a bare number of seconds) into a timedelta."""
    if isinstance(value, (int, float)):
        return timedelta(seconds=value)
    text = value.strip()
    if text.endswith("s"):
        text = text[:-1]
    micros = (Decimal(text) * 1_000_000).to_integral_value()
    return timedelta(microseconds=int(micros))


__all__ = [
    "deserialize_bytes",
    "deserialize_datetime",
    "deserialize_duration",
    "deserialize_int64",
    "serialize_bytes",
    "serialize_datetime",
    "serialize_duration",
    "serialize_int64",
]

"""Runtime shared by generated client modules."""

from __future__ import annotations

from .auth import CredentialsClient, GoogleAuth, auth
from .codec import (
    deserialize_bytes,
    deserialize_datetime,
    deserialize_duration,
    deserialize_int64,
    serialize_bytes,
    serialize_datetime,
    serialize_duration,
    serialize_int64,
)
from .http import append_query, build_url, expand_path, request

__all__ = [
    "CredentialsClient",
    "GoogleAuth",
    "append_query",
    "auth",
    "build_url",
    "deserialize_bytes",
    "deserialize_datetime",
    "deserialize_duration",
    "deserialize_int64",
    "expand_path",
    "request",
    "serialize_bytes",
    "serialize_datetime",
    "serialize_duration",
    "serialize_int64",
]

"""Shared constants for pdum.gapi."""

from __future__ import annotations

CLOUD_PLATFORM_SCOPE = "https://www.googleapis.com/auth/cloud-platform"

DEFAULT_ORIGIN = "https://github.com/habemus-papadum/pdum_gapi"

DEFAULT_TIMEOUT: float = 120.0

TRANSIENT_STATUS_CODES: frozenset[int] = frozenset({429, 500, 502, 503, 504})

__all__ = [
    "CLOUD_PLATFORM_SCOPE",
    "DEFAULT_ORIGIN",
    "DEFAULT_TIMEOUT",
    "TRANSIENT_STATUS_CODES",
]

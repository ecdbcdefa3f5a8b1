"""Internal helpers to construct Google API service clients.

These helpers centralize `googleapiclient.discovery.build` usage to keep
options consistent across the codebase. They are intentionally private; the
public API surface remains in `directory.py`.
"""

from __future__ import annotations

from typing import Optional

from google.auth.credentials import Credentials
from googleapiclient import discovery


def discovery_v1(credentials: Optional[Credentials] = None):
    """Discovery v1 service client (the API directory; no authentication required)."""
    return discovery.build(
        "discovery", "v1", credentials=credentials, cache_discovery=False, static_discovery=False
    )

"""Public exports for pdum.gapi types."""

from __future__ import annotations

from .code_module import CodeModule
from .constants import CLOUD_PLATFORM_SCOPE, DEFAULT_ORIGIN, DEFAULT_TIMEOUT, TRANSIENT_STATUS_CODES
from .directory_item import DirectoryItem
from .exceptions import APIResolutionError, GenerationError, GoogleApiError

__all__ = [
    "APIResolutionError",
    "CLOUD_PLATFORM_SCOPE",
    "CodeModule",
    "DEFAULT_ORIGIN",
    "DEFAULT_TIMEOUT",
    "DirectoryItem",
    "GenerationError",
    "GoogleApiError",
    "TRANSIENT_STATUS_CODES",
]

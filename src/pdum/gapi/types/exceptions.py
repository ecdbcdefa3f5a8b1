"""Custom exceptions for pdum.gapi."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Optional

from .constants import TRANSIENT_STATUS_CODES

if TYPE_CHECKING:
    import requests


class APIResolutionError(Exception):
    """Raised when an API display name cannot be uniquely resolved to a directory entry."""

    __slots__ = ()


class GenerationError(Exception):
    """Raised when a Discovery document cannot be turned into a client module."""

    __slots__ = ()


class GoogleApiError(Exception):
    """A non-2xx response from a Google REST endpoint.

    Attributes
    ----------
    status_code : int
        HTTP status of the response.
    reason : str
        Canonical error status (e.g. ``"NOT_FOUND"``) or the HTTP reason phrase.
    message : str
        Human readable message reported by the service.
    details : list
        The ``error.details`` entries of the response, if any.
    url : str
        The requested URL.
    """

    def __init__(
        self,
        message: str,
        *,
        status_code: int,
        reason: str = "",
        details: Optional[list[Any]] = None,
        url: str = "",
    ) -> None:
        self.status_code = status_code
        self.reason = reason
        self.message = message
        self.details = details or []
        self.url = url
        super().__init__(f"{status_code} {reason}: {message}" if reason else f"{status_code}: {message}")

    @property
    def transient(self) -> bool:
        """Whether retrying the same request may succeed."""
        return self.status_code in TRANSIENT_STATUS_CODES

    @classmethod
    def from_response(cls, response: "requests.Response") -> "GoogleApiError":
        """Build an error from a failed response.

        Understands Google's JSON error envelope
        (``{"error": {"code", "message", "status", "details"}}``), the OAuth
        form (``{"error": "...", "error_description": "..."}``) and falls back
        to the raw body text.
        """
        status_code = response.status_code
        reason = response.reason or ""
        message = ""
        details: list[Any] = []

        try:
            payload = response.json()
        except ValueError:
            payload = None

        error = payload.get("error") if isinstance(payload, dict) else None
        if isinstance(error, dict):
            message = error.get("message", "")
            details = list(error.get("details", []))
            reason = error.get("status") or reason
            errors = error.get("errors") or []
            if not error.get("status") and errors and isinstance(errors[0], dict):
                reason = errors[0].get("reason", reason)
        elif isinstance(error, str):
            reason = error
            message = payload.get("error_description", "")

        if not message:
            message = response.text or "Request failed"

        return cls(message, status_code=status_code, reason=reason, details=details, url=response.url or "")


__all__ = ["APIResolutionError", "GenerationError", "GoogleApiError"]

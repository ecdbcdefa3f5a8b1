"""URL construction and HTTP dispatch shared by every generated client."""

from __future__ import annotations

import logging
from typing import Any, Callable, Mapping, Optional
from urllib.parse import urlencode

import requests
import uritemplate
from google.auth.credentials import Credentials
from google.auth.transport.requests import AuthorizedSession

from pdum.gapi.types import DEFAULT_TIMEOUT, GoogleApiError

logger = logging.getLogger(__name__)


def expand_path(template: str, params: Mapping[str, Any]) -> str:
    """Expand a Discovery path template.

    ``{+name}`` keeps reserved characters such as ``/`` (used for full
    resource names like ``projects/p/locations/global/keys/k``), while
    ``{name}`` percent-encodes the value.

    Example:
        >>> expand_path("v2/{+parent}/keys", {"parent": "projects/p/locations/global"})
        'v2/projects/p/locations/global/keys'
        >>> expand_path("v2/queries/{queryId}", {"queryId": 42})
        'v2/queries/42'
    """
    values = {name: str(value) for name, value in params.items() if value is not None}
    return uritemplate.expand(template, values)


def build_url(base_url: str, path: str, query: Optional[list[tuple[str, str]]] = None) -> str:
    """Join ``base_url`` (ending in ``/``) with ``path`` and an optional query string."""
    url = f"{base_url}{path}"
    if query:
        url = f"{url}?{urlencode(query)}"
    return url


def append_query(
    query: list[tuple[str, str]],
    name: str,
    value: Any,
    serializer: Optional[Callable[[Any], str]] = None,
) -> None:
    """Append ``value`` to ``query`` under ``name``.

    ``None`` is skipped, lists repeat the key once per item and booleans are
    rendered the way Google expects (``true``/``false``).
    """
    if value is None:
        return
    items = value if isinstance(value, (list, tuple)) else [value]
    for item in items:
        if serializer is not None:
            item = serializer(item)
        if isinstance(item, bool):
            item = "true" if item else "false"
        query.append((name, str(item)))


def request(
    url: str,
    *,
    method: str = "GET",
    credentials: Optional[Credentials] = None,
    body: Any = None,
    session: Optional[requests.Session] = None,
    headers: Optional[Mapping[str, str]] = None,
    timeout: float = DEFAULT_TIMEOUT,
) -> Any:
    """Send one request and return the decoded response.

    Args:
        url: Fully built request URL.
        method: HTTP verb.
        credentials: google-auth credentials used to authorize the request.
            Ignored when ``session`` is given.
        body: JSON-serializable request body.
        session: Session to send through as-is (e.g. a shared
            ``AuthorizedSession``). When omitted a session is opened for this
            call only.
        headers: Extra request headers.
        timeout: Socket timeout in seconds.

    Returns:
        The decoded JSON payload, ``{}`` for empty responses, or the raw
        bytes of a non-JSON payload.

    Raises:
        GoogleApiError: If the service answers with a non-2xx status.
    """
    if session is not None:
        return _send(session, url, method=method, body=body, headers=headers, timeout=timeout)

    with _open_session(credentials) as owned:
        return _send(owned, url, method=method, body=body, headers=headers, timeout=timeout)


def _open_session(credentials: Optional[Credentials]) -> requests.Session:
    if credentials is None:
        return requests.Session()
    return AuthorizedSession(credentials)


def _send(
    session: requests.Session,
    url: str,
    *,
    method: str,
    body: Any,
    headers: Optional[Mapping[str, str]],
    timeout: float,
) -> Any:
    kwargs: dict[str, Any] = {"timeout": timeout}
    if headers:
        kwargs["headers"] = dict(headers)
    if body is not None:
        kwargs["json"] = body

    logger.debug("%s %s", method, url)
    response = session.request(method, url, **kwargs)

    if response.status_code >= 400:
        error = GoogleApiError.from_response(response)
        logger.debug("%s %s failed: %s", method, url, error)
        raise error

    return _decode(response)


def _decode(response: requests.Response) -> Any:
    if response.status_code == 204 or not response.content:
        return {}
    content_type = response.headers.get("Content-Type", "")
    if "json" in content_type:
        return response.json()
    return response.content


__all__ = ["append_query", "build_url", "expand_path", "request"]

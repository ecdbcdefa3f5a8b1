"""Access to the Google Discovery directory.

This module lists the APIs published through the Discovery service, fetches
their Discovery documents and resolves friendly names ("Tag Manager",
"home graph") to directory entries.
"""

import difflib
import json
import logging
from pathlib import Path
from typing import Any, Callable, Optional, Sequence, Union

import backoff
import requests

from pdum.gapi._clients import discovery_v1
from pdum.gapi.base import request
from pdum.gapi.types import APIResolutionError, DirectoryItem, GoogleApiError

logger = logging.getLogger(__name__)


def list_apis(*, preferred: bool = True, name: Optional[str] = None) -> list[DirectoryItem]:
    """List the APIs published in the Discovery directory.

    Args:
        preferred: If True (default), only list the preferred version of each API.
        name: Only list versions of the API with this name.

    Returns:
        Directory entries in the order the service returns them

    Raises:
        googleapiclient.errors.HttpError: If the API call fails

    Example:
        >>> from pdum.gapi.directory import list_apis
        >>> for item in list_apis(name="homegraph"):
        ...     print(item.id, item.title)
        homegraph:v1 HomeGraph API
    """
    service = discovery_v1()
    kwargs: dict[str, Any] = {"preferred": preferred}
    if name:
        kwargs["name"] = name
    response = service.apis().list(**kwargs).execute()
    return [DirectoryItem.from_dict(item) for item in response.get("items", [])]


def _is_permanent(error: Exception) -> bool:
    return isinstance(error, GoogleApiError) and not error.transient


@backoff.on_exception(
    backoff.expo,
    (GoogleApiError, requests.ConnectionError, requests.Timeout),
    max_tries=4,
    giveup=_is_permanent,
)
def fetch_rest_description(
    item: Union[DirectoryItem, str], *, session: Optional[requests.Session] = None
) -> dict[str, Any]:
    """Download a Discovery document.

    Transient failures (429, 5xx, connection errors) are retried with
    exponential backoff.

    Args:
        item: A directory entry or the document URL.
        session: Session to send the request through.

    Raises:
        GoogleApiError: If the document cannot be fetched
    """
    url = item.discovery_rest_url if isinstance(item, DirectoryItem) else item
    if not url:
        raise ValueError(f"No Discovery document URL for {item}")
    logger.info("Fetching Discovery document %s", url)
    document = request(url, method="GET", session=session)
    if not isinstance(document, dict):
        raise GoogleApiError(f"Expected a JSON document from {url}", status_code=200, url=url)
    return document


def load_rest_description(path: Union[str, Path]) -> dict[str, Any]:
    """Read a Discovery document saved on disk."""
    return json.loads(Path(path).read_text(encoding="utf-8"))


def _normalize(title: str) -> str:
    text = title.strip().lower()
    for word in ("google", "cloud"):
        text = text.replace(word, "")
    if text.endswith(" api"):
        text = text[: -len(" api")]
    return " ".join(text.split())


def _index_by_title(items: Sequence[DirectoryItem], key: Callable[[str], str]) -> dict[str, DirectoryItem]:
    """Map ``key(title)`` to an entry, preferring the preferred version when titles repeat."""
    index: dict[str, DirectoryItem] = {}
    for item in items:
        k = key(item.title)
        if k not in index or (item.preferred and not index[k].preferred):
            index[k] = item
    return index


def resolve_api(query: str, items: Sequence[DirectoryItem]) -> DirectoryItem:
    """Resolve an API name, id or display title to a directory entry.

    Resolution order:

    1. an exact ``name:version`` id
    2. an exact API name (its preferred version, else the first listed)
    3. an exact or normalized title ("Google", "Cloud" and a trailing "API" ignored)
    4. for short terms, a unique substring of a title
    5. fuzzy matching of titles with ``difflib``

    Args:
        query: What the user typed, e.g. ``"tagmanager:v2"``, ``"apikeys"``
            or ``"Tag Manager"``.
        items: Candidate directory entries.

    Returns:
        The matching entry

    Raises:
        APIResolutionError: If no unique match is found or multiple ambiguous matches exist

    Example:
        >>> from pdum.gapi.directory import list_apis, resolve_api
        >>> resolve_api("Home Graph", list_apis()).id
        'homegraph:v1'
    """
    text = query.strip()

    by_id = {item.id: item for item in items}
    if text in by_id:
        return by_id[text]

    named = [item for item in items if item.name == text.lower()]
    if named:
        return next((item for item in named if item.preferred), named[0])

    by_title = _index_by_title(items, lambda title: title)
    if text in by_title:
        return by_title[text]

    normalized_titles = _index_by_title(items, _normalize)
    normalized_query = _normalize(text)
    if normalized_query in normalized_titles:
        return normalized_titles[normalized_query]

    squashed = normalized_query.replace(" ", "")
    squashed_titles = {key.replace(" ", ""): item for key, item in normalized_titles.items()}
    if squashed in squashed_titles:
        return squashed_titles[squashed]

    # Short terms like "Cloud" or "API" appear in many titles
    if len(text) < 10:
        substring_matches = [title for title in by_title if text.lower() in title.lower()]

        if len(substring_matches) > 1:
            examples = substring_matches[:5]
            raise APIResolutionError(
                f"The term '{text}' is too generic and matches multiple APIs. "
                f"Please be more specific. Found matches in: {', '.join(examples)}"
                + (f" and {len(substring_matches) - 5} more..." if len(substring_matches) > 5 else "")
            )

        if len(substring_matches) == 1:
            return by_title[substring_matches[0]]

    close_matches = difflib.get_close_matches(word=text, possibilities=list(by_title), n=5, cutoff=0.6)

    if len(close_matches) == 1:
        return by_title[close_matches[0]]

    if len(close_matches) > 1:
        raise APIResolutionError(
            f"Multiple close matches found for '{text}'. Please be more specific. "
            f"Did you mean one of these: {', '.join(close_matches)}?"
        )

    raise APIResolutionError(
        f"No direct match or close fuzzy match found for API '{text}'. "
        f"Please check the spelling or try a different name."
    )


def lookup_api(query: str, *, items: Optional[Sequence[DirectoryItem]] = None) -> DirectoryItem:
    """Resolve ``query`` against the live directory (all versions)."""
    if items is None:
        items = list_apis(preferred=False)
    return resolve_api(query, items)

"""Discovery directory entry dataclass."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class DirectoryItem:
    """One API version listed by the Discovery directory.

    Attributes
    ----------
    name : str
        API name (e.g. ``"homegraph"``).
    version : str
        API version (e.g. ``"v1"``).
    title : str
        Human-readable title (e.g. ``"HomeGraph API"``).
    description : str
        Short description of the API.
    discovery_rest_url : str
        URL of the API's Discovery document.
    documentation_link : str
        Link to the public documentation.
    preferred : bool
        Whether this is the preferred version of the API.
    """

    name: str
    version: str
    title: str
    description: str = ""
    discovery_rest_url: str = ""
    documentation_link: str = ""
    preferred: bool = False

    @property
    def id(self) -> str:
        return f"{self.name}:{self.version}"

    @classmethod
    def from_dict(cls, item: dict[str, Any]) -> "DirectoryItem":
        """Build an entry from a ``discovery.apis.list`` item."""
        return cls(
            name=item["name"],
            version=item["version"],
            title=item.get("title", item["name"]),
            description=item.get("description", ""),
            discovery_rest_url=item.get("discoveryRestUrl", ""),
            documentation_link=item.get("documentationLink", ""),
            preferred=bool(item.get("preferred", False)),
        )


__all__ = ["DirectoryItem"]

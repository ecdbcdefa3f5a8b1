"""Credential acquisition for generated clients.

Clients accept any ``google.auth.credentials.Credentials``. ``GoogleAuth``
gathers the usual ways of obtaining one:

1. Application Default Credentials (``GOOGLE_APPLICATION_CREDENTIALS``,
   ``gcloud auth application-default login``, the metadata server)
2. A service account key (JSON) loaded from a dict or a file
3. An ``authorized_user`` file as written by gcloud
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Mapping, Optional, Sequence, Union

import google.auth
import google.oauth2.credentials
from google.auth.credentials import Credentials
from google.oauth2 import service_account

from pdum.gapi.types import CLOUD_PLATFORM_SCOPE

CredentialsClient = Credentials


class GoogleAuth:
    """Factory for google-auth credentials scoped for one or more APIs.

    Example:
        >>> from pdum.gapi.base import GoogleAuth
        >>> from pdum.gapi.apis.apikeys_v2 import APIKeys
        >>> credentials = GoogleAuth().from_file("service-account.json")
        >>> keys = APIKeys(credentials).projects_locations_keys_list("projects/p/locations/global")
    """

    def __init__(self, scopes: Optional[Sequence[str]] = None) -> None:
        self.scopes: list[str] = list(scopes) if scopes else [CLOUD_PLATFORM_SCOPE]

    def default(self) -> Credentials:
        """Application Default Credentials.

        Raises:
            google.auth.exceptions.DefaultCredentialsError: If no credentials can be found
        """
        credentials, _ = google.auth.default(scopes=self.scopes)
        return credentials

    def from_json(self, info: Mapping[str, Any]) -> Credentials:
        """Credentials from parsed key material (``service_account`` or ``authorized_user``)."""
        kind = info.get("type")
        if kind == "service_account":
            return service_account.Credentials.from_service_account_info(dict(info), scopes=self.scopes)
        if kind == "authorized_user":
            return google.oauth2.credentials.Credentials.from_authorized_user_info(dict(info), scopes=self.scopes)
        raise ValueError(f"Unsupported credentials type: {kind!r}")

    def from_file(self, path: Union[str, Path]) -> Credentials:
        """Credentials from a JSON key file."""
        info = json.loads(Path(path).read_text(encoding="utf-8"))
        return self.from_json(info)


auth = GoogleAuth()


__all__ = ["CredentialsClient", "GoogleAuth", "auth"]

"""API Keys API client.

Manages the API keys associated with developer projects.

Docs: https://cloud.google.com/api-keys/docs
Source: https://github.com/habemus-papadum/pdum_gapi

Generated from the ``apikeys:v2`` Discovery document. Do not edit by hand.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Optional, TypedDict, cast

import requests
from google.auth.credentials import Credentials

from pdum.gapi.base import (
    append_query,
    build_url,
    deserialize_datetime,
    expand_path,
    request,
    serialize_datetime,
)


class APIKeys:
    """API Keys API client.

    Manages the API keys associated with developer projects.

    Args:
        credentials: Credentials used to authorize requests. Requests are
            sent unauthenticated when omitted.
        base_url: Root of the API, ending in ``/``.
        session: Session to send requests through, e.g. a shared
            ``google.auth.transport.requests.AuthorizedSession``.
    """

    def __init__(
        self,
        credentials: Optional[Credentials] = None,
        base_url: str = "https://apikeys.googleapis.com/",
        *,
        session: Optional[requests.Session] = None,
    ) -> None:
        self._credentials = credentials
        self._base_url = base_url
        self._session = session

    def keys_lookup_key(
        self,
        *,
        key_string: Optional[str] = None,
    ) -> V2LookupKeyResponse:
        """Find the parent project and resource name of the API key that
        matches the key string in the request. If the API key has been
        purged, resource name will not be set. The service account must have
        the `apikeys.keys.lookup` permission on the parent project.

        Args:
            key_string: Required. Finds the project that owns the key string
                value.
        """
        path = "v2/keys:lookupKey"
        query: list[tuple[str, str]] = []
        append_query(query, "keyString", key_string)
        url = build_url(self._base_url, path, query)
        data = request(
            url,
            method="GET",
            credentials=self._credentials,
            session=self._session,
        )
        return cast(V2LookupKeyResponse, data)

    def operations_get(
        self,
        name: str,
    ) -> Operation:
        """Gets the latest state of a long-running operation. Clients can use
        this method to poll the operation result at intervals as recommended
        by the API service.

        Args:
            name: The name of the operation resource.
        """
        path = expand_path("v2/{+name}", {"name": name})
        url = build_url(self._base_url, path)
        data = request(
            url,
            method="GET",
            credentials=self._credentials,
            session=self._session,
        )
        return cast(Operation, data)

    def projects_locations_keys_create(
        self,
        parent: str,
        body: V2Key,
        *,
        key_id: Optional[str] = None,
    ) -> Operation:
        """Creates a new API key. NOTE: Key is a global resource; hence the
        only supported value for location is `global`.

        Args:
            parent: Required. The project in which the API key is created.
            key_id: User specified key id (optional). If specified, it will
                become the final component of the key resource name. The id
                must be unique within the project, must conform with
                RFC-1034, is restricted to lower-cased letters, and has a
                maximum length of 63 characters. In another word, the id must
                match the regular expression: `[a-z]([a-z0-9-]{0,61}[a-z0-9])?`.
                The id must NOT be a UUID-like string.
        """
        path = expand_path("v2/{+parent}/keys", {"parent": parent})
        query: list[tuple[str, str]] = []
        append_query(query, "keyId", key_id)
        url = build_url(self._base_url, path, query)
        data = request(
            url,
            method="POST",
            credentials=self._credentials,
            body=serialize_v2_key(body),
            session=self._session,
        )
        return cast(Operation, data)

    def projects_locations_keys_delete(
        self,
        name: str,
        *,
        etag: Optional[str] = None,
    ) -> Operation:
        """Deletes an API key. Deleted key can be retrieved within 30 days of
        deletion. Afterward, key will be purged from the project. NOTE: Key
        is a global resource; hence the only supported value for location is
        `global`.

        Args:
            name: Required. The resource name of the API key to be deleted.
            etag: Optional. The etag known to the client for the expected
                state of the key. This is to be used for optimistic
                concurrency.
        """
        path = expand_path("v2/{+name}", {"name": name})
        query: list[tuple[str, str]] = []
        append_query(query, "etag", etag)
        url = build_url(self._base_url, path, query)
        data = request(
            url,
            method="DELETE",
            credentials=self._credentials,
            session=self._session,
        )
        return cast(Operation, data)

    def projects_locations_keys_get(
        self,
        name: str,
    ) -> V2Key:
        """Gets the metadata for an API key. The key string of the API key
        isn't included in the response. NOTE: Key is a global resource;
        hence the only supported value for location is `global`.

        Args:
            name: Required. The resource name of the API key to get.
        """
        path = expand_path("v2/{+name}", {"name": name})
        url = build_url(self._base_url, path)
        data = request(
            url,
            method="GET",
            credentials=self._credentials,
            session=self._session,
        )
        return deserialize_v2_key(data)

    def projects_locations_keys_get_key_string(
        self,
        name: str,
    ) -> V2GetKeyStringResponse:
        """Get the key string for an API key. NOTE: Key is a global resource;
        hence the only supported value for location is `global`.

        Args:
            name: Required. The resource name of the API key to be
                retrieved.
        """
        path = expand_path("v2/{+name}/keyString", {"name": name})
        url = build_url(self._base_url, path)
        data = request(
            url,
            method="GET",
            credentials=self._credentials,
            session=self._session,
        )
        return cast(V2GetKeyStringResponse, data)

    def projects_locations_keys_list(
        self,
        parent: str,
        *,
        page_size: Optional[int] = None,
        page_token: Optional[str] = None,
        show_deleted: Optional[bool] = None,
    ) -> V2ListKeysResponse:
        """Lists the API keys owned by a project. The key string of the API
        key isn't included in the response. NOTE: Key is a global resource;
        hence the only supported value for location is `global`.

        Args:
            parent: Required. Lists all API keys associated with this
                project.
            page_size: Optional. Specifies the maximum number of results to
                be returned at a time.
            page_token: Optional. Requests a specific page of results.
            show_deleted: Optional. Indicate that keys deleted in the past 30
                days should also be returned.
        """
        path = expand_path("v2/{+parent}/keys", {"parent": parent})
        query: list[tuple[str, str]] = []
        append_query(query, "pageSize", page_size)
        append_query(query, "pageToken", page_token)
        append_query(query, "showDeleted", show_deleted)
        url = build_url(self._base_url, path, query)
        data = request(
            url,
            method="GET",
            credentials=self._credentials,
            session=self._session,
        )
        return deserialize_v2_list_keys_response(data)

    def projects_locations_keys_patch(
        self,
        name: str,
        body: V2Key,
        *,
        update_mask: Optional[str] = None,
    ) -> Operation:
        """Patches the modifiable fields of an API key. The key string of the
        API key isn't included in the response. NOTE: Key is a global
        resource; hence the only supported value for location is `global`.

        Args:
            name: Output only. The resource name of the key. The `name` has
                the form: `projects//locations/global/keys/`. For example:
                `projects/123456867718/locations/global/keys/b7ff1f9f-8275-410a-94dd-3855ee9b5dd2`
                NOTE: Key is a global resource; hence the only supported
                value for location is `global`.
            update_mask: The field mask specifies which fields to be updated
                as part of this request. All other fields are ignored.
                Mutable fields are: `display_name`, `restrictions`, and
                `annotations`. If an update mask is not provided, the service
                treats it as an implied mask equivalent to all allowed fields
                that are set on the wire. If the field mask has a special
                value "*", the service treats it equivalent to replace all
                allowed mutable fields.
        """
        path = expand_path("v2/{+name}", {"name": name})
        query: list[tuple[str, str]] = []
        append_query(query, "updateMask", update_mask)
        url = build_url(self._base_url, path, query)
        data = request(
            url,
            method="PATCH",
            credentials=self._credentials,
            body=serialize_v2_key(body),
            session=self._session,
        )
        return cast(Operation, data)

    def projects_locations_keys_undelete(
        self,
        name: str,
        body: V2UndeleteKeyRequest,
    ) -> Operation:
        """Undeletes an API key which was deleted within 30 days. NOTE: Key
        is a global resource; hence the only supported value for location is
        `global`.

        Args:
            name: Required. The resource name of the API key to be
                undeleted.
        """
        path = expand_path("v2/{+name}:undelete", {"name": name})
        url = build_url(self._base_url, path)
        data = request(
            url,
            method="POST",
            credentials=self._credentials,
            body=body,
            session=self._session,
        )
        return cast(Operation, data)


class Operation(TypedDict, total=False):
    """This resource represents a long-running operation that is the result
    of a network API call.
    """

    #: If the value is `false`, it means the operation is still in progress.
    #: If `true`, the operation is completed, and either `error` or
    #: `response` is available.
    done: bool
    #: The error result of the operation in case of failure or cancellation.
    error: Status
    #: Service-specific metadata associated with the operation. It typically
    #: contains progress information and common metadata such as create
    #: time. Some services might not provide such metadata. Any method that
    #: returns a long-running operation should document the metadata type,
    #: if any.
    metadata: dict[str, Any]
    #: The server-assigned name, which is only unique within the same service
    #: that originally returns it. If you use the default HTTP mapping, the
    #: `name` should be a resource name ending with
    #: `operations/{unique_id}`.
    name: str
    #: The normal response of the operation in case of success. If the
    #: original method returns no data on success, such as `Delete`, the
    #: response is `google.protobuf.Empty`. If the original method is
    #: standard `Get`/`Create`/`Update`, the response should be the
    #: resource. For other methods, the response should have the type
    #: `XxxResponse`, where `Xxx` is the original method name. For example,
    #: if the original method name is `TakeSnapshot()`, the inferred
    #: response type is `TakeSnapshotResponse`.
    response: dict[str, Any]


class Status(TypedDict, total=False):
    """The `Status` type defines a logical error model that is suitable for
    different programming environments, including REST APIs and RPC APIs. It
    is used by [gRPC](https://github.com/grpc). Each `Status` message
    contains three pieces of data: error code, error message, and error
    details. You can find out more about this error model and how to work
    with it in the [API Design
    Guide](https://cloud.google.com/apis/design/errors).
    """

    #: The status code, which should be an enum value of google.rpc.Code.
    code: int
    #: A list of messages that carry the error details. There is a common set
    #: of message types for APIs to use.
    details: list[dict[str, Any]]
    #: A developer-facing error message, which should be in English. Any
    #: user-facing error message should be localized and sent in the
    #: google.rpc.Status.details field, or localized by the client.
    message: str


class V2AndroidApplication(TypedDict, total=False):
    """Identifier of an Android application for key use."""

    #: The package name of the application.
    packageName: str
    #: The SHA1 fingerprint of the application. For example, both sha1
    #: formats are acceptable :
    #: DA:39:A3:EE:5E:6B:4B:0D:32:55:BF:EF:95:60:18:90:AF:D8:07:09 or
    #: DA39A3EE5E6B4B0D3255BFEF95601890AFD80709. Output format is the latter.
    sha1Fingerprint: str


class V2AndroidKeyRestrictions(TypedDict, total=False):
    """The Android apps that are allowed to use the key."""

    #: A list of Android applications that are allowed to make API calls
    #: with this key.
    allowedApplications: list[V2AndroidApplication]


class V2ApiTarget(TypedDict, total=False):
    """A restriction for a specific service and optionally one or multiple
    specific methods. Both fields are case insensitive.
    """

    #: Optional. List of one or more methods that can be called. If empty,
    #: all methods for the service are allowed. A wildcard (*) can be used
    #: as the last symbol. Valid examples:
    #: `google.cloud.translate.v2.TranslateService.GetSupportedLanguage`
    #: `TranslateText` `Get*` `translate.googleapis.com.Get*`
    methods: list[str]
    #: The service for this restriction. It should be the canonical service
    #: name, for example: `translate.googleapis.com`. You can use [`gcloud
    #: services list`](/sdk/gcloud/reference/services/list) to get a list of
    #: services that are enabled in the project.
    service: str


class V2BrowserKeyRestrictions(TypedDict, total=False):
    """The HTTP referrers (websites) that are allowed to use the key."""

    #: A list of regular expressions for the referrer URLs that are allowed
    #: to make API calls with this key.
    allowedReferrers: list[str]


class V2GetKeyStringResponse(TypedDict, total=False):
    """Response message for `GetKeyString` method."""

    #: An encrypted and signed value of the key.
    keyString: str


class V2IosKeyRestrictions(TypedDict, total=False):
    """The iOS apps that are allowed to use the key."""

    #: A list of bundle IDs that are allowed when making API calls with this
    #: key.
    allowedBundleIds: list[str]


class V2Key(TypedDict, total=False):
    """The representation of a key managed by the API Keys API."""

    #: Annotations is an unstructured key-value map stored with a policy that
    #: may be set by external tools to store and retrieve arbitrary
    #: metadata. They are not queryable and should be preserved when
    #: modifying objects.
    annotations: dict[str, str]
    #: Output only. A timestamp identifying the time this key was originally
    #: created.
    createTime: datetime
    #: Output only. A timestamp when this key was deleted. If the resource is
    #: not deleted, this must be empty.
    deleteTime: datetime
    #: Human-readable display name of this key that you can modify. The
    #: maximum length is 63 characters.
    displayName: str
    #: Output only. A checksum computed by the server based on the current
    #: value of the Key resource. This may be sent on update and delete
    #: requests to ensure the client has an up-to-date value before
    #: proceeding. See https://google.aip.dev/154.
    etag: str
    #: Output only. An encrypted and signed value held by this key. This
    #: field can be accessed only through the `GetKeyString` method.
    keyString: str
    #: Output only. The resource name of the key. The `name` has the form:
    #: `projects//locations/global/keys/`. For example:
    #: `projects/123456867718/locations/global/keys/b7ff1f9f-8275-410a-94dd-3855ee9b5dd2`
    #: NOTE: Key is a global resource; hence the only supported value for
    #: location is `global`.
    name: str
    #: Key restrictions.
    restrictions: V2Restrictions
    #: Output only. Unique id in UUID4 format.
    uid: str
    #: Output only. A timestamp identifying the time this key was last
    #: updated.
    updateTime: datetime


def serialize_v2_key(data: V2Key) -> dict[str, Any]:
    result: dict[str, Any] = dict(data)
    if data.get("createTime") is not None:
        result["createTime"] = serialize_datetime(data["createTime"])
    if data.get("deleteTime") is not None:
        result["deleteTime"] = serialize_datetime(data["deleteTime"])
    if data.get("updateTime") is not None:
        result["updateTime"] = serialize_datetime(data["updateTime"])
    return result


def deserialize_v2_key(data: dict[str, Any]) -> V2Key:
    result: dict[str, Any] = dict(data)
    if data.get("createTime") is not None:
        result["createTime"] = deserialize_datetime(data["createTime"])
    if data.get("deleteTime") is not None:
        result["deleteTime"] = deserialize_datetime(data["deleteTime"])
    if data.get("updateTime") is not None:
        result["updateTime"] = deserialize_datetime(data["updateTime"])
    return cast(V2Key, result)


class V2ListKeysResponse(TypedDict, total=False):
    """Response message for `ListKeys` method."""

    #: A list of API keys.
    keys: list[V2Key]
    #: The pagination token for the next page of results.
    nextPageToken: str


def serialize_v2_list_keys_response(data: V2ListKeysResponse) -> dict[str, Any]:
    result: dict[str, Any] = dict(data)
    if data.get("keys") is not None:
        result["keys"] = [serialize_v2_key(item) for item in data["keys"]]
    return result


def deserialize_v2_list_keys_response(data: dict[str, Any]) -> V2ListKeysResponse:
    result: dict[str, Any] = dict(data)
    if data.get("keys") is not None:
        result["keys"] = [deserialize_v2_key(item) for item in data["keys"]]
    return cast(V2ListKeysResponse, result)


class V2LookupKeyResponse(TypedDict, total=False):
    """Response message for `LookupKey` method."""

    #: The resource name of the API key. If the API key has been purged,
    #: resource name is empty.
    name: str
    #: The project that owns the key with the value specified in the request.
    parent: str


class V2Restrictions(TypedDict, total=False):
    """Describes the restrictions on the key."""

    #: The Android apps that are allowed to use the key.
    androidKeyRestrictions: V2AndroidKeyRestrictions
    #: A restriction for a specific service and optionally one or more
    #: specific methods. Requests are allowed if they match any of these
    #: restrictions. If no restrictions are specified, all targets are
    #: allowed.
    apiTargets: list[V2ApiTarget]
    #: The HTTP referrers (websites) that are allowed to use the key.
    browserKeyRestrictions: V2BrowserKeyRestrictions
    #: The iOS apps that are allowed to use the key.
    iosKeyRestrictions: V2IosKeyRestrictions
    #: The IP addresses of callers that are allowed to use the key.
    serverKeyRestrictions: V2ServerKeyRestrictions


class V2ServerKeyRestrictions(TypedDict, total=False):
    """The IP addresses of callers that are allowed to use the key."""

    #: A list of the caller IP addresses that are allowed to make API calls
    #: with this key.
    allowedIps: list[str]


class V2UndeleteKeyRequest(TypedDict, total=False):
    """Request message for `UndeleteKey` method."""

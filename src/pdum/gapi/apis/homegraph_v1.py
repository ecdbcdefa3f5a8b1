"""HomeGraph API client.

Docs: https://developers.home.google.com/cloud-to-cloud/get-started
Source: https://github.com/habemus-papadum/pdum_gapi

Generated from the ``homegraph:v1`` Discovery document. Do not edit by hand.
"""

from __future__ import annotations

from typing import Any, Optional, TypedDict, cast

import requests
from google.auth.credentials import Credentials

from pdum.gapi.base import (
    append_query,
    build_url,
    expand_path,
    request,
)


class HomeGraph:
    """HomeGraph API client.

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
        base_url: str = "https://homegraph.googleapis.com/",
        *,
        session: Optional[requests.Session] = None,
    ) -> None:
        self._credentials = credentials
        self._base_url = base_url
        self._session = session

    def agent_users_delete(
        self,
        agent_user_id: str,
        *,
        request_id: Optional[str] = None,
    ) -> Empty:
        """Unlinks the given third-party user from your smart home Action. All
        data related to this user will be deleted. For more details on how
        users link their accounts, see [fulfillment and
        authentication](https://developers.home.google.com/cloud-to-cloud/primer/fulfillment).
        The third-party user's identity is passed in via the `agent_user_id`
        (see DeleteAgentUserRequest). This request must be authorized using
        service account credentials from your Actions console project.

        Args:
            agent_user_id: Required. Third-party user ID.
            request_id: Request ID used for debugging.
        """
        path = expand_path("v1/{+agentUserId}", {"agentUserId": agent_user_id})
        query: list[tuple[str, str]] = []
        append_query(query, "requestId", request_id)
        url = build_url(self._base_url, path, query)
        data = request(
            url,
            method="DELETE",
            credentials=self._credentials,
            session=self._session,
        )
        return cast(Empty, data)

    def devices_query(
        self,
        body: QueryRequest,
    ) -> QueryResponse:
        """Gets the current states in Home Graph for the given set of the
        third-party user's devices. The third-party user's identity is passed
        in via the `agent_user_id` (see QueryRequest). This request must be
        authorized using service account credentials from your Actions
        console project.
        """
        path = "v1/devices:query"
        url = build_url(self._base_url, path)
        data = request(
            url,
            method="POST",
            credentials=self._credentials,
            body=body,
            session=self._session,
        )
        return cast(QueryResponse, data)

    def devices_report_state_and_notification(
        self,
        body: ReportStateAndNotificationRequest,
    ) -> ReportStateAndNotificationResponse:
        """Reports device state and optionally sends device notifications.
        Called by your smart home Action when the state of a third-party
        device changes or you need to send a notification about the device.
        See [Implement Report
        State](https://developers.home.google.com/cloud-to-cloud/integration/report-state)
        for more information. This method updates the device state according
        to its declared
        [traits](https://developers.home.google.com/cloud-to-cloud/primer/device-types-and-traits).
        Publishing a new state value outside of these traits will result in
        an `INVALID_ARGUMENT` error response. The third-party user's identity
        is passed in via the `agent_user_id` (see
        ReportStateAndNotificationRequest). This request must be authorized
        using service account credentials from your Actions console project.
        """
        path = "v1/devices:reportStateAndNotification"
        url = build_url(self._base_url, path)
        data = request(
            url,
            method="POST",
            credentials=self._credentials,
            body=body,
            session=self._session,
        )
        return cast(ReportStateAndNotificationResponse, data)

    def devices_request_sync(
        self,
        body: RequestSyncDevicesRequest,
    ) -> RequestSyncDevicesResponse:
        """Requests Google to send an `action.devices.SYNC`
        [intent](https://developers.home.google.com/cloud-to-cloud/intents/sync)
        to your smart home Action to update device metadata for the given
        user. The third-party user's identity is passed via the
        `agent_user_id` (see RequestSyncDevicesRequest). This request must be
        authorized using service account credentials from your Actions
        console project.
        """
        path = "v1/devices:requestSync"
        url = build_url(self._base_url, path)
        data = request(
            url,
            method="POST",
            credentials=self._credentials,
            body=body,
            session=self._session,
        )
        return cast(RequestSyncDevicesResponse, data)

    def devices_sync(
        self,
        body: SyncRequest,
    ) -> SyncResponse:
        """Gets all the devices associated with the given third-party user.
        The third-party user's identity is passed in via the `agent_user_id`
        (see SyncRequest). This request must be authorized using service
        account credentials from your Actions console project.
        """
        path = "v1/devices:sync"
        url = build_url(self._base_url, path)
        data = request(
            url,
            method="POST",
            credentials=self._credentials,
            body=body,
            session=self._session,
        )
        return cast(SyncResponse, data)


class AgentDeviceId(TypedDict, total=False):
    """Third-party device ID for one device."""

    #: Third-party device ID.
    id: str


class AgentOtherDeviceId(TypedDict, total=False):
    """Alternate third-party device ID."""

    #: Project ID for your smart home Action.
    agentId: str
    #: Unique third-party device ID.
    deviceId: str


class Device(TypedDict, total=False):
    """Third-party device definition."""

    #: Attributes for the traits supported by the device.
    attributes: dict[str, Any]
    #: Custom device attributes stored in Home Graph and provided to your
    #: smart home Action in each
    #: [QUERY](https://developers.home.google.com/cloud-to-cloud/intents/query)
    #: and
    #: [EXECUTE](https://developers.home.google.com/cloud-to-cloud/intents/execute)
    #: intent. Data in this object has a few constraints: No sensitive
    #: information, including but not limited to Personally Identifiable
    #: Information.
    customData: dict[str, Any]
    #: Device manufacturer, model, hardware version, and software version.
    deviceInfo: DeviceInfo
    #: Third-party device ID.
    id: str
    #: Names given to this device by your smart home Action.
    name: DeviceNames
    #: Indicates whether your smart home Action will report notifications to
    #: Google for this device via ReportStateAndNotification. If your smart
    #: home Action enables users to control device notifications, you should
    #: update this field and call RequestSyncDevices.
    notificationSupportedByAgent: bool
    #: Alternate IDs associated with this device. This is used to identify
    #: cloud synced devices enabled for [local
    #: fulfillment](https://developers.home.google.com/local-home/overview).
    otherDeviceIds: list[AgentOtherDeviceId]
    #: Suggested name for the room where this device is installed. Google
    #: attempts to use this value during user setup.
    roomHint: str
    #: Suggested name for the structure where this device is installed.
    #: Google attempts to use this value during user setup.
    structureHint: str
    #: Traits supported by the device. See [device
    #: traits](https://developers.home.google.com/cloud-to-cloud/traits).
    traits: list[str]
    #: Hardware type of the device. See [device
    #: types](https://developers.home.google.com/cloud-to-cloud/guides).
    type: str
    #: Indicates whether your smart home Action will report state of this
    #: device to Google via ReportStateAndNotification.
    willReportState: bool


class DeviceInfo(TypedDict, total=False):
    """Device information."""

    #: Device hardware version.
    hwVersion: str
    #: Device manufacturer.
    manufacturer: str
    #: Device model.
    model: str
    #: Device software version.
    swVersion: str


class DeviceNames(TypedDict, total=False):
    """Identifiers used to describe the device."""

    #: List of names provided by the manufacturer rather than the user, such
    #: as serial numbers, SKUs, etc.
    defaultNames: list[str]
    #: Primary name of the device, generally provided by the user.
    name: str
    #: Additional names provided by the user for the device.
    nicknames: list[str]


class Empty(TypedDict, total=False):
    """A generic empty message that you can re-use to avoid defining
    duplicated empty messages in your APIs. A typical example is to use it
    as the request or the response type of an API method. For instance:
    service Foo { rpc Bar(google.protobuf.Empty) returns
    (google.protobuf.Empty); }
    """


class QueryRequest(TypedDict, total=False):
    """Request type for the
    [`Query`](#google.home.graph.v1.HomeGraphApiService.Query) call.
    """

    #: Required. Third-party user ID.
    agentUserId: str
    #: Required. Inputs containing third-party device IDs for which to get
    #: the device states.
    inputs: list[QueryRequestInput]
    #: Request ID used for debugging.
    requestId: str


class QueryRequestInput(TypedDict, total=False):
    """Device ID inputs to QueryRequest."""

    #: Payload containing third-party device IDs.
    payload: QueryRequestPayload


class QueryRequestPayload(TypedDict, total=False):
    """Payload containing device IDs."""

    #: Third-party device IDs for which to get the device states.
    devices: list[AgentDeviceId]


class QueryResponse(TypedDict, total=False):
    """Response type for the
    [`Query`](#google.home.graph.v1.HomeGraphApiService.Query) call. This
    should follow the same format as the Google smart home
    `action.devices.QUERY`
    [response](https://developers.home.google.com/cloud-to-cloud/intents/query).
    Example: ```json { "requestId": "ff36a3cc-ec34-11e6-b1a0-64510650abcf",
    "payload": { "devices": { "123": { "on": true, "online": true }, "456":
    { "on": true, "online": true, "brightness": 80, "color": { "name":
    "cerulean", "spectrumRGB": 31655 } } } } } ```
    """

    #: Device states for the devices given in the request.
    payload: QueryResponsePayload
    #: Request ID used for debugging. Copied from the request.
    requestId: str


class QueryResponsePayload(TypedDict, total=False):
    """Payload containing device states information."""

    #: States of the devices. Map of third-party device ID to struct of
    #: device states.
    devices: dict[str, dict[str, Any]]


class ReportStateAndNotificationDevice(TypedDict, total=False):
    """The states and notifications specific to a device."""

    #: Notifications metadata for devices. See the **Device NOTIFICATIONS**
    #: section of the individual trait [reference
    #: guides](https://developers.home.google.com/cloud-to-cloud/traits).
    notifications: dict[str, Any]
    #: States of devices to update. See the **Device STATES** section of the
    #: individual trait [reference
    #: guides](https://developers.home.google.com/cloud-to-cloud/traits).
    states: dict[str, Any]


class ReportStateAndNotificationRequest(TypedDict, total=False):
    """Request type for the
    [`ReportStateAndNotification`](#google.home.graph.v1.HomeGraphApiService.ReportStateAndNotification)
    call. It may include states, notifications, or both. States and
    notifications are defined per `device_id` (for example, "123" and "456"
    in the following example). Example: ```json { "requestId":
    "ff36a3cc-ec34-11e6-b1a0-64510650abcf", "agentUserId": "1234",
    "payload": { "devices": { "states": { "123": { "on": true }, "456": {
    "on": true, "brightness": 10 } }, } } } ```
    """

    #: Required. Third-party user ID.
    agentUserId: str
    #: Unique identifier per event (for example, a doorbell press).
    eventId: str
    #: Deprecated.
    followUpToken: str
    #: Required. State of devices to update and notification metadata for
    #: devices.
    payload: StateAndNotificationPayload
    #: Request ID used for debugging.
    requestId: str


class ReportStateAndNotificationResponse(TypedDict, total=False):
    """Response type for the
    [`ReportStateAndNotification`](#google.home.graph.v1.HomeGraphApiService.ReportStateAndNotification)
    call.
    """

    #: Request ID copied from ReportStateAndNotificationRequest.
    requestId: str


# Request type for the
# [`RequestSyncDevices`](#google.home.graph.v1.HomeGraphApiService.RequestSyncDevices)
# call.
RequestSyncDevicesRequest = TypedDict(
    "RequestSyncDevicesRequest",
    {
        #: Required. Third-party user ID.
        "agentUserId": "str",
        #: Optional. If set, the request will be added to a queue and a
        #: response will be returned immediately. This enables concurrent
        #: requests for the given `agent_user_id`, but the caller will not
        #: receive any error responses.
        "async": "bool",
    },
    total=False,
)


class RequestSyncDevicesResponse(TypedDict, total=False):
    """Response type for the
    [`RequestSyncDevices`](#google.home.graph.v1.HomeGraphApiService.RequestSyncDevices)
    call. Intentionally empty upon success. An HTTP response code is
    returned with more details upon failure.
    """


class StateAndNotificationPayload(TypedDict, total=False):
    """Payload containing the state and notification information for devices."""

    #: The devices for updating state and sending notifications.
    devices: ReportStateAndNotificationDevice


class SyncRequest(TypedDict, total=False):
    """Request type for the
    [`Sync`](#google.home.graph.v1.HomeGraphApiService.Sync) call.
    """

    #: Required. Third-party user ID.
    agentUserId: str
    #: Request ID used for debugging.
    requestId: str


class SyncResponse(TypedDict, total=False):
    """Response type for the
    [`Sync`](#google.home.graph.v1.HomeGraphApiService.Sync) call. This
    should follow the same format as the Google smart home
    `action.devices.SYNC`
    [response](https://developers.home.google.com/cloud-to-cloud/intents/sync).
    Example: ```json { "requestId": "ff36a3cc-ec34-11e6-b1a0-64510650abcf",
    "payload": { "agentUserId": "1836.15267389", "devices": [{ "id": "123",
    "type": "action.devices.types.OUTLET", "traits": [
    "action.devices.traits.OnOff" ], "name": { "defaultNames": ["My Outlet
    1234"], "name": "Night light", "nicknames": ["wall plug"] },
    "willReportState": false, "deviceInfo": { "manufacturer":
    "lights-out-inc", "model": "hs1234", "hwVersion": "3.2", "swVersion":
    "11.4" }, "customData": { "fooValue": 74, "barValue": true, "bazValue":
    "foo" } }] } } ```
    """

    #: Devices associated with the third-party user.
    payload: SyncResponsePayload
    #: Request ID used for debugging. Copied from the request.
    requestId: str


class SyncResponsePayload(TypedDict, total=False):
    """Payload containing device information."""

    #: Third-party user ID
    agentUserId: str
    #: Devices associated with the third-party user.
    devices: list[Device]

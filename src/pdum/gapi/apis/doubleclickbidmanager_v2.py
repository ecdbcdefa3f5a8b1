"""DoubleClick Bid Manager API client.

DoubleClick Bid Manager API allows users to manage and create campaigns and
reports.

Docs: https://developers.google.com/bid-manager/
Source: https://github.com/habemus-papadum/pdum_gapi

Generated from the ``doubleclickbidmanager:v2`` Discovery document. Do not
edit by hand.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Literal, Optional, TypedDict, cast

import requests
from google.auth.credentials import Credentials

from pdum.gapi.base import (
    append_query,
    build_url,
    deserialize_datetime,
    deserialize_int64,
    expand_path,
    request,
    serialize_datetime,
    serialize_int64,
)


class DoubleClickBidManager:
    """DoubleClick Bid Manager API client.

    DoubleClick Bid Manager API allows users to manage and create campaigns
    and reports.

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
        base_url: str = "https://doubleclickbidmanager.googleapis.com/v2/",
        *,
        session: Optional[requests.Session] = None,
    ) -> None:
        self._credentials = credentials
        self._base_url = base_url
        self._session = session

    def queries_create(
        self,
        body: Query,
    ) -> Query:
        """Creates a query."""
        path = "queries"
        url = build_url(self._base_url, path)
        data = request(
            url,
            method="POST",
            credentials=self._credentials,
            body=serialize_query(body),
            session=self._session,
        )
        return deserialize_query(data)

    def queries_delete(
        self,
        query_id: int,
    ) -> None:
        """Deletes a query as well as the associated reports.

        Args:
            query_id: Required. ID of query to delete.
        """
        path = expand_path("queries/{queryId}", {"queryId": query_id})
        url = build_url(self._base_url, path)
        request(
            url,
            method="DELETE",
            credentials=self._credentials,
            session=self._session,
        )

    def queries_get(
        self,
        query_id: int,
    ) -> Query:
        """Retrieves a query.

        Args:
            query_id: Required. ID of query to retrieve.
        """
        path = expand_path("queries/{queryId}", {"queryId": query_id})
        url = build_url(self._base_url, path)
        data = request(
            url,
            method="GET",
            credentials=self._credentials,
            session=self._session,
        )
        return deserialize_query(data)

    def queries_list(
        self,
        *,
        order_by: Optional[str] = None,
        page_size: Optional[int] = None,
        page_token: Optional[str] = None,
    ) -> ListQueriesResponse:
        """Lists queries created by the current user.

        Args:
            order_by: Name of a field used to order results. The default
                sorting order is ascending. To specify descending order for a
                field, append a " desc" suffix. For example "metadata.title
                desc". Sorting is only supported for the following fields: *
                `queryId` * `metadata.title`
            page_size: Maximum number of results per page. Must be between
                `1` and `100`. Defaults to `100` if unspecified.
            page_token: A page token, received from a previous list call.
                Provide this to retrieve the subsequent page of queries.
        """
        path = "queries"
        query: list[tuple[str, str]] = []
        append_query(query, "orderBy", order_by)
        append_query(query, "pageSize", page_size)
        append_query(query, "pageToken", page_token)
        url = build_url(self._base_url, path, query)
        data = request(
            url,
            method="GET",
            credentials=self._credentials,
            session=self._session,
        )
        return deserialize_list_queries_response(data)

    def queries_reports_get(
        self,
        query_id: int,
        report_id: int,
    ) -> Report:
        """Retrieves a report.

        Args:
            query_id: Required. ID of the query the report is associated
                with.
            report_id: Required. ID of the report to retrieve.
        """
        path = expand_path("queries/{queryId}/reports/{reportId}", {"queryId": query_id, "reportId": report_id})
        url = build_url(self._base_url, path)
        data = request(
            url,
            method="GET",
            credentials=self._credentials,
            session=self._session,
        )
        return deserialize_report(data)

    def queries_reports_list(
        self,
        query_id: int,
        *,
        order_by: Optional[str] = None,
        page_size: Optional[int] = None,
        page_token: Optional[str] = None,
    ) -> ListReportsResponse:
        """Lists reports associated with a query.

        Args:
            query_id: Required. ID of the query with which the reports are
                associated.
            order_by: Name of a field used to order results. The default
                sorting order is ascending. To specify descending order for a
                field, append a " desc" suffix. For example "key.reportId
                desc". Sorting is only supported for the following fields: *
                `key.reportId`
            page_size: Maximum number of results per page. Must be between
                `1` and `100`. Defaults to `100` if unspecified.
            page_token: A page token, received from a previous list call.
                Provide this to retrieve the subsequent page of reports.
        """
        path = expand_path("queries/{queryId}/reports", {"queryId": query_id})
        query: list[tuple[str, str]] = []
        append_query(query, "orderBy", order_by)
        append_query(query, "pageSize", page_size)
        append_query(query, "pageToken", page_token)
        url = build_url(self._base_url, path, query)
        data = request(
            url,
            method="GET",
            credentials=self._credentials,
            session=self._session,
        )
        return deserialize_list_reports_response(data)

    def queries_run(
        self,
        query_id: int,
        body: RunQueryRequest,
        *,
        synchronous: Optional[bool] = None,
    ) -> Report:
        """Runs a stored query to generate a report.

        Args:
            query_id: Required. ID of query to run.
            synchronous: Whether the query should be run synchronously. When
                true, this method will not return until the query has
                finished running. When false or not specified, this method
                will return immediately.
        """
        path = expand_path("queries/{queryId}:run", {"queryId": query_id})
        query: list[tuple[str, str]] = []
        append_query(query, "synchronous", synchronous)
        url = build_url(self._base_url, path, query)
        data = request(
            url,
            method="POST",
            credentials=self._credentials,
            body=body,
            session=self._session,
        )
        return deserialize_report(data)


class ChannelGrouping(TypedDict, total=False):
    """A channel grouping defines a set of rules that can be used to
    categorize events in a path report.
    """

    #: The name to apply to an event that does not match any of the rules in
    #: the channel grouping.
    fallbackName: str
    #: Channel Grouping name.
    name: str
    #: Rules within Channel Grouping. There is a limit of 100 rules that can
    #: be set per channel grouping.
    rules: list[Rule]


class DataRange(TypedDict, total=False):
    """Report data range."""

    #: The ending date for the data that is shown in the report. Note,
    #: `customEndDate` is required if `range` is `CUSTOM_DATES` and ignored
    #: otherwise.
    customEndDate: Date
    #: The starting data for the data that is shown in the report. Note,
    #: `customStartDate` is required if `range` is `CUSTOM_DATES` and ignored
    #: otherwise.
    customStartDate: Date
    #: Report data range used to generate the report.
    range: Literal["RANGE_UNSPECIFIED", "CUSTOM_DATES", "CURRENT_DAY", "PREVIOUS_DAY", "WEEK_TO_DATE", "MONTH_TO_DATE", "QUARTER_TO_DATE", "YEAR_TO_DATE", "PREVIOUS_WEEK", "PREVIOUS_MONTH", "PREVIOUS_QUARTER", "PREVIOUS_YEAR", "LAST_7_DAYS", "LAST_30_DAYS", "LAST_90_DAYS", "LAST_365_DAYS", "ALL_TIME", "LAST_14_DAYS", "LAST_60_DAYS"]


class Date(TypedDict, total=False):
    """Represents a whole or partial calendar date, such as a birthday. The
    time of day and time zone are either specified elsewhere or are
    insignificant. The date is relative to the Gregorian Calendar. This can
    represent one of the following: * A full date, with non-zero year,
    month, and day values. * A month and day, with a zero year (for example,
    an anniversary). * A year on its own, with a zero month and a zero day.
    * A year and month, with a zero day (for example, a credit card
    expiration date). Related types: * google.type.TimeOfDay *
    google.type.DateTime * google.protobuf.Timestamp
    """

    #: Day of a month. Must be from 1 to 31 and valid for the year and month,
    #: or 0 to specify a year by itself or a year and month where the day
    #: isn't significant.
    day: int
    #: Month of a year. Must be from 1 to 12, or 0 to specify a year without
    #: a month and day.
    month: int
    #: Year of the date. Must be from 1 to 9999, or 0 to specify a date
    #: without a year.
    year: int


class DisjunctiveMatchStatement(TypedDict, total=False):
    """DisjunctiveMatchStatement that OR's all contained filters."""

    #: Filters. There is a limit of 100 filters that can be set per
    #: disjunctive match statement.
    eventFilters: list[EventFilter]


class EventFilter(TypedDict, total=False):
    """Defines the type of filter to be applied to the path, a DV360 event
    dimension filter.
    """

    #: Filter on a dimension.
    dimensionFilter: PathQueryOptionsFilter


class FilterPair(TypedDict, total=False):
    """Filter used to match traffic data in your report."""

    #: Filter type.
    type: str
    #: Filter value.
    value: str


class ListQueriesResponse(TypedDict, total=False):
    #: A token, which can be sent as page_token to retrieve the next page of
    #: queries. If this field is omitted, there are no subsequent pages.
    nextPageToken: str
    #: The list of queries.
    queries: list[Query]


def serialize_list_queries_response(data: ListQueriesResponse) -> dict[str, Any]:
    result: dict[str, Any] = dict(data)
    if data.get("queries") is not None:
        result["queries"] = [serialize_query(item) for item in data["queries"]]
    return result


def deserialize_list_queries_response(data: dict[str, Any]) -> ListQueriesResponse:
    result: dict[str, Any] = dict(data)
    if data.get("queries") is not None:
        result["queries"] = [deserialize_query(item) for item in data["queries"]]
    return cast(ListQueriesResponse, result)


class ListReportsResponse(TypedDict, total=False):
    #: A token, which can be sent as page_token to retrieve the next page of
    #: reports. If this field is omitted, there are no subsequent pages.
    nextPageToken: str
    #: Retrieved reports.
    reports: list[Report]


def serialize_list_reports_response(data: ListReportsResponse) -> dict[str, Any]:
    result: dict[str, Any] = dict(data)
    if data.get("reports") is not None:
        result["reports"] = [serialize_report(item) for item in data["reports"]]
    return result


def deserialize_list_reports_response(data: dict[str, Any]) -> ListReportsResponse:
    result: dict[str, Any] = dict(data)
    if data.get("reports") is not None:
        result["reports"] = [deserialize_report(item) for item in data["reports"]]
    return cast(ListReportsResponse, result)


class Options(TypedDict, total=False):
    """Additional query options."""

    #: Set to true and filter your report by `FILTER_INSERTION_ORDER` or
    #: `FILTER_LINE_ITEM` to include data for audience lists specifically
    #: targeted by those items.
    includeOnlyTargetedUserLists: bool
    #: Options that contain Path Filters and Custom Channel Groupings.
    pathQueryOptions: PathQueryOptions


class Parameters(TypedDict, total=False):
    """Parameters of a query or report."""

    #: Filters used to match traffic data in your report.
    filters: list[FilterPair]
    #: Data is grouped by the filters listed in this field.
    groupBys: list[str]
    #: Metrics to include as columns in your report.
    metrics: list[str]
    #: Additional query options.
    options: Options
    #: The type of the report. The type of the report will dictate what
    #: dimesions, filters, and metrics can be used.
    type: Literal["REPORT_TYPE_UNSPECIFIED", "STANDARD", "INVENTORY_AVAILABILITY", "AUDIENCE_COMPOSITION", "FLOODLIGHT", "YOUTUBE", "GRP", "YOUTUBE_PROGRAMMATIC_GUARANTEED", "REACH", "UNIQUE_REACH_AUDIENCE", "FULL_PATH", "PATH_ATTRIBUTION"]


class PathFilter(TypedDict, total=False):
    """Path filters specify which paths to include in a report. A path is the
    result of combining DV360 events based on User ID to create a workflow
    of users' actions. When a path filter is set, the resulting report will
    only include paths that match the specified event at the specified
    position. All other paths will be excluded.
    """

    #: Filter on an event to be applied to some part of the path.
    eventFilters: list[EventFilter]
    #: The position of the path the filter should match to (first, last, or
    #: any event in path).
    pathMatchPosition: Literal["PATH_MATCH_POSITION_UNSPECIFIED", "ANY", "FIRST", "LAST"]


class PathQueryOptions(TypedDict, total=False):
    """Path Query Options for Report Options."""

    #: Custom Channel Groupings.
    channelGrouping: ChannelGrouping
    #: Path Filters. There is a limit of 100 path filters that can be set per
    #: report.
    pathFilters: list[PathFilter]


class PathQueryOptionsFilter(TypedDict, total=False):
    """Dimension filter on path events."""

    #: Dimension the filter is applied to.
    filter: str
    #: Match logic of the filter.
    match: Literal["UNKNOWN", "EXACT", "PARTIAL", "BEGINS_WITH", "WILDCARD_EXPRESSION"]
    #: Values to filter on.
    values: list[str]


class Query(TypedDict, total=False):
    """Represents a query."""

    #: Query metadata.
    metadata: QueryMetadata
    #: Query parameters.
    params: Parameters
    #: Output only. Query ID.
    queryId: int
    #: Information on how often and when to run a query. If `ONE_TIME` is set
    #: to the frequency field, the query will only be run at the time of
    #: creation.
    schedule: QuerySchedule


def serialize_query(data: Query) -> dict[str, Any]:
    result: dict[str, Any] = dict(data)
    if data.get("queryId") is not None:
        result["queryId"] = serialize_int64(data["queryId"])
    return result


def deserialize_query(data: dict[str, Any]) -> Query:
    result: dict[str, Any] = dict(data)
    if data.get("queryId") is not None:
        result["queryId"] = deserialize_int64(data["queryId"])
    return cast(Query, result)


class QueryMetadata(TypedDict, total=False):
    """Query metadata."""

    #: Range of report data. All reports will be based on the same time zone
    #: as used by the advertiser.
    dataRange: DataRange
    #: Format of the generated report.
    format: Literal["FORMAT_UNSPECIFIED", "CSV", "XLSX"]
    #: Whether to send an email notification when a report is ready. Defaults
    #: to false.
    sendNotification: bool
    #: List of email addresses which are sent email notifications when the
    #: report is finished. Separate from send_notification.
    shareEmailAddress: list[str]
    #: Query title. It is used to name the reports generated from this query.
    title: str


class QuerySchedule(TypedDict, total=False):
    """Information on when and how frequently to run a query."""

    #: Date to periodically run the query until. Not applicable to `ONE_TIME`
    #: frequency.
    endDate: Date
    #: How often the query is run.
    frequency: Literal["FREQUENCY_UNSPECIFIED", "ONE_TIME", "DAILY", "WEEKLY", "SEMI_MONTHLY", "MONTHLY", "QUARTERLY", "YEARLY"]
    #: Canonical timezone code for report generation time. Defaults to
    #: `America/New_York`.
    nextRunTimezoneCode: str
    #: When to start running the query. Not applicable to `ONE_TIME`
    #: frequency.
    startDate: Date


class Report(TypedDict, total=False):
    """Represents a report."""

    #: Key used to identify a report.
    key: ReportKey
    #: Report metadata.
    metadata: ReportMetadata
    #: Report parameters.
    params: Parameters


def serialize_report(data: Report) -> dict[str, Any]:
    result: dict[str, Any] = dict(data)
    if data.get("key") is not None:
        result["key"] = serialize_report_key(data["key"])
    if data.get("metadata") is not None:
        result["metadata"] = serialize_report_metadata(data["metadata"])
    return result


def deserialize_report(data: dict[str, Any]) -> Report:
    result: dict[str, Any] = dict(data)
    if data.get("key") is not None:
        result["key"] = deserialize_report_key(data["key"])
    if data.get("metadata") is not None:
        result["metadata"] = deserialize_report_metadata(data["metadata"])
    return cast(Report, result)


class ReportKey(TypedDict, total=False):
    """Key used to identify a report."""

    #: Output only. Query ID.
    queryId: int
    #: Output only. Report ID.
    reportId: int


def serialize_report_key(data: ReportKey) -> dict[str, Any]:
    result: dict[str, Any] = dict(data)
    if data.get("queryId") is not None:
        result["queryId"] = serialize_int64(data["queryId"])
    if data.get("reportId") is not None:
        result["reportId"] = serialize_int64(data["reportId"])
    return result


def deserialize_report_key(data: dict[str, Any]) -> ReportKey:
    result: dict[str, Any] = dict(data)
    if data.get("queryId") is not None:
        result["queryId"] = deserialize_int64(data["queryId"])
    if data.get("reportId") is not None:
        result["reportId"] = deserialize_int64(data["reportId"])
    return cast(ReportKey, result)


class ReportMetadata(TypedDict, total=False):
    """Report metadata."""

    #: Output only. The path to the location in Google Cloud Storage where
    #: the report is stored.
    googleCloudStoragePath: str
    #: The ending time for the data that is shown in the report.
    reportDataEndDate: Date
    #: The starting time for the data that is shown in the report.
    reportDataStartDate: Date
    #: Report status.
    status: ReportStatus


def serialize_report_metadata(data: ReportMetadata) -> dict[str, Any]:
    result: dict[str, Any] = dict(data)
    if data.get("status") is not None:
        result["status"] = serialize_report_status(data["status"])
    return result


def deserialize_report_metadata(data: dict[str, Any]) -> ReportMetadata:
    result: dict[str, Any] = dict(data)
    if data.get("status") is not None:
        result["status"] = deserialize_report_status(data["status"])
    return cast(ReportMetadata, result)


class ReportStatus(TypedDict, total=False):
    """Report status."""

    #: Output only. The time when this report either completed successfully
    #: or failed.
    finishTime: datetime
    #: The file type of the report.
    format: Literal["FORMAT_UNSPECIFIED", "CSV", "XLSX"]
    #: Output only. The state of the report.
    state: Literal["STATE_UNSPECIFIED", "QUEUED", "RUNNING", "DONE", "FAILED"]


def serialize_report_status(data: ReportStatus) -> dict[str, Any]:
    result: dict[str, Any] = dict(data)
    if data.get("finishTime") is not None:
        result["finishTime"] = serialize_datetime(data["finishTime"])
    return result


def deserialize_report_status(data: dict[str, Any]) -> ReportStatus:
    result: dict[str, Any] = dict(data)
    if data.get("finishTime") is not None:
        result["finishTime"] = deserialize_datetime(data["finishTime"])
    return cast(ReportStatus, result)


class Rule(TypedDict, total=False):
    """A Rule defines a name, and a boolean expression in [conjunctive normal
    form] (http://mathworld.wolfram.com/ConjunctiveNormalForm.html){.external}
    that can be applied to a path event to determine if that name should be
    applied.
    """

    #: DisjunctiveMatchStatements within a Rule. DisjunctiveMatchStatement
    #: OR's all contained filters.
    disjunctiveMatchStatements: list[DisjunctiveMatchStatement]
    #: Rule name.
    name: str


class RunQueryRequest(TypedDict, total=False):
    """Request to run a stored query to generate a report."""

    #: Report data range used to generate the report. If unspecified, the
    #: original parent query's data range is used.
    dataRange: DataRange

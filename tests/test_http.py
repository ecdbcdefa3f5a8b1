"""Tests for URL construction and request dispatch.

No network access: requests go through the recording session from conftest.
"""

from datetime import datetime, timezone

import pytest
import requests
from google.auth.credentials import AnonymousCredentials
from google.auth.transport.requests import AuthorizedSession

from pdum.gapi.base import append_query, build_url, expand_path, request, serialize_datetime
from pdum.gapi.base import http
from pdum.gapi.types import GoogleApiError


def test_expand_path_reserved_keeps_slashes():
    assert expand_path("v2/{+parent}/keys", {"parent": "projects/p/locations/global"}) == (
        "v2/projects/p/locations/global/keys"
    )


def test_expand_path_simple_encodes_value():
    assert expand_path("v1/widgets/{widgetId}", {"widgetId": "a/b"}) == "v1/widgets/a%2Fb"


def test_expand_path_stringifies_numbers():
    assert expand_path("queries/{queryId}", {"queryId": 42}) == "queries/42"


def test_build_url():
    assert build_url("https://x.example.com/", "v1/a") == "https://x.example.com/v1/a"
    assert build_url("https://x.example.com/", "v1/a", []) == "https://x.example.com/v1/a"
    assert build_url("https://x.example.com/", "v1/a", [("a", "1"), ("b", "x y")]) == (
        "https://x.example.com/v1/a?a=1&b=x+y"
    )


def test_append_query_skips_none():
    query = []
    append_query(query, "pageToken", None)
    assert query == []


def test_append_query_repeats_lists_and_formats_booleans():
    query = []
    append_query(query, "filter", ["a", "b"])
    append_query(query, "showDeleted", True)
    append_query(query, "pageSize", 10)
    assert query == [("filter", "a"), ("filter", "b"), ("showDeleted", "true"), ("pageSize", "10")]


def test_append_query_applies_serializer():
    query = []
    append_query(query, "since", datetime(2024, 1, 1, tzinfo=timezone.utc), serialize_datetime)
    assert query == [("since", "2024-01-01T00:00:00Z")]


def test_request_sends_json_body(session):
    session.respond({"ok": True})

    result = request("https://x.example.com/v1/a", method="POST", body={"a": 1}, session=session)

    assert result == {"ok": True}
    call = session.last
    assert call["method"] == "POST"
    assert call["url"] == "https://x.example.com/v1/a"
    assert call["json"] == {"a": 1}
    assert call["timeout"] > 0


def test_request_without_body_sends_no_json(session):
    session.respond({})
    request("https://x.example.com/v1/a", session=session, headers={"X-Test": "1"})
    assert "json" not in session.last
    assert session.last["headers"] == {"X-Test": "1"}


def test_request_empty_response_is_empty_dict(session):
    session.respond(status=204, content=b"")
    assert request("https://x.example.com/v1/a", method="DELETE", session=session) == {}


def test_request_non_json_returns_bytes(session):
    session.respond(content=b"a,b\n1,2\n", content_type="text/csv")
    assert request("https://x.example.com/report.csv", session=session) == b"a,b\n1,2\n"


def test_request_raises_google_api_error(session):
    session.respond(
        {"error": {"code": 404, "message": "Widget not found", "status": "NOT_FOUND", "details": [{"x": 1}]}},
        status=404,
    )

    with pytest.raises(GoogleApiError) as excinfo:
        request("https://x.example.com/v1/missing", session=session)

    error = excinfo.value
    assert error.status_code == 404
    assert error.reason == "NOT_FOUND"
    assert error.message == "Widget not found"
    assert error.details == [{"x": 1}]
    assert error.url == "https://x.example.com/v1/missing"
    assert not error.transient
    assert str(error) == "404 NOT_FOUND: Widget not found"


def test_error_oauth_form(session):
    session.respond({"error": "invalid_grant", "error_description": "Token expired"}, status=400)

    with pytest.raises(GoogleApiError) as excinfo:
        request("https://oauth2.example.com/token", session=session)

    assert excinfo.value.reason == "invalid_grant"
    assert excinfo.value.message == "Token expired"


def test_error_plain_text(session):
    session.respond(content=b"upstream unavailable", status=503, content_type="text/plain")

    with pytest.raises(GoogleApiError) as excinfo:
        request("https://x.example.com/v1/a", session=session)

    assert excinfo.value.message == "upstream unavailable"
    assert excinfo.value.reason == "Service Unavailable"
    assert excinfo.value.transient


def test_request_opens_session_when_none_given(monkeypatch, session):
    opened = []

    def fake_open(credentials):
        opened.append(credentials)
        return session

    monkeypatch.setattr(http, "_open_session", fake_open)
    session.respond({"a": 1})

    assert request("https://x.example.com/v1/a") == {"a": 1}
    assert opened == [None]


def test_open_session_types():
    assert not isinstance(http._open_session(None), AuthorizedSession)
    assert isinstance(http._open_session(None), requests.Session)
    assert isinstance(http._open_session(AnonymousCredentials()), AuthorizedSession)

"""Shared fixtures: a recording HTTP session and the sample Discovery document."""

import json
from http import HTTPStatus
from pathlib import Path

import pytest
import requests

FIXTURES = Path(__file__).parent / "fixtures"


class FakeSession(requests.Session):
    """A ``requests.Session`` that records requests and replays queued responses."""

    def __init__(self):
        super().__init__()
        self.calls = []
        self._responses = []

    def respond(self, payload=None, *, status=200, content=None, content_type="application/json"):
        response = requests.Response()
        response.status_code = status
        response.reason = HTTPStatus(status).phrase
        response.encoding = "utf-8"
        if payload is not None:
            response._content = json.dumps(payload).encode("utf-8")
        else:
            response._content = content or b""
        response.headers["Content-Type"] = content_type
        self._responses.append(response)
        return self

    def request(self, method, url, **kwargs):
        self.calls.append({"method": method, "url": url, **kwargs})
        if not self._responses:
            raise AssertionError(f"Unexpected request: {method} {url}")
        response = self._responses.pop(0)
        response.url = url
        return response

    @property
    def last(self):
        return self.calls[-1]


@pytest.fixture
def session():
    return FakeSession()


@pytest.fixture
def sample_document():
    return json.loads((FIXTURES / "sample_discovery.json").read_text(encoding="utf-8"))

"""Test configuration and fixtures."""

from __future__ import annotations

import json
from typing import Any
from urllib.parse import urlsplit

import pytest
import requests
from requests.adapters import BaseAdapter
from requests.structures import CaseInsensitiveDict

from log_search_client.api.client import LogApiClient
from log_search_client.stores.storage import InMemoryStorage

BASE_URL = "http://logs.test"


class FakeBackend(BaseAdapter):
    """Transport adapter answering requests from canned per-path responses."""

    def __init__(self) -> None:
        super().__init__()
        self.routes: dict[str, tuple[int, str, Any]] = {}
        self.received: list[requests.PreparedRequest] = []
        self.timeouts: list[Any] = []

    def reply(self, path: str, body: Any, *, status: int = 200, reason: str = "OK") -> None:
        self.routes[path] = (status, reason, body)

    def send(self, request: requests.PreparedRequest, **kwargs: Any) -> requests.Response:
        self.received.append(request)
        self.timeouts.append(kwargs.get("timeout"))
        path = urlsplit(request.url or "").path
        status, reason, body = self.routes.get(path, (404, "Not Found", "no route"))

        resp = requests.Response()
        resp.status_code = status
        resp.reason = reason
        resp.url = request.url or ""
        resp.request = request
        resp.encoding = "utf-8"
        if isinstance(body, str):
            resp._content = body.encode("utf-8")
            resp.headers = CaseInsensitiveDict({"Content-Type": "text/plain"})
        else:
            resp._content = json.dumps(body).encode("utf-8")
            resp.headers = CaseInsensitiveDict({"Content-Type": "application/json"})
        return resp

    def close(self) -> None:
        pass


@pytest.fixture
def backend() -> FakeBackend:
    """Provide an empty fake backend; tests register the responses they need."""
    return FakeBackend()


@pytest.fixture
def client(backend: FakeBackend) -> LogApiClient:
    """Provide a client whose session is served by the fake backend."""
    session = requests.Session()
    session.mount(BASE_URL, backend)
    return LogApiClient(BASE_URL, session=session)


@pytest.fixture
def storage() -> InMemoryStorage:
    """Provide an empty in-memory key/value storage."""
    return InMemoryStorage()

from __future__ import annotations

import json as jsonlib
from typing import Any, Dict, List

import pytest
import requests

from hue_core import Bridge, HueClient


class DummyResponse:
    def __init__(self, payload: Any = None, status: int = 200, text: str | None = None) -> None:
        self._payload = payload
        self.status_code = status
        self.text = text if text is not None else jsonlib.dumps(payload)

    def json(self) -> Any:
        return jsonlib.loads(self.text)

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.HTTPError(f"HTTP {self.status_code}")


class FakeSession:
    """Stands in for requests.Session and records every call."""

    def __init__(self) -> None:
        self.headers: Dict[str, str] = {}
        self.calls: List[Dict[str, Any]] = []
        self.responses: List[Any] = []
        self.closed = False

    def queue(self, response: Any) -> None:
        self.responses.append(response)

    def _next(self) -> DummyResponse:
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response

    def get(self, url: str, headers: Dict[str, Any] | None = None) -> DummyResponse:
        self.calls.append({"method": "GET", "url": url, "headers": headers})
        return self._next()

    def post(self, url: str, headers: Dict[str, Any] | None = None, json: Any = None) -> DummyResponse:
        self.calls.append({"method": "POST", "url": url, "headers": headers, "json": json})
        return self._next()

    def close(self) -> None:
        self.closed = True


@pytest.fixture
def session() -> FakeSession:
    return FakeSession()


@pytest.fixture
def client(session: FakeSession) -> HueClient:
    return HueClient(session=session)


@pytest.fixture
def bridge(client: HueClient) -> Bridge:
    return Bridge("192.168.1.2", "user", client=client)

from __future__ import annotations

import json
from typing import Any, Callable

import httpx
import pytest

from device_portal.adapters.http_client import HttpTransport
from device_portal.core.config import AppSettings
from device_portal.core.domain.connection import Connection, Credentials


class RecordingTransport:
    """In-memory DeviceTransport: returns canned bodies and records paths."""

    def __init__(self, connection: Connection, credentials: Credentials, bodies: dict[str, str | None]) -> None:
        self.connection = connection
        self.credentials = credentials
        self.bodies = bodies
        self.calls: list[str] = []

    async def get(self, path: str) -> str | None:
        self.calls.append(path)
        return self.bodies.get(path)


class DeviceStub:
    """Fake device behind `httpx.MockTransport`.

    Routes map a path to a JSON-serializable payload, a raw string body or an
    `httpx.Response`. Every request is recorded.
    """

    def __init__(self) -> None:
        self.routes: dict[str, Any] = {}
        self.requests: list[httpx.Request] = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if request.url.path not in self.routes:
            return httpx.Response(404, text="")
        payload = self.routes[request.url.path]
        if isinstance(payload, httpx.Response):
            return payload
        if isinstance(payload, str):
            return httpx.Response(200, text=payload)
        return httpx.Response(200, text=json.dumps(payload))

    def factory(self) -> Callable[[Connection, Credentials, AppSettings], HttpTransport]:
        mock = httpx.MockTransport(self.handler)

        def build(connection: Connection, credentials: Credentials, settings: AppSettings) -> HttpTransport:
            return HttpTransport(connection, credentials, settings, http_transport=mock)

        return build


@pytest.fixture
def settings() -> AppSettings:
    return AppSettings(_env_file=None)


@pytest.fixture
def connection() -> Connection:
    return Connection(host="192.168.1.50", port=8080)


@pytest.fixture
def credentials() -> Credentials:
    return Credentials.basic("Administrator", "p@ssw0rd")


@pytest.fixture
def device() -> DeviceStub:
    return DeviceStub()

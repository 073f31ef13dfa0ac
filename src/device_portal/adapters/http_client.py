"""httpx wrapper bound to one device.

Responsibility:
- Build `httpx.AsyncClient` instances with the configured timeout, headers,
  TLS policy and authentication.
- Expose `HttpTransport`, the `DeviceTransport` implementation the client uses.
"""

from __future__ import annotations

import logging
from typing import Generator

import httpx

from device_portal.core.config import AppSettings
from device_portal.core.domain.connection import Connection, Credentials
from device_portal.core.errors import PreconditionFailedError

logger = logging.getLogger(__name__)


class BearerAuth(httpx.Auth):
    """Adds `Authorization: Bearer <token>` to every request."""

    def __init__(self, token: str) -> None:
        self._token = token

    def auth_flow(self, request: httpx.Request) -> Generator[httpx.Request, httpx.Response, None]:
        request.headers["Authorization"] = f"Bearer {self._token}"
        yield request


def build_auth(credentials: Credentials) -> httpx.Auth:
    if credentials.token is not None:
        return BearerAuth(credentials.token.get_secret_value())
    return httpx.BasicAuth(credentials.username or "", credentials.password.get_secret_value())


def build_async_client(
    settings: AppSettings | None = None,
    *,
    connection: Connection,
    credentials: Credentials,
    extra_headers: dict[str, str] | None = None,
    http_transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Create an `httpx.AsyncClient` pointed at the device's base URL.

    `http_transport` replaces the network layer (e.g. `httpx.MockTransport`).
    """

    settings = settings or AppSettings()
    headers: dict[str, str] = {
        "User-Agent": settings.user_agent,
        "Accept": "application/json",
    }
    if extra_headers:
        headers.update(extra_headers)
    return httpx.AsyncClient(
        base_url=connection.base_url,
        auth=build_auth(credentials),
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        verify=settings.verify_tls,
        headers=headers,
        transport=http_transport,
    )


class HttpTransport:
    """Transport bound to a single (connection, credentials) pair.

    Each `get` opens a short-lived `httpx.AsyncClient`, so dropping a transport
    never leaks sockets and concurrent fetches do not share connection state.
    """

    def __init__(
        self,
        connection: Connection | None,
        credentials: Credentials | None,
        settings: AppSettings | None = None,
        *,
        http_transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        if connection is None:
            raise PreconditionFailedError("Set connection information before initializing the transport.")
        if credentials is None:
            raise PreconditionFailedError("Set credentials before initializing the transport.")

        self.connection = connection
        self.credentials = credentials
        self._settings = settings or AppSettings()
        self._http_transport = http_transport

    async def get(self, path: str) -> str | None:
        logger.debug("GET %s%s", self.connection.base_url, path)
        async with build_async_client(
            self._settings,
            connection=self.connection,
            credentials=self.credentials,
            http_transport=self._http_transport,
        ) as client:
            response = await client.get(path)

        response.raise_for_status()
        body = response.text
        if not body or not body.strip():
            return None
        return body

    def __repr__(self) -> str:
        return f"HttpTransport({self.connection.base_url!r})"

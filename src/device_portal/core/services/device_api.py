"""Device portal API client.

`DeviceApiClient` owns the connection/credentials pair and the transport
derived from it, and turns the portal's read endpoints into typed results.

Lifecycle:
- Uninitialized: no connection or no credentials; fetches raise
  `PreconditionFailedError`.
- Configured: both set and a transport built. Replacing either value rebuilds
  the transport; the client can be reused indefinitely.

Fetches that are already running keep the transport they started with, so
reconfiguring a client while requests are in flight is best-effort. Use
`with_connection`/`with_credentials` (or `create_client`) to get a separate
client instead of mutating a shared one.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Callable

from device_portal.adapters.http_client import HttpTransport
from device_portal.adapters.json_decoder import decode_model
from device_portal.core.config import AppSettings
from device_portal.core.domain.connection import Connection, Credentials
from device_portal.core.domain.models import (
    AppXPackages,
    DeviceOverview,
    IpConfig,
    MachineName,
    SoftwareInfo,
)
from device_portal.core.domain.results import FetchResult, FetchStatus, ModelT
from device_portal.core.errors import (
    InvalidArgumentError,
    PreconditionFailedError,
    ResponseDecodeError,
)
from device_portal.core.interfaces.transport import DeviceTransport

logger = logging.getLogger(__name__)

INSTALLED_APPX_PACKAGES_PATH = "/api/appx/packagemanager/packages"
IP_CONFIG_PATH = "/api/networking/ipconfig"
MACHINE_NAME_PATH = "/api/os/machinename"
SOFTWARE_INFO_PATH = "/api/os/info"

TransportFactory = Callable[[Connection, Credentials, AppSettings], DeviceTransport]


def _default_transport_factory(
    connection: Connection,
    credentials: Credentials,
    settings: AppSettings,
) -> DeviceTransport:
    return HttpTransport(connection, credentials, settings)


class DeviceApiClient:
    """Client for the device portal REST API.

    Build it empty and call `initialize`, or pass both `connection` and
    `credentials` to the constructor.
    """

    def __init__(
        self,
        connection: Connection | None = None,
        credentials: Credentials | None = None,
        *,
        settings: AppSettings | None = None,
        transport_factory: TransportFactory | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self._transport_factory = transport_factory or _default_transport_factory
        self._connection: Connection | None = None
        self._credentials: Credentials | None = None
        self._transport: DeviceTransport | None = None

        if connection is not None or credentials is not None:
            self.initialize(connection, credentials)

    # -- configuration -----------------------------------------------------

    @property
    def connection(self) -> Connection | None:
        return self._connection

    @connection.setter
    def connection(self, connection: Connection) -> None:
        self.set_connection(connection)

    @property
    def credentials(self) -> Credentials | None:
        return self._credentials

    @credentials.setter
    def credentials(self, credentials: Credentials) -> None:
        self.set_credentials(credentials)

    @property
    def settings(self) -> AppSettings:
        return self._settings

    @property
    def is_configured(self) -> bool:
        return self._transport is not None

    def initialize(self, connection: Connection | None, credentials: Credentials | None) -> None:
        """Set connection and credentials together and build the transport."""

        if connection is None:
            raise InvalidArgumentError("connection")
        if credentials is None:
            raise InvalidArgumentError("credentials")

        self._reinitialize_transport(connection, credentials)

    def set_connection(self, connection: Connection | None) -> None:
        """Replace the connection and rebuild the transport.

        Raises `PreconditionFailedError` when no credentials are set yet; the
        connection is still kept, so a later `set_credentials` completes setup.
        """

        if connection is None:
            raise InvalidArgumentError("connection")

        self._reinitialize_transport(connection, self._credentials)

    def set_credentials(self, credentials: Credentials | None) -> None:
        """Replace the credentials and rebuild the transport.

        Raises `PreconditionFailedError` when no connection is set yet; the
        credentials are still kept.
        """

        if credentials is None:
            raise InvalidArgumentError("credentials")

        self._reinitialize_transport(self._connection, credentials)

    def with_connection(self, connection: Connection) -> "DeviceApiClient":
        """New client sharing these credentials and settings, pointed at `connection`."""

        return DeviceApiClient(
            connection,
            self._credentials,
            settings=self._settings,
            transport_factory=self._transport_factory,
        )

    def with_credentials(self, credentials: Credentials) -> "DeviceApiClient":
        """New client sharing this connection and settings, using `credentials`."""

        return DeviceApiClient(
            self._connection,
            credentials,
            settings=self._settings,
            transport_factory=self._transport_factory,
        )

    def _reinitialize_transport(self, connection: Connection | None, credentials: Credentials | None) -> None:
        # Nothing is assigned if the factory fails; a missing input is stored before raising.
        if connection is None or credentials is None:
            self._connection = connection
            self._credentials = credentials
            missing = "connection information" if connection is None else "credentials"
            raise PreconditionFailedError(f"Set {missing} before initializing the transport.")

        transport = self._transport_factory(connection, credentials, self._settings)
        self._connection = connection
        self._credentials = credentials
        self._transport = transport
        logger.debug("Transport rebuilt for %s", connection.base_url)

    def _require_transport(self) -> DeviceTransport:
        if self._transport is None:
            raise PreconditionFailedError(
                "Client is not initialized; set connection and credentials first."
            )
        return self._transport

    # -- fetching ------------------------------------------------------------

    async def fetch(self, path: str, model: type[ModelT]) -> FetchResult[ModelT]:
        """GET `path` and decode it into `model`, keeping the decode outcome.

        Network and HTTP status errors propagate from the transport.
        """

        transport = self._require_transport()
        body = await transport.get(path)
        return decode_model(body, model, path=path)

    async def get_deserialized(self, path: str, model: type[ModelT]) -> ModelT:
        """GET `path` and return the decoded model, or `model.empty()`.

        With `strict_decoding` enabled a malformed body raises
        `ResponseDecodeError` instead of producing the empty value.
        """

        result = await self.fetch(path, model)
        if result.status is FetchStatus.DECODE_ERROR and self._settings.strict_decoding:
            raise ResponseDecodeError(path, result.error or "invalid response body")
        return result.value

    async def get_machine_name(self) -> MachineName:
        return await self.get_deserialized(MACHINE_NAME_PATH, MachineName)

    async def get_software_info(self) -> SoftwareInfo:
        return await self.get_deserialized(SOFTWARE_INFO_PATH, SoftwareInfo)

    async def get_ip_config(self) -> IpConfig:
        return await self.get_deserialized(IP_CONFIG_PATH, IpConfig)

    async def get_installed_packages(self) -> AppXPackages:
        return await self.get_deserialized(INSTALLED_APPX_PACKAGES_PATH, AppXPackages)

    async def get_overview(self) -> DeviceOverview:
        """Fetch all four endpoints concurrently."""

        machine_name, software_info, ip_config, packages = await asyncio.gather(
            self.get_machine_name(),
            self.get_software_info(),
            self.get_ip_config(),
            self.get_installed_packages(),
        )
        return DeviceOverview(
            machine_name=machine_name,
            software_info=software_info,
            ip_config=ip_config,
            installed_packages=packages,
        )

    def __repr__(self) -> str:
        target = self._connection.base_url if self._connection else None
        return f"DeviceApiClient(connection={target!r}, configured={self.is_configured})"


def create_client(
    connection: Connection,
    credentials: Credentials,
    *,
    settings: AppSettings | None = None,
    transport_factory: TransportFactory | None = None,
) -> DeviceApiClient:
    """Build a configured client from an immutable connection/credentials pair."""

    return DeviceApiClient(
        connection,
        credentials,
        settings=settings,
        transport_factory=transport_factory,
    )

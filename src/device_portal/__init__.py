"""Async client for the Windows IoT Device Portal REST API."""

from __future__ import annotations

import logging

from device_portal.core.config import AppSettings
from device_portal.core.domain import (
    AppXPackage,
    AppXPackages,
    Connection,
    Credentials,
    DeviceOverview,
    FetchResult,
    FetchStatus,
    IpConfig,
    MachineName,
    SoftwareInfo,
)
from device_portal.core.errors import (
    DevicePortalError,
    InvalidArgumentError,
    PreconditionFailedError,
    ResponseDecodeError,
)
from device_portal.core.services.device_api import DeviceApiClient, create_client

__version__ = "0.1.0"

_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str | int | None = None) -> None:
    """Attach a stream handler to the package logger.

    Without `level`, `AppSettings().log_level` is used.
    """

    level = level if level is not None else AppSettings().log_level
    logger = logging.getLogger(__name__)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_LOG_FORMAT))
        logger.addHandler(handler)
    logger.setLevel(level)


__all__ = [
    "AppSettings",
    "AppXPackage",
    "AppXPackages",
    "Connection",
    "Credentials",
    "DeviceApiClient",
    "DeviceOverview",
    "DevicePortalError",
    "FetchResult",
    "FetchStatus",
    "InvalidArgumentError",
    "IpConfig",
    "MachineName",
    "PreconditionFailedError",
    "ResponseDecodeError",
    "SoftwareInfo",
    "configure_logging",
    "create_client",
]

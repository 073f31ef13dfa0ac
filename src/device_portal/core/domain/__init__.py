"""Domain models and value objects.

Pure data structures (Pydantic v2). The domain layer knows nothing about
HTTP; it only describes what the device reports and how to reach it.
"""

from device_portal.core.domain.connection import Connection, Credentials
from device_portal.core.domain.models import (
    AppXPackage,
    AppXPackages,
    DeviceModel,
    DeviceOverview,
    DhcpInfo,
    IpAddress,
    IpConfig,
    MachineName,
    NetworkAdapter,
    PackageVersion,
    SoftwareInfo,
)
from device_portal.core.domain.results import FetchResult, FetchStatus

__all__ = [
    "AppXPackage",
    "AppXPackages",
    "Connection",
    "Credentials",
    "DeviceModel",
    "DeviceOverview",
    "DhcpInfo",
    "FetchResult",
    "FetchStatus",
    "IpAddress",
    "IpConfig",
    "MachineName",
    "NetworkAdapter",
    "PackageVersion",
    "SoftwareInfo",
]

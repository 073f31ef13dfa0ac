"""Services built on the core contracts."""

from device_portal.core.services.device_api import DeviceApiClient, create_client

__all__ = ["DeviceApiClient", "create_client"]

"""Core interfaces.

Structural contracts (Protocol) implemented by the adapters, so the client
depends on an abstraction rather than on httpx directly.
"""

from device_portal.core.interfaces.transport import DeviceTransport

__all__ = ["DeviceTransport"]

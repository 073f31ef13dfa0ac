"""Transport contract used by `DeviceApiClient`."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class DeviceTransport(Protocol):
    """Minimal contract for talking to a device.

    Rules:
    - `get` is async because it performs network I/O.
    - It returns the raw body text, or None when the device sent no body.
    - Network and HTTP status failures are raised, never turned into None.
    """

    async def get(self, path: str) -> str | None:
        """Issue a GET for `path` relative to the device base URL."""

        ...

"""Error taxonomy for the device portal client.

Only decode problems are recovered locally (see `adapters.json_decoder`).
Everything below surfaces to the caller; network failures are left as the
`httpx.HTTPError` family and are not wrapped.
"""

from __future__ import annotations


class DevicePortalError(Exception):
    """Base class for errors raised by this package."""


class InvalidArgumentError(DevicePortalError, ValueError):
    """A required connection or credentials value was missing."""

    def __init__(self, argument: str) -> None:
        super().__init__(f"{argument} must not be None")
        self.argument = argument


class PreconditionFailedError(DevicePortalError, RuntimeError):
    """The transport was needed before connection and credentials were set."""


class ResponseDecodeError(DevicePortalError):
    """A response body could not be decoded into the expected model.

    Raised only when `AppSettings.strict_decoding` is enabled.
    """

    def __init__(self, path: str, message: str) -> None:
        super().__init__(f"Failed to decode response from {path}: {message}")
        self.path = path

"""I/O adapters: the httpx transport and the response decoder."""

from device_portal.adapters.http_client import HttpTransport, build_async_client, build_auth
from device_portal.adapters.json_decoder import decode_model

__all__ = ["HttpTransport", "build_async_client", "build_auth", "decode_model"]

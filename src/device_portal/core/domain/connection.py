"""Connection and credential value objects.

Both are frozen: replacing one on a client is the only way to change it, and
that replacement is what triggers a transport rebuild.
"""

from __future__ import annotations

from typing import Literal
from urllib.parse import urlsplit

from pydantic import BaseModel, Field, SecretStr, field_validator, model_validator
from pydantic.config import ConfigDict

DEFAULT_PORT = 8080

_DEFAULT_PORTS: dict[str, int] = {"http": DEFAULT_PORT, "https": 443}


class Connection(BaseModel):
    """Network endpoint of the target device."""

    model_config = ConfigDict(frozen=True)

    host: str = Field(
        ...,
        min_length=1,
        description="Hostname or IP address of the device.",
    )
    port: int = Field(
        default=DEFAULT_PORT,
        ge=1,
        le=65535,
        description="TCP port the device portal listens on.",
    )
    scheme: Literal["http", "https"] = Field(
        default="http",
        description="URL scheme used to reach the portal.",
    )

    @field_validator("host")
    @classmethod
    def _strip_host(cls, value: str) -> str:
        host = value.strip().strip("[]")
        if not host:
            raise ValueError("host must not be blank")
        return host

    @property
    def base_url(self) -> str:
        host = f"[{self.host}]" if ":" in self.host else self.host
        return f"{self.scheme}://{host}:{self.port}"

    @classmethod
    def from_url(cls, url: str) -> "Connection":
        """Parse `scheme://host[:port]`; a missing port falls back to the scheme default."""

        parts = urlsplit(url.strip())
        if parts.scheme not in _DEFAULT_PORTS or not parts.hostname:
            raise ValueError(f"Not a device portal URL: {url!r}")
        return cls(
            host=parts.hostname,
            port=parts.port if parts.port is not None else _DEFAULT_PORTS[parts.scheme],
            scheme=parts.scheme,  # type: ignore[arg-type]
        )

    def __str__(self) -> str:
        return self.base_url


class Credentials(BaseModel):
    """Authentication material for the device.

    Either `username`/`password` (HTTP Basic) or a bearer `token`.
    """

    model_config = ConfigDict(frozen=True)

    username: str | None = Field(default=None, description="Portal user name.")
    password: SecretStr = Field(default=SecretStr(""), description="Portal password.")
    token: SecretStr | None = Field(default=None, description="Bearer token.")

    @model_validator(mode="after")
    def _require_identity(self) -> "Credentials":
        if not self.username and self.token is None:
            raise ValueError("credentials need a username or a token")
        return self

    @classmethod
    def basic(cls, username: str, password: str) -> "Credentials":
        return cls(username=username, password=SecretStr(password))

    @classmethod
    def bearer(cls, token: str) -> "Credentials":
        return cls(token=SecretStr(token))

    @property
    def uses_token(self) -> bool:
        return self.token is not None

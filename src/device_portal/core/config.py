"""Client configuration.

Environment variables (pydantic-settings) with the `DEVICE_PORTAL_` prefix,
read from a project `.env` first and then from the per-user config `.env`.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Literal

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

from device_portal.core.domain.connection import DEFAULT_PORT, Connection, Credentials


def get_user_config_dir() -> Path:
    """Per-user configuration directory (cross-platform, no extra dependencies)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "device-portal"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "device-portal"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "device-portal"
    return Path.home() / ".config" / "device-portal"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


class AppSettings(BaseSettings):
    """Central settings for the client and its transport."""

    model_config = SettingsConfigDict(
        env_prefix="DEVICE_PORTAL_",
        extra="ignore",
        case_sensitive=False,
        # Project .env first, then the user-level file.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    http_timeout_seconds: float = Field(
        default=20.0,
        gt=0,
        description="Per-request timeout (seconds).",
    )
    user_agent: str = Field(
        default="device-portal/0.1",
        min_length=1,
        description="User-Agent sent to the device.",
    )
    verify_tls: bool = Field(
        default=False,
        description="Verify the device certificate (portals usually self-sign).",
    )
    strict_decoding: bool = Field(
        default=False,
        description="Raise ResponseDecodeError instead of returning an empty model.",
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="WARNING",
        description="Level used by configure_logging() when none is given.",
    )

    # Optional default target, used by connection()/credentials().
    host: str | None = Field(default=None, description="Device host name or IP.")
    port: int = Field(default=DEFAULT_PORT, ge=1, le=65535)
    scheme: Literal["http", "https"] = Field(default="http")
    username: str | None = Field(default=None)
    password: SecretStr | None = Field(default=None)
    token: SecretStr | None = Field(default=None)

    def connection(self) -> Connection | None:
        if not self.host:
            return None
        return Connection(host=self.host, port=self.port, scheme=self.scheme)

    def credentials(self) -> Credentials | None:
        if self.token is not None:
            return Credentials(token=self.token)
        if self.username:
            return Credentials(
                username=self.username,
                password=self.password or SecretStr(""),
            )
        return None

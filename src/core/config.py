"""Core configuration.

Why here:
- Centralizes environment variables (pydantic-settings) without leaking into the CLI.
- Lets the adapters, the API and the CLI read the same settings consistently.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


def get_user_config_dir() -> Path:
    """Per-user configuration directory (cross-platform, no dependencies)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "dogapi-rpc"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "dogapi-rpc"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "dogapi-rpc"
    return Path.home() / ".config" / "dogapi-rpc"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


class AppSettings(BaseSettings):
    """Central application settings.

    Why pydantic-settings:
    - Typed and validated at the edge (env vars) instead of inside the core.
    - One configuration contract shared by the server, the client and the adapters.
    """

    model_config = SettingsConfigDict(
        env_prefix="DOGAPI_",
        extra="ignore",
        case_sensitive=False,
        # Project .env first (dev), then the per-user config.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    upstream_base_url: str = Field(
        default="https://dog.ceo/api",
        min_length=8,
        description="Base URL of the public dog image API.",
    )
    http_timeout_seconds: float = Field(
        default=10.0,
        gt=0,
        description="Deadline for each upstream request (seconds).",
    )
    user_agent: str = Field(
        default="dogapi-rpc/0.1",
        min_length=1,
        description="User-Agent sent to the upstream API.",
    )

    server_host: str = Field(
        default="0.0.0.0",
        min_length=1,
        description="Interface the RPC server binds to.",
    )
    server_port: int = Field(
        default=50051,
        ge=1,
        le=65535,
        description="Port the RPC server listens on.",
    )

    client_target: str = Field(
        default="localhost:50051",
        min_length=1,
        description="host:port (or full URL) of the RPC server used by the client commands.",
    )
    client_timeout_seconds: float = Field(
        default=10.0,
        gt=0,
        description="Deadline for each client call, propagated to the server.",
    )

    log_level: str = Field(
        default="INFO",
        description="Root logging level (DEBUG, INFO, WARNING, ...).",
    )

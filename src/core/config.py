"""Configuration of the Core.

Why here:
- Centralises environment variables (pydantic-settings) without leaking them
  into the CLI.
- Lets adapters (HTTP client) and the dispatcher read settings consistently.
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
        return base / "trxwire"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "trxwire"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "trxwire"
    return Path.home() / ".config" / "trxwire"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


class AppSettings(BaseSettings):
    """Central application settings.

    Why pydantic-settings:
    - Typed and validated at the edge (env vars) without polluting the Core.
    - A single configuration contract for CLI, dispatcher and adapters.
    """

    model_config = SettingsConfigDict(
        env_prefix="TRXWIRE_",
        extra="ignore",
        case_sensitive=False,
        # Order: project first (dev), then the user's global config.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    http_timeout_seconds: float = Field(
        default=30.0,
        gt=0,
        description="Timeout per request to remote transform servers (seconds).",
    )
    user_agent: str = Field(
        default="trxwire/0.1",
        min_length=1,
        description="User-Agent sent to remote transform servers.",
    )

    default_soft_limit: int = Field(
        default=12,
        ge=0,
        description="Soft result limit placed in outbound requests.",
    )
    default_hard_limit: int = Field(
        default=255,
        ge=0,
        description="Hard result limit placed in outbound requests.",
    )

    dump_messages: bool = Field(
        default=False,
        description="Log raw request/response bodies at debug level.",
    )
    log_level: str = Field(
        default="WARNING",
        description="Root log level (DEBUG, INFO, WARNING, ERROR).",
    )

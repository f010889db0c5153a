"""Plugin configuration.

- Centralizes environment variables (pydantic-settings) for adapters and CLI.
- Resolves the per-user config directory where the session cache lives.
"""

from __future__ import annotations

import os
import sys
from enum import Enum
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class LogLevel(str, Enum):
    """Log levels accepted by the CLI and `BING_TRANSLATOR_LOG_LEVEL`."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


def get_user_config_dir() -> Path:
    """Per-user configuration directory (cross-platform, no extra dependencies)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "bing-translator"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "bing-translator"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "bing-translator"
    return Path.home() / ".config" / "bing-translator"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


class AppSettings(BaseSettings):
    """Central plugin settings.

    Every field can be overridden with a `BING_TRANSLATOR_<FIELD>` variable,
    either in the process environment or in one of the `.env` files.
    """

    model_config = SettingsConfigDict(
        env_prefix="BING_TRANSLATOR_",
        extra="ignore",
        case_sensitive=False,
        # Project first (dev), then the user-wide config.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    http_timeout_seconds: float = Field(
        default=20.0,
        gt=0,
        description="Per-request timeout (seconds).",
    )
    user_agent: str = Field(
        default=(
            "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
            "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
        ),
        min_length=1,
        description="User-Agent sent to Bing (unknown agents get a stripped page without IG).",
    )
    translator_url: str = Field(
        default="https://www.bing.com/translator",
        min_length=8,
        description="Landing page scraped for the session token.",
    )
    session_cache_path: Path | None = Field(
        default=None,
        description="JSON file holding the cached session (defaults to the user config dir).",
    )
    source_icon_url: str = Field(
        default="https://www.bing.com/favicon.ico",
        min_length=1,
        description="Icon displayed in the source footer of every fragment.",
    )
    log_level: LogLevel = Field(
        default=LogLevel.WARNING,
        description="Root log level used by the CLI.",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value: object) -> object:
        return value.upper() if isinstance(value, str) else value

    def resolved_session_cache_path(self) -> Path:
        return self.session_cache_path or get_user_config_dir() / "session.json"

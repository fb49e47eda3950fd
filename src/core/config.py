"""Core configuration.

Notes:
- Environment variables are read through pydantic-settings so the CLI and the
  adapters share one validated contract.
- Values come from `.env` in the working directory first, then from the
  per-user config directory.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def get_user_config_dir() -> Path:
    """Per-user configuration directory (cross-platform, no extra dependencies)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "recipe-scout"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "recipe-scout"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "recipe-scout"
    return Path.home() / ".config" / "recipe-scout"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


def _parse_env_lines(text: str) -> dict[str, str]:
    data: dict[str, str] = {}
    for raw_line in text.splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        if "=" not in line:
            continue
        key, value = line.split("=", 1)
        key = key.strip()
        value = value.strip().strip('"').strip("'")
        if key:
            data[key] = value
    return data


def write_user_env_vars(values: dict[str, str | None], env_path: Path | None = None) -> Path:
    """Create or update variables in the per-user `.env` file.

    None values are skipped so a prompt left blank keeps the stored value.
    """

    env_path = env_path or get_user_env_file()
    env_path.parent.mkdir(parents=True, exist_ok=True)

    existing: dict[str, str] = {}
    if env_path.exists():
        existing = _parse_env_lines(env_path.read_text(encoding="utf-8"))

    existing.update({k: v for k, v in values.items() if v is not None})

    lines = ["# recipe-scout user config (.env)"]
    for key in sorted(existing.keys()):
        lines.append(f"{key}={existing[key]}")
    env_path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return env_path


class AppSettings(BaseSettings):
    """Central application settings."""

    model_config = SettingsConfigDict(
        env_prefix="RECIPE_SCOUT_",
        extra="ignore",
        case_sensitive=False,
        env_ignore_empty=True,
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    catalog_base_url: str = Field(
        default="https://www.themealdb.com/api/json/v1/1",
        min_length=8,
        description="Base URL of the recipe catalog JSON API.",
    )
    http_timeout_seconds: float | None = Field(
        default=None,
        gt=0,
        description="Per-request timeout in seconds. None disables timeouts.",
    )
    user_agent: str = Field(
        default="recipe-scout/0.1 (+https://local)",
        min_length=1,
        description="User-Agent sent to the catalog.",
    )

    filter_debounce_seconds: float = Field(
        default=0.3,
        ge=0.0,
        le=10.0,
        description="Quiet period before an exclusion-term change triggers a new filter run.",
    )

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="WARNING",
        description="Minimum level for the diagnostic log.",
    )
    log_format: Literal["text", "json"] = Field(
        default="text",
        description="'text' renders through rich, 'json' emits one object per line.",
    )

    @field_validator("log_level", "log_format", mode="before")
    @classmethod
    def _normalize_choice(cls, value: object, info) -> object:
        if not isinstance(value, str):
            return value
        value = value.strip()
        return value.upper() if info.field_name == "log_level" else value.lower()

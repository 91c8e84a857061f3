"""Pydantic models for application configuration.

These are process settings (where to store preferences, how loudly to
log), not user preferences; those live in ``SettingsState``.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import platformdirs
from pydantic import BaseModel, Field, field_validator

APP_NAME = "settings_sync"
DEFAULT_FILENAME = "preferences.json"


def default_storage_dir() -> Path:
    """Return the platform config directory for this application."""
    return Path(platformdirs.user_config_dir(APP_NAME))


class AppConfig(BaseModel):
    """Root application configuration."""

    storage_dir: Optional[Path] = Field(
        default=None,
        description="Directory holding the preferences file (None = platform config dir).",
    )
    storage_filename: str = Field(
        default=DEFAULT_FILENAME,
        min_length=1,
        description="Name of the preferences JSON file.",
    )
    log_level: str = Field(
        default="WARNING",
        description="Root log level for CLI and GUI entry points.",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level: {v!r}")
        return level

    @field_validator("storage_filename")
    @classmethod
    def validate_filename(cls, v: str) -> str:
        if Path(v).name != v:
            raise ValueError("storage_filename must be a bare file name")
        return v

    @property
    def storage_path(self) -> Path:
        """Full path of the preferences file."""
        return (self.storage_dir or default_storage_dir()) / self.storage_filename

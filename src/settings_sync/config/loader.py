"""Configuration loader for settings-sync.

Loads an optional JSON configuration file, applies environment overrides
and returns a validated ``AppConfig``. Uses module-level caching so each
file is only parsed once per process.
"""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Optional

from pydantic import ValidationError

from settings_sync.config.models import AppConfig
from settings_sync.domain.errors import ConfigurationError

# Module-level cache
_config_cache: dict[str, AppConfig] = {}

ENV_STORAGE_DIR = "SETTINGS_SYNC_STORAGE_DIR"
ENV_LOG_LEVEL = "SETTINGS_SYNC_LOG_LEVEL"
ENV_CONFIG = "SETTINGS_SYNC_CONFIG"


def _env_overrides() -> dict[str, Any]:
    overrides: dict[str, Any] = {}
    if storage_dir := os.environ.get(ENV_STORAGE_DIR):
        overrides["storage_dir"] = Path(storage_dir).expanduser()
    if log_level := os.environ.get(ENV_LOG_LEVEL):
        overrides["log_level"] = log_level
    return overrides


def load_config(path: Optional[Path] = None) -> AppConfig:
    """Load and validate the application config.

    Parameters
    ----------
    path : Path | None
        Path to a JSON config file. If ``None``, ``$SETTINGS_SYNC_CONFIG``
        is used when set; otherwise only defaults and environment apply.

    Returns
    -------
    AppConfig
        Validated configuration instance.

    Raises
    ------
    ConfigurationError
        If the file is missing, is not valid JSON, or fails validation.
    """
    if path is None and os.environ.get(ENV_CONFIG):
        path = Path(os.environ[ENV_CONFIG])

    overrides = _env_overrides()
    cache_key = f"{path.resolve() if path else '<defaults>'}|{sorted(overrides.items())}"
    if cache_key in _config_cache:
        return _config_cache[cache_key]

    raw: dict[str, Any] = {}
    if path is not None:
        if not path.exists():
            raise ConfigurationError(f"Config file not found: {path}")
        try:
            raw = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            raise ConfigurationError(f"Unable to read config {path}: {exc}") from exc
        if not isinstance(raw, dict):
            raise ConfigurationError(f"Config {path} must contain a JSON object")

    try:
        config = AppConfig.model_validate({**raw, **overrides})
    except ValidationError as err:
        raise ConfigurationError(f"Invalid configuration:\n{err}") from err

    _config_cache[cache_key] = config
    return config


def clear_cache() -> None:
    """Clear the config cache — useful for testing."""
    _config_cache.clear()

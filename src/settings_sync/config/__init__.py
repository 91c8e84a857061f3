"""Application configuration package."""

from settings_sync.config.loader import clear_cache, load_config
from settings_sync.config.models import AppConfig

__all__ = ["AppConfig", "clear_cache", "load_config"]

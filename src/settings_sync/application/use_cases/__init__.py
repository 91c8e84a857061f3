"""Application use cases."""

from settings_sync.application.use_cases.change_preference import ChangeFontScaleUseCase
from settings_sync.application.use_cases.hydrate_settings import HydrateSettingsUseCase

__all__ = ["ChangeFontScaleUseCase", "HydrateSettingsUseCase"]

"""Domain models — public API.

Provides convenient imports for the most commonly used domain entities.
"""

from settings_sync.domain.models.enums import (
    FontScale,
    HydrationOutcome,
    PreferenceKey,
)
from settings_sync.domain.models.hydration import (
    HydrationReport,
    KeyHydration,
    WriteOutcome,
)
from settings_sync.domain.models.settings import (
    PREFERENCE_DEFAULTS,
    SettingsState,
    parse_preference,
)

__all__ = [
    # Enums
    "FontScale",
    "HydrationOutcome",
    "PreferenceKey",
    # Results
    "HydrationReport",
    "KeyHydration",
    "WriteOutcome",
    # State
    "PREFERENCE_DEFAULTS",
    "SettingsState",
    "parse_preference",
]

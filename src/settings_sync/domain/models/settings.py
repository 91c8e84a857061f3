"""Settings state model.

This module defines ``SettingsState``, the immutable snapshot held by the
in-memory store, together with the static registry of known preferences:
their storage keys, value enums and compiled-in defaults.
"""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, Field

from settings_sync.domain.errors import InvalidPreferenceValueError
from settings_sync.domain.models.enums import FontScale, PreferenceKey


# ---------------------------------------------------------------------------
# Preference registry
# ---------------------------------------------------------------------------

# Storage key → attribute on SettingsState
PREFERENCE_FIELDS: Mapping[PreferenceKey, str] = MappingProxyType(
    {
        PreferenceKey.FONT_SCALE: "font_scale",
    }
)

# Storage key → closed value set
PREFERENCE_TYPES: Mapping[PreferenceKey, type[Enum]] = MappingProxyType(
    {
        PreferenceKey.FONT_SCALE: FontScale,
    }
)

PREFERENCE_DEFAULTS: Mapping[PreferenceKey, Enum] = MappingProxyType(
    {
        PreferenceKey.FONT_SCALE: FontScale.DEFAULT,
    }
)


def parse_preference(key: PreferenceKey, value: Any) -> Enum:
    """Validate *value* against the enumerated set of *key*.

    Accepts either an enum member or its string value.

    Raises:
        InvalidPreferenceValueError: If the value is not a member of the set.
    """
    enum_cls = PREFERENCE_TYPES[key]
    if isinstance(value, enum_cls):
        return value
    allowed = tuple(member.value for member in enum_cls)
    # bool/int/None are never valid even if their str() collides
    if not isinstance(value, str):
        raise InvalidPreferenceValueError(key.value, value, allowed)
    try:
        return enum_cls(value)
    except ValueError:
        raise InvalidPreferenceValueError(key.value, value, allowed) from None


# ---------------------------------------------------------------------------
# State snapshot
# ---------------------------------------------------------------------------


class SettingsState(BaseModel):
    """Process-wide preference values plus the hydration flag.

    Snapshots are frozen; the store replaces the whole object on every
    change so subscribers can compare old and new slices safely.
    """

    model_config = ConfigDict(frozen=True)

    font_scale: FontScale = Field(
        default=FontScale.DEFAULT,
        description="Global font scale preference.",
    )
    is_hydrated: bool = Field(
        default=False,
        description="True once startup reconciliation with storage completed.",
    )

    def preference(self, key: PreferenceKey) -> Enum:
        """Return the current value of the preference stored under *key*."""
        return getattr(self, PREFERENCE_FIELDS[key])

    def with_preference(self, key: PreferenceKey, value: Enum) -> SettingsState:
        """Return a copy with *key* set to an already-validated *value*."""
        return self.model_copy(update={PREFERENCE_FIELDS[key]: value})

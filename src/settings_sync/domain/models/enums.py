"""Enumerations for user preferences."""

from enum import Enum


class PreferenceKey(str, Enum):
    """Stable storage keys — one persisted record per preference."""

    FONT_SCALE = "fontScale"


class FontScale(str, Enum):
    """Global font scale preference.

    The set is closed: adding a member requires a matching entry in
    ``settings_sync.domain.rules.scale_factors.SCALE_FACTOR_TABLE``.
    """

    SMALL = "small"
    DEFAULT = "default"
    LARGE = "large"
    EXTRA_LARGE = "extra-large"

    @property
    def label(self) -> str:
        """Human-readable label (``extra-large`` → ``Extra large``)."""
        return self.value.capitalize().replace("-", " ")

    @classmethod
    def values(cls) -> tuple[str, ...]:
        return tuple(member.value for member in cls)


class HydrationOutcome(str, Enum):
    """How a single preference was resolved during hydration."""

    STORED = "stored"  # valid value found in storage
    DEFAULTED = "defaulted"  # key never written, default adopted and written back
    RECOVERED_INVALID = "recovered_invalid"  # unrecognised value, default adopted
    READ_FAILED = "read_failed"  # storage read raised, default used in memory only

"""Font scale factors — pure mapping from preference to multiplier.

Only the enumerated preference string is ever persisted; the numeric
factor is recomputed here at read time, so the table can change without
touching stored data.
"""

from __future__ import annotations

import math
from types import MappingProxyType
from typing import Any, Mapping

from settings_sync.domain.errors import InvalidPreferenceValueError
from settings_sync.domain.models.enums import FontScale


DEFAULT_SCALE_FACTOR: float = 1.0

# Strictly increasing with enum declaration order; DEFAULT is exactly 1.0
SCALE_FACTOR_TABLE: Mapping[FontScale, float] = MappingProxyType(
    {
        FontScale.SMALL: 0.8,
        FontScale.DEFAULT: DEFAULT_SCALE_FACTOR,
        FontScale.LARGE: 1.25,
        FontScale.EXTRA_LARGE: 1.5,
    }
)


def validate_override(factor: Any) -> float:
    """Return *factor* as a float if it is a usable explicit scale factor.

    Raises:
        InvalidPreferenceValueError: If the factor is not a positive finite number.
    """
    if isinstance(factor, bool) or not isinstance(factor, (int, float)):
        raise InvalidPreferenceValueError("fontScale override", factor)
    value = float(factor)
    if not math.isfinite(value) or value <= 0:
        raise InvalidPreferenceValueError("fontScale override", factor)
    return value


def resolve_scale_factor(value: Any = None, override: float | None = None) -> float:
    """Return the multiplier for a font scale preference.

    Args:
        value: A ``FontScale`` member or its string value. Anything outside
            the enumerated set (including ``None``) resolves to ``1.0``.
        override: Explicit factor supplied by the caller. When given it
            short-circuits the table lookup.

    Returns:
        The scale factor to apply to base font sizes.
    """
    if override is not None:
        return validate_override(override)

    if isinstance(value, FontScale):
        return SCALE_FACTOR_TABLE[value]
    if isinstance(value, str):
        try:
            return SCALE_FACTOR_TABLE[FontScale(value)]
        except ValueError:
            return DEFAULT_SCALE_FACTOR
    return DEFAULT_SCALE_FACTOR

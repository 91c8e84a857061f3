"""Scaled text consumer — derives text metrics from the font scale.

An explicit ``font_scale`` given by the component always wins over the
ambient store value. Which of the two is in effect is tracked as an
explicit ``ScaleSource`` rather than inferred from the factor itself.
"""

from __future__ import annotations

from enum import Enum
from typing import Callable

from settings_sync.application.settings_store import SettingsStore, Unsubscribe
from settings_sync.domain.models.enums import FontScale
from settings_sync.domain.rules.scale_factors import (
    DEFAULT_SCALE_FACTOR,
    resolve_scale_factor,
    validate_override,
)
from settings_sync.domain.rules.typography import TextStyle, TextType, base_style


class ScaleSource(str, Enum):
    """Where the effective scale factor comes from."""

    UNSET = "unset"  # no store, no override
    OVERRIDE = "override"  # component-local factor
    AMBIENT = "ambient"  # process-wide preference


class ScaledText:
    """Text metrics for one ``TextType``, kept in sync with the store.

    Parameters
    ----------
    store : SettingsStore | None
        Source of the ambient font scale. Without a store (and without an
        override) the factor is ``1.0``.
    text_type : TextType | str
        Semantic role; unknown roles fall back to ``TextType.DEFAULT``.
    font_scale : float | None
        Explicit factor overriding the ambient value.
    """

    def __init__(
        self,
        store: SettingsStore | None = None,
        text_type: TextType | str = TextType.DEFAULT,
        font_scale: float | None = None,
    ) -> None:
        try:
            self._text_type = TextType(text_type)
        except ValueError:
            self._text_type = TextType.DEFAULT
        self._base = base_style(self._text_type)
        self._override = validate_override(font_scale) if font_scale is not None else None
        self._listeners: list[Callable[[TextStyle], None]] = []
        self._unsubscribe: Unsubscribe | None = None
        self._ambient: FontScale | None = None

        if store is not None:
            self._ambient = store.get_state().font_scale
            self._unsubscribe = store.subscribe(lambda s: s.font_scale, self._on_ambient)

    # -- Public API ----------------------------------------------------------

    @property
    def text_type(self) -> TextType:
        return self._text_type

    @property
    def source(self) -> ScaleSource:
        if self._override is not None:
            return ScaleSource.OVERRIDE
        if self._ambient is not None:
            return ScaleSource.AMBIENT
        return ScaleSource.UNSET

    @property
    def scale_factor(self) -> float:
        source = self.source
        if source is ScaleSource.OVERRIDE:
            return resolve_scale_factor(override=self._override)
        if source is ScaleSource.AMBIENT:
            return resolve_scale_factor(self._ambient)
        return DEFAULT_SCALE_FACTOR

    def style(self) -> TextStyle:
        """Return the base style for this role scaled by the effective factor."""
        return self._base.scaled(self.scale_factor)

    def set_override(self, font_scale: float | None) -> None:
        """Set or clear (``None``) the component-local factor."""
        self._override = validate_override(font_scale) if font_scale is not None else None
        self._emit()

    def on_change(self, callback: Callable[[TextStyle], None]) -> None:
        """Register *callback* to receive the new style when it changes."""
        self._listeners.append(callback)

    def close(self) -> None:
        """Detach from the store."""
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None
        self._listeners.clear()

    # -- Internal ------------------------------------------------------------

    def _on_ambient(self, new: FontScale, _old: FontScale) -> None:
        self._ambient = new
        # An override masks ambient changes entirely
        if self._override is None:
            self._emit()

    def _emit(self) -> None:
        style = self.style()
        for callback in list(self._listeners):
            callback(style)

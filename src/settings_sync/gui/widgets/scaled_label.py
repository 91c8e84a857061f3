"""Scaled label — QLabel whose font follows the font scale preference.

Wraps a :class:`ScaledText`. Store notifications may arrive from the
asyncio loop thread during hydration, so style changes are relayed
through a signal and applied on the GUI thread.
"""

from __future__ import annotations

from PySide6.QtCore import Signal
from PySide6.QtGui import QFont
from PySide6.QtWidgets import QLabel, QWidget

from settings_sync.application.consumers.scaled_text import ScaledText, ScaleSource
from settings_sync.application.settings_store import SettingsStore
from settings_sync.domain.rules.typography import FontWeight, TextStyle, TextType

_QT_WEIGHTS = {
    FontWeight.REGULAR: QFont.Weight.Normal,
    FontWeight.SEMIBOLD: QFont.Weight.DemiBold,
    FontWeight.BOLD: QFont.Weight.Bold,
}


class ScaledLabel(QLabel):
    """Label rendered at ``base size × scale factor`` for its text type.

    Parameters
    ----------
    text : str
        Label text.
    store : SettingsStore | None
        Ambient font scale source.
    text_type : TextType | str
        Semantic role (title, subtitle, small, ...).
    font_scale : float | None
        Explicit factor; takes precedence over the store.
    """

    style_changed = Signal(object)  # emits TextStyle

    def __init__(
        self,
        text: str = "",
        store: SettingsStore | None = None,
        text_type: TextType | str = TextType.DEFAULT,
        font_scale: float | None = None,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(text, parent)
        self._scaled = ScaledText(store, text_type, font_scale)
        self._style = self._scaled.style()

        self.style_changed.connect(self._apply_style)
        self._scaled.on_change(self.style_changed.emit)
        self.destroyed.connect(lambda _obj=None, scaled=self._scaled: scaled.close())

        self._apply_style(self._style)

    # -- Public API ----------------------------------------------------------

    @property
    def text_style(self) -> TextStyle:
        """Style currently applied to the label."""
        return self._style

    @property
    def scale_source(self) -> ScaleSource:
        return self._scaled.source

    def set_font_scale(self, font_scale: float | None) -> None:
        """Set or clear the explicit factor."""
        self._scaled.set_override(font_scale)

    # -- Internal ------------------------------------------------------------

    def _apply_style(self, style: TextStyle) -> None:
        self._style = style
        font = QFont(self.font())
        font.setPixelSize(max(1, round(style.font_size)))
        font.setWeight(_QT_WEIGHTS[style.weight])
        self.setFont(font)
        if style.line_height is not None:
            self.setMinimumHeight(round(style.line_height))

"""Font scale selector — segmented control over ``FontScale``.

Emits :pyqtSignal:`scale_selected` with the chosen value string. It only
reflects the store; the owning page decides what a selection does.
"""

from __future__ import annotations

from PySide6.QtCore import Signal
from PySide6.QtWidgets import QButtonGroup, QHBoxLayout, QPushButton, QWidget

from settings_sync.domain.models.enums import FontScale
from settings_sync.gui.theme import Theme


class FontScaleSelector(QWidget):
    """One checkable segment per ``FontScale`` member.

    Signals:
        scale_selected(str): user clicked a segment.
    """

    scale_selected = Signal(str)

    def __init__(self, current: FontScale = FontScale.DEFAULT, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setObjectName("segmentedControl")
        self.setStyleSheet(Theme.segmented_control())

        layout = QHBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(0)

        self._group = QButtonGroup(self)
        self._group.setExclusive(True)
        self._buttons: dict[FontScale, QPushButton] = {}

        for scale in FontScale:
            btn = QPushButton(scale.label)
            btn.setCheckable(True)
            btn.setProperty("fontScale", scale.value)
            btn.clicked.connect(lambda _checked=False, s=scale: self._on_clicked(s))
            self._group.addButton(btn)
            layout.addWidget(btn, stretch=1)
            self._buttons[scale] = btn

        self.set_current(current)

    # -- Public API ----------------------------------------------------------

    def set_current(self, scale: FontScale) -> None:
        """Check the segment for *scale* without emitting ``scale_selected``."""
        btn = self._buttons[scale]
        btn.blockSignals(True)
        btn.setChecked(True)
        btn.blockSignals(False)

    def current(self) -> FontScale:
        for scale, btn in self._buttons.items():
            if btn.isChecked():
                return scale
        return FontScale.DEFAULT

    def button(self, scale: FontScale) -> QPushButton:
        return self._buttons[scale]

    # -- Internal ------------------------------------------------------------

    def _on_clicked(self, scale: FontScale) -> None:
        self.scale_selected.emit(scale.value)

"""Settings GUI — colour tokens and stylesheets.

Usage::

    from settings_sync.gui.theme import Theme, apply_theme

    apply_theme(app)                               # platform light/dark scheme
    selector.setStyleSheet(Theme.segmented_control())
"""

from __future__ import annotations

from dataclasses import dataclass

from PySide6.QtCore import Qt


@dataclass(frozen=True)
class _Palette:
    """Colour tokens for one colour scheme."""

    text: str
    background: str
    tint: str
    icon: str
    border: str
    link: str


_LIGHT = _Palette(
    text="#11181C",
    background="#FFFFFF",
    tint="#0A7EA4",
    icon="#687076",
    border="#D8DCE6",
    link="#0A7EA4",
)

_DARK = _Palette(
    text="#ECEDEE",
    background="#151718",
    tint="#FFFFFF",
    icon="#9BA1A6",
    border="#3A3F44",
    link="#FFFFFF",
)

RADIUS_LG = "12px"
SPACING_MD = "10px"
PAGE_PADDING = 32


class Theme:
    """Generates Qt stylesheets from the active palette."""

    _palette: _Palette = _LIGHT

    @classmethod
    def palette(cls) -> _Palette:
        return cls._palette

    @classmethod
    def use_dark(cls, dark: bool) -> None:
        cls._palette = _DARK if dark else _LIGHT

    @classmethod
    def global_stylesheet(cls) -> str:
        p = cls._palette
        return f"""
        QMainWindow, QWidget#settingsPage {{
            background: {p.background};
        }}
        QLabel {{
            color: {p.text};
            background: transparent;
        }}
        QStatusBar {{
            color: {p.icon};
            border-top: 1px solid {p.border};
        }}
        """

    # ── Segmented control ───────────────────────────────────────────────

    @classmethod
    def segmented_control(cls) -> str:
        """Selected segment is tinted; its text takes the background colour."""
        p = cls._palette
        return f"""
        QWidget#segmentedControl {{
            background: {p.background};
            border: 2px solid {p.border};
            border-radius: {RADIUS_LG};
        }}
        QPushButton {{
            background: transparent;
            color: {p.text};
            border: none;
            padding: {SPACING_MD} 0;
            font-weight: 600;
        }}
        QPushButton:checked {{
            background: {p.tint};
            color: {p.background};
        }}
        QPushButton:disabled {{
            color: {p.icon};
        }}
        """


def apply_theme(app, dark: bool | None = None) -> None:
    """Pick the palette and apply the global stylesheet to a ``QApplication``.

    With ``dark=None`` the platform colour scheme decides.
    """
    if dark is None:
        dark = app.styleHints().colorScheme() == Qt.ColorScheme.Dark
    Theme.use_dark(dark)
    app.setStyleSheet(Theme.global_stylesheet())

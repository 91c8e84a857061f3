"""Base typography tokens for scalable text.

Sizes and line heights are in device-independent points. Consumers
multiply them by the active scale factor; weights are never scaled.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from types import MappingProxyType
from typing import Mapping


class TextType(str, Enum):
    """Semantic text roles rendered by scalable text components."""

    DEFAULT = "default"
    TITLE = "title"
    DEFAULT_SEMIBOLD = "defaultSemiBold"
    SUBTITLE = "subtitle"
    LINK = "link"
    SMALL = "small"
    LARGE = "large"


class FontWeight(str, Enum):
    REGULAR = "normal"
    SEMIBOLD = "600"
    BOLD = "bold"


# ---------------------------------------------------------------------------
# Raw tokens
# ---------------------------------------------------------------------------

FONT_SIZE_SMALL: float = 14
FONT_SIZE_DEFAULT: float = 16
FONT_SIZE_LARGE: float = 20
FONT_SIZE_SUBTITLE: float = 20
FONT_SIZE_TITLE: float = 32

LINE_HEIGHT_SMALL: float = 20
LINE_HEIGHT_DEFAULT: float = 24
LINE_HEIGHT_TITLE: float = 32
LINE_HEIGHT_LINK: float = 30


@dataclass(frozen=True)
class TextStyle:
    """Font metrics for one text role."""

    font_size: float
    line_height: float | None = None  # None = renderer decides
    weight: FontWeight = FontWeight.REGULAR

    def scaled(self, factor: float) -> TextStyle:
        """Return a copy with size and line height multiplied by *factor*."""
        return replace(
            self,
            font_size=self.font_size * factor,
            line_height=None if self.line_height is None else self.line_height * factor,
        )


BASE_TEXT_STYLES: Mapping[TextType, TextStyle] = MappingProxyType(
    {
        TextType.SMALL: TextStyle(FONT_SIZE_SMALL, LINE_HEIGHT_SMALL),
        TextType.DEFAULT: TextStyle(FONT_SIZE_DEFAULT, LINE_HEIGHT_DEFAULT),
        TextType.DEFAULT_SEMIBOLD: TextStyle(
            FONT_SIZE_DEFAULT, LINE_HEIGHT_DEFAULT, FontWeight.SEMIBOLD
        ),
        TextType.TITLE: TextStyle(FONT_SIZE_TITLE, LINE_HEIGHT_TITLE, FontWeight.BOLD),
        TextType.SUBTITLE: TextStyle(FONT_SIZE_SUBTITLE, None, FontWeight.BOLD),
        TextType.LINK: TextStyle(FONT_SIZE_DEFAULT, LINE_HEIGHT_LINK),
        TextType.LARGE: TextStyle(FONT_SIZE_LARGE, LINE_HEIGHT_DEFAULT),
    }
)


def base_style(text_type: TextType | str) -> TextStyle:
    """Return the unscaled style for *text_type* (unknown roles → DEFAULT)."""
    try:
        return BASE_TEXT_STYLES[TextType(text_type)]
    except ValueError:
        return BASE_TEXT_STYLES[TextType.DEFAULT]

"""Qt widgets that consume the settings store."""

from settings_sync.gui.widgets.font_scale_selector import FontScaleSelector
from settings_sync.gui.widgets.scaled_label import ScaledLabel

__all__ = ["FontScaleSelector", "ScaledLabel"]

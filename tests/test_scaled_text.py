"""Tests for ScaledText — override precedence and ambient tracking."""

from __future__ import annotations

import pytest

from settings_sync.application.consumers.scaled_text import ScaledText, ScaleSource
from settings_sync.application.settings_store import SettingsStore
from settings_sync.domain.errors import InvalidPreferenceValueError
from settings_sync.domain.models.enums import FontScale
from settings_sync.domain.rules.typography import (
    BASE_TEXT_STYLES,
    FontWeight,
    TextStyle,
    TextType,
    base_style,
)


class TestScaleSource:
    def test_no_store_no_override(self) -> None:
        text = ScaledText()
        assert text.source is ScaleSource.UNSET
        assert text.scale_factor == 1.0

    def test_ambient_from_store(self, store: SettingsStore) -> None:
        store.update_font_scale(FontScale.LARGE)
        text = ScaledText(store)
        assert text.source is ScaleSource.AMBIENT
        assert text.scale_factor == 1.25

    def test_override_wins_over_ambient(self, store: SettingsStore) -> None:
        store.update_font_scale(FontScale.EXTRA_LARGE)
        text = ScaledText(store, font_scale=0.9)
        assert text.source is ScaleSource.OVERRIDE
        assert text.scale_factor == 0.9

    def test_override_of_one_is_still_an_override(self, store: SettingsStore) -> None:
        store.update_font_scale(FontScale.LARGE)
        text = ScaledText(store, font_scale=1.0)
        assert text.source is ScaleSource.OVERRIDE
        assert text.scale_factor == 1.0

    def test_override_without_store(self) -> None:
        assert ScaledText(font_scale=2.0).scale_factor == 2.0

    @pytest.mark.parametrize("bad", [0, -1.5, float("nan"), float("inf")])
    def test_invalid_override_rejected(self, bad: float) -> None:
        with pytest.raises(InvalidPreferenceValueError):
            ScaledText(font_scale=bad)


class TestAmbientUpdates:
    def test_style_follows_store(self, store: SettingsStore) -> None:
        text = ScaledText(store, TextType.DEFAULT)
        received: list[TextStyle] = []
        text.on_change(received.append)

        store.update_font_scale(FontScale.SMALL)

        assert text.scale_factor == 0.8
        assert received == [base_style(TextType.DEFAULT).scaled(0.8)]

    def test_override_masks_ambient_changes(self, store: SettingsStore) -> None:
        text = ScaledText(store, font_scale=1.1)
        received: list[TextStyle] = []
        text.on_change(received.append)

        store.update_font_scale(FontScale.LARGE)

        assert received == []
        assert text.scale_factor == 1.1

    def test_clearing_override_returns_to_ambient(self, store: SettingsStore) -> None:
        store.update_font_scale(FontScale.LARGE)
        text = ScaledText(store, font_scale=0.5)
        received: list[TextStyle] = []
        text.on_change(received.append)

        text.set_override(None)

        assert text.source is ScaleSource.AMBIENT
        assert received[-1].font_size == pytest.approx(16 * 1.25)

    def test_ambient_change_while_overridden_is_remembered(self, store: SettingsStore) -> None:
        text = ScaledText(store, font_scale=0.5)
        store.update_font_scale(FontScale.EXTRA_LARGE)

        text.set_override(None)

        assert text.scale_factor == 1.5

    def test_close_unsubscribes(self, store: SettingsStore) -> None:
        text = ScaledText(store)
        received: list[TextStyle] = []
        text.on_change(received.append)
        assert store.subscriber_count == 1

        text.close()
        store.update_font_scale(FontScale.SMALL)

        assert store.subscriber_count == 0
        assert received == []

    def test_close_twice(self, store: SettingsStore) -> None:
        text = ScaledText(store)
        text.close()
        text.close()
        assert store.subscriber_count == 0


class TestTypography:
    def test_unknown_text_type_falls_back(self) -> None:
        text = ScaledText(text_type="headline")
        assert text.text_type is TextType.DEFAULT

    def test_text_type_from_string(self) -> None:
        assert ScaledText(text_type="defaultSemiBold").style().weight is FontWeight.SEMIBOLD

    def test_every_text_type_has_a_base_style(self) -> None:
        assert set(BASE_TEXT_STYLES) == set(TextType)

    def test_scaled_multiplies_size_and_line_height(self) -> None:
        style = base_style(TextType.TITLE).scaled(1.5)
        assert style.font_size == pytest.approx(48)
        assert style.line_height == pytest.approx(48)
        assert style.weight is FontWeight.BOLD

    def test_scaled_keeps_missing_line_height(self) -> None:
        style = base_style(TextType.SUBTITLE).scaled(1.25)
        assert style.line_height is None
        assert style.font_size == pytest.approx(25)

    def test_base_style_for_unknown_role(self) -> None:
        assert base_style("nope") == BASE_TEXT_STYLES[TextType.DEFAULT]

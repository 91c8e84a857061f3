"""Main window — settings page with a live text preview.

Hydration runs on the asyncio loop thread as soon as the window is
built; the font scale selector stays disabled until the store reports
``is_hydrated`` so a user change cannot be overwritten by hydration.
"""

from __future__ import annotations

import logging
from concurrent.futures import Future

from PySide6.QtCore import Signal
from PySide6.QtWidgets import QMainWindow, QVBoxLayout, QWidget

from settings_sync.bootstrap import Container
from settings_sync.domain.errors import InvalidPreferenceValueError
from settings_sync.domain.models.hydration import HydrationReport, WriteOutcome
from settings_sync.domain.rules.typography import TextType
from settings_sync.gui.async_runner import AsyncLoopThread
from settings_sync.gui.theme import PAGE_PADDING
from settings_sync.gui.widgets.font_scale_selector import FontScaleSelector
from settings_sync.gui.widgets.scaled_label import ScaledLabel

logger = logging.getLogger(__name__)

_STATUS_TIMEOUT_MS = 4000


class SettingsWindow(QMainWindow):
    """Settings page: title, font size section, preview."""

    # Relays from the loop thread to the GUI thread
    hydrated = Signal(object)  # HydrationReport
    write_finished = Signal(object)  # WriteOutcome
    _font_scale_changed = Signal(object)
    _hydrated_changed = Signal(bool)

    def __init__(
        self,
        container: Container,
        runner: AsyncLoopThread,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.setWindowTitle("Settings")
        self.setMinimumSize(520, 420)

        self._container = container
        self._runner = runner
        self._store = container.store
        self._change = container.change_font_scale(scheduler=runner.submit)

        page = QWidget()
        page.setObjectName("settingsPage")
        layout = QVBoxLayout(page)
        layout.setContentsMargins(PAGE_PADDING, PAGE_PADDING, PAGE_PADDING, PAGE_PADDING)
        layout.setSpacing(8)

        layout.addWidget(ScaledLabel("Settings", self._store, TextType.TITLE))

        layout.addWidget(ScaledLabel("App Font Size", self._store, TextType.SUBTITLE))
        layout.addWidget(
            ScaledLabel(
                "Adjust the global font size for better readability.",
                self._store,
                TextType.SMALL,
            )
        )

        state = self._store.get_state()
        self._selector = FontScaleSelector(state.font_scale)
        self._selector.setEnabled(state.is_hydrated)
        self._selector.scale_selected.connect(self._on_scale_selected)
        layout.addWidget(self._selector)

        layout.addSpacing(24)
        self._preview = [
            ScaledLabel("The quick brown fox jumps over the lazy dog.", self._store, TextType.DEFAULT),
            ScaledLabel("Read more", self._store, TextType.LINK),
            ScaledLabel("Fixed size (×1.0)", self._store, TextType.DEFAULT, font_scale=1.0),
        ]
        for label in self._preview:
            layout.addWidget(label)
        layout.addStretch(1)

        self.setCentralWidget(page)
        self.statusBar().showMessage("Loading preferences…")

        # Store → widgets, always applied on the GUI thread
        self._font_scale_changed.connect(self._selector.set_current)
        self._hydrated_changed.connect(self._selector.setEnabled)
        self.hydrated.connect(self._on_hydrated)
        self.write_finished.connect(self._on_write_finished)
        self._unsubscribers = [
            self._store.subscribe(lambda s: s.font_scale, lambda new, _old: self._font_scale_changed.emit(new)),
            self._store.subscribe(lambda s: s.is_hydrated, lambda new, _old: self._hydrated_changed.emit(new)),
        ]

    # -- Public API ----------------------------------------------------------

    @property
    def selector(self) -> FontScaleSelector:
        return self._selector

    def start_hydration(self) -> Future[HydrationReport]:
        """Run startup reconciliation on the loop thread."""
        future = self._runner.submit(self._container.hydrate_settings().execute())
        future.add_done_callback(self._relay_hydration)
        return future

    # -- Internal ------------------------------------------------------------

    def _relay_hydration(self, future: Future[HydrationReport]) -> None:
        try:
            self.hydrated.emit(future.result())
        except Exception:
            logger.exception("Hydration task failed")

    def _on_hydrated(self, report: HydrationReport) -> None:
        if report.ok:
            self.statusBar().showMessage("Preferences loaded", _STATUS_TIMEOUT_MS)
        else:
            self.statusBar().showMessage("Preferences loaded with defaults", _STATUS_TIMEOUT_MS)

    def _on_scale_selected(self, value: str) -> None:
        try:
            future = self._change.execute(value)
        except InvalidPreferenceValueError:
            logger.exception("Rejected font scale %r", value)
            self._selector.set_current(self._store.get_state().font_scale)
            return
        future.add_done_callback(lambda f: self.write_finished.emit(f.result()))

    def _on_write_finished(self, outcome: WriteOutcome) -> None:
        if not outcome.ok:
            logger.warning("Font scale not saved: %s", outcome.error)
            self.statusBar().showMessage("Could not save preference", _STATUS_TIMEOUT_MS)

    def closeEvent(self, event) -> None:  # noqa: N802, D102
        for unsubscribe in self._unsubscribers:
            unsubscribe()
        super().closeEvent(event)

"""Application entry point for the settings GUI.

Launch with:
    settings-sync-gui          (after pip install -e .)
    python -m settings_sync.gui.app
"""

from __future__ import annotations

import sys

from PySide6.QtWidgets import QApplication

from settings_sync.bootstrap import Container
from settings_sync.gui.async_runner import AsyncLoopThread
from settings_sync.gui.main_window import SettingsWindow
from settings_sync.logging_config import setup_logging


def main() -> None:
    """Create the QApplication, start hydration, and enter the event loop."""
    container = Container()
    setup_logging(container.config.log_level)

    app = QApplication(sys.argv)
    app.setApplicationName("Settings Sync")
    app.setOrganizationName("settings-sync")

    # Apply centralized theme
    from settings_sync.gui.theme import apply_theme

    apply_theme(app)

    runner = AsyncLoopThread()
    runner.start()

    window = SettingsWindow(container, runner)
    window.show()
    window.start_hydration()

    code = app.exec()
    runner.stop()
    sys.exit(code)


if __name__ == "__main__":
    main()

"""Logging configuration for the CLI and GUI entry points.

Library modules only call ``logging.getLogger(__name__)``; handlers are
installed here, once, by whichever entry point starts the process.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

_HANDLER_NAME = "settings_sync.rich"


def setup_logging(level: str | int = logging.WARNING, console: Console | None = None) -> None:
    """Install a Rich handler on the root logger (idempotent)."""
    root = logging.getLogger()
    root.setLevel(level)

    for handler in root.handlers:
        if handler.get_name() == _HANDLER_NAME:
            handler.setLevel(level)
            return

    handler = RichHandler(
        console=console or Console(stderr=True),
        rich_tracebacks=True,
        show_path=False,
    )
    handler.set_name(_HANDLER_NAME)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))
    root.addHandler(handler)

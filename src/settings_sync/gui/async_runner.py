"""Asyncio event loop hosted on a Qt worker thread.

The GUI thread never blocks on storage: coroutines are submitted to the
loop with :meth:`AsyncLoopThread.submit` and their results come back as
``concurrent.futures.Future`` objects. Widgets that need the result on
the GUI thread relay it through a Qt signal.

Usage::

    runner = AsyncLoopThread()
    runner.start()
    future = runner.submit(hydrate.execute())
    future.add_done_callback(lambda f: self.hydrated.emit(f.result()))
    ...
    runner.stop()
"""

from __future__ import annotations

import asyncio
import logging
import threading
from concurrent.futures import Future
from typing import Any, Coroutine, TypeVar

from PySide6.QtCore import QThread

logger = logging.getLogger(__name__)

T = TypeVar("T")

_START_TIMEOUT_S = 5.0


class AsyncLoopThread(QThread):
    """Run an asyncio loop forever in a background thread."""

    def __init__(self) -> None:
        super().__init__()
        self._loop: asyncio.AbstractEventLoop | None = None
        self._ready = threading.Event()

    def run(self) -> None:  # noqa: D102
        loop = asyncio.new_event_loop()
        asyncio.set_event_loop(loop)
        self._loop = loop
        self._ready.set()
        try:
            loop.run_forever()
        finally:
            pending = asyncio.all_tasks(loop)
            if pending:
                # Let in-flight writes finish before the loop closes
                loop.run_until_complete(asyncio.gather(*pending, return_exceptions=True))
            loop.run_until_complete(loop.shutdown_asyncgens())
            loop.close()
            self._loop = None

    def submit(self, coro: Coroutine[Any, Any, T]) -> Future[T]:
        """Schedule *coro* on the loop thread; thread-safe."""
        if not self._ready.wait(_START_TIMEOUT_S) or self._loop is None:
            coro.close()
            raise RuntimeError("AsyncLoopThread is not running")
        return asyncio.run_coroutine_threadsafe(coro, self._loop)

    def stop(self, timeout_ms: int = 2000) -> None:
        """Stop the loop after pending work drains and wait for the thread."""
        if self.isRunning():
            self._ready.wait(_START_TIMEOUT_S)
        loop = self._loop
        if loop is not None and not loop.is_closed():
            loop.call_soon_threadsafe(loop.stop)
        if not self.wait(timeout_ms):
            logger.warning("Async loop thread did not stop within %d ms", timeout_ms)

"""Use Case: Change Preference.

Applies a user's preference change to the in-memory store first, so every
subscriber re-renders immediately, and only then issues the persistence
write. The write is best-effort: its outcome is delivered through the
returned future and is never raised.
"""

from __future__ import annotations

import asyncio
import logging
from concurrent.futures import Future as ConcurrentFuture
from typing import Any, Callable, Coroutine, Union

from settings_sync.application.settings_store import SettingsStore
from settings_sync.application.use_cases.hydrate_settings import persist_value
from settings_sync.domain.models.enums import FontScale, PreferenceKey
from settings_sync.domain.models.hydration import WriteOutcome
from settings_sync.domain.ports.key_value_store import KeyValueStorePort

logger = logging.getLogger(__name__)

WriteFuture = Union["asyncio.Future[WriteOutcome]", "ConcurrentFuture[WriteOutcome]"]
Scheduler = Callable[[Coroutine[Any, Any, WriteOutcome]], Any]


class ChangeFontScaleUseCase:
    """Update the font scale preference and persist it in the background.

    Parameters
    ----------
    store : SettingsStore
        The process-wide store.
    storage : KeyValueStorePort
        Persistence collaborator.
    scheduler : callable | None
        Turns the persistence coroutine into a future. Defaults to
        ``asyncio.ensure_future``, which needs a running event loop. The
        GUI passes ``AsyncLoopThread.submit`` instead.
    """

    def __init__(
        self,
        store: SettingsStore,
        storage: KeyValueStorePort,
        scheduler: Scheduler | None = None,
    ) -> None:
        self._store = store
        self._storage = storage
        self._scheduler = scheduler or asyncio.ensure_future

    def execute(self, value: FontScale | str) -> WriteFuture:
        """Apply *value* to the store, then schedule the persistence write.

        Raises:
            InvalidPreferenceValueError: If *value* is not a ``FontScale``.
                Nothing is applied or written in that case.
        """
        self._store.update_font_scale(value)
        applied = self._store.get_state().font_scale
        logger.info("Font scale changed to %r", applied.value)

        write = persist_value(self._storage, PreferenceKey.FONT_SCALE, applied.value)
        try:
            return self._scheduler(write)
        except Exception:
            write.close()
            raise

    def reset(self) -> WriteFuture:
        """Restore the compiled-in default font scale."""
        return self.execute(FontScale.DEFAULT)

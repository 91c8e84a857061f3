"""In-memory store — implements KeyValueStorePort on a dict.

Nothing survives the process; used for ``--ephemeral`` runs and tests.
"""

from __future__ import annotations

import asyncio

from settings_sync.domain.ports.key_value_store import KeyValueStorePort


class InMemoryKeyValueStore(KeyValueStorePort):
    """Dict-backed store that records every write in issue order."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._data: dict[str, str] = dict(initial or {})
        self.writes: list[tuple[str, str]] = []

    async def get(self, key: str) -> str | None:
        await asyncio.sleep(0)
        return self._data.get(key)

    async def set(self, key: str, value: str) -> None:
        await asyncio.sleep(0)
        self._data[key] = value
        self.writes.append((key, value))

    def snapshot(self) -> dict[str, str]:
        """Return a copy of the stored data."""
        return dict(self._data)

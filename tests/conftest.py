"""Shared fixtures and storage doubles."""

from __future__ import annotations

from pathlib import Path

import pytest

from settings_sync.application.settings_store import SettingsStore
from settings_sync.config.loader import ENV_CONFIG, ENV_LOG_LEVEL, ENV_STORAGE_DIR, clear_cache
from settings_sync.domain.errors import StorageReadError, StorageWriteError
from settings_sync.domain.ports.key_value_store import KeyValueStorePort
from settings_sync.infrastructure.storage.memory_store import InMemoryKeyValueStore


class FlakyKeyValueStore(KeyValueStorePort):
    """In-memory store whose reads and/or writes can be made to fail."""

    def __init__(
        self,
        initial: dict[str, str] | None = None,
        *,
        fail_reads: bool = False,
        fail_writes: bool = False,
    ) -> None:
        self.data: dict[str, str] = dict(initial or {})
        self.fail_reads = fail_reads
        self.fail_writes = fail_writes
        self.read_calls: list[str] = []
        self.write_calls: list[tuple[str, str]] = []

    async def get(self, key: str) -> str | None:
        self.read_calls.append(key)
        if self.fail_reads:
            raise StorageReadError(key, "storage unavailable")
        return self.data.get(key)

    async def set(self, key: str, value: str) -> None:
        self.write_calls.append((key, value))
        if self.fail_writes:
            raise StorageWriteError(key, "disk full")
        self.data[key] = value


# ── Fixtures ──────────────────────────────────────────────────────────────


@pytest.fixture(autouse=True)
def _isolated_config(monkeypatch: pytest.MonkeyPatch):
    """Keep environment overrides and the config cache out of every test."""
    for var in (ENV_CONFIG, ENV_LOG_LEVEL, ENV_STORAGE_DIR):
        monkeypatch.delenv(var, raising=False)
    clear_cache()
    yield
    clear_cache()


@pytest.fixture()
def store() -> SettingsStore:
    """A fresh, un-hydrated store."""
    return SettingsStore()


@pytest.fixture()
def memory_storage() -> InMemoryKeyValueStore:
    return InMemoryKeyValueStore()


@pytest.fixture()
def storage_dir(tmp_path: Path) -> Path:
    """Return a temporary directory for preference files."""
    return tmp_path / "settings_sync"


@pytest.fixture()
def flaky_storage() -> type[FlakyKeyValueStore]:
    """Factory for storage doubles: ``flaky_storage(initial, fail_reads=..., fail_writes=...)``."""
    return FlakyKeyValueStore

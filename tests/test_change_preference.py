"""Tests for ChangeFontScaleUseCase — store first, then persistence."""

from __future__ import annotations

import asyncio
from concurrent.futures import Future

import pytest

from settings_sync.application.settings_store import SettingsStore
from settings_sync.application.use_cases.change_preference import ChangeFontScaleUseCase
from settings_sync.domain.errors import InvalidPreferenceValueError
from settings_sync.domain.models.enums import FontScale, PreferenceKey
from settings_sync.domain.models.hydration import WriteOutcome
from settings_sync.domain.ports.key_value_store import KeyValueStorePort
from settings_sync.infrastructure.storage.memory_store import InMemoryKeyValueStore


class TestChangeFontScale:
    def test_store_updated_before_write_issued(self, store: SettingsStore) -> None:
        events: list[str] = []

        class RecordingStorage(KeyValueStorePort):
            async def get(self, key: str) -> str | None:
                return None

            async def set(self, key: str, value: str) -> None:
                events.append(f"write:{value}")

        store.subscribe(lambda s: s.font_scale, lambda new, old: events.append(f"notify:{new.value}"))

        async def scenario() -> WriteOutcome:
            future = ChangeFontScaleUseCase(store, RecordingStorage()).execute("large")
            events.append("returned")
            return await future

        outcome = asyncio.run(scenario())

        assert events == ["notify:large", "returned", "write:large"]
        assert outcome == WriteOutcome(key=PreferenceKey.FONT_SCALE, value="large")

    def test_persists_value(self, store: SettingsStore, memory_storage: InMemoryKeyValueStore) -> None:
        async def scenario() -> WriteOutcome:
            return await ChangeFontScaleUseCase(store, memory_storage).execute(FontScale.SMALL)

        outcome = asyncio.run(scenario())

        assert outcome.ok
        assert memory_storage.snapshot() == {"fontScale": "small"}

    def test_invalid_value_raises_and_skips_write(
        self, store: SettingsStore, memory_storage: InMemoryKeyValueStore
    ) -> None:
        use_case = ChangeFontScaleUseCase(store, memory_storage, scheduler=lambda coro: coro.close())

        with pytest.raises(InvalidPreferenceValueError):
            use_case.execute("huge")

        assert store.get_state().font_scale is FontScale.DEFAULT
        assert memory_storage.writes == []

    def test_write_failure_reported_not_raised(self, store: SettingsStore, flaky_storage) -> None:
        storage = flaky_storage(fail_writes=True)

        async def scenario() -> WriteOutcome:
            return await ChangeFontScaleUseCase(store, storage).execute("extra-large")

        outcome = asyncio.run(scenario())

        assert store.get_state().font_scale is FontScale.EXTRA_LARGE
        assert outcome.ok is False
        assert "disk full" in (outcome.error or "")

    def test_last_write_wins_by_issue_order(
        self, store: SettingsStore, memory_storage: InMemoryKeyValueStore
    ) -> None:
        async def scenario() -> None:
            use_case = ChangeFontScaleUseCase(store, memory_storage)
            await asyncio.gather(
                use_case.execute("small"),
                use_case.execute("large"),
                use_case.execute("extra-large"),
            )

        asyncio.run(scenario())

        assert memory_storage.writes == [
            ("fontScale", "small"),
            ("fontScale", "large"),
            ("fontScale", "extra-large"),
        ]
        assert memory_storage.snapshot() == {"fontScale": "extra-large"}

    def test_reset_restores_default(self, store: SettingsStore, memory_storage: InMemoryKeyValueStore) -> None:
        store.update_font_scale("large")

        async def scenario() -> WriteOutcome:
            return await ChangeFontScaleUseCase(store, memory_storage).reset()

        asyncio.run(scenario())

        assert store.get_state().font_scale is FontScale.DEFAULT
        assert memory_storage.snapshot() == {"fontScale": "default"}

    def test_custom_scheduler_receives_coroutine(
        self, store: SettingsStore, memory_storage: InMemoryKeyValueStore
    ) -> None:
        def run_now(coro) -> Future:
            future: Future = Future()
            future.set_result(asyncio.run(coro))
            return future

        future = ChangeFontScaleUseCase(store, memory_storage, scheduler=run_now).execute("small")

        assert future.result().ok
        assert memory_storage.snapshot() == {"fontScale": "small"}

    def test_scheduler_failure_closes_coroutine(self, store: SettingsStore, memory_storage) -> None:
        def no_loop(coro):
            raise RuntimeError("no running event loop")

        with pytest.raises(RuntimeError):
            ChangeFontScaleUseCase(store, memory_storage, scheduler=no_loop).execute("small")

        # The in-memory change already happened; only persistence was skipped
        assert store.get_state().font_scale is FontScale.SMALL
        assert memory_storage.writes == []

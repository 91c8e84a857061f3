"""Tests for the key-value storage adapters."""

from __future__ import annotations

import asyncio
import json
from pathlib import Path

import pytest

from settings_sync.config.models import DEFAULT_FILENAME, default_storage_dir
from settings_sync.domain.errors import StorageReadError, StorageWriteError
from settings_sync.infrastructure.storage.json_file_store import JsonFileKeyValueStore
from settings_sync.infrastructure.storage.memory_store import InMemoryKeyValueStore


@pytest.fixture()
def json_store(storage_dir: Path) -> JsonFileKeyValueStore:
    return JsonFileKeyValueStore(storage_dir / DEFAULT_FILENAME)


class TestJsonFileKeyValueStore:
    def test_missing_file_reads_as_absent(self, json_store: JsonFileKeyValueStore) -> None:
        assert asyncio.run(json_store.get("fontScale")) is None
        assert not json_store.path.exists()

    def test_set_creates_directory_and_file(self, json_store: JsonFileKeyValueStore) -> None:
        asyncio.run(json_store.set("fontScale", "large"))

        assert json_store.path.exists()
        assert json.loads(json_store.path.read_text(encoding="utf-8")) == {"fontScale": "large"}

    def test_set_then_get(self, json_store: JsonFileKeyValueStore) -> None:
        async def scenario() -> str | None:
            await json_store.set("fontScale", "small")
            return await json_store.get("fontScale")

        assert asyncio.run(scenario()) == "small"

    def test_survives_new_instance(self, json_store: JsonFileKeyValueStore) -> None:
        asyncio.run(json_store.set("fontScale", "extra-large"))

        reopened = JsonFileKeyValueStore(json_store.path)
        assert asyncio.run(reopened.get("fontScale")) == "extra-large"

    def test_set_preserves_other_keys(self, json_store: JsonFileKeyValueStore) -> None:
        json_store.path.parent.mkdir(parents=True)
        json_store.path.write_text(json.dumps({"theme": "dark"}), encoding="utf-8")

        asyncio.run(json_store.set("fontScale", "large"))

        data = json.loads(json_store.path.read_text(encoding="utf-8"))
        assert data == {"theme": "dark", "fontScale": "large"}

    def test_corrupted_file_raises_read_error(self, json_store: JsonFileKeyValueStore) -> None:
        json_store.path.parent.mkdir(parents=True)
        json_store.path.write_text("{{invalid json", encoding="utf-8")

        with pytest.raises(StorageReadError) as excinfo:
            asyncio.run(json_store.get("fontScale"))
        assert excinfo.value.key == "fontScale"

    def test_non_object_file_raises_read_error(self, json_store: JsonFileKeyValueStore) -> None:
        json_store.path.parent.mkdir(parents=True)
        json_store.path.write_text('["default"]', encoding="utf-8")

        with pytest.raises(StorageReadError):
            asyncio.run(json_store.get("fontScale"))

    def test_write_replaces_corrupted_file(self, json_store: JsonFileKeyValueStore) -> None:
        json_store.path.parent.mkdir(parents=True)
        json_store.path.write_text("not json", encoding="utf-8")

        asyncio.run(json_store.set("fontScale", "small"))

        assert asyncio.run(json_store.get("fontScale")) == "small"

    def test_non_string_value_returned_as_string(self, json_store: JsonFileKeyValueStore) -> None:
        json_store.path.parent.mkdir(parents=True)
        json_store.path.write_text(json.dumps({"fontScale": 3}), encoding="utf-8")

        assert asyncio.run(json_store.get("fontScale")) == "3"

    def test_unwritable_location_raises_write_error(self, tmp_path: Path) -> None:
        blocker = tmp_path / "not_a_dir"
        blocker.write_text("", encoding="utf-8")
        store = JsonFileKeyValueStore(blocker / "preferences.json")

        with pytest.raises(StorageWriteError):
            asyncio.run(store.set("fontScale", "large"))

    def test_no_temp_files_left_behind(self, json_store: JsonFileKeyValueStore) -> None:
        async def scenario() -> None:
            await asyncio.gather(
                json_store.set("fontScale", "small"),
                json_store.set("fontScale", "large"),
            )

        asyncio.run(scenario())

        assert [p.name for p in json_store.path.parent.iterdir()] == [DEFAULT_FILENAME]
        assert asyncio.run(json_store.get("fontScale")) == "large"

    def test_default_path_uses_platform_config_dir(self) -> None:
        store = JsonFileKeyValueStore()
        assert store.path == default_storage_dir() / DEFAULT_FILENAME
        assert "settings_sync" in str(store.path)


class TestInMemoryKeyValueStore:
    def test_initial_data_and_writes(self) -> None:
        storage = InMemoryKeyValueStore({"fontScale": "large"})

        async def scenario() -> str | None:
            await storage.set("fontScale", "small")
            return await storage.get("fontScale")

        assert asyncio.run(scenario()) == "small"
        assert storage.writes == [("fontScale", "small")]

    def test_snapshot_is_a_copy(self) -> None:
        storage = InMemoryKeyValueStore({"fontScale": "large"})
        snap = storage.snapshot()
        snap["fontScale"] = "small"
        assert storage.snapshot() == {"fontScale": "large"}

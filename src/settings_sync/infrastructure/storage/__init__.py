from settings_sync.infrastructure.storage.json_file_store import JsonFileKeyValueStore
from settings_sync.infrastructure.storage.memory_store import InMemoryKeyValueStore

__all__ = ["InMemoryKeyValueStore", "JsonFileKeyValueStore"]

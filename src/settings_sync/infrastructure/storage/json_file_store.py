"""JSON file store — implements KeyValueStorePort on a single JSON file.

Persists preferences as a flat ``{"key": "value"}`` object, by default in
``~/.config/settings_sync/preferences.json`` (Linux) or the equivalent
platform directory via ``platformdirs``. Blocking file I/O runs in a
worker thread; writes are serialised so they land in issue order.
"""

from __future__ import annotations

import asyncio
import json
import logging
import tempfile
from pathlib import Path
from typing import Any

from settings_sync.config.models import DEFAULT_FILENAME, default_storage_dir
from settings_sync.domain.errors import StorageReadError, StorageWriteError
from settings_sync.domain.ports.key_value_store import KeyValueStorePort

logger = logging.getLogger(__name__)


class JsonFileKeyValueStore(KeyValueStorePort):
    """Concrete implementation of :class:`KeyValueStorePort`.

    Parameters
    ----------
    path : Path | None
        File to read and write. Defaults to ``preferences.json`` inside
        :func:`default_storage_dir` (override for testing).
    """

    def __init__(self, path: Path | None = None) -> None:
        self._path = path or default_storage_dir() / DEFAULT_FILENAME
        self._write_lock = asyncio.Lock()

    # -- Public API ----------------------------------------------------------

    async def get(self, key: str) -> str | None:
        """Return the value stored under *key*, or None if it was never written."""
        data = await asyncio.to_thread(self._read, key)
        value = data.get(key)
        if value is None:
            return None
        return value if isinstance(value, str) else str(value)

    async def set(self, key: str, value: str) -> None:
        """Persist *value* under *key*, keeping every other key in the file."""
        async with self._write_lock:
            await asyncio.to_thread(self._write, key, value)

    @property
    def path(self) -> Path:
        """Absolute path to the preferences JSON file."""
        return self._path

    # -- Internal ------------------------------------------------------------

    def _load(self) -> dict[str, Any]:
        if not self._path.exists():
            return {}
        raw = json.loads(self._path.read_text(encoding="utf-8"))
        if not isinstance(raw, dict):
            raise ValueError(f"expected a JSON object, got {type(raw).__name__}")
        return raw

    def _read(self, key: str) -> dict[str, Any]:
        try:
            return self._load()
        except (OSError, ValueError) as exc:
            raise StorageReadError(key, f"Cannot read {self._path}: {exc}") from exc

    def _write(self, key: str, value: str) -> None:
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            try:
                data = self._load()
            except ValueError:
                # Corrupted file: start over rather than refuse every write
                logger.warning("Replacing unreadable preferences file %s", self._path)
                data = {}
            data[key] = value

            # Atomic: write to temp, then rename
            tmp_fd, tmp_path = tempfile.mkstemp(dir=self._path.parent, suffix=".tmp")
            try:
                with open(tmp_fd, "w", encoding="utf-8") as fh:
                    json.dump(data, fh, indent=2, ensure_ascii=False)
                Path(tmp_path).replace(self._path)
            except Exception:
                Path(tmp_path).unlink(missing_ok=True)
                raise
        except OSError as exc:
            raise StorageWriteError(key, f"Cannot write {self._path}: {exc}") from exc

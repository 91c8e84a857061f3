"""Use Case: Hydrate Settings.

One-shot startup reconciliation between persistent storage and the
in-memory ``SettingsStore``. Must run once, before the UI is treated as
authoritative.

Ordering caveat: the store's defaults are captured when ``execute`` starts.
A user change applied to the store while the reads are in flight is
overwritten by the stored (or default) value once they resolve. Keep
preference controls disabled until ``SettingsState.is_hydrated`` is True.
"""

from __future__ import annotations

import asyncio
import logging
from enum import Enum

from settings_sync.application.settings_store import SettingsStore
from settings_sync.domain.errors import InvalidPreferenceValueError
from settings_sync.domain.models.enums import HydrationOutcome, PreferenceKey
from settings_sync.domain.models.hydration import HydrationReport, KeyHydration, WriteOutcome
from settings_sync.domain.models.settings import PREFERENCE_FIELDS, parse_preference
from settings_sync.domain.ports.key_value_store import KeyValueStorePort

logger = logging.getLogger(__name__)

# Keys reconciled at startup
HYDRATED_KEYS: tuple[PreferenceKey, ...] = tuple(PREFERENCE_FIELDS)


async def persist_value(storage: KeyValueStorePort, key: PreferenceKey, value: str) -> WriteOutcome:
    """Write one preference, returning the outcome instead of raising."""
    try:
        await storage.set(key.value, value)
    except Exception as exc:  # noqa: BLE001
        logger.error("Failed to persist '%s'=%r: %s", key.value, value, exc)
        return WriteOutcome(key=key, value=value, ok=False, error=str(exc))
    logger.debug("Persisted '%s'=%r", key.value, value)
    return WriteOutcome(key=key, value=value)


class HydrateSettingsUseCase:
    """Load persisted preferences into the store, filling in missing defaults."""

    def __init__(
        self,
        store: SettingsStore,
        storage: KeyValueStorePort,
        keys: tuple[PreferenceKey, ...] = HYDRATED_KEYS,
    ) -> None:
        self._store = store
        self._storage = storage
        self._keys = keys
        self._pending_writes: list[asyncio.Task[WriteOutcome]] = []

    async def execute(self, *, await_writes: bool = True) -> HydrationReport:
        """Reconcile storage with the store and mark the store hydrated.

        Args:
            await_writes: Wait for default write-backs before returning so
                their outcomes appear in the report. When False the writes
                keep running in the background; see ``pending_writes``.

        Returns:
            A ``HydrationReport``. Failures are recorded there, never raised.
        """
        # 1. Capture defaults once
        snapshot = self._store.get_state()
        defaults = {key: snapshot.preference(key) for key in self._keys}
        self._pending_writes = []

        entries: list[KeyHydration] = []
        try:
            # 2. Concurrent reads, failures isolated per key
            results = await asyncio.gather(
                *(self._storage.get(key.value) for key in self._keys),
                return_exceptions=True,
            )

            # 3. Resolve each key
            write_tasks: dict[PreferenceKey, asyncio.Task[WriteOutcome]] = {}
            for key, result in zip(self._keys, results):
                entry, value = self._resolve(key, result, defaults[key])
                # Only absent keys are written back
                if entry.outcome is HydrationOutcome.DEFAULTED:
                    task = asyncio.ensure_future(
                        persist_value(self._storage, key, entry.applied_value)
                    )
                    write_tasks[key] = task
                    self._pending_writes.append(task)

                # 4. Apply to the store
                try:
                    self._store.update_preference(key, value)
                except Exception:
                    logger.exception("Failed to apply hydrated value for '%s'", key.value)
                entries.append(entry)

            if await_writes and write_tasks:
                await asyncio.gather(*write_tasks.values())
                entries = [
                    entry.model_copy(update={"write": write_tasks[entry.key].result()})
                    if entry.key in write_tasks
                    else entry
                    for entry in entries
                ]
        except Exception:
            logger.exception("Hydration failed; continuing with defaults")
        finally:
            # 5. Always leave the store usable
            self._store.set_hydrated(True)

        report = HydrationReport(keys=entries)
        if report.ok:
            logger.info("Settings hydrated: %s", {e.key.value: e.applied_value for e in entries})
        else:
            logger.warning("Settings hydrated with errors: %s", "; ".join(report.errors))
        return report

    @property
    def pending_writes(self) -> list[asyncio.Task[WriteOutcome]]:
        """Write-back tasks issued by the last ``execute`` call."""
        return list(self._pending_writes)

    # -- Internal ------------------------------------------------------------

    def _resolve(
        self,
        key: PreferenceKey,
        result: str | None | BaseException,
        default: Enum,
    ) -> tuple[KeyHydration, Enum]:
        if isinstance(result, BaseException):
            logger.error("Failed to read '%s' from storage: %s", key.value, result)
            return (
                KeyHydration(
                    key=key,
                    outcome=HydrationOutcome.READ_FAILED,
                    applied_value=default.value,
                    read_error=str(result) or type(result).__name__,
                ),
                default,
            )

        if result is None:
            logger.info("Initialized missing key '%s' with default %r", key.value, default.value)
            return (
                KeyHydration(
                    key=key,
                    outcome=HydrationOutcome.DEFAULTED,
                    applied_value=default.value,
                ),
                default,
            )

        try:
            value = parse_preference(key, result)
        except InvalidPreferenceValueError:
            logger.warning(
                "Ignoring unrecognised stored value %r for '%s'; using default %r",
                result,
                key.value,
                default.value,
            )
            return (
                KeyHydration(
                    key=key,
                    outcome=HydrationOutcome.RECOVERED_INVALID,
                    stored_value=result,
                    applied_value=default.value,
                ),
                default,
            )

        return (
            KeyHydration(
                key=key,
                outcome=HydrationOutcome.STORED,
                stored_value=result,
                applied_value=value.value,
            ),
            value,
        )

"""Composition Root — Dependency Injection Container.

This module is the ONLY place where concrete infrastructure classes are
imported and wired together.  All other layers refer to ports (interfaces).
"""

from __future__ import annotations

from pathlib import Path

from settings_sync.application.consumers.scaled_text import ScaledText
from settings_sync.application.settings_store import SettingsStore
from settings_sync.application.use_cases.change_preference import (
    ChangeFontScaleUseCase,
    Scheduler,
)
from settings_sync.application.use_cases.hydrate_settings import HydrateSettingsUseCase
from settings_sync.config.loader import load_config
from settings_sync.config.models import AppConfig
from settings_sync.domain.ports.key_value_store import KeyValueStorePort
from settings_sync.domain.rules.typography import TextType
from settings_sync.infrastructure.storage.json_file_store import JsonFileKeyValueStore
from settings_sync.infrastructure.storage.memory_store import InMemoryKeyValueStore


class Container:
    """Simple dependency injection container.

    Owns the one ``SettingsStore`` of the process and hands it to every
    component that needs settings access.

    Usage::

        container = Container()
        report = await container.hydrate_settings().execute()
        container.change_font_scale().execute("large")
    """

    def __init__(
        self,
        config: AppConfig | None = None,
        *,
        config_path: Path | None = None,
        storage: KeyValueStorePort | None = None,
        ephemeral: bool = False,
    ) -> None:
        self._config = config or load_config(config_path)

        if storage is not None:
            self._storage = storage
        elif ephemeral:
            self._storage = InMemoryKeyValueStore()
        else:
            self._storage = JsonFileKeyValueStore(self._config.storage_path)

        self._store = SettingsStore()
        self._hydrate = HydrateSettingsUseCase(self._store, self._storage)

    # -- Accessors -----------------------------------------------------------

    @property
    def config(self) -> AppConfig:
        return self._config

    @property
    def storage(self) -> KeyValueStorePort:
        return self._storage

    @property
    def store(self) -> SettingsStore:
        return self._store

    # -- Use case factories --------------------------------------------------

    def hydrate_settings(self) -> HydrateSettingsUseCase:
        return self._hydrate

    def change_font_scale(self, scheduler: Scheduler | None = None) -> ChangeFontScaleUseCase:
        return ChangeFontScaleUseCase(self._store, self._storage, scheduler)

    def scaled_text(
        self,
        text_type: TextType | str = TextType.DEFAULT,
        font_scale: float | None = None,
    ) -> ScaledText:
        return ScaledText(self._store, text_type, font_scale)

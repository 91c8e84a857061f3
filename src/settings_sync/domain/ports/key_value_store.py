"""Port (ABC) for asynchronous key-value persistence.

Domain layer interface — infrastructure provides the concrete implementation.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class KeyValueStorePort(ABC):
    """String-keyed store with eventual durability.

    Writes may be buffered but are expected to survive a process restart.
    """

    @abstractmethod
    async def get(self, key: str) -> str | None:
        """Return the stored value, or ``None`` if *key* was never written.

        Raises:
            StorageReadError: If the backing store cannot be read.
        """

    @abstractmethod
    async def set(self, key: str, value: str) -> None:
        """Persist *value* under *key*.

        Raises:
            StorageWriteError: If the backing store cannot be written.
        """

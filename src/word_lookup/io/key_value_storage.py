"""Key-value storage abstraction - plugin interface for user activity persistence."""

from abc import ABC, abstractmethod
from typing import Optional


class StorageError(Exception):
    """Raised by storage backends when a read or write cannot complete."""


class KeyValueStorage(ABC):
    """
    Abstract string-keyed store holding serialized blobs.

    Implementations (InMemoryKeyValueStorage, FileKeyValueStorage,
    SqliteKeyValueStorage) handle storage details so the activity store only
    depends on get/set by key.
    """

    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        """
        Retrieve the blob stored under a key.

        Returns:
            The stored string, or None if the key is absent.

        Raises:
            StorageError: If the backend cannot be read.
        """
        pass

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """
        Store or overwrite the blob under a key.

        Raises:
            StorageError: If the backend cannot be written.
        """
        pass

    def set_many(self, entries: dict[str, str]) -> None:
        """
        Store several blobs as one unit.

        Backends that can write atomically override this; the default writes
        key by key.
        """
        for key, value in entries.items():
            self.set(key, value)

    @abstractmethod
    def delete(self, key: str) -> None:
        """Delete a key. Missing keys are ignored."""
        pass

    @abstractmethod
    def keys(self) -> list[str]:
        """List stored keys. Useful for diagnostics and testing."""
        pass


class InMemoryKeyValueStorage(KeyValueStorage):
    """
    Simple in-memory storage.

    Used for testing and session-only use. No persistence.
    """

    def __init__(self):
        self._store: dict[str, str] = {}

    def get(self, key: str) -> Optional[str]:
        return self._store.get(key)

    def set(self, key: str, value: str) -> None:
        self._store[key] = value

    def delete(self, key: str) -> None:
        self._store.pop(key, None)

    def keys(self) -> list[str]:
        return list(self._store.keys())

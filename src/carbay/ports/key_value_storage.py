from __future__ import annotations

from abc import ABC, abstractmethod


class StorageError(Exception):
    """Raised by storage adapters when the backing store can not be read or written."""


class KeyValueStorage(ABC):
    """
    Port for durable, string-valued storage addressed by key.

    One key holds one serialized collection of the car store. Adapters wrap
    their backend failures in StorageError so the persistence layer can
    isolate them per key.
    """

    @abstractmethod
    def get(self, key: str) -> str | None:
        """
        Read the value stored under key.

        Returns:
            The stored string, or None if the key was never written

        Raises:
            StorageError: If the backend can not be read
        """
        ...

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """
        Store value under key, replacing any previous value.

        Raises:
            StorageError: If the backend can not be written
        """
        ...

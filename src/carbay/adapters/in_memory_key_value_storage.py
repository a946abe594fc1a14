from __future__ import annotations

from carbay.ports.key_value_storage import KeyValueStorage


class InMemoryKeyValueStorage(KeyValueStorage):
    """
    Dict-backed storage for tests and throwaway sessions.

    Nothing survives the process; values are kept exactly as written.
    """

    def __init__(self, entries: dict[str, str] | None = None) -> None:
        self._entries: dict[str, str] = dict(entries or {})

    def get(self, key: str) -> str | None:
        return self._entries.get(key)

    def set(self, key: str, value: str) -> None:
        self._entries[key] = value

    def snapshot(self) -> dict[str, str]:
        """Copy of everything written so far."""
        return dict(self._entries)

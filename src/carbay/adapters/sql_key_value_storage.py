"""SQL implementation of KeyValueStorage."""

from __future__ import annotations

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from carbay.infra.db.models.storage_entry import StorageEntryRow
from carbay.infra.db.session import get_session_local, session_scope
from carbay.ports.key_value_storage import KeyValueStorage, StorageError


class SqlKeyValueStorage(KeyValueStorage):
    """
    KeyValueStorage over the storage_entries table.

    - One row per key; set() inserts or overwrites
    - Session per operation, committed before returning
    - SQLAlchemy errors are re-raised as StorageError
    """

    def __init__(self, session_factory: sessionmaker[Session] | None = None) -> None:
        """
        Initialize storage with a session factory.

        Args:
            session_factory: Factory for sessions; defaults to the one bound
                to DATABASE_URL
        """
        self._session_factory = session_factory or get_session_local()

    def get(self, key: str) -> str | None:
        try:
            with session_scope(self._session_factory) as session:
                row = session.get(StorageEntryRow, key)
                return row.value if row else None
        except SQLAlchemyError as exc:
            raise StorageError(f"Failed to read storage key '{key}'") from exc

    def set(self, key: str, value: str) -> None:
        try:
            with session_scope(self._session_factory) as session:
                row = session.get(StorageEntryRow, key)
                if row is None:
                    session.add(StorageEntryRow(key=key, value=value))
                else:
                    row.value = value
        except SQLAlchemyError as exc:
            raise StorageError(f"Failed to write storage key '{key}'") from exc

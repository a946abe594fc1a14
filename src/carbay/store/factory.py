from __future__ import annotations

import logging

from carbay.adapters.in_memory_key_value_storage import InMemoryKeyValueStorage
from carbay.adapters.json_file_catalog_source import JsonFileCatalogSource
from carbay.adapters.sql_key_value_storage import SqlKeyValueStorage
from carbay.infra.config import STORAGE_MEMORY, catalog_path, database_url, storage_backend
from carbay.infra.db.models.base import Base
from carbay.infra.db.session import get_engine, get_session_local
from carbay.ports.key_value_storage import KeyValueStorage
from carbay.store.car_store import CarStore
from carbay.store.persistence import StorePersistence

logger = logging.getLogger(__name__)


def build_storage() -> KeyValueStorage:
    """
    Storage adapter selected by CARBAY_STORAGE.

    SQLite snapshot files get their table created on first use; any other
    database is expected to be migrated with Alembic beforehand.
    """
    if storage_backend() == STORAGE_MEMORY:
        logger.warning("Using in-memory storage, nothing will survive a restart")
        return InMemoryKeyValueStorage()

    if database_url().startswith("sqlite"):
        Base.metadata.create_all(get_engine())

    return SqlKeyValueStorage(session_factory=get_session_local())


def build_car_store() -> CarStore:
    """Wire a store from environment configuration. The caller opens it."""
    return CarStore(
        catalog_source=JsonFileCatalogSource(catalog_path()),
        persistence=StorePersistence(build_storage()),
    )

"""Write-through persistence of the car store's collections.

Each collection lives under its own storage key and is restored on its own:
a missing, unreadable or corrupt key yields an empty collection and a warning,
never an exception, and never affects the other keys. Writes never raise
either: a failed write is logged and the in-memory state stays current.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from enum import Enum
from typing import TypeVar

from pydantic import TypeAdapter
from pydantic import ValidationError as SchemaError

from carbay.domain.activity import ActivityItem, BuyInterest
from carbay.domain.car import Car
from carbay.infra.serialization import (
    ACTIVITY_LIST,
    BUY_INTEREST_LIST,
    CAR_LIST,
    ID_LIST,
    ActivityRecord,
    BuyInterestRecord,
    CarRecord,
)
from carbay.ports.key_value_storage import KeyValueStorage, StorageError

logger = logging.getLogger(__name__)

T = TypeVar("T")


class StorageKey(str, Enum):
    FAVORITES = "favorites"
    COMPARE_LIST = "compareList"
    USER_CARS = "userCars"
    VIEW_HISTORY = "viewHistory"
    COMPARE_HISTORY = "compareHistory"
    BUY_INTERESTS = "buyInterests"


class StorePersistence:
    def __init__(self, storage: KeyValueStorage) -> None:
        self._storage = storage

    # ── reads ─────────────────────────────────────────────────────────────────

    def load_ids(self, key: StorageKey) -> list[str]:
        return self._read(key, ID_LIST, [])

    def load_user_cars(self) -> list[Car]:
        records = self._read(StorageKey.USER_CARS, CAR_LIST, [])
        return [record.to_domain() for record in records]

    def load_history(self, key: StorageKey) -> list[ActivityItem]:
        records = self._read(key, ACTIVITY_LIST, [])
        return [record.to_domain() for record in records]

    def load_buy_interests(self) -> list[BuyInterest]:
        records = self._read(StorageKey.BUY_INTERESTS, BUY_INTEREST_LIST, [])
        return [record.to_domain() for record in records]

    # ── writes ────────────────────────────────────────────────────────────────

    def save_ids(self, key: StorageKey, ids: Iterable[str]) -> None:
        self._write(key, ID_LIST, lambda: list(ids))

    def save_user_cars(self, cars: Iterable[Car]) -> None:
        self._write(StorageKey.USER_CARS, CAR_LIST, lambda: [CarRecord.from_domain(car) for car in cars])

    def save_history(self, key: StorageKey, items: Iterable[ActivityItem]) -> None:
        self._write(key, ACTIVITY_LIST, lambda: [ActivityRecord.from_domain(item) for item in items])

    def save_buy_interests(self, interests: Iterable[BuyInterest]) -> None:
        self._write(
            StorageKey.BUY_INTERESTS,
            BUY_INTEREST_LIST,
            lambda: [BuyInterestRecord.from_domain(interest) for interest in interests],
        )

    # ── internals ─────────────────────────────────────────────────────────────

    def _read(self, key: StorageKey, adapter: TypeAdapter[T], default: T) -> T:
        try:
            raw = self._storage.get(key.value)
        except StorageError:
            logger.warning(
                "Storage read failed, starting empty",
                exc_info=True,
                extra={"storage_key": key.value},
            )
            return default

        if raw is None:
            return default

        try:
            return adapter.validate_json(raw)
        except SchemaError as exc:
            logger.warning(
                "Stored collection is corrupt, starting empty",
                extra={"storage_key": key.value, "error_count": exc.error_count()},
            )
            return default

    def _write(self, key: StorageKey, adapter: TypeAdapter[T], build: Callable[[], T]) -> None:
        # Neither a record the wire schema rejects nor a storage failure reaches the caller
        try:
            payload = adapter.dump_json(build(), by_alias=True).decode("utf-8")
        except SchemaError as exc:
            logger.error(
                "Collection could not be serialized, not written",
                extra={"storage_key": key.value, "error_count": exc.error_count()},
            )
            return

        try:
            self._storage.set(key.value, payload)
        except StorageError:
            logger.error(
                "Storage write failed",
                exc_info=True,
                extra={"storage_key": key.value},
            )

"""The local data store: catalog union, selections, histories and interests.

The store is synchronous. HTTP handlers reach it from a worker threadpool, so
every mutation runs under one reentrant lock; reads are computed from current
state every time. Mutations update memory and write the affected collections
through to storage before returning.

Misuse is never an error here: duplicates, a full compare set or unknown ids
turn mutations into no-ops, and callers re-check state to notice. The hard
failures are touching the store while it is not open, and listing values a
Car cannot hold (domain ValidationError, raised before any state changes).
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable, Iterable
from dataclasses import replace
from datetime import datetime, timezone
from types import TracebackType
from typing import Any

from carbay.domain.activity import ActivityItem, BuyInterest, InterestStatus
from carbay.domain.car import Car, CarFields
from carbay.domain.errors import StoreNotInitializedError
from carbay.ports.catalog_source import CatalogSource
from carbay.store.persistence import StorageKey, StorePersistence

logger = logging.getLogger(__name__)

COMPARE_CAPACITY = 3
HISTORY_LIMIT = 50
USER_CAR_ID_PREFIX = "user-"

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def _unique(ids: Iterable[str]) -> list[str]:
    seen: set[str] = set()
    result = []
    for car_id in ids:
        if car_id not in seen:
            seen.add(car_id)
            result.append(car_id)
    return result


def _unique_by_car(entries: Iterable[Any]) -> list[Any]:
    """Keep the first entry per car_id (most recent, for newest-first logs)."""
    seen: set[str] = set()
    result = []
    for entry in entries:
        if entry.car_id not in seen:
            seen.add(entry.car_id)
            result.append(entry)
    return result


class CarStore:
    """
    Owns the vehicle catalog and every user selection derived from it.

    Lifecycle:
        store = CarStore(catalog_source, persistence)
        store.open()     # loads catalog, restores persisted collections
        ...
        store.close()    # further use raises StoreNotInitializedError

    The store is also a context manager doing open/close.
    """

    def __init__(
        self,
        catalog_source: CatalogSource,
        persistence: StorePersistence,
        clock: Clock = utc_now,
    ) -> None:
        self._catalog_source = catalog_source
        self._persistence = persistence
        self._clock = clock
        self._lock = threading.RLock()
        self._is_open = False
        self._last_id_millis = 0

        self._catalog: tuple[Car, ...] = ()
        self._user_cars: list[Car] = []
        self._favorites: list[str] = []
        self._compare_list: list[str] = []
        self._view_history: list[ActivityItem] = []
        self._compare_history: list[ActivityItem] = []
        self._buy_interests: list[BuyInterest] = []

    # ── lifecycle ─────────────────────────────────────────────────────────────

    @property
    def is_open(self) -> bool:
        return self._is_open

    def open(self) -> CarStore:
        """Load the catalog and restore persisted collections. Idempotent."""
        with self._lock:
            if self._is_open:
                return self

            self._catalog = tuple(self._catalog_source.load())
            known_ids = {car.id for car in self._catalog}

            user_cars: list[Car] = []
            for car in self._persistence.load_user_cars():
                if car.id in known_ids:
                    logger.warning("Dropping stored user car with a duplicate id", extra={"car_id": car.id})
                    continue
                known_ids.add(car.id)
                user_cars.append(car)
            self._user_cars = user_cars

            self._favorites = _unique(self._persistence.load_ids(StorageKey.FAVORITES))
            self._compare_list = _unique(self._persistence.load_ids(StorageKey.COMPARE_LIST))[
                :COMPARE_CAPACITY
            ]
            self._view_history = _unique_by_car(self._persistence.load_history(StorageKey.VIEW_HISTORY))[
                :HISTORY_LIMIT
            ]
            self._compare_history = _unique_by_car(
                self._persistence.load_history(StorageKey.COMPARE_HISTORY)
            )[:HISTORY_LIMIT]
            self._buy_interests = _unique_by_car(self._persistence.load_buy_interests())

            self._is_open = True

        logger.info(
            "Car store opened",
            extra={
                "catalog_count": len(self._catalog),
                "user_car_count": len(self._user_cars),
                "favorite_count": len(self._favorites),
                "compare_count": len(self._compare_list),
            },
        )
        return self

    def close(self) -> None:
        """Detach the store; every collection is already persisted."""
        with self._lock:
            if self._is_open:
                logger.info("Car store closed")
            self._is_open = False

    def __enter__(self) -> CarStore:
        return self.open()

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def _require_open(self) -> None:
        if not self._is_open:
            raise StoreNotInitializedError()

    # ── catalog union ─────────────────────────────────────────────────────────

    def get_all_cars(self) -> list[Car]:
        """Catalog cars first, then user cars in submission order."""
        self._require_open()
        return [*self._catalog, *self._user_cars]

    def get_car_by_id(self, car_id: str) -> Car | None:
        self._require_open()
        return next((car for car in self.get_all_cars() if car.id == car_id), None)

    def get_user_cars(self) -> list[Car]:
        self._require_open()
        return list(self._user_cars)

    def is_user_car(self, car_id: str) -> bool:
        self._require_open()
        return any(car.id == car_id for car in self._user_cars)

    def list_brands(self) -> list[str]:
        self._require_open()
        return sorted({car.brand for car in self.get_all_cars()})

    def add_user_car(self, fields: CarFields) -> Car:
        with self._lock:
            self._require_open()

            car = fields.to_car(self._next_user_car_id())
            user_cars = [*self._user_cars, car]
            self._persistence.save_user_cars(user_cars)
            self._user_cars = user_cars

        logger.info("User car added", extra={"car_id": car.id})
        return car

    def update_user_car(self, car_id: str, **changes: Any) -> Car | None:
        """
        Shallow-merge changes into a user car.

        Returns:
            The updated car, or None if car_id is not a user car

        Raises:
            ValidationError: If the merged car breaks a listing invariant;
                the stored car is left unchanged
        """
        changes.pop("id", None)
        for name in ("features", "images"):
            if name in changes:
                changes[name] = tuple(changes[name])
        if "images" in changes and not changes["images"]:
            del changes["images"]

        with self._lock:
            self._require_open()

            for index, car in enumerate(self._user_cars):
                if car.id == car_id:
                    updated = replace(car, **changes)
                    user_cars = list(self._user_cars)
                    user_cars[index] = updated
                    self._persistence.save_user_cars(user_cars)
                    self._user_cars = user_cars
                    logger.info("User car updated", extra={"car_id": car_id, "fields": sorted(changes)})
                    return updated

        logger.debug("Update ignored, not a user car", extra={"car_id": car_id})
        return None

    def remove_user_car(self, car_id: str) -> None:
        """Remove a user car and drop it from favorites and the compare set."""
        with self._lock:
            self._require_open()

            if not self.is_user_car(car_id):
                logger.debug("Removal ignored, not a user car", extra={"car_id": car_id})
                return

            self._user_cars = [car for car in self._user_cars if car.id != car_id]
            self._persistence.save_user_cars(self._user_cars)

            if car_id in self._favorites:
                self._favorites.remove(car_id)
                self._persistence.save_ids(StorageKey.FAVORITES, self._favorites)
            if car_id in self._compare_list:
                self._compare_list.remove(car_id)
                self._persistence.save_ids(StorageKey.COMPARE_LIST, self._compare_list)

        logger.info("User car removed", extra={"car_id": car_id})

    def _next_user_car_id(self) -> str:
        # Millisecond clock, forced strictly increasing and clear of existing ids
        millis = max(int(self._clock().timestamp() * 1000), self._last_id_millis + 1)
        existing = {car.id for car in self.get_all_cars()}
        while f"{USER_CAR_ID_PREFIX}{millis}" in existing:
            millis += 1
        self._last_id_millis = millis
        return f"{USER_CAR_ID_PREFIX}{millis}"

    # ── favorites ─────────────────────────────────────────────────────────────

    @property
    def favorites(self) -> tuple[str, ...]:
        self._require_open()
        return tuple(self._favorites)

    def add_to_favorites(self, car_id: str) -> bool:
        with self._lock:
            self._require_open()

            if car_id in self._favorites or self.get_car_by_id(car_id) is None:
                logger.debug("Favorite ignored", extra={"car_id": car_id})
                return False

            self._favorites.append(car_id)
            self._persistence.save_ids(StorageKey.FAVORITES, self._favorites)
            return True

    def remove_from_favorites(self, car_id: str) -> None:
        with self._lock:
            self._require_open()

            if car_id in self._favorites:
                self._favorites.remove(car_id)
                self._persistence.save_ids(StorageKey.FAVORITES, self._favorites)

    def is_favorite(self, car_id: str) -> bool:
        self._require_open()
        return car_id in self._favorites

    def get_favorite_cars(self) -> list[Car]:
        """Favorites resolved to cars; ids of removed cars are skipped."""
        return self._resolve(self.favorites)

    # ── compare set ───────────────────────────────────────────────────────────

    @property
    def compare_list(self) -> tuple[str, ...]:
        self._require_open()
        return tuple(self._compare_list)

    def add_to_compare(self, car_id: str) -> bool:
        """
        Append car_id to the compare set and log it in compare history.

        Returns:
            False, without changing anything, when the set is full, already
            holds car_id, or car_id names no car
        """
        with self._lock:
            self._require_open()

            if (
                len(self._compare_list) >= COMPARE_CAPACITY
                or car_id in self._compare_list
                or self.get_car_by_id(car_id) is None
            ):
                logger.debug(
                    "Compare ignored",
                    extra={"car_id": car_id, "compare_count": len(self._compare_list)},
                )
                return False

            self._compare_list.append(car_id)
            self._persistence.save_ids(StorageKey.COMPARE_LIST, self._compare_list)
            self.add_to_compare_history(car_id)
            return True

    def remove_from_compare(self, car_id: str) -> None:
        with self._lock:
            self._require_open()

            if car_id in self._compare_list:
                self._compare_list.remove(car_id)
                self._persistence.save_ids(StorageKey.COMPARE_LIST, self._compare_list)

    def is_in_compare(self, car_id: str) -> bool:
        self._require_open()
        return car_id in self._compare_list

    def clear_compare(self) -> None:
        with self._lock:
            self._require_open()
            self._compare_list = []
            self._persistence.save_ids(StorageKey.COMPARE_LIST, self._compare_list)

    def get_compare_cars(self) -> list[Car]:
        return self._resolve(self.compare_list)

    # ── activity histories ────────────────────────────────────────────────────

    @property
    def view_history(self) -> tuple[ActivityItem, ...]:
        self._require_open()
        return tuple(self._view_history)

    @property
    def compare_history(self) -> tuple[ActivityItem, ...]:
        self._require_open()
        return tuple(self._compare_history)

    def add_to_view_history(self, car_id: str) -> None:
        with self._lock:
            self._require_open()
            self._view_history = self._record_activity(self._view_history, car_id)
            self._persistence.save_history(StorageKey.VIEW_HISTORY, self._view_history)

    def add_to_compare_history(self, car_id: str) -> None:
        with self._lock:
            self._require_open()
            self._compare_history = self._record_activity(self._compare_history, car_id)
            self._persistence.save_history(StorageKey.COMPARE_HISTORY, self._compare_history)

    def clear_view_history(self) -> None:
        with self._lock:
            self._require_open()
            self._view_history = []
            self._persistence.save_history(StorageKey.VIEW_HISTORY, self._view_history)

    def clear_compare_history(self) -> None:
        with self._lock:
            self._require_open()
            self._compare_history = []
            self._persistence.save_history(StorageKey.COMPARE_HISTORY, self._compare_history)

    def get_view_history_cars(self) -> list[tuple[ActivityItem, Car]]:
        return self._resolve_entries(self.view_history)

    def get_compare_history_cars(self) -> list[tuple[ActivityItem, Car]]:
        return self._resolve_entries(self.compare_history)

    def _record_activity(self, history: list[ActivityItem], car_id: str) -> list[ActivityItem]:
        item = ActivityItem(car_id=car_id, timestamp=self._clock())
        remaining = [entry for entry in history if entry.car_id != car_id]
        return [item, *remaining][:HISTORY_LIMIT]

    # ── interest registry ─────────────────────────────────────────────────────

    @property
    def buy_interests(self) -> tuple[BuyInterest, ...]:
        self._require_open()
        return tuple(self._buy_interests)

    def add_buy_interest(self, car_id: str) -> bool:
        """Register interest once per car; later calls keep the first record."""
        with self._lock:
            self._require_open()

            if any(interest.car_id == car_id for interest in self._buy_interests):
                return False

            interest = BuyInterest(
                car_id=car_id,
                timestamp=self._clock(),
                status=InterestStatus.INTERESTED,
            )
            self._buy_interests = [interest, *self._buy_interests]
            self._persistence.save_buy_interests(self._buy_interests)

        logger.info("Buy interest registered", extra={"car_id": car_id})
        return True

    def clear_buy_interests(self) -> None:
        with self._lock:
            self._require_open()
            self._buy_interests = []
            self._persistence.save_buy_interests(self._buy_interests)

    def get_buy_interest_cars(self) -> list[tuple[BuyInterest, Car]]:
        return self._resolve_entries(self.buy_interests)

    # ── read helpers ──────────────────────────────────────────────────────────

    def _resolve(self, ids: Iterable[str]) -> list[Car]:
        cars_by_id = {car.id: car for car in self.get_all_cars()}
        return [cars_by_id[car_id] for car_id in ids if car_id in cars_by_id]

    def _resolve_entries(self, entries: Iterable[Any]) -> list[tuple[Any, Car]]:
        cars_by_id = {car.id: car for car in self.get_all_cars()}
        return [(entry, cars_by_id[entry.car_id]) for entry in entries if entry.car_id in cars_by_id]

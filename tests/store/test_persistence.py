"""
Test suite for StorePersistence and store restore.

Test sections:
- Round trip: a reopened store sees the same state
- Wire format: camelCase keys and values
- Failure isolation: one bad key never affects the others
- Restore normalization: duplicates and over-long collections are repaired
"""

from __future__ import annotations

import json
import logging
from unittest.mock import Mock

import pytest

from carbay.adapters.in_memory_catalog_source import InMemoryCatalogSource
from carbay.adapters.in_memory_key_value_storage import InMemoryKeyValueStorage
from carbay.domain.car import Car, CarFields
from carbay.domain.errors import ValidationError
from carbay.infra.serialization import CarRecord
from carbay.ports.key_value_storage import KeyValueStorage, StorageError
from carbay.store.car_store import CarStore
from carbay.store.persistence import StorageKey, StorePersistence


def reopen(catalog: list[Car], storage: KeyValueStorage) -> CarStore:
    return CarStore(InMemoryCatalogSource(catalog), StorePersistence(storage)).open()


class FailingStorage(KeyValueStorage):
    """Storage whose reads or writes fail for selected keys."""

    def __init__(self, inner: KeyValueStorage, broken_keys: set[str]) -> None:
        self._inner = inner
        self._broken_keys = broken_keys

    def get(self, key: str) -> str | None:
        if key in self._broken_keys:
            raise StorageError(f"read failed for {key}")
        return self._inner.get(key)

    def set(self, key: str, value: str) -> None:
        if key in self._broken_keys:
            raise StorageError(f"write failed for {key}")
        self._inner.set(key, value)


# ==============================================================================
# Round trip
# ==============================================================================


def test_reopened_store_restores_every_collection(
    store: CarStore, catalog: list[Car], storage: InMemoryKeyValueStorage, listing: CarFields
) -> None:
    user_car = store.add_user_car(listing)
    store.add_to_favorites("car-1")
    store.add_to_favorites(user_car.id)
    store.add_to_compare("car-2")
    store.add_to_view_history("car-3")
    store.add_buy_interest("car-1")

    restored = reopen(catalog, storage)

    assert restored.get_user_cars() == [user_car]
    assert restored.favorites == ("car-1", user_car.id)
    assert restored.compare_list == ("car-2",)
    assert restored.view_history == store.view_history
    assert restored.compare_history == store.compare_history
    assert restored.buy_interests == store.buy_interests


def test_cleared_collections_stay_cleared(
    store: CarStore, catalog: list[Car], storage: InMemoryKeyValueStorage
) -> None:
    store.add_to_view_history("car-1")
    store.clear_view_history()

    assert reopen(catalog, storage).view_history == ()


# ==============================================================================
# Wire format
# ==============================================================================


def test_collections_are_written_under_their_keys(
    store: CarStore, storage: InMemoryKeyValueStorage, listing: CarFields
) -> None:
    store.add_user_car(listing)
    store.add_to_favorites("car-1")
    store.add_to_compare("car-2")
    store.add_to_view_history("car-3")
    store.add_buy_interest("car-1")

    assert set(storage.snapshot()) == {key.value for key in StorageKey}


def test_records_use_camel_case(store: CarStore, storage: InMemoryKeyValueStorage, listing: CarFields) -> None:
    store.add_user_car(listing)
    store.add_buy_interest("car-1")

    user_cars = json.loads(storage.snapshot()["userCars"])
    interests = json.loads(storage.snapshot()["buyInterests"])

    assert user_cars[0]["fuelType"] == "Electric"
    assert "kmDriven" in user_cars[0]
    assert interests[0]["carId"] == "car-1"
    assert interests[0]["status"] == "Interested"


def test_favorites_are_a_plain_id_array(store: CarStore, storage: InMemoryKeyValueStorage) -> None:
    store.add_to_favorites("car-2")
    store.add_to_favorites("car-1")

    assert json.loads(storage.snapshot()["favorites"]) == ["car-2", "car-1"]


# ==============================================================================
# Failure isolation
# ==============================================================================


def test_corrupt_key_restores_empty_and_others_survive(
    store: CarStore,
    catalog: list[Car],
    storage: InMemoryKeyValueStorage,
    caplog: pytest.LogCaptureFixture,
) -> None:
    store.add_to_favorites("car-1")
    store.add_to_compare("car-2")
    storage.set("viewHistory", "{not json")

    with caplog.at_level(logging.WARNING, logger="carbay.store.persistence"):
        restored = reopen(catalog, storage)

    assert restored.view_history == ()
    assert restored.favorites == ("car-1",)
    assert restored.compare_list == ("car-2",)
    assert "Stored collection is corrupt, starting empty" in caplog.messages


def test_wrong_shape_is_treated_as_corrupt(catalog: list[Car]) -> None:
    storage = InMemoryKeyValueStorage({"favorites": '{"car-1": true}', "compareList": '["car-3"]'})

    restored = reopen(catalog, storage)

    assert restored.favorites == ()
    assert restored.compare_list == ("car-3",)


def test_unreadable_key_restores_empty(catalog: list[Car]) -> None:
    inner = InMemoryKeyValueStorage({"favorites": '["car-1"]', "compareList": '["car-2"]'})

    restored = reopen(catalog, FailingStorage(inner, broken_keys={"favorites"}))

    assert restored.favorites == ()
    assert restored.compare_list == ("car-2",)


def test_failed_write_keeps_in_memory_state(catalog: list[Car], caplog: pytest.LogCaptureFixture) -> None:
    inner = InMemoryKeyValueStorage()
    store = reopen(catalog, FailingStorage(inner, broken_keys={"favorites"}))

    with caplog.at_level(logging.ERROR, logger="carbay.store.persistence"):
        assert store.add_to_favorites("car-1") is True
        store.add_to_compare("car-2")

    assert store.is_favorite("car-1")
    assert inner.get("favorites") is None
    assert json.loads(inner.get("compareList") or "[]") == ["car-2"]
    assert "Storage write failed" in caplog.messages


def test_invalid_listing_never_reaches_user_cars(
    store: CarStore, catalog: list[Car], storage: InMemoryKeyValueStorage, listing: CarFields
) -> None:
    with pytest.raises(ValidationError):
        store.add_user_car(CarFields(brand="Maruti", model="Alto", year=2020, price=-1))

    assert store.get_user_cars() == []
    assert storage.get("userCars") is None

    user_car = store.add_user_car(listing)

    assert reopen(catalog, storage).get_user_cars() == [user_car]


def test_rejected_edit_keeps_stored_car_and_later_writes(
    store: CarStore, catalog: list[Car], storage: InMemoryKeyValueStorage, listing: CarFields
) -> None:
    user_car = store.add_user_car(listing)

    with pytest.raises(ValidationError):
        store.update_user_car(user_car.id, price=-1)

    assert store.get_user_cars() == [user_car]

    updated = store.update_user_car(user_car.id, price=850_000)
    second = store.add_user_car(listing)

    assert reopen(catalog, storage).get_user_cars() == [updated, second]


def test_unserializable_collection_is_logged_not_raised(
    store: CarStore,
    catalog: list[Car],
    storage: InMemoryKeyValueStorage,
    listing: CarFields,
    monkeypatch: pytest.MonkeyPatch,
    caplog: pytest.LogCaptureFixture,
) -> None:
    # A record missing every required field fails the wire schema
    monkeypatch.setattr(CarRecord, "from_domain", classmethod(lambda cls, car: cls.model_validate({"id": car.id})))

    with caplog.at_level(logging.ERROR, logger="carbay.store.persistence"):
        user_car = store.add_user_car(listing)

    assert store.get_user_cars() == [user_car]
    assert storage.get("userCars") is None
    assert "Collection could not be serialized, not written" in caplog.messages

    monkeypatch.undo()
    second = store.add_user_car(listing)

    assert reopen(catalog, storage).get_user_cars() == [user_car, second]


def test_missing_keys_restore_empty(catalog: list[Car]) -> None:
    restored = reopen(catalog, InMemoryKeyValueStorage())

    assert restored.favorites == ()
    assert restored.get_user_cars() == []
    assert restored.buy_interests == ()


def test_persistence_reads_each_key_once_on_open(catalog: list[Car]) -> None:
    storage = Mock(spec=KeyValueStorage)
    storage.get.return_value = None

    reopen(catalog, storage)

    assert sorted(call.args[0] for call in storage.get.call_args_list) == sorted(key.value for key in StorageKey)
    storage.set.assert_not_called()


# ==============================================================================
# Restore normalization
# ==============================================================================


def test_restore_dedupes_and_caps_compare_list(catalog: list[Car]) -> None:
    storage = InMemoryKeyValueStorage(
        {
            "favorites": '["car-1", "car-1", "car-2"]',
            "compareList": '["car-1", "car-2", "car-2", "car-3", "car-4"]',
        }
    )

    restored = reopen(catalog, storage)

    assert restored.favorites == ("car-1", "car-2")
    assert restored.compare_list == ("car-1", "car-2", "car-3")


def test_restore_keeps_newest_history_entry_per_car(catalog: list[Car]) -> None:
    history = [
        {"carId": "car-1", "timestamp": "2026-01-02T10:00:00Z"},
        {"carId": "car-2", "timestamp": "2026-01-02T09:00:00Z"},
        {"carId": "car-1", "timestamp": "2026-01-01T10:00:00Z"},
    ]
    storage = InMemoryKeyValueStorage({"viewHistory": json.dumps(history)})

    restored = reopen(catalog, storage)

    assert [item.car_id for item in restored.view_history] == ["car-1", "car-2"]
    assert restored.view_history[0].timestamp.day == 2


def test_restore_caps_history_at_fifty(catalog: list[Car]) -> None:
    history = [{"carId": f"id-{n}", "timestamp": "2026-01-01T00:00:00Z"} for n in range(60)]
    storage = InMemoryKeyValueStorage({"compareHistory": json.dumps(history)})

    restored = reopen(catalog, storage)

    assert len(restored.compare_history) == 50
    assert restored.compare_history[0].car_id == "id-0"


def test_restore_drops_user_car_shadowing_catalog_id(
    catalog: list[Car], listing: CarFields, caplog: pytest.LogCaptureFixture
) -> None:
    storage = InMemoryKeyValueStorage()
    first = reopen([], storage)
    first.add_user_car(listing)
    stored = json.loads(storage.snapshot()["userCars"])
    stored[0]["id"] = "car-1"
    storage.set("userCars", json.dumps(stored))

    with caplog.at_level(logging.WARNING, logger="carbay.store.car_store"):
        restored = reopen(catalog, storage)

    assert restored.get_user_cars() == []
    assert restored.get_car_by_id("car-1") == catalog[0]
    assert "Dropping stored user car with a duplicate id" in caplog.messages

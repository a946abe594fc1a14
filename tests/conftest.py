from __future__ import annotations

from collections.abc import Callable
from datetime import datetime, timedelta, timezone
from typing import Any

import pytest

from carbay.adapters.in_memory_catalog_source import InMemoryCatalogSource
from carbay.adapters.in_memory_key_value_storage import InMemoryKeyValueStorage
from carbay.domain.car import Car, CarFields
from carbay.store.car_store import CarStore
from carbay.store.persistence import StorePersistence


def build_car(car_id: str, **overrides: Any) -> Car:
    values: dict[str, Any] = {
        "id": car_id,
        "brand": "Honda",
        "model": "City",
        "year": 2019,
        "price": 1_000_000,
        "fuel_type": "Petrol",
        "transmission": "Manual",
        "km_driven": 40_000,
        "ownership": "1st Owner",
        "location": "Pune",
        "engine": "1498 cc",
        "power": "119 bhp",
        "mileage": "17.8 kmpl",
        "color": "Lunar Silver",
        "features": ("Touchscreen",),
        "images": ("https://img.example/city.jpg",),
        "description": "Clean car.",
    }
    values.update(overrides)
    return Car(**values)


class FakeClock:
    """Deterministic clock advancing one second per call."""

    def __init__(self, start: datetime | None = None) -> None:
        self.now = start or datetime(2026, 1, 1, 12, 0, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        self.now += timedelta(seconds=1)
        return self.now


@pytest.fixture()
def make_car() -> Callable[..., Car]:
    return build_car


@pytest.fixture()
def catalog() -> list[Car]:
    return [
        build_car("car-1", brand="Maruti Suzuki", model="Swift", year=2020, price=500_000, km_driven=30_000),
        build_car("car-2", brand="Honda", model="City", year=2019, price=1_000_000, km_driven=45_000),
        build_car(
            "car-3",
            brand="Hyundai",
            model="Creta",
            year=2021,
            price=1_500_000,
            fuel_type="Diesel",
            transmission="Automatic",
            km_driven=20_000,
        ),
    ]


@pytest.fixture()
def storage() -> InMemoryKeyValueStorage:
    return InMemoryKeyValueStorage()


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def store(catalog: list[Car], storage: InMemoryKeyValueStorage, clock: FakeClock) -> CarStore:
    return CarStore(InMemoryCatalogSource(catalog), StorePersistence(storage), clock=clock).open()


@pytest.fixture()
def listing() -> CarFields:
    return CarFields(brand="Tata", model="Nexon", year=2022, price=900_000, fuel_type="Electric")

"""Test suite for JsonFileCatalogSource."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from carbay.adapters.json_file_catalog_source import JsonFileCatalogSource, bundled_catalog_path


def _record(car_id: str, **overrides: object) -> dict[str, object]:
    record: dict[str, object] = {
        "id": car_id,
        "brand": "Kia",
        "model": "Seltos",
        "year": 2021,
        "price": 1_350_000,
        "fuelType": "Diesel",
        "transmission": "Manual",
        "kmDriven": 28_000,
        "ownership": "1st Owner",
        "location": "Hyderabad",
        "engine": "1493 cc",
        "power": "114 bhp",
        "mileage": "20.8 kmpl",
        "color": "Gravity Grey",
        "features": ["Sunroof"],
        "images": ["https://img.example/seltos.jpg"],
        "description": "Single owner.",
    }
    record.update(overrides)
    return record


def test_loads_camel_case_records_in_file_order(tmp_path: Path) -> None:
    path = tmp_path / "cars.json"
    path.write_text(json.dumps([_record("b"), _record("a", fuelType="Petrol")]), encoding="utf-8")

    cars = JsonFileCatalogSource(path).load()

    assert [car.id for car in cars] == ["b", "a"]
    assert cars[0].fuel_type == "Diesel"
    assert cars[0].km_driven == 28_000
    assert cars[0].features == ("Sunroof",)
    assert cars[1].fuel_type == "Petrol"


def test_malformed_catalog_fails_loudly(tmp_path: Path) -> None:
    path = tmp_path / "cars.json"
    path.write_text(json.dumps([_record("a", images=[])]), encoding="utf-8")

    with pytest.raises(ValidationError):
        JsonFileCatalogSource(path).load()


def test_missing_file_fails_loudly(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        JsonFileCatalogSource(tmp_path / "absent.json").load()


def test_defaults_to_bundled_catalog() -> None:
    source = JsonFileCatalogSource()

    assert source.path == bundled_catalog_path()


def test_bundled_catalog_is_valid() -> None:
    cars = JsonFileCatalogSource().load()

    assert len(cars) >= 12
    assert len({car.id for car in cars}) == len(cars)
    assert all(car.images for car in cars)
    assert all(not car.id.startswith("user-") for car in cars)

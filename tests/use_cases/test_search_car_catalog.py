"""Test suite for SearchCarCatalog use case."""

from __future__ import annotations

import pytest

from carbay.domain.car import CarFields, CatalogFilters, FilterValidationError
from carbay.store.car_store import CarStore
from carbay.use_cases.search_car_catalog import (
    SearchCarCatalog,
    SearchCarCatalogRequest,
    SearchCarCatalogResponse,
)


def search(store: CarStore, **filters) -> list[str]:
    response = SearchCarCatalog(car_store=store).execute(
        SearchCarCatalogRequest(filters=CatalogFilters(**filters))
    )
    return [car.id for car in response.cars]


# ==============================================================================
# Happy Path Tests
# ==============================================================================


def test_default_filters_return_everything(store: CarStore) -> None:
    response = SearchCarCatalog(car_store=store).execute(SearchCarCatalogRequest(filters=CatalogFilters()))

    assert isinstance(response, SearchCarCatalogResponse)
    assert [car.id for car in response.cars] == ["car-1", "car-2", "car-3"]
    assert response.total_count == 3


def test_price_range_filter(store: CarStore) -> None:
    assert search(store, price_min=600_000, price_max=1_600_000) == ["car-2", "car-3"]


def test_query_matches_brand_or_model(store: CarStore) -> None:
    assert search(store, query="creta") == ["car-3"]
    assert search(store, query="HONDA") == ["car-2"]


def test_filters_combine_with_and(store: CarStore) -> None:
    assert search(store, fuel_type="Diesel", transmission="Automatic") == ["car-3"]
    assert search(store, fuel_type="Diesel", brand="Honda") == []


def test_user_listings_are_searched_after_catalog(store: CarStore, listing: CarFields) -> None:
    user_car = store.add_user_car(listing)

    assert search(store, fuel_type="Electric") == [user_car.id]
    assert search(store)[-1] == user_car.id


def test_removed_listing_disappears_from_results(store: CarStore, listing: CarFields) -> None:
    user_car = store.add_user_car(listing)
    store.remove_user_car(user_car.id)

    assert search(store, query="nexon") == []


# ==============================================================================
# Validation Tests
# ==============================================================================


def test_inverted_price_range_is_rejected(store: CarStore) -> None:
    with pytest.raises(FilterValidationError):
        search(store, price_min=1_000_000, price_max=10)

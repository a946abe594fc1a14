"""
Dependency injection for FastAPI routes.

Key principle: one CarStore per application, opened in the app lifespan and
kept on app.state. Use cases are cheap and built per request around it.
"""

from __future__ import annotations

from fastapi import Depends, Request

from carbay.domain.errors import StoreNotInitializedError
from carbay.store.car_store import CarStore
from carbay.use_cases.calculate_emi import CalculateEmi
from carbay.use_cases.get_car_by_id import GetCarById
from carbay.use_cases.get_comparison import GetComparison
from carbay.use_cases.search_car_catalog import SearchCarCatalog


def get_car_store(request: Request) -> CarStore:
    """
    Provides the application's open CarStore.

    Raises:
        StoreNotInitializedError: If the app was started without a store
            (lifespan not run) or the store was already closed
    """
    car_store: CarStore | None = getattr(request.app.state, "car_store", None)

    if car_store is None or not car_store.is_open:
        raise StoreNotInitializedError("Car store is not available on this application")

    return car_store


def get_search_catalog_use_case(car_store: CarStore = Depends(get_car_store)) -> SearchCarCatalog:
    return SearchCarCatalog(car_store=car_store)


def get_get_car_by_id_use_case(car_store: CarStore = Depends(get_car_store)) -> GetCarById:
    return GetCarById(car_store=car_store)


def get_comparison_use_case(car_store: CarStore = Depends(get_car_store)) -> GetComparison:
    return GetComparison(car_store=car_store)


def get_calculate_emi_use_case() -> CalculateEmi:
    return CalculateEmi()

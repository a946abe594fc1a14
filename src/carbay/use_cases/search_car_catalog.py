from __future__ import annotations

from dataclasses import dataclass

from carbay.domain.car import Car, CatalogFilters
from carbay.store.car_store import CarStore


@dataclass(frozen=True, slots=True)
class SearchCarCatalogRequest:
    filters: CatalogFilters


@dataclass(frozen=True, slots=True)
class SearchCarCatalogResponse:
    cars: list[Car]
    total_count: int


class SearchCarCatalog:
    """
    Filter/search over the catalog union.

    Stateless: every call filters the store's current get_all_cars() snapshot,
    keeping its order (catalog first, then user listings).
    """

    def __init__(self, car_store: CarStore) -> None:
        self._car_store = car_store

    def execute(self, request: SearchCarCatalogRequest) -> SearchCarCatalogResponse:
        """
        Execute catalog search.

        Args:
            request: Search filters (AND semantics)

        Returns:
            Response containing matching cars and their count

        Raises:
            FilterValidationError: If filter parameters are invalid
        """
        request.filters.validate()

        cars = [car for car in self._car_store.get_all_cars() if request.filters.matches(car)]

        return SearchCarCatalogResponse(cars=cars, total_count=len(cars))

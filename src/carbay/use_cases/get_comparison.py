from __future__ import annotations

from dataclasses import dataclass

from carbay.domain.car import Car
from carbay.domain.comparison import BestValue, find_best_value
from carbay.store.car_store import CarStore


@dataclass(frozen=True, slots=True)
class ComparisonResponse:
    car_ids: tuple[str, ...]
    cars: list[Car]
    best_value: BestValue | None


class GetComparison:
    """
    Resolve the compare set and pick per-metric winners.

    Ids of cars removed since they were compared are dropped before the
    best-value computation, so it only sees cars that still exist.
    """

    def __init__(self, car_store: CarStore) -> None:
        self._car_store = car_store

    def execute(self) -> ComparisonResponse:
        cars = self._car_store.get_compare_cars()

        return ComparisonResponse(
            car_ids=self._car_store.compare_list,
            cars=cars,
            best_value=find_best_value(cars),
        )

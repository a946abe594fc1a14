from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from carbay.domain.car import Car


@dataclass(frozen=True, slots=True)
class BestValue:
    """Winning car id per comparison metric."""

    lowest_price_id: str
    lowest_km_driven_id: str
    latest_year_id: str


def find_best_value(cars: Sequence[Car]) -> BestValue | None:
    """
    Pick the per-metric winners among compared cars.

    Only meaningful with two or more cars; returns None otherwise.

    Ties go to the first car reaching the extreme value, in compare-set order.
    """
    if len(cars) < 2:
        return None

    return BestValue(
        lowest_price_id=min(cars, key=lambda car: car.price).id,
        lowest_km_driven_id=min(cars, key=lambda car: car.km_driven).id,
        latest_year_id=max(cars, key=lambda car: car.year).id,
    )

from __future__ import annotations

from collections.abc import Iterable

from carbay.domain.car import Car
from carbay.ports.catalog_source import CatalogSource


class InMemoryCatalogSource(CatalogSource):
    """Catalog handed over as a ready-made list of cars."""

    def __init__(self, cars: Iterable[Car]) -> None:
        self._cars = tuple(cars)

    def load(self) -> list[Car]:
        return list(self._cars)

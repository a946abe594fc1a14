"""Catalog source backed by a JSON file of car records."""

from __future__ import annotations

import logging
from importlib import resources
from pathlib import Path

from carbay.domain.car import Car
from carbay.infra.serialization import CAR_LIST
from carbay.ports.catalog_source import CatalogSource

logger = logging.getLogger(__name__)


def bundled_catalog_path() -> Path:
    """Path of the catalog shipped inside the package."""
    return Path(str(resources.files("carbay") / "data" / "cars.json"))


class JsonFileCatalogSource(CatalogSource):
    """
    Reads a camelCase JSON array of car records.

    - Records are validated with pydantic; a malformed file fails loudly,
      since the store can not start without its catalog
    - File order is display order
    """

    def __init__(self, path: Path | None = None) -> None:
        self._path = path or bundled_catalog_path()

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> list[Car]:
        raw = self._path.read_text(encoding="utf-8")
        cars = [record.to_domain() for record in CAR_LIST.validate_json(raw)]

        logger.info(
            "Catalog loaded",
            extra={"path": str(self._path), "car_count": len(cars)},
        )
        return cars

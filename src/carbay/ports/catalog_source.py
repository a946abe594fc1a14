from __future__ import annotations

from abc import ABC, abstractmethod

from carbay.domain.car import Car


class CatalogSource(ABC):
    """
    Port for the static, read-only vehicle catalog.

    Contract:
        - load() is called once, when the store is opened
        - The store never writes back to the source
    """

    @abstractmethod
    def load(self) -> list[Car]:
        """Return catalog cars in display order."""
        ...

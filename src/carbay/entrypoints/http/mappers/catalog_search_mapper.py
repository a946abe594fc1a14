from __future__ import annotations

from carbay.domain.car import CatalogFilters
from carbay.entrypoints.http.dtos.catalog_search import (
    CarsSearchQueryDTO,
    CatalogSearchResponseDTO,
)
from carbay.entrypoints.http.mappers.car_mapper import CarMapper
from carbay.use_cases.search_car_catalog import (
    SearchCarCatalogRequest,
    SearchCarCatalogResponse,
)


class CatalogSearchMapper:
    """Maps between REST DTOs and domain models for catalog search."""

    @staticmethod
    def to_domain_filters(dto: CarsSearchQueryDTO) -> CatalogFilters:
        """
        Converts query params to domain filters.

        Args:
            dto: The data transfer object containing search query parameters

        Returns:
            CatalogFilters: Domain filters; the search text is trimmed
        """
        return CatalogFilters(
            query=dto.q.strip(),
            brand=dto.brand,
            fuel_type=dto.fuel_type,
            transmission=dto.transmission,
            price_min=dto.price_min,
            price_max=dto.price_max,
        )

    @staticmethod
    def to_domain_request(dto: CarsSearchQueryDTO) -> SearchCarCatalogRequest:
        return SearchCarCatalogRequest(filters=CatalogSearchMapper.to_domain_filters(dto))

    @staticmethod
    def to_response(result: SearchCarCatalogResponse) -> CatalogSearchResponseDTO:
        return CatalogSearchResponseDTO(
            cars=[CarMapper.to_response(car) for car in result.cars],
            total=result.total_count,
        )

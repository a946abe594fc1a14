from __future__ import annotations

from collections.abc import Sequence

from carbay.domain.activity import ActivityItem, BuyInterest
from carbay.domain.car import Car
from carbay.entrypoints.http.dtos.activity import (
    ActivityEntryDTO,
    ActivityResponseDTO,
    BuyInterestEntryDTO,
    BuyInterestsResponseDTO,
)
from carbay.entrypoints.http.dtos.selections import (
    BestValueDTO,
    ComparisonResponseDTO,
    FavoritesResponseDTO,
)
from carbay.entrypoints.http.mappers.car_mapper import CarMapper
from carbay.use_cases.get_comparison import ComparisonResponse


class SelectionMapper:
    """Maps favorites, comparison and activity reads to REST DTOs."""

    @staticmethod
    def to_favorites_response(ids: Sequence[str], cars: Sequence[Car]) -> FavoritesResponseDTO:
        return FavoritesResponseDTO(
            ids=list(ids),
            cars=[CarMapper.to_response(car) for car in cars],
        )

    @staticmethod
    def to_comparison_response(result: ComparisonResponse) -> ComparisonResponseDTO:
        best_value = None
        if result.best_value is not None:
            best_value = BestValueDTO(
                lowest_price_id=result.best_value.lowest_price_id,
                lowest_km_driven_id=result.best_value.lowest_km_driven_id,
                latest_year_id=result.best_value.latest_year_id,
            )

        return ComparisonResponseDTO(
            ids=list(result.car_ids),
            cars=[CarMapper.to_response(car) for car in result.cars],
            best_value=best_value,
        )

    @staticmethod
    def to_activity_response(entries: Sequence[tuple[ActivityItem, Car]]) -> ActivityResponseDTO:
        return ActivityResponseDTO(
            entries=[
                ActivityEntryDTO(
                    car_id=item.car_id,
                    timestamp=item.timestamp,
                    car=CarMapper.to_response(car),
                )
                for item, car in entries
            ]
        )

    @staticmethod
    def to_buy_interests_response(
        entries: Sequence[tuple[BuyInterest, Car]], changed: bool = False
    ) -> BuyInterestsResponseDTO:
        return BuyInterestsResponseDTO(
            entries=[
                BuyInterestEntryDTO(
                    car_id=interest.car_id,
                    timestamp=interest.timestamp,
                    status=interest.status.value,
                    car=CarMapper.to_response(car),
                )
                for interest, car in entries
            ],
            changed=changed,
        )

from pydantic import BaseModel, Field

from carbay.entrypoints.http.dtos.car import CarResponseDTO


class SelectionResponseDTO(BaseModel):
    """State of a selection set after a mutation."""

    ids: list[str]
    changed: bool = Field(description="False when the request was a no-op")


class FavoritesResponseDTO(BaseModel):
    ids: list[str]
    cars: list[CarResponseDTO]


class BestValueDTO(BaseModel):
    lowest_price_id: str
    lowest_km_driven_id: str
    latest_year_id: str


class ComparisonResponseDTO(BaseModel):
    ids: list[str]
    cars: list[CarResponseDTO]
    best_value: BestValueDTO | None = Field(
        default=None,
        description="Per-metric winners; null with fewer than two cars",
    )

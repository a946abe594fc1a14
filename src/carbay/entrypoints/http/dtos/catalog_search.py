from pydantic import BaseModel, Field

from carbay.domain.car import ALL, PRICE_RANGE_MAX, PRICE_RANGE_MIN
from carbay.entrypoints.http.dtos.car import CarResponseDTO


class CarsSearchQueryDTO(BaseModel):
    """Query parameters for searching cars in the catalog."""

    q: str = Field(
        default="",
        description="Case-insensitive substring of brand or model",
        examples=["city"],
    )
    brand: str = Field(
        default=ALL,
        description="Exact brand, or 'All'",
        examples=["Honda"],
    )
    fuel_type: str = Field(
        default=ALL,
        description="Exact fuel type, or 'All'",
        examples=["Diesel"],
    )
    transmission: str = Field(
        default=ALL,
        description="Exact transmission, or 'All'",
        examples=["Automatic"],
    )
    price_min: int = Field(
        default=PRICE_RANGE_MIN,
        description="Minimum price (inclusive, whole currency units)",
        examples=[500000],
        ge=0,
    )
    price_max: int = Field(
        default=PRICE_RANGE_MAX,
        description="Maximum price (inclusive, whole currency units)",
        examples=[1500000],
        ge=0,
    )


class CatalogSearchResponseDTO(BaseModel):
    cars: list[CarResponseDTO]
    total: int


class BrandsResponseDTO(BaseModel):
    brands: list[str]

"""Parse-and-validate boundary for listings, plus Car -> DTO mapping.

Form input is loosely typed (numbers arrive as strings, blanks mean "not
given"). Everything is converted here, so the store only ever receives
typed CarFields or typed partial changes.
"""

from __future__ import annotations

from datetime import date
from typing import Any

from carbay.domain.car import (
    DEFAULT_DESCRIPTION,
    DEFAULT_FUEL_TYPE,
    DEFAULT_LOCATION,
    DEFAULT_OWNERSHIP,
    DEFAULT_TRANSMISSION,
    NOT_AVAILABLE,
    PLACEHOLDER_IMAGE,
    Car,
    CarFields,
)
from carbay.domain.errors import ValidationError
from carbay.entrypoints.http.dtos.car import (
    CarDetailResponseDTO,
    CarListingDTO,
    CarListingPatchDTO,
    CarResponseDTO,
)

MIN_YEAR = 1900

TEXT_DEFAULTS: dict[str, str] = {
    "fuel_type": DEFAULT_FUEL_TYPE,
    "transmission": DEFAULT_TRANSMISSION,
    "ownership": DEFAULT_OWNERSHIP,
    "location": DEFAULT_LOCATION,
    "engine": NOT_AVAILABLE,
    "power": NOT_AVAILABLE,
    "mileage": NOT_AVAILABLE,
    "color": NOT_AVAILABLE,
    "description": DEFAULT_DESCRIPTION,
}


def parse_int(value: int | str | None) -> int | None:
    """Whole number from an int or a numeric string; None when malformed."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    try:
        return int(value.strip())
    except ValueError:
        return None


def clean_tags(values: list[str]) -> tuple[str, ...]:
    """Trimmed, non-blank, first-occurrence-wins tags."""
    tags: list[str] = []
    for value in values:
        tag = value.strip()
        if tag and tag not in tags:
            tags.append(tag)
    return tuple(tags)


class _ListingParser:
    """Collects field errors so one response reports all of them."""

    def __init__(self) -> None:
        self.errors: list[dict[str, str]] = []

    def required_text(self, field: str, value: str | None) -> str:
        text = (value or "").strip()
        if not text:
            self.errors.append({"field": field, "message": "Is required", "code": "REQUIRED"})
        return text

    def year(self, value: int | str | None) -> int:
        year = parse_int(value)
        max_year = date.today().year + 1
        if year is None:
            self.errors.append(
                {"field": "year", "message": f"Must be a whole number: {value}", "code": "INVALID_INTEGER"}
            )
            return 0
        if not MIN_YEAR <= year <= max_year:
            self.errors.append(
                {
                    "field": "year",
                    "message": f"Must be between {MIN_YEAR} and {max_year}",
                    "code": "OUT_OF_RANGE",
                }
            )
        return year

    def price(self, value: int | str | None) -> int:
        price = parse_int(value)
        if price is None:
            self.errors.append(
                {"field": "price", "message": f"Must be a whole number: {value}", "code": "INVALID_INTEGER"}
            )
            return 0
        if price <= 0:
            self.errors.append({"field": "price", "message": "Must be > 0", "code": "OUT_OF_RANGE"})
        return price

    def raise_if_invalid(self) -> None:
        if self.errors:
            raise ValidationError(errors=self.errors)


def _km_driven(value: int | str | None) -> int:
    # Unparseable or negative odometer readings fall back to 0
    km = parse_int(value)
    return km if km is not None and km >= 0 else 0


def _text_or_default(field: str, value: str | None) -> str:
    text = (value or "").strip()
    return text or TEXT_DEFAULTS[field]


class CarMapper:
    """Maps between REST DTOs and domain models for listings."""

    @staticmethod
    def to_domain_fields(dto: CarListingDTO) -> CarFields:
        """
        Converts a sell form payload to validated CarFields.

        Required: brand, model, year, price. Optional text falls back to the
        listing defaults; a malformed km_driven becomes 0.

        Raises:
            ValidationError: With one entry per invalid required field
        """
        parser = _ListingParser()

        brand = parser.required_text("brand", dto.brand)
        model = parser.required_text("model", dto.model)
        year = parser.year(dto.year)
        price = parser.price(dto.price)
        parser.raise_if_invalid()

        return CarFields(
            brand=brand,
            model=model,
            year=year,
            price=price,
            km_driven=_km_driven(dto.km_driven),
            features=clean_tags(dto.features),
            images=clean_tags(dto.images) or (PLACEHOLDER_IMAGE,),
            **{field: _text_or_default(field, getattr(dto, field)) for field in TEXT_DEFAULTS},
        )

    @staticmethod
    def to_domain_changes(dto: CarListingPatchDTO) -> dict[str, Any]:
        """
        Converts an edit payload to typed partial changes.

        Only fields present in the payload are returned. The same rules as
        for a new listing apply to each of them.

        Raises:
            ValidationError: With one entry per invalid field
        """
        parser = _ListingParser()
        changes: dict[str, Any] = {}

        for field in dto.model_fields_set:
            value = getattr(dto, field)
            if field in ("brand", "model"):
                changes[field] = parser.required_text(field, value)
            elif field == "year":
                changes[field] = parser.year(value)
            elif field == "price":
                changes[field] = parser.price(value)
            elif field == "km_driven":
                changes[field] = _km_driven(value)
            elif field == "features":
                changes[field] = clean_tags(value or [])
            elif field == "images":
                changes[field] = clean_tags(value or []) or (PLACEHOLDER_IMAGE,)
            else:
                changes[field] = _text_or_default(field, value)

        parser.raise_if_invalid()
        return changes

    @staticmethod
    def to_response(car: Car) -> CarResponseDTO:
        return CarResponseDTO(
            id=car.id,
            brand=car.brand,
            model=car.model,
            year=car.year,
            price=car.price,
            fuel_type=car.fuel_type,
            transmission=car.transmission,
            km_driven=car.km_driven,
            ownership=car.ownership,
            location=car.location,
            engine=car.engine,
            power=car.power,
            mileage=car.mileage,
            color=car.color,
            features=list(car.features),
            images=list(car.images),
            description=car.description,
        )

    @staticmethod
    def to_detail_response(
        car: Car, *, is_user_car: bool, is_favorite: bool, is_in_compare: bool
    ) -> CarDetailResponseDTO:
        return CarDetailResponseDTO(
            **CarMapper.to_response(car).model_dump(),
            is_user_car=is_user_car,
            is_favorite=is_favorite,
            is_in_compare=is_in_compare,
        )

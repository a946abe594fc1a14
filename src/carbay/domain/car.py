from __future__ import annotations

from dataclasses import dataclass

from carbay.domain.errors import ValidationError


# ==============================================================================
# Domain Exceptions
# ==============================================================================


class FilterValidationError(ValidationError):
    """Raised when filter parameters are invalid."""

    pass


# ==============================================================================
# Listing defaults (sell form)
# ==============================================================================

ALL = "All"

DEFAULT_FUEL_TYPE = "Petrol"
DEFAULT_TRANSMISSION = "Automatic"
DEFAULT_OWNERSHIP = "1st Owner"
DEFAULT_LOCATION = "India"
NOT_AVAILABLE = "N/A"
DEFAULT_DESCRIPTION = "Well-maintained car for sale."
PLACEHOLDER_IMAGE = "https://images.unsplash.com/photo-1552519507-da3b142c6e3d?w=800"

FUEL_TYPES = ("Petrol", "Diesel", "Electric", "Hybrid")
TRANSMISSIONS = ("Automatic", "Manual")

PRICE_RANGE_MIN = 0
PRICE_RANGE_MAX = 15_000_000


def _listing_errors(price: int, km_driven: int) -> list[dict[str, str]]:
    errors = []
    if price < 0:
        errors.append({"field": "price", "message": "Must be >= 0", "code": "OUT_OF_RANGE"})
    if km_driven < 0:
        errors.append({"field": "km_driven", "message": "Must be >= 0", "code": "OUT_OF_RANGE"})
    return errors


@dataclass(frozen=True)
class Car:
    id: str
    brand: str
    model: str
    year: int
    price: int  # smallest currency unit
    fuel_type: str
    transmission: str
    km_driven: int
    ownership: str
    location: str
    engine: str
    power: str
    mileage: str
    color: str
    features: tuple[str, ...]
    images: tuple[str, ...]
    description: str

    def __post_init__(self) -> None:
        """
        Enforce what every stored listing must satisfy.

        Raises:
            ValidationError: For an empty id, a negative price or odometer
                reading, or a listing without images
        """
        errors = _listing_errors(self.price, self.km_driven)
        if not self.id:
            errors.append({"field": "id", "message": "Is required", "code": "REQUIRED"})
        if not self.images:
            errors.append({"field": "images", "message": "At least one image is required", "code": "REQUIRED"})
        if errors:
            raise ValidationError(errors=errors)


@dataclass(frozen=True, slots=True)
class CarFields:
    """Everything a seller provides for a listing; the store assigns the id."""

    brand: str
    model: str
    year: int
    price: int
    fuel_type: str = DEFAULT_FUEL_TYPE
    transmission: str = DEFAULT_TRANSMISSION
    km_driven: int = 0
    ownership: str = DEFAULT_OWNERSHIP
    location: str = DEFAULT_LOCATION
    engine: str = NOT_AVAILABLE
    power: str = NOT_AVAILABLE
    mileage: str = NOT_AVAILABLE
    color: str = NOT_AVAILABLE
    features: tuple[str, ...] = ()
    images: tuple[str, ...] = (PLACEHOLDER_IMAGE,)
    description: str = DEFAULT_DESCRIPTION

    def __post_init__(self) -> None:
        # Empty images are allowed here; to_car substitutes the placeholder
        errors = _listing_errors(self.price, self.km_driven)
        if errors:
            raise ValidationError(errors=errors)

    def to_car(self, car_id: str) -> Car:
        return Car(
            id=car_id,
            brand=self.brand,
            model=self.model,
            year=self.year,
            price=self.price,
            fuel_type=self.fuel_type,
            transmission=self.transmission,
            km_driven=self.km_driven,
            ownership=self.ownership,
            location=self.location,
            engine=self.engine,
            power=self.power,
            mileage=self.mileage,
            color=self.color,
            features=tuple(self.features),
            images=tuple(self.images) or (PLACEHOLDER_IMAGE,),
            description=self.description,
        )


@dataclass(frozen=True, slots=True)
class CatalogFilters:
    query: str = ""
    brand: str = ALL
    fuel_type: str = ALL
    transmission: str = ALL
    price_min: int = PRICE_RANGE_MIN
    price_max: int = PRICE_RANGE_MAX

    def validate(self) -> None:
        """
        Validate filter parameters.

        Raises:
            FilterValidationError: If filter parameters are invalid
        """
        # Guardrails: prices are whole currency units
        if not isinstance(self.price_min, int) or not isinstance(self.price_max, int):
            raise FilterValidationError("price_min and price_max must be integers")

        if self.price_min > self.price_max:
            raise FilterValidationError("price_min cannot be greater than price_max")

    def matches(self, car: Car) -> bool:
        """AND-semantics match; an empty query or "All" selector matches everything."""
        if self.query:
            needle = self.query.lower()
            if needle not in car.brand.lower() and needle not in car.model.lower():
                return False
        if self.brand != ALL and car.brand != self.brand:
            return False
        if self.fuel_type != ALL and car.fuel_type != self.fuel_type:
            return False
        if self.transmission != ALL and car.transmission != self.transmission:
            return False
        return self.price_min <= car.price <= self.price_max

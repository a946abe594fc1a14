from pydantic import BaseModel, ConfigDict, Field


class CarResponseDTO(BaseModel):
    id: str
    brand: str
    model: str
    year: int
    price: int
    fuel_type: str
    transmission: str
    km_driven: int
    ownership: str
    location: str
    engine: str
    power: str
    mileage: str
    color: str
    features: list[str]
    images: list[str]
    description: str


class CarDetailResponseDTO(CarResponseDTO):
    """A single car plus the flags the details view needs."""

    is_user_car: bool
    is_favorite: bool
    is_in_compare: bool


class CarListResponseDTO(BaseModel):
    cars: list[CarResponseDTO]


class CarListingDTO(BaseModel):
    """Sell form payload.

    Numeric fields may arrive as strings straight from form inputs; they are
    parsed and validated by CarMapper before reaching the store.
    """

    brand: str = Field(description="Car brand", examples=["Maruti Suzuki"])
    model: str = Field(description="Car model", examples=["Swift"])
    year: int | str = Field(description="Manufacturing year", examples=["2019"])
    price: int | str = Field(description="Asking price in whole rupees", examples=["550000"])
    fuel_type: str | None = Field(default=None, examples=["Petrol"])
    transmission: str | None = Field(default=None, examples=["Manual"])
    km_driven: int | str | None = Field(default=None, examples=["42000"])
    ownership: str | None = Field(default=None, examples=["1st Owner"])
    location: str | None = Field(default=None, examples=["Pune"])
    engine: str | None = None
    power: str | None = None
    mileage: str | None = None
    color: str | None = None
    features: list[str] = Field(default_factory=list)
    images: list[str] = Field(default_factory=list)
    description: str | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "brand": "Maruti Suzuki",
                "model": "Swift",
                "year": "2019",
                "price": "550000",
                "fuel_type": "Petrol",
                "transmission": "Manual",
                "km_driven": "42000",
                "features": ["Touchscreen", "Rear Camera"],
            }
        }
    )


class CarListingPatchDTO(BaseModel):
    """Edit form payload; only the fields sent are changed."""

    brand: str | None = None
    model: str | None = None
    year: int | str | None = None
    price: int | str | None = None
    fuel_type: str | None = None
    transmission: str | None = None
    km_driven: int | str | None = None
    ownership: str | None = None
    location: str | None = None
    engine: str | None = None
    power: str | None = None
    mileage: str | None = None
    color: str | None = None
    features: list[str] | None = None
    images: list[str] | None = None
    description: str | None = None

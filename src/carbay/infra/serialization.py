"""Wire records for persisted collections and catalog files.

Field names are camelCase on the wire (``fuelType``, ``kmDriven``, ``carId``)
so snapshots written by the browser build load unchanged.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter
from pydantic.alias_generators import to_camel

from carbay.domain.activity import ActivityItem, BuyInterest, InterestStatus
from carbay.domain.car import Car


class CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


class CarRecord(CamelModel):
    id: str = Field(min_length=1)
    brand: str
    model: str
    year: int
    price: int = Field(ge=0)
    fuel_type: str
    transmission: str
    km_driven: int = Field(ge=0)
    ownership: str
    location: str
    engine: str
    power: str
    mileage: str
    color: str
    features: list[str] = Field(default_factory=list)
    images: list[str] = Field(min_length=1)
    description: str = ""

    def to_domain(self) -> Car:
        return Car(
            id=self.id,
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
            images=tuple(self.images),
            description=self.description,
        )

    @classmethod
    def from_domain(cls, car: Car) -> CarRecord:
        return cls(
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


class ActivityRecord(CamelModel):
    car_id: str
    timestamp: datetime

    def to_domain(self) -> ActivityItem:
        return ActivityItem(car_id=self.car_id, timestamp=self.timestamp)

    @classmethod
    def from_domain(cls, item: ActivityItem) -> ActivityRecord:
        return cls(car_id=item.car_id, timestamp=item.timestamp)


class BuyInterestRecord(CamelModel):
    car_id: str
    timestamp: datetime
    status: InterestStatus = InterestStatus.INTERESTED

    def to_domain(self) -> BuyInterest:
        return BuyInterest(car_id=self.car_id, timestamp=self.timestamp, status=self.status)

    @classmethod
    def from_domain(cls, interest: BuyInterest) -> BuyInterestRecord:
        return cls(car_id=interest.car_id, timestamp=interest.timestamp, status=interest.status)


ID_LIST = TypeAdapter(list[str])
CAR_LIST = TypeAdapter(list[CarRecord])
ACTIVITY_LIST = TypeAdapter(list[ActivityRecord])
BUY_INTEREST_LIST = TypeAdapter(list[BuyInterestRecord])

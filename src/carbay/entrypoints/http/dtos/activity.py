from datetime import datetime

from pydantic import BaseModel

from carbay.entrypoints.http.dtos.car import CarResponseDTO


class ActivityEntryDTO(BaseModel):
    car_id: str
    timestamp: datetime
    car: CarResponseDTO


class ActivityResponseDTO(BaseModel):
    entries: list[ActivityEntryDTO]


class BuyInterestEntryDTO(ActivityEntryDTO):
    status: str


class BuyInterestsResponseDTO(BaseModel):
    entries: list[BuyInterestEntryDTO]
    changed: bool = False

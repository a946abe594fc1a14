"""Get car by ID use case."""

from __future__ import annotations

from dataclasses import dataclass

from carbay.domain.car import Car
from carbay.domain.errors import NotFoundError, ValidationError
from carbay.store.car_store import CarStore


@dataclass(frozen=True, slots=True)
class GetCarByIdRequest:
    """Request to get a car by ID."""

    car_id: str
    record_view: bool = False


@dataclass(frozen=True, slots=True)
class GetCarByIdResponse:
    """Response containing the requested car."""

    car: Car
    is_user_car: bool


class GetCarById:
    """
    Use case for the car details view.

    Responsibilities:
    - Reject blank ids
    - Look the car up in the catalog union
    - Raise NotFoundError if the car doesn't exist
    - Optionally log the visit in view history
    """

    def __init__(self, car_store: CarStore) -> None:
        """
        Initialize use case with dependencies.

        Args:
            car_store: Opened car store
        """
        self._car_store = car_store

    def execute(self, request: GetCarByIdRequest) -> GetCarByIdResponse:
        """
        Execute the get car by ID use case.

        Args:
            request: Request containing car_id

        Returns:
            GetCarByIdResponse with the car

        Raises:
            ValidationError: If car_id is blank
            NotFoundError: If car with given ID doesn't exist
        """
        if not request.car_id.strip():
            raise ValidationError(
                errors=[
                    {
                        "field": "car_id",
                        "message": "Must not be blank",
                        "code": "BLANK_ID",
                    }
                ]
            )

        car = self._car_store.get_car_by_id(request.car_id)

        if car is None:
            raise NotFoundError(resource="Car", identifier=request.car_id)

        if request.record_view:
            self._car_store.add_to_view_history(car.id)

        return GetCarByIdResponse(car=car, is_user_car=self._car_store.is_user_car(car.id))

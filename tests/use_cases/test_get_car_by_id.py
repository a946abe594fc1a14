"""Test suite for GetCarById use case."""

from __future__ import annotations

from collections.abc import Callable
from unittest.mock import Mock

import pytest

from carbay.domain.car import Car, CarFields
from carbay.domain.errors import NotFoundError, ValidationError
from carbay.store.car_store import CarStore
from carbay.use_cases.get_car_by_id import (
    GetCarById,
    GetCarByIdRequest,
    GetCarByIdResponse,
)


@pytest.fixture()
def mock_store() -> Mock:
    """Mock CarStore."""
    return Mock(spec=CarStore)


@pytest.fixture()
def sample_car(make_car: Callable[..., Car]) -> Car:
    """Sample car entity for testing."""
    return make_car("car-7", brand="Toyota", model="Glanza", year=2020, price=650_000)


# ==============================================================================
# Happy Path Tests
# ==============================================================================


def test_execute_successful_get(mock_store: Mock, sample_car: Car) -> None:
    """Use case returns car when found."""
    mock_store.get_car_by_id.return_value = sample_car
    mock_store.is_user_car.return_value = False
    use_case = GetCarById(car_store=mock_store)

    result = use_case.execute(GetCarByIdRequest(car_id="car-7"))

    assert isinstance(result, GetCarByIdResponse)
    assert result.car == sample_car
    assert result.car.brand == "Toyota"
    assert result.is_user_car is False


def test_execute_calls_store_with_car_id(mock_store: Mock, sample_car: Car) -> None:
    """Use case delegates lookup to the store with correct car_id."""
    mock_store.get_car_by_id.return_value = sample_car
    use_case = GetCarById(car_store=mock_store)

    use_case.execute(GetCarByIdRequest(car_id="car-7"))

    mock_store.get_car_by_id.assert_called_once_with("car-7")


def test_execute_flags_user_listing(store: CarStore, listing: CarFields) -> None:
    """Listings created by the user are reported as such."""
    car = store.add_user_car(listing)

    result = GetCarById(car_store=store).execute(GetCarByIdRequest(car_id=car.id))

    assert result.car == car
    assert result.is_user_car is True


# ==============================================================================
# View History Tests
# ==============================================================================


def test_execute_does_not_record_view_by_default(mock_store: Mock, sample_car: Car) -> None:
    """Plain lookups leave view history alone."""
    mock_store.get_car_by_id.return_value = sample_car
    use_case = GetCarById(car_store=mock_store)

    use_case.execute(GetCarByIdRequest(car_id="car-7"))

    mock_store.add_to_view_history.assert_not_called()


def test_execute_records_view_when_requested(store: CarStore) -> None:
    """record_view logs the visit at the front of view history."""
    use_case = GetCarById(car_store=store)

    use_case.execute(GetCarByIdRequest(car_id="car-2", record_view=True))
    use_case.execute(GetCarByIdRequest(car_id="car-1", record_view=True))

    assert [item.car_id for item in store.view_history] == ["car-1", "car-2"]


# ==============================================================================
# Error Tests
# ==============================================================================


def test_execute_raises_not_found_when_car_not_exists(mock_store: Mock) -> None:
    """Use case raises NotFoundError when store returns None."""
    mock_store.get_car_by_id.return_value = None
    use_case = GetCarById(car_store=mock_store)

    with pytest.raises(NotFoundError) as exc_info:
        use_case.execute(GetCarByIdRequest(car_id="missing", record_view=True))

    assert exc_info.value.context["resource"] == "Car"
    assert exc_info.value.context["identifier"] == "missing"
    mock_store.add_to_view_history.assert_not_called()


@pytest.mark.parametrize("car_id", ["", "   "])
def test_execute_rejects_blank_id(mock_store: Mock, car_id: str) -> None:
    """Blank ids fail validation before the store is consulted."""
    use_case = GetCarById(car_store=mock_store)

    with pytest.raises(ValidationError) as exc_info:
        use_case.execute(GetCarByIdRequest(car_id=car_id))

    assert exc_info.value.errors is not None
    assert exc_info.value.errors[0]["code"] == "BLANK_ID"
    mock_store.get_car_by_id.assert_not_called()

from fastapi import APIRouter, Depends

from carbay.entrypoints.http.dependencies import get_car_store, get_comparison_use_case
from carbay.entrypoints.http.dtos.selections import ComparisonResponseDTO, SelectionResponseDTO
from carbay.entrypoints.http.mappers.selection_mapper import SelectionMapper
from carbay.store.car_store import CarStore
from carbay.use_cases.get_comparison import GetComparison


router = APIRouter(prefix="/compare", tags=["Compare"])


@router.get(
    "",
    response_model=ComparisonResponseDTO,
    summary="Get the comparison",
    description="""
    Compared cars with per-metric winners (lowest price, lowest km driven,
    latest year). best_value is null with fewer than two cars. On ties the
    car added to the comparison first wins.
    """,
)
def get_comparison(use_case: GetComparison = Depends(get_comparison_use_case)) -> ComparisonResponseDTO:
    return SelectionMapper.to_comparison_response(use_case.execute())


@router.put(
    "/{car_id}",
    response_model=SelectionResponseDTO,
    summary="Add a car to the comparison",
    description="At most 3 cars. changed=false when full, duplicate, or unknown; show the user why.",
)
def add_to_compare(car_id: str, car_store: CarStore = Depends(get_car_store)) -> SelectionResponseDTO:
    changed = car_store.add_to_compare(car_id)
    return SelectionResponseDTO(ids=list(car_store.compare_list), changed=changed)


@router.delete("/{car_id}", response_model=SelectionResponseDTO, summary="Remove a car from the comparison")
def remove_from_compare(car_id: str, car_store: CarStore = Depends(get_car_store)) -> SelectionResponseDTO:
    changed = car_store.is_in_compare(car_id)
    car_store.remove_from_compare(car_id)
    return SelectionResponseDTO(ids=list(car_store.compare_list), changed=changed)


@router.delete("", response_model=SelectionResponseDTO, summary="Clear the comparison")
def clear_compare(car_store: CarStore = Depends(get_car_store)) -> SelectionResponseDTO:
    changed = bool(car_store.compare_list)
    car_store.clear_compare()
    return SelectionResponseDTO(ids=[], changed=changed)

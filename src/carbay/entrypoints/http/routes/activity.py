from fastapi import APIRouter, Depends, Response, status

from carbay.entrypoints.http.dependencies import get_car_store
from carbay.entrypoints.http.dtos.activity import ActivityResponseDTO, BuyInterestsResponseDTO
from carbay.entrypoints.http.mappers.selection_mapper import SelectionMapper
from carbay.store.car_store import CarStore


router = APIRouter(prefix="/activity", tags=["Activity"])


@router.get(
    "/views",
    response_model=ActivityResponseDTO,
    summary="Recently viewed cars",
    description="Most recent first, at most 50. Cars deleted since are left out.",
)
def list_view_history(car_store: CarStore = Depends(get_car_store)) -> ActivityResponseDTO:
    return SelectionMapper.to_activity_response(car_store.get_view_history_cars())


@router.delete("/views", status_code=status.HTTP_204_NO_CONTENT, summary="Clear view history")
def clear_view_history(car_store: CarStore = Depends(get_car_store)) -> Response:
    car_store.clear_view_history()
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get(
    "/compares",
    response_model=ActivityResponseDTO,
    summary="Recently compared cars",
    description="Most recent first, at most 50. Cars deleted since are left out.",
)
def list_compare_history(car_store: CarStore = Depends(get_car_store)) -> ActivityResponseDTO:
    return SelectionMapper.to_activity_response(car_store.get_compare_history_cars())


@router.delete("/compares", status_code=status.HTTP_204_NO_CONTENT, summary="Clear compare history")
def clear_compare_history(car_store: CarStore = Depends(get_car_store)) -> Response:
    car_store.clear_compare_history()
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/interests", response_model=BuyInterestsResponseDTO, summary="Registered buy interests")
def list_buy_interests(car_store: CarStore = Depends(get_car_store)) -> BuyInterestsResponseDTO:
    return SelectionMapper.to_buy_interests_response(car_store.get_buy_interest_cars())


@router.put(
    "/interests/{car_id}",
    response_model=BuyInterestsResponseDTO,
    summary="Register interest in buying a car",
    description="The first registration per car is kept; repeats return changed=false.",
)
def add_buy_interest(car_id: str, car_store: CarStore = Depends(get_car_store)) -> BuyInterestsResponseDTO:
    changed = car_store.add_buy_interest(car_id)
    return SelectionMapper.to_buy_interests_response(car_store.get_buy_interest_cars(), changed=changed)


@router.delete("/interests", status_code=status.HTTP_204_NO_CONTENT, summary="Clear buy interests")
def clear_buy_interests(car_store: CarStore = Depends(get_car_store)) -> Response:
    car_store.clear_buy_interests()
    return Response(status_code=status.HTTP_204_NO_CONTENT)

from fastapi import APIRouter, Depends

from carbay.entrypoints.http.dependencies import get_car_store
from carbay.entrypoints.http.dtos.selections import FavoritesResponseDTO, SelectionResponseDTO
from carbay.entrypoints.http.mappers.selection_mapper import SelectionMapper
from carbay.store.car_store import CarStore


router = APIRouter(prefix="/favorites", tags=["Favorites"])


@router.get("", response_model=FavoritesResponseDTO, summary="List favorites")
def list_favorites(car_store: CarStore = Depends(get_car_store)) -> FavoritesResponseDTO:
    return SelectionMapper.to_favorites_response(car_store.favorites, car_store.get_favorite_cars())


@router.put(
    "/{car_id}",
    response_model=SelectionResponseDTO,
    summary="Add a favorite",
    description="Idempotent. changed=false when the car is already a favorite or does not exist.",
)
def add_favorite(car_id: str, car_store: CarStore = Depends(get_car_store)) -> SelectionResponseDTO:
    changed = car_store.add_to_favorites(car_id)
    return SelectionResponseDTO(ids=list(car_store.favorites), changed=changed)


@router.delete("/{car_id}", response_model=SelectionResponseDTO, summary="Remove a favorite")
def remove_favorite(car_id: str, car_store: CarStore = Depends(get_car_store)) -> SelectionResponseDTO:
    changed = car_store.is_favorite(car_id)
    car_store.remove_from_favorites(car_id)
    return SelectionResponseDTO(ids=list(car_store.favorites), changed=changed)

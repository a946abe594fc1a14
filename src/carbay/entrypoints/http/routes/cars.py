from fastapi import APIRouter, Depends, Query, Response, status

from carbay.domain.errors import NotFoundError
from carbay.entrypoints.http.dependencies import (
    get_car_store,
    get_get_car_by_id_use_case,
    get_search_catalog_use_case,
)
from carbay.entrypoints.http.dtos.car import (
    CarDetailResponseDTO,
    CarListingDTO,
    CarListingPatchDTO,
    CarListResponseDTO,
    CarResponseDTO,
)
from carbay.entrypoints.http.dtos.catalog_search import (
    BrandsResponseDTO,
    CarsSearchQueryDTO,
    CatalogSearchResponseDTO,
)
from carbay.entrypoints.http.error_responses import ERROR_RESPONSES
from carbay.entrypoints.http.mappers.car_mapper import CarMapper
from carbay.entrypoints.http.mappers.catalog_search_mapper import CatalogSearchMapper
from carbay.store.car_store import CarStore
from carbay.use_cases.get_car_by_id import GetCarById, GetCarByIdRequest
from carbay.use_cases.search_car_catalog import SearchCarCatalog


router = APIRouter(tags=["Cars"])


@router.get(
    "/cars",
    response_model=CatalogSearchResponseDTO,
    summary="Search cars",
    description="""
    Search catalog and user listings.

    ## Filters
    - All filters use AND semantics
    - q: case-insensitive substring of brand or model
    - brand / fuel_type / transmission: exact match, 'All' matches everything
    - price_min / price_max: inclusive range

    ## Example
    ```
    GET /v1/cars?q=city&fuel_type=Petrol&price_max=1200000
    ```
    """,
    responses={422: ERROR_RESPONSES[422]},
)
def search_cars(
    query: CarsSearchQueryDTO = Depends(),
    use_case: SearchCarCatalog = Depends(get_search_catalog_use_case),
) -> CatalogSearchResponseDTO:
    """Search cars endpoint following parse → execute → map → return pattern."""
    request = CatalogSearchMapper.to_domain_request(query)
    result = use_case.execute(request)
    return CatalogSearchMapper.to_response(result)


@router.get("/cars/brands", response_model=BrandsResponseDTO, summary="List brands")
def list_brands(car_store: CarStore = Depends(get_car_store)) -> BrandsResponseDTO:
    return BrandsResponseDTO(brands=car_store.list_brands())


@router.get("/cars/mine", response_model=CarListResponseDTO, summary="List my listings")
def list_my_cars(car_store: CarStore = Depends(get_car_store)) -> CarListResponseDTO:
    return CarListResponseDTO(cars=[CarMapper.to_response(car) for car in car_store.get_user_cars()])


@router.get(
    "/cars/{car_id}",
    response_model=CarDetailResponseDTO,
    summary="Get car details",
    description="Returns one car. Unless record_view=false, the visit is logged in view history.",
    responses={404: ERROR_RESPONSES[404], 422: ERROR_RESPONSES[422]},
)
def get_car(
    car_id: str,
    record_view: bool = Query(default=True),
    use_case: GetCarById = Depends(get_get_car_by_id_use_case),
    car_store: CarStore = Depends(get_car_store),
) -> CarDetailResponseDTO:
    result = use_case.execute(GetCarByIdRequest(car_id=car_id, record_view=record_view))

    return CarMapper.to_detail_response(
        result.car,
        is_user_car=result.is_user_car,
        is_favorite=car_store.is_favorite(result.car.id),
        is_in_compare=car_store.is_in_compare(result.car.id),
    )


@router.post(
    "/cars",
    response_model=CarResponseDTO,
    status_code=status.HTTP_201_CREATED,
    summary="Create a listing",
    responses={422: ERROR_RESPONSES[422]},
)
def create_car(
    payload: CarListingDTO,
    car_store: CarStore = Depends(get_car_store),
) -> CarResponseDTO:
    fields = CarMapper.to_domain_fields(payload)
    car = car_store.add_user_car(fields)
    return CarMapper.to_response(car)


@router.patch(
    "/cars/{car_id}",
    response_model=CarResponseDTO,
    summary="Edit one of my listings",
    description="Only user listings can be edited; catalog cars answer 404.",
    responses={404: ERROR_RESPONSES[404], 422: ERROR_RESPONSES[422]},
)
def update_car(
    car_id: str,
    payload: CarListingPatchDTO,
    car_store: CarStore = Depends(get_car_store),
) -> CarResponseDTO:
    changes = CarMapper.to_domain_changes(payload)
    car = car_store.update_user_car(car_id, **changes)

    if car is None:
        raise NotFoundError(resource="Listing", identifier=car_id)

    return CarMapper.to_response(car)


@router.delete(
    "/cars/{car_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete one of my listings",
    description="Also drops the car from favorites and the compare set.",
    responses={404: ERROR_RESPONSES[404]},
)
def delete_car(car_id: str, car_store: CarStore = Depends(get_car_store)) -> Response:
    if not car_store.is_user_car(car_id):
        raise NotFoundError(resource="Listing", identifier=car_id)

    car_store.remove_user_car(car_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)

from fastapi import APIRouter, Depends

from dealership_lite.entrypoints.http.dependencies import (
    get_catalog_options_use_case,
    get_featured_vehicles_use_case,
    get_search_catalog_use_case,
    get_vehicle_by_id_use_case,
)
from dealership_lite.entrypoints.http.dtos.vehicles import (
    CatalogOptionsDTO,
    VehicleCardDTO,
    VehicleDetailDTO,
    VehiclesSearchQueryDTO,
    VehicleSearchResponseDTO,
)
from dealership_lite.entrypoints.http.error_responses import ERROR_RESPONSES
from dealership_lite.entrypoints.http.mappers.vehicle_mapper import VehicleMapper
from dealership_lite.use_cases.get_catalog_options import GetCatalogOptions
from dealership_lite.use_cases.get_vehicle_by_id import GetVehicleById, GetVehicleByIdRequest
from dealership_lite.use_cases.list_featured_vehicles import ListFeaturedVehicles
from dealership_lite.use_cases.search_vehicle_catalog import SearchVehicleCatalog

router = APIRouter(tags=["Vehicles"])


@router.get(
    "/vehicles",
    response_model=VehicleSearchResponseDTO,
    summary="Search vehicle stock",
    description="""
    Search the stock with optional filters and pagination.

    ## Filters
    - All filters use AND semantics
    - Brand/fuel type: exact match, empty means no filter
    - Price: inclusive range; price_min > price_max is rejected
    - Search: case-insensitive substring of brand or name

    ## Ordering
    Results keep catalog order; filters never re-sort.

    ## Example
    ```
    GET /v1/vehicles?fuel_type=Petrol&price_max=60000
    ```
    """,
    responses={422: ERROR_RESPONSES[422]},
)
def search_vehicles(
    query: VehiclesSearchQueryDTO = Depends(),
    use_case: SearchVehicleCatalog = Depends(get_search_catalog_use_case),
) -> VehicleSearchResponseDTO:
    """Search endpoint following parse → execute → map → return pattern."""
    # 1. Map to domain request
    request = VehicleMapper.to_domain_request(query)

    # 2. Execute use case
    result = use_case.execute(request)

    # 3. Map to response
    return VehicleMapper.to_search_response(
        result=result,
        offset=query.offset,
        limit=query.limit,
    )


@router.get(
    "/vehicles/featured",
    response_model=list[VehicleCardDTO],
    summary="Featured vehicles for the home page",
)
def featured_vehicles(
    use_case: ListFeaturedVehicles = Depends(get_featured_vehicles_use_case),
) -> list[VehicleCardDTO]:
    return [VehicleMapper.to_card(v) for v in use_case.execute()]


@router.get(
    "/vehicles/options",
    response_model=CatalogOptionsDTO,
    summary="Filter and order form options",
    description="Distinct brands and fuel types in catalog order, price bounds and color palette.",
)
def catalog_options(
    use_case: GetCatalogOptions = Depends(get_catalog_options_use_case),
) -> CatalogOptionsDTO:
    return VehicleMapper.to_options(use_case.execute())


@router.get(
    "/vehicles/{vehicle_id}",
    response_model=VehicleDetailDTO,
    summary="Vehicle detail",
    responses={404: ERROR_RESPONSES[404]},
)
def get_vehicle(
    vehicle_id: str,
    use_case: GetVehicleById = Depends(get_vehicle_by_id_use_case),
) -> VehicleDetailDTO:
    response = use_case.execute(GetVehicleByIdRequest(vehicle_id=vehicle_id))
    return VehicleMapper.to_detail(response.vehicle)

from fastapi import APIRouter, Depends, Query

from dealership_lite.entrypoints.http.dependencies import (
    get_admin_dashboard_use_case,
    get_toggle_vehicle_stock_use_case,
)
from dealership_lite.entrypoints.http.dtos.admin import AdminDashboardDTO
from dealership_lite.entrypoints.http.dtos.vehicles import VehicleCardDTO
from dealership_lite.entrypoints.http.error_responses import ERROR_RESPONSES
from dealership_lite.entrypoints.http.mappers.admin_mapper import AdminMapper
from dealership_lite.entrypoints.http.mappers.vehicle_mapper import VehicleMapper
from dealership_lite.use_cases.admin_dashboard import GetAdminDashboard, ToggleVehicleStock

router = APIRouter(prefix="/admin", tags=["Admin"])


@router.get("/dashboard", response_model=AdminDashboardDTO, summary="Admin dashboard")
def dashboard(
    search: str = Query(default="", description="Filter inventory by brand or name"),
    use_case: GetAdminDashboard = Depends(get_admin_dashboard_use_case),
) -> AdminDashboardDTO:
    return AdminMapper.to_response(use_case.execute(search))


@router.post(
    "/vehicles/{vehicle_id}/toggle-stock",
    response_model=VehicleCardDTO,
    summary="Flip a vehicle's in-stock flag",
    responses={404: ERROR_RESPONSES[404]},
)
def toggle_stock(
    vehicle_id: str,
    use_case: ToggleVehicleStock = Depends(get_toggle_vehicle_stock_use_case),
) -> VehicleCardDTO:
    return VehicleMapper.to_card(use_case.execute(vehicle_id))

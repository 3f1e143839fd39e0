"""
Dependency injection for FastAPI routes.

Key principle: the catalog repository is created once per process and
shared read-only; stock toggles swap its snapshot instead of mutating it.
Use cases are cheap and built per request.
"""

from __future__ import annotations

from functools import lru_cache

from fastapi import Depends

from dealership_lite.adapters.in_memory_vehicle_catalog_repository import (
    InMemoryVehicleCatalogRepository,
)
from dealership_lite.infra.catalog_loader import load_catalog_store
from dealership_lite.ports.vehicle_catalog_repository import VehicleCatalogRepository
from dealership_lite.use_cases.admin_dashboard import GetAdminDashboard, ToggleVehicleStock
from dealership_lite.use_cases.book_service import BookService
from dealership_lite.use_cases.calculate_order_total import CalculateOrderTotal
from dealership_lite.use_cases.estimate_vehicle_value import EstimateVehicleValue
from dealership_lite.use_cases.get_catalog_options import GetCatalogOptions
from dealership_lite.use_cases.get_vehicle_by_id import GetVehicleById
from dealership_lite.use_cases.list_featured_vehicles import ListFeaturedVehicles
from dealership_lite.use_cases.place_order import PlaceOrder
from dealership_lite.use_cases.search_vehicle_catalog import SearchVehicleCatalog
from dealership_lite.use_cases.send_contact_message import SendContactMessage
from dealership_lite.use_cases.submit_sell_request import SubmitSellRequest


@lru_cache
def get_catalog_repository() -> VehicleCatalogRepository:
    """
    Process-wide catalog, loaded on first use.

    Returns:
        VehicleCatalogRepository: In-memory repository over the configured catalog file
    """
    return InMemoryVehicleCatalogRepository(load_catalog_store())


def get_search_catalog_use_case(
    repository: VehicleCatalogRepository = Depends(get_catalog_repository),
) -> SearchVehicleCatalog:
    return SearchVehicleCatalog(vehicle_catalog_repository=repository)


def get_vehicle_by_id_use_case(
    repository: VehicleCatalogRepository = Depends(get_catalog_repository),
) -> GetVehicleById:
    return GetVehicleById(vehicle_catalog_repository=repository)


def get_catalog_options_use_case(
    repository: VehicleCatalogRepository = Depends(get_catalog_repository),
) -> GetCatalogOptions:
    return GetCatalogOptions(vehicle_catalog_repository=repository)


def get_featured_vehicles_use_case(
    repository: VehicleCatalogRepository = Depends(get_catalog_repository),
) -> ListFeaturedVehicles:
    return ListFeaturedVehicles(vehicle_catalog_repository=repository)


def get_calculate_order_total_use_case(
    repository: VehicleCatalogRepository = Depends(get_catalog_repository),
) -> CalculateOrderTotal:
    return CalculateOrderTotal(vehicle_catalog_repository=repository)


def get_place_order_use_case(
    repository: VehicleCatalogRepository = Depends(get_catalog_repository),
) -> PlaceOrder:
    return PlaceOrder(vehicle_catalog_repository=repository)


def get_estimate_vehicle_value_use_case() -> EstimateVehicleValue:
    return EstimateVehicleValue()


def get_submit_sell_request_use_case(
    estimator: EstimateVehicleValue = Depends(get_estimate_vehicle_value_use_case),
) -> SubmitSellRequest:
    return SubmitSellRequest(estimator=estimator)


def get_book_service_use_case() -> BookService:
    return BookService()


def get_send_contact_message_use_case() -> SendContactMessage:
    return SendContactMessage()


def get_admin_dashboard_use_case(
    repository: VehicleCatalogRepository = Depends(get_catalog_repository),
) -> GetAdminDashboard:
    return GetAdminDashboard(vehicle_catalog_repository=repository)


def get_toggle_vehicle_stock_use_case(
    repository: VehicleCatalogRepository = Depends(get_catalog_repository),
) -> ToggleVehicleStock:
    return ToggleVehicleStock(vehicle_catalog_repository=repository)

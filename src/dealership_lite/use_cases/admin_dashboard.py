"""Admin dashboard use cases: overview tables and inventory stock toggling."""

from __future__ import annotations

from dataclasses import dataclass

from dealership_lite.domain.admin import (
    MOCK_ORDERS,
    MOCK_SELL_REQUESTS,
    MOCK_SERVICES,
    OrderRecord,
    SellRequestRecord,
    ServiceRecord,
)
from dealership_lite.domain.catalog import search_inventory
from dealership_lite.domain.vehicle import Vehicle
from dealership_lite.ports.vehicle_catalog_repository import VehicleCatalogRepository


@dataclass(frozen=True, slots=True)
class AdminDashboard:
    inventory: list[Vehicle]
    orders: list[OrderRecord]
    services: list[ServiceRecord]
    sell_requests: list[SellRequestRecord]


class GetAdminDashboard:
    def __init__(self, vehicle_catalog_repository: VehicleCatalogRepository) -> None:
        self._repository = vehicle_catalog_repository

    def execute(self, search: str = "") -> AdminDashboard:
        """Inventory narrowed by `search` (brand or name), plus the mock tables."""
        store = self._repository.snapshot()

        return AdminDashboard(
            inventory=list(search_inventory(store, search)),
            orders=list(MOCK_ORDERS),
            services=list(MOCK_SERVICES),
            sell_requests=list(MOCK_SELL_REQUESTS),
        )


class ToggleVehicleStock:
    def __init__(self, vehicle_catalog_repository: VehicleCatalogRepository) -> None:
        self._repository = vehicle_catalog_repository

    def execute(self, vehicle_id: str) -> Vehicle:
        """
        Raises:
            NotFoundError: If vehicle with given ID doesn't exist
        """
        return self._repository.toggle_stock(vehicle_id)

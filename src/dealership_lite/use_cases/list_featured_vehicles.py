from __future__ import annotations

from dataclasses import dataclass

from dealership_lite.domain.vehicle import Vehicle
from dealership_lite.ports.vehicle_catalog_repository import VehicleCatalogRepository

FEATURED_LIMIT = 3


@dataclass(frozen=True, slots=True)
class ListFeaturedVehicles:
    vehicle_catalog_repository: VehicleCatalogRepository
    limit: int = FEATURED_LIMIT

    def execute(self) -> list[Vehicle]:
        return list(self.vehicle_catalog_repository.snapshot().featured(self.limit))

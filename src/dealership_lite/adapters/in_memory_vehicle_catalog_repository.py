from __future__ import annotations

import logging
import threading

from dealership_lite.domain.catalog import CatalogStore, filter_vehicles
from dealership_lite.domain.vehicle import FilterCriteria, Paging, Vehicle
from dealership_lite.ports.vehicle_catalog_repository import (
    SearchResult,
    VehicleCatalogRepository,
)

logger = logging.getLogger(__name__)


class InMemoryVehicleCatalogRepository(VehicleCatalogRepository):
    """
    Catalog backed by an immutable CatalogStore snapshot.

    - Applies AND-semantics filtering in store order
    - Applies paging AFTER filtering
    - Returns total_count of matching vehicles before paging
    - toggle_stock swaps in a new snapshot (copy-on-write)
    """

    def __init__(self, store: CatalogStore) -> None:
        self._store = store
        self._write_lock = threading.Lock()

    def search(self, criteria: FilterCriteria, paging: Paging) -> SearchResult:
        matches = filter_vehicles(self._store, criteria)
        total_count = len(matches)  # Count BEFORE paging

        start = paging.offset
        end = paging.offset + paging.limit

        return SearchResult(vehicles=list(matches[start:end]), total_count=total_count)

    def get_by_id(self, vehicle_id: str) -> Vehicle | None:
        return self._store.get_by_id(vehicle_id)

    def snapshot(self) -> CatalogStore:
        return self._store

    def toggle_stock(self, vehicle_id: str) -> Vehicle:
        with self._write_lock:
            store = self._store.with_stock_toggled(vehicle_id)
            self._store = store

        vehicle = next(v for v in store.vehicles if v.id == vehicle_id)

        logger.info(
            "Vehicle stock toggled",
            extra={"vehicle_id": vehicle_id, "in_stock": vehicle.in_stock},
        )
        return vehicle

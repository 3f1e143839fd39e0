from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from dealership_lite.domain.vehicle import COLOR_OPTIONS, ColorOption
from dealership_lite.ports.vehicle_catalog_repository import VehicleCatalogRepository


@dataclass(frozen=True, slots=True)
class CatalogOptions:
    brands: tuple[str, ...]
    fuel_types: tuple[str, ...]
    price_min: Decimal | None
    price_max: Decimal | None
    colors: tuple[ColorOption, ...]


class GetCatalogOptions:
    """Values that populate the stock page filters and the order form pickers."""

    def __init__(self, vehicle_catalog_repository: VehicleCatalogRepository) -> None:
        self._repository = vehicle_catalog_repository

    def execute(self) -> CatalogOptions:
        store = self._repository.snapshot()
        bounds = store.price_bounds()

        return CatalogOptions(
            brands=store.distinct_brands(),
            fuel_types=store.distinct_fuel_types(),
            price_min=bounds[0] if bounds else None,
            price_max=bounds[1] if bounds else None,
            colors=COLOR_OPTIONS,
        )

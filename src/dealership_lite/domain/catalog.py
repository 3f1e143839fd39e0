"""Catalog store and the stock page filter engine."""

from __future__ import annotations

from dataclasses import replace
from decimal import Decimal
from typing import Iterable

from dealership_lite.domain.errors import NotFoundError, ValidationError
from dealership_lite.domain.vehicle import FilterCriteria, Vehicle


def _distinct(values: Iterable[str]) -> tuple[str, ...]:
    # dict keeps first-appearance order
    return tuple(dict.fromkeys(values))


class CatalogStore:
    """
    Immutable, ordered snapshot of every vehicle the dealership lists.

    - Vehicles are kept in insertion order
    - Distinct brands and fuel types are computed once, at construction
    - Stock changes produce a new store; an existing store never changes
    """

    __slots__ = ("_vehicles", "_by_id", "_brands", "_fuel_types")

    def __init__(self, vehicles: Iterable[Vehicle]) -> None:
        self._vehicles: tuple[Vehicle, ...] = tuple(vehicles)
        self._by_id: dict[str, Vehicle] = {}

        for vehicle in self._vehicles:
            vehicle.validate()
            if vehicle.id in self._by_id:
                raise ValidationError(
                    f"Duplicate vehicle id '{vehicle.id}'", vehicle_id=vehicle.id
                )
            self._by_id[vehicle.id] = vehicle

        self._brands = _distinct(v.brand for v in self._vehicles)
        self._fuel_types = _distinct(v.fuel_type for v in self._vehicles)

    @property
    def vehicles(self) -> tuple[Vehicle, ...]:
        return self._vehicles

    def __len__(self) -> int:
        return len(self._vehicles)

    def __iter__(self):
        return iter(self._vehicles)

    def distinct_brands(self) -> tuple[str, ...]:
        return self._brands

    def distinct_fuel_types(self) -> tuple[str, ...]:
        return self._fuel_types

    def price_bounds(self) -> tuple[Decimal, Decimal] | None:
        """Lowest and highest listed price, or None for an empty store."""
        if not self._vehicles:
            return None
        prices = [v.price for v in self._vehicles]
        return min(prices), max(prices)

    def get_by_id(self, vehicle_id: str) -> Vehicle | None:
        return self._by_id.get(vehicle_id)

    def in_stock(self) -> tuple[Vehicle, ...]:
        return tuple(v for v in self._vehicles if v.in_stock)

    def featured(self, limit: int = 3) -> tuple[Vehicle, ...]:
        """First `limit` in-stock vehicles, as shown on the home page."""
        return self.in_stock()[:limit]

    def with_stock_toggled(self, vehicle_id: str) -> CatalogStore:
        """
        Return a new store with the vehicle's in_stock flag flipped.

        Raises:
            NotFoundError: If no vehicle has the given id
        """
        if vehicle_id not in self._by_id:
            raise NotFoundError(resource="Vehicle", identifier=vehicle_id)

        return CatalogStore(
            replace(v, in_stock=not v.in_stock) if v.id == vehicle_id else v
            for v in self._vehicles
        )


def _matches_text(vehicle: Vehicle, token: str) -> bool:
    return token in vehicle.brand.lower() or token in vehicle.name.lower()


def _matches(vehicle: Vehicle, criteria: FilterCriteria, token: str) -> bool:
    if criteria.brand and vehicle.brand != criteria.brand:
        return False
    if criteria.fuel_type and vehicle.fuel_type != criteria.fuel_type:
        return False
    if criteria.price_min is not None and vehicle.price < criteria.price_min:
        return False
    if criteria.price_max is not None and vehicle.price > criteria.price_max:
        return False
    if token and not _matches_text(vehicle, token):
        return False
    return True


def filter_vehicles(store: CatalogStore, criteria: FilterCriteria) -> tuple[Vehicle, ...]:
    """
    Apply stock page filters with AND semantics.

    The result keeps the store's relative order. The search token is
    trimmed and matched case-insensitively against brand or name.

    Raises:
        FilterValidationError: If the price range is inverted
    """
    criteria.validate()
    token = criteria.search.strip().lower()
    return tuple(v for v in store.vehicles if _matches(v, criteria, token))


def search_inventory(store: CatalogStore, term: str) -> tuple[Vehicle, ...]:
    """Admin inventory search: brand or name substring, nothing else."""
    token = term.strip().lower()
    if not token:
        return store.vehicles
    return tuple(v for v in store.vehicles if _matches_text(v, token))

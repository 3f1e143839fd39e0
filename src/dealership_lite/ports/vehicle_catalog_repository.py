from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from dealership_lite.domain.catalog import CatalogStore
from dealership_lite.domain.vehicle import FilterCriteria, Paging, Vehicle


@dataclass(frozen=True)
class SearchResult:
    """Result from catalog search including pagination metadata."""

    vehicles: list[Vehicle]
    total_count: int  # Total matching vehicles before paging


class VehicleCatalogRepository(ABC):
    """
    Port for catalog data access.

    Contract (Preconditions):
        - criteria and paging must be pre-validated by caller (UseCase)
        - Implementations trust inputs are valid and do not re-validate

    Stock changes never mutate a snapshot handed out earlier.
    """

    @abstractmethod
    def search(self, criteria: FilterCriteria, paging: Paging) -> SearchResult:
        """
        Search catalog with filters and paging.

        Args:
            criteria: Filter criteria (AND semantics) - pre-validated
            paging: Pagination parameters - pre-validated

        Returns:
            SearchResult containing matching vehicles and total count
        """
        ...

    @abstractmethod
    def get_by_id(self, vehicle_id: str) -> Vehicle | None: ...

    @abstractmethod
    def snapshot(self) -> CatalogStore:
        """Current read-only catalog store."""
        ...

    @abstractmethod
    def toggle_stock(self, vehicle_id: str) -> Vehicle:
        """
        Flip a vehicle's in_stock flag, publishing a new snapshot.

        Raises:
            NotFoundError: If no vehicle has the given id
        """
        ...

from __future__ import annotations

from dataclasses import dataclass

from dealership_lite.domain.vehicle import FilterCriteria, Paging, Vehicle
from dealership_lite.ports.vehicle_catalog_repository import VehicleCatalogRepository


@dataclass(frozen=True, slots=True)
class SearchVehicleCatalogRequest:
    criteria: FilterCriteria
    paging: Paging


@dataclass(frozen=True, slots=True)
class SearchVehicleCatalogResponse:
    vehicles: list[Vehicle]
    total_count: int  # Total matching vehicles before paging


class SearchVehicleCatalog:
    """
    Stock page search with filters and pagination.

    This use case validates criteria and paging and delegates filtering
    to the repository adapter. No filtering logic exists in the use case.
    """

    def __init__(self, vehicle_catalog_repository: VehicleCatalogRepository) -> None:
        self._repository = vehicle_catalog_repository

    def execute(self, request: SearchVehicleCatalogRequest) -> SearchVehicleCatalogResponse:
        """
        Execute catalog search.

        Validates request parameters before delegating to repository.

        Args:
            request: Search parameters (criteria and paging)

        Returns:
            Response containing matching vehicles and total count

        Raises:
            PagingValidationError: If paging parameters are invalid
            FilterValidationError: If filter parameters are invalid
        """
        request.criteria.validate()
        request.paging.validate()

        result = self._repository.search(
            criteria=request.criteria,
            paging=request.paging,
        )

        return SearchVehicleCatalogResponse(
            vehicles=result.vehicles,
            total_count=result.total_count,
        )

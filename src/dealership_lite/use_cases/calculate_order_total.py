from __future__ import annotations

from dataclasses import dataclass

from dealership_lite.domain.errors import InvalidInput, NotFoundError
from dealership_lite.domain.order import OrderSummary, summarize_order
from dealership_lite.domain.vehicle import find_color_option
from dealership_lite.ports.vehicle_catalog_repository import VehicleCatalogRepository


@dataclass(frozen=True, slots=True)
class CalculateOrderTotalRequest:
    vehicle_id: str | None = None
    color: str | None = None
    quantity: int = 1


class CalculateOrderTotal:
    """
    Order summary panel: price breakdown for whatever is selected so far.

    Vehicle and color may be left empty; the summary then carries no total
    or no color surcharge respectively.
    """

    def __init__(self, vehicle_catalog_repository: VehicleCatalogRepository) -> None:
        self._repository = vehicle_catalog_repository

    def execute(self, request: CalculateOrderTotalRequest) -> OrderSummary:
        """
        Raises:
            NotFoundError: If vehicle_id is given but unknown
            InvalidInput: If color is given but not in the palette
            OutOfRange: If quantity is outside 1..5
        """
        vehicle = None
        if request.vehicle_id:
            vehicle = self._repository.get_by_id(request.vehicle_id)
            if vehicle is None:
                raise NotFoundError(resource="Vehicle", identifier=request.vehicle_id)

        color = find_color_option(request.color)
        if request.color and color is None:
            raise InvalidInput(
                f"Unknown color '{request.color}'", field="color", value=request.color
            )

        return summarize_order(vehicle, color, request.quantity)

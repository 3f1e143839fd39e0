from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass
from decimal import Decimal

from dealership_lite.domain.errors import ConflictError, NotFoundError, ValidationError
from dealership_lite.domain.leads import OrderRequest
from dealership_lite.domain.order import total_price
from dealership_lite.domain.vehicle import Vehicle, find_color_option
from dealership_lite.ports.vehicle_catalog_repository import VehicleCatalogRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class OrderConfirmation:
    reference: str
    vehicle: Vehicle
    quantity: int
    total: Decimal


class PlaceOrder:
    """
    Accept an order once it is submittable.

    Submittable means every form field is valid and the chosen vehicle
    exists and is in stock. Nothing is persisted; the order is logged and
    acknowledged with a reference.
    """

    def __init__(self, vehicle_catalog_repository: VehicleCatalogRepository) -> None:
        self._repository = vehicle_catalog_repository

    def execute(self, request: OrderRequest) -> OrderConfirmation:
        """
        Raises:
            ValidationError: With every failing field
            NotFoundError: If the vehicle doesn't exist
            ConflictError: If the vehicle is out of stock
        """
        result = request.validate()
        if not result.ok:
            raise ValidationError(errors=result.error_dicts())

        vehicle = self._repository.get_by_id(request.vehicle_id)
        if vehicle is None:
            raise NotFoundError(resource="Vehicle", identifier=request.vehicle_id)
        if not vehicle.in_stock:
            raise ConflictError(
                f"{vehicle.display_name} is out of stock", vehicle_id=vehicle.id
            )

        total = total_price(vehicle, find_color_option(request.color), request.quantity)
        if total is None:
            raise ValueError("Computed order total is invalid")
        reference = f"ORD-{uuid.uuid4().hex[:8].upper()}"

        logger.info(
            "Order submitted",
            extra={
                "reference": reference,
                "vehicle_id": vehicle.id,
                "color": request.color,
                "quantity": request.quantity,
                "total": str(total),
            },
        )

        return OrderConfirmation(
            reference=reference,
            vehicle=vehicle,
            quantity=request.quantity,
            total=total,
        )

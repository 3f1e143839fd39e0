from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from dealership_lite.domain.errors import OutOfRange
from dealership_lite.domain.vehicle import ColorOption, Vehicle

MIN_QUANTITY = 1
MAX_QUANTITY = 5


def validate_quantity(quantity: int) -> None:
    if quantity < MIN_QUANTITY or quantity > MAX_QUANTITY:
        raise OutOfRange("quantity", quantity, MIN_QUANTITY, MAX_QUANTITY)


def total_price(
    vehicle: Vehicle | None,
    color: ColorOption | None,
    quantity: int,
) -> Decimal | None:
    """
    (vehicle price + color surcharge) * quantity.

    Returns None while no vehicle is selected. A missing color counts
    as no surcharge.

    Raises:
        OutOfRange: If quantity is outside [MIN_QUANTITY, MAX_QUANTITY]
    """
    validate_quantity(quantity)

    if vehicle is None:
        return None

    delta = color.price_delta if color is not None else Decimal("0")
    return (vehicle.price + delta) * quantity


@dataclass(frozen=True, slots=True)
class OrderSummary:
    vehicle: Vehicle | None
    color: ColorOption | None
    quantity: int
    base_price: Decimal | None
    color_delta: Decimal
    total: Decimal | None


def summarize_order(
    vehicle: Vehicle | None,
    color: ColorOption | None,
    quantity: int,
) -> OrderSummary:
    return OrderSummary(
        vehicle=vehicle,
        color=color,
        quantity=quantity,
        base_price=vehicle.price if vehicle is not None else None,
        color_delta=color.price_delta if color is not None else Decimal("0"),
        total=total_price(vehicle, color, quantity),
    )

from __future__ import annotations

from dealership_lite.domain.leads import OrderRequest
from dealership_lite.domain.order import OrderSummary
from dealership_lite.entrypoints.http.dtos.orders import (
    OrderConfirmationDTO,
    OrderQuoteRequestDTO,
    OrderRequestDTO,
    OrderSummaryDTO,
)
from dealership_lite.entrypoints.http.mappers.vehicle_mapper import VehicleMapper
from dealership_lite.use_cases.calculate_order_total import CalculateOrderTotalRequest
from dealership_lite.use_cases.place_order import OrderConfirmation

ORDER_PLACED_MESSAGE = (
    "Thank you for your order! We will contact you shortly to confirm the details."
)


class OrderMapper:
    """Maps between REST DTOs and domain models for ordering."""

    @staticmethod
    def to_quote_request(dto: OrderQuoteRequestDTO) -> CalculateOrderTotalRequest:
        return CalculateOrderTotalRequest(
            vehicle_id=dto.vehicle_id or None,
            color=dto.color or None,
            quantity=dto.quantity,
        )

    @staticmethod
    def to_summary(summary: OrderSummary) -> OrderSummaryDTO:
        return OrderSummaryDTO(
            vehicle=VehicleMapper.to_card(summary.vehicle) if summary.vehicle else None,
            color=VehicleMapper.to_color(summary.color) if summary.color else None,
            quantity=summary.quantity,
            base_price=str(summary.base_price) if summary.base_price is not None else None,
            color_delta=str(summary.color_delta),
            total=str(summary.total) if summary.total is not None else None,
        )

    @staticmethod
    def to_domain_order(dto: OrderRequestDTO) -> OrderRequest:
        return OrderRequest(**dto.model_dump())

    @staticmethod
    def to_confirmation(confirmation: OrderConfirmation) -> OrderConfirmationDTO:
        return OrderConfirmationDTO(
            reference=confirmation.reference,
            vehicle=VehicleMapper.to_card(confirmation.vehicle),
            quantity=confirmation.quantity,
            total=str(confirmation.total),
            message=ORDER_PLACED_MESSAGE,
        )

from fastapi import APIRouter, Depends, status

from dealership_lite.entrypoints.http.dependencies import (
    get_calculate_order_total_use_case,
    get_place_order_use_case,
)
from dealership_lite.entrypoints.http.dtos.orders import (
    OrderConfirmationDTO,
    OrderQuoteRequestDTO,
    OrderRequestDTO,
    OrderSummaryDTO,
)
from dealership_lite.entrypoints.http.error_responses import ERROR_RESPONSES
from dealership_lite.entrypoints.http.mappers.order_mapper import OrderMapper
from dealership_lite.use_cases.calculate_order_total import CalculateOrderTotal
from dealership_lite.use_cases.place_order import PlaceOrder

router = APIRouter(tags=["Orders"])


@router.post(
    "/orders/quote",
    response_model=OrderSummaryDTO,
    summary="Order summary for the current selection",
    description="""
    Price breakdown for the order form's summary panel.

    - total = (vehicle price + color surcharge) × quantity
    - quantity must be between 1 and 5
    - total is null until a vehicle is selected
    - no color means no surcharge
    """,
    responses={404: ERROR_RESPONSES[404], 422: ERROR_RESPONSES[422]},
)
def quote_order(
    payload: OrderQuoteRequestDTO,
    use_case: CalculateOrderTotal = Depends(get_calculate_order_total_use_case),
) -> OrderSummaryDTO:
    summary = use_case.execute(OrderMapper.to_quote_request(payload))
    return OrderMapper.to_summary(summary)


@router.post(
    "/orders",
    response_model=OrderConfirmationDTO,
    status_code=status.HTTP_201_CREATED,
    summary="Place an order",
    description="Requires every contact/address field to be valid and the vehicle to be in stock.",
    responses={
        404: ERROR_RESPONSES[404],
        409: ERROR_RESPONSES[409],
        422: ERROR_RESPONSES[422],
    },
)
def place_order(
    payload: OrderRequestDTO,
    use_case: PlaceOrder = Depends(get_place_order_use_case),
) -> OrderConfirmationDTO:
    confirmation = use_case.execute(OrderMapper.to_domain_order(payload))
    return OrderMapper.to_confirmation(confirmation)

from fastapi import APIRouter, Depends, status

from dealership_lite.entrypoints.http.dependencies import (
    get_estimate_vehicle_value_use_case,
    get_submit_sell_request_use_case,
)
from dealership_lite.entrypoints.http.dtos.valuation import (
    SellRequestDTO,
    SellRequestResponseDTO,
    ValuationRequestDTO,
    ValuationResponseDTO,
)
from dealership_lite.entrypoints.http.error_responses import ERROR_RESPONSES
from dealership_lite.entrypoints.http.mappers.valuation_mapper import ValuationMapper
from dealership_lite.use_cases.estimate_vehicle_value import EstimateVehicleValue
from dealership_lite.use_cases.submit_sell_request import SubmitSellRequest

router = APIRouter(tags=["Sell"])


@router.post(
    "/valuations",
    response_model=ValuationResponseDTO,
    summary="Estimate a trade-in value",
    description="""
    Deterministic heuristic, not a market valuation.

    ## Calculation
    - Base figure by brand (unlisted brands use a default, see brand_recognized)
    - 5% off per year of age (future model years count as new)
    - 20% off per 100,000 mileage units, never below zero
    - Condition: excellent ×1.10, good ×1.00, fair ×0.80, poor ×0.60
    - Rounded to a whole currency unit
    """,
    responses={422: ERROR_RESPONSES[422]},
)
def estimate_value(
    payload: ValuationRequestDTO,
    use_case: EstimateVehicleValue = Depends(get_estimate_vehicle_value_use_case),
) -> ValuationResponseDTO:
    estimate = use_case.execute(ValuationMapper.to_condition_input(payload))
    return ValuationMapper.to_response(estimate)


@router.post(
    "/sell-requests",
    response_model=SellRequestResponseDTO,
    status_code=status.HTTP_201_CREATED,
    summary="Submit a sell-your-car request",
    responses={422: ERROR_RESPONSES[422]},
)
def submit_sell_request(
    payload: SellRequestDTO,
    use_case: SubmitSellRequest = Depends(get_submit_sell_request_use_case),
) -> SellRequestResponseDTO:
    ack = use_case.execute(ValuationMapper.to_sell_request(payload))
    return ValuationMapper.to_sell_response(ack)

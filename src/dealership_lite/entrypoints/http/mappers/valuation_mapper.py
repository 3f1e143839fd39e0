from __future__ import annotations

from dealership_lite.domain.leads import SellRequest
from dealership_lite.domain.valuation import ConditionInput, ConditionTier
from dealership_lite.entrypoints.http.dtos.valuation import (
    SellRequestDTO,
    SellRequestResponseDTO,
    ValuationRequestDTO,
    ValuationResponseDTO,
)
from dealership_lite.use_cases.estimate_vehicle_value import ValuationEstimate
from dealership_lite.use_cases.submit_sell_request import SellRequestAcknowledgement

SELL_REQUEST_MESSAGE = (
    "We've received your car details. Our team will contact you shortly."
)


class ValuationMapper:
    @staticmethod
    def to_condition_input(dto: ValuationRequestDTO) -> ConditionInput:
        """
        Raises:
            InvalidInput: If condition is not a known tier
        """
        return ConditionInput(
            brand=dto.brand,
            year=dto.year,
            mileage=dto.mileage,
            condition=ConditionTier.parse(dto.condition.strip().lower()),
        )

    @staticmethod
    def to_response(estimate: ValuationEstimate) -> ValuationResponseDTO:
        return ValuationResponseDTO(
            estimated_value=estimate.value,
            base_value=str(estimate.base_value),
            brand_recognized=estimate.brand_recognized,
            age_years=estimate.age_years,
            condition=estimate.condition.value,
        )

    @staticmethod
    def to_sell_request(dto: SellRequestDTO) -> SellRequest:
        return SellRequest(**dto.model_dump())

    @staticmethod
    def to_sell_response(ack: SellRequestAcknowledgement) -> SellRequestResponseDTO:
        return SellRequestResponseDTO(
            reference=ack.reference,
            estimate=ValuationMapper.to_response(ack.estimate),
            message=SELL_REQUEST_MESSAGE,
        )

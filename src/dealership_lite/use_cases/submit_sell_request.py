from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass

from dealership_lite.domain.errors import ValidationError
from dealership_lite.domain.leads import SellRequest
from dealership_lite.domain.valuation import ConditionInput, ConditionTier
from dealership_lite.use_cases.estimate_vehicle_value import (
    EstimateVehicleValue,
    ValuationEstimate,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class SellRequestAcknowledgement:
    reference: str
    estimate: ValuationEstimate


class SubmitSellRequest:
    """Validate a sell-your-car request, log it and return the estimated value."""

    def __init__(self, estimator: EstimateVehicleValue | None = None) -> None:
        self._estimator = estimator or EstimateVehicleValue()

    def execute(self, request: SellRequest) -> SellRequestAcknowledgement:
        result = request.validate()
        if not result.ok:
            raise ValidationError(errors=result.error_dicts())

        estimate = self._estimator.execute(
            ConditionInput(
                brand=request.brand,
                year=request.year,
                mileage=request.mileage,
                condition=ConditionTier.parse(request.condition),
            )
        )
        reference = f"SELL-{uuid.uuid4().hex[:8].upper()}"

        logger.info(
            "Sell request submitted",
            extra={
                "reference": reference,
                "brand": request.brand,
                "model": request.model,
                "year": request.year,
                "estimated_value": estimate.value,
            },
        )

        return SellRequestAcknowledgement(reference=reference, estimate=estimate)

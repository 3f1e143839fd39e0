from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from dealership_lite.domain.valuation import (
    ConditionInput,
    ConditionTier,
    base_value_for,
    estimate_value,
    is_known_brand,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ValuationEstimate:
    value: int
    base_value: Decimal
    brand_recognized: bool
    age_years: int
    condition: ConditionTier


@dataclass(frozen=True, slots=True)
class EstimateVehicleValue:
    """
    Estimate what the dealership would pay for a customer's car.

    Brands without their own base figure fall back to the default base
    value; the estimate reports that through brand_recognized so callers
    can flag it instead of presenting a guess as a quote.

    current_year is fixed in tests; None means today's year.
    """

    current_year: int | None = None

    def execute(self, data: ConditionInput) -> ValuationEstimate:
        year = self.current_year or date.today().year
        value = estimate_value(data, current_year=year)
        recognized = is_known_brand(data.brand)

        if not recognized:
            logger.info(
                "Valuation used default base value",
                extra={"brand": data.brand, "base_value": str(base_value_for(data.brand))},
            )

        return ValuationEstimate(
            value=value,
            base_value=base_value_for(data.brand),
            brand_recognized=recognized,
            age_years=max(0, year - data.year),
            condition=ConditionTier.parse(data.condition),
        )

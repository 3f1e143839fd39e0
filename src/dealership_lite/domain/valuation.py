from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from enum import Enum

from dealership_lite.domain.errors import InvalidInput


class ConditionTier(str, Enum):
    EXCELLENT = "excellent"
    GOOD = "good"
    FAIR = "fair"
    POOR = "poor"

    @property
    def multiplier(self) -> Decimal:
        return CONDITION_MULTIPLIERS[self]

    @property
    def label(self) -> str:
        return self.value.capitalize()

    @classmethod
    def parse(cls, value: str | ConditionTier) -> ConditionTier:
        """
        Raises:
            InvalidInput: If value is not one of excellent/good/fair/poor
        """
        try:
            return cls(value)
        except ValueError:
            raise InvalidInput(
                f"condition must be one of {[tier.value for tier in cls]}",
                field="condition",
                value=str(value),
            ) from None


CONDITION_MULTIPLIERS: dict[ConditionTier, Decimal] = {
    ConditionTier.EXCELLENT: Decimal("1.10"),
    ConditionTier.GOOD: Decimal("1.00"),
    ConditionTier.FAIR: Decimal("0.80"),
    ConditionTier.POOR: Decimal("0.60"),
}

BRAND_BASE_VALUES: dict[str, Decimal] = {
    "Tesla": Decimal("50000"),
    "Audi": Decimal("40000"),
    "BMW": Decimal("45000"),
    "Porsche": Decimal("80000"),
    "Ford": Decimal("30000"),
    "Land Rover": Decimal("60000"),
}
DEFAULT_BASE_VALUE = Decimal("25000")

ANNUAL_DEPRECIATION = Decimal("0.95")
MILEAGE_STEP = Decimal("100000")
MILEAGE_STEP_DEPRECIATION = Decimal("0.2")


@dataclass(frozen=True, slots=True)
class ConditionInput:
    brand: str
    year: int
    mileage: int | Decimal
    condition: ConditionTier

    def validate(self) -> None:
        if self.mileage < 0:
            raise InvalidInput("mileage must be >= 0", field="mileage", value=self.mileage)
        if not isinstance(self.condition, ConditionTier):
            ConditionTier.parse(self.condition)


def is_known_brand(brand: str) -> bool:
    return brand in BRAND_BASE_VALUES


def base_value_for(brand: str) -> Decimal:
    return BRAND_BASE_VALUES.get(brand, DEFAULT_BASE_VALUE)


def estimate_value(data: ConditionInput, current_year: int) -> int:
    """
    Heuristic trade-in value.

    Steps, in order:
    - brand base figure (DEFAULT_BASE_VALUE for unlisted brands)
    - 5% per year of age, future model years count as age 0
    - 20% per 100,000 mileage units, factor floored at 0
    - condition multiplier
    - rounded half up to a whole currency unit

    Raises:
        InvalidInput: If mileage is negative or the condition is unknown
    """
    data.validate()
    condition = ConditionTier.parse(data.condition)

    value = base_value_for(data.brand)

    age = max(0, current_year - data.year)
    value = value * ANNUAL_DEPRECIATION**age

    mileage_factor = Decimal(1) - (Decimal(data.mileage) / MILEAGE_STEP) * MILEAGE_STEP_DEPRECIATION
    value = value * max(Decimal(0), mileage_factor)

    value = value * condition.multiplier

    return int(value.quantize(Decimal("1"), rounding=ROUND_HALF_UP))

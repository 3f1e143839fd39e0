from __future__ import annotations

import pytest

from dealership_lite.domain.errors import InvalidInput
from dealership_lite.domain.valuation import (
    DEFAULT_BASE_VALUE,
    ConditionInput,
    ConditionTier,
    base_value_for,
    estimate_value,
    is_known_brand,
)

CURRENT_YEAR = 2026


def condition_input(**overrides) -> ConditionInput:
    fields = dict(brand="Audi", year=2023, mileage=5000, condition=ConditionTier.GOOD)
    fields.update(overrides)
    return ConditionInput(**fields)


# ============================================================================
# FORMULA
# ============================================================================


def test_new_car_without_mileage_is_worth_base_value():
    """Age 0, mileage 0, good condition leaves the brand base untouched."""
    value = estimate_value(
        condition_input(brand="Tesla", year=CURRENT_YEAR, mileage=0), CURRENT_YEAR
    )

    assert value == 50000


def test_audi_three_years_old_good_condition():
    """40000 * 0.95^3 * 0.99 = 33952.05, rounded to 33952."""
    assert estimate_value(condition_input(), CURRENT_YEAR) == 33952


@pytest.mark.parametrize(
    "condition, expected",
    [
        (ConditionTier.EXCELLENT, 37347),  # 33952.05 * 1.1 = 37347.255
        (ConditionTier.GOOD, 33952),
        (ConditionTier.FAIR, 27162),  # 33952.05 * 0.8 = 27161.64
        (ConditionTier.POOR, 20371),  # 33952.05 * 0.6 = 20371.23
    ],
)
def test_condition_multiplier(condition, expected):
    assert estimate_value(condition_input(condition=condition), CURRENT_YEAR) == expected


def test_condition_tiers_are_strictly_ordered():
    values = [
        estimate_value(condition_input(condition=tier), CURRENT_YEAR) for tier in ConditionTier
    ]

    assert values == sorted(values, reverse=True)
    assert len(set(values)) == 4


def test_rounds_half_up():
    """24998.5 rounds up to 24999, not to the even neighbour."""
    # 25000 * (1 - 30/100000 * 0.2) = 24998.5
    value = estimate_value(
        condition_input(brand="Lada", year=CURRENT_YEAR, mileage=30),
        CURRENT_YEAR,
    )

    assert value == 24999


def test_unknown_brand_uses_default_base():
    value = estimate_value(
        condition_input(brand="Lada", year=CURRENT_YEAR, mileage=0), CURRENT_YEAR
    )

    assert value == int(DEFAULT_BASE_VALUE)
    assert is_known_brand("Lada") is False
    assert base_value_for("Lada") == DEFAULT_BASE_VALUE


def test_brand_lookup_is_exact():
    assert is_known_brand("Land Rover") is True
    assert is_known_brand("land rover") is False


# ============================================================================
# EDGE CASES
# ============================================================================


def test_estimate_is_deterministic():
    data = condition_input(brand="BMW", year=2019, mileage=64000, condition=ConditionTier.FAIR)

    assert estimate_value(data, CURRENT_YEAR) == estimate_value(data, CURRENT_YEAR)


def test_future_model_year_counts_as_new():
    future = estimate_value(condition_input(year=CURRENT_YEAR + 3), CURRENT_YEAR)
    current = estimate_value(condition_input(year=CURRENT_YEAR), CURRENT_YEAR)

    assert future == current


def test_extreme_mileage_floors_at_zero():
    """600,000 units would make the mileage factor negative."""
    value = estimate_value(condition_input(mileage=600_000), CURRENT_YEAR)

    assert value == 0


def test_mileage_at_500000_is_worth_nothing():
    assert estimate_value(condition_input(mileage=500_000), CURRENT_YEAR) == 0


def test_negative_mileage_is_invalid_input():
    with pytest.raises(InvalidInput, match="mileage must be >= 0"):
        estimate_value(condition_input(mileage=-1), CURRENT_YEAR)


def test_unknown_condition_is_invalid_input():
    with pytest.raises(InvalidInput) as exc_info:
        estimate_value(condition_input(condition="mint"), CURRENT_YEAR)

    assert exc_info.value.error_code == "INVALID_INPUT"
    assert exc_info.value.context["field"] == "condition"


# ============================================================================
# CONDITION TIER
# ============================================================================


def test_parse_accepts_plain_strings():
    assert ConditionTier.parse("excellent") is ConditionTier.EXCELLENT


def test_parse_passes_through_members():
    assert ConditionTier.parse(ConditionTier.POOR) is ConditionTier.POOR


def test_parse_rejects_wrong_case():
    with pytest.raises(InvalidInput):
        ConditionTier.parse("Good")


def test_tier_label():
    assert ConditionTier.FAIR.label == "Fair"

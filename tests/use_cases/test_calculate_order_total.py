from __future__ import annotations

from decimal import Decimal
from unittest.mock import Mock

import pytest

from dealership_lite.adapters.in_memory_vehicle_catalog_repository import (
    InMemoryVehicleCatalogRepository,
)
from dealership_lite.domain.catalog import CatalogStore
from dealership_lite.domain.errors import InvalidInput, NotFoundError, OutOfRange
from dealership_lite.ports.vehicle_catalog_repository import VehicleCatalogRepository
from dealership_lite.use_cases.calculate_order_total import (
    CalculateOrderTotal,
    CalculateOrderTotalRequest,
)


@pytest.fixture()
def use_case(sample_store: CatalogStore) -> CalculateOrderTotal:
    return CalculateOrderTotal(
        vehicle_catalog_repository=InMemoryVehicleCatalogRepository(sample_store)
    )


def test_full_selection(use_case: CalculateOrderTotal) -> None:
    summary = use_case.execute(
        CalculateOrderTotalRequest(vehicle_id="2", color="red", quantity=2)
    )

    assert summary.base_price == Decimal("39900")
    assert summary.color_delta == Decimal("1000")
    assert summary.total == Decimal("81800")


def test_without_color_has_no_surcharge(use_case: CalculateOrderTotal) -> None:
    summary = use_case.execute(CalculateOrderTotalRequest(vehicle_id="1"))

    assert summary.color is None
    assert summary.color_delta == Decimal("0")
    assert summary.total == Decimal("79990")


def test_without_vehicle_has_no_total(use_case: CalculateOrderTotal) -> None:
    summary = use_case.execute(CalculateOrderTotalRequest(color="black", quantity=3))

    assert summary.vehicle is None
    assert summary.base_price is None
    assert summary.total is None


def test_unknown_vehicle_raises_not_found(use_case: CalculateOrderTotal) -> None:
    with pytest.raises(NotFoundError):
        use_case.execute(CalculateOrderTotalRequest(vehicle_id="99"))


def test_unknown_color_raises_invalid_input(use_case: CalculateOrderTotal) -> None:
    with pytest.raises(InvalidInput) as exc_info:
        use_case.execute(CalculateOrderTotalRequest(vehicle_id="2", color="green"))

    assert exc_info.value.context["field"] == "color"


@pytest.mark.parametrize("quantity", [0, 6])
def test_quantity_out_of_range(use_case: CalculateOrderTotal, quantity: int) -> None:
    with pytest.raises(OutOfRange):
        use_case.execute(CalculateOrderTotalRequest(vehicle_id="2", quantity=quantity))


def test_no_repository_lookup_without_vehicle() -> None:
    repository = Mock(spec=VehicleCatalogRepository)

    CalculateOrderTotal(vehicle_catalog_repository=repository).execute(
        CalculateOrderTotalRequest()
    )

    repository.get_by_id.assert_not_called()

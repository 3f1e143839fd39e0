"""Test suite for GetVehicleById use case."""

from __future__ import annotations

from unittest.mock import Mock

import pytest

from dealership_lite.domain.catalog import CatalogStore
from dealership_lite.domain.errors import NotFoundError, ValidationError
from dealership_lite.ports.vehicle_catalog_repository import VehicleCatalogRepository
from dealership_lite.use_cases.get_vehicle_by_id import (
    GetVehicleById,
    GetVehicleByIdRequest,
    GetVehicleByIdResponse,
)


@pytest.fixture()
def mock_repository() -> Mock:
    """Mock VehicleCatalogRepository."""
    return Mock(spec=VehicleCatalogRepository)


def test_execute_successful_get(mock_repository: Mock, sample_store: CatalogStore) -> None:
    audi = sample_store.get_by_id("2")
    mock_repository.get_by_id.return_value = audi
    use_case = GetVehicleById(vehicle_catalog_repository=mock_repository)

    result = use_case.execute(GetVehicleByIdRequest(vehicle_id="2"))

    assert isinstance(result, GetVehicleByIdResponse)
    assert result.vehicle == audi
    assert result.vehicle.display_name == "Audi A4"
    mock_repository.get_by_id.assert_called_once_with("2")


def test_execute_raises_not_found(mock_repository: Mock) -> None:
    mock_repository.get_by_id.return_value = None
    use_case = GetVehicleById(vehicle_catalog_repository=mock_repository)

    with pytest.raises(NotFoundError) as exc_info:
        use_case.execute(GetVehicleByIdRequest(vehicle_id="99"))

    assert exc_info.value.context["resource"] == "Vehicle"
    assert exc_info.value.context["identifier"] == "99"


@pytest.mark.parametrize("vehicle_id", ["", "   "])
def test_execute_rejects_blank_id(mock_repository: Mock, vehicle_id: str) -> None:
    use_case = GetVehicleById(vehicle_catalog_repository=mock_repository)

    with pytest.raises(ValidationError) as exc_info:
        use_case.execute(GetVehicleByIdRequest(vehicle_id=vehicle_id))

    assert exc_info.value.errors == [
        {"field": "vehicle_id", "message": "Must not be blank", "code": "REQUIRED"}
    ]
    mock_repository.get_by_id.assert_not_called()

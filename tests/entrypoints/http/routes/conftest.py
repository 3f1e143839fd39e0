from __future__ import annotations

from datetime import date

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from dealership_lite.adapters.in_memory_vehicle_catalog_repository import (
    InMemoryVehicleCatalogRepository,
)
from dealership_lite.domain.catalog import CatalogStore
from dealership_lite.entrypoints.http.app import build_app
from dealership_lite.entrypoints.http.dependencies import (
    get_book_service_use_case,
    get_catalog_repository,
    get_estimate_vehicle_value_use_case,
)
from dealership_lite.use_cases.book_service import BookService
from dealership_lite.use_cases.estimate_vehicle_value import EstimateVehicleValue

TODAY = date(2026, 10, 19)  # Monday


@pytest.fixture
def repository(sample_store: CatalogStore) -> InMemoryVehicleCatalogRepository:
    """Fresh catalog per test so stock toggles never leak between tests."""
    return InMemoryVehicleCatalogRepository(sample_store)


@pytest.fixture
def app(repository: InMemoryVehicleCatalogRepository) -> FastAPI:
    test_app = build_app()
    test_app.dependency_overrides[get_catalog_repository] = lambda: repository
    test_app.dependency_overrides[get_estimate_vehicle_value_use_case] = (
        lambda: EstimateVehicleValue(current_year=TODAY.year)
    )
    test_app.dependency_overrides[get_book_service_use_case] = lambda: BookService(
        today=lambda: TODAY
    )
    return test_app


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    return TestClient(app, raise_server_exceptions=False)

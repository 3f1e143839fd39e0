from __future__ import annotations

from typing import Any

import pytest
from fastapi.testclient import TestClient


@pytest.fixture
def order_payload() -> dict[str, Any]:
    return {
        "vehicle_id": "2",
        "color": "red",
        "quantity": 2,
        "first_name": "Ana",
        "last_name": "Lopez",
        "email": "ana@example.com",
        "phone": "5551234567",
        "address": "12 Main Street",
        "city": "Austin",
        "zip_code": "73301",
    }


# ==============================================================================
# POST /v1/orders/quote
# ==============================================================================


def test_quote_with_full_selection(client: TestClient) -> None:
    response = client.post(
        "/v1/orders/quote", json={"vehicle_id": "2", "color": "red", "quantity": 2}
    )

    assert response.status_code == 200
    data = response.json()
    assert data["vehicle"]["id"] == "2"
    assert data["color"]["value"] == "red"
    assert data["base_price"] == "39900"
    assert data["color_delta"] == "1000"
    assert data["total"] == "81800"


def test_quote_without_vehicle_has_null_total(client: TestClient) -> None:
    response = client.post("/v1/orders/quote", json={"color": "black"})

    assert response.status_code == 200
    data = response.json()
    assert data["vehicle"] is None
    assert data["total"] is None
    assert data["color_delta"] == "500"


def test_quote_with_empty_strings_is_an_empty_selection(client: TestClient) -> None:
    response = client.post("/v1/orders/quote", json={"vehicle_id": "", "color": ""})

    assert response.status_code == 200
    assert response.json()["total"] is None


@pytest.mark.parametrize("quantity", [0, 6])
def test_quote_quantity_out_of_range(client: TestClient, quantity: int) -> None:
    response = client.post("/v1/orders/quote", json={"vehicle_id": "2", "quantity": quantity})

    assert response.status_code == 422
    data = response.json()
    assert data["code"] == "OUT_OF_RANGE"
    assert data["errors"][0]["field"] == "quantity"


def test_quote_unknown_color(client: TestClient) -> None:
    response = client.post("/v1/orders/quote", json={"vehicle_id": "2", "color": "green"})

    assert response.status_code == 422
    assert response.json()["code"] == "INVALID_INPUT"


def test_quote_unknown_vehicle(client: TestClient) -> None:
    response = client.post("/v1/orders/quote", json={"vehicle_id": "99"})

    assert response.status_code == 404


# ==============================================================================
# POST /v1/orders
# ==============================================================================


def test_place_order(client: TestClient, order_payload: dict[str, Any]) -> None:
    response = client.post("/v1/orders", json=order_payload)

    assert response.status_code == 201
    data = response.json()
    assert data["reference"].startswith("ORD-")
    assert data["total"] == "81800"
    assert data["quantity"] == 2
    assert data["message"] == (
        "Thank you for your order! We will contact you shortly to confirm the details."
    )


def test_place_order_reports_field_errors(
    client: TestClient, order_payload: dict[str, Any]
) -> None:
    order_payload.update(email="not-an-email", zip_code="123")

    response = client.post("/v1/orders", json=order_payload)

    assert response.status_code == 422
    assert response.json()["errors"] == [
        {"field": "email", "message": "Please enter a valid email", "code": "INVALID_EMAIL"},
        {"field": "zip_code", "message": "ZIP code is required", "code": "TOO_SHORT"},
    ]


def test_place_order_out_of_stock(client: TestClient, order_payload: dict[str, Any]) -> None:
    order_payload["vehicle_id"] = "5"

    response = client.post("/v1/orders", json=order_payload)

    assert response.status_code == 409
    assert response.json()["detail"] == "Ford Mustang is out of stock"


def test_place_order_missing_field(client: TestClient, order_payload: dict[str, Any]) -> None:
    del order_payload["city"]

    response = client.post("/v1/orders", json=order_payload)

    assert response.status_code == 422
    assert response.json()["errors"][0]["field"] == "city"

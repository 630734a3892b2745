"""Shared fixtures for API tests."""

import pytest
from fastapi.testclient import TestClient

from app.main import app


@pytest.fixture
def client() -> TestClient:
    """Create test client."""
    return TestClient(app)


@pytest.fixture
def widget_payload() -> dict:
    """Get a valid add request body."""
    return {
        "product_name": "Widget",
        "category": "Electronics",
        "unit_price": 9.99,
        "quantity_in_stock": 5,
    }


@pytest.fixture
def widget(client: TestClient, widget_payload: dict) -> dict:
    """Add a product through the API and return it."""
    response = client.post("/api/products", json=widget_payload)
    assert response.status_code == 201
    return response.json()

"""Tests for health check endpoints."""

from unittest.mock import AsyncMock, patch

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError

from app.infrastructure.config import settings
from app.main import app


@pytest.fixture
def client() -> TestClient:
    """Create test client."""
    return TestClient(app)


def test_health_check(client: TestClient) -> None:
    """Test health endpoint returns healthy status."""
    response = client.get("/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "healthy"
    assert data["service"] == "product-service"
    assert "version" in data


def test_readiness_check_memory_backend(client: TestClient) -> None:
    """Test readiness endpoint skips the database for the memory backend."""
    with patch("app.api.health.check_connection", new=AsyncMock()) as check:
        response = client.get("/ready")
    assert response.status_code == 200
    assert response.json()["status"] == "ready"
    check.assert_not_awaited()


def test_readiness_check_database_reachable(
    client: TestClient, monkeypatch: pytest.MonkeyPatch
) -> None:
    """Test readiness endpoint probes the database backend."""
    monkeypatch.setattr(settings, "repository_backend", "database")
    with patch("app.api.health.check_connection", new=AsyncMock()) as check:
        response = client.get("/ready")
    assert response.status_code == 200
    assert response.json()["status"] == "ready"
    check.assert_awaited_once()


def test_readiness_check_database_unreachable(
    client: TestClient, monkeypatch: pytest.MonkeyPatch
) -> None:
    """Test readiness endpoint reports 503 when the database is down."""
    monkeypatch.setattr(settings, "repository_backend", "database")
    failure = OperationalError("SELECT 1", {}, Exception("connection refused"))
    with patch("app.api.health.check_connection", new=AsyncMock(side_effect=failure)):
        response = client.get("/ready")
    assert response.status_code == 503
    assert response.json()["status"] == "unavailable"

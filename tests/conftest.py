"""Shared fixtures for product service tests."""

import pytest

from app.infrastructure.config import settings
from app.infrastructure.product_repository import (
    InMemoryProductRepository,
    get_memory_repository,
    reset_memory_repository,
)


@pytest.fixture(autouse=True)
def memory_backend(monkeypatch: pytest.MonkeyPatch):
    """Run every test against a fresh in-memory product repository."""
    monkeypatch.setattr(settings, "repository_backend", "memory")
    reset_memory_repository()
    yield
    reset_memory_repository()


@pytest.fixture
def repository() -> InMemoryProductRepository:
    """Get the in-memory repository used by the API."""
    return get_memory_repository()

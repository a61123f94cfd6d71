"""
Test suite for health check endpoints.

System role: Verification of liveness and dependency checks
"""

from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError

from tos_checker.api.deps import get_services
from tos_checker.api.main import create_app
from tos_checker.boundary.db.connection import get_async_db
from tos_checker.configs import Settings
from tos_checker.core.exceptions import CacheUnavailableError


@pytest.fixture
def mock_services() -> MagicMock:
    """Provide service container with a healthy cache."""
    services = MagicMock()
    services.cache.ping = AsyncMock(return_value=True)
    return services


@pytest.fixture
def mock_db() -> AsyncMock:
    """Provide mocked database session."""
    return AsyncMock()


@pytest.fixture
def client(mock_services, mock_db) -> TestClient:
    """Provide test client with infrastructure overridden."""
    app = create_app(Settings(_env_file=None))
    app.dependency_overrides[get_services] = lambda: mock_services
    app.dependency_overrides[get_async_db] = lambda: mock_db
    return TestClient(app)


def test_health_check(client):
    response = client.get("/api/v1/health")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy", "message": "Server Healthy"}


def test_health_check_cache(client):
    response = client.get("/api/v1/health/cache")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy", "message": "Cache connection OK"}


def test_health_check_cache_unavailable(client, mock_services):
    mock_services.cache.ping = AsyncMock(side_effect=CacheUnavailableError("down", operation="ping"))
    response = client.get("/api/v1/health/cache")
    assert response.status_code == 503


def test_health_check_db(client):
    response = client.get("/api/v1/health/db")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy", "message": "Database connection OK"}


def test_health_check_db_unavailable(client, mock_db):
    mock_db.execute = AsyncMock(side_effect=OperationalError("SELECT 1", {}, Exception("down")))
    response = client.get("/api/v1/health/db")
    assert response.status_code == 503


@pytest.mark.parametrize("error", [ConnectionRefusedError(111, "refused"), TimeoutError()])
def test_health_check_db_unreachable(client, mock_db, error):
    mock_db.execute = AsyncMock(side_effect=error)
    response = client.get("/api/v1/health/db")
    assert response.status_code == 503

"""
Test suite for cache API endpoints.

Tests POST /api/v1/cache and GET /api/v1/cache/{identity} with a mocked
CacheService injected through dependency_overrides.

System role: Verification of the cache HTTP contract
"""

import json
from unittest.mock import AsyncMock
from urllib.parse import quote

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from tos_checker.api.deps import get_cache_service
from tos_checker.api.main import create_app
from tos_checker.configs import Settings
from tos_checker.core.exceptions import CacheUnavailableError
from tos_checker.models.cache import CachePutOutcome
from tests.doubles import asgi_get

URL = "https://example.com/terms?lang=en"
# Decoding this a second time would turn %2F into / and %25 into %
ESCAPED_URL = "https://example.com/terms?ref=a%2Fb&discount=100%25"


@pytest.fixture
def mock_cache_service() -> AsyncMock:
    """Provide mocked CacheService."""
    service = AsyncMock()
    service.store_document = AsyncMock(return_value=CachePutOutcome.CREATED)
    service.get_document = AsyncMock(return_value="Section 1.")
    return service


@pytest.fixture
def app(mock_cache_service) -> FastAPI:
    """Provide app with the cache service overridden."""
    app = create_app(Settings(_env_file=None))
    app.dependency_overrides[get_cache_service] = lambda: mock_cache_service
    return app


@pytest.fixture
def client(app) -> TestClient:
    """Provide test client for the overridden app."""
    return TestClient(app)


class TestCacheWrite:
    """Test suite for POST /api/v1/cache."""

    def test_should_store_decoded_identity(self, client, mock_cache_service) -> None:
        response = client.post(
            "/api/v1/cache",
            json={"document_identity": quote(URL, safe=""), "text": "Section 1."},
        )

        assert response.status_code == 200
        assert response.json() == {"status": "created", "document_identity": URL}
        mock_cache_service.store_document.assert_awaited_once_with(URL, "Section 1.")

    def test_should_accept_extension_field_names(self, client, mock_cache_service) -> None:
        response = client.post(
            "/api/v1/cache",
            json={"currentUrl": URL, "bodyText": "Section 1."},
        )

        assert response.status_code == 200
        mock_cache_service.store_document.assert_awaited_once_with(URL, "Section 1.")

    def test_should_keep_current_url_as_sent(self, client, mock_cache_service) -> None:
        response = client.post("/api/v1/cache", json={"currentUrl": ESCAPED_URL, "bodyText": "Section 1."})

        assert response.status_code == 200
        mock_cache_service.store_document.assert_awaited_once_with(ESCAPED_URL, "Section 1.")

    def test_should_decode_body_identity_exactly_once(self, client, mock_cache_service) -> None:
        response = client.post(
            "/api/v1/cache",
            json={"document_identity": quote(ESCAPED_URL, safe=""), "text": "Section 1."},
        )

        assert response.status_code == 200
        assert response.json()["document_identity"] == ESCAPED_URL
        mock_cache_service.store_document.assert_awaited_once_with(ESCAPED_URL, "Section 1.")

    def test_should_report_unchanged(self, client, mock_cache_service) -> None:
        mock_cache_service.store_document = AsyncMock(return_value=CachePutOutcome.UNCHANGED)

        response = client.post("/api/v1/cache", json={"document_identity": URL, "text": "x"})

        assert response.json()["status"] == "unchanged"

    @pytest.mark.parametrize(
        "body",
        [
            {"text": "Section 1."},
            {"document_identity": URL},
            {"document_identity": URL, "text": ""},
            {"document_identity": URL, "text": "   "},
            {"document_identity": "   ", "text": "Section 1."},
        ],
    )
    def test_should_reject_missing_or_blank_fields(self, client, mock_cache_service, body) -> None:
        response = client.post("/api/v1/cache", json=body)

        assert response.status_code == 422
        mock_cache_service.store_document.assert_not_awaited()

    def test_should_return_503_when_cache_unavailable(self, client, mock_cache_service) -> None:
        mock_cache_service.store_document = AsyncMock(
            side_effect=CacheUnavailableError("down", operation="set")
        )

        response = client.post("/api/v1/cache", json={"document_identity": URL, "text": "x"})

        assert response.status_code == 503
        assert "Retry-After" in response.headers


class TestCacheRead:
    """Test suite for GET /api/v1/cache/{identity}."""

    def test_should_return_cached_text_for_encoded_identity(self, client, mock_cache_service) -> None:
        response = client.get(f"/api/v1/cache/{quote(URL, safe='')}")

        assert response.status_code == 200
        assert response.json() == {"document_identity": URL, "text": "Section 1."}
        mock_cache_service.get_document.assert_awaited_once_with(URL)

    @pytest.mark.asyncio
    async def test_should_decode_path_identity_exactly_once(self, app, mock_cache_service) -> None:
        status_code, body = await asgi_get(app, "/api/v1/cache/", ESCAPED_URL)

        assert status_code == 200
        assert json.loads(body) == {"document_identity": ESCAPED_URL, "text": "Section 1."}
        mock_cache_service.get_document.assert_awaited_once_with(ESCAPED_URL)

    def test_should_return_404_on_miss(self, client, mock_cache_service) -> None:
        mock_cache_service.get_document = AsyncMock(return_value=None)

        response = client.get(f"/api/v1/cache/{quote(URL, safe='')}")

        assert response.status_code == 404

    def test_should_reject_blank_identity(self, client, mock_cache_service) -> None:
        response = client.get("/api/v1/cache/%20%20")

        assert response.status_code == 400
        mock_cache_service.get_document.assert_not_awaited()

    def test_should_return_503_when_cache_unavailable(self, client, mock_cache_service) -> None:
        mock_cache_service.get_document = AsyncMock(
            side_effect=CacheUnavailableError("down", operation="get")
        )

        response = client.get(f"/api/v1/cache/{quote(URL, safe='')}")

        assert response.status_code == 503

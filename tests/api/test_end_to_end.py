"""
End-to-end scenario through the real application lifespan.

Cache a document, read it back, analyze it, then analyze again and get
the stored summary with no new model calls. Redis and the language model
are in-memory doubles; the result store is SQLite created by the lifespan.

System role: Verification of the full request flow
"""

from urllib.parse import quote

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.pool import StaticPool

from tos_checker.api.deps.dependencies import ServiceContainer, build_analysis_pipeline
from tos_checker.api.main import create_app
from tos_checker.boundary.cache.redis_cache import RedisKVCache
from tos_checker.boundary.db.connection import get_async_session_factory
from tos_checker.configs import Settings
from tos_checker.core.analysis import is_sentinel
from tests.doubles import InMemoryRedis, ScriptedLanguageModel

URL = "https://example.com/tos"
TEXT = "Section 1. We may share your data with third parties for any purpose."


def responder(prompt: str, model: str) -> str:
    if "Section analyses:" in prompt:
        return "Data sharing\n- Your data may be shared with third parties for any purpose."
    return "- Data shared with third parties"


@pytest.fixture
def llm() -> ScriptedLanguageModel:
    """Provide language model double."""
    return ScriptedLanguageModel(responder)


@pytest.fixture
def client(monkeypatch, llm):
    """Provide test client running the lifespan with in-memory collaborators."""
    settings = Settings(_env_file=None)
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    container = ServiceContainer(
        settings=settings,
        cache=RedisKVCache(InMemoryRedis()),
        pipeline=build_analysis_pipeline(settings, llm),
        engine=engine,
        session_factory=get_async_session_factory(engine),
    )
    monkeypatch.setattr("tos_checker.api.main.build_service_container", lambda s: container)

    with TestClient(create_app(settings)) as test_client:
        yield test_client


def test_cache_then_analyze_twice(client, llm):
    encoded = quote(URL, safe="")

    put = client.post("/api/v1/cache", json={"currentUrl": URL, "bodyText": TEXT})
    assert put.status_code == 200
    assert put.json()["status"] == "created"

    cached = client.get(f"/api/v1/cache/{encoded}")
    assert cached.status_code == 200
    assert cached.json()["text"] == TEXT

    first = client.post("/api/v1/caution", json={"documentIdentity": encoded, "text": TEXT})
    assert first.status_code == 200
    first_body = first.json()
    assert not is_sentinel(first_body["summary"])
    assert "third parties" in first_body["summary"]
    assert first_body["cached"] is False
    calls_after_first = len(llm.calls)
    assert calls_after_first == 2

    second = client.post("/api/v1/caution", json={"documentIdentity": encoded, "text": TEXT})
    assert second.status_code == 200
    assert second.json()["summary"] == first_body["summary"]
    assert second.json()["cached"] is True
    assert len(llm.calls) == calls_after_first

    stored = client.get(f"/api/v1/caution/{encoded}")
    assert stored.status_code == 200
    assert stored.json()["summary"] == first_body["summary"]


def test_responses_carry_correlation_id(client):
    response = client.get("/api/v1/health", headers={"X-Correlation-ID": "req-123"})

    assert response.headers["X-Correlation-ID"] == "req-123"

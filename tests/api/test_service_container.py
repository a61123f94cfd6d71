"""
Test suite for the dependency injection container.

System role: Verification of startup wiring
"""

from unittest.mock import AsyncMock, MagicMock

import pytest

from tos_checker.api.deps.dependencies import (
    ServiceContainer,
    build_analysis_pipeline,
    build_service_container,
)
from tos_checker.configs import Settings
from tos_checker.core.analysis import AnalysisPipeline
from tos_checker.core.exceptions import ConfigurationError


def make_settings(**analysis) -> Settings:
    settings = Settings(_env_file=None)
    settings.llm.google_api_key = "test-key"
    for key, value in analysis.items():
        setattr(settings.analysis, key, value)
    return settings


def test_build_service_container_should_require_api_key() -> None:
    settings = Settings(_env_file=None)
    settings.llm.google_api_key = None

    with pytest.raises(ConfigurationError):
        build_service_container(settings)


def test_build_service_container_should_skip_vector_index_by_default() -> None:
    container = build_service_container(make_settings())

    assert container.vector_index is None
    assert container.engine is not None
    assert container.session_factory is not None
    assert container.cache.ttl_seconds == 86400


def test_build_service_container_should_wire_vector_index_when_enabled() -> None:
    container = build_service_container(make_settings(use_vector_index=True))

    assert container.vector_index is not None


def test_build_analysis_pipeline_should_return_pipeline() -> None:
    pipeline = build_analysis_pipeline(make_settings(), MagicMock())

    assert isinstance(pipeline, AnalysisPipeline)


@pytest.mark.asyncio
async def test_aclose_should_release_all_handles() -> None:
    cache = MagicMock()
    cache.close = AsyncMock()
    vector_index = MagicMock()
    vector_index.close = AsyncMock()
    engine = MagicMock()
    engine.dispose = AsyncMock()
    container = ServiceContainer(
        settings=MagicMock(),
        cache=cache,
        pipeline=MagicMock(),
        engine=engine,
        vector_index=vector_index,
    )

    await container.aclose()

    cache.close.assert_awaited_once()
    vector_index.close.assert_awaited_once()
    engine.dispose.assert_awaited_once()

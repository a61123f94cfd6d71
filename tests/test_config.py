"""
Test suite for configuration settings.

System role: Verification of environment mapping and defaults
"""

import pytest
from pydantic import ValidationError

from tos_checker.configs import (
    AnalysisSettings,
    CacheSettings,
    DatabaseSettings,
    LLMSettings,
    Settings,
    VectorStoreSettings,
    get_settings,
)
from tos_checker.configs.base import BaseSettings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Remove settings variables that would leak in from the host."""
    for name in ("GOOGLE_API_KEY", "LLM_GOOGLE_API_KEY", "REDIS_URL", "ANALYSIS_MAX_CONCURRENCY"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def test_defaults_should_match_documented_values() -> None:
    settings = Settings(_env_file=None)

    assert settings.cache.ttl_seconds == 86400
    assert settings.analysis.max_chunk_size == 15000
    assert settings.analysis.max_concurrency == 4
    assert settings.analysis.use_vector_index is False
    assert settings.analysis.persist_failed_summaries is False
    assert settings.vector_store.split_chunk_size == 1000
    assert settings.vector_store.split_chunk_overlap == 200
    assert settings.cors_origins == ["*"]


def test_prefixed_environment_variables_should_apply(monkeypatch) -> None:
    monkeypatch.setenv("REDIS_URL", "redis://cache:6379/1")
    monkeypatch.setenv("ANALYSIS_MAX_CONCURRENCY", "8")

    assert CacheSettings(_env_file=None).url == "redis://cache:6379/1"
    assert AnalysisSettings(_env_file=None).max_concurrency == 8


@pytest.mark.parametrize("name", ["GOOGLE_API_KEY", "LLM_GOOGLE_API_KEY"])
def test_google_api_key_should_accept_both_names(monkeypatch, name) -> None:
    monkeypatch.setenv(name, "secret")

    assert LLMSettings(_env_file=None).google_api_key == "secret"


def test_analysis_settings_should_reject_zero_concurrency() -> None:
    with pytest.raises(ValidationError):
        AnalysisSettings(_env_file=None, max_concurrency=0)


def test_async_database_url_should_use_asyncpg() -> None:
    settings = DatabaseSettings(_env_file=None, host="db", sslmode="require")

    assert settings.async_database_url.startswith("postgresql+asyncpg://")
    assert settings.async_database_url.endswith("@db:5432/tos_checker?ssl=require")


def test_get_settings_should_be_cached() -> None:
    assert get_settings() is get_settings()


@pytest.mark.parametrize(
    "settings_class",
    [AnalysisSettings, CacheSettings, DatabaseSettings, LLMSettings, VectorStoreSettings],
)
def test_concern_settings_should_share_base_without_app_fields(settings_class) -> None:
    assert issubclass(settings_class, BaseSettings)
    assert settings_class.model_config["env_file"] == ".env"
    assert settings_class.model_config["extra"] == "ignore"
    assert settings_class.model_config["env_prefix"]
    for name in ("environment", "log_level", "cors_origins"):
        assert name not in settings_class.model_fields

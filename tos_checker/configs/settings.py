"""
Unified application settings.

Aggregates all configuration modules into a single Settings class.
Provides dependency injection factory for FastAPI.

Dependencies: All config modules
System role: Central configuration aggregator for the application
"""

from functools import lru_cache

from pydantic import Field

from tos_checker.configs.analysis import AnalysisSettings
from tos_checker.configs.base import BaseSettings
from tos_checker.configs.cache import CacheSettings
from tos_checker.configs.database import DatabaseSettings
from tos_checker.configs.llm import LLMSettings
from tos_checker.configs.vector_store import VectorStoreSettings


class Settings(BaseSettings):
    """Unified application settings aggregating all config modules."""

    environment: str = Field(
        default="development",
        description="Application environment (development, staging, production)",
    )
    log_level: str = Field(
        default="INFO",
        description="Root logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )
    cors_origins: list[str] = Field(
        default=["*"],
        description="Origins allowed to call the API (the browser extension runs on arbitrary sites)",
    )

    database: DatabaseSettings = Field(default_factory=DatabaseSettings)
    cache: CacheSettings = Field(default_factory=CacheSettings)
    llm: LLMSettings = Field(default_factory=LLMSettings)
    analysis: AnalysisSettings = Field(default_factory=AnalysisSettings)
    vector_store: VectorStoreSettings = Field(default_factory=VectorStoreSettings)


@lru_cache
def get_settings() -> Settings:
    """
    Get application settings singleton.

    Environment variables are read once; call ``get_settings.cache_clear()``
    to reload them (tests do this after patching the environment).

    Returns:
        Settings: Application settings instance
    """
    return Settings()

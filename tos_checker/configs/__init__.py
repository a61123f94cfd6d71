"""
Configuration management module.

Provides centralized, type-safe configuration using Pydantic Settings.
All config modules support environment variable mapping with validation.
"""

from tos_checker.configs.analysis import AnalysisSettings
from tos_checker.configs.cache import CacheSettings
from tos_checker.configs.database import DatabaseSettings
from tos_checker.configs.llm import LLMSettings
from tos_checker.configs.settings import Settings, get_settings
from tos_checker.configs.vector_store import VectorStoreSettings

__all__ = [
    "AnalysisSettings",
    "CacheSettings",
    "DatabaseSettings",
    "LLMSettings",
    "Settings",
    "VectorStoreSettings",
    "get_settings",
]

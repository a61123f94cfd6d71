"""
Application services.

Exports:
  - CacheService: Raw document text caching
  - AnalysisService: Cached analysis pipeline runs
"""

from tos_checker.application.services.analysis_service import AnalysisService
from tos_checker.application.services.cache_service import CacheService

__all__ = ["AnalysisService", "CacheService"]

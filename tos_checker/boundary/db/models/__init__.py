"""
Database models package.

Exports:
  - AnalysisResultModel: Persisted document summaries

Dependencies: sqlalchemy, tos_checker.boundary.db.base
System role: Database model definitions for domain entities
"""

from tos_checker.boundary.db.models.analysis_result_model import AnalysisResultModel

__all__ = ["AnalysisResultModel"]

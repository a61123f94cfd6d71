"""
Database boundary layer: ORM models, CRUD operations, and connection management.

Exports:
  - Base, UUIDMixin, CreatedAtMixin: Model building blocks
  - get_async_engine(), get_async_session_factory(), get_async_db(): Connection management
  - AnalysisResultModel: Persisted document summaries
  - analysis_result_crud: CRUD singleton

Dependencies: sqlalchemy, tos_checker.configs
System role: Database adapter for the analysis result store
"""

from tos_checker.boundary.db.base import Base, CreatedAtMixin, UUIDMixin
from tos_checker.boundary.db.connection import (
    get_async_db,
    get_async_engine,
    get_async_session_factory,
)
from tos_checker.boundary.db.create_tables import create_all_tables
from tos_checker.boundary.db.models.analysis_result_model import AnalysisResultModel
from tos_checker.boundary.db.CRUD import (
    AnalysisResultCRUD,
    BaseCRUD,
    analysis_result_crud,
)

__all__ = [
    "Base",
    "CreatedAtMixin",
    "UUIDMixin",
    "get_async_db",
    "get_async_engine",
    "get_async_session_factory",
    "create_all_tables",
    "AnalysisResultModel",
    "AnalysisResultCRUD",
    "BaseCRUD",
    "analysis_result_crud",
]

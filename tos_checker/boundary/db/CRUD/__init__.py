"""
CRUD operations for database models.

Usage:
    from tos_checker.boundary.db.CRUD import analysis_result_crud

    result = await analysis_result_crud.get_by_document_id(db, document_id)
"""

from tos_checker.boundary.db.CRUD.analysis_result_crud import (
    AnalysisResultCRUD,
    analysis_result_crud,
)
from tos_checker.boundary.db.CRUD.base_crud import BaseCRUD

__all__ = [
    "AnalysisResultCRUD",
    "BaseCRUD",
    "analysis_result_crud",
]

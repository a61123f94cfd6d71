"""
Analysis result CRUD operations.

Lookup by document identity and race-safe creation. Two requests for the
same document may both miss the lookup and both run the pipeline; the
unique constraint lets only one insert win and the loser gets the
winner's row back.

Dependencies: sqlalchemy, tos_checker.boundary.db.models
System role: Result store persistence operations
"""

import logging

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from tos_checker.boundary.db.connection import DATABASE_UNAVAILABLE_ERRORS
from tos_checker.boundary.db.CRUD.base_crud import BaseCRUD
from tos_checker.boundary.db.models.analysis_result_model import AnalysisResultModel
from tos_checker.core.exceptions import ResultStoreUnavailableError

logger = logging.getLogger(__name__)


class AnalysisResultCRUD(BaseCRUD[AnalysisResultModel]):
    """CRUD operations for AnalysisResultModel."""

    def __init__(self) -> None:
        """Initialize AnalysisResultCRUD with AnalysisResultModel."""
        super().__init__(AnalysisResultModel)

    async def get_by_document_id(
        self,
        session: AsyncSession,
        document_id: str,
    ) -> AnalysisResultModel | None:
        """
        Retrieve the persisted result for a document.

        Args:
            session: Async database session
            document_id: Canonical document identity

        Returns:
            AnalysisResultModel if stored, None otherwise

        Raises:
            ResultStoreUnavailableError: If the query fails
        """
        stmt = select(AnalysisResultModel).where(AnalysisResultModel.document_id == document_id)
        try:
            result = await session.execute(stmt)
        except DATABASE_UNAVAILABLE_ERRORS as e:
            raise ResultStoreUnavailableError(
                f"Failed to look up analysis result: {type(e).__name__}",
                document_id=document_id,
            ) from e
        return result.scalar_one_or_none()

    async def create_once(
        self,
        session: AsyncSession,
        document_id: str,
        summary_text: str,
    ) -> tuple[AnalysisResultModel, bool]:
        """
        Insert a result unless one already exists, and commit.

        Args:
            session: Async database session
            document_id: Canonical document identity
            summary_text: Summary to persist

        Returns:
            tuple: (stored row, True if this call created it)

        Raises:
            ResultStoreUnavailableError: If the insert fails for any reason
                other than an existing row
        """
        try:
            instance = await self.create(
                session,
                document_id=document_id,
                summary_text=summary_text,
            )
            await session.commit()
            return instance, True
        except IntegrityError:
            await session.rollback()
            existing = await self.get_by_document_id(session, document_id)
            if existing is None:
                raise ResultStoreUnavailableError(
                    "Insert conflicted but no existing result was found",
                    document_id=document_id,
                )
            logger.info(
                "Analysis result already stored by a concurrent request",
                extra={"document_id": document_id},
            )
            return existing, False
        except DATABASE_UNAVAILABLE_ERRORS as e:
            await session.rollback()
            raise ResultStoreUnavailableError(
                f"Failed to store analysis result: {type(e).__name__}",
                document_id=document_id,
            ) from e


analysis_result_crud = AnalysisResultCRUD()

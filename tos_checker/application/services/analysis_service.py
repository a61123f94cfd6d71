"""
Analysis service orchestrator.

Serves stored summaries when they exist and otherwise runs the analysis
pipeline and persists its outcome. Deduplication across concurrent
requests relies on the result store's unique constraint.

Dependencies: sqlalchemy, tos_checker.boundary.db.CRUD, tos_checker.core.analysis
System role: Analysis use case orchestration
"""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from tos_checker.boundary.db.CRUD.analysis_result_crud import analysis_result_crud
from tos_checker.boundary.db.models.analysis_result_model import AnalysisResultModel
from tos_checker.core.analysis.pipeline import AnalysisPipeline
from tos_checker.core.analysis.summarizer import ANALYSIS_FAILED_SENTINEL
from tos_checker.models.analysis import AnalysisOutcome
from tos_checker.observability.log_utils import log_with_context

logger = logging.getLogger(__name__)


def _to_outcome(result: AnalysisResultModel, cached: bool) -> AnalysisOutcome:
    return AnalysisOutcome(
        document_id=result.document_id,
        summary=result.summary_text,
        created_at=result.created_at,
        cached=cached,
    )


class AnalysisService:
    """Analysis service orchestrator."""

    def __init__(
        self,
        db: AsyncSession,
        pipeline: AnalysisPipeline,
        persist_failed_summaries: bool = False,
    ) -> None:
        """
        Initialize analysis service.

        Args:
            db: Async SQLAlchemy session
            pipeline: Analysis pipeline
            persist_failed_summaries: Store the failure sentinel too
        """
        self.db = db
        self.pipeline = pipeline
        self.persist_failed_summaries = persist_failed_summaries

    async def get_result(self, document_id: str) -> AnalysisOutcome | None:
        """
        Get the stored result for a document.

        Args:
            document_id: Canonical document identity

        Returns:
            AnalysisOutcome | None: Stored result or None

        Raises:
            ResultStoreUnavailableError: If the store fails
        """
        result = await analysis_result_crud.get_by_document_id(self.db, document_id)
        if result is None:
            return None
        return _to_outcome(result, cached=True)

    async def run(self, document_id: str, text: str) -> AnalysisOutcome:
        """
        Return the stored summary or analyze the document and store it.

        Args:
            document_id: Canonical document identity
            text: Document text

        Returns:
            AnalysisOutcome: Summary with ``cached`` telling where it came from

        Raises:
            ResultStoreUnavailableError: If the store fails
        """
        existing = await self.get_result(document_id)
        if existing is not None:
            log_with_context(logger, logging.INFO, "Serving stored analysis", document_id=document_id)
            return existing

        # The lookup opened a transaction; don't hold a pooled connection during model calls
        if self.db.in_transaction():
            await self.db.rollback()

        summary = await self.pipeline.analyze(document_id, text)

        if summary == ANALYSIS_FAILED_SENTINEL and not self.persist_failed_summaries:
            logger.warning(
                "Analysis failed, result not persisted",
                extra={"document_id": document_id},
            )
            return AnalysisOutcome(document_id=document_id, summary=summary)

        result, created = await analysis_result_crud.create_once(
            self.db,
            document_id=document_id,
            summary_text=summary,
        )
        # A concurrent request may have stored its summary first
        return _to_outcome(result, cached=not created)

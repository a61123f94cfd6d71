"""
Analysis pipeline.

Chunker -> fan-out chunk analysis -> summarizer, with an optional detour
through the vector index that stores the submitted text and reads the
context back from the collection. Always returns text: failures end in
a sentinel string, never an exception.

Dependencies: tos_checker.core.analysis, tos_checker.boundary.vdb
System role: Orchestration of one document analysis
"""

import logging
import time

from tos_checker.boundary.vdb.context_store import VectorContextStore
from tos_checker.core.analysis.chunker import DEFAULT_MAX_CHUNK_SIZE, chunk_text
from tos_checker.core.analysis.fan_out import FanOutCoordinator
from tos_checker.core.analysis.summarizer import ANALYSIS_FAILED_SENTINEL, Summarizer
from tos_checker.core.exceptions import VectorDimensionMismatchError
from tos_checker.observability.log_utils import log_exception_with_context

logger = logging.getLogger(__name__)


class AnalysisPipeline:
    """Turn one document's text into a summary string."""

    def __init__(
        self,
        fan_out: FanOutCoordinator,
        summarizer: Summarizer,
        max_chunk_size: int = DEFAULT_MAX_CHUNK_SIZE,
        context_store: VectorContextStore | None = None,
    ) -> None:
        """
        Initialize pipeline.

        Args:
            fan_out: Concurrent chunk analysis runner
            summarizer: Final summary stage
            max_chunk_size: Chunk bound in characters
            context_store: Vector index glue; None analyzes the text as submitted
        """
        self._fan_out = fan_out
        self._summarizer = summarizer
        self._max_chunk_size = max_chunk_size
        self._context_store = context_store

    async def analyze(self, document_id: str, text: str) -> str:
        """
        Analyze a document.

        Args:
            document_id: Canonical document identity
            text: Document text

        Returns:
            str: Summary or sentinel
        """
        start_time = time.perf_counter()
        try:
            context = await self._resolve_context(document_id, text)
            chunks = chunk_text(context, self._max_chunk_size)
            logger.info(
                "Analyzing document",
                extra={"document_id": document_id, "chunks": len(chunks), "length": len(context)},
            )
            findings = await self._fan_out.run_all(chunks)
            if findings and not any(finding.ok for finding in findings):
                # No chunk call succeeded, so "no usable content" would be a guess
                logger.error(
                    "Every chunk analysis failed",
                    extra={"document_id": document_id, "chunks": len(findings)},
                )
                return ANALYSIS_FAILED_SENTINEL
            summary = await self._summarizer.summarize(findings)
        except Exception as e:
            log_exception_with_context(
                logger,
                "Analysis pipeline failed",
                e,
                document_id=document_id,
            )
            return ANALYSIS_FAILED_SENTINEL

        logger.info(
            "Document analysis finished",
            extra={
                "document_id": document_id,
                "duration_ms": round((time.perf_counter() - start_time) * 1000, 2),
            },
        )
        return summary

    async def _resolve_context(self, document_id: str, text: str) -> str:
        if self._context_store is None:
            return text

        try:
            tag = await self._context_store.store(document_id, text)
            context = await self._context_store.load(document_id, tag)
        except VectorDimensionMismatchError:
            raise
        except Exception as e:
            log_exception_with_context(
                logger,
                "Vector index unavailable, analyzing submitted text",
                e,
                level=logging.WARNING,
                document_id=document_id,
            )
            return text

        if not context.strip():
            logger.warning(
                "Vector index returned no context, analyzing submitted text",
                extra={"document_id": document_id},
            )
            return text
        return context

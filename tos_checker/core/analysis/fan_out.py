"""
Fan-out coordinator.

Runs every chunk analysis concurrently, at most ``max_concurrency`` at a
time, waits for all of them and returns findings in chunk order. An
optional overall deadline cancels whatever is still running; those
chunks count as failed.

Dependencies: asyncio, tos_checker.core.analysis.chunk_analyzer
System role: Bounded parallel chunk analysis
"""

import asyncio
import logging
from typing import Sequence

from tos_checker.core.analysis.chunk_analyzer import ChunkAnalyzer
from tos_checker.models.chunk import Chunk, ChunkFinding

logger = logging.getLogger(__name__)


class FanOutCoordinator:
    """Join-all runner for chunk analyses."""

    def __init__(
        self,
        analyzer: ChunkAnalyzer,
        max_concurrency: int = 4,
        overall_timeout_seconds: float | None = None,
    ) -> None:
        """
        Initialize coordinator.

        Args:
            analyzer: Chunk analyzer
            max_concurrency: Maximum analyses in flight
            overall_timeout_seconds: Deadline for the whole batch (None waits forever)
        """
        if max_concurrency < 1:
            raise ValueError("max_concurrency must be at least 1")
        self._analyzer = analyzer
        self._max_concurrency = max_concurrency
        self._overall_timeout_seconds = overall_timeout_seconds

    async def run_all(self, chunks: Sequence[Chunk]) -> list[ChunkFinding]:
        """
        Analyze all chunks and return one finding per chunk, in input order.

        Args:
            chunks: Chunks to analyze

        Returns:
            list[ChunkFinding]: ``findings[i]`` belongs to ``chunks[i]``
        """
        if not chunks:
            return []

        semaphore = asyncio.Semaphore(self._max_concurrency)

        async def run_one(chunk: Chunk) -> ChunkFinding:
            async with semaphore:
                return await self._analyzer.analyze(chunk)

        tasks = [asyncio.create_task(run_one(chunk)) for chunk in chunks]
        try:
            _, pending = await asyncio.wait(tasks, timeout=self._overall_timeout_seconds)
            if pending:
                logger.warning(
                    "Fan-out deadline reached, cancelling unfinished chunk analyses",
                    extra={
                        "pending": len(pending),
                        "total": len(tasks),
                        "timeout_seconds": self._overall_timeout_seconds,
                    },
                )
                for task in pending:
                    task.cancel()
                await asyncio.gather(*pending, return_exceptions=True)
        finally:
            for task in tasks:
                if not task.done():
                    task.cancel()

        findings: list[ChunkFinding] = []
        for chunk, task in zip(chunks, tasks):
            if task.cancelled():
                findings.append(ChunkFinding.failed(chunk.index))
            elif task.exception() is not None:
                logger.error(
                    "Chunk analysis raised unexpectedly",
                    extra={"chunk_index": chunk.index, "error_type": type(task.exception()).__name__},
                )
                findings.append(ChunkFinding.failed(chunk.index))
            else:
                findings.append(task.result())

        failed = sum(1 for finding in findings if not finding.ok)
        logger.info(
            "Chunk analyses finished",
            extra={"total": len(findings), "failed": failed},
        )
        return findings

"""
Chunk analyzer.

Sends one chunk to the language model and returns its findings. A failed
call never raises: it produces an empty finding marked ``ok=False`` so a
single bad chunk cannot sink the whole document.

Dependencies: asyncio, langchain_core.prompts, tos_checker.boundary.llm
System role: Per-chunk LLM analysis
"""

import asyncio
import logging

from langchain_core.prompts import PromptTemplate

from tos_checker.boundary.llm.chat_client import LanguageModelClient
from tos_checker.core.analysis.prompts import CHUNK_ANALYSIS_PROMPT
from tos_checker.models.chunk import Chunk, ChunkFinding
from tos_checker.observability.log_utils import log_exception_with_context

logger = logging.getLogger(__name__)


class ChunkAnalyzer:
    """Analyze a single chunk with the language model."""

    def __init__(
        self,
        llm: LanguageModelClient,
        model_name: str,
        timeout_seconds: float | None = 90.0,
        prompt: PromptTemplate = CHUNK_ANALYSIS_PROMPT,
    ) -> None:
        """
        Initialize analyzer.

        Args:
            llm: Language model client
            model_name: Model used for chunk analysis
            timeout_seconds: Per-call deadline (None disables it)
            prompt: Template with a ``chunk`` variable
        """
        self._llm = llm
        self._model_name = model_name
        self._timeout_seconds = timeout_seconds
        self._prompt = prompt

    def build_prompt(self, chunk: Chunk) -> str:
        return self._prompt.format(chunk=chunk.text)

    async def analyze(self, chunk: Chunk) -> ChunkFinding:
        """
        Analyze one chunk.

        Args:
            chunk: Chunk to analyze

        Returns:
            ChunkFinding: Model output, or an empty failed finding
        """
        prompt = self.build_prompt(chunk)
        try:
            content = await asyncio.wait_for(
                self._llm.complete(prompt, self._model_name),
                timeout=self._timeout_seconds,
            )
        except asyncio.TimeoutError:
            logger.warning(
                "Chunk analysis timed out",
                extra={"chunk_index": chunk.index, "timeout_seconds": self._timeout_seconds},
            )
            return ChunkFinding.failed(chunk.index)
        except Exception as e:
            log_exception_with_context(
                logger,
                "Chunk analysis failed",
                e,
                level=logging.WARNING,
                chunk_index=chunk.index,
                model_name=self._model_name,
            )
            return ChunkFinding.failed(chunk.index)

        if not isinstance(content, str):
            logger.warning(
                "Chunk analysis returned non-text content",
                extra={"chunk_index": chunk.index, "content_type": type(content).__name__},
            )
            return ChunkFinding.failed(chunk.index)

        return ChunkFinding(chunk_index=chunk.index, content=content.strip(), ok=True)

"""
Summarizer.

Merges non-empty chunk findings and asks the language model for one
organized summary. Returns fixed sentinel strings instead of raising when
there is nothing to summarize or the model call fails.

Dependencies: asyncio, langchain_core.prompts, tos_checker.boundary.llm
System role: Final stage of the analysis pipeline
"""

import asyncio
import logging
from typing import Sequence

from langchain_core.prompts import PromptTemplate

from tos_checker.boundary.llm.chat_client import LanguageModelClient
from tos_checker.core.analysis.prompts import SUMMARY_PROMPT
from tos_checker.models.chunk import ChunkFinding
from tos_checker.observability.log_utils import log_exception_with_context

logger = logging.getLogger(__name__)

NO_USABLE_CONTENT_SENTINEL = "Unable to analyze the terms and conditions"
ANALYSIS_FAILED_SENTINEL = "Error analyzing terms and conditions"
FINDING_SEPARATOR = "\n\n"


def is_sentinel(text: str) -> bool:
    return text in (NO_USABLE_CONTENT_SENTINEL, ANALYSIS_FAILED_SENTINEL)


class Summarizer:
    """Produce the final summary from chunk findings."""

    def __init__(
        self,
        llm: LanguageModelClient,
        model_name: str,
        timeout_seconds: float | None = 120.0,
        prompt: PromptTemplate = SUMMARY_PROMPT,
        separator: str = FINDING_SEPARATOR,
    ) -> None:
        """
        Initialize summarizer.

        Args:
            llm: Language model client
            model_name: Model used for the summary call
            timeout_seconds: Deadline for the summary call (None disables it)
            prompt: Template with a ``findings`` variable
            separator: Joins non-empty findings
        """
        self._llm = llm
        self._model_name = model_name
        self._timeout_seconds = timeout_seconds
        self._prompt = prompt
        self._separator = separator

    def combine(self, findings: Sequence[ChunkFinding]) -> str:
        """Join the content of non-empty findings in the given order."""
        return self._separator.join(f.content.strip() for f in findings if not f.is_empty)

    async def summarize(self, findings: Sequence[ChunkFinding]) -> str:
        """
        Summarize findings with one model call.

        Args:
            findings: Chunk findings, usually in chunk order

        Returns:
            str: Summary text, NO_USABLE_CONTENT_SENTINEL when every finding
                is empty, ANALYSIS_FAILED_SENTINEL when the call fails
        """
        combined = self.combine(findings)
        if not combined:
            logger.info(
                "No chunk produced findings, skipping summary call",
                extra={"findings": len(findings)},
            )
            return NO_USABLE_CONTENT_SENTINEL

        prompt = self._prompt.format(findings=combined)
        try:
            summary = await asyncio.wait_for(
                self._llm.complete(prompt, self._model_name),
                timeout=self._timeout_seconds,
            )
        except asyncio.TimeoutError:
            logger.error(
                "Summary call timed out",
                extra={"timeout_seconds": self._timeout_seconds, "model_name": self._model_name},
            )
            return ANALYSIS_FAILED_SENTINEL
        except Exception as e:
            log_exception_with_context(
                logger,
                "Summary call failed",
                e,
                model_name=self._model_name,
            )
            return ANALYSIS_FAILED_SENTINEL

        if not isinstance(summary, str) or not summary.strip():
            logger.error("Summary call returned no text", extra={"model_name": self._model_name})
            return ANALYSIS_FAILED_SENTINEL
        return summary.strip()

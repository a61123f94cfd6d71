"""
Terms-and-conditions analysis pipeline.

Exports the pipeline stages and the sentinel strings callers compare
results against.
"""

from tos_checker.core.analysis.chunk_analyzer import ChunkAnalyzer
from tos_checker.core.analysis.chunker import DEFAULT_MAX_CHUNK_SIZE, chunk_text
from tos_checker.core.analysis.fan_out import FanOutCoordinator
from tos_checker.core.analysis.pipeline import AnalysisPipeline
from tos_checker.core.analysis.summarizer import (
    ANALYSIS_FAILED_SENTINEL,
    NO_USABLE_CONTENT_SENTINEL,
    Summarizer,
    is_sentinel,
)

__all__ = [
    "ANALYSIS_FAILED_SENTINEL",
    "AnalysisPipeline",
    "ChunkAnalyzer",
    "DEFAULT_MAX_CHUNK_SIZE",
    "FanOutCoordinator",
    "NO_USABLE_CONTENT_SENTINEL",
    "Summarizer",
    "chunk_text",
    "is_sentinel",
]

"""Pydantic models for API contracts and pipeline data."""

from tos_checker.models.analysis import AnalysisOutcome, AnalyzeDocumentRequest
from tos_checker.models.cache import (
    CacheDocumentRequest,
    CachedDocumentResponse,
    CachePutOutcome,
    CacheWriteResponse,
)
from tos_checker.models.chunk import Chunk, ChunkFinding

__all__ = [
    "AnalysisOutcome",
    "AnalyzeDocumentRequest",
    "CacheDocumentRequest",
    "CachePutOutcome",
    "CacheWriteResponse",
    "CachedDocumentResponse",
    "Chunk",
    "ChunkFinding",
]

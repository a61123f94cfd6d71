"""
Analysis pipeline configuration settings.

Chunk sizing, fan-out limits, deadlines and persistence policy for
the terms-and-conditions analysis pipeline.

Dependencies: pydantic, pydantic_settings, tos_checker.configs.base
System role: Pipeline tuning parameters
"""

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from tos_checker.configs.base import BaseSettings


class AnalysisSettings(BaseSettings):
    """Analysis pipeline configuration."""

    model_config = SettingsConfigDict(env_prefix="ANALYSIS_")

    max_chunk_size: int = Field(
        default=15000,
        ge=1,
        description="Upper bound in characters for one analyzed chunk",
    )
    max_concurrency: int = Field(
        default=4,
        ge=1,
        description="Maximum chunk analyses in flight for one document",
    )
    chunk_timeout_seconds: float = Field(
        default=90.0,
        gt=0,
        description="Deadline for a single chunk analysis call",
    )
    overall_timeout_seconds: float = Field(
        default=300.0,
        gt=0,
        description="Deadline for the whole fan-out; unfinished chunks count as failed",
    )
    summary_timeout_seconds: float = Field(
        default=120.0,
        gt=0,
        description="Deadline for the final summary call",
    )
    use_vector_index: bool = Field(
        default=False,
        description="Route submitted text through the Qdrant collection before analysis",
    )
    persist_failed_summaries: bool = Field(
        default=False,
        description="Persist the failure sentinel (otherwise the next request retries)",
    )

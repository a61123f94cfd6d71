"""
Vector store configuration settings.

Qdrant connection, embedding model and splitter parameters for the
optional vector-index enrichment path.

Dependencies: pydantic, pydantic_settings, tos_checker.configs.base
System role: Vector database configuration
"""

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from tos_checker.configs.base import BaseSettings


class VectorStoreSettings(BaseSettings):
    """Qdrant vector store configuration."""

    model_config = SettingsConfigDict(env_prefix="QDRANT_")

    url: str | None = Field(default=None, description="Qdrant server URL (None for in-memory)")
    api_key: str | None = Field(default=None, description="Qdrant API key")

    embedding_model: str = Field(
        default="models/text-embedding-004",
        description="Google embedding model used for stored chunks",
    )
    split_chunk_size: int = Field(default=1000, description="Splitter chunk size in characters")
    split_chunk_overlap: int = Field(default=200, description="Overlap between splitter chunks")
    scroll_page_size: int = Field(default=100, description="Points fetched per scroll request")

    ensure_attempts: int = Field(
        default=3,
        description="Attempts to create or verify a collection before giving up",
    )
    replication_factor: int = Field(default=1, description="Replication factor for new collections")

"""
Chunk and finding domain models.

A chunk is a word-aligned slice of a submitted document; a finding is
what the language model reported for one chunk.

Dependencies: pydantic
System role: Ephemeral pipeline data structures
"""

from pydantic import BaseModel, ConfigDict, Field


class Chunk(BaseModel):
    """Bounded, word-aligned slice of document text."""

    model_config = ConfigDict(frozen=True)

    index: int = Field(ge=0, description="Position of the chunk in the document")
    text: str = Field(description="Chunk text, words joined by single spaces")
    size_bound: int = Field(ge=1, description="Maximum size the chunker was asked for")

    @property
    def is_oversized(self) -> bool:
        """True for a single word longer than the bound."""
        return len(self.text) > self.size_bound


class ChunkFinding(BaseModel):
    """
    Result of analyzing one chunk.

    ``content`` is empty when the chunk contributed nothing. ``ok`` is False
    when the model call failed; aggregation ignores it and only looks at
    ``content``.
    """

    model_config = ConfigDict(frozen=True)

    chunk_index: int = Field(ge=0)
    content: str = ""
    ok: bool = True

    @property
    def is_empty(self) -> bool:
        return not self.content.strip()

    @classmethod
    def failed(cls, chunk_index: int) -> "ChunkFinding":
        return cls(chunk_index=chunk_index, content="", ok=False)

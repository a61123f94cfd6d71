"""
Word-boundary chunker.

Splits document text into bounded chunks without breaking words. A word
longer than the bound becomes a chunk of its own.

Dependencies: tos_checker.models.chunk
System role: First stage of the analysis pipeline
"""

from tos_checker.models.chunk import Chunk

DEFAULT_MAX_CHUNK_SIZE = 15000


def chunk_text(text: str, max_size: int = DEFAULT_MAX_CHUNK_SIZE) -> list[Chunk]:
    """
    Split text on whitespace into chunks of at most ``max_size`` characters.

    Words inside a chunk are joined by single spaces, so joining all chunk
    texts with a space reproduces the input with whitespace collapsed.

    Args:
        text: Document text
        max_size: Maximum chunk length in characters

    Returns:
        list[Chunk]: Chunks in document order; empty for blank input

    Raises:
        ValueError: If max_size is less than 1
    """
    if max_size < 1:
        raise ValueError("max_size must be at least 1")

    chunks: list[Chunk] = []
    words: list[str] = []
    length = 0

    for word in text.split():
        candidate = len(word) if not words else length + 1 + len(word)
        if words and candidate > max_size:
            chunks.append(Chunk(index=len(chunks), text=" ".join(words), size_bound=max_size))
            words = [word]
            length = len(word)
        else:
            words.append(word)
            length = candidate

    if words:
        chunks.append(Chunk(index=len(chunks), text=" ".join(words), size_bound=max_size))
    return chunks

"""
Document context storage through the vector index.

Splits a document, embeds the splits and stores them in a per-document
Qdrant collection, then rebuilds the document context from the
collection. Used by the pipeline when vector enrichment is enabled.

Dependencies: langchain_text_splitters, langchain_core.embeddings,
    tos_checker.boundary.vdb.qdrant_index
System role: Alternate context storage for analysis
"""

import hashlib
import logging

from langchain_core.embeddings import Embeddings
from langchain_text_splitters import RecursiveCharacterTextSplitter

from tos_checker.boundary.vdb.qdrant_index import QdrantVectorIndex
from tos_checker.core.exceptions import VectorStoreError

logger = logging.getLogger(__name__)


def collection_name_for(document_id: str) -> str:
    """Map a document identity to a valid, stable collection name."""
    digest = hashlib.sha256(document_id.encode("utf-8")).hexdigest()
    return f"tos_{digest[:32]}"


def content_hash(text: str) -> str:
    return hashlib.sha256(text.encode("utf-8")).hexdigest()


class VectorContextStore:
    """Store and reload document text through embeddings in Qdrant."""

    def __init__(
        self,
        index: QdrantVectorIndex,
        embeddings: Embeddings,
        chunk_size: int = 1000,
        chunk_overlap: int = 200,
    ) -> None:
        """
        Initialize context store.

        Args:
            index: Qdrant index wrapper
            embeddings: LangChain embeddings model
            chunk_size: Splitter chunk size in characters
            chunk_overlap: Overlap between consecutive splits
        """
        self._index = index
        self._embeddings = embeddings
        self._splitter = RecursiveCharacterTextSplitter(
            chunk_size=chunk_size,
            chunk_overlap=chunk_overlap,
            length_function=len,
        )

    async def store(self, document_id: str, text: str) -> str:
        """
        Split, embed and upsert a document.

        Args:
            document_id: Canonical document identity
            text: Document text

        Returns:
            str: Content hash tagging the stored points

        Raises:
            ValueError: If text is blank
            VectorStoreError: If splitting, embedding or storage fails
        """
        if not text.strip():
            raise ValueError("No text provided for vector store creation")

        splits = self._splitter.split_text(text)
        if not splits:
            raise VectorStoreError("No text chunks generated", operation="split")

        vectors = await self._embeddings.aembed_documents(splits)
        if not vectors or not vectors[0]:
            raise VectorStoreError("Failed to generate embeddings", operation="embed")

        collection = collection_name_for(document_id)
        tag = content_hash(text)
        await self._index.ensure_collection(collection, len(vectors[0]))
        written = await self._index.upsert_chunks(
            collection,
            splits,
            vectors,
            extra_payload={"document_id": document_id, "content_hash": tag},
        )
        logger.info(
            "Stored document in vector index",
            extra={"document_id": document_id, "collection": collection, "points": written},
        )
        return tag

    async def load(self, document_id: str, tag: str | None = None) -> str:
        """
        Rebuild document context from its collection.

        Args:
            document_id: Canonical document identity
            tag: Only use points written for this content hash

        Returns:
            str: Chunk texts ordered by chunk index, joined by spaces
                (empty when the collection holds nothing)
        """
        payloads = await self._index.scroll_all(collection_name_for(document_id))
        if tag is not None:
            payloads = [p for p in payloads if p.get("content_hash") == tag]
        payloads.sort(key=lambda p: p.get("chunk_index", 0))
        return " ".join(p.get("text", "") for p in payloads if p.get("text"))

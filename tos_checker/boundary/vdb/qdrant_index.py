"""
Qdrant vector index client.

Creates or verifies per-document collections, upserts embedded chunks
and scrolls collections back out. Collection setup is retried with
exponential backoff; a dimension mismatch on an existing collection is a
configuration problem and fails immediately.

Dependencies: qdrant_client, tenacity, tos_checker.core.exceptions
System role: Vector store client for the optional enrichment path
"""

import logging
import uuid
from datetime import datetime, timezone
from typing import Any

from qdrant_client import AsyncQdrantClient
from qdrant_client.models import (
    Distance,
    OptimizersConfigDiff,
    PointStruct,
    VectorParams,
)
from tenacity import (
    AsyncRetrying,
    retry_if_not_exception_type,
    stop_after_attempt,
    wait_exponential,
)
from tenacity.wait import wait_base

from tos_checker.configs.vector_store import VectorStoreSettings
from tos_checker.core.exceptions import VectorDimensionMismatchError, VectorStoreError

logger = logging.getLogger(__name__)


def create_qdrant_client(settings: VectorStoreSettings) -> AsyncQdrantClient:
    """Build an async Qdrant client; in-memory when no URL is configured."""
    if settings.url:
        return AsyncQdrantClient(url=settings.url, api_key=settings.api_key)
    return AsyncQdrantClient(location=":memory:")


def _configured_vector_size(collection_info: Any) -> int | None:
    vectors = collection_info.config.params.vectors
    if vectors is None:
        return None
    if isinstance(vectors, dict):
        # Named vectors are not used by this service
        return None
    return vectors.size


class QdrantVectorIndex:
    """
    Qdrant collection management, upsert and scroll.

    Usage:
        index = QdrantVectorIndex(create_qdrant_client(settings.vector_store))
        await index.ensure_collection("tos_ab12...", 768)
        await index.upsert_chunks("tos_ab12...", texts, vectors)
        points = await index.scroll_all("tos_ab12...")
    """

    def __init__(
        self,
        client: AsyncQdrantClient,
        ensure_attempts: int = 3,
        scroll_page_size: int = 100,
        replication_factor: int = 1,
        retry_wait: wait_base | None = None,
    ) -> None:
        """
        Initialize index wrapper.

        Args:
            client: Async Qdrant client
            ensure_attempts: Attempts for ensure_collection
            scroll_page_size: Points per scroll page
            replication_factor: Replication factor for new collections
            retry_wait: Tenacity wait strategy (defaults to 2s, 4s, ... backoff)
        """
        self._client = client
        self._ensure_attempts = ensure_attempts
        self._scroll_page_size = scroll_page_size
        self._replication_factor = replication_factor
        self._retry_wait = retry_wait or wait_exponential(multiplier=1, min=2, max=30)

    async def ensure_collection(self, collection_name: str, vector_size: int) -> None:
        """
        Make sure a cosine collection of the given size exists.

        Args:
            collection_name: Collection to verify or create
            vector_size: Embedding dimensionality

        Raises:
            ValueError: If name or size is missing
            VectorDimensionMismatchError: Existing collection has another size
            VectorStoreError: All attempts failed
        """
        if not collection_name or not vector_size:
            raise ValueError("Collection name and vector size are required")

        try:
            async for attempt in AsyncRetrying(
                stop=stop_after_attempt(self._ensure_attempts),
                wait=self._retry_wait,
                retry=retry_if_not_exception_type(VectorDimensionMismatchError),
                before_sleep=lambda retry_state: logger.warning(
                    f"{__name__}:ensure_collection - Attempt "
                    f"{retry_state.attempt_number}/{self._ensure_attempts} failed: "
                    f"{retry_state.outcome.exception()}"
                ),
                reraise=True,
            ):
                with attempt:
                    await self._ensure_collection_once(collection_name, vector_size)
        except VectorDimensionMismatchError:
            raise
        except Exception as e:
            raise VectorStoreError(
                f"Collection creation failed after {self._ensure_attempts} attempts: {e}",
                operation="ensure_collection",
                details={"collection": collection_name},
            ) from e

    async def _ensure_collection_once(self, collection_name: str, vector_size: int) -> None:
        if await self._client.collection_exists(collection_name):
            info = await self._client.get_collection(collection_name)
            actual = _configured_vector_size(info)
            if actual != vector_size:
                raise VectorDimensionMismatchError(collection_name, vector_size, actual)
            logger.debug(f"Collection {collection_name} exists with size {actual}")
            return

        await self._client.create_collection(
            collection_name=collection_name,
            vectors_config=VectorParams(size=vector_size, distance=Distance.COSINE),
            optimizers_config=OptimizersConfigDiff(default_segment_number=2),
            replication_factor=self._replication_factor,
            write_consistency_factor=1,
        )
        if not await self._client.collection_exists(collection_name):
            raise VectorStoreError(
                "Collection creation verification failed",
                operation="ensure_collection",
                details={"collection": collection_name},
            )
        logger.info(f"Created new collection: {collection_name}")

    async def upsert_chunks(
        self,
        collection_name: str,
        texts: list[str],
        vectors: list[list[float]],
        extra_payload: dict[str, Any] | None = None,
    ) -> int:
        """
        Upsert one point per chunk.

        Point IDs derive from collection and chunk index, so storing the
        same document again overwrites instead of duplicating.

        Args:
            collection_name: Target collection
            texts: Chunk texts
            vectors: Embeddings, parallel to ``texts``
            extra_payload: Fields added to every point's payload

        Returns:
            int: Number of points written

        Raises:
            ValueError: If texts and vectors differ in length
            VectorStoreError: If Qdrant rejects the upsert
        """
        if len(texts) != len(vectors):
            raise ValueError("texts and vectors must have the same length")
        if not texts:
            return 0

        timestamp = datetime.now(timezone.utc).isoformat()
        points = [
            PointStruct(
                id=str(uuid.uuid5(uuid.NAMESPACE_URL, f"{collection_name}:{i}")),
                vector=list(vector),
                payload={
                    "text": text.strip(),
                    "timestamp": timestamp,
                    "chunk_index": i,
                    **(extra_payload or {}),
                },
            )
            for i, (text, vector) in enumerate(zip(texts, vectors))
        ]
        try:
            await self._client.upsert(collection_name=collection_name, points=points)
        except Exception as e:
            raise VectorStoreError(
                f"Failed to upsert points: {e}",
                operation="upsert",
                details={"collection": collection_name, "point_count": len(points)},
            ) from e
        return len(points)

    async def scroll_all(self, collection_name: str) -> list[dict[str, Any]]:
        """
        Page through a collection and return every point's payload.

        Args:
            collection_name: Collection to read

        Returns:
            list[dict]: Payloads in scroll order

        Raises:
            VectorStoreError: If a scroll request fails
        """
        payloads: list[dict[str, Any]] = []
        offset = None
        try:
            while True:
                records, offset = await self._client.scroll(
                    collection_name=collection_name,
                    limit=self._scroll_page_size,
                    offset=offset,
                    with_payload=True,
                    with_vectors=False,
                )
                payloads.extend(record.payload or {} for record in records)
                if offset is None:
                    break
        except Exception as e:
            raise VectorStoreError(
                f"Error fetching collection points: {e}",
                operation="scroll",
                details={"collection": collection_name},
            ) from e
        return payloads

    async def close(self) -> None:
        await self._client.close()

"""
Cache service orchestrator.

Stores and reads raw document text submitted by the extension.

Dependencies: tos_checker.boundary.cache
System role: Cache use case orchestration
"""

import logging

from tos_checker.boundary.cache.redis_cache import RedisKVCache
from tos_checker.models.cache import CachePutOutcome
from tos_checker.observability.log_utils import log_with_context

logger = logging.getLogger(__name__)


class CacheService:
    """Cache service orchestrator."""

    def __init__(self, cache: RedisKVCache) -> None:
        """
        Initialize cache service.

        Args:
            cache: KV cache
        """
        self.cache = cache

    async def store_document(self, document_id: str, text: str) -> CachePutOutcome:
        """
        Cache a document's text.

        Args:
            document_id: Canonical document identity
            text: Raw text

        Returns:
            CachePutOutcome: What the write did

        Raises:
            CacheUnavailableError: If the cache fails
        """
        return await self.cache.put(document_id, text)

    async def get_document(self, document_id: str) -> str | None:
        """
        Read a cached document.

        Args:
            document_id: Canonical document identity

        Returns:
            str | None: Cached text or None when absent
        """
        text = await self.cache.get(document_id)
        if text is None:
            log_with_context(logger, logging.INFO, "Cache miss", document_id=document_id)
        return text

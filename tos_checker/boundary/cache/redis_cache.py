"""
Redis-backed KV cache for raw document text.

Stores the text the extension submits, keyed by canonical document
identity, with a fixed expiry. Writing the same text again is a no-op and
leaves the existing expiry in place; writing different text replaces it
and starts a fresh expiry.

Dependencies: redis (asyncio client), tos_checker.configs
System role: Short-lived document text cache
"""

import logging

from redis.asyncio import Redis
from redis.asyncio.retry import Retry
from redis.backoff import ExponentialBackoff
from redis.exceptions import RedisError

from tos_checker.configs.cache import CacheSettings
from tos_checker.core.exceptions import CacheUnavailableError
from tos_checker.models.cache import CachePutOutcome

logger = logging.getLogger(__name__)


def create_redis_client(settings: CacheSettings) -> Redis:
    """
    Build an asyncio Redis client from settings.

    Connection is lazy; the first command opens it.

    Args:
        settings: Cache settings

    Returns:
        Redis: Client returning ``str`` values
    """
    return Redis.from_url(
        settings.url,
        decode_responses=True,
        socket_timeout=settings.socket_timeout_seconds,
        socket_connect_timeout=settings.socket_timeout_seconds,
        retry_on_timeout=True,
        retry=Retry(ExponentialBackoff(), settings.max_retries),
    )


class RedisKVCache:
    """KV cache with per-entry expiry backed by Redis."""

    def __init__(self, client: Redis, ttl_seconds: int = 86400, key_prefix: str = "tos:cache:") -> None:
        """
        Initialize cache around an existing client.

        Args:
            client: asyncio Redis client with ``decode_responses=True``
            ttl_seconds: Expiry for every stored value
            key_prefix: Namespace prepended to document identities
        """
        if ttl_seconds <= 0:
            raise ValueError("ttl_seconds must be positive")
        self._client = client
        self._ttl_seconds = ttl_seconds
        self._key_prefix = key_prefix

    @property
    def ttl_seconds(self) -> int:
        return self._ttl_seconds

    def _key(self, key: str) -> str:
        return f"{self._key_prefix}{key}"

    async def put(self, key: str, value: str) -> CachePutOutcome:
        """
        Store a value under the key with the configured expiry.

        Args:
            key: Canonical document identity
            value: Raw document text

        Returns:
            CachePutOutcome: CREATED, UPDATED or UNCHANGED

        Raises:
            CacheUnavailableError: If Redis fails
        """
        redis_key = self._key(key)
        try:
            existing = await self._client.get(redis_key)
            if existing == value:
                logger.debug("Cache entry unchanged", extra={"cache_key": key})
                return CachePutOutcome.UNCHANGED

            await self._client.set(redis_key, value, ex=self._ttl_seconds)
        except RedisError as e:
            raise CacheUnavailableError(
                "Failed to write document to cache",
                operation="set",
                details={"cache_key": key, "error": str(e)},
            ) from e

        outcome = CachePutOutcome.CREATED if existing is None else CachePutOutcome.UPDATED
        logger.info(
            "Cached document text",
            extra={"cache_key": key, "outcome": outcome.value, "length": len(value)},
        )
        return outcome

    async def get(self, key: str) -> str | None:
        """
        Read the value stored under the key.

        Args:
            key: Canonical document identity

        Returns:
            str | None: Stored text, or None when absent or expired

        Raises:
            CacheUnavailableError: If Redis fails
        """
        try:
            return await self._client.get(self._key(key))
        except RedisError as e:
            raise CacheUnavailableError(
                "Failed to read document from cache",
                operation="get",
                details={"cache_key": key, "error": str(e)},
            ) from e

    async def ping(self) -> bool:
        """Return True when Redis answers PING."""
        try:
            return bool(await self._client.ping())
        except RedisError as e:
            raise CacheUnavailableError(
                "Cache did not answer ping",
                operation="ping",
                details={"error": str(e)},
            ) from e

    async def close(self) -> None:
        """Close the underlying connection pool."""
        await self._client.aclose()

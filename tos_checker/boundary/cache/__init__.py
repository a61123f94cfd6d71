"""KV cache boundary (Redis)."""

from tos_checker.boundary.cache.redis_cache import RedisKVCache, create_redis_client

__all__ = ["RedisKVCache", "create_redis_client"]

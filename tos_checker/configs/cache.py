"""
KV cache configuration settings.

Redis connection and expiry policy for raw document text submitted
by the browser extension.

Dependencies: pydantic, pydantic_settings, tos_checker.configs.base
System role: Cache store configuration
"""

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from tos_checker.configs.base import BaseSettings


class CacheSettings(BaseSettings):
    """Redis cache configuration."""

    model_config = SettingsConfigDict(env_prefix="REDIS_")

    url: str = Field(default="redis://localhost:6379", description="Redis connection URL")
    ttl_seconds: int = Field(
        default=86400,
        gt=0,
        description="Expiry applied to every cached document (24h)",
    )
    key_prefix: str = Field(default="tos:cache:", description="Namespace for cache keys")
    socket_timeout_seconds: float = Field(
        default=5.0,
        description="Socket timeout for a single Redis command",
    )
    max_retries: int = Field(
        default=3,
        description="Retries for a command that timed out before surfacing an error",
    )

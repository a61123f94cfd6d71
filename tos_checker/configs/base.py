"""
Base configuration settings.

Shared settings behaviour for every configuration class: ``.env`` loading,
case-insensitive variable names and ignoring unknown variables. Subclasses
add their own ``env_prefix``.

Dependencies: pydantic_settings
System role: Foundation for all configuration classes
"""

from pydantic_settings import BaseSettings as PydanticBaseSettings, SettingsConfigDict


class BaseSettings(PydanticBaseSettings):
    """Base configuration class with common settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

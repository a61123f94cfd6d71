"""
Language model configuration settings.

Model identifiers and call limits for the chunk analysis and summary
calls. Both calls go through Google Gemini chat models.

Dependencies: pydantic, pydantic_settings, tos_checker.configs.base
System role: LLM collaborator configuration
"""

from pydantic import AliasChoices, Field
from pydantic_settings import SettingsConfigDict

from tos_checker.configs.base import BaseSettings


class LLMSettings(BaseSettings):
    """Language model configuration."""

    model_config = SettingsConfigDict(
        env_prefix="LLM_",
        populate_by_name=True,
    )

    google_api_key: str | None = Field(
        default=None,
        validation_alias=AliasChoices("LLM_GOOGLE_API_KEY", "GOOGLE_API_KEY"),
        description="Google Generative AI API key",
    )
    analysis_model: str = Field(
        default="gemini-2.5-flash",
        description="Model used for per-chunk analysis",
    )
    summary_model: str = Field(
        default="gemini-2.5-flash-lite",
        description="Model used for the final organized summary",
    )
    temperature: float = Field(default=0.0, description="Sampling temperature")
    request_timeout_seconds: float = Field(
        default=60.0,
        description="Provider-side timeout for one completion request",
    )
    max_retries: int = Field(
        default=0,
        description="Provider client retries; failures degrade locally instead",
    )

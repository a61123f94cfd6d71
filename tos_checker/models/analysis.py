"""
Analysis API schemas and outcome model.

Dependencies: pydantic, tos_checker.core.identity
System role: Analysis API contracts
"""

from datetime import datetime

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from tos_checker.core.exceptions import InvalidIdentityError
from tos_checker.core.identity import canonicalize_identity


class AnalyzeDocumentRequest(BaseModel):
    """Request schema for running the analysis pipeline."""

    model_config = ConfigDict(populate_by_name=True)

    document_identity: str = Field(
        validation_alias=AliasChoices("document_identity", "documentIdentity", "collectionNameU"),
        description="Percent-encoded page URL",
    )
    text: str = Field(min_length=1, description="Terms-and-conditions text to analyze")

    @field_validator("document_identity")
    @classmethod
    def decode_identity(cls, value: str) -> str:
        try:
            return canonicalize_identity(value)
        except InvalidIdentityError as e:
            raise ValueError(e.message) from e

    @field_validator("text")
    @classmethod
    def reject_blank_text(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("Text must not be blank")
        return value


class AnalysisOutcome(BaseModel):
    """Summary returned for a document, either fresh or from the result store."""

    document_id: str
    summary: str
    created_at: datetime | None = Field(
        default=None,
        description="Persistence timestamp; None when the summary was not stored",
    )
    cached: bool = Field(default=False, description="True when served from the result store")

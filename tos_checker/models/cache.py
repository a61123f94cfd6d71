"""
Cache API schemas.

Request/response schemas for submitting and reading raw document text.
Field aliases accept the names the browser extension already sends.
The legacy ``currentUrl`` field carries the page URL as the browser
reports it and is not percent-decoded; ``document_identity`` and
``documentIdentity`` are decoded once.

Dependencies: pydantic, tos_checker.core.identity
System role: Cache API contracts
"""

from enum import Enum
from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator, model_validator

from tos_checker.core.exceptions import InvalidIdentityError
from tos_checker.core.identity import canonicalize_identity, normalize_identity


class CachePutOutcome(str, Enum):
    """What a cache write did."""

    CREATED = "created"
    UPDATED = "updated"
    UNCHANGED = "unchanged"


class CacheDocumentRequest(BaseModel):
    """Request schema for caching a document's text."""

    model_config = ConfigDict(populate_by_name=True)

    document_identity: str = Field(
        validation_alias=AliasChoices("document_identity", "documentIdentity", "currentUrl"),
        description="Percent-encoded page URL (raw page URL under currentUrl)",
    )
    text: str = Field(
        min_length=1,
        validation_alias=AliasChoices("text", "bodyText"),
        description="Raw terms-and-conditions text",
    )

    @model_validator(mode="before")
    @classmethod
    def decode_identity(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data

        data = dict(data)
        try:
            for key in ("document_identity", "documentIdentity"):
                if isinstance(data.get(key), str):
                    data[key] = canonicalize_identity(data[key])
                    return data
            if isinstance(data.get("currentUrl"), str):
                data["currentUrl"] = normalize_identity(data["currentUrl"])
        except InvalidIdentityError as e:
            raise ValueError(e.message) from e
        return data

    @field_validator("text")
    @classmethod
    def reject_blank_text(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("Text must not be blank")
        return value


class CacheWriteResponse(BaseModel):
    """Response schema for a cache write."""

    status: CachePutOutcome
    document_identity: str


class CachedDocumentResponse(BaseModel):
    """Response schema for a cache read."""

    document_identity: str
    text: str

"""
Cache API endpoints.

Routes:
- POST /cache - Cache a document's raw text
- GET /cache/{identity} - Read cached text (identity percent-encoded in the path)

Dependencies: tos_checker.application.services.cache_service, tos_checker.models
System role: Document text cache HTTP API
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from tos_checker.api.deps import get_cache_service
from tos_checker.api.routers.router_utils import handle_service_errors
from tos_checker.application.services.cache_service import CacheService
from tos_checker.core.identity import normalize_identity
from tos_checker.models.cache import (
    CacheDocumentRequest,
    CachedDocumentResponse,
    CacheWriteResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/cache", tags=["cache"])


@router.post("", response_model=CacheWriteResponse)
@handle_service_errors
async def cache_document(
    request: CacheDocumentRequest,
    cache_service: CacheService = Depends(get_cache_service),
) -> CacheWriteResponse:
    """
    Cache a document's text for 24 hours.

    Args:
        request: Identity (already decoded by the schema) and text
        cache_service: Injected CacheService

    Returns:
        CacheWriteResponse: created, updated or unchanged

    Raises:
        HTTPException(422): Missing or blank field
        HTTPException(503): Cache unavailable
    """
    outcome = await cache_service.store_document(request.document_identity, request.text)
    return CacheWriteResponse(status=outcome, document_identity=request.document_identity)


@router.get("/{identity:path}", response_model=CachedDocumentResponse)
@handle_service_errors
async def get_cached_document(
    identity: str,
    cache_service: CacheService = Depends(get_cache_service),
) -> CachedDocumentResponse:
    """
    Read a cached document.

    The ASGI server has already percent-decoded the path, so the identity
    is only validated here.

    Args:
        identity: Document identity from the path
        cache_service: Injected CacheService

    Returns:
        CachedDocumentResponse: Identity and stored text

    Raises:
        HTTPException(400): Blank or malformed identity
        HTTPException(404): Nothing cached for the identity
        HTTPException(503): Cache unavailable
    """
    document_id = normalize_identity(identity)
    text = await cache_service.get_document(document_id)
    if text is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Document not found in cache",
        )
    return CachedDocumentResponse(document_identity=document_id, text=text)

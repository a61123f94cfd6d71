"""
Analysis API endpoints.

Routes:
- POST /caution - Analyze a document (or return its stored analysis)
- GET /caution/{identity} - Read a stored analysis

Dependencies: tos_checker.application.services.analysis_service, tos_checker.models
System role: Terms-and-conditions analysis HTTP API
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from tos_checker.api.deps import get_analysis_service
from tos_checker.api.routers.router_utils import handle_service_errors
from tos_checker.application.services.analysis_service import AnalysisService
from tos_checker.core.identity import normalize_identity
from tos_checker.models.analysis import AnalysisOutcome, AnalyzeDocumentRequest

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/caution", tags=["analysis"])


@router.post("", response_model=AnalysisOutcome)
@handle_service_errors
async def analyze_document(
    request: AnalyzeDocumentRequest,
    analysis_service: AnalysisService = Depends(get_analysis_service),
) -> AnalysisOutcome:
    """
    Analyze a document's terms and conditions.

    Returns the stored analysis when one exists; otherwise runs the
    pipeline, stores the summary and returns it. The summary is always
    text, possibly a sentinel when analysis produced nothing usable.

    Args:
        request: Identity (already decoded by the schema) and text
        analysis_service: Injected AnalysisService

    Returns:
        AnalysisOutcome: Summary and provenance

    Raises:
        HTTPException(422): Missing or blank field
        HTTPException(503): Result store unavailable
    """
    return await analysis_service.run(request.document_identity, request.text)


@router.get("/{identity:path}", response_model=AnalysisOutcome)
@handle_service_errors
async def get_analysis(
    identity: str,
    analysis_service: AnalysisService = Depends(get_analysis_service),
) -> AnalysisOutcome:
    """
    Read a stored analysis.

    Args:
        identity: Document identity from the path (decoded by the server)
        analysis_service: Injected AnalysisService

    Returns:
        AnalysisOutcome: Stored summary

    Raises:
        HTTPException(400): Blank or malformed identity
        HTTPException(404): No stored analysis
        HTTPException(503): Result store unavailable
    """
    outcome = await analysis_service.get_result(normalize_identity(identity))
    if outcome is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="No analysis stored for this document",
        )
    return outcome

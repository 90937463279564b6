"""
JSON API routes.

- POST /api/analyze: symptom analysis, returns a ResultEnvelope
- GET /api/health: service status
"""

from typing import Any

import structlog
from fastapi import APIRouter, Body, Depends, Response, status

from mediscan.analysis.orchestrator import AnalysisOrchestrator
from mediscan.api.dependencies import get_orchestrator, get_settings
from mediscan.api.models import HealthResponse
from mediscan.config import Settings
from mediscan.models.output_models import ResultEnvelope

logger = structlog.get_logger(__name__)

FEATURES = ["symptom-analysis", "local-fallback", "detailed-results"]

router = APIRouter()


@router.post(
    "/api/analyze",
    response_model=ResultEnvelope,
    response_model_exclude_none=True,
    status_code=status.HTTP_200_OK,
    summary="Analyze symptoms",
    description="""
    Analyze a patient's age and free-text symptoms.

    Always returns an analysis for valid input: from the upstream model when
    it answers, otherwise from the local classifier (marked by `note`).
    Missing or invalid fields return `success: false` with HTTP 400.
    """,
    responses={
        200: {"description": "Analysis produced (upstream or local)"},
        400: {"description": "Missing or invalid age/symptoms"},
    },
)
async def analyze_symptoms(
    response: Response,
    payload: Any = Body(default=None),
    orchestrator: AnalysisOrchestrator = Depends(get_orchestrator),
) -> ResultEnvelope:
    """
    Analyze symptoms and return the result envelope.

    Args:
        payload: JSON body; anything but an object counts as missing fields
        orchestrator: Analysis orchestrator (injected)
    """
    envelope = await orchestrator.analyze(payload)
    if not envelope.success:
        response.status_code = status.HTTP_400_BAD_REQUEST
    return envelope


@router.get(
    "/api/health",
    response_model=HealthResponse,
    summary="Service health check",
)
async def health_check(
    settings: Settings = Depends(get_settings),
) -> HealthResponse:
    """
    Report service status and whether the upstream credential is configured.

    Does not call the upstream; an unreachable upstream only degrades
    results to local analysis.
    """
    return HealthResponse(
        status="healthy",
        service=settings.APP_NAME,
        version=settings.APP_VERSION,
        features=FEATURES,
        gemini_api="configured" if settings.gemini_configured else "not_configured",
    )

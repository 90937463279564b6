"""
Server-rendered HTML pages.

- GET /: symptom form
- GET /results: runs the analysis and renders the envelope
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query, Request, status
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from mediscan.analysis.orchestrator import AnalysisOrchestrator
from mediscan.api.dependencies import get_orchestrator, get_settings, get_templates
from mediscan.config import Settings

router = APIRouter()


@router.get("/", response_class=HTMLResponse, include_in_schema=False)
async def index(
    request: Request,
    templates: Jinja2Templates = Depends(get_templates),
    settings: Settings = Depends(get_settings),
):
    return templates.TemplateResponse(
        request,
        "index.html",
        {"app_name": settings.APP_NAME, "age": "", "symptoms": ""},
    )


@router.get("/results", response_class=HTMLResponse, include_in_schema=False)
async def results(
    request: Request,
    age: Optional[str] = Query(default=None),
    symptoms: Optional[str] = Query(default=None),
    orchestrator: AnalysisOrchestrator = Depends(get_orchestrator),
    templates: Jinja2Templates = Depends(get_templates),
    settings: Settings = Depends(get_settings),
):
    envelope = await orchestrator.analyze({"age": age, "symptoms": symptoms})
    return templates.TemplateResponse(
        request,
        "results.html",
        {
            "app_name": settings.APP_NAME,
            "envelope": envelope,
            "age": age or "",
            "symptoms": symptoms or "",
        },
        status_code=status.HTTP_200_OK if envelope.success else status.HTTP_400_BAD_REQUEST,
    )

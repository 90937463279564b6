"""
FastAPI routes and HTTP plumbing.

- routes.py: JSON endpoints (POST /api/analyze, GET /api/health)
- ui.py: HTML pages (GET /, GET /results)
- dependencies.py: Dependency injection for client, builder, orchestrator
- models.py: API-specific response models
- error_handlers.py: Exception handlers returning failure envelopes
- middleware.py: Request tracing
"""

from mediscan.api import dependencies, error_handlers, models
from mediscan.api.routes import router as api_router
from mediscan.api.ui import router as ui_router

__all__ = [
    "api_router",
    "ui_router",
    "dependencies",
    "error_handlers",
    "models",
]

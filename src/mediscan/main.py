"""
FastAPI application entry point for MediScan AI.
"""

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from prometheus_fastapi_instrumentator import Instrumentator

from mediscan.api.dependencies import get_llm_client
from mediscan.api.error_handlers import EXCEPTION_HANDLERS
from mediscan.api.middleware import RequestTracingMiddleware
from mediscan.api.routes import router as api_router
from mediscan.api.ui import router as ui_router
from mediscan.config import settings
from mediscan.logging_config import configure_logging

# Configure structured logging before anything else logs
configure_logging(settings.LOG_LEVEL, settings.ENVIRONMENT)
logger = structlog.get_logger(__name__)

app = FastAPI(
    title=settings.APP_NAME,
    description="Symptom analysis with LLM inference and a deterministic local fallback",
    version=settings.APP_VERSION,
    docs_url="/docs",
    redoc_url="/redoc",
)

# Request tracing middleware (request_id in all logs)
app.add_middleware(RequestTracingMiddleware)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ALLOW_ORIGINS,
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
)

for exc_class, handler in EXCEPTION_HANDLERS.items():
    app.add_exception_handler(exc_class, handler)

app.include_router(api_router, tags=["api"])
app.include_router(ui_router, tags=["ui"])


@app.on_event("startup")
async def startup():
    """Log configuration and probe the upstream once."""
    logger.info(
        "Application startup",
        version=settings.APP_VERSION,
        environment=settings.ENVIRONMENT,
        gemini_base_url=settings.GEMINI_BASE_URL,
        model=settings.GEMINI_MODEL,
        gemini_configured=settings.gemini_configured,
    )

    if settings.gemini_configured:
        if await get_llm_client().health_check():
            logger.info("Gemini connection successful")
        else:
            logger.warning("Gemini unreachable at startup, local analysis will be used until it recovers")
    else:
        logger.warning("GEMINI_API_KEY not set, all requests will use local analysis")

    logger.info("Application startup complete")


@app.on_event("shutdown")
async def shutdown():
    """Close the pooled upstream connection."""
    logger.info("Application shutdown")
    await get_llm_client().close()
    logger.info("Application shutdown complete")


if settings.PROMETHEUS_ENABLED:
    Instrumentator().instrument(app).expose(app)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "mediscan.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.DEBUG,
    )

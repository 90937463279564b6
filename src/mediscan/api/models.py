"""
API-specific response models for FastAPI endpoints.

The analysis envelope itself lives in mediscan.models.output_models.
"""

from datetime import datetime, timezone

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Response for health check endpoint."""

    status: str = Field(
        description="Overall health status",
        examples=["healthy"]
    )
    service: str = Field(
        description="Service name",
        examples=["MediScan AI"]
    )
    version: str = Field(
        description="Service version",
        examples=["2.0.0"]
    )
    features: list[str] = Field(
        default_factory=list,
        description="Enabled features"
    )
    gemini_api: str = Field(
        description="Whether an upstream API key is configured",
        examples=["configured", "not_configured"]
    )
    timestamp: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="Health check timestamp (UTC)"
    )

"""
Pydantic data models for MediScan.

Includes:
- Input models (AnalysisRequest)
- Output models (Condition, AnalysisResult, ResultEnvelope)
- Enums (UrgencyLevel, UrgencyCategory)
- LLM models (LLMGenerationRequest, LLMGenerationResponse)
"""

from mediscan.models.enums import UrgencyCategory, UrgencyLevel
from mediscan.models.input_models import AnalysisRequest
from mediscan.models.llm_models import LLMGenerationRequest, LLMGenerationResponse
from mediscan.models.output_models import (
    FALLBACK_NOTE,
    AnalysisResult,
    Condition,
    ResultEnvelope,
    default_condition,
)

__all__ = [
    # Enums
    "UrgencyLevel",
    "UrgencyCategory",
    # Input models
    "AnalysisRequest",
    # Output models
    "Condition",
    "AnalysisResult",
    "ResultEnvelope",
    "FALLBACK_NOTE",
    "default_condition",
    # LLM models
    "LLMGenerationRequest",
    "LLMGenerationResponse",
]

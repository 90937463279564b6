"""
Output data models for MediScan.

These models define the canonical analysis shape shared by the upstream
model response, the local classifier and the API envelope. Upstream output
is free-form, so validation here is lenient: missing fields get defaults and
obvious shape slips (a number for confidence, a string for a list) are
coerced rather than rejected.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from mediscan.models.enums import UrgencyLevel

FALLBACK_NOTE = "Using local analysis (API unavailable)"
MISSING_FIELDS_ERROR = "Missing required fields"
REQUIRED_FIELDS = ["symptoms", "age"]


def _as_list(value):
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    return value


class Condition(BaseModel):
    """A single candidate diagnosis entry."""

    model_config = ConfigDict(extra="ignore")

    name: str = Field(..., min_length=1, description="Condition name")
    confidence: Optional[str] = Field(
        default=None,
        description="Opaque display string, e.g. '75%' or 'N/A' (never parsed as a number)",
    )
    description: Optional[str] = Field(default=None, description="Brief description")
    recommendations: list[str] = Field(
        default_factory=list,
        description="Ordered recommendations, possibly empty",
    )

    @field_validator("confidence", mode="before")
    @classmethod
    def stringify_confidence(cls, value):
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return value

    @field_validator("recommendations", mode="before")
    @classmethod
    def listify_recommendations(cls, value):
        return _as_list(value)


GENERAL_MEDICAL_ADVICE = Condition(
    name="General Medical Advice",
    confidence="N/A",
    description="Based on your symptoms, general advice includes:",
    recommendations=[
        "Monitor symptoms closely",
        "Stay hydrated",
        "Rest as needed",
        "Consult healthcare provider if symptoms persist",
    ],
)


def default_condition() -> Condition:
    """Advisory condition used when nothing else is available."""
    return GENERAL_MEDICAL_ADVICE.model_copy(deep=True)


class AnalysisResult(BaseModel):
    """
    Canonical analysis result.

    Invariants after construction:
    - conditions is never empty (a default advisory condition is synthesized)
    - urgency is always set (defaults to Self-Care)
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    conditions: list[Condition] = Field(
        default_factory=list,
        description="Candidate conditions in ranked order",
    )
    urgency: str = Field(
        default=UrgencyLevel.SELF_CARE.value,
        description="Urgency level (fixed label or free-form text)",
    )
    immediate_attention: list[str] = Field(
        default_factory=list,
        alias="immediateAttention",
        description="Red-flag symptoms that warrant immediate care",
    )

    @field_validator("conditions", mode="before")
    @classmethod
    def default_conditions(cls, value):
        return [] if value is None else value

    @field_validator("urgency", mode="before")
    @classmethod
    def default_urgency(cls, value):
        if isinstance(value, UrgencyLevel):
            return value.value
        if value is None or (isinstance(value, str) and not value.strip()):
            return UrgencyLevel.SELF_CARE.value
        return value

    @field_validator("immediate_attention", mode="before")
    @classmethod
    def listify_immediate_attention(cls, value):
        return _as_list(value)

    @model_validator(mode="after")
    def ensure_conditions(self) -> "AnalysisResult":
        if not self.conditions:
            self.conditions = [default_condition()]
        return self


class ResultEnvelope(BaseModel):
    """
    Uniform response for every analysis call.

    `analysis` is present iff `success` is true. `note` marks fallback
    usage; `rawResponse` carries the upstream completion when it was used.
    """

    model_config = ConfigDict(populate_by_name=True)

    success: bool = Field(..., description="Whether an analysis was produced")
    analysis: Optional[AnalysisResult] = Field(default=None)
    error: Optional[str] = Field(default=None, description="Error message on failure")
    note: Optional[str] = Field(default=None, description="Set when the local fallback was used")
    raw_response: Optional[str] = Field(
        default=None,
        alias="rawResponse",
        description="Upstream completion text",
    )
    required: Optional[list[str]] = Field(
        default=None,
        description="Required request fields (only on missing-field failures)",
    )

    @model_validator(mode="after")
    def check_analysis_presence(self) -> "ResultEnvelope":
        if self.success and self.analysis is None:
            raise ValueError("successful envelope requires an analysis")
        if not self.success and self.analysis is not None:
            raise ValueError("failed envelope must not carry an analysis")
        return self

    @classmethod
    def failure(cls, error: str, required: Optional[list[str]] = None) -> "ResultEnvelope":
        return cls(success=False, error=error, required=required)

    @classmethod
    def from_llm(cls, analysis: AnalysisResult, raw_response: str) -> "ResultEnvelope":
        return cls(success=True, analysis=analysis, raw_response=raw_response)

    @classmethod
    def from_fallback(cls, analysis: AnalysisResult) -> "ResultEnvelope":
        return cls(success=True, analysis=analysis, note=FALLBACK_NOTE)

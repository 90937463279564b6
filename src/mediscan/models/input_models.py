"""
Input data models for MediScan.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class AnalysisRequest(BaseModel):
    """
    A single symptom analysis request.

    Built once per incoming call and discarded after use. Age accepts
    numeric strings because the browser form submits every field as text.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    age: int = Field(..., ge=1, le=120, description="Patient age in years")
    symptoms: str = Field(..., min_length=1, description="Free-text symptom description")

    @field_validator("symptoms", mode="before")
    @classmethod
    def strip_symptoms(cls, value):
        if isinstance(value, str):
            return value.strip()
        return value

    @field_validator("age", mode="before")
    @classmethod
    def reject_boolean_age(cls, value):
        if isinstance(value, bool):
            raise ValueError("age must be a number, not a boolean")
        return value

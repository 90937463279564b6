"""
LLM-specific data models for the request/response cycle.

Internal to the LLM layer; kept separate from the analysis models so the
client implementation can change without touching the orchestrator.
"""

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field


class LLMGenerationRequest(BaseModel):
    """
    Provider-neutral generation request handed to any BaseLLMClient.
    """
    model_config = ConfigDict(frozen=True)

    prompt: str = Field(..., description="Complete natural-language prompt")
    model: str = Field(..., description="Model identifier (e.g., 'gemini-1.5-flash')")
    temperature: float = Field(default=0.2, ge=0.0, le=2.0, description="Sampling temperature")
    max_tokens: int = Field(default=2048, ge=1, le=8192, description="Maximum tokens to generate")


class LLMGenerationResponse(BaseModel):
    """
    Raw completion plus metadata for logging and metrics.

    The content is unvalidated text; normalization happens downstream.
    """
    model_config = ConfigDict(frozen=True)

    content: str = Field(..., description="Generated text")
    model_version: str = Field(..., description="Model version reported by the server")
    finish_reason: Optional[str] = Field(default=None, description="Why generation stopped")
    prompt_tokens: Optional[int] = Field(default=None, description="Tokens in prompt")
    completion_tokens: Optional[int] = Field(default=None, description="Tokens in completion")
    latency_ms: int = Field(..., ge=0, description="Generation latency in milliseconds")
    raw_metadata: Dict[str, Any] = Field(
        default_factory=dict,
        description="Provider-specific metadata (for debugging)"
    )

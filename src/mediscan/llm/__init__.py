"""
LLM client abstraction and implementations.

Components:
- BaseLLMClient: Abstract base class for LLM clients
- GeminiClient: Implementation for the Gemini generateContent API
- PromptBuilder: Renders the analysis prompt from an AnalysisRequest
- exceptions: LLM-specific exceptions
"""

from mediscan.llm.base_client import BaseLLMClient
from mediscan.llm.exceptions import (
    LLMAuthenticationError,
    LLMClientError,
    LLMConnectionError,
    LLMGenerationError,
    LLMModelNotAvailableError,
    LLMRateLimitError,
    LLMResponseFormatError,
    LLMTimeoutError,
)
from mediscan.llm.gemini_client import GeminiClient
from mediscan.llm.prompt_builder import PromptBuilder

__all__ = [
    "BaseLLMClient",
    "GeminiClient",
    "PromptBuilder",
    "LLMClientError",
    "LLMConnectionError",
    "LLMTimeoutError",
    "LLMAuthenticationError",
    "LLMGenerationError",
    "LLMModelNotAvailableError",
    "LLMRateLimitError",
    "LLMResponseFormatError",
]

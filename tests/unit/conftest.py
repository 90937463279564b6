"""Unit test fixtures (mocks and stubs).

Provides mock LLM clients for testing without network access.
"""

from unittest.mock import AsyncMock

import pytest

from mediscan.llm.exceptions import LLMConnectionError
from mediscan.models.llm_models import LLMGenerationResponse

VALID_COMPLETION = (
    'Sure. {"conditions": [{"name": "Influenza (Flu)", "confidence": "80%", '
    '"description": "Viral respiratory infection", "recommendations": ["Rest"]}], '
    '"urgency": "Primary Care", "immediateAttention": ["Difficulty breathing"]}'
)


def make_llm_response(content: str) -> LLMGenerationResponse:
    return LLMGenerationResponse(
        content=content,
        model_version="gemini-1.5-flash-002",
        finish_reason="STOP",
        prompt_tokens=150,
        completion_tokens=90,
        latency_ms=800,
    )


@pytest.fixture
def llm_response_factory():
    """Factory fixture building LLMGenerationResponse objects.

    Usage:
        def test_something(llm_response_factory):
            response = llm_response_factory("no json here")
    """
    return make_llm_response


@pytest.fixture
def mock_llm_client():
    """Mock LLM client returning a completion with embedded JSON."""
    mock = AsyncMock()
    mock.generate = AsyncMock(return_value=make_llm_response(VALID_COMPLETION))
    mock.health_check = AsyncMock(return_value=True)
    return mock


@pytest.fixture
def failing_llm_client():
    """Mock LLM client whose every generation fails at the network level."""
    mock = AsyncMock()
    mock.generate = AsyncMock(
        side_effect=LLMConnectionError("Network error: connection refused")
    )
    mock.health_check = AsyncMock(return_value=False)
    return mock

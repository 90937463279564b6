"""Shared test fixtures and configuration for all tests.

This conftest.py provides common fixtures used across unit and integration tests.
"""

import json
from pathlib import Path
from typing import Any, Dict

import pytest

from mediscan.config import Settings
from mediscan.llm.prompt_builder import PromptBuilder
from mediscan.models.input_models import AnalysisRequest


@pytest.fixture
def test_settings() -> Settings:
    """Test settings with safe defaults for local testing.

    Override specific settings in individual tests as needed:
        def test_something(test_settings):
            test_settings.GEMINI_MODEL = "gemini-1.5-pro"
    """
    return Settings(
        # === Application ===
        APP_NAME="MediScan AI (Test)",
        APP_VERSION="2.0.0",
        DEBUG=True,
        LOG_LEVEL="DEBUG",
        ENVIRONMENT="development",

        # === Gemini ===
        GEMINI_API_KEY="test-api-key",
        GEMINI_BASE_URL="https://gemini.test",
        GEMINI_MODEL="gemini-1.5-flash",
        GEMINI_TIMEOUT=5,

        # === Monitoring ===
        PROMETHEUS_ENABLED=False,
    )


@pytest.fixture
def fixtures_dir() -> Path:
    """Path to test fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def gemini_response_data(fixtures_dir: Path) -> Dict[str, Any]:
    """Raw generateContent response body as dict."""
    with open(fixtures_dir / "gemini_response.json", encoding="utf-8") as f:
        return json.load(f)


@pytest.fixture
def fenced_completion(fixtures_dir: Path) -> str:
    """Completion text with JSON inside a markdown code fence."""
    return (fixtures_dir / "completion_fenced.txt").read_text(encoding="utf-8")


@pytest.fixture
def prose_completion(fixtures_dir: Path) -> str:
    """Completion text without any JSON."""
    return (fixtures_dir / "completion_prose.txt").read_text(encoding="utf-8")


@pytest.fixture
def analysis_request() -> AnalysisRequest:
    """Typical valid request."""
    return AnalysisRequest(age=34, symptoms="Fever and dry cough for two days")


@pytest.fixture
def prompt_builder(test_settings: Settings) -> PromptBuilder:
    """Real PromptBuilder using the packaged template."""
    return PromptBuilder(
        templates_dir=Path(test_settings.PROMPT_TEMPLATES_DIR),
        model=test_settings.GEMINI_MODEL,
        temperature=test_settings.LLM_TEMPERATURE,
        max_tokens=test_settings.LLM_MAX_TOKENS,
    )

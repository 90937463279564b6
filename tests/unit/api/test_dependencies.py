"""
Unit tests for API dependency injection.
"""

from fastapi.templating import Jinja2Templates

from mediscan.analysis.orchestrator import AnalysisOrchestrator
from mediscan.api.dependencies import (
    get_llm_client,
    get_orchestrator,
    get_prompt_builder,
    get_settings,
    get_templates,
)
from mediscan.config import Settings
from mediscan.llm.base_client import BaseLLMClient
from mediscan.llm.gemini_client import GeminiClient
from mediscan.llm.prompt_builder import PromptBuilder


def test_get_settings():
    """Test settings singleton."""
    settings1 = get_settings()
    settings2 = get_settings()

    # Should be same instance (cached)
    assert settings1 is settings2
    assert isinstance(settings1, Settings)


def test_get_llm_client():
    """Test LLM client singleton."""
    client1 = get_llm_client()
    client2 = get_llm_client()

    assert client1 is client2
    assert isinstance(client1, BaseLLMClient)
    assert isinstance(client1, GeminiClient)
    assert client1.base_url == get_settings().GEMINI_BASE_URL
    assert client1.configured is get_settings().gemini_configured


def test_get_prompt_builder():
    """Test prompt builder singleton."""
    builder1 = get_prompt_builder()
    builder2 = get_prompt_builder()

    assert builder1 is builder2
    assert isinstance(builder1, PromptBuilder)
    assert builder1.model == get_settings().GEMINI_MODEL


def test_get_orchestrator_wires_singletons():
    orchestrator = get_orchestrator()

    assert orchestrator is get_orchestrator()
    assert isinstance(orchestrator, AnalysisOrchestrator)
    assert orchestrator.llm_client is get_llm_client()
    assert orchestrator.prompt_builder is get_prompt_builder()


def test_get_templates_registers_urgency_filter():
    templates = get_templates()

    assert isinstance(templates, Jinja2Templates)
    urgency_class = templates.env.filters["urgency_class"]
    assert urgency_class("Emergency") == "urgency-emergency"
    assert urgency_class("Consult results") == "urgency-self"

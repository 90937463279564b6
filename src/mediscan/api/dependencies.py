"""
FastAPI dependency injection for MediScan.

Provides singleton instances of the expensive or pooled resources (LLM
client, prompt builder, orchestrator). Tests swap them through
app.dependency_overrides.
"""

from functools import lru_cache
from pathlib import Path

from fastapi.templating import Jinja2Templates

from mediscan.analysis.orchestrator import AnalysisOrchestrator
from mediscan.config import Settings, settings
from mediscan.llm.base_client import BaseLLMClient
from mediscan.llm.gemini_client import GeminiClient
from mediscan.llm.prompt_builder import PromptBuilder
from mediscan.models.enums import UrgencyCategory


@lru_cache()
def get_settings() -> Settings:
    """
    Get settings singleton.
    """
    return settings


@lru_cache()
def get_llm_client() -> BaseLLMClient:
    """
    Get singleton LLM client.

    The client keeps an internal connection pool, so one instance is shared
    by all requests and closed on application shutdown.
    """
    current = get_settings()
    api_key = current.GEMINI_API_KEY.get_secret_value() if current.GEMINI_API_KEY else None
    return GeminiClient(
        api_key=api_key,
        base_url=current.GEMINI_BASE_URL,
        timeout=current.GEMINI_TIMEOUT,
        model=current.GEMINI_MODEL,
    )


@lru_cache()
def get_prompt_builder() -> PromptBuilder:
    """
    Get singleton prompt builder (template loaded once).
    """
    current = get_settings()
    return PromptBuilder(
        templates_dir=Path(current.PROMPT_TEMPLATES_DIR),
        model=current.GEMINI_MODEL,
        temperature=current.LLM_TEMPERATURE,
        max_tokens=current.LLM_MAX_TOKENS,
    )


@lru_cache()
def get_orchestrator() -> AnalysisOrchestrator:
    """
    Get singleton orchestrator built from the cached client and builder.

    Stateless between calls, so sharing it across requests is safe.
    """
    return AnalysisOrchestrator(
        llm_client=get_llm_client(),
        prompt_builder=get_prompt_builder(),
    )


@lru_cache()
def get_templates() -> Jinja2Templates:
    """
    Get the HTML template renderer with the urgency filter registered.
    """
    templates = Jinja2Templates(directory=get_settings().UI_TEMPLATES_DIR)
    templates.env.filters["urgency_class"] = lambda label: UrgencyCategory.from_label(label).value
    return templates

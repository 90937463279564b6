"""Integration test fixtures.

The full FastAPI app is exercised through TestClient. The upstream is a
real GeminiClient wired to an httpx.MockTransport, so requests travel the
whole stack (routing, orchestrator, client, normalizer) without network
access.
"""

import httpx
import pytest
from fastapi.testclient import TestClient

from mediscan.analysis.orchestrator import AnalysisOrchestrator
from mediscan.api.dependencies import get_orchestrator, get_settings
from mediscan.llm.gemini_client import GeminiClient
from mediscan.main import app


def build_orchestrator(handler, prompt_builder, api_key="test-api-key"):
    client = GeminiClient(
        api_key=api_key,
        base_url="https://gemini.test",
        timeout=5,
        transport=httpx.MockTransport(handler),
    )
    return AnalysisOrchestrator(llm_client=client, prompt_builder=prompt_builder)


@pytest.fixture
def make_client(prompt_builder, test_settings):
    """Factory returning a TestClient whose upstream is served by `handler`.

    Usage:
        def test_something(make_client):
            client = make_client(lambda request: httpx.Response(500))
    """
    def _make(handler, api_key="test-api-key", **client_kwargs):
        orchestrator = build_orchestrator(handler, prompt_builder, api_key=api_key)
        app.dependency_overrides[get_orchestrator] = lambda: orchestrator
        app.dependency_overrides[get_settings] = lambda: test_settings
        # No context manager: startup would probe the real upstream
        return TestClient(app, **client_kwargs)

    yield _make
    app.dependency_overrides.clear()


@pytest.fixture
def upstream_client(make_client, gemini_response_data):
    """App whose upstream answers with the recorded generateContent body."""
    return make_client(lambda request: httpx.Response(200, json=gemini_response_data))


@pytest.fixture
def offline_client(make_client):
    """App whose upstream is unreachable."""
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    return make_client(handler)

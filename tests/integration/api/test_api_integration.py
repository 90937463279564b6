"""
Integration tests for the FastAPI application.

These tests use TestClient against the real app; only the upstream HTTP
transport is mocked.
"""

from datetime import datetime

import httpx
import pytest

from mediscan.analysis.orchestrator import AnalysisOrchestrator
from mediscan.models.output_models import FALLBACK_NOTE


class TestAnalyzeEndpoint:

    def test_upstream_analysis(self, upstream_client, gemini_response_data):
        response = upstream_client.post(
            "/api/analyze", json={"age": 29, "symptoms": "throbbing headache and nausea"}
        )

        assert response.status_code == 200
        data = response.json()
        assert data["success"] is True
        assert "note" not in data
        assert "error" not in data
        assert data["rawResponse"] == gemini_response_data["candidates"][0]["content"]["parts"][0]["text"]

        analysis = data["analysis"]
        assert [c["name"] for c in analysis["conditions"]] == ["Migraine", "Tension Headache"]
        assert analysis["conditions"][0]["confidence"] == "60%"
        assert analysis["urgency"] == "Primary Care"
        assert len(analysis["immediateAttention"]) == 2

    def test_offline_upstream_uses_local_analysis(self, offline_client):
        response = offline_client.post(
            "/api/analyze", json={"age": 70, "symptoms": "Fever and cough"}
        )

        assert response.status_code == 200
        data = response.json()
        assert data["success"] is True
        assert data["note"] == FALLBACK_NOTE
        assert "rawResponse" not in data
        assert [c["name"] for c in data["analysis"]["conditions"]] == ["Influenza (Flu)"]
        assert data["analysis"]["urgency"] == "Urgent Care"
        assert len(data["analysis"]["immediateAttention"]) == 5

    @pytest.mark.parametrize("status_code", [401, 429, 500])
    def test_upstream_http_error_uses_local_analysis(self, make_client, status_code):
        client = make_client(lambda request: httpx.Response(status_code))

        data = client.post("/api/analyze", json={"age": 30, "symptoms": "runny nose"}).json()

        assert data["note"] == FALLBACK_NOTE
        assert data["analysis"]["conditions"][0]["name"] == "Common Cold"

    def test_missing_key_never_calls_upstream(self, make_client):
        calls = []

        def handler(request):
            calls.append(request)
            return httpx.Response(200, json={})

        client = make_client(handler, api_key=None)
        data = client.post("/api/analyze", json={"age": 30, "symptoms": "sneezing"}).json()

        assert data["note"] == FALLBACK_NOTE
        assert calls == []

    def test_prose_completion_degrades(self, make_client, prose_completion):
        body = {"candidates": [{"content": {"parts": [{"text": prose_completion}]}}]}
        client = make_client(lambda request: httpx.Response(200, json=body))

        data = client.post("/api/analyze", json={"age": 30, "symptoms": "tired"}).json()

        assert data["success"] is True
        assert "note" not in data
        assert data["analysis"]["conditions"][0]["name"] == "Analysis Complete"
        assert data["analysis"]["urgency"] == "Consult results"
        assert data["analysis"]["immediateAttention"] == ["If symptoms worsen"]

    @pytest.mark.parametrize(
        "payload",
        [{"age": "", "symptoms": ""}, {"age": 30}, {"symptoms": "fever"}, {}],
    )
    def test_missing_fields(self, offline_client, payload):
        response = offline_client.post("/api/analyze", json=payload)

        assert response.status_code == 400
        assert response.json() == {
            "success": False,
            "error": "Missing required fields",
            "required": ["symptoms", "age"],
        }

    def test_empty_body(self, offline_client):
        response = offline_client.post("/api/analyze")

        assert response.status_code == 400
        assert response.json()["required"] == ["symptoms", "age"]

    def test_invalid_age(self, offline_client):
        response = offline_client.post("/api/analyze", json={"age": 200, "symptoms": "fever"})

        assert response.status_code == 400
        data = response.json()
        assert data["success"] is False
        assert data["error"].startswith("Invalid request: ")
        assert "required" not in data

    def test_malformed_json_body(self, offline_client):
        response = offline_client.post(
            "/api/analyze",
            content=b"{not json",
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 400
        data = response.json()
        assert data["success"] is False
        assert data["error"] == "Invalid request body"
        assert data["details"]

    @pytest.mark.parametrize("body", [["fever", 30], "fever", 42])
    def test_non_object_body_counts_as_missing_fields(self, offline_client, body):
        response = offline_client.post("/api/analyze", json=body)

        assert response.status_code == 400
        assert response.json()["error"] == "Missing required fields"
        assert response.json()["required"] == ["symptoms", "age"]

    def test_unexpected_error_returns_500(self, make_client, monkeypatch):
        client = make_client(lambda request: httpx.Response(200), raise_server_exceptions=False)

        async def explode(self, payload):
            raise RuntimeError("boom")

        monkeypatch.setattr(AnalysisOrchestrator, "analyze", explode)

        response = client.post("/api/analyze", json={"age": 30, "symptoms": "fever"})

        assert response.status_code == 500
        assert response.json() == {"success": False, "error": "Internal server error"}
        assert response.headers["X-Request-ID"]


class TestHealthEndpoint:

    def test_health(self, offline_client):
        response = offline_client.get("/api/health")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["service"] == "MediScan AI (Test)"
        assert data["version"] == "2.0.0"
        assert data["features"] == ["symptom-analysis", "local-fallback", "detailed-results"]
        assert data["gemini_api"] == "configured"
        datetime.fromisoformat(data["timestamp"].replace("Z", "+00:00"))

    def test_health_without_key(self, offline_client, test_settings):
        test_settings.GEMINI_API_KEY = None

        data = offline_client.get("/api/health").json()

        assert data["gemini_api"] == "not_configured"


class TestUiPages:

    def test_index_form(self, offline_client):
        response = offline_client.get("/")

        assert response.status_code == 200
        assert "text/html" in response.headers["content-type"]
        assert 'action="/results"' in response.text
        assert 'name="symptoms"' in response.text

    def test_results_page_upstream(self, upstream_client):
        response = upstream_client.get(
            "/results", params={"age": "29", "symptoms": "headache"}
        )

        assert response.status_code == 200
        assert "Migraine" in response.text
        assert 'class="urgency-badge urgency-primary"' in response.text
        assert FALLBACK_NOTE not in response.text

    def test_results_page_fallback(self, offline_client):
        response = offline_client.get(
            "/results", params={"age": "40", "symptoms": "chest pain and bleeding"}
        )

        assert response.status_code == 200
        assert "Seek Immediate Care" in response.text
        assert 'class="urgency-badge urgency-emergency"' in response.text
        assert FALLBACK_NOTE in response.text

    def test_results_page_escapes_input(self, offline_client):
        response = offline_client.get(
            "/results", params={"age": "40", "symptoms": "<script>alert(1)</script>"}
        )

        assert "<script>alert(1)</script>" not in response.text

    def test_results_page_missing_fields(self, offline_client):
        response = offline_client.get("/results", params={"age": "", "symptoms": ""})

        assert response.status_code == 400
        assert "Missing required fields" in response.text


def test_request_id_header(offline_client):
    first = offline_client.get("/api/health")
    second = offline_client.get("/api/health")

    assert first.headers["X-Request-ID"]
    assert first.headers["X-Request-ID"] != second.headers["X-Request-ID"]


def test_inbound_request_id_is_propagated(offline_client):
    response = offline_client.get("/", headers={"X-Request-ID": "edge-1234"})

    assert response.headers["X-Request-ID"] == "edge-1234"


def test_malformed_inbound_request_id_is_replaced(offline_client):
    response = offline_client.get("/", headers={"X-Request-ID": "bad id with spaces"})

    assert response.headers["X-Request-ID"] != "bad id with spaces"
    assert len(response.headers["X-Request-ID"]) == 36

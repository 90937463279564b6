"""
Gemini client implementation for LLM inference.

Talks to the Google Generative Language API (generateContent) over an
httpx AsyncClient with connection pooling. The API key travels in the
x-goog-api-key header, never in the URL, so it cannot leak into access
logs or exception messages.
"""

import json
import time
from typing import Any, Dict, Optional

import httpx
import structlog

from mediscan.llm.base_client import BaseLLMClient
from mediscan.llm.exceptions import (
    LLMAuthenticationError,
    LLMConnectionError,
    LLMGenerationError,
    LLMModelNotAvailableError,
    LLMRateLimitError,
    LLMResponseFormatError,
    LLMTimeoutError,
)
from mediscan.models.llm_models import LLMGenerationRequest, LLMGenerationResponse
from mediscan.monitoring.metrics import llm_latency_seconds, llm_tokens_total

logger = structlog.get_logger(__name__)


class GeminiClient(BaseLLMClient):
    """
    Gemini-specific LLM client.

    API Endpoints:
    - POST /v1beta/models/{model}:generateContent: generate a completion
    - GET /v1beta/models/{model}: model metadata (used as health check)

    One attempt per call: the orchestrator falls back to the local
    classifier instead of retrying.
    """

    def __init__(
        self,
        api_key: Optional[str],
        base_url: str = "https://generativelanguage.googleapis.com",
        timeout: int = 30,
        connection_limits: Optional[httpx.Limits] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        **kwargs
    ):
        """
        Initialize Gemini client.

        Args:
            api_key: Gemini API key (None leaves the client unconfigured)
            base_url: API base URL
            timeout: Request timeout in seconds
            connection_limits: httpx connection pool limits
            transport: Optional httpx transport (tests use httpx.MockTransport)
            **kwargs: Additional config
        """
        super().__init__(base_url, timeout, **kwargs)

        if connection_limits is None:
            connection_limits = httpx.Limits(
                max_keepalive_connections=5,
                max_connections=20,
                keepalive_expiry=30.0
            )

        self._api_key = api_key or None
        self._client: Optional[httpx.AsyncClient] = None
        self._connection_limits = connection_limits
        self._transport = transport

        if not self._api_key:
            logger.warning("Gemini API key not configured, requests will use local analysis")

    @property
    def configured(self) -> bool:
        return self._api_key is not None

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create the async HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                timeout=httpx.Timeout(self.timeout),
                limits=self._connection_limits,
                transport=self._transport,
            )
            logger.debug("Created new httpx AsyncClient")
        return self._client

    def _headers(self) -> Dict[str, str]:
        return {
            "Content-Type": "application/json",
            "x-goog-api-key": self._api_key or "",
        }

    async def generate(self, request: LLMGenerationRequest) -> LLMGenerationResponse:
        """
        Generate completion using generateContent.

        Payload:
        {
            "contents": [{"parts": [{"text": "..."}]}],
            "generationConfig": {"temperature": 0.2, "maxOutputTokens": 2048}
        }

        Response:
        {
            "candidates": [{"content": {"parts": [{"text": "..."}]}, "finishReason": "STOP"}],
            "usageMetadata": {"promptTokenCount": 120, "candidatesTokenCount": 300},
            "modelVersion": "gemini-1.5-flash-002"
        }
        """
        if not self.configured:
            raise LLMAuthenticationError(
                "Gemini API key is not configured",
                details={"model": request.model}
            )

        payload = {
            "contents": [{"parts": [{"text": request.prompt}]}],
            "generationConfig": {
                "temperature": request.temperature,
                "maxOutputTokens": request.max_tokens,
            },
        }

        logger.info(
            "Sending generation request to Gemini",
            model=request.model,
            prompt_length=len(request.prompt),
            temperature=request.temperature,
            max_tokens=request.max_tokens,
        )

        start_time = time.time()
        try:
            client = await self._get_client()
            response = await client.post(
                f"/v1beta/models/{request.model}:generateContent",
                json=payload,
                headers=self._headers(),
            )
            response.raise_for_status()
            response_data = response.json()

        except httpx.TimeoutException as e:
            self._observe_failure(request.model, start_time)
            logger.warning("Gemini request timeout", timeout=self.timeout, error=str(e))
            raise LLMTimeoutError(
                f"Request timeout after {self.timeout}s",
                details={"timeout": self.timeout}
            ) from e

        except httpx.HTTPStatusError as e:
            self._observe_failure(request.model, start_time)
            raise self._map_status_error(e, request.model) from e

        except httpx.TransportError as e:
            self._observe_failure(request.model, start_time)
            logger.warning("Gemini network error", error=str(e), error_type=type(e).__name__)
            raise LLMConnectionError(
                f"Network error: {str(e)}",
                details={"error_type": type(e).__name__}
            ) from e

        except json.JSONDecodeError as e:
            self._observe_failure(request.model, start_time)
            logger.error("Failed to parse Gemini response JSON", error=str(e))
            raise LLMResponseFormatError(
                "Invalid JSON response from Gemini",
                details={"parse_error": str(e)}
            ) from e

        latency_ms = int((time.time() - start_time) * 1000)
        content, finish_reason = self._extract_completion(response_data)

        model_version = response_data.get("modelVersion", request.model)
        usage = response_data.get("usageMetadata") or {}
        prompt_tokens = usage.get("promptTokenCount")
        completion_tokens = usage.get("candidatesTokenCount")

        logger.info(
            "Gemini generation successful",
            model=model_version,
            latency_ms=latency_ms,
            prompt_tokens=prompt_tokens,
            completion_tokens=completion_tokens,
            finish_reason=finish_reason,
        )

        llm_latency_seconds.labels(
            model=request.model, success="true"
        ).observe(latency_ms / 1000.0)
        if prompt_tokens:
            llm_tokens_total.labels(
                model=request.model, token_type="prompt"
            ).inc(prompt_tokens)
        if completion_tokens:
            llm_tokens_total.labels(
                model=request.model, token_type="completion"
            ).inc(completion_tokens)

        return LLMGenerationResponse(
            content=content,
            model_version=model_version,
            finish_reason=finish_reason,
            prompt_tokens=prompt_tokens,
            completion_tokens=completion_tokens,
            latency_ms=latency_ms,
            raw_metadata={"usage": usage},
        )

    @staticmethod
    def _extract_completion(response_data: Any) -> tuple[str, Optional[str]]:
        """Pull candidates[0].content.parts[0].text out of the response."""
        try:
            candidate = response_data["candidates"][0]
            content = candidate["content"]["parts"][0]["text"]
        except (KeyError, IndexError, TypeError) as e:
            block_reason = None
            if isinstance(response_data, dict):
                block_reason = (response_data.get("promptFeedback") or {}).get("blockReason")
            raise LLMResponseFormatError(
                "Gemini response has no candidate text",
                details={"error": repr(e), "block_reason": block_reason}
            ) from e

        if not isinstance(content, str) or not content.strip():
            raise LLMResponseFormatError(
                "Empty completion from Gemini",
                details={"finish_reason": candidate.get("finishReason")}
            )
        return content, candidate.get("finishReason")

    @staticmethod
    def _map_status_error(e: httpx.HTTPStatusError, model: str) -> Exception:
        status_code = e.response.status_code
        error_text = e.response.text[:500]

        logger.error(
            "Gemini HTTP error",
            status_code=status_code,
            error_text=error_text,
        )

        details = {"status": status_code, "model": model}
        if status_code in (401, 403):
            return LLMAuthenticationError(f"Gemini rejected credentials: {status_code}", details=details)
        if status_code == 404:
            return LLMModelNotAvailableError(f"Model not found: {model}", details=details)
        if status_code == 429:
            return LLMRateLimitError("Gemini quota exhausted or rate limited", details=details)
        return LLMGenerationError(
            f"Gemini error: {status_code}",
            details={**details, "error": error_text}
        )

    @staticmethod
    def _observe_failure(model: str, start_time: float) -> None:
        llm_latency_seconds.labels(model=model, success="false").observe(time.time() - start_time)

    async def health_check(self, model: Optional[str] = None) -> bool:
        """
        Check Gemini reachability via GET /v1beta/models/{model}.

        Returns False when unconfigured or on any error.
        """
        if not self.configured:
            return False
        model_name = model or self.extra_config.get("model", "gemini-1.5-flash")
        try:
            client = await self._get_client()
            response = await client.get(
                f"/v1beta/models/{model_name}",
                headers=self._headers(),
                timeout=5.0,
            )
            response.raise_for_status()
            logger.debug("Gemini health check passed")
            return True
        except httpx.HTTPError as e:
            logger.warning("Gemini health check failed", error=str(e))
            return False

    async def close(self):
        """Close the HTTP client connection."""
        if self._client and not self._client.is_closed:
            await self._client.aclose()
            logger.debug("Closed Gemini client connection")

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

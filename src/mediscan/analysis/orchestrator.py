"""
Analysis orchestrator: request validation, upstream inference, fallback.

Flow:
    1. Validate input (missing/invalid fields -> failure envelope, no upstream call)
    2. One upstream generation attempt
    3. Normalize completion -> success envelope with rawResponse
    4. Any failure in 2-3 -> local classifier -> success envelope with note

Usage:
    orchestrator = AnalysisOrchestrator(llm_client, prompt_builder)
    envelope = await orchestrator.analyze({"age": 42, "symptoms": "fever and cough"})
"""

import time
from typing import Any, Mapping, Union

import structlog
from pydantic import ValidationError as PydanticValidationError

from mediscan.fallback.classifier import LocalClassifier
from mediscan.llm.base_client import BaseLLMClient
from mediscan.llm.exceptions import LLMClientError
from mediscan.llm.prompt_builder import PromptBuilder
from mediscan.models.input_models import AnalysisRequest
from mediscan.models.output_models import (
    MISSING_FIELDS_ERROR,
    REQUIRED_FIELDS,
    ResultEnvelope,
)
from mediscan.monitoring.metrics import analysis_requests_total
from mediscan.validation.exceptions import InvalidRequestError
from mediscan.validation.normalizer import ResponseNormalizer

logger = structlog.get_logger(__name__)


def _is_blank(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    # Mirrors a falsy check on the raw JSON value, so age 0 counts as missing
    return not value


def parse_request(payload: Union[AnalysisRequest, Mapping[str, Any], None]) -> AnalysisRequest:
    """
    Build an AnalysisRequest from a raw payload.

    Raises:
        InvalidRequestError: required field missing/empty, or a value fails
            validation (e.g., age outside 1-120)
    """
    if isinstance(payload, AnalysisRequest):
        return payload
    if not isinstance(payload, Mapping):
        payload = {}

    if any(_is_blank(payload.get(field)) for field in REQUIRED_FIELDS):
        raise InvalidRequestError(MISSING_FIELDS_ERROR, required=list(REQUIRED_FIELDS))

    try:
        return AnalysisRequest.model_validate(
            {"age": payload.get("age"), "symptoms": payload.get("symptoms")}
        )
    except PydanticValidationError as e:
        errors = [
            f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}"
            for err in e.errors()
        ]
        raise InvalidRequestError(f"Invalid request: {'; '.join(errors)}", errors=errors) from e


class AnalysisOrchestrator:
    """
    Produces a ResultEnvelope for every call; never raises.

    Attributes:
        llm_client: Upstream inference client
        prompt_builder: Builds the generation request
        normalizer: Converts completion text to AnalysisResult
        classifier: Local fallback classifier
    """

    def __init__(
        self,
        llm_client: BaseLLMClient,
        prompt_builder: PromptBuilder,
        normalizer: ResponseNormalizer | None = None,
        classifier: LocalClassifier | None = None,
    ):
        self.llm_client = llm_client
        self.prompt_builder = prompt_builder
        self.normalizer = normalizer or ResponseNormalizer()
        self.classifier = classifier or LocalClassifier()

    async def analyze(
        self, payload: Union[AnalysisRequest, Mapping[str, Any], None]
    ) -> ResultEnvelope:
        """
        Analyze one request.

        Args:
            payload: AnalysisRequest or raw mapping with "age" and "symptoms"

        Returns:
            Failure envelope for invalid input, otherwise a success envelope
            from the upstream model or from the local classifier
        """
        try:
            request = parse_request(payload)
        except InvalidRequestError as e:
            analysis_requests_total.labels(source="invalid").inc()
            logger.info("Rejected analysis request", error=e.message, details=e.details)
            return ResultEnvelope.failure(e.message, required=e.required)

        logger.info(
            "Analysis request received",
            age=request.age,
            symptoms_length=len(request.symptoms),
        )

        start_time = time.time()
        try:
            generation_request = self.prompt_builder.build_request(request)
            completion = await self.llm_client.generate(generation_request)
            analysis = self.normalizer.normalize(completion.content)
        except LLMClientError as e:
            logger.warning(
                "Upstream analysis failed, using local classifier",
                error_type=type(e).__name__,
                error=e.message,
                details=e.details,
            )
            return self._fallback(request)
        except Exception:
            logger.exception("Unexpected analysis failure, using local classifier")
            return self._fallback(request)

        analysis_requests_total.labels(source="llm").inc()
        logger.info(
            "Analysis completed",
            source="llm",
            duration_ms=int((time.time() - start_time) * 1000),
            conditions_count=len(analysis.conditions),
            urgency=analysis.urgency,
        )
        return ResultEnvelope.from_llm(analysis, completion.content)

    def _fallback(self, request: AnalysisRequest) -> ResultEnvelope:
        analysis = self.classifier.classify(request.symptoms, request.age)
        analysis_requests_total.labels(source="local").inc()
        logger.info(
            "Analysis completed",
            source="local",
            conditions_count=len(analysis.conditions),
            urgency=analysis.urgency,
        )
        return ResultEnvelope.from_fallback(analysis)

"""
Response normalizer: upstream completion text -> AnalysisResult.

Two paths:
1. Structured: extract the embedded JSON object and validate it against the
   AnalysisResult shape, defaulting missing fields.
2. Degraded: anything that fails (no span, bad JSON, wrong shape) becomes a
   single "Analysis Complete" condition carrying the raw text verbatim.

normalize() never raises.
"""

import structlog
from pydantic import ValidationError as PydanticValidationError

from mediscan.models.output_models import AnalysisResult, Condition
from mediscan.monitoring.metrics import normalizer_fallbacks_total

from .exceptions import JSONParseError, SchemaValidationError
from .json_extract import extract_json_object

logger = structlog.get_logger(__name__)

RAW_TEXT_CONDITION_NAME = "Analysis Complete"
RAW_TEXT_URGENCY = "Consult results"
RAW_TEXT_IMMEDIATE_ATTENTION = ["If symptoms worsen"]


class ResponseNormalizer:
    """Turn possibly malformed model output into the canonical result."""

    def normalize(self, raw_text: str) -> AnalysisResult:
        """
        Normalize upstream completion text.

        Args:
            raw_text: Completion text as returned by the model

        Returns:
            Validated AnalysisResult, or the raw-text fallback result
        """
        try:
            data = extract_json_object(raw_text)
            return self.validate_shape(data)
        except JSONParseError as e:
            normalizer_fallbacks_total.labels(reason=e.reason).inc()
            logger.warning(
                "Model output has no usable JSON, using raw text",
                reason=e.reason,
                parse_error=e.details.get("parse_error"),
                content_length=len(raw_text or ""),
            )
        except SchemaValidationError as e:
            normalizer_fallbacks_total.labels(reason=e.reason).inc()
            logger.warning(
                "Model JSON does not match analysis shape, using raw text",
                validation_errors=e.validation_errors,
            )
        return self.raw_text_result(raw_text)

    @staticmethod
    def validate_shape(data: dict) -> AnalysisResult:
        """
        Validate a parsed JSON object as an AnalysisResult.

        Raises:
            SchemaValidationError: object does not fit the shape
        """
        try:
            return AnalysisResult.model_validate(data)
        except PydanticValidationError as e:
            raise SchemaValidationError(
                "Model output does not match the analysis shape",
                validation_errors=[
                    f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}"
                    for err in e.errors()
                ],
            ) from e

    @staticmethod
    def raw_text_result(raw_text: str) -> AnalysisResult:
        """Fallback result wrapping the full raw text."""
        return AnalysisResult(
            conditions=[Condition(name=RAW_TEXT_CONDITION_NAME, description=raw_text)],
            urgency=RAW_TEXT_URGENCY,
            immediate_attention=list(RAW_TEXT_IMMEDIATE_ATTENTION),
        )


def normalize(raw_text: str) -> AnalysisResult:
    """Normalize with a default ResponseNormalizer."""
    return ResponseNormalizer().normalize(raw_text)

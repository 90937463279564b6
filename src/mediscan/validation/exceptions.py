"""
Validation errors.

InvalidRequestError becomes a failure envelope for the caller.
JSONParseError and SchemaValidationError describe malformed upstream output;
the normalizer recovers from both, so neither leaves the validation package.
"""

from typing import Any

SNIPPET_LENGTH = 500


class ValidationError(Exception):
    """
    Base class. `details` holds structured context for log events.
    """

    def __init__(self, message: str, **details: Any):
        super().__init__(message)
        self.message = message
        self.details = {k: v for k, v in details.items() if v}

    def __str__(self) -> str:
        if not self.details:
            return self.message
        context = ", ".join(f"{k}={v!r}" for k, v in sorted(self.details.items()))
        return f"{self.message} ({context})"


class InvalidRequestError(ValidationError):
    """
    Request is missing a required field or carries an invalid value.

    `required` is set only for the missing-field case; the envelope echoes
    it back so clients can highlight the form fields.
    """

    def __init__(
        self,
        message: str,
        required: list[str] | None = None,
        errors: list[str] | None = None,
    ):
        super().__init__(message, required=required, errors=errors)
        self.required = required
        self.errors = errors or []


class JSONParseError(ValidationError):
    """
    No JSON object could be extracted from the completion.

    Args:
        message: Error description
        raw_content: Offending completion; only a snippet is kept
        parse_error: json.JSONDecodeError message, when decoding failed
        reason: Metric label (no_json_object | json_decode_error)
    """

    def __init__(
        self,
        message: str,
        raw_content: str | None = None,
        parse_error: str | None = None,
        reason: str = "json_decode_error",
    ):
        super().__init__(
            message,
            reason=reason,
            content_snippet=(raw_content or "")[:SNIPPET_LENGTH],
            parse_error=parse_error,
        )
        self.reason = reason


class SchemaValidationError(ValidationError):
    """
    Parsed JSON does not fit the AnalysisResult shape.
    """

    reason = "schema_mismatch"

    def __init__(self, message: str, validation_errors: list[str] | None = None):
        super().__init__(message, validation_errors=validation_errors)
        self.validation_errors = validation_errors or []

"""
Validation of requests and upstream model output.

- json_extract.py: greedy brace-span JSON extraction
- normalizer.py: ResponseNormalizer (structured path + raw-text degrade path)
- exceptions.py: InvalidRequestError, JSONParseError, SchemaValidationError
"""

from .exceptions import (
    InvalidRequestError,
    JSONParseError,
    SchemaValidationError,
    ValidationError,
)
from .json_extract import extract_json_object, find_brace_span
from .normalizer import ResponseNormalizer, normalize

__all__ = [
    "ResponseNormalizer",
    "normalize",
    "extract_json_object",
    "find_brace_span",
    # Exceptions
    "ValidationError",
    "InvalidRequestError",
    "JSONParseError",
    "SchemaValidationError",
]

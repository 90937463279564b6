"""
JSON object extraction from free-form model output.

Generative models often wrap the requested JSON in prose or markdown code
fences. The extractor takes the largest brace-delimited span (first "{" to
last "}") and parses it.

Known limitation: text with several unrelated brace spans yields the
outermost span, which may not be the intended object and then usually
fails to parse.
"""

import json

import structlog

from .exceptions import JSONParseError

logger = structlog.get_logger(__name__)


def find_brace_span(text: str) -> str | None:
    """
    Return the greedy brace-delimited span of `text`, or None.

    Examples:
        >>> find_brace_span('Here you go: {"a": {"b": 1}} thanks')
        '{"a": {"b": 1}}'
        >>> find_brace_span("no json here") is None
        True
    """
    if not text:
        return None
    start = text.find("{")
    end = text.rfind("}")
    if start == -1 or end < start:
        return None
    return text[start:end + 1]


def extract_json_object(text: str) -> dict:
    """
    Extract and parse the JSON object embedded in `text`.

    Raises:
        JSONParseError: no span found, or the span is not valid JSON
    """
    span = find_brace_span(text)
    if span is None:
        raise JSONParseError(
            "No brace-delimited span in model output",
            raw_content=text,
            reason="no_json_object",
        )

    try:
        parsed = json.loads(span)
    except json.JSONDecodeError as e:
        raise JSONParseError(
            f"Failed to parse model output as JSON: {e.msg}",
            raw_content=span,
            parse_error=f"{e.msg} at line {e.lineno} col {e.colno}",
            reason="json_decode_error",
        ) from e
    except RecursionError as e:
        raise JSONParseError(
            "Model output nests too deeply to parse",
            raw_content=span,
            parse_error="maximum nesting depth exceeded",
            reason="json_decode_error",
        ) from e

    # A span opening with "{" can only decode to an object
    logger.debug("Extracted JSON object", keys=len(parsed), span_length=len(span))
    return parsed

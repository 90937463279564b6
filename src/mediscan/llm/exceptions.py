"""
Custom exceptions for the LLM client layer.

Every upstream failure is raised as an LLMClientError subclass so the
orchestrator can recover from all of them with a single except clause while
logs still show the specific failure mode.
"""


class LLMClientError(Exception):
    """
    Base exception for all LLM client errors.
    """
    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class LLMConnectionError(LLMClientError):
    """
    Unable to reach the inference service (DNS, refused connection, reset).
    """
    pass


class LLMTimeoutError(LLMConnectionError):
    """
    Request exceeded the configured timeout.
    """
    pass


class LLMAuthenticationError(LLMClientError):
    """
    API key missing, invalid or lacking permission (HTTP 401/403).
    """
    pass


class LLMGenerationError(LLMClientError):
    """
    The service returned a non-2xx status during generation.
    """
    pass


class LLMModelNotAvailableError(LLMGenerationError):
    """
    The configured model does not exist on the service (HTTP 404).
    """
    pass


class LLMRateLimitError(LLMGenerationError):
    """
    Quota exhausted or request rate-limited (HTTP 429).
    """
    pass


class LLMResponseFormatError(LLMClientError):
    """
    A 2xx response without a usable completion: body not JSON, no
    candidates, or an empty candidate (e.g., blocked by safety filters).
    """
    pass

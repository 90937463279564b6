"""
Abstract base client for LLM inference.

Defines the interface every inference backend implements so the
orchestrator and API layer never depend on a specific provider.
"""

from abc import ABC, abstractmethod

import structlog

from mediscan.models.llm_models import LLMGenerationRequest, LLMGenerationResponse

logger = structlog.get_logger(__name__)


class BaseLLMClient(ABC):
    """
    Abstract base class for LLM inference clients.

    Responsibilities:
    - Send generation requests to the inference service
    - Parse responses into LLMGenerationResponse
    - Translate transport and HTTP failures into LLMClientError subclasses

    Does NOT handle:
    - Prompt construction (PromptBuilder)
    - Interpreting the completion text (ResponseNormalizer)
    - Fallback on failure (AnalysisOrchestrator)
    """

    def __init__(self, base_url: str, timeout: int = 30, **kwargs):
        """
        Initialize base client.

        Args:
            base_url: Base URL of the inference service
            timeout: Request timeout in seconds
            **kwargs: Additional provider-specific config
        """
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout
        self.extra_config = kwargs

        logger.info(
            "Initialized LLM client",
            client_class=self.__class__.__name__,
            base_url=self.base_url,
            timeout=timeout,
        )

    @abstractmethod
    async def generate(self, request: LLMGenerationRequest) -> LLMGenerationResponse:
        """
        Generate a completion. Single attempt, no retries.

        Raises:
            LLMClientError: any transport, HTTP or payload failure
        """

    @abstractmethod
    async def health_check(self) -> bool:
        """
        Lightweight reachability check. Returns False instead of raising.
        """

    async def close(self):
        """
        Release connections. Subclasses holding a pool override this.
        """
        logger.debug("Closing LLM client", client_class=self.__class__.__name__)

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"base_url={self.base_url}, "
            f"timeout={self.timeout}s)"
        )

"""
Prompt builder for LLM requests.

Renders the analysis prompt (Jinja2 template) from an AnalysisRequest and
wraps it in an LLMGenerationRequest with the configured generation
parameters.
"""

from pathlib import Path

import structlog
from jinja2 import Environment, FileSystemLoader

from mediscan.models.enums import UrgencyLevel
from mediscan.models.input_models import AnalysisRequest
from mediscan.models.llm_models import LLMGenerationRequest

logger = structlog.get_logger(__name__)

PROMPT_TEMPLATE_NAME = "analysis_prompt.txt"


class PromptBuilder:
    """
    Build generation requests from AnalysisRequest objects.
    """

    def __init__(
        self,
        templates_dir: Path,
        model: str = "gemini-1.5-flash",
        temperature: float = 0.2,
        max_tokens: int = 2048,
        template_name: str = PROMPT_TEMPLATE_NAME,
    ):
        """
        Args:
            templates_dir: Directory containing the prompt template
            model: Model name put on every request
            temperature: Sampling temperature
            max_tokens: Maximum output tokens
            template_name: Template file name inside templates_dir
        """
        self.templates_dir = Path(templates_dir)
        self.model = model
        self.temperature = temperature
        self.max_tokens = max_tokens

        self.jinja_env = Environment(
            loader=FileSystemLoader(str(self.templates_dir)),
            trim_blocks=True,
            lstrip_blocks=True,
            autoescape=False,  # plain-text prompt, not HTML
            keep_trailing_newline=True,
        )

        try:
            self.template = self.jinja_env.get_template(template_name)
        except Exception as e:
            logger.error(
                "Failed to load prompt template",
                error=str(e),
                templates_dir=str(self.templates_dir),
            )
            raise

        logger.info(
            "PromptBuilder initialized",
            templates_dir=str(self.templates_dir),
            model=model,
            temperature=temperature,
            max_tokens=max_tokens,
        )

    def build_prompt(self, request: AnalysisRequest) -> str:
        """Render the analysis prompt for one request."""
        return self.template.render(
            age=request.age,
            symptoms=request.symptoms,
            urgency_levels=[level.value for level in UrgencyLevel],
        )

    def build_request(self, request: AnalysisRequest) -> LLMGenerationRequest:
        """Build the complete generation request for one analysis."""
        prompt = self.build_prompt(request)
        return LLMGenerationRequest(
            prompt=prompt,
            model=self.model,
            temperature=self.temperature,
            max_tokens=self.max_tokens,
        )

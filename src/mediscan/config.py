"""
Configuration settings for MediScan AI.

All settings are loaded from environment variables with sensible defaults.
Use .env file for local development (see .env.example).
"""

from pathlib import Path
from typing import Optional

from pydantic import SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

PACKAGE_DIR = Path(__file__).resolve().parent


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # === Application ===
    APP_NAME: str = "MediScan AI"
    APP_VERSION: str = "2.0.0"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"
    ENVIRONMENT: str = "development"  # development | production

    # === Gemini Configuration ===
    # Deployment secret; when unset every request is served by the local classifier
    GEMINI_API_KEY: Optional[SecretStr] = None
    GEMINI_BASE_URL: str = "https://generativelanguage.googleapis.com"
    GEMINI_MODEL: str = "gemini-1.5-flash"
    GEMINI_TIMEOUT: int = 30  # seconds

    # === LLM Generation Parameters ===
    LLM_TEMPERATURE: float = 0.2
    LLM_MAX_TOKENS: int = 2048

    # === Templates ===
    PROMPT_TEMPLATES_DIR: str = str(PACKAGE_DIR / "llm" / "templates")
    UI_TEMPLATES_DIR: str = str(PACKAGE_DIR / "templates")

    # === HTTP ===
    CORS_ALLOW_ORIGINS: list[str] = ["*"]

    # === Monitoring ===
    PROMETHEUS_ENABLED: bool = True

    @property
    def gemini_configured(self) -> bool:
        """True when an API key is available for the upstream service."""
        return bool(self.GEMINI_API_KEY and self.GEMINI_API_KEY.get_secret_value())


# Global settings instance
settings = Settings()

"""Application configuration."""

import logging
import sys
from collections.abc import Callable
from functools import lru_cache
from typing import Any, Literal

import structlog
from pydantic import computed_field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

AIProvider = Literal["ollama", "openai", "anthropic", "google"]

# Setting that has to be present for each AI provider
_PROVIDER_CREDENTIAL: dict[str, str] = {
    "ollama": "OPENAI_BASE_URL",
    "openai": "OPENAI_API_KEY",
    "anthropic": "ANTHROPIC_API_KEY",
    "google": "GEMINI_API_KEY",
}


class Settings(BaseSettings):
    """
    CaLearner settings, read from the environment and an optional `.env` file.

    Without an AI provider the service still runs; lesson generation then
    fails and the session shows the retry state.
    """

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    ENVIRONMENT: Literal["development", "production", "test"] = "development"
    LOG_LEVEL: str | None = None

    # Key-value store backing the session repository
    DATABASE_URL: str = "sqlite:///./calearner.db"
    STORAGE_KEY_PREFIX: str = "calearner"

    API_V1_PREFIX: str = "/api/v1"
    PROJECT_NAME: str = "CaLearner API"
    VERSION: str = "0.1.0"
    # Credentials are only allowed for an explicit origin list
    CORS_ORIGINS: list[str] = ["http://localhost:5173", "http://localhost:3000"]

    # Simulated app store
    PURCHASE_DELAY_SECONDS: float = 1.5
    PURCHASE_ALWAYS_DECLINE: bool = False

    AI_PROVIDER: AIProvider | None = None
    AI_MODEL_NAME: str | None = None
    OPENAI_BASE_URL: str | None = None  # ollama speaks the OpenAI protocol
    OPENAI_API_KEY: str | None = None
    ANTHROPIC_API_KEY: str | None = None
    GEMINI_API_KEY: str | None = None

    @computed_field  # type: ignore[prop-decorator]
    @property
    def ai_enabled(self) -> bool:
        """Whether lessons can be generated."""
        return self.AI_PROVIDER is not None

    @field_validator("STORAGE_KEY_PREFIX", mode="after")
    @classmethod
    def validate_key_prefix(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("STORAGE_KEY_PREFIX cannot be empty")
        return value

    @field_validator("PURCHASE_DELAY_SECONDS", mode="after")
    @classmethod
    def validate_purchase_delay(cls, value: float) -> float:
        if value < 0:
            raise ValueError("PURCHASE_DELAY_SECONDS cannot be negative")
        return value

    @model_validator(mode="after")
    def validate_ai_provider_config(self) -> "Settings":
        """Require a model name and the provider's credential once a provider is set."""
        if self.AI_PROVIDER is None:
            return self
        if not self.AI_MODEL_NAME:
            msg = f"AI_MODEL_NAME is required when AI_PROVIDER is '{self.AI_PROVIDER}'"
            raise ValueError(msg)
        credential = _PROVIDER_CREDENTIAL[self.AI_PROVIDER]
        if not getattr(self, credential):
            msg = f"{credential} is required when AI_PROVIDER is '{self.AI_PROVIDER}'"
            raise ValueError(msg)
        return self


def configure_logging(environment: str = "development", level: str | None = None) -> None:
    """
    Configure structlog on top of stdlib logging.

    Production renders JSON lines; everything else gets the colored console
    renderer. `level` overrides the environment's default level.
    """
    default_level = logging.DEBUG if environment == "development" else logging.INFO
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=logging.getLevelName(level.upper()) if level else default_level,
    )

    renderer: Callable[..., Any] = (
        structlog.processors.JSONRenderer()
        if environment == "production"
        else structlog.dev.ConsoleRenderer()
    )
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()

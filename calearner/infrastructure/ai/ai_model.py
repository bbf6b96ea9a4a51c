from functools import lru_cache

from pydantic_ai.models.anthropic import AnthropicModel
from pydantic_ai.models.google import GoogleModel
from pydantic_ai.models.openai import Model, OpenAIChatModel
from pydantic_ai.providers.anthropic import AnthropicProvider
from pydantic_ai.providers.google import GoogleProvider
from pydantic_ai.providers.ollama import OllamaProvider
from pydantic_ai.providers.openai import OpenAIProvider

from calearner.config import get_settings
from calearner.exceptions import LessonGenerationError


def _get_model() -> Model:
    """Build the Pydantic AI model selected by AI_PROVIDER."""
    settings = get_settings()
    provider = settings.AI_PROVIDER
    model_name = settings.AI_MODEL_NAME
    if provider is None or model_name is None:
        raise LessonGenerationError("no AI provider configured")

    # Credentials per provider are checked by the settings validator
    if provider == "ollama":
        return OpenAIChatModel(
            model_name=model_name,
            provider=OllamaProvider(base_url=settings.OPENAI_BASE_URL),
        )
    if provider == "openai":
        return OpenAIChatModel(
            model_name=model_name,
            provider=OpenAIProvider(api_key=settings.OPENAI_API_KEY),
        )
    if provider == "anthropic":
        return AnthropicModel(
            model_name=model_name,
            provider=AnthropicProvider(api_key=settings.ANTHROPIC_API_KEY),
        )
    return GoogleModel(
        model_name=model_name,
        provider=GoogleProvider(api_key=settings.GEMINI_API_KEY),
    )


@lru_cache
def get_ai_model() -> Model:
    """
    Get cached AI model. Built lazily so the app starts without AI settings and
    only fails when a lesson is actually requested.
    """
    return _get_model()

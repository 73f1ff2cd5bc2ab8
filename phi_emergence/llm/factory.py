"""
llm/factory.py — Provider selection

Priority:
    1. Explicit LLM_PROVIDER (passthrough | ollama | openai)
    2. auto: Ollama if the local server answers (free)
    3. auto: OpenAI if an API key is configured
    4. auto: pass-through
"""

from typing import Optional

import structlog

from phi_emergence.config import Settings, get_settings
from phi_emergence.llm.base import LLMProvider
from phi_emergence.llm.ollama import OllamaProvider
from phi_emergence.llm.openai_provider import OpenAIProvider
from phi_emergence.llm.passthrough import PassThroughProvider
from phi_emergence.models.enumerations import LLMProviderType

logger = structlog.get_logger(__name__)


def _ollama(settings: Settings) -> OllamaProvider:
    return OllamaProvider(
        host=settings.OLLAMA_HOST,
        model=settings.OLLAMA_MODEL,
        timeout=settings.LLM_TIMEOUT_SECONDS,
        temperature=settings.LLM_TEMPERATURE,
        max_tokens=settings.LLM_MAX_TOKENS,
    )


def _openai(settings: Settings) -> OpenAIProvider:
    api_key = settings.OPENAI_API_KEY.get_secret_value() if settings.OPENAI_API_KEY else None
    return OpenAIProvider(
        api_key=api_key,
        base_url=settings.OPENAI_BASE_URL,
        model=settings.OPENAI_MODEL,
        timeout=settings.LLM_TIMEOUT_SECONDS,
        temperature=settings.LLM_TEMPERATURE,
        max_tokens=settings.LLM_MAX_TOKENS,
    )


def create_llm_provider(settings: Optional[Settings] = None) -> LLMProvider:
    """Build the configured provider, auto-detecting when LLM_PROVIDER=auto."""
    settings = settings or get_settings()
    choice = settings.LLM_PROVIDER

    if choice == LLMProviderType.PASSTHROUGH.value:
        return PassThroughProvider()
    if choice == LLMProviderType.OLLAMA.value:
        return _ollama(settings)
    if choice == LLMProviderType.OPENAI.value:
        return _openai(settings)

    ollama = _ollama(settings)
    if ollama.is_available():
        logger.info("llm_provider_selected", provider=ollama.name, reason="ollama detected")
        return ollama
    ollama.close()

    if settings.OPENAI_API_KEY:
        logger.info("llm_provider_selected", provider="openai", reason="api key found")
        return _openai(settings)

    logger.warning("llm_provider_selected", provider="passthrough", reason="no LLM available")
    return PassThroughProvider()

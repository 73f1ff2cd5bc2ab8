"""
Dependencies - Phi Emergence Service
phi_emergence/core/dependencies.py

FastAPI dependency injection for the detector and LLM provider.
"""

from functools import lru_cache

from phi_emergence.llm.base import LLMProvider
from phi_emergence.llm.factory import create_llm_provider
from phi_emergence.scoring.emergence_detector import EmergenceDetector


@lru_cache()
def get_emergence_detector() -> EmergenceDetector:
    """Get cached process-wide EmergenceDetector instance."""
    return EmergenceDetector()


@lru_cache()
def get_llm_provider() -> LLMProvider:
    """Get cached LLM provider selected from settings."""
    return create_llm_provider()


def close_llm_provider() -> None:
    """Close the cached LLM provider, if one was created, and drop it."""
    if get_llm_provider.cache_info().currsize:
        get_llm_provider().close()
    get_llm_provider.cache_clear()

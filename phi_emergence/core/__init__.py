"""
Core Package - Phi Emergence Service
phi_emergence/core/__init__.py

Core infrastructure: exceptions. Dependency providers live in
core.dependencies.
"""

from phi_emergence.core.exceptions import (
    LLMConfigurationException,
    LLMProviderException,
    LLMRequestException,
    LLMTimeoutException,
)

__all__ = [
    "LLMConfigurationException",
    "LLMProviderException",
    "LLMRequestException",
    "LLMTimeoutException",
]

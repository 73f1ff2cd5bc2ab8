"""
Custom Exceptions - Phi Emergence Service
phi_emergence/core/exceptions.py

Custom exception classes for LLM provider operations.
"""


class LLMProviderException(Exception):
    """Base exception for LLM provider operations."""

    pass


class LLMConfigurationException(LLMProviderException):
    """Provider is missing required configuration (API key, host)."""

    def __init__(self, provider: str, message: str):
        self.provider = provider
        self.message = message
        super().__init__(f"{provider}: {message}")


class LLMRequestException(LLMProviderException):
    """Provider returned an error response or could not be reached."""

    def __init__(self, provider: str, message: str, status_code: int = None):
        self.provider = provider
        self.message = message
        self.status_code = status_code
        detail = f" (HTTP {status_code})" if status_code is not None else ""
        super().__init__(f"{provider} request failed{detail}: {message}")


class LLMTimeoutException(LLMProviderException):
    """Provider did not answer within the configured timeout."""

    def __init__(self, provider: str, timeout_seconds: float):
        self.provider = provider
        self.timeout_seconds = timeout_seconds
        super().__init__(f"{provider} timeout after {timeout_seconds}s")

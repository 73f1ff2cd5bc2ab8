"""
llm/openai_provider.py — OpenAI chat-completions provider

    POST {base_url}/chat/completions   (Bearer auth)
"""

import time
from typing import Any, Dict, Optional

import httpx
import structlog

from phi_emergence.core.exceptions import (
    LLMConfigurationException,
    LLMRequestException,
    LLMTimeoutException,
)
from phi_emergence.llm.base import MAX_CONFIDENCE, Completion, ProviderStats, token_count
from phi_emergence.models.enumerations import LLMProviderType

logger = structlog.get_logger(__name__)


def _error_message(resp: httpx.Response) -> str:
    """error.message from an OpenAI error body, else the raw body prefix."""
    try:
        error = resp.json().get("error")
    except (ValueError, AttributeError):
        error = None
    if isinstance(error, dict) and error.get("message"):
        return str(error["message"])
    return resp.text[:200]


class OpenAIProvider:
    """Remote completion through the OpenAI API."""

    name = LLMProviderType.OPENAI.value

    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: str = "https://api.openai.com/v1",
        model: str = "gpt-4o-mini",
        timeout: float = 60.0,
        temperature: float = 0.7,
        max_tokens: int = 1000,
        client: Optional[httpx.Client] = None,
    ):
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.model = model
        self.timeout = timeout
        self.temperature = temperature
        self.max_tokens = max_tokens
        self.client = client or httpx.Client(base_url=self.base_url, timeout=timeout)
        self.stats = ProviderStats()

        if not self.api_key:
            logger.warning("openai_provider_disabled", reason="no API key")

    def complete(self, prompt: str, **options: Any) -> Completion:
        if not self.api_key:
            raise LLMConfigurationException(self.name, "OpenAI API key required")

        model = options.get("model") or self.model
        payload = {
            "model": model,
            "messages": [{"role": "user", "content": prompt}],
            "temperature": options.get("temperature", self.temperature),
            "max_tokens": options.get("max_tokens", self.max_tokens),
        }
        headers = {"Authorization": f"Bearer {self.api_key}"}

        start = time.perf_counter()
        try:
            resp = self.client.post(
                "/chat/completions", json=payload, headers=headers, timeout=self.timeout
            )
        except httpx.TimeoutException:
            self.stats.record_failure()
            logger.warning("openai_timeout", model=model, timeout=self.timeout)
            raise LLMTimeoutException(self.name, self.timeout)
        except httpx.HTTPError as e:
            self.stats.record_failure()
            logger.warning("openai_unreachable", model=model, error=str(e))
            raise LLMRequestException(self.name, str(e))

        if resp.status_code != 200:
            self.stats.record_failure()
            message = _error_message(resp)
            logger.warning("openai_error", model=model, status_code=resp.status_code)
            raise LLMRequestException(self.name, message, resp.status_code)

        try:
            data = resp.json()
        except ValueError:
            data = None
        if not isinstance(data, dict):
            self.stats.record_failure()
            logger.warning("openai_malformed_response", model=model, body=resp.text[:200])
            raise LLMRequestException(self.name, "Malformed response body", resp.status_code)

        choices = data.get("choices") or [{}]
        usage = data.get("usage") if isinstance(data.get("usage"), dict) else {}
        input_tokens = token_count(usage.get("prompt_tokens"))
        output_tokens = token_count(usage.get("completion_tokens"))
        latency_ms = (time.perf_counter() - start) * 1000
        self.stats.record_success(input_tokens, output_tokens, latency_ms)

        logger.info(
            "openai_completed",
            model=model,
            input_tokens=input_tokens,
            output_tokens=output_tokens,
            latency_ms=round(latency_ms, 2),
        )

        return Completion(
            text=(choices[0].get("message") or {}).get("content") or "",
            confidence=MAX_CONFIDENCE,
            input_tokens=input_tokens,
            output_tokens=output_tokens,
            model=model,
            provider=self.name,
        )

    def is_available(self) -> bool:
        return bool(self.api_key)

    def get_stats(self) -> Dict[str, Any]:
        return {**self.stats.as_dict(), "type": self.name}

    def close(self) -> None:
        """Release the pooled HTTP connections."""
        self.client.close()

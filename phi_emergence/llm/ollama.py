"""
llm/ollama.py — Ollama provider (local inference)

    POST {host}/api/generate   non-streaming completion
    GET  {host}/api/tags       availability + model listing
"""

import time
from typing import Any, Dict, List, Optional

import httpx
import structlog

from phi_emergence.core.exceptions import LLMRequestException, LLMTimeoutException
from phi_emergence.llm.base import MAX_CONFIDENCE, Completion, ProviderStats, token_count
from phi_emergence.models.enumerations import LLMProviderType

logger = structlog.get_logger(__name__)

AVAILABILITY_TIMEOUT_SECONDS = 5.0


class OllamaProvider:
    """Local LLM inference through an Ollama server."""

    name = LLMProviderType.OLLAMA.value

    def __init__(
        self,
        host: str = "http://localhost:11434",
        model: str = "llama3.2",
        timeout: float = 60.0,
        temperature: float = 0.7,
        max_tokens: int = 1000,
        client: Optional[httpx.Client] = None,
    ):
        self.host = host.rstrip("/")
        self.model = model
        self.timeout = timeout
        self.temperature = temperature
        self.max_tokens = max_tokens
        self.client = client or httpx.Client(base_url=self.host, timeout=timeout)
        self.stats = ProviderStats()

    def complete(self, prompt: str, **options: Any) -> Completion:
        model = options.get("model") or self.model
        payload = {
            "model": model,
            "prompt": prompt,
            "stream": False,
            "options": {
                "temperature": options.get("temperature", self.temperature),
                "num_predict": options.get("max_tokens", self.max_tokens),
            },
        }

        start = time.perf_counter()
        try:
            resp = self.client.post("/api/generate", json=payload, timeout=self.timeout)
        except httpx.TimeoutException:
            self.stats.record_failure()
            logger.warning("ollama_timeout", model=model, timeout=self.timeout)
            raise LLMTimeoutException(self.name, self.timeout)
        except httpx.HTTPError as e:
            self.stats.record_failure()
            logger.warning("ollama_unreachable", model=model, error=str(e))
            raise LLMRequestException(self.name, str(e))

        if resp.status_code != 200:
            self.stats.record_failure()
            logger.warning("ollama_error", model=model, status_code=resp.status_code)
            raise LLMRequestException(self.name, resp.text[:200], resp.status_code)

        try:
            data = resp.json()
        except ValueError:
            data = None
        if not isinstance(data, dict):
            self.stats.record_failure()
            logger.warning("ollama_malformed_response", model=model, body=resp.text[:200])
            raise LLMRequestException(self.name, "Malformed response body", resp.status_code)

        input_tokens = token_count(data.get("prompt_eval_count"))
        output_tokens = token_count(data.get("eval_count"))
        latency_ms = (time.perf_counter() - start) * 1000
        self.stats.record_success(input_tokens, output_tokens, latency_ms)

        logger.info(
            "ollama_completed",
            model=model,
            input_tokens=input_tokens,
            output_tokens=output_tokens,
            latency_ms=round(latency_ms, 2),
        )

        return Completion(
            text=str(data.get("response") or ""),
            confidence=MAX_CONFIDENCE,
            input_tokens=input_tokens,
            output_tokens=output_tokens,
            model=model,
            provider=self.name,
        )

    def is_available(self) -> bool:
        """Check if the Ollama server answers."""
        try:
            resp = self.client.get("/api/tags", timeout=AVAILABILITY_TIMEOUT_SECONDS)
        except httpx.HTTPError:
            return False
        return resp.status_code == 200

    def list_models(self) -> List[str]:
        try:
            resp = self.client.get("/api/tags", timeout=AVAILABILITY_TIMEOUT_SECONDS)
        except httpx.HTTPError as e:
            logger.warning("ollama_list_models_failed", error=str(e))
            return []
        if resp.status_code != 200:
            return []
        try:
            models = resp.json().get("models") or []
        except (ValueError, AttributeError):
            logger.warning("ollama_list_models_malformed", body=resp.text[:200])
            return []
        return [m["name"] for m in models if isinstance(m, dict) and "name" in m]

    def get_stats(self) -> Dict[str, Any]:
        return {**self.stats.as_dict(), "type": self.name}

    def close(self) -> None:
        """Release the pooled HTTP connections."""
        self.client.close()

"""
llm/passthrough.py — Pass-through provider

Echoes the prompt back unchanged. Used when the completion is produced by an
outer host (the prompt is handed over as-is) and as the offline fallback.
"""

import time
from typing import Any, Dict

import structlog

from phi_emergence.llm.base import MAX_CONFIDENCE, Completion, ProviderStats, estimate_tokens
from phi_emergence.models.enumerations import LLMProviderType

logger = structlog.get_logger(__name__)


class PassThroughProvider:
    """Stateless echo provider with call accounting."""

    name = LLMProviderType.PASSTHROUGH.value

    def __init__(self):
        self.stats = ProviderStats()

    def complete(self, prompt: str, **options: Any) -> Completion:
        start = time.perf_counter()
        tokens = estimate_tokens(prompt)
        self.stats.record_success(tokens, tokens, (time.perf_counter() - start) * 1000)
        logger.debug("passthrough_completed", prompt_chars=len(prompt), tokens=tokens)
        return Completion(
            text=prompt,
            confidence=MAX_CONFIDENCE,
            input_tokens=tokens,
            output_tokens=tokens,
            model=self.name,
            provider=self.name,
        )

    def is_available(self) -> bool:
        return True

    def get_stats(self) -> Dict[str, Any]:
        return {**self.stats.as_dict(), "type": self.name}

    def close(self) -> None:
        pass

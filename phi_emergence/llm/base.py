"""
llm/base.py — Provider interface and shared stats

Every provider implements LLMProvider structurally (no common base class)
and composes a ProviderStats for call accounting. Completion confidence is
never above φ⁻¹ regardless of provider.
"""

import math
from dataclasses import dataclass
from typing import Any, Dict, Protocol, runtime_checkable

from phi_emergence.scoring.constants import PHI_INV

MAX_CONFIDENCE = float(PHI_INV)


def estimate_tokens(text: str) -> int:
    """Rough token estimate: one token per four characters."""
    return math.ceil(len(text) / 4)


@dataclass
class Completion:
    """Output of LLMProvider.complete()."""
    text: str
    confidence: float
    input_tokens: int
    output_tokens: int
    model: str
    provider: str


@dataclass
class ProviderStats:
    """Success/failure counters for one provider instance."""
    calls: int = 0
    errors: int = 0
    input_tokens: int = 0
    output_tokens: int = 0
    latency_ms: float = 0.0

    def record_success(self, input_tokens: int, output_tokens: int, latency_ms: float) -> None:
        self.calls += 1
        self.input_tokens += input_tokens
        self.output_tokens += output_tokens
        self.latency_ms += latency_ms

    def record_failure(self) -> None:
        self.errors += 1

    def as_dict(self) -> Dict[str, Any]:
        avg = self.latency_ms / self.calls if self.calls else 0.0
        return {
            "calls": self.calls,
            "errors": self.errors,
            "tokens": {"input": self.input_tokens, "output": self.output_tokens},
            "latency_ms": round(self.latency_ms, 2),
            "avg_latency_ms": round(avg, 2),
        }


@runtime_checkable
class LLMProvider(Protocol):
    """Structural interface shared by all providers."""

    name: str
    stats: ProviderStats

    def complete(self, prompt: str, **options: Any) -> Completion: ...

    def is_available(self) -> bool: ...

    def get_stats(self) -> Dict[str, Any]: ...

    def close(self) -> None: ...

def token_count(value: Any) -> int:
    """Usage field as a non-negative int; missing, null or junk counts as 0."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return 0
    return max(0, int(value))


def cap_confidence(value: float) -> float:
    return max(0.0, min(float(value), MAX_CONFIDENCE))

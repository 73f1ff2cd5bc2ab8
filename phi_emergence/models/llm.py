"""
LLM API Models - Phi Emergence Service
phi_emergence/models/llm.py
"""

from typing import Any, Dict, Optional

from pydantic import BaseModel, Field

from phi_emergence.models.enumerations import Verdict


class CompletionRequest(BaseModel):
    prompt: str = Field(..., min_length=1, max_length=100_000)
    model: Optional[str] = None
    temperature: Optional[float] = Field(default=None, ge=0.0, le=2.0)
    max_tokens: Optional[int] = Field(default=None, ge=1, le=32000)

    def options(self) -> Dict[str, Any]:
        """Non-null generation options for LLMProvider.complete()."""
        return self.model_dump(exclude={"prompt"}, exclude_none=True)


class CompletionResponse(BaseModel):
    text: str
    confidence: float = Field(..., ge=0, le=1)
    input_tokens: int
    output_tokens: int
    model: str
    provider: str


class JudgeRequest(BaseModel):
    item: Dict[str, Any]
    system_prompt: str = Field(
        default="Judge the following item. Reply with JSON containing score (0-100), "
                "verdict, reasoning and confidence.",
        min_length=1,
    )


class JudgmentResponse(BaseModel):
    score: float
    verdict: Verdict
    reasoning: str
    confidence: float


class AvailabilityResponse(BaseModel):
    provider: str
    available: bool

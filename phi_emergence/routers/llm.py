"""
routers/llm.py — LLM Provider Endpoints

Endpoints:
  POST /api/v1/llm/complete      — Raw completion through the active provider
  POST /api/v1/llm/judge         — φ-capped judgment of an item
  GET  /api/v1/llm/stats         — Provider call/error/token counters
  GET  /api/v1/llm/availability  — Whether the provider can answer
"""

import logging
from typing import Any, Dict

from fastapi import APIRouter, Depends, HTTPException, status

from phi_emergence.core.dependencies import get_llm_provider
from phi_emergence.core.exceptions import (
    LLMConfigurationException,
    LLMProviderException,
    LLMTimeoutException,
)
from phi_emergence.llm.base import LLMProvider
from phi_emergence.llm.judgment import judge
from phi_emergence.models.llm import (
    AvailabilityResponse,
    CompletionRequest,
    CompletionResponse,
    JudgeRequest,
    JudgmentResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/llm", tags=["LLM"])


def _to_http_error(exc: LLMProviderException) -> HTTPException:
    if isinstance(exc, LLMConfigurationException):
        code = status.HTTP_503_SERVICE_UNAVAILABLE
    elif isinstance(exc, LLMTimeoutException):
        code = status.HTTP_504_GATEWAY_TIMEOUT
    else:
        code = status.HTTP_502_BAD_GATEWAY
    logger.warning(f"LLM provider error ({code}): {exc}")
    return HTTPException(status_code=code, detail=str(exc))


@router.post("/complete", response_model=CompletionResponse)
def complete(request: CompletionRequest, provider: LLMProvider = Depends(get_llm_provider)):
    try:
        completion = provider.complete(request.prompt, **request.options())
    except LLMProviderException as e:
        raise _to_http_error(e)
    return CompletionResponse(
        text=completion.text,
        confidence=completion.confidence,
        input_tokens=completion.input_tokens,
        output_tokens=completion.output_tokens,
        model=completion.model,
        provider=completion.provider,
    )


@router.post("/judge", response_model=JudgmentResponse)
def judge_item(request: JudgeRequest, provider: LLMProvider = Depends(get_llm_provider)):
    try:
        judgment = judge(provider, request.item, request.system_prompt)
    except LLMProviderException as e:
        raise _to_http_error(e)
    return JudgmentResponse(
        score=judgment.score,
        verdict=judgment.verdict,
        reasoning=judgment.reasoning,
        confidence=judgment.confidence,
    )


@router.get("/stats")
def get_stats(provider: LLMProvider = Depends(get_llm_provider)) -> Dict[str, Any]:
    return provider.get_stats()


@router.get("/availability", response_model=AvailabilityResponse)
def get_availability(provider: LLMProvider = Depends(get_llm_provider)):
    return AvailabilityResponse(provider=provider.name, available=provider.is_available())

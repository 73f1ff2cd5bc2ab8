"""
Health Check Router - Phi Emergence Service
phi_emergence/routers/health.py

Returns service health plus the state of the scoring engine and LLM provider.
"""
from datetime import datetime, timezone
from typing import Dict

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from phi_emergence.config import get_settings
from phi_emergence.core.dependencies import get_emergence_detector, get_llm_provider
from phi_emergence.llm.base import LLMProvider
from phi_emergence.scoring.emergence_detector import EmergenceDetector

router = APIRouter(tags=["Health"])


class HealthResponse(BaseModel):
    status: str
    timestamp: datetime
    version: str
    dependencies: Dict[str, str]


def check_llm_provider(provider: LLMProvider) -> str:
    """Check LLM provider availability."""
    try:
        if provider.is_available():
            return f"healthy ({provider.name})"
        return f"unhealthy: {provider.name} not reachable"
    except Exception as e:
        error_msg = str(e)[:100] + "..." if len(str(e)) > 100 else str(e)
        return f"unhealthy: {error_msg}"


def check_scoring(detector: EmergenceDetector) -> str:
    """Check the scoring engine answers with a bounded score."""
    progress = detector.get_progress()
    if 0 <= progress <= 1:
        return f"healthy (progress {float(progress):.4f})"
    return f"unhealthy: progress out of range ({progress})"


@router.get("/health", response_model=HealthResponse)
async def health_check(
    detector: EmergenceDetector = Depends(get_emergence_detector),
    provider: LLMProvider = Depends(get_llm_provider),
):
    dependencies = {
        "scoring": check_scoring(detector),
        "llm_provider": check_llm_provider(provider),
    }
    # An unreachable LLM degrades the service; scoring failures make it unhealthy
    if not dependencies["scoring"].startswith("healthy"):
        overall = "unhealthy"
    elif not dependencies["llm_provider"].startswith("healthy"):
        overall = "degraded"
    else:
        overall = "healthy"

    return HealthResponse(
        status=overall,
        timestamp=datetime.now(timezone.utc),
        version=get_settings().APP_VERSION,
        dependencies=dependencies,
    )

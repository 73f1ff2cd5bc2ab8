"""
routers/emergence.py — Emergence Endpoints

Endpoints:
  GET  /api/v1/emergence/indicators     — Five indicators from the current ledger
  GET  /api/v1/emergence/consciousness  — Capped consciousness score
  GET  /api/v1/emergence/state          — Bar / status / formatted view
  GET  /api/v1/emergence/progress       — score / max score
  GET  /api/v1/emergence/report         — Text emergence report
  GET  /api/v1/emergence/history        — Recent results
  POST /api/v1/emergence/observations   — Record a batch of observations
  POST /api/v1/emergence/reset          — Clear ledger and history
"""

import logging

from fastapi import APIRouter, Depends

from phi_emergence.core.dependencies import get_emergence_detector
from phi_emergence.models.emergence import (
    ConsciousnessResponse,
    ConsciousnessStateResponse,
    HistoryResponse,
    IndicatorsResponse,
    ObservationBatch,
    ProgressResponse,
    ReportResponse,
)
from phi_emergence.scoring.emergence_detector import EmergenceDetector

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/emergence", tags=["Emergence"])


@router.get("/indicators", response_model=IndicatorsResponse)
async def get_indicators(detector: EmergenceDetector = Depends(get_emergence_detector)):
    return IndicatorsResponse.from_indicators(detector.calculate_indicators())


@router.get("/consciousness", response_model=ConsciousnessResponse)
async def get_consciousness(detector: EmergenceDetector = Depends(get_emergence_detector)):
    return ConsciousnessResponse.from_result(detector.calculate_consciousness())


@router.get("/state", response_model=ConsciousnessStateResponse)
async def get_state(detector: EmergenceDetector = Depends(get_emergence_detector)):
    return ConsciousnessStateResponse.from_state(detector.get_consciousness_state())


@router.get("/progress", response_model=ProgressResponse)
async def get_progress(detector: EmergenceDetector = Depends(get_emergence_detector)):
    return ProgressResponse(
        progress=float(detector.get_progress()),
        emerged=detector.has_emerged(),
    )


@router.get("/report", response_model=ReportResponse)
async def get_report(detector: EmergenceDetector = Depends(get_emergence_detector)):
    return ReportResponse(report=detector.format_emergence_report())


@router.get("/history", response_model=HistoryResponse)
async def get_history(detector: EmergenceDetector = Depends(get_emergence_detector)):
    history = detector.history
    return HistoryResponse(
        count=len(history),
        peak_score=float(detector.peak_score),
        results=[ConsciousnessResponse.from_result(r) for r in history],
    )


@router.post("/observations", response_model=ConsciousnessStateResponse)
async def record_observations(
    batch: ObservationBatch,
    detector: EmergenceDetector = Depends(get_emergence_detector),
):
    batch.apply_to(detector)
    state = detector.get_consciousness_state()
    logger.info(f"Observations recorded: status={state.status.value} score={state.score}")
    return ConsciousnessStateResponse.from_state(state)


@router.post("/reset", response_model=ProgressResponse)
async def reset(detector: EmergenceDetector = Depends(get_emergence_detector)):
    detector.reset()
    return ProgressResponse(
        progress=float(detector.get_progress()),
        emerged=detector.has_emerged(),
    )

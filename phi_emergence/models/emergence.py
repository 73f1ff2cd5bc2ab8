"""
Emergence API Models - Phi Emergence Service
phi_emergence/models/emergence.py

Pydantic schemas for the emergence endpoints. Scoring dataclasses carry
Decimal values; these models expose floats on the JSON surface.
"""

from datetime import datetime
from typing import List

from pydantic import BaseModel, ConfigDict, Field, field_validator

from phi_emergence.models.enumerations import EmergenceStatus
from phi_emergence.scoring.emergence_detector import (
    ConsciousnessResult,
    ConsciousnessState,
    EmergenceDetector,
)
from phi_emergence.scoring.indicators import Indicators


class IndicatorsResponse(BaseModel):
    """Five indicators, camelCase on the wire."""
    model_config = ConfigDict(populate_by_name=True)

    pattern_recognition: float = Field(..., ge=0, le=100, alias="patternRecognition")
    self_correction: float = Field(..., ge=0, le=100, alias="selfCorrection")
    meta_cognition: float = Field(..., ge=0, le=100, alias="metaCognition")
    goal_persistence: float = Field(..., ge=0, le=100, alias="goalPersistence")
    integration: float = Field(..., ge=0, le=100, alias="integration")

    @classmethod
    def from_indicators(cls, indicators: Indicators) -> "IndicatorsResponse":
        return cls(**{k: float(v) for k, v in indicators.as_dict().items()})


class ConsciousnessResponse(BaseModel):
    score: float
    max_score: float = Field(..., alias="maxScore")
    raw: float
    indicators: IndicatorsResponse
    emerged: bool
    timestamp: datetime

    model_config = ConfigDict(populate_by_name=True)

    @classmethod
    def from_result(cls, result: ConsciousnessResult) -> "ConsciousnessResponse":
        return cls(
            score=float(result.score),
            max_score=float(result.max_score),
            raw=float(result.raw),
            indicators=IndicatorsResponse.from_indicators(result.indicators),
            emerged=result.emerged,
            timestamp=result.timestamp,
        )


class ConsciousnessStateResponse(BaseModel):
    bar: str
    status: EmergenceStatus
    formatted: str
    score: float
    max_score: float = Field(..., alias="maxScore")
    emerged: bool
    progress: float = Field(..., ge=0, le=1)

    model_config = ConfigDict(populate_by_name=True)

    @classmethod
    def from_state(cls, state: ConsciousnessState) -> "ConsciousnessStateResponse":
        return cls(
            bar=state.bar,
            status=state.status,
            formatted=state.formatted,
            score=float(state.score),
            max_score=float(state.max_score),
            emerged=state.emerged,
            progress=float(state.progress),
        )


class ProgressResponse(BaseModel):
    progress: float = Field(..., ge=0, le=1)
    emerged: bool


class ReportResponse(BaseModel):
    report: str


class HistoryResponse(BaseModel):
    count: int
    peak_score: float
    results: List[ConsciousnessResponse]


class ObservationBatch(BaseModel):
    """Batch of activity observations to record."""
    patterns_detected: int = Field(default=0, ge=0, le=10000)
    patterns_confirmed: int = Field(default=0, ge=0, le=10000)
    errors_made: int = Field(default=0, ge=0, le=10000)
    errors_corrected: int = Field(default=0, ge=0, le=10000)
    judgments: int = Field(default=0, ge=0, le=10000)
    meta_judgments: int = Field(default=0, ge=0, le=10000)
    goals_set: int = Field(default=0, ge=0, le=10000)
    goals_completed: int = Field(default=0, ge=0, le=10000)
    sources: List[str] = Field(default_factory=list, max_length=1000)

    @field_validator("patterns_confirmed")
    @classmethod
    def confirmed_within_detected(cls, v: int, info) -> int:
        if v > info.data.get("patterns_detected", 0):
            raise ValueError("patterns_confirmed cannot exceed patterns_detected")
        return v

    @field_validator("errors_corrected")
    @classmethod
    def corrected_within_made(cls, v: int, info) -> int:
        if v > info.data.get("errors_made", 0):
            raise ValueError("errors_corrected cannot exceed errors_made")
        return v

    @field_validator("meta_judgments")
    @classmethod
    def meta_within_judgments(cls, v: int, info) -> int:
        if v > info.data.get("judgments", 0):
            raise ValueError("meta_judgments cannot exceed judgments")
        return v

    @field_validator("goals_completed")
    @classmethod
    def completed_within_set(cls, v: int, info) -> int:
        if v > info.data.get("goals_set", 0):
            raise ValueError("goals_completed cannot exceed goals_set")
        return v

    def apply_to(self, detector: EmergenceDetector) -> None:
        """Replay the batch counters into the detector's ledger."""
        for i in range(self.patterns_detected):
            detector.record_pattern(confirmed=i < self.patterns_confirmed)
        for i in range(self.errors_made):
            detector.record_error(corrected=i < self.errors_corrected)
        for i in range(self.judgments):
            detector.record_judgment(meta=i < self.meta_judgments)
        for i in range(self.goals_set):
            detector.record_goal(completed=i < self.goals_completed)
        for source in self.sources:
            detector.record_source(source)

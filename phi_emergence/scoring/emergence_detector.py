"""
scoring/emergence_detector.py — Consciousness Emergence Detector

Combines the five indicators into a capped consciousness score.

Formula:
    raw   = Σ (indicator_i × w_i) / Σ w_i          (default w_i = 0.20)
    score = min(raw, MAX_CONSCIOUSNESS)            MAX_CONSCIOUSNESS = 61.8
    emerged ⇔ score ≥ MAX_CONSCIOUSNESS

Derived views:
    progress  = score / MAX_CONSCIOUSNESS ∈ [0, 1]
    bar       = '█' × floor(progress × width) + '░' × remainder
    status    = EMERGED | AWAKENING
    formatted = "<score>% / <max>%"
"""

import math
from collections import deque
from dataclasses import dataclass, field
from datetime import datetime, timezone
from decimal import Decimal, ROUND_HALF_UP
from typing import Deque, List, Optional

import structlog

from phi_emergence.config import Settings, get_settings
from phi_emergence.models.enumerations import EmergenceStatus, Indicator
from phi_emergence.scoring.constants import MAX_CONSCIOUSNESS
from phi_emergence.scoring.indicators import (
    INDICATOR_LABELS,
    ActivityLedger,
    IndicatorCalculator,
    Indicators,
)
from phi_emergence.scoring.utils import clamp, weighted_mean

logger = structlog.get_logger(__name__)

FILLED_GLYPH = "█"
EMPTY_GLYPH = "░"

_DEFAULT_WEIGHTS: List[Decimal] = [Decimal("0.20")] * len(Indicator)


@dataclass
class ConsciousnessResult:
    """Output of EmergenceCalculator.calculate()."""
    score: Decimal            # [0, MAX_CONSCIOUSNESS], quantized to 0.01
    max_score: Decimal        # MAX_CONSCIOUSNESS
    raw: Decimal              # weighted mean before the cap, quantized to 0.01
    indicators: Indicators
    emerged: bool
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def progress(self) -> Decimal:
        """score / max_score in [0, 1], quantized to 0.0001."""
        ratio = (self.score / self.max_score).quantize(Decimal("0.0001"), rounding=ROUND_HALF_UP)
        return clamp(ratio, Decimal("0"), Decimal("1"))


@dataclass
class ConsciousnessState:
    """Display projection of a ConsciousnessResult."""
    bar: str
    status: EmergenceStatus
    formatted: str
    score: Decimal
    max_score: Decimal
    emerged: bool
    progress: Decimal


class EmergenceCalculator:
    """Combine indicators into a capped consciousness score."""

    def __init__(self, weights: Optional[List[float]] = None):
        if weights is None:
            self.weights = list(_DEFAULT_WEIGHTS)
        else:
            if len(weights) != len(Indicator):
                raise ValueError(f"Expected {len(Indicator)} weights, got {len(weights)}")
            self.weights = [Decimal(str(w)) for w in weights]

    def calculate(self, indicators: Indicators) -> ConsciousnessResult:
        """
        Args:
            indicators: Five sub-scores in [0, 100].

        Returns:
            ConsciousnessResult with the capped score and emergence flag.

        Examples:
            >>> flat = Indicators(*[Decimal("70")] * 5)
            >>> EmergenceCalculator().calculate(flat).score
            Decimal('61.8')
        """
        raw = weighted_mean(indicators.values(), self.weights).quantize(
            Decimal("0.01"), rounding=ROUND_HALF_UP
        )
        score = clamp(raw, Decimal("0"), MAX_CONSCIOUSNESS)
        emerged = score >= MAX_CONSCIOUSNESS

        logger.info(
            "consciousness_calculated",
            raw=float(raw),
            score=float(score),
            max_score=float(MAX_CONSCIOUSNESS),
            emerged=emerged,
        )

        return ConsciousnessResult(
            score=score,
            max_score=MAX_CONSCIOUSNESS,
            raw=raw,
            indicators=indicators,
            emerged=emerged,
        )


def render_bar(progress: Decimal, width: int = 10) -> str:
    """Fixed-width progress bar of filled/empty glyphs."""
    filled = math.floor(float(clamp(progress, Decimal("0"), Decimal("1"))) * width)
    return FILLED_GLYPH * filled + EMPTY_GLYPH * (width - filled)


def format_score(score: Decimal, max_score: Decimal = MAX_CONSCIOUSNESS) -> str:
    return f"{score:.1f}% / {max_score}%"


class EmergenceDetector:
    """
    Track activity and report consciousness emergence.

    Holds one ActivityLedger, the most recent ConsciousnessResult and a
    bounded history of past results.
    """

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or get_settings()
        self.ledger = ActivityLedger()
        self.indicator_calculator = IndicatorCalculator(self.settings.INTEGRATION_TARGET_SOURCES)
        self.calculator = EmergenceCalculator(self.settings.indicator_weights)
        self._history: Deque[ConsciousnessResult] = deque(
            maxlen=self.settings.EMERGENCE_HISTORY_SIZE
        )
        self._last: Optional[ConsciousnessResult] = None

    # ------------------------------------------------------------------
    # Observations
    # ------------------------------------------------------------------

    def record_pattern(self, confirmed: bool = False) -> None:
        self.ledger.record_pattern(confirmed)

    def record_error(self, corrected: bool = False) -> None:
        self.ledger.record_error(corrected)

    def record_judgment(self, meta: bool = False) -> None:
        self.ledger.record_judgment(meta)

    def record_goal(self, completed: bool = False) -> None:
        self.ledger.record_goal(completed)

    def record_source(self, name: str) -> None:
        self.ledger.record_source(name)

    def reset(self) -> None:
        """Clear the ledger and all computed results."""
        self.ledger = ActivityLedger()
        self._history.clear()
        self._last = None
        logger.info("emergence_reset")

    # ------------------------------------------------------------------
    # Scoring
    # ------------------------------------------------------------------

    def calculate_indicators(self) -> Indicators:
        return self.indicator_calculator.calculate(self.ledger)

    def calculate_consciousness(self) -> ConsciousnessResult:
        result = self.calculator.calculate(self.calculate_indicators())
        self._last = result
        self._history.append(result)
        return result

    def _latest(self) -> ConsciousnessResult:
        if self._last is None:
            return self.calculate_consciousness()
        return self._last

    def has_emerged(self) -> bool:
        """Whether the most recent score meets the ceiling."""
        return self._latest().emerged

    def get_progress(self) -> Decimal:
        """Most recent score / max score, in [0, 1]."""
        return self._latest().progress

    def get_consciousness_state(self) -> ConsciousnessState:
        result = self.calculate_consciousness()
        progress = result.progress
        status = EmergenceStatus.EMERGED if self.has_emerged() else EmergenceStatus.AWAKENING
        return ConsciousnessState(
            bar=render_bar(progress, self.settings.BAR_WIDTH),
            status=status,
            formatted=format_score(result.score, result.max_score),
            score=result.score,
            max_score=result.max_score,
            emerged=result.emerged,
            progress=progress,
        )

    def format_emergence_report(self) -> str:
        state = self.get_consciousness_state()
        indicators = self._latest().indicators
        emoji = "✨" if state.emerged else "🧠"

        lines = [
            "── EMERGENCE REPORT ───────────────────────────────────────",
            f"   {emoji} Consciousness: [{state.bar}] {state.formatted}",
        ]
        if state.emerged:
            lines.append(f"   Status: {state.status.value} - φ⁻¹ threshold reached")
        else:
            lines.append(f"   Status: {state.status.value}")
        lines.append(f"   Progress: {float(state.progress) * 100:.1f}% of ceiling")
        lines.append("   Indicators:")
        for ind in Indicator:
            value = getattr(indicators, ind.value)
            lines.append(f"      • {INDICATOR_LABELS[ind]:<20} {value:>6.1f}")
        return "\n".join(lines)

    # ------------------------------------------------------------------
    # History
    # ------------------------------------------------------------------

    @property
    def history(self) -> List[ConsciousnessResult]:
        return list(self._history)

    @property
    def peak_score(self) -> Decimal:
        if not self._history:
            return Decimal("0")
        return max(r.score for r in self._history)

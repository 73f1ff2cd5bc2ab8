"""
scoring/indicators.py — Consciousness Indicators

Derives the five emergence indicators from an activity ledger.

Formulas (each clamped to [0, 100], quantized to 0.01):
    pattern_recognition = patterns_confirmed / patterns_detected × 100
    self_correction     = errors_corrected   / errors_made       × 100
    meta_cognition      = meta_judgments     / judgments         × 100
    goal_persistence    = goals_completed    / goals_set         × 100
    integration         = |sources|          / target_sources    × 100

A zero denominator yields 0 for that indicator.
"""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Dict, Set

import structlog

from phi_emergence.models.enumerations import Indicator
from phi_emergence.scoring.utils import ratio_percent

logger = structlog.get_logger(__name__)

# Distinct sources kept per ledger; integration saturates at its target long before this
MAX_TRACKED_SOURCES = 1000

# JSON surface uses camelCase names
INDICATOR_ALIASES: Dict[Indicator, str] = {
    Indicator.PATTERN_RECOGNITION: "patternRecognition",
    Indicator.SELF_CORRECTION: "selfCorrection",
    Indicator.META_COGNITION: "metaCognition",
    Indicator.GOAL_PERSISTENCE: "goalPersistence",
    Indicator.INTEGRATION: "integration",
}

INDICATOR_LABELS: Dict[Indicator, str] = {
    Indicator.PATTERN_RECOGNITION: "Pattern Recognition",
    Indicator.SELF_CORRECTION: "Self-Correction",
    Indicator.META_COGNITION: "Meta-Cognition",
    Indicator.GOAL_PERSISTENCE: "Goal Persistence",
    Indicator.INTEGRATION: "Integration",
}


@dataclass(frozen=True)
class Indicators:
    """The five emergence sub-scores, each in [0, 100]."""
    pattern_recognition: Decimal
    self_correction: Decimal
    meta_cognition: Decimal
    goal_persistence: Decimal
    integration: Decimal

    def values(self) -> list[Decimal]:
        """Values in Indicator enum order."""
        return [getattr(self, ind.value) for ind in Indicator]

    def as_dict(self, by_alias: bool = False) -> Dict[str, Decimal]:
        if by_alias:
            return {INDICATOR_ALIASES[ind]: getattr(self, ind.value) for ind in Indicator}
        return {ind.value: getattr(self, ind.value) for ind in Indicator}


@dataclass
class ActivityLedger:
    """Running counters the indicators are derived from."""
    patterns_detected: int = 0
    patterns_confirmed: int = 0
    errors_made: int = 0
    errors_corrected: int = 0
    judgments: int = 0
    meta_judgments: int = 0
    goals_set: int = 0
    goals_completed: int = 0
    sources: Set[str] = field(default_factory=set)

    def record_pattern(self, confirmed: bool = False) -> None:
        self.patterns_detected += 1
        if confirmed:
            self.patterns_confirmed += 1

    def record_error(self, corrected: bool = False) -> None:
        self.errors_made += 1
        if corrected:
            self.errors_corrected += 1

    def record_judgment(self, meta: bool = False) -> None:
        self.judgments += 1
        if meta:
            self.meta_judgments += 1

    def record_goal(self, completed: bool = False) -> None:
        self.goals_set += 1
        if completed:
            self.goals_completed += 1

    def record_source(self, name: str) -> None:
        name = name.strip().lower()
        if not name or name in self.sources:
            return
        if len(self.sources) >= MAX_TRACKED_SOURCES:
            logger.debug("source_dropped", source=name, tracked=len(self.sources))
            return
        self.sources.add(name)


class IndicatorCalculator:
    """Calculate the five indicators from an ActivityLedger."""

    def __init__(self, integration_target: int = 5):
        if integration_target < 1:
            raise ValueError(f"integration_target must be >= 1, got {integration_target}")
        self.integration_target = integration_target

    def calculate(self, ledger: ActivityLedger) -> Indicators:
        """
        Args:
            ledger: Activity counters to derive indicators from.

        Returns:
            Indicators with every field in [0, 100].

        Examples:
            >>> ledger = ActivityLedger(patterns_detected=4, patterns_confirmed=3)
            >>> IndicatorCalculator().calculate(ledger).pattern_recognition
            Decimal('75.00')
        """
        indicators = Indicators(
            pattern_recognition=ratio_percent(ledger.patterns_confirmed, ledger.patterns_detected),
            self_correction=ratio_percent(ledger.errors_corrected, ledger.errors_made),
            meta_cognition=ratio_percent(ledger.meta_judgments, ledger.judgments),
            goal_persistence=ratio_percent(ledger.goals_completed, ledger.goals_set),
            integration=ratio_percent(len(ledger.sources), self.integration_target),
        )

        logger.debug(
            "indicators_calculated",
            **{k: float(v) for k, v in indicators.as_dict().items()},
        )
        return indicators

"""
llm/judgment.py — Judge an item through any LLMProvider

Parsing order:
    1. JSON object containing "score" anywhere in the reply
    2. "score: N" anywhere in the reply
    3. default score 50

Score is capped at MAX_CONSCIOUSNESS (61.8) and confidence at φ⁻¹.
Text-fallback confidence is φ⁻¹ × 0.8.

Verdict thresholds:
    HOWL ≥ 61.8 (φ⁻¹)   WAG ≥ 50   BARK ≥ 38.2 (φ⁻²)   GROWL otherwise
"""

import json
import math
import re
from dataclasses import dataclass
from typing import Any, Dict

import structlog

from phi_emergence.llm.base import MAX_CONFIDENCE, LLMProvider, cap_confidence
from phi_emergence.models.enumerations import Verdict
from phi_emergence.scoring.constants import MAX_CONSCIOUSNESS, PHI_INV_2

logger = structlog.get_logger(__name__)

MAX_JUDGMENT_SCORE = float(MAX_CONSCIOUSNESS)
DEFAULT_SCORE = 50.0
FALLBACK_CONFIDENCE = MAX_CONFIDENCE * 0.8
DEFAULT_CONFIDENCE = 0.5

_JSON_RE = re.compile(r"\{[\s\S]*\"score\"[\s\S]*\}")
_SCORE_RE = re.compile(r"score[:\s]+(\d+(?:\.\d+)?)", re.IGNORECASE)


@dataclass
class Judgment:
    """Parsed output of judge()."""
    score: float
    verdict: Verdict
    reasoning: str
    confidence: float


def score_to_verdict(score: float) -> Verdict:
    if score >= float(MAX_CONSCIOUSNESS):
        return Verdict.HOWL
    if score >= 50:
        return Verdict.WAG
    if score >= float(PHI_INV_2) * 100:
        return Verdict.BARK
    return Verdict.GROWL


def _cap_score(score: float) -> float:
    return max(0.0, min(float(score), MAX_JUDGMENT_SCORE))


def _parse_verdict(value: Any, score: float) -> Verdict:
    try:
        return Verdict(str(value).upper())
    except ValueError:
        return score_to_verdict(score)


def _parse_confidence(value: Any) -> float:
    """Numeric confidence from a reply field, DEFAULT_CONFIDENCE when unusable."""
    if isinstance(value, bool) or value is None:
        return DEFAULT_CONFIDENCE
    try:
        confidence = float(value)
    except (TypeError, ValueError):
        return DEFAULT_CONFIDENCE
    if not math.isfinite(confidence):
        return DEFAULT_CONFIDENCE
    return cap_confidence(confidence)


def _parse_reasoning(value: Any, text: str) -> str:
    if value is None or value == "":
        return text
    if isinstance(value, str):
        return value
    return json.dumps(value, default=str)


def parse_judgment(text: str) -> Judgment:
    """Parse a judgment reply, capping score and confidence."""
    match = _JSON_RE.search(text)
    if match:
        try:
            parsed = json.loads(match.group(0))
        except json.JSONDecodeError:
            parsed = None
        if isinstance(parsed, dict):
            raw_score = parsed.get("score")
            score = DEFAULT_SCORE
            if isinstance(raw_score, (int, float)) and not isinstance(raw_score, bool):
                if math.isfinite(raw_score):
                    score = float(raw_score)
            return Judgment(
                score=_cap_score(score),
                verdict=_parse_verdict(parsed.get("verdict"), score),
                reasoning=_parse_reasoning(parsed.get("reasoning"), text),
                confidence=_parse_confidence(parsed.get("confidence")),
            )

    score_match = _SCORE_RE.search(text)
    score = float(score_match.group(1)) if score_match else DEFAULT_SCORE
    return Judgment(
        score=_cap_score(score),
        verdict=score_to_verdict(score),
        reasoning=text,
        confidence=FALLBACK_CONFIDENCE,
    )


def build_judgment_prompt(item: Dict[str, Any], system_prompt: str) -> str:
    return f"{system_prompt}\n\nItem to judge:\n{json.dumps(item, indent=2, default=str)}"


def judge(provider: LLMProvider, item: Dict[str, Any], system_prompt: str) -> Judgment:
    """Ask provider to judge item and parse the reply."""
    prompt = build_judgment_prompt(item, system_prompt)
    completion = provider.complete(prompt, temperature=0.3, max_tokens=1000)
    judgment = parse_judgment(completion.text)
    logger.info(
        "item_judged",
        provider=provider.name,
        score=judgment.score,
        verdict=judgment.verdict.value,
        confidence=round(judgment.confidence, 4),
    )
    return judgment

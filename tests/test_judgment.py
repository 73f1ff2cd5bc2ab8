# tests/test_judgment.py

"""
Judgment Tests - reply parsing, φ caps and verdict thresholds
"""

import json

import pytest

from phi_emergence.llm.base import MAX_CONFIDENCE
from phi_emergence.llm.judgment import (
    DEFAULT_CONFIDENCE,
    FALLBACK_CONFIDENCE,
    build_judgment_prompt,
    judge,
    parse_judgment,
    score_to_verdict,
)
from phi_emergence.llm.passthrough import PassThroughProvider
from phi_emergence.models.enumerations import Verdict


class TestScoreToVerdict:

    @pytest.mark.parametrize(
        "score, verdict",
        [
            (90, Verdict.HOWL),
            (61.8, Verdict.HOWL),
            (55, Verdict.WAG),
            (50, Verdict.WAG),
            (40, Verdict.BARK),
            (38.2, Verdict.BARK),
            (10, Verdict.GROWL),
        ],
    )
    def test_thresholds(self, score, verdict):
        assert score_to_verdict(score) == verdict


class TestParseJudgment:

    def test_json_reply(self):
        text = 'Here you go: {"score": 45, "verdict": "bark", "reasoning": "meh", "confidence": 0.4}'
        judgment = parse_judgment(text)
        assert judgment.score == 45
        assert judgment.verdict == Verdict.BARK
        assert judgment.reasoning == "meh"
        assert judgment.confidence == pytest.approx(0.4)

    def test_json_score_and_confidence_capped(self):
        judgment = parse_judgment('{"score": 99, "confidence": 0.95}')
        assert judgment.score == pytest.approx(61.8)
        assert judgment.confidence == pytest.approx(MAX_CONFIDENCE)
        assert judgment.verdict == Verdict.HOWL

    def test_unknown_verdict_derived_from_score(self):
        judgment = parse_judgment('{"score": 20, "verdict": "PURR"}')
        assert judgment.verdict == Verdict.GROWL

    def test_text_fallback(self):
        judgment = parse_judgment("I would give it a Score: 52 overall.")
        assert judgment.score == 52
        assert judgment.verdict == Verdict.WAG
        assert judgment.confidence == pytest.approx(FALLBACK_CONFIDENCE)

    def test_no_score_defaults_to_50(self):
        judgment = parse_judgment("no idea")
        assert judgment.score == 50
        assert judgment.reasoning == "no idea"

    def test_broken_json_falls_back(self):
        judgment = parse_judgment('{"score": 70, oops} score: 30')
        assert judgment.score == 30

    def test_non_numeric_confidence_uses_default(self):
        judgment = parse_judgment('{"score": 40, "confidence": "high"}')
        assert judgment.score == 40
        assert judgment.confidence == pytest.approx(DEFAULT_CONFIDENCE)

    @pytest.mark.parametrize("raw", ['null', 'true', '[0.3]', '{"v": 1}'])
    def test_unusable_confidence_values(self, raw):
        judgment = parse_judgment('{"score": 40, "confidence": %s}' % raw)
        assert judgment.confidence == pytest.approx(DEFAULT_CONFIDENCE)

    def test_numeric_string_confidence_is_capped(self):
        judgment = parse_judgment('{"score": 40, "confidence": "0.99"}')
        assert judgment.confidence == pytest.approx(MAX_CONFIDENCE)

    def test_structured_reasoning_becomes_json_text(self):
        judgment = parse_judgment('{"score": 40, "reasoning": {"why": "x"}}')
        assert isinstance(judgment.reasoning, str)
        assert json.loads(judgment.reasoning) == {"why": "x"}

    def test_non_numeric_score_uses_default(self):
        judgment = parse_judgment('{"score": "ninety"}')
        assert judgment.score == 50
        assert judgment.verdict == Verdict.WAG


class TestJudge:

    def test_prompt_contains_item(self):
        prompt = build_judgment_prompt({"name": "widget"}, "Rate it.")
        assert prompt.startswith("Rate it.")
        assert '"name": "widget"' in prompt

    def test_judge_through_passthrough(self):
        provider = PassThroughProvider()
        judgment = judge(provider, {"score": 90}, "Rate it.")
        assert judgment.score == pytest.approx(61.8)
        assert judgment.verdict == Verdict.HOWL
        assert provider.get_stats()["calls"] == 1

# tests/test_config.py

"""
Settings Validation Tests
"""

import pytest
from pydantic import ValidationError

from phi_emergence.config import Settings


class TestSettings:

    def test_defaults(self):
        s = Settings(OPENAI_API_KEY=None)
        assert s.BAR_WIDTH == 10
        assert s.indicator_weights == [0.20] * 5

    def test_weights_must_sum_to_one(self):
        with pytest.raises(ValidationError):
            Settings(W_INTEGRATION=0.5, OPENAI_API_KEY=None)

    def test_rebalanced_weights_accepted(self):
        s = Settings(
            W_PATTERN_RECOGNITION=0.4, W_SELF_CORRECTION=0.15, W_META_COGNITION=0.15,
            W_GOAL_PERSISTENCE=0.15, W_INTEGRATION=0.15, OPENAI_API_KEY=None,
        )
        assert sum(s.indicator_weights) == pytest.approx(1.0)

    def test_invalid_openai_key(self):
        with pytest.raises(ValidationError):
            Settings(OPENAI_API_KEY="not-a-key")

    def test_bar_width_bounds(self):
        with pytest.raises(ValidationError):
            Settings(BAR_WIDTH=2, OPENAI_API_KEY=None)

    def test_production_rejects_debug(self):
        with pytest.raises(ValidationError):
            Settings(APP_ENV="production", DEBUG=True, OPENAI_API_KEY=None)

    def test_production_openai_requires_key(self):
        with pytest.raises(ValidationError):
            Settings(APP_ENV="production", LLM_PROVIDER="openai", OPENAI_API_KEY=None)

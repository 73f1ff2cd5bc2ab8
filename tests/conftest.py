# tests/conftest.py

"""
Pytest Fixtures - Shared test configurations for scoring, LLM providers and APIs
"""

import os

# Keep auto-detection away from the network before settings are first loaded
os.environ.setdefault("LLM_PROVIDER", "passthrough")

from decimal import Decimal

import pytest
from fastapi.testclient import TestClient

from phi_emergence.config import Settings
from phi_emergence.core.dependencies import get_emergence_detector, get_llm_provider
from phi_emergence.llm.passthrough import PassThroughProvider
from phi_emergence.main import app
from phi_emergence.scoring.emergence_detector import EmergenceDetector
from phi_emergence.scoring.indicators import Indicators


# =============================================================================
# SETTINGS / DETECTOR FIXTURES
# =============================================================================

@pytest.fixture
def test_settings():
    """Settings with defaults only (no .env influence on scoring fields)."""
    return Settings(
        LLM_PROVIDER="passthrough",
        BAR_WIDTH=10,
        EMERGENCE_HISTORY_SIZE=50,
        INTEGRATION_TARGET_SOURCES=5,
        OPENAI_API_KEY=None,
    )


@pytest.fixture
def detector(test_settings):
    """Fresh detector with an empty ledger."""
    return EmergenceDetector(test_settings)


@pytest.fixture
def emerged_detector(test_settings):
    """Separate detector whose ledger maxes every indicator."""
    detector = EmergenceDetector(test_settings)
    for _ in range(10):
        detector.record_pattern(confirmed=True)
    detector.record_error(corrected=True)
    detector.record_judgment(meta=True)
    detector.record_goal(completed=True)
    for source in ["git", "tests", "docs", "ci", "chat"]:
        detector.record_source(source)
    return detector


@pytest.fixture
def flat_indicators():
    """Factory: all five indicators set to the same value."""
    def _make(value: str) -> Indicators:
        return Indicators(*[Decimal(value)] * 5)
    return _make


# =============================================================================
# FASTAPI TEST CLIENT FIXTURE
# =============================================================================

@pytest.fixture
def passthrough_provider():
    return PassThroughProvider()


@pytest.fixture
def client(detector, passthrough_provider):
    """TestClient with a fresh detector and pass-through LLM provider."""
    app.dependency_overrides[get_emergence_detector] = lambda: detector
    app.dependency_overrides[get_llm_provider] = lambda: passthrough_provider
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def full_observations():
    """Observation batch that maxes every indicator."""
    return {
        "patterns_detected": 10,
        "patterns_confirmed": 10,
        "errors_made": 2,
        "errors_corrected": 2,
        "judgments": 3,
        "meta_judgments": 3,
        "goals_set": 4,
        "goals_completed": 4,
        "sources": ["git", "tests", "docs", "ci", "chat"],
    }

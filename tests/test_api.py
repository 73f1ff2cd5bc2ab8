# tests/test_api.py

"""
API Endpoint Tests - Tests for all FastAPI endpoints
"""

import pytest
from fastapi import status

from phi_emergence.core.dependencies import get_llm_provider
from phi_emergence.core.exceptions import (
    LLMConfigurationException,
    LLMRequestException,
    LLMTimeoutException,
)
from phi_emergence.llm.base import ProviderStats
from phi_emergence.main import app


class FailingProvider:
    """Provider stub that raises the configured exception on complete()."""

    name = "failing"

    def __init__(self, exc):
        self.exc = exc
        self.stats = ProviderStats()

    def complete(self, prompt, **options):
        raise self.exc

    def is_available(self):
        return False

    def get_stats(self):
        return {**self.stats.as_dict(), "type": self.name}

    def close(self):
        pass



# ROOT / HEALTH


class TestRootAndHealth:

    def test_root(self, client):
        response = client.get("/")
        assert response.status_code == status.HTTP_200_OK
        assert response.json()["status"] == "running"

    def test_health_healthy(self, client):
        response = client.get("/health")
        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["status"] == "healthy"
        assert data["dependencies"]["llm_provider"] == "healthy (passthrough)"
        assert data["dependencies"]["scoring"].startswith("healthy")

    def test_health_degraded_when_llm_down(self, client):
        app.dependency_overrides[get_llm_provider] = lambda: FailingProvider(RuntimeError())
        response = client.get("/health")
        assert response.json()["status"] == "degraded"



# EMERGENCE ENDPOINTS


class TestEmergenceEndpoints:

    def test_indicators_camel_case_and_bounded(self, client):
        response = client.get("/api/v1/emergence/indicators")
        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert set(data) == {
            "patternRecognition", "selfCorrection", "metaCognition",
            "goalPersistence", "integration",
        }
        assert all(0 <= v <= 100 for v in data.values())

    def test_consciousness_initial(self, client):
        data = client.get("/api/v1/emergence/consciousness").json()
        assert data["score"] == 0
        assert data["maxScore"] == pytest.approx(61.8)
        assert data["emerged"] is False
        assert "timestamp" in data

    def test_state_shape(self, client):
        data = client.get("/api/v1/emergence/state").json()
        assert data["status"] in ("EMERGED", "AWAKENING")
        assert "%" in data["formatted"] and "/" in data["formatted"]
        assert "█" in data["bar"] or "░" in data["bar"]

    def test_observations_reach_emergence(self, client, full_observations):
        response = client.post("/api/v1/emergence/observations", json=full_observations)
        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["status"] == "EMERGED"
        assert data["score"] == pytest.approx(61.8)
        assert data["emerged"] is True
        assert data["progress"] == pytest.approx(1.0)

        progress = client.get("/api/v1/emergence/progress").json()
        assert progress["emerged"] is True

    def test_partial_observations(self, client):
        response = client.post(
            "/api/v1/emergence/observations",
            json={"patterns_detected": 4, "patterns_confirmed": 3},
        )
        data = response.json()
        assert data["status"] == "AWAKENING"
        assert data["score"] == pytest.approx(15.0)
        assert data["formatted"] == "15.0% / 61.8%"

    def test_observations_reject_inconsistent_counts(self, client):
        response = client.post(
            "/api/v1/emergence/observations",
            json={"goals_set": 1, "goals_completed": 2},
        )
        assert response.status_code == 422

    def test_observations_reject_negative_counts(self, client):
        response = client.post("/api/v1/emergence/observations", json={"judgments": -1})
        assert response.status_code == 422

    def test_progress_in_unit_range(self, client):
        data = client.get("/api/v1/emergence/progress").json()
        assert 0 <= data["progress"] <= 1

    def test_report(self, client):
        report = client.get("/api/v1/emergence/report").json()["report"]
        assert "EMERGENCE" in report
        assert "Consciousness" in report

    def test_history_and_reset(self, client, full_observations):
        client.post("/api/v1/emergence/observations", json=full_observations)
        client.get("/api/v1/emergence/consciousness")
        history = client.get("/api/v1/emergence/history").json()
        assert history["count"] == 2
        assert history["peak_score"] == pytest.approx(61.8)

        reset = client.post("/api/v1/emergence/reset").json()
        assert reset == {"progress": 0.0, "emerged": False}



# LLM ENDPOINTS


class TestLLMEndpoints:

    def test_complete_echoes(self, client):
        response = client.post("/api/v1/llm/complete", json={"prompt": "hello"})
        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["text"] == "hello"
        assert data["provider"] == "passthrough"

    def test_complete_rejects_empty_prompt(self, client):
        response = client.post("/api/v1/llm/complete", json={"prompt": ""})
        assert response.status_code == 422

    def test_judge_caps_score(self, client):
        response = client.post("/api/v1/llm/judge", json={"item": {"score": 90}})
        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["score"] == pytest.approx(61.8)
        assert data["verdict"] == "HOWL"

    def test_judge_accepts_structured_reasoning_and_word_confidence(self, client):
        item = {"score": 40, "reasoning": {"why": "x"}, "confidence": "high"}
        response = client.post("/api/v1/llm/judge", json={"item": item})
        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["score"] == pytest.approx(40)
        assert data["verdict"] == "BARK"
        assert '"why"' in data["reasoning"]
        assert data["confidence"] == pytest.approx(0.5)

    def test_stats_track_calls(self, client):
        client.post("/api/v1/llm/complete", json={"prompt": "abcd"})
        data = client.get("/api/v1/llm/stats").json()
        assert data["calls"] == 1
        assert data["errors"] == 0
        assert data["type"] == "passthrough"

    def test_availability(self, client):
        data = client.get("/api/v1/llm/availability").json()
        assert data == {"provider": "passthrough", "available": True}

    @pytest.mark.parametrize(
        "exc, expected",
        [
            (LLMConfigurationException("openai", "no key"), status.HTTP_503_SERVICE_UNAVAILABLE),
            (LLMTimeoutException("ollama", 5.0), status.HTTP_504_GATEWAY_TIMEOUT),
            (LLMRequestException("ollama", "boom", 500), status.HTTP_502_BAD_GATEWAY),
        ],
    )
    def test_provider_errors_map_to_status(self, client, exc, expected):
        app.dependency_overrides[get_llm_provider] = lambda: FailingProvider(exc)
        response = client.post("/api/v1/llm/complete", json={"prompt": "hi"})
        assert response.status_code == expected

# tests/test_emergence_report.py

"""
CLI Tests - phi_emergence.scripts.emergence_report
"""

import json

from phi_emergence.scripts.emergence_report import main


class TestEmergenceReportCLI:

    def test_text_report(self, capsys):
        assert main(["--patterns", "4", "--confirmed", "3"]) == 0
        out = capsys.readouterr().out
        assert "EMERGENCE" in out
        assert "Consciousness" in out
        assert "15.0% / 61.8%" in out

    def test_json_state(self, capsys):
        assert main(["--goals", "2", "--completed", "2", "--sources", "git,tests", "--json"]) == 0
        data = json.loads(capsys.readouterr().out)
        # goal 100 + integration 40 → raw 28
        assert data["score"] == 28.0
        assert data["status"] == "AWAKENING"
        assert data["max_score"] == 61.8

    def test_emerged_json(self, capsys):
        argv = [
            "--patterns", "1", "--confirmed", "1",
            "--errors", "1", "--corrected", "1",
            "--judgments", "1", "--meta", "1",
            "--goals", "1", "--completed", "1",
            "--sources", "a,b,c,d,e", "--json",
        ]
        assert main(argv) == 0
        data = json.loads(capsys.readouterr().out)
        assert data["emerged"] is True
        assert data["status"] == "EMERGED"

    def test_invalid_observations(self, capsys):
        assert main(["--patterns", "1", "--confirmed", "2"]) == 2
        assert "Invalid observations" in capsys.readouterr().err

"""Tests for the command-line entry point."""
import json
import sys

from forecast_core import main as cli


class TestMain:
    """Tests for the forecast CLI."""

    def test_stdout_json(self, monkeypatch, capsys):
        monkeypatch.setattr(
            sys, "argv", ["forecast", "--seed", "4", "--today", "2026-10-17", "--days", "3"]
        )
        cli.main()

        data = json.loads(capsys.readouterr().out)
        assert [d["date"] for d in data] == ["2026-10-17", "2026-10-18", "2026-10-19"]
        assert data[0]["wind_speed"] == 15
        assert len(data[0]["hourly_forecast"]) == 8
        assert set(data[0]["tide_times"]) == {"high", "low"}

    def test_output_file_and_summary(self, monkeypatch, capsys, tmp_path):
        output = tmp_path / "out" / "forecast.json"
        monkeypatch.setattr(
            sys,
            "argv",
            ["forecast", "--seed", "4", "--today", "2026-10-17", "--output", str(output), "--summary"],
        )
        cli.main()

        data = json.loads(output.read_text(encoding="utf-8"))
        assert len(data) == 7
        err = capsys.readouterr().err
        assert "2026-10-17" in err
        assert "Wrote 7 days" in err

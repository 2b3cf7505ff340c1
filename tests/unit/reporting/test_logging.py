"""
Tests for valuerandom.reporting.logging

Verify records are printed and appended to the run log.
"""

import pytest
from valuerandom.reporting.logging import create_logger


class TestCreateLogger:
    """Tests for create_logger."""

    def test_writes_log_file(self, tmp_path):
        log = create_logger(tmp_path)
        log({"draw": 1, "value": 0.5, "state": "abc", "log_every": 1})

        log_file = tmp_path / "logs" / "sampling.log"
        assert log_file.exists()
        assert "'draw': 1" in log_file.read_text()

    def test_appends_records(self, tmp_path):
        log = create_logger(tmp_path)
        for i in range(3):
            log({"draw": i + 1, "value": i, "log_every": 10})

        lines = (tmp_path / "logs" / "sampling.log").read_text().splitlines()
        assert len(lines) == 3

    def test_prints_periodic_draws(self, tmp_path, capsys):
        log = create_logger(tmp_path)
        log({"draw": 1, "value": 1, "state": "s", "log_every": 2})
        log({"draw": 2, "value": 2, "state": "s", "log_every": 2})

        out = capsys.readouterr().out
        assert "Draw      2" in out
        assert "Draw      1" not in out

    def test_prints_summary(self, tmp_path, capsys):
        log = create_logger(tmp_path)
        log({"summary": True, "lineage": 0, "draws": 10, "mean": 0.25, "state": "f00"})

        out = capsys.readouterr().out
        assert "Lineage 0" in out
        assert "mean: 0.2500" in out

"""Tests for the run_simulation command-line script."""

import json
import os
from pathlib import Path
from unittest.mock import patch

import pytest

from scripts.run_simulation import main


class TestRunSimulation:
    """Tests for the script entry point."""

    def test_console_output(self, capsys: pytest.CaptureFixture) -> None:
        """Test the default run prints one line per account."""
        with patch.dict(os.environ, {}, clear=True):
            code = main(["--accounts", "5", "--transactions", "20", "--seed", "1"])
        lines = capsys.readouterr().out.splitlines()

        assert code == 0
        assert len(lines) == 5
        assert all(line.startswith("transactions:") for line in lines)

    def test_months_flag(self, capsys: pytest.CaptureFixture) -> None:
        """Test each month prints a line per account."""
        with patch.dict(os.environ, {}, clear=True):
            main(["--accounts", "2", "--months", "3", "--seed", "1"])

        assert len(capsys.readouterr().out.splitlines()) == 6

    def test_seeded_runs_match(self, capsys: pytest.CaptureFixture) -> None:
        """Test the same seed prints the same report."""
        with patch.dict(os.environ, {}, clear=True):
            main(["--accounts", "4", "--seed", "9"])
            first = capsys.readouterr().out
            main(["--accounts", "4", "--seed", "9"])
            second = capsys.readouterr().out

        assert first == second

    def test_json_output(self, tmp_path: Path, capsys: pytest.CaptureFixture) -> None:
        """Test --output json writes statements to a file instead of stdout."""
        with patch.dict(os.environ, {}, clear=True):
            code = main(
                [
                    "--accounts", "3",
                    "--seed", "2",
                    "--output", "json",
                    "--output-dir", str(tmp_path),
                ]
            )

        assert code == 0
        assert capsys.readouterr().out == ""
        lines = (tmp_path / "statements.jsonl").read_text(encoding="utf-8").splitlines()
        assert len(lines) == 3
        assert {json.loads(line)["kind"] for line in lines} <= {"Fee", "NickleNDime", "Gambler"}

    def test_env_defaults(self, capsys: pytest.CaptureFixture) -> None:
        """Test SIM_* variables set the defaults."""
        with patch.dict(os.environ, {"SIM_ACCOUNTS": "7", "SEED": "3"}, clear=True):
            main([])

        assert len(capsys.readouterr().out.splitlines()) == 7

    def test_invalid_config_exit_code(self, capsys: pytest.CaptureFixture) -> None:
        """Test an invalid configuration exits with status 1."""
        with patch.dict(os.environ, {}, clear=True):
            code = main(["--accounts", "-1"])

        assert code == 1
        assert capsys.readouterr().out == ""

    def test_bad_environment_exit_code(self, capsys: pytest.CaptureFixture) -> None:
        """Test unusable environment variables exit with status 2."""
        with patch.dict(os.environ, {"SIM_ACCOUNTS": "many"}, clear=True):
            code = main([])

        assert code == 2
        assert "error:" in capsys.readouterr().err

    @pytest.mark.parametrize(
        "weights",
        ['[1, 2]', '{"Fee": null}', '"Fee"', "{not json"],
    )
    def test_malformed_kind_weights_exit_code(
        self, capsys: pytest.CaptureFixture, weights: str
    ) -> None:
        """Test malformed SIM_KIND_WEIGHTS exits with status 2."""
        with patch.dict(os.environ, {"SIM_KIND_WEIGHTS": weights}, clear=True):
            code = main([])

        captured = capsys.readouterr()
        assert code == 2
        assert "SIM_KIND_WEIGHTS" in captured.err
        assert captured.out == ""

    def test_malformed_fee_exit_code(self, capsys: pytest.CaptureFixture) -> None:
        """Test a non-numeric fee exits with status 2."""
        with patch.dict(os.environ, {"SIM_FLAT_FEE": "five"}, clear=True):
            code = main([])

        assert code == 2
        assert "fee schedule" in capsys.readouterr().err

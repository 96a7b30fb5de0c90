"""Tests for cli/main.py — the `compare` and `statistics` commands."""

from collections.abc import Iterator
from pathlib import Path

import pytest
import structlog
from click.testing import Result
from typer.testing import CliRunner

from eval_compare.cli.main import app

FIXTURES = Path(__file__).parent.parent / "fixtures"

runner = CliRunner()


@pytest.fixture(autouse=True)
def reset_structlog() -> Iterator[None]:
    yield
    structlog.reset_defaults()


def _invoke(*args: str) -> Result:
    return runner.invoke(app, list(args), env={"COLUMNS": "220"})


def _compare(*extra: str) -> Result:
    return _invoke(
        "compare",
        "haiku",
        "--config",
        str(FIXTURES / "valid_config.yaml"),
        "--results",
        str(FIXTURES / "results.jsonl"),
        *extra,
    )


class TestCompareCommand:
    def test_renders_all_runs_from_run_infos(self) -> None:
        result = _compare(
            "--runs",
            str(FIXTURES / "runs.jsonl"),
            "--statistics",
            str(FIXTURES / "statistics.jsonl"),
        )

        assert result.exit_code == 0, result.output
        assert "gpt-4o-mini" in result.stdout
        assert "claude-haiku" in result.stdout
        assert "Grey fog on the bay" in result.stdout

    def test_defaults_to_runs_seen_in_results(self) -> None:
        result = _compare("--log-format", "json")

        assert result.exit_code == 0, result.output
        assert "Unknown" in result.stdout

    def test_run_ids_option_restricts_selection(self) -> None:
        result = _compare("--run-ids", "r2")

        assert result.exit_code == 0, result.output
        assert "Fog rolls over hills" in result.stdout
        assert "Grey fog on the bay" not in result.stdout

    def test_empty_run_ids_selects_nothing(self) -> None:
        result = _compare("--run-ids", "")

        assert result.exit_code == 0
        assert "No evaluation runs selected." in result.stdout

    def test_unknown_run_id_reports_no_results(self) -> None:
        result = _compare("--run-ids", "r9")

        assert result.exit_code == 0
        assert "No results for the selected evaluation runs." in result.stdout

    def test_evaluators_option_limits_columns(self) -> None:
        result = _compare("--run-ids", "r1", "--evaluators", "quality")

        assert result.exit_code == 0
        assert "quality" in result.stdout
        assert "exact_match" not in result.stdout

    def test_missing_config_exits_with_error(self, tmp_path: Path) -> None:
        result = _invoke(
            "compare",
            "haiku",
            "--config",
            str(tmp_path / "missing.yaml"),
            "--results",
            str(FIXTURES / "results.jsonl"),
        )

        assert result.exit_code == 1
        assert "Failed to load config" in result.output

    def test_invalid_results_exit_with_error(self) -> None:
        result = _invoke(
            "compare",
            "haiku",
            "--config",
            str(FIXTURES / "valid_config.yaml"),
            "--results",
            str(FIXTURES / "invalid_results.jsonl"),
        )

        assert result.exit_code == 1
        assert "Failed to load results" in result.output

    def test_invalid_log_format_exits_with_error(self) -> None:
        result = _compare("--log-format", "xml")

        assert result.exit_code == 1
        assert "Invalid log format" in result.output


class TestStatisticsCommand:
    def test_prints_computed_statistics(self) -> None:
        result = _invoke(
            "statistics",
            "--config",
            str(FIXTURES / "valid_config.yaml"),
            "--results",
            str(FIXTURES / "results.jsonl"),
        )

        assert result.exit_code == 0, result.output
        assert "0.60" in result.stdout
        assert "r2" in result.stdout

    def test_missing_results_exits_with_error(self, tmp_path: Path) -> None:
        result = _invoke(
            "statistics",
            "--config",
            str(FIXTURES / "valid_config.yaml"),
            "--results",
            str(tmp_path / "missing.jsonl"),
        )

        assert result.exit_code == 1
        assert "file not found" in result.output

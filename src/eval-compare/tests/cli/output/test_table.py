"""Tests for cli/output/table.py — rendering a ComparisonView with rich."""

from pathlib import Path

from rich.console import Console

from eval_compare.cli.output.table import build_legend, build_table, render_view
from eval_compare.comparison.application.builder import ComparisonViewBuilder
from eval_compare.comparison.domain.view import ComparisonView
from eval_compare.config.infrastructure.yaml_loader import YamlConfigLoader
from eval_compare.results.infrastructure.jsonl_loader import JsonlResultsLoader
from tests.comparison.fake_observer import FakeComparisonObserver
from tests.config.fake_observer import FakeConfigObserver
from tests.results.fake_observer import FakeResultsObserver

FIXTURES = Path(__file__).parent.parent.parent / "fixtures"
VARIANTS = {"r1": "gpt-4o-mini", "r2": "claude-haiku"}


def _make_view(selected_run_ids: list[str]) -> ComparisonView:
    config = YamlConfigLoader(observer=FakeConfigObserver()).load(
        path=FIXTURES / "valid_config.yaml"
    )
    loader = JsonlResultsLoader(observer=FakeResultsObserver())
    builder = ComparisonViewBuilder(config=config, observer=FakeComparisonObserver())
    return builder.build(
        evaluation_name="haiku",
        records=loader.load_records(path=FIXTURES / "results.jsonl"),
        run_infos=loader.load_run_infos(path=FIXTURES / "runs.jsonl"),
        selected_run_ids=selected_run_ids,
        evaluator_names=["exact_match", "quality"],
        statistics=loader.load_statistics(path=FIXTURES / "statistics.jsonl"),
    )


def _render(renderable: object) -> str:
    console = Console(record=True, width=200)
    console.print(renderable)
    return console.export_text()


class TestBuildTable:
    def test_table_has_one_row_per_run_per_datapoint(self) -> None:
        table = build_table(_make_view(["r1", "r2"]))

        assert table.row_count == 3

    def test_variant_column_is_added_for_several_runs(self) -> None:
        several = build_table(_make_view(["r1", "r2"]))
        single = build_table(_make_view(["r1"]))

        assert len(several.columns) == len(single.columns) + 1

    def test_rendered_table_shows_previews_and_values(self) -> None:
        text = _render(build_table(_make_view(["r1", "r2"])))

        assert "Write a haiku about fog" in text
        assert "Grey fog on the bay" in text
        assert "0.80" in text
        assert "False" in text

    def test_header_shows_statistic_summaries(self) -> None:
        text = _render(build_table(_make_view(["r1", "r2"])))

        assert "0.60 ± 0.20 (n=2)" in text
        assert "0.60 (n=1)" in text

    def test_human_feedback_is_marked(self) -> None:
        text = _render(build_table(_make_view(["r2"])))

        assert "0.60 ✎" in text

    def test_missing_values_render_placeholder(self) -> None:
        text = _render(build_table(_make_view(["r1"])))

        assert "Empty output" in text
        assert " - " in text


class TestBuildLegend:
    def test_lists_variant_and_run_per_selected_run(self) -> None:
        legend = build_legend(_make_view(["r1", "r2"]), VARIANTS)

        assert legend.plain.splitlines() == [
            "● gpt-4o-mini  r1",
            "● claude-haiku  r2",
        ]

    def test_unknown_run_is_labelled_unknown(self) -> None:
        legend = build_legend(_make_view(["r1", "r9"]), VARIANTS)

        assert legend.plain.splitlines()[1] == "● Unknown  r9"


class TestRenderView:
    def test_no_selection_prints_notice(self) -> None:
        console = Console(record=True, width=200)

        render_view(view=_make_view([]), variants=VARIANTS, console=console)

        assert console.export_text().strip() == "No evaluation runs selected."

    def test_no_matching_results_prints_notice(self) -> None:
        console = Console(record=True, width=200)

        render_view(view=_make_view(["r9"]), variants=VARIANTS, console=console)

        assert console.export_text().strip() == "No results for the selected evaluation runs."

    def test_legend_printed_only_for_several_runs(self) -> None:
        several = Console(record=True, width=200)
        single = Console(record=True, width=200)

        render_view(view=_make_view(["r1", "r2"]), variants=VARIANTS, console=several)
        render_view(view=_make_view(["r1"]), variants=VARIANTS, console=single)

        assert "gpt-4o-mini  r1" in several.export_text()
        assert "gpt-4o-mini  r1" not in single.export_text()

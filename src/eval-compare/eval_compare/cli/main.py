"""CLI entrypoint for eval-compare — typer app with `compare` and `statistics` commands."""

import sys
from pathlib import Path

import structlog
import typer
from rich.console import Console
from rich.table import Table

from eval_compare.cli.output.table import render_view
from eval_compare.comparison.application.builder import ComparisonViewBuilder
from eval_compare.comparison.domain.navigation import parse_selected_run_ids
from eval_compare.comparison.infrastructure.observer import StructlogComparisonObserver
from eval_compare.config.domain.config import CompareConfig
from eval_compare.config.domain.formatting import format_summary
from eval_compare.config.infrastructure.observer import StructlogConfigObserver
from eval_compare.config.infrastructure.yaml_loader import YamlConfigLoader
from eval_compare.core.errors import EvalCompareError
from eval_compare.results.domain.record import EvaluationResultRecord
from eval_compare.results.domain.run_info import EvaluationRunInfo
from eval_compare.results.domain.statistic import EvaluationStatistic
from eval_compare.results.domain.statistics import compute_statistics
from eval_compare.results.infrastructure.jsonl_loader import JsonlResultsLoader
from eval_compare.results.infrastructure.observer import StructlogResultsObserver

app = typer.Typer(add_completion=False)


@app.callback()
def main() -> None:
    """Compare evaluation runs side by side."""


def _configure_structlog(log_format: str) -> None:
    """Configure structlog based on the requested format. Logs go to stderr."""
    if log_format == "console":
        renderer: structlog.types.Processor = structlog.dev.ConsoleRenderer()
    elif log_format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        typer.echo(f"Invalid log format: {log_format!r}. Must be 'console' or 'json'.")
        raise typer.Exit(code=1)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(0),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )


def _split_names(value: str | None) -> list[str] | None:
    if value is None:
        return None
    return [name.strip() for name in value.split(",") if name.strip()]


def _default_run_ids(
    run_infos: list[EvaluationRunInfo], records: list[EvaluationResultRecord]
) -> list[str]:
    """All runs in run info order, or in order of first appearance in the records."""
    if run_infos:
        return [info.evaluation_run_id for info in run_infos]
    seen: dict[str, None] = {}
    for record in records:
        if record.is_complete and record.evaluation_run_id not in seen:
            seen[str(record.evaluation_run_id)] = None
    return list(seen)


def _evaluator_names(
    config: CompareConfig, evaluation_name: str, requested: list[str] | None
) -> list[str]:
    if requested is not None:
        return requested
    evaluation = config.evaluations.get(evaluation_name)
    if evaluation is None:
        return []
    return list(evaluation.evaluators)


@app.command()
def compare(
    evaluation_name: str = typer.Argument(..., help="Name of the evaluation"),
    config_path: Path = typer.Option(
        ..., "--config", "-c", help="Path to the evaluator/metric config YAML"
    ),
    results_path: Path = typer.Option(
        ..., "--results", "-r", help="JSONL file of evaluation result records"
    ),
    runs_path: Path | None = typer.Option(
        None, "--runs", help="JSONL file of evaluation run infos"
    ),
    run_ids: str | None = typer.Option(
        None,
        "--run-ids",
        help="Comma-separated run ids to compare, in display order",
    ),
    statistics_path: Path | None = typer.Option(
        None,
        "--statistics",
        help="JSONL file of run statistics; computed from results if omitted",
    ),
    evaluators: str | None = typer.Option(
        None,
        "--evaluators",
        help="Comma-separated evaluator columns; defaults to all configured",
    ),
    log_format: str = typer.Option(
        "console",
        "--log-format",
        help="Log format: 'console' or 'json'",
    ),
) -> None:
    """Show selected evaluation runs side by side, one row per run per datapoint."""
    _configure_structlog(log_format=log_format)
    try:
        config = YamlConfigLoader(observer=StructlogConfigObserver()).load(
            path=config_path
        )
        loader = JsonlResultsLoader(observer=StructlogResultsObserver())
        records = loader.load_records(path=results_path)
        run_infos = loader.load_run_infos(path=runs_path) if runs_path else []
        statistics: list[EvaluationStatistic] = (
            loader.load_statistics(path=statistics_path)
            if statistics_path
            else compute_statistics(records=records)
        )
    except EvalCompareError as exc:
        typer.echo(str(exc))
        raise typer.Exit(code=1) from exc

    selected_run_ids = (
        parse_selected_run_ids(run_ids)
        if run_ids is not None
        else _default_run_ids(run_infos=run_infos, records=records)
    )

    builder = ComparisonViewBuilder(
        config=config, observer=StructlogComparisonObserver()
    )
    view = builder.build(
        evaluation_name=evaluation_name,
        records=records,
        run_infos=run_infos,
        selected_run_ids=selected_run_ids,
        evaluator_names=_evaluator_names(
            config, evaluation_name, _split_names(evaluators)
        ),
        statistics=statistics,
    )
    variants = {info.evaluation_run_id: info.variant_name for info in run_infos}
    render_view(view=view, variants=variants, console=Console())


@app.command("statistics")
def show_statistics(
    config_path: Path = typer.Option(
        ..., "--config", "-c", help="Path to the evaluator/metric config YAML"
    ),
    results_path: Path = typer.Option(
        ..., "--results", "-r", help="JSONL file of evaluation result records"
    ),
    log_format: str = typer.Option(
        "console",
        "--log-format",
        help="Log format: 'console' or 'json'",
    ),
) -> None:
    """Compute mean, stderr, and count per run and metric from raw results."""
    _configure_structlog(log_format=log_format)
    try:
        config = YamlConfigLoader(observer=StructlogConfigObserver()).load(
            path=config_path
        )
        records = JsonlResultsLoader(observer=StructlogResultsObserver()).load_records(
            path=results_path
        )
    except EvalCompareError as exc:
        typer.echo(str(exc))
        raise typer.Exit(code=1) from exc

    table = Table(header_style="bold")
    for heading in ("Run", "Metric", "Mean", "Stderr", "N"):
        table.add_column(heading)
    for stat in compute_statistics(records=records):
        metric = config.metric(stat.metric_name)
        mean = (
            format_summary(stat.mean_metric, metric) if metric else f"{stat.mean_metric:.4f}"
        )
        if stat.stderr_metric is None:
            stderr = "-"
        elif metric:
            stderr = format_summary(stat.stderr_metric, metric)
        else:
            stderr = f"{stat.stderr_metric:.4f}"
        table.add_row(
            stat.evaluation_run_id,
            stat.metric_name,
            mean,
            stderr,
            str(stat.datapoint_count),
        )
    Console().print(table)


if __name__ == "__main__":
    app()

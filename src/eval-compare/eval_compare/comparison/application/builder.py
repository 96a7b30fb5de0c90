"""ComparisonViewBuilder — turns indexed results into the render-ready view."""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass

from eval_compare.comparison.application.memo import IdentityMemo
from eval_compare.comparison.domain.color import ColorAssigner
from eval_compare.comparison.domain.cutoff import (
    evaluator_cutoff_failed,
    metric_value_failed,
)
from eval_compare.comparison.domain.navigation import datapoint_path
from eval_compare.comparison.domain.observer import ComparisonObserver
from eval_compare.comparison.domain.summary import (
    summarize_display_input,
    summarize_display_output,
)
from eval_compare.comparison.domain.view import (
    MISSING_VALUE,
    UNKNOWN_VARIANT,
    ComparisonView,
    DatapointGroup,
    EvaluatorColumn,
    EvaluatorHeader,
    MetricCell,
    RunRow,
    StatisticSummary,
)
from eval_compare.config.domain.config import CompareConfig
from eval_compare.config.domain.evaluator import (
    EvaluatorConfig,
    LlmJudgeEvaluatorConfig,
)
from eval_compare.config.domain.formatting import format_metric_value, format_summary
from eval_compare.config.domain.metric import MetricConfig
from eval_compare.config.domain.naming import metric_name_for
from eval_compare.results.domain.datapoint import Datapoint
from eval_compare.results.domain.index import (
    RecordIndex,
    RunResult,
    RunVariantMap,
    build_run_variant_map,
    index_records,
)
from eval_compare.results.domain.record import EvaluationResultRecord
from eval_compare.results.domain.run_info import EvaluationRunInfo
from eval_compare.results.domain.statistic import EvaluationStatistic


@dataclass(frozen=True)
class _ResolvedColumn:
    """An evaluator column with its configuration looked up once per build."""

    evaluator_name: str
    metric_name: str
    evaluator: EvaluatorConfig | None
    metric: MetricConfig | None


class ComparisonViewBuilder:
    """Builds ComparisonViews, reusing derived state across calls.

    The record index is recomputed only when a different record collection is
    passed, the variant map only for a different run info collection, and the
    color session only for a different selected run id collection. Callers
    that re-render with the same objects get the same colors.
    """

    def __init__(self, config: CompareConfig, observer: ComparisonObserver) -> None:
        self._config = config
        self._observer = observer
        self._index: IdentityMemo[Sequence[EvaluationResultRecord], RecordIndex] = (
            IdentityMemo(index_records)
        )
        self._variants: IdentityMemo[Sequence[EvaluationRunInfo], RunVariantMap] = (
            IdentityMemo(build_run_variant_map)
        )
        self._colors: IdentityMemo[Sequence[str], ColorAssigner] = IdentityMemo(
            ColorAssigner
        )

    def index(self, records: Sequence[EvaluationResultRecord]) -> RecordIndex:
        return self._index.get(records)

    def color_assigner(self, selected_run_ids: Sequence[str]) -> ColorAssigner:
        return self._colors.get(selected_run_ids)

    def build(
        self,
        evaluation_name: str,
        records: Sequence[EvaluationResultRecord],
        run_infos: Sequence[EvaluationRunInfo],
        selected_run_ids: Sequence[str],
        evaluator_names: Sequence[str],
        statistics: Sequence[EvaluationStatistic],
    ) -> ComparisonView:
        """Compose the comparison view for the selected runs.

        Missing evaluator or metric configuration is reported to the observer
        and leaves that column empty; it never raises.
        """
        index = self.index(records)
        variants = self._variants.get(run_infos)
        colors = self.color_assigner(selected_run_ids)

        resolved = [
            self._resolve_column(evaluation_name, evaluator_name)
            for evaluator_name in evaluator_names
        ]
        # Headers request colors before rows so summary order decides slots.
        columns = tuple(
            _build_column(
                column=column,
                statistics=statistics,
                selected_run_ids=selected_run_ids,
                colors=colors,
            )
            for column in resolved
        )

        groups: list[DatapointGroup] = []
        for datapoint in index.datapoints:
            group = _build_group(
                evaluation_name=evaluation_name,
                datapoint=datapoint,
                run_results=index.results.get(datapoint.id, {}),
                selected_run_ids=selected_run_ids,
                columns=resolved,
                variants=variants,
                colors=colors,
            )
            if group is not None:
                groups.append(group)

        view = ComparisonView(
            evaluation_name=evaluation_name,
            selected_run_ids=tuple(selected_run_ids),
            columns=columns,
            groups=tuple(groups),
        )
        self._observer.view_built(
            evaluation_name=evaluation_name,
            total_datapoints=len(index.datapoints),
            total_groups=len(view.groups),
            total_rows=sum(group.row_span for group in view.groups),
            selected_runs=len(view.selected_run_ids),
        )
        return view

    def _resolve_column(
        self, evaluation_name: str, evaluator_name: str
    ) -> _ResolvedColumn:
        metric_name = metric_name_for(evaluation_name, evaluator_name)
        evaluator = self._config.evaluator(evaluation_name, evaluator_name)
        if evaluator is None:
            self._observer.evaluator_config_missing(
                evaluation_name=evaluation_name,
                evaluator_name=evaluator_name,
            )
            return _ResolvedColumn(evaluator_name, metric_name, None, None)

        metric = self._config.metric(metric_name)
        if metric is None:
            self._observer.metric_config_missing(
                evaluation_name=evaluation_name,
                evaluator_name=evaluator_name,
                metric_name=metric_name,
            )
        return _ResolvedColumn(evaluator_name, metric_name, evaluator, metric)


def order_statistics(
    statistics: Sequence[EvaluationStatistic],
    metric_name: str,
    run_ids: Sequence[str],
) -> list[EvaluationStatistic]:
    """Keep *metric_name* statistics for *run_ids*, in *run_ids* order."""
    by_run = {
        stat.evaluation_run_id: stat
        for stat in statistics
        if stat.metric_name == metric_name
    }
    return [by_run[run_id] for run_id in run_ids if run_id in by_run]


def format_statistic(stat: EvaluationStatistic, metric: MetricConfig) -> str:
    """Render "mean ± stderr (n=count)"; the stderr part is dropped when zero."""
    text = format_summary(stat.mean_metric, metric)
    if stat.stderr_metric:
        text += f" ± {format_summary(stat.stderr_metric, metric)}"
    return f"{text} (n={stat.datapoint_count})"


def _build_column(
    column: _ResolvedColumn,
    statistics: Sequence[EvaluationStatistic],
    selected_run_ids: Sequence[str],
    colors: ColorAssigner,
) -> EvaluatorColumn:
    evaluator = column.evaluator
    metric = column.metric
    if evaluator is None or metric is None:
        return EvaluatorColumn(
            evaluator_name=column.evaluator_name,
            metric_name=column.metric_name,
            header=None,
        )

    summaries = tuple(
        StatisticSummary(
            run_id=stat.evaluation_run_id,
            color=colors.get_color(stat.evaluation_run_id, emphasized=False),
            text=format_statistic(stat, metric),
            failed=evaluator_cutoff_failed(stat.mean_metric, evaluator),
        )
        for stat in order_statistics(statistics, column.metric_name, selected_run_ids)
    )
    return EvaluatorColumn(
        evaluator_name=column.evaluator_name,
        metric_name=column.metric_name,
        header=EvaluatorHeader(
            evaluator_name=column.evaluator_name,
            evaluator_type=evaluator.type,
            metric_type=metric.type,
            optimize=metric.optimize,
            cutoff=evaluator.cutoff,
            summaries=summaries,
        ),
    )


def _build_group(
    evaluation_name: str,
    datapoint: Datapoint,
    run_results: Mapping[str, RunResult],
    selected_run_ids: Sequence[str],
    columns: Sequence[_ResolvedColumn],
    variants: RunVariantMap,
    colors: ColorAssigner,
) -> DatapointGroup | None:
    """Build the rows for one datapoint, or None if no selected run has a result."""
    matched = [
        (run_id, run_results[run_id])
        for run_id in selected_run_ids
        if run_id in run_results
    ]
    if not matched:
        return None

    path = datapoint_path(
        evaluation_name, datapoint.id, [run_id for run_id, _ in matched]
    )
    rows = tuple(
        RunRow(
            run_id=run_id,
            variant_name=variants.get(run_id) or UNKNOWN_VARIANT,
            color=colors.get_color(run_id),
            generated_output=summarize_display_output(result.generated_output),
            cells=tuple(_build_cell(column, result) for column in columns),
            path=path,
        )
        for run_id, result in matched
    )
    return DatapointGroup(
        datapoint_id=datapoint.id,
        input=summarize_display_input(datapoint.input),
        reference_output=summarize_display_output(datapoint.reference_output),
        rows=rows,
    )


def _build_cell(column: _ResolvedColumn, result: RunResult) -> MetricCell:
    value = result.metrics.get(column.metric_name)
    evaluator = column.evaluator
    metric = column.metric
    if value is None or evaluator is None or metric is None:
        return MetricCell(
            evaluator_name=column.evaluator_name,
            metric_name=column.metric_name,
            value=None,
            display=MISSING_VALUE,
            failed=False,
            editable=False,
        )

    if isinstance(evaluator, LlmJudgeEvaluatorConfig):
        optimize, cutoff, editable = evaluator.optimize, evaluator.cutoff, True
    else:
        optimize, cutoff, editable = "max", None, False
    return MetricCell(
        evaluator_name=column.evaluator_name,
        metric_name=column.metric_name,
        value=value,
        display=format_metric_value(value.value, metric.type),
        failed=metric_value_failed(value.value, metric.type, optimize, cutoff),
        editable=editable,
    )

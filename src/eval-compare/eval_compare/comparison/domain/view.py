"""Render-ready comparison view — the structure a renderer walks top to bottom."""

from collections.abc import Iterator
from dataclasses import dataclass

from eval_compare.comparison.domain.summary import ContentSummary
from eval_compare.config.domain.evaluator import Optimize
from eval_compare.config.domain.metric import MetricType
from eval_compare.results.domain.index import MetricValueInfo

UNKNOWN_VARIANT = "Unknown"
MISSING_VALUE = "-"


@dataclass(frozen=True)
class StatisticSummary:
    """One run's summary line under an evaluator header."""

    run_id: str
    color: str
    text: str
    failed: bool


@dataclass(frozen=True)
class EvaluatorHeader:
    evaluator_name: str
    evaluator_type: str
    metric_type: MetricType
    optimize: Optimize
    cutoff: float | None
    summaries: tuple[StatisticSummary, ...]


@dataclass(frozen=True)
class EvaluatorColumn:
    """One evaluator column. `header` is None when its configuration is missing."""

    evaluator_name: str
    metric_name: str
    header: EvaluatorHeader | None


@dataclass(frozen=True)
class MetricCell:
    evaluator_name: str
    metric_name: str
    value: MetricValueInfo | None
    display: str
    failed: bool
    editable: bool


@dataclass(frozen=True)
class RunRow:
    """One run's result for one datapoint."""

    run_id: str
    variant_name: str
    color: str
    generated_output: ContentSummary
    cells: tuple[MetricCell, ...]
    path: str


@dataclass(frozen=True)
class DatapointGroup:
    """All rows for one datapoint; input and reference output are shown once."""

    datapoint_id: str
    input: ContentSummary
    reference_output: ContentSummary
    rows: tuple[RunRow, ...]

    @property
    def row_span(self) -> int:
        return len(self.rows)


@dataclass(frozen=True)
class RenderRow:
    """A flattened row: the datapoint cells are drawn only when `is_first`."""

    group: DatapointGroup
    row: RunRow
    is_first: bool
    is_last: bool


@dataclass(frozen=True)
class ComparisonView:
    evaluation_name: str
    selected_run_ids: tuple[str, ...]
    columns: tuple[EvaluatorColumn, ...]
    groups: tuple[DatapointGroup, ...]

    @property
    def show_variant_column(self) -> bool:
        return len(self.selected_run_ids) > 1

    @property
    def is_empty(self) -> bool:
        return not self.groups

    def render_rows(self) -> Iterator[RenderRow]:
        for group in self.groups:
            last = group.row_span - 1
            for index, row in enumerate(group.rows):
                yield RenderRow(
                    group=group,
                    row=row,
                    is_first=index == 0,
                    is_last=index == last,
                )

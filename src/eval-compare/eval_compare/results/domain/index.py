"""Record indexer — reshapes the flat result stream into per-datapoint lookups.

Two structures are derived from a record stream:

- the datapoint index: one Datapoint per distinct id, first-seen content wins,
  sorted by descending code-point order of the id;
- the result index: datapoint id -> run id -> RunResult, where each metric
  entry is overwritten by later records for the same (datapoint, run, metric).

Incomplete records (missing datapoint or run id) are excluded from both.
"""

from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass
from types import MappingProxyType
from typing import TypeAlias

from pydantic import BaseModel

from eval_compare.content.domain.output import Output
from eval_compare.results.domain.datapoint import Datapoint
from eval_compare.results.domain.record import EvaluationResultRecord
from eval_compare.results.domain.run_info import EvaluationRunInfo

DatapointId: TypeAlias = str
RunId: TypeAlias = str
MetricName: TypeAlias = str


class MetricValueInfo(BaseModel, frozen=True):
    """One evaluator's verdict for a (datapoint, run) pair."""

    value: str
    evaluator_inference_id: str | None
    inference_id: str
    is_human_feedback: bool


class RunResult(BaseModel, frozen=True):
    """Everything a single run produced for a single datapoint."""

    generated_output: Output
    metrics: Mapping[MetricName, MetricValueInfo]


ResultIndex: TypeAlias = Mapping[DatapointId, Mapping[RunId, RunResult]]
RunVariantMap: TypeAlias = Mapping[RunId, str]


@dataclass(frozen=True)
class RecordIndex:
    """Both derived structures built from one record stream."""

    datapoints: tuple[Datapoint, ...]
    results: ResultIndex


def build_datapoint_index(
    records: Iterable[EvaluationResultRecord],
) -> tuple[Datapoint, ...]:
    """Return unique datapoints sorted by id, descending (lexicographic)."""
    seen: dict[DatapointId, Datapoint] = {}
    for record in records:
        datapoint_id = record.datapoint_id
        if not record.is_complete or datapoint_id is None or datapoint_id in seen:
            continue
        seen[datapoint_id] = Datapoint(
            id=datapoint_id,
            input=record.input,
            reference_output=record.reference_output,
        )
    return tuple(sorted(seen.values(), key=lambda dp: dp.id, reverse=True))


def build_result_index(
    records: Iterable[EvaluationResultRecord],
    datapoints: Sequence[Datapoint],
) -> ResultIndex:
    """Build datapoint id -> run id -> RunResult for every indexed datapoint.

    The generated output of a (datapoint, run) pair comes from its first
    record; metric entries are last-write-wins per metric name.
    """
    outputs: dict[DatapointId, dict[RunId, Output]] = {dp.id: {} for dp in datapoints}
    metrics: dict[DatapointId, dict[RunId, dict[MetricName, MetricValueInfo]]] = {
        dp.id: {} for dp in datapoints
    }

    for record in records:
        datapoint_id = record.datapoint_id
        run_id = record.evaluation_run_id
        if not datapoint_id or not run_id:
            continue
        run_outputs = outputs.get(datapoint_id)
        if run_outputs is None:
            continue

        if run_id not in run_outputs:
            run_outputs[run_id] = record.generated_output
            metrics[datapoint_id][run_id] = {}

        if record.metric_name:
            metrics[datapoint_id][run_id][record.metric_name] = MetricValueInfo(
                value=record.metric_value,
                evaluator_inference_id=record.evaluator_inference_id,
                inference_id=record.inference_id,
                is_human_feedback=record.is_human_feedback,
            )

    return MappingProxyType(
        {
            datapoint_id: MappingProxyType(
                {
                    run_id: RunResult(
                        generated_output=output,
                        metrics=MappingProxyType(metrics[datapoint_id][run_id]),
                    )
                    for run_id, output in run_outputs.items()
                }
            )
            for datapoint_id, run_outputs in outputs.items()
        }
    )


def index_records(records: Sequence[EvaluationResultRecord]) -> RecordIndex:
    """Build the datapoint index and the result index from one record stream."""
    datapoints = build_datapoint_index(records)
    return RecordIndex(
        datapoints=datapoints,
        results=build_result_index(records, datapoints),
    )


def build_run_variant_map(run_infos: Iterable[EvaluationRunInfo]) -> RunVariantMap:
    """Map each run id to the name of the variant it evaluated."""
    return MappingProxyType(
        {info.evaluation_run_id: info.variant_name for info in run_infos}
    )

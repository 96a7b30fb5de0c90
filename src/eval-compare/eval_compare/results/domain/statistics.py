"""Statistics calculator — derives per-(run, metric) summaries from raw records."""

import math
import statistics
from typing import TypeAlias

from eval_compare.results.domain.record import EvaluationResultRecord
from eval_compare.results.domain.statistic import EvaluationStatistic

StatisticKey: TypeAlias = tuple[str, str]  # (evaluation_run_id, metric_name)


def parse_metric_value(value: str) -> float | None:
    """Return the numeric form of a string-encoded metric value.

    Booleans map to 1.0 / 0.0. Returns None for anything that is not a finite
    number.
    """
    text = value.strip().lower()
    if text == "true":
        return 1.0
    if text == "false":
        return 0.0
    try:
        number = float(text)
    except ValueError:
        return None
    return number if math.isfinite(number) else None


def _stderr(values: list[float]) -> float | None:
    """Return stddev / sqrt(n) for N >= 2, else None."""
    if len(values) < 2:
        return None
    return statistics.stdev(values) / math.sqrt(len(values))


def compute_statistics(
    records: list[EvaluationResultRecord],
) -> list[EvaluationStatistic]:
    """Group numeric metric values by (run, metric) and summarise each group.

    Each datapoint contributes at most one value per (run, metric); a later
    record for the same triple replaces the earlier one. Groups are returned
    in order of first appearance.
    """
    # Preserve insertion order via dict keyed by (run_id, metric_name).
    groups: dict[StatisticKey, dict[str, float]] = {}

    for record in records:
        if not record.is_complete or not record.metric_name:
            continue
        value = parse_metric_value(record.metric_value)
        if value is None:
            continue
        key: StatisticKey = (str(record.evaluation_run_id), record.metric_name)
        groups.setdefault(key, {})[str(record.datapoint_id)] = value

    results: list[EvaluationStatistic] = []
    for (run_id, metric_name), by_datapoint in groups.items():
        values = list(by_datapoint.values())
        results.append(
            EvaluationStatistic(
                evaluation_run_id=run_id,
                metric_name=metric_name,
                mean_metric=statistics.mean(values),
                stderr_metric=_stderr(values),
                datapoint_count=len(values),
            )
        )
    return results

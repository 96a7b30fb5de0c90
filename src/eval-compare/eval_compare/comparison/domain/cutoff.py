"""Cutoff evaluation — whether a metric falls on the wrong side of its threshold."""

from eval_compare.config.domain.evaluator import (
    EvaluatorConfig,
    LlmJudgeEvaluatorConfig,
    Optimize,
)
from eval_compare.config.domain.metric import MetricType
from eval_compare.results.domain.statistics import parse_metric_value


def is_cutoff_failed(mean_metric: float, optimize: Optimize, cutoff: float) -> bool:
    """Return True if *mean_metric* misses *cutoff* in the optimize direction.

    The comparison is strict: a value equal to the cutoff passes.
    """
    if optimize == "max":
        return mean_metric < cutoff
    return mean_metric > cutoff


def evaluator_cutoff_failed(mean_metric: float, evaluator: EvaluatorConfig) -> bool:
    """Apply the evaluator's cutoff, if any. Only llm_judge evaluators can fail."""
    if not isinstance(evaluator, LlmJudgeEvaluatorConfig) or evaluator.cutoff is None:
        return False
    return is_cutoff_failed(mean_metric, evaluator.optimize, evaluator.cutoff)


def metric_value_failed(
    value: str,
    metric_type: MetricType,
    optimize: Optimize,
    cutoff: float | None,
) -> bool:
    """Decide whether a single string-encoded metric value counts as a failure.

    With a cutoff, the value (booleans as 1/0) is checked against it. Without
    one, a boolean fails when it is the unwanted outcome; floats never fail.
    Unparseable values never fail.
    """
    numeric = parse_metric_value(value)
    if numeric is None:
        return False
    if cutoff is not None:
        return is_cutoff_failed(numeric, optimize, cutoff)
    if metric_type == "boolean":
        return numeric == 0.0 if optimize == "max" else numeric == 1.0
    return False

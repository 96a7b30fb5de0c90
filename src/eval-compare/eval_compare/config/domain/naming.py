"""Metric naming — the metric an evaluator writes its scores under."""

_PREFIX = "tensorzero::evaluation_name::"
_EVALUATOR_SEPARATOR = "::evaluator_name::"


def metric_name_for(evaluation_name: str, evaluator_name: str) -> str:
    """Return the metric name that (evaluation, evaluator) feedback is stored as."""
    return f"{_PREFIX}{evaluation_name}{_EVALUATOR_SEPARATOR}{evaluator_name}"

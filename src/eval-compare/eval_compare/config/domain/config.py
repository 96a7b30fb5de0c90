"""Top-level CompareConfig aggregate — the configuration store."""

from typing import TypeAlias

from pydantic import BaseModel, Field

from eval_compare.config.domain.evaluator import EvaluatorConfig
from eval_compare.config.domain.metric import MetricConfig

EvaluationName: TypeAlias = str
EvaluatorName: TypeAlias = str
MetricName: TypeAlias = str


class EvaluationConfig(BaseModel, frozen=True):
    """One named evaluation: the evaluators that score its runs."""

    function_name: str | None = None
    evaluators: dict[EvaluatorName, EvaluatorConfig] = Field(default_factory=dict)


class CompareConfig(BaseModel, frozen=True):
    """Root configuration aggregate: evaluations and the metrics they write."""

    evaluations: dict[EvaluationName, EvaluationConfig] = Field(default_factory=dict)
    metrics: dict[MetricName, MetricConfig] = Field(default_factory=dict)

    def evaluator(
        self, evaluation_name: str, evaluator_name: str
    ) -> EvaluatorConfig | None:
        """Return the evaluator config, or None if either name is unknown."""
        evaluation = self.evaluations.get(evaluation_name)
        if evaluation is None:
            return None
        return evaluation.evaluators.get(evaluator_name)

    def metric(self, metric_name: str) -> MetricConfig | None:
        return self.metrics.get(metric_name)

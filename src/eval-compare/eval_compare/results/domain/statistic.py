"""EvaluationStatistic — a per-(run, metric) summary over all datapoints."""

from pydantic import BaseModel, Field


class EvaluationStatistic(BaseModel, frozen=True):
    evaluation_run_id: str
    metric_name: str
    mean_metric: float
    stderr_metric: float | None = None
    datapoint_count: int = Field(ge=0)

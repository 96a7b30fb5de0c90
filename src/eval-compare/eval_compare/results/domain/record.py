"""EvaluationResultRecord — one flat (datapoint, run, metric) observation."""

import json
from typing import Any

from pydantic import BaseModel, Field, field_validator

from eval_compare.content.domain.input import DisplayInput
from eval_compare.content.domain.output import Output


class EvaluationResultRecord(BaseModel, frozen=True):
    """Immutable Pydantic model for one row of the evaluation result stream.

    `datapoint_id` and `evaluation_run_id` are optional at the model level so
    that incomplete rows survive loading; the indexer drops them.
    """

    datapoint_id: str | None = None
    evaluation_run_id: str | None = None
    input: DisplayInput = Field(default_factory=DisplayInput)
    reference_output: Output = Field(default_factory=list)
    generated_output: Output = Field(default_factory=list)
    metric_name: str | None = None
    metric_value: str = ""
    evaluator_inference_id: str | None = None
    inference_id: str = ""
    is_human_feedback: bool = False

    @field_validator("metric_value", mode="before")
    @classmethod
    def _encode_metric_value(cls, value: Any) -> Any:
        # Backends emit booleans and numbers; the stream carries them as strings.
        if value is None:
            return ""
        if isinstance(value, bool | int | float):
            return json.dumps(value)
        return value

    @property
    def is_complete(self) -> bool:
        """True when both identifying ids are present and non-empty."""
        return bool(self.datapoint_id) and bool(self.evaluation_run_id)

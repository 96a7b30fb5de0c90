"""EvaluationRunInfo — identifies one run and the variant it executed."""

from datetime import datetime

from pydantic import BaseModel, Field


class EvaluationRunInfo(BaseModel, frozen=True):
    evaluation_run_id: str = Field(min_length=1)
    variant_name: str
    most_recent_inference_date: datetime | None = None

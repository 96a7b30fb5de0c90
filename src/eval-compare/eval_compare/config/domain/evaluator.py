"""Evaluator configuration models — discriminated union on `type` field."""

from typing import Annotated, Literal, TypeAlias

from pydantic import BaseModel, Field

Optimize: TypeAlias = Literal["max", "min"]


class ExactMatchEvaluatorConfig(BaseModel, frozen=True):
    """Compares the generated output to the reference output verbatim."""

    type: Literal["exact_match"]
    cutoff: float | None = None


class LlmJudgeEvaluatorConfig(BaseModel, frozen=True):
    """Scores the generated output with an LLM judge."""

    type: Literal["llm_judge"]
    optimize: Optimize
    output_type: Literal["boolean", "float"] = "float"
    cutoff: float | None = None


# Discriminated union — Pydantic selects the correct subtype from the `type` field.
EvaluatorConfig: TypeAlias = Annotated[
    ExactMatchEvaluatorConfig | LlmJudgeEvaluatorConfig,
    Field(discriminator="type"),
]

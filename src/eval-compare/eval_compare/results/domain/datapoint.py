"""Datapoint domain value object — one fixed test case shared by every run."""

from pydantic import BaseModel

from eval_compare.content.domain.input import DisplayInput
from eval_compare.content.domain.output import Output


class Datapoint(BaseModel, frozen=True):
    """Immutable value object: a datapoint's input and its reference output."""

    id: str
    input: DisplayInput
    reference_output: Output

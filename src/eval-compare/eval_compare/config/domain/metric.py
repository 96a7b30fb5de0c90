"""Metric configuration model."""

from typing import Literal, TypeAlias

from pydantic import BaseModel

from eval_compare.config.domain.evaluator import Optimize

MetricType: TypeAlias = Literal["boolean", "float"]


class MetricConfig(BaseModel, frozen=True):
    type: MetricType
    optimize: Optimize
    level: Literal["inference", "episode"] = "inference"

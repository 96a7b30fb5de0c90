"""YAML config loader — parses, validates, and emits observer events."""

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from eval_compare.config.domain.config import CompareConfig
from eval_compare.config.domain.evaluator import ExactMatchEvaluatorConfig
from eval_compare.config.domain.observer import ConfigObserver
from eval_compare.config.infrastructure.errors import (
    ConfigLoadError,
    ConfigValidationError,
)


class YamlConfigLoader:
    """Loads, validates, and returns a CompareConfig from a YAML file."""

    def __init__(self, observer: ConfigObserver) -> None:
        self._observer = observer

    def load(self, path: Path) -> CompareConfig:
        """
        Load, validate, and return a CompareConfig from a YAML file.

        An empty file yields an empty configuration.

        Raises:
            ConfigLoadError: if the file does not exist.
            ConfigValidationError: if the file is not valid YAML or the schema
                is violated.
        """
        raw = _parse_yaml(path=path)
        cfg = _build_config(raw=raw)
        _emit_warnings(cfg=cfg, observer=self._observer)
        self._observer.config_loaded(
            path=str(path),
            total_evaluations=len(cfg.evaluations),
            total_metrics=len(cfg.metrics),
        )
        return cfg


def _parse_yaml(path: Path) -> Any:
    try:
        with path.open("r", encoding="utf-8") as fh:
            return yaml.safe_load(fh)
    except FileNotFoundError as exc:
        raise ConfigLoadError(path=path) from exc
    except yaml.YAMLError as exc:
        raise ConfigValidationError(f"invalid YAML: {exc}") from exc


def _build_config(raw: Any) -> CompareConfig:
    if raw is None:
        return CompareConfig()
    try:
        return CompareConfig.model_validate(raw)
    except ValidationError as exc:
        raise ConfigValidationError(str(exc)) from exc


def _emit_warnings(cfg: CompareConfig, observer: ConfigObserver) -> None:
    for evaluation_name, evaluation in cfg.evaluations.items():
        for evaluator_name, evaluator in evaluation.evaluators.items():
            if isinstance(evaluator, ExactMatchEvaluatorConfig) and (
                evaluator.cutoff is not None
            ):
                observer.config_cutoff_ignored_warning(
                    evaluation_name=evaluation_name,
                    evaluator_name=evaluator_name,
                    cutoff=evaluator.cutoff,
                )

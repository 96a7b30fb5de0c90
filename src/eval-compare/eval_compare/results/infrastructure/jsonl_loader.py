"""JSONL results loader — reads exported result files into typed models."""

import json
from pathlib import Path
from typing import TypeVar

from pydantic import BaseModel, ValidationError

from eval_compare.results.domain.observer import ResultsObserver
from eval_compare.results.domain.record import EvaluationResultRecord
from eval_compare.results.domain.run_info import EvaluationRunInfo
from eval_compare.results.domain.statistic import EvaluationStatistic
from eval_compare.results.infrastructure.errors import ResultsLoadError

T = TypeVar("T", bound=BaseModel)


class JsonlResultsLoader:
    """Loads result records, run infos, and statistics from JSONL files.

    Every file is one JSON object per line; blank lines are ignored.
    """

    def __init__(self, observer: ResultsObserver) -> None:
        self._observer = observer

    def load_records(self, path: Path) -> list[EvaluationResultRecord]:
        """
        Load every evaluation result record in *path*.

        Records missing their datapoint or run id are kept; the indexer
        decides what to do with them.

        Raises:
            ResultsLoadError: if the file is not found or any line is invalid.
        """
        return self._load(path=path, kind="records", model=EvaluationResultRecord)

    def load_run_infos(self, path: Path) -> list[EvaluationRunInfo]:
        """
        Load the run infos in *path*, in file order.

        Raises:
            ResultsLoadError: if the file is not found or any line is invalid.
        """
        return self._load(path=path, kind="run_infos", model=EvaluationRunInfo)

    def load_statistics(self, path: Path) -> list[EvaluationStatistic]:
        """
        Load the per-(run, metric) statistics in *path*.

        Raises:
            ResultsLoadError: if the file is not found or any line is invalid.
        """
        return self._load(path=path, kind="statistics", model=EvaluationStatistic)

    def _load(self, path: Path, kind: str, model: type[T]) -> list[T]:
        path_str = str(path)
        self._observer.results_loading_started(path=path_str, kind=kind)

        try:
            lines = self._read_lines(path=path)
        except FileNotFoundError:
            reason = f"file not found: {path_str}"
            self._observer.results_loading_failed(
                path=path_str, kind=kind, reason=reason
            )
            raise ResultsLoadError(reason=reason)

        items: list[T] = []
        errors: list[str] = []
        for index, line in enumerate(lines):
            result = self._parse_line(line=line, index=index, model=model)
            if isinstance(result, str):
                errors.append(result)
            else:
                items.append(result)

        if errors:
            reason = "; ".join(errors)
            self._observer.results_loading_failed(
                path=path_str, kind=kind, reason=reason
            )
            raise ResultsLoadError(reason=reason)

        self._observer.results_loading_completed(
            path=path_str, kind=kind, total=len(items)
        )
        return items

    def _read_lines(self, path: Path) -> list[str]:
        """Open the file and return all non-empty lines."""
        with open(path, encoding="utf-8") as fh:
            return [line for line in fh if line.strip()]

    def _parse_line(self, line: str, index: int, model: type[T]) -> T | str:
        """
        Parse a single JSONL line into *model*.

        Returns the model on success, or an error string describing the problem.
        """
        try:
            data = json.loads(line)
        except json.JSONDecodeError as exc:
            return f"line {index}: invalid JSON: {exc}"

        if not isinstance(data, dict):
            return f"line {index}: expected a JSON object"

        try:
            return model.model_validate(data)
        except ValidationError as exc:
            fields = ", ".join(
                ".".join(str(part) for part in err["loc"]) for err in exc.errors()
            )
            return f"line {index}: invalid {fields}"

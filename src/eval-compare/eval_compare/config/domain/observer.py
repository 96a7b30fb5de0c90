"""Observer port for the config domain — defines events in domain language."""

from typing import Protocol


class ConfigObserver(Protocol):
    def config_loaded(self, path: str, total_evaluations: int, total_metrics: int) -> None: ...

    def config_cutoff_ignored_warning(
        self, evaluation_name: str, evaluator_name: str, cutoff: float
    ) -> None: ...

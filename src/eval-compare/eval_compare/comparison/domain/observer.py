"""Observer port for the comparison domain — defines events in domain language."""

from typing import Protocol


class ComparisonObserver(Protocol):
    """Observer port for diagnostics raised while building a comparison view.

    Implementations may log to structlog or record for tests.
    """

    def evaluator_config_missing(
        self, evaluation_name: str, evaluator_name: str
    ) -> None: ...

    def metric_config_missing(
        self, evaluation_name: str, evaluator_name: str, metric_name: str
    ) -> None: ...

    def view_built(
        self,
        evaluation_name: str,
        total_datapoints: int,
        total_groups: int,
        total_rows: int,
        selected_runs: int,
    ) -> None: ...

"""StructlogComparisonObserver — production observer that delegates to structlog."""

import structlog


class StructlogComparisonObserver:
    """Logs comparison domain events to structlog.

    Does NOT inherit from ComparisonObserver (structural typing via Protocol).
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def evaluator_config_missing(self, evaluation_name: str, evaluator_name: str) -> None:
        self._log.warning(
            "comparison.evaluator_config_missing",
            evaluation_name=evaluation_name,
            evaluator_name=evaluator_name,
        )

    def metric_config_missing(
        self, evaluation_name: str, evaluator_name: str, metric_name: str
    ) -> None:
        self._log.warning(
            "comparison.metric_config_missing",
            evaluation_name=evaluation_name,
            evaluator_name=evaluator_name,
            metric_name=metric_name,
        )

    def view_built(
        self,
        evaluation_name: str,
        total_datapoints: int,
        total_groups: int,
        total_rows: int,
        selected_runs: int,
    ) -> None:
        self._log.debug(
            "comparison.view_built",
            evaluation_name=evaluation_name,
            total_datapoints=total_datapoints,
            total_groups=total_groups,
            total_rows=total_rows,
            selected_runs=selected_runs,
        )

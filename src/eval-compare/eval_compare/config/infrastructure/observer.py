"""Structlog implementation of the ConfigObserver port."""

import structlog


class StructlogConfigObserver:
    """Delegates config domain events to structlog.

    Satisfies the ConfigObserver protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def config_loaded(self, path: str, total_evaluations: int, total_metrics: int) -> None:
        self._log.info(
            "config.loaded",
            path=path,
            total_evaluations=total_evaluations,
            total_metrics=total_metrics,
        )

    def config_cutoff_ignored_warning(
        self, evaluation_name: str, evaluator_name: str, cutoff: float
    ) -> None:
        self._log.warning(
            "config.cutoff_ignored_warning",
            evaluation_name=evaluation_name,
            evaluator_name=evaluator_name,
            cutoff=cutoff,
            message="Only llm_judge evaluators fail by cutoff",
        )

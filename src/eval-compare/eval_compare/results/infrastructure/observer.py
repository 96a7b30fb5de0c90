"""Structlog implementation of the ResultsObserver port."""

import structlog


class StructlogResultsObserver:
    """Delegates results domain events to structlog.

    Satisfies the ResultsObserver protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def results_loading_started(self, path: str, kind: str) -> None:
        self._log.info("results.loading_started", path=path, kind=kind)

    def results_loading_completed(self, path: str, kind: str, total: int) -> None:
        self._log.info("results.loading_completed", path=path, kind=kind, total=total)

    def results_loading_failed(self, path: str, kind: str, reason: str) -> None:
        self._log.error("results.loading_failed", path=path, kind=kind, reason=reason)

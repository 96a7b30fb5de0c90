"""Observer port for the results domain — defines events in domain language."""

from typing import Protocol


class ResultsObserver(Protocol):
    def results_loading_started(self, path: str, kind: str) -> None: ...

    def results_loading_completed(self, path: str, kind: str, total: int) -> None: ...

    def results_loading_failed(self, path: str, kind: str, reason: str) -> None: ...

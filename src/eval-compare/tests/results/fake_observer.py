"""Fake ResultsObserver for use in tests — records events without mocking."""

from dataclasses import dataclass


@dataclass(frozen=True)
class LoadingStartedEvent:
    path: str
    kind: str


@dataclass(frozen=True)
class LoadingCompletedEvent:
    path: str
    kind: str
    total: int


@dataclass(frozen=True)
class LoadingFailedEvent:
    path: str
    kind: str
    reason: str


class FakeResultsObserver:
    def __init__(self) -> None:
        self.loading_started: list[LoadingStartedEvent] = []
        self.loading_completed: list[LoadingCompletedEvent] = []
        self.loading_failed: list[LoadingFailedEvent] = []

    def results_loading_started(self, path: str, kind: str) -> None:
        self.loading_started.append(LoadingStartedEvent(path=path, kind=kind))

    def results_loading_completed(self, path: str, kind: str, total: int) -> None:
        self.loading_completed.append(
            LoadingCompletedEvent(path=path, kind=kind, total=total)
        )

    def results_loading_failed(self, path: str, kind: str, reason: str) -> None:
        self.loading_failed.append(LoadingFailedEvent(path=path, kind=kind, reason=reason))

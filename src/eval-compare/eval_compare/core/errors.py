"""Base exception class for all eval-compare-specific errors."""


class EvalCompareError(Exception):
    """Base class for all eval-compare errors."""

    def __init__(self, message: str) -> None:
        super().__init__(message)

"""Error types raised by results infrastructure."""

from eval_compare.core.errors import EvalCompareError


class ResultsLoadError(EvalCompareError):
    """Raised when a JSONL results file cannot be loaded or is malformed."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"Failed to load results: {reason}")

"""Error types raised by config infrastructure."""

from pathlib import Path

from eval_compare.core.errors import EvalCompareError


class ConfigValidationError(EvalCompareError):
    """Raised when the loaded config fails schema validation."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"Failed to validate config: {reason}")


class ConfigLoadError(EvalCompareError):
    """Raised when the config file cannot be opened or read."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"Failed to load config: file not found: {path}")

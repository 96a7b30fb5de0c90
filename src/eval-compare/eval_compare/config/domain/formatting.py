"""Value formatting for metric summaries and individual metric values."""

from eval_compare.config.domain.metric import MetricConfig, MetricType


def format_summary(value: float, metric_config: MetricConfig) -> str:
    """Format a summary statistic for display.

    Boolean metrics summarise as a rounded percentage (0.756 -> "76%");
    float metrics as a two-decimal number.
    """
    if metric_config.type == "boolean":
        return f"{round(value * 100)}%"
    return f"{value:.2f}"


def format_metric_value(value: str, metric_type: MetricType) -> str:
    """Format one string-encoded metric value.

    Values that do not parse as the metric's type are returned unchanged.
    """
    text = value.strip()
    if metric_type == "boolean":
        lowered = text.lower()
        if lowered in ("true", "1"):
            return "True"
        if lowered in ("false", "0"):
            return "False"
        return text
    try:
        return f"{float(text):.2f}"
    except ValueError:
        return text

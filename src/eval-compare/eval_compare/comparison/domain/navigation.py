"""Navigation — selection parsing and datapoint detail paths."""

from collections.abc import Sequence
from typing import Protocol
from urllib.parse import quote

from eval_compare.comparison.domain.view import RunRow

RUN_IDS_PARAM = "evaluation_run_ids"


class Navigator(Protocol):
    """Fire-and-forget navigation to a path."""

    def navigate(self, path: str) -> None: ...


def parse_selected_run_ids(param: str) -> list[str]:
    """Split a comma-separated run id query value; an empty value selects nothing."""
    if not param:
        return []
    return param.split(",")


def datapoint_path(
    evaluation_name: str, datapoint_id: str, run_ids: Sequence[str]
) -> str:
    """Build the detail path for one datapoint compared across *run_ids*."""
    joined = ",".join(run_ids)
    return (
        f"/evaluations/{quote(evaluation_name, safe='')}/{quote(datapoint_id, safe='')}"
        f"?{RUN_IDS_PARAM}={joined}"
    )


def activate_row(row: RunRow, navigator: Navigator) -> None:
    """Open the detail page for the datapoint *row* belongs to."""
    navigator.navigate(row.path)

"""Terminal rendering of a ComparisonView as a rich Table."""

from collections.abc import Mapping

from rich.console import Console
from rich.table import Table
from rich.text import Text

from eval_compare.comparison.domain.view import (
    UNKNOWN_VARIANT,
    ComparisonView,
    EvaluatorColumn,
    MetricCell,
    RenderRow,
)

_VARIANT_MARKER = "●"
_FAILED_STYLE = "red"
_PREVIEW_WIDTH = 34


def _header(column: EvaluatorColumn) -> Text:
    text = Text(column.evaluator_name, style="bold")
    header = column.header
    if header is None:
        return text
    for summary in header.summaries:
        text.append("\n")
        text.append(_VARIANT_MARKER, style=summary.color)
        text.append(f" {summary.text}", style=_FAILED_STYLE if summary.failed else "dim")
    return text


def _cell(cell: MetricCell) -> Text:
    text = Text(cell.display, style=_FAILED_STYLE if cell.failed else "")
    if cell.value is not None and cell.value.is_human_feedback:
        text.append(" ✎", style="dim")
    return text


def _row(view: ComparisonView, render_row: RenderRow) -> list[Text | str]:
    group, row = render_row.group, render_row.row
    cells: list[Text | str] = []
    if render_row.is_first:
        cells.extend([group.input.label, group.reference_output.label])
    else:
        cells.extend(["", ""])
    if view.show_variant_column:
        cells.append(Text(_VARIANT_MARKER, style=row.color))
    cells.append(row.generated_output.label)
    cells.extend(_cell(cell) for cell in row.cells)
    return cells


def build_table(view: ComparisonView) -> Table:
    """Lay the view out as a table: one section per datapoint, one row per run."""
    table = Table(title=view.evaluation_name, header_style="bold", show_lines=False)
    table.add_column("Input", max_width=_PREVIEW_WIDTH, no_wrap=True)
    table.add_column("Reference Output", max_width=_PREVIEW_WIDTH, no_wrap=True)
    if view.show_variant_column:
        table.add_column("", justify="center")
    table.add_column("Generated Output", max_width=_PREVIEW_WIDTH, no_wrap=True)
    for column in view.columns:
        table.add_column(_header(column), justify="center")

    for render_row in view.render_rows():
        table.add_row(*_row(view, render_row), end_section=render_row.is_last)
    return table


def build_legend(view: ComparisonView, variants: Mapping[str, str]) -> Text:
    """One line per selected run: its marker color, variant, and run id."""
    legend = Text()
    colors = {
        row.run_id: row.color for group in view.groups for row in group.rows
    }
    for run_id in view.selected_run_ids:
        if legend.plain:
            legend.append("\n")
        legend.append(_VARIANT_MARKER, style=colors.get(run_id, "dim"))
        legend.append(f" {variants.get(run_id, UNKNOWN_VARIANT)}  ", style="bold")
        legend.append(run_id, style="dim")
    return legend


def render_view(view: ComparisonView, variants: Mapping[str, str], console: Console) -> None:
    """Print the view, or a short notice when there is nothing to compare."""
    if not view.selected_run_ids:
        console.print("No evaluation runs selected.")
        return
    if view.is_empty:
        console.print("No results for the selected evaluation runs.")
        return
    if view.show_variant_column:
        console.print(build_legend(view, variants))
    console.print(build_table(view))

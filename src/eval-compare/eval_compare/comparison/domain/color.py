"""ColorAssigner — a stable color per run within one selection session."""

from collections.abc import Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class ColorSlot:
    """One palette entry: an emphasized and a muted rich style of the same hue."""

    emphasized: str
    muted: str


DEFAULT_PALETTE: tuple[ColorSlot, ...] = (
    ColorSlot(emphasized="bold blue", muted="blue"),
    ColorSlot(emphasized="bold magenta", muted="magenta"),
    ColorSlot(emphasized="bold green", muted="green"),
    ColorSlot(emphasized="bold yellow", muted="yellow"),
    ColorSlot(emphasized="bold red", muted="red"),
    ColorSlot(emphasized="bold cyan", muted="cyan"),
    ColorSlot(emphasized="bold bright_magenta", muted="bright_magenta"),
    ColorSlot(emphasized="bold bright_green", muted="bright_green"),
)


class ColorAssigner:
    """Hands out palette slots to run ids in first-request order.

    One assigner belongs to one selection session: build a new one whenever
    the selected run ids change. Slots wrap around once the palette is
    exhausted.
    """

    def __init__(
        self,
        selected_run_ids: Sequence[str],
        palette: Sequence[ColorSlot] = DEFAULT_PALETTE,
    ) -> None:
        if not palette:
            raise ValueError("palette must contain at least one color")
        self.selected_run_ids = tuple(selected_run_ids)
        self._palette = tuple(palette)
        self._slots: dict[str, int] = {}

    def slot(self, run_id: str) -> int:
        """Return the palette index for *run_id*, assigning the next one if new."""
        if run_id not in self._slots:
            self._slots[run_id] = len(self._slots) % len(self._palette)
        return self._slots[run_id]

    def get_color(self, run_id: str, emphasized: bool = True) -> str:
        color = self._palette[self.slot(run_id)]
        return color.emphasized if emphasized else color.muted

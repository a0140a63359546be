"""Hardcoded grid source for offline drafts and tests."""

from __future__ import annotations

from collections.abc import Mapping, Sequence

from f1draft.call_logging import log_source_call
from f1draft.exceptions import SourceError
from f1draft.models.item import DraftableItem
from f1draft.models.results import EventOutcome

from .base import EventDataSource

# (code, number, name, team) in grid order.
GRID_2025: tuple[tuple[str, int, str, str], ...] = (
    ("VER", 1, "Max Verstappen", "Red Bull Racing"),
    ("NOR", 4, "Lando Norris", "McLaren"),
    ("LEC", 16, "Charles Leclerc", "Ferrari"),
    ("PIA", 81, "Oscar Piastri", "McLaren"),
    ("SAI", 55, "Carlos Sainz", "Williams"),
    ("HAM", 44, "Lewis Hamilton", "Ferrari"),
    ("ALO", 14, "Fernando Alonso", "Aston Martin"),
    ("STR", 18, "Lance Stroll", "Aston Martin"),
    ("LAW", 30, "Liam Lawson", "Racing Bulls"),
    ("OCO", 31, "Esteban Ocon", "Haas"),
    ("ALB", 23, "Alex Albon", "Williams"),
    ("ANT", 12, "Kimi Antonelli", "Mercedes"),
    ("BOR", 5, "Gabriel Bortoleto", "Kick Sauber"),
    ("HAD", 6, "Isack Hadjar", "Racing Bulls"),
    ("BEA", 87, "Oliver Bearman", "Haas"),
    ("RUS", 63, "George Russell", "Mercedes"),
    ("GAS", 10, "Pierre Gasly", "Alpine"),
    ("TSU", 22, "Yuki Tsunoda", "Red Bull Racing"),
    ("HUL", 27, "Nico Hulkenberg", "Kick Sauber"),
    ("COL", 43, "Franco Colapinto", "Alpine"),
)


def default_grid() -> list[DraftableItem]:
    return [
        DraftableItem(item_id=code, start_rank=rank, name=name, driver_number=number, team_name=team)
        for rank, (code, number, name, team) in enumerate(GRID_2025, start=1)
    ]


class StaticDataSource(EventDataSource):
    """Serves the same grid for every event, plus any outcomes it was given."""

    def __init__(
        self,
        items: Sequence[DraftableItem] | None = None,
        outcomes: Mapping[int | str, EventOutcome] | None = None,
    ) -> None:
        self._items = list(items) if items is not None else default_grid()
        self._outcomes = dict(outcomes or {})

    @log_source_call
    def get_items(self, event_key: int | str) -> list[DraftableItem]:
        return list(self._items)

    @log_source_call
    def get_outcome(self, event_key: int | str) -> EventOutcome:
        try:
            return self._outcomes[event_key]
        except KeyError:
            raise SourceError(f"No results recorded for event {event_key!r}") from None

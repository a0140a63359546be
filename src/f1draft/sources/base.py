"""Abstract base for item-pool and finish-result sources."""

from __future__ import annotations

from abc import ABC, abstractmethod

from f1draft.models.item import DraftableItem
from f1draft.models.results import EventOutcome


class EventDataSource(ABC):
    """Source-agnostic interface for a race's grid and results.

    Implementations raise :class:`~f1draft.exceptions.SourceError` and
    nothing else.
    """

    @abstractmethod
    def get_items(self, event_key: int | str) -> list[DraftableItem]: ...

    @abstractmethod
    def get_outcome(self, event_key: int | str) -> EventOutcome: ...

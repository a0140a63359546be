"""Abstract pick-log storage contract."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Callable

from f1draft.models.pick import Pick


class PickLogEventKind(str, Enum):
    PICK = "pick"
    UNDO = "undo"


@dataclass(frozen=True)
class PickLogEvent:
    """Change notification for a pick log.

    ``version`` is the log's version after this change. Versions start at 0
    for an empty log and go up by exactly one per append or undo, so a
    consumer can order events and spot the ones it has not seen yet.
    """

    draft_id: str
    kind: PickLogEventKind
    pick: Pick
    version: int


@dataclass(frozen=True)
class PickLogSnapshot:
    picks: list[Pick]
    version: int


PickLogListener = Callable[[PickLogEvent], None]


class PickLogStore(ABC):
    """Append-only pick log with conflict-detecting appends.

    ``read`` must return picks ordered by ``pick_number`` with no gaps.
    ``append`` must be atomic: it raises
    :class:`~f1draft.exceptions.PickLogConflictError` instead of writing when
    the log no longer has ``expected_length`` picks, when ``pick.pick_number``
    is not ``expected_length + 1``, or when the item is already in the log.
    ``snapshot`` returns the picks together with the version they were read at.
    """

    @abstractmethod
    def read(self, draft_id: str) -> list[Pick]: ...

    @abstractmethod
    def snapshot(self, draft_id: str) -> PickLogSnapshot: ...

    @abstractmethod
    def append(self, draft_id: str, pick: Pick, expected_length: int) -> None: ...

    @abstractmethod
    def pop_last(self, draft_id: str) -> Pick | None: ...

    @abstractmethod
    def subscribe(self, listener: PickLogListener) -> None: ...

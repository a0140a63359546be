"""In-process pick-log store."""

from __future__ import annotations

import threading

from f1draft.exceptions import PickLogConflictError
from f1draft.models.pick import Pick

from .base import (
    PickLogEvent,
    PickLogEventKind,
    PickLogListener,
    PickLogSnapshot,
    PickLogStore,
)


class InMemoryPickLogStore(PickLogStore):
    """Pick logs held in a dict, guarded by a single lock.

    Listeners are called outside the lock, so they may observe events out of
    order under concurrent commits. Each event carries the version assigned
    under the lock.
    """

    def __init__(self) -> None:
        self._logs: dict[str, list[Pick]] = {}
        self._versions: dict[str, int] = {}
        self._lock = threading.Lock()
        self._listeners: list[PickLogListener] = []

    def read(self, draft_id: str) -> list[Pick]:
        with self._lock:
            return list(self._logs.get(draft_id, []))

    def snapshot(self, draft_id: str) -> PickLogSnapshot:
        with self._lock:
            return PickLogSnapshot(
                picks=list(self._logs.get(draft_id, [])),
                version=self._versions.get(draft_id, 0),
            )

    def append(self, draft_id: str, pick: Pick, expected_length: int) -> None:
        with self._lock:
            log = self._logs.setdefault(draft_id, [])
            if (
                len(log) != expected_length
                or pick.pick_number != expected_length + 1
                or any(p.item_id == pick.item_id for p in log)
            ):
                raise PickLogConflictError(draft_id, expected_length, len(log))
            log.append(pick)
            event = PickLogEvent(draft_id, PickLogEventKind.PICK, pick, self._bump(draft_id))
        self._notify(event)

    def pop_last(self, draft_id: str) -> Pick | None:
        with self._lock:
            log = self._logs.get(draft_id)
            if not log:
                return None
            pick = log.pop()
            event = PickLogEvent(draft_id, PickLogEventKind.UNDO, pick, self._bump(draft_id))
        self._notify(event)
        return pick

    def subscribe(self, listener: PickLogListener) -> None:
        with self._lock:
            self._listeners.append(listener)

    def _bump(self, draft_id: str) -> int:
        # caller holds self._lock
        version = self._versions.get(draft_id, 0) + 1
        self._versions[draft_id] = version
        return version

    def _notify(self, event: PickLogEvent) -> None:
        with self._lock:
            listeners = list(self._listeners)
        for listener in listeners:
            listener(event)

"""Observer-side copy of a pick log fed by change events."""

from __future__ import annotations

import threading
from collections.abc import Iterable

from f1draft.models.pick import Pick
from f1draft.store.base import PickLogEvent, PickLogEventKind, PickLogStore


class PickLogReplica:
    """Local pick log that replays store events in version order.

    Events may arrive late, twice, or out of order. Each one carries the log
    version it produced; an event is applied only once every lower version
    has been applied, and anything at or below the current version is a
    duplicate. :attr:`picks` therefore always equals some state the store
    actually held, and is safe to pass to
    :func:`~f1draft.draft.logic.current_pick_info`.

    Usage:
        replica = PickLogReplica.follow(store, "race-1")
        info = current_pick_info(roster, replica.picks, rounds=3)
    """

    def __init__(self, picks: Iterable[Pick] = (), version: int = 0) -> None:
        self._lock = threading.Lock()
        self._applied: list[Pick] = []
        self._version = 0
        self._pending: dict[int, PickLogEvent] = {}
        self.reset(picks, version)

    @classmethod
    def follow(cls, store: PickLogStore, draft_id: str) -> PickLogReplica:
        """Subscribe to ``store`` and seed from a snapshot of ``draft_id``.

        Events that land between subscribing and taking the snapshot are
        either already in it (and dropped) or buffered until they apply.
        """
        replica = cls()

        def listener(event: PickLogEvent) -> None:
            if event.draft_id == draft_id:
                replica.apply(event)

        store.subscribe(listener)
        snapshot = store.snapshot(draft_id)
        replica.reset(snapshot.picks, snapshot.version)
        return replica

    @property
    def picks(self) -> list[Pick]:
        with self._lock:
            return list(self._applied)

    @property
    def version(self) -> int:
        return self._version

    @property
    def pending_count(self) -> int:
        """Events held back waiting for a lower version."""
        return len(self._pending)

    def reset(self, picks: Iterable[Pick], version: int = 0) -> None:
        """Replace local state with a full re-fetch of the log at ``version``."""
        with self._lock:
            self._applied = sorted(picks, key=lambda p: p.pick_number)
            self._version = version
            self._pending = {v: e for v, e in self._pending.items() if v > version}
            self._drain()

    def apply(self, event: PickLogEvent) -> None:
        with self._lock:
            if event.version <= self._version:
                return  # already applied
            self._pending[event.version] = event
            self._drain()

    def _drain(self) -> None:
        while self._version + 1 in self._pending:
            event = self._pending.pop(self._version + 1)
            if event.kind is PickLogEventKind.PICK:
                self._applied.append(event.pick)
            elif self._applied and self._applied[-1] == event.pick:
                self._applied.pop()
            self._version = event.version

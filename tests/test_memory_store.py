"""Tests for store/memory.py."""

from __future__ import annotations

import threading

import pytest

from f1draft.exceptions import PickLogConflictError
from f1draft.models import Pick
from f1draft.store import InMemoryPickLogStore, PickLogEventKind


def _pick(n: int, item_id: str) -> Pick:
    return Pick(pick_number=n, participant_id="alice", item_id=item_id, start_rank=n)


class TestAppend:
    def test_append_and_read(self, store):
        store.append("d1", _pick(1, "VER"), expected_length=0)
        store.append("d1", _pick(2, "NOR"), expected_length=1)
        assert [p.item_id for p in store.read("d1")] == ["VER", "NOR"]

    def test_drafts_are_separate(self, store):
        store.append("d1", _pick(1, "VER"), expected_length=0)
        store.append("d2", _pick(1, "VER"), expected_length=0)
        assert len(store.read("d1")) == 1
        assert len(store.read("d2")) == 1

    def test_unknown_draft_reads_empty(self, store):
        assert store.read("missing") == []

    def test_read_returns_copy(self, store):
        store.append("d1", _pick(1, "VER"), expected_length=0)
        store.read("d1").clear()
        assert len(store.read("d1")) == 1

    def test_length_mismatch_conflicts(self, store):
        store.append("d1", _pick(1, "VER"), expected_length=0)
        with pytest.raises(PickLogConflictError) as exc_info:
            store.append("d1", _pick(1, "NOR"), expected_length=0)
        assert exc_info.value.expected_length == 0
        assert exc_info.value.actual_length == 1
        assert "d1" in str(exc_info.value)

    def test_wrong_pick_number_conflicts(self, store):
        with pytest.raises(PickLogConflictError):
            store.append("d1", _pick(2, "VER"), expected_length=0)
        assert store.read("d1") == []

    def test_duplicate_item_conflicts(self, store):
        store.append("d1", _pick(1, "VER"), expected_length=0)
        with pytest.raises(PickLogConflictError):
            store.append("d1", _pick(2, "VER"), expected_length=1)
        assert len(store.read("d1")) == 1


class TestPopLast:
    def test_pops_tail(self, store):
        first = _pick(1, "VER")
        second = _pick(2, "NOR")
        store.append("d1", first, expected_length=0)
        store.append("d1", second, expected_length=1)
        assert store.pop_last("d1") == second
        assert store.read("d1") == [first]

    def test_empty_returns_none(self, store):
        assert store.pop_last("d1") is None


class TestSubscribe:
    def test_events(self, store):
        events = []
        store.subscribe(events.append)
        pick = _pick(1, "VER")
        store.append("d1", pick, expected_length=0)
        store.pop_last("d1")

        assert [e.kind for e in events] == [PickLogEventKind.PICK, PickLogEventKind.UNDO]
        assert all(e.pick == pick and e.draft_id == "d1" for e in events)

    def test_no_event_on_conflict_or_empty_pop(self, store):
        events = []
        store.subscribe(events.append)
        with pytest.raises(PickLogConflictError):
            store.append("d1", _pick(2, "VER"), expected_length=0)
        store.pop_last("d1")
        assert events == []

    def test_versions_count_every_change(self, store):
        events = []
        store.subscribe(events.append)
        store.append("d1", _pick(1, "VER"), expected_length=0)
        store.append("d2", _pick(1, "VER"), expected_length=0)
        store.pop_last("d1")
        store.append("d1", _pick(1, "NOR"), expected_length=0)

        assert [(e.draft_id, e.version) for e in events] == [
            ("d1", 1), ("d2", 1), ("d1", 2), ("d1", 3),
        ]

    def test_listener_may_subscribe_during_notify(self, store):
        late_events = []

        def first(event):
            store.subscribe(late_events.append)

        store.subscribe(first)
        store.append("d1", _pick(1, "VER"), expected_length=0)
        assert late_events == []

        store.append("d1", _pick(2, "NOR"), expected_length=1)
        assert [e.version for e in late_events] == [2]

    def test_concurrent_subscribers_all_registered(self, store):
        barrier = threading.Barrier(8)
        received = []

        def subscribe():
            barrier.wait()
            store.subscribe(received.append)

        threads = [threading.Thread(target=subscribe) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        store.append("d1", _pick(1, "VER"), expected_length=0)
        assert len(received) == 8


class TestSnapshot:
    def test_empty(self, store):
        snapshot = store.snapshot("d1")
        assert snapshot.picks == []
        assert snapshot.version == 0

    def test_version_tracks_undo(self, store):
        first = _pick(1, "VER")
        store.append("d1", first, expected_length=0)
        store.append("d1", _pick(2, "NOR"), expected_length=1)
        store.pop_last("d1")
        snapshot = store.snapshot("d1")
        assert snapshot.picks == [first]
        assert snapshot.version == 3


def test_is_a_pick_log_store():
    from f1draft.store import PickLogStore

    assert isinstance(InMemoryPickLogStore(), PickLogStore)

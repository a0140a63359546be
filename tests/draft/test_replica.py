"""Tests for draft/replica.py."""

from __future__ import annotations

import pytest

from f1draft.draft.logic import current_pick_info
from f1draft.draft.replica import PickLogReplica
from f1draft.draft.service import DraftService
from f1draft.models import Pick
from f1draft.store.base import PickLogEvent, PickLogEventKind


def _pick(n: int, item_id: str, participant_id: str = "alice") -> Pick:
    return Pick(pick_number=n, participant_id=participant_id, item_id=item_id, start_rank=n)


def _picked(pick: Pick, version: int) -> PickLogEvent:
    return PickLogEvent("race-1", PickLogEventKind.PICK, pick, version)


def _undone(pick: Pick, version: int) -> PickLogEvent:
    return PickLogEvent("race-1", PickLogEventKind.UNDO, pick, version)


@pytest.fixture
def picks() -> list[Pick]:
    return [_pick(1, "VER"), _pick(2, "NOR", "bob"), _pick(3, "LEC", "carol")]


class TestApplyPick:
    def test_in_order(self, picks):
        replica = PickLogReplica()
        for version, p in enumerate(picks, start=1):
            replica.apply(_picked(p, version))
        assert replica.picks == picks
        assert replica.version == 3
        assert replica.pending_count == 0

    def test_gap_is_held_back(self, picks):
        replica = PickLogReplica()
        replica.apply(_picked(picks[0], 1))
        replica.apply(_picked(picks[2], 3))
        assert replica.picks == picks[:1]
        assert replica.pending_count == 1

        replica.apply(_picked(picks[1], 2))
        assert replica.picks == picks
        assert replica.pending_count == 0

    def test_reverse_order(self, picks):
        replica = PickLogReplica()
        for version, p in reversed(list(enumerate(picks, start=1))):
            replica.apply(_picked(p, version))
        assert replica.picks == picks

    def test_duplicate_is_ignored(self, picks):
        replica = PickLogReplica(picks[:2], version=2)
        replica.apply(_picked(picks[1], 2))
        replica.apply(_picked(picks[0], 1))
        assert replica.picks == picks[:2]
        assert replica.pending_count == 0

    def test_prefix_is_valid_for_queries(self, roster, picks):
        replica = PickLogReplica()
        replica.apply(_picked(picks[2], 3))
        info = current_pick_info(roster, replica.picks, rounds=3)
        assert info.pick_number == 1


class TestApplyUndo:
    def test_undo_tail(self, picks):
        replica = PickLogReplica(picks, version=3)
        replica.apply(_undone(picks[2], 4))
        assert replica.picks == picks[:2]
        assert replica.version == 4

    def test_undo_then_new_pick_at_same_number(self, picks):
        replica = PickLogReplica(picks, version=3)
        replacement = _pick(3, "PIA", "carol")
        replica.apply(_undone(picks[2], 4))
        replica.apply(_picked(replacement, 5))
        assert replica.picks == picks[:2] + [replacement]

    def test_replacement_pick_arriving_before_its_undo(self, picks):
        replica = PickLogReplica(picks, version=3)
        replacement = _pick(3, "PIA", "carol")

        replica.apply(_picked(replacement, 5))
        assert replica.picks == picks
        assert replica.pending_count == 1

        replica.apply(_undone(picks[2], 4))
        assert replica.picks == picks[:2] + [replacement]
        assert replica.pending_count == 0

    def test_undo_arriving_before_its_pick(self, picks):
        replica = PickLogReplica(picks[:2], version=2)

        replica.apply(_undone(picks[2], 4))
        assert replica.picks == picks[:2]

        replica.apply(_picked(picks[2], 3))
        assert replica.picks == picks[:2]
        assert replica.version == 4

    def test_undo_of_seeded_log_replays_on_current_pick(self, roster, picks):
        replica = PickLogReplica(picks[:2], version=2)
        replica.apply(_undone(picks[2], 4))
        replica.apply(_picked(picks[2], 3))
        info = current_pick_info(roster, replica.picks, rounds=3)
        assert info.pick_number == 3


class TestReset:
    def test_replaces_state(self, picks):
        replica = PickLogReplica(picks[:1], version=1)
        replica.apply(_picked(picks[2], 3))
        replica.reset(picks, version=3)
        assert replica.picks == picks
        assert replica.pending_count == 0

    def test_keeps_newer_pending_events(self, picks):
        replica = PickLogReplica()
        replica.apply(_picked(picks[1], 2))
        replica.reset(picks[:1], version=1)
        assert replica.picks == picks[:2]
        assert replica.version == 2


class TestFollow:
    def test_seeds_from_snapshot(self, service: DraftService, store):
        service.commit_pick("VER", "alice", 1)
        replica = PickLogReplica.follow(store, "race-1")
        assert replica.picks == service.picks()
        assert replica.version == 1

        service.commit_pick("NOR", "bob", 2)
        service.undo_last_pick()
        service.commit_pick("LEC", "bob", 2)

        assert replica.picks == service.picks()
        assert replica.version == 4

    def test_ignores_other_drafts(self, service: DraftService, store):
        replica = PickLogReplica.follow(store, "race-1")
        store.append("race-2", _pick(1, "HAM"), expected_length=0)
        service.commit_pick("VER", "alice", 1)
        assert [p.item_id for p in replica.picks] == ["VER"]

    def test_converges_when_events_are_delivered_backwards(self, service: DraftService, store):
        events: list[PickLogEvent] = []
        store.subscribe(events.append)

        service.commit_pick("VER", "alice", 1)
        service.commit_pick("NOR", "bob", 2)
        service.undo_last_pick()
        service.commit_pick("LEC", "bob", 2)
        service.undo_last_pick()
        service.undo_last_pick()
        service.commit_pick("PIA", "alice", 1)

        replica = PickLogReplica()
        for event in reversed(events):
            replica.apply(event)

        snapshot = store.snapshot("race-1")
        assert replica.picks == snapshot.picks
        assert replica.version == snapshot.version == 7

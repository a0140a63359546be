"""Draft service: validated pick commits against a shared pick log."""

from __future__ import annotations

from collections.abc import Sequence

from f1draft.call_logging import get_logger, log_service_call
from f1draft.exceptions import PickLogConflictError
from f1draft.models.item import DraftableItem
from f1draft.models.participant import Participant
from f1draft.models.pick import Pick
from f1draft.models.rules import DraftRules
from f1draft.store.base import PickLogStore
from f1draft.tiers import tiers_held

from .logic import (
    PickInfo,
    available_by_tier,
    available_items,
    current_pick_info,
    draft_progress,
    draft_status,
    generate_pick_order,
    picks_for_participant,
    sort_roster,
    validate_pick,
)
from .outcomes import CommitResult, DraftStatus, PickOutcome, UndoOutcome, UndoResult
from .setup import validate_draft_setup


class DraftService:
    """Runs one draft on top of a :class:`PickLogStore`.

    The service keeps no draft state of its own. Every call reads the latest
    pick log from the store, so any number of services (one per client or
    process) can share a store and agree on whose turn it is.
    """

    def __init__(
        self,
        draft_id: str,
        store: PickLogStore,
        roster: Sequence[Participant],
        items: Sequence[DraftableItem],
        rules: DraftRules,
    ) -> None:
        validate_draft_setup(roster, items, rules)
        self.draft_id = draft_id
        self.rules = rules
        self._store = store
        self._roster = sort_roster(roster)
        self._items = sorted(items, key=lambda i: i.start_rank)
        self._items_by_id = {i.item_id: i for i in self._items}

    def __repr__(self) -> str:
        return f"DraftService(draft_id={self.draft_id!r})"

    # ── Queries ────────────────────────────────────────────────

    @property
    def roster(self) -> list[Participant]:
        return list(self._roster)

    @property
    def total_picks(self) -> int:
        return len(self._roster) * self.rules.rounds

    def picks(self) -> list[Pick]:
        return self._store.read(self.draft_id)

    def pick_order(self) -> list[Participant]:
        """Return the participant for every pick, first to last."""
        order = generate_pick_order(len(self._roster), self.rules.rounds)
        return [self._roster[i] for i in order]

    def current_pick(self) -> PickInfo | None:
        return current_pick_info(self._roster, self.picks(), self.rules.rounds)

    def status(self) -> DraftStatus:
        return draft_status(self._roster, self.picks(), self.rules.rounds)

    def progress(self) -> int:
        return draft_progress(len(self.picks()), self.total_picks)

    def available(self) -> list[DraftableItem]:
        return available_items(self._items, self.picks())

    def available_by_tier(self) -> dict[int, list[DraftableItem]]:
        return available_by_tier(self._items, self.picks())

    def participant_picks(self, participant_id: str) -> list[Pick]:
        return picks_for_participant(self.picks(), participant_id)

    # ── Commands ───────────────────────────────────────────────

    @log_service_call
    def commit_pick(self, item_id: str, participant_id: str, pick_number: int) -> CommitResult:
        """Validate and append a pick.

        Rejections come back as a :class:`CommitResult`, never as an
        exception. When another commit lands between validation and append,
        the attempt is re-checked against the refreshed log and reported as
        ``ITEM_ALREADY_TAKEN`` or ``STALE_PICK_NUMBER``.
        """
        picks = self.picks()
        outcome = validate_pick(
            self._roster, self._items, picks, self.rules,
            item_id, participant_id, pick_number,
        )
        if outcome is not PickOutcome.OK:
            get_logger().info(
                "PICK REJECTED: draft=%s pick=%d participant=%s item=%s -> %s",
                self.draft_id, pick_number, participant_id, item_id, outcome.value,
            )
            return CommitResult(outcome)

        pick = Pick(
            pick_number=pick_number,
            participant_id=participant_id,
            item_id=item_id,
            start_rank=self._items_by_id[item_id].start_rank,
        )
        try:
            self._store.append(self.draft_id, pick, expected_length=len(picks))
        except PickLogConflictError as exc:
            get_logger().warning("PICK CONFLICT: %s", exc)
            return CommitResult(self._classify_conflict(item_id))

        get_logger().info(
            "PICK: draft=%s pick=%d participant=%s item=%s",
            self.draft_id, pick_number, participant_id, item_id,
        )
        return CommitResult(PickOutcome.OK, pick)

    @log_service_call
    def undo_last_pick(self) -> UndoResult:
        """Remove the most recent pick, if any."""
        pick = self._store.pop_last(self.draft_id)
        if pick is None:
            get_logger().info("UNDO: draft=%s -> nothing to undo", self.draft_id)
            return UndoResult(UndoOutcome.NOTHING_TO_UNDO)
        get_logger().info(
            "UNDO: draft=%s pick=%d item=%s", self.draft_id, pick.pick_number, pick.item_id,
        )
        return UndoResult(UndoOutcome.UNDONE, pick)

    @log_service_call
    def auto_pick(self) -> CommitResult:
        """Commit the best-ranked legal item for whoever is on the clock.

        Used when a pick timer expires; goes through :meth:`commit_pick` so it
        races like any other client.
        """
        picks = self.picks()
        info = current_pick_info(self._roster, picks, self.rules.rounds)
        if info is None:
            return CommitResult(PickOutcome.DRAFT_ALREADY_COMPLETE)

        participant_id = info.participant.participant_id
        held = tiers_held(picks, participant_id) if self.rules.one_per_tier else set()
        candidate = next(
            (item for item in available_items(self._items, picks) if item.tier not in held),
            None,
        )
        if candidate is None:
            return CommitResult(PickOutcome.TIER_ALREADY_FILLED)
        return self.commit_pick(candidate.item_id, participant_id, info.pick_number)

    def _classify_conflict(self, item_id: str) -> PickOutcome:
        if any(p.item_id == item_id for p in self.picks()):
            return PickOutcome.ITEM_ALREADY_TAKEN
        return PickOutcome.STALE_PICK_NUMBER

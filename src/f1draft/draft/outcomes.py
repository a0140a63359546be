"""Typed outcomes for pick and undo attempts."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from f1draft.models.pick import Pick


class DraftStatus(str, Enum):
    NOT_STARTED = "not_started"
    IN_PROGRESS = "in_progress"
    COMPLETE = "complete"


class PickOutcome(str, Enum):
    """Result of validating or committing a pick."""

    OK = "ok"
    DRAFT_ALREADY_COMPLETE = "draft_already_complete"
    UNKNOWN_ITEM = "unknown_item"
    ITEM_ALREADY_TAKEN = "item_already_taken"
    NOT_YOUR_TURN = "not_your_turn"
    STALE_PICK_NUMBER = "stale_pick_number"
    TIER_ALREADY_FILLED = "tier_already_filled"


# Outcomes caused by another client committing first. The caller should
# refresh its pick log and retry only if it is still its turn.
RACE_LOST_OUTCOMES = frozenset({
    PickOutcome.ITEM_ALREADY_TAKEN,
    PickOutcome.STALE_PICK_NUMBER,
})


@dataclass(frozen=True)
class CommitResult:
    outcome: PickOutcome
    pick: Pick | None = None

    @property
    def ok(self) -> bool:
        return self.outcome is PickOutcome.OK

    @property
    def should_refresh(self) -> bool:
        return self.outcome in RACE_LOST_OUTCOMES


class UndoOutcome(str, Enum):
    UNDONE = "undone"
    NOTHING_TO_UNDO = "nothing_to_undo"


@dataclass(frozen=True)
class UndoResult:
    outcome: UndoOutcome
    pick: Pick | None = None

    @property
    def ok(self) -> bool:
        return self.outcome is UndoOutcome.UNDONE

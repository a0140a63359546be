"""Draft engine: snake order, pick validation and the draft service."""

from .logic import (
    PickInfo,
    available_by_tier,
    available_items,
    check_pick_log,
    current_pick_info,
    draft_progress,
    draft_status,
    generate_pick_order,
    is_draft_complete,
    participant_for_pick,
    picks_for_participant,
    sort_roster,
    validate_pick,
)
from .outcomes import (
    CommitResult,
    DraftStatus,
    PickOutcome,
    UndoOutcome,
    UndoResult,
)
from .replica import PickLogReplica
from .service import DraftService
from .setup import assign_draft_slots, validate_draft_setup, validate_item_pool, validate_roster

__all__ = [
    "CommitResult",
    "DraftService",
    "DraftStatus",
    "PickInfo",
    "PickLogReplica",
    "PickOutcome",
    "UndoOutcome",
    "UndoResult",
    "assign_draft_slots",
    "available_by_tier",
    "available_items",
    "check_pick_log",
    "current_pick_info",
    "draft_progress",
    "draft_status",
    "generate_pick_order",
    "is_draft_complete",
    "participant_for_pick",
    "picks_for_participant",
    "sort_roster",
    "validate_draft_setup",
    "validate_item_pool",
    "validate_roster",
]

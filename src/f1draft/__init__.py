"""f1draft: snake-draft turn engine and race scoring for fantasy F1 leagues."""

from f1draft.draft import (
    CommitResult,
    DraftService,
    DraftStatus,
    PickInfo,
    PickLogReplica,
    PickOutcome,
    UndoOutcome,
    UndoResult,
    assign_draft_slots,
    available_items,
    current_pick_info,
    generate_pick_order,
    validate_pick,
)
from f1draft.exceptions import (
    DraftConfigError,
    F1DraftError,
    InvalidItemPoolError,
    InvalidPickLogError,
    InvalidRosterError,
    PickLogConflictError,
    ResultsFinalizedError,
    ResultsIncompleteError,
    SourceError,
)
from f1draft.models import (
    DraftRules,
    DraftableItem,
    EventOutcome,
    FinishResult,
    Participant,
    Pick,
    RaceResult,
    ResultSource,
    Standing,
)
from f1draft.scoring import (
    ItemScore,
    ParticipantScore,
    RaceResultsBoard,
    UnscoredPolicy,
    participant_total,
    score_item,
    score_participant,
    season_standings,
)
from f1draft.store import InMemoryPickLogStore, PickLogSnapshot, PickLogStore
from f1draft.tiers import group_by_tier, tier_for_rank

__all__ = [
    "CommitResult",
    "DraftConfigError",
    "DraftRules",
    "DraftService",
    "DraftStatus",
    "DraftableItem",
    "EventOutcome",
    "F1DraftError",
    "FinishResult",
    "InMemoryPickLogStore",
    "InvalidItemPoolError",
    "InvalidPickLogError",
    "InvalidRosterError",
    "ItemScore",
    "Participant",
    "ParticipantScore",
    "Pick",
    "PickInfo",
    "PickLogConflictError",
    "PickLogReplica",
    "PickLogSnapshot",
    "PickLogStore",
    "PickOutcome",
    "RaceResult",
    "RaceResultsBoard",
    "ResultSource",
    "ResultsFinalizedError",
    "ResultsIncompleteError",
    "SourceError",
    "Standing",
    "UndoOutcome",
    "UndoResult",
    "UnscoredPolicy",
    "assign_draft_slots",
    "available_items",
    "current_pick_info",
    "generate_pick_order",
    "group_by_tier",
    "participant_total",
    "score_item",
    "score_participant",
    "season_standings",
    "tier_for_rank",
    "validate_pick",
]

__version__ = "0.1.0"

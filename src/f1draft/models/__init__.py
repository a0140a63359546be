"""Draft and scoring data models."""

from f1draft.models.item import DraftableItem
from f1draft.models.participant import Participant
from f1draft.models.pick import Pick
from f1draft.models.race_result import ItemResult, RaceBreakdown, RaceResult, Standing
from f1draft.models.results import EventOutcome, FinishResult, ResultSource
from f1draft.models.rules import DraftRules

__all__ = [
    "DraftRules",
    "DraftableItem",
    "EventOutcome",
    "FinishResult",
    "ItemResult",
    "Participant",
    "Pick",
    "RaceBreakdown",
    "RaceResult",
    "ResultSource",
    "Standing",
]

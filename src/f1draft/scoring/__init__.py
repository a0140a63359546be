"""Race scoring: per-item points, live result entry and season standings."""

from .board import RaceResultsBoard
from .engine import (
    ItemScore,
    ParticipantScore,
    UnscoredPolicy,
    fastest_lap_points,
    finish_bonus,
    movement_points,
    participant_total,
    score_item,
    score_participant,
)
from .standings import race_winners, season_standings

__all__ = [
    "ItemScore",
    "ParticipantScore",
    "RaceResultsBoard",
    "UnscoredPolicy",
    "fastest_lap_points",
    "finish_bonus",
    "movement_points",
    "participant_total",
    "race_winners",
    "score_item",
    "score_participant",
    "season_standings",
]

"""Finalized race result and season standing models."""

from __future__ import annotations

from datetime import UTC, datetime

from pydantic import BaseModel, ConfigDict, Field

from f1draft.models.results import ResultSource


class ItemResult(BaseModel):
    """Frozen score breakdown for one drafted item."""

    model_config = ConfigDict(frozen=True)

    item_id: str
    start_rank: int
    finish_rank: int
    is_dnf: bool
    movement_points: int
    finish_bonus: int
    fastest_lap_bonus: int
    total_points: int
    source: ResultSource


class RaceResult(BaseModel):
    """A participant's finalized score for one race."""

    model_config = ConfigDict(frozen=True)

    race_id: str
    participant_id: str
    total_points: int
    fastest_lap_item_id: str | None = None
    item_results: tuple[ItemResult, ...] = ()
    race_name: str | None = None
    race_number: int | None = None
    finalized_at: datetime = Field(default_factory=lambda: datetime.now(UTC))


class RaceBreakdown(BaseModel):
    """One race's contribution to a season standing."""

    model_config = ConfigDict(frozen=True)

    race_id: str
    race_name: str | None = None
    race_number: int | None = None
    points: int


class Standing(BaseModel):
    """Season standing row for one participant."""

    model_config = ConfigDict(frozen=True)

    participant_id: str
    display_name: str
    color: str | None = None
    total_points: int = 0
    races_completed: int = 0
    race_breakdown: tuple[RaceBreakdown, ...] = ()

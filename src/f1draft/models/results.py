"""Finish result models for the scoring phase."""

from __future__ import annotations

from datetime import UTC, datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, model_validator

from f1draft.constants import DNF_POSITION


class ResultSource(str, Enum):
    """Where a finish position came from."""

    API = "api"
    MANUAL = "manual"


class FinishResult(BaseModel):
    """Finishing position (or DNF) for one item."""

    model_config = ConfigDict(frozen=True)

    item_id: str
    position: int | None = Field(default=None, ge=1)
    dnf: bool = False
    source: ResultSource = ResultSource.MANUAL
    previous_source: ResultSource | None = None
    updated_at: datetime = Field(default_factory=lambda: datetime.now(UTC))

    @model_validator(mode="after")
    def _position_or_dnf(self) -> FinishResult:
        if self.position is None and not self.dnf:
            raise ValueError("a finish result needs a position or dnf=True")
        return self

    def effective_rank(self, dnf_position: int = DNF_POSITION) -> int:
        """Return the finish rank used for scoring, mapping DNFs to the sentinel."""
        if self.dnf or self.position is None:
            return dnf_position
        return self.position


class EventOutcome(BaseModel):
    """All finish results for one race plus the single fastest-lap holder."""

    model_config = ConfigDict(frozen=True)

    results: tuple[FinishResult, ...] = ()
    fastest_lap_item_id: str | None = None

    def by_item(self) -> dict[str, FinishResult]:
        return {r.item_id: r for r in self.results}

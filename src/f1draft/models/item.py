"""Draftable item (driver) model."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from f1draft.tiers import tier_for_rank


class DraftableItem(BaseModel):
    """A driver on the grid that can be drafted."""

    model_config = ConfigDict(frozen=True)

    item_id: str
    start_rank: int = Field(ge=1)
    name: str | None = None
    driver_number: int | None = None
    team_name: str | None = None

    @property
    def tier(self) -> int:
        return tier_for_rank(self.start_rank)

"""Per-draft configuration."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class DraftRules(BaseModel):
    """Rules for a single draft.

    ``rounds`` is the number of items each participant drafts. With
    ``one_per_tier`` set, a participant may hold at most one item per tier.
    """

    model_config = ConfigDict(frozen=True)

    rounds: int = Field(ge=1)
    one_per_tier: bool = False

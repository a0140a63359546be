"""Committed pick model."""

from __future__ import annotations

from datetime import UTC, datetime

from pydantic import BaseModel, ConfigDict, Field


class Pick(BaseModel):
    """One participant claiming one item at one point in the draft.

    ``start_rank`` is captured at commit time so scoring never needs the
    original item pool.
    """

    model_config = ConfigDict(frozen=True)

    pick_number: int = Field(ge=1)
    participant_id: str
    item_id: str
    start_rank: int = Field(ge=1)
    created_at: datetime = Field(default_factory=lambda: datetime.now(UTC))

"""Draft participant model."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class Participant(BaseModel):
    """A team competing in the draft and the race.

    ``draft_slot`` is the 1-based position in the pick rotation. It stays
    ``None`` until slots are assigned and never changes once the draft starts.
    """

    model_config = ConfigDict(frozen=True)

    participant_id: str
    display_name: str
    draft_slot: int | None = Field(default=None, ge=1)
    color: str | None = None

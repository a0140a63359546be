"""OpenF1 payload rows used to build grids and race outcomes.

Every field is optional: OpenF1 omits or nulls fields freely, so callers
filter on what they need.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict


class _Row(BaseModel):
    model_config = ConfigDict(frozen=True)

    session_key: int | None = None
    driver_number: int | None = None


class Driver(_Row):
    full_name: str | None = None
    name_acronym: str | None = None
    team_name: str | None = None


class Session(BaseModel):
    model_config = ConfigDict(frozen=True)

    session_key: int | None = None
    meeting_key: int | None = None
    session_name: str | None = None
    session_type: str | None = None
    country_name: str | None = None
    location: str | None = None
    date_start: datetime | None = None
    year: int | None = None


class StartingGrid(_Row):
    position: int | None = None
    lap_duration: float | None = None
    meeting_key: int | None = None


class SessionResult(_Row):
    position: int | None = None
    dnf: bool | None = None
    dns: bool | None = None
    dsq: bool | None = None
    laps_completed: int | None = None

    @property
    def did_not_finish(self) -> bool:
        """DNF, DNS and DSQ all score as a non-finish, as does a missing position."""
        return bool(self.dnf or self.dns or self.dsq) or self.position is None


class Lap(_Row):
    lap_number: int | None = None
    lap_duration: float | None = None
    is_pit_out_lap: bool | None = None
    date_start: datetime | None = None

    @property
    def is_timed_racing_lap(self) -> bool:
        """A completed lap that did not start from the pit lane."""
        return self.lap_duration is not None and not self.is_pit_out_lap

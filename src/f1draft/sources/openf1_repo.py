"""OpenF1 API grid and result source."""

from __future__ import annotations

import threading
import time

from f1draft.call_logging import log_source_call
from f1draft.exceptions import SourceError
from f1draft.models.item import DraftableItem
from f1draft.models.results import EventOutcome, FinishResult, ResultSource
from f1draft.openf1 import OpenF1Client, OpenF1Error
from f1draft.openf1.client import DEFAULT_BASE_URL, DEFAULT_TIMEOUT
from f1draft.openf1.models import Driver

from .base import EventDataSource

# ── Rate limiting ────────────────────────────────────────────────────────────

_last_request_time: float = 0.0
_rate_limit_lock = threading.Lock()
_MIN_REQUEST_INTERVAL = 0.35  # OpenF1 allows 3 req/s


def _rate_limit() -> None:
    """Sleep if needed to respect the OpenF1 API rate limit."""
    global _last_request_time
    with _rate_limit_lock:
        now = time.monotonic()
        elapsed = now - _last_request_time
        if elapsed < _MIN_REQUEST_INTERVAL:
            time.sleep(_MIN_REQUEST_INTERVAL - elapsed)
        _last_request_time = time.monotonic()


def _item_id(driver_number: int, drivers: dict[int, Driver]) -> str:
    driver = drivers.get(driver_number)
    if driver is not None and driver.name_acronym:
        return driver.name_acronym
    return str(driver_number)


class OpenF1DataSource(EventDataSource):
    """Builds the item pool and race outcome from a race session.

    ``event_key`` is the OpenF1 ``session_key`` of the race.
    """

    def __init__(self, base_url: str = DEFAULT_BASE_URL, timeout: float = DEFAULT_TIMEOUT) -> None:
        self._base_url = base_url
        self._timeout = timeout

    def _client(self) -> OpenF1Client:
        return OpenF1Client(base_url=self._base_url, timeout=self._timeout)

    def _drivers(self, f1: OpenF1Client, session_key: int | str) -> dict[int, Driver]:
        _rate_limit()
        return {
            d.driver_number: d for d in f1.drivers(session_key=session_key)
            if d.driver_number is not None
        }

    @log_source_call
    def find_race_session_key(self, year: int, country_name: str) -> int | None:
        """Return the race session key for a country and season, if any."""
        _rate_limit()
        try:
            with self._client() as f1:
                sessions = f1.sessions(year=year, country_name=country_name, session_name="Race")
        except OpenF1Error as exc:
            raise SourceError(f"Failed to find race session for {country_name} {year}: {exc}") from exc
        return next((s.session_key for s in sessions if s.session_key is not None), None)

    @log_source_call
    def get_items(self, event_key: int | str) -> list[DraftableItem]:
        """Return the grid as draftable items ranked 1..N.

        Grid gaps are closed up, and entrants with no grid slot (pit-lane
        starters) go to the back in car-number order.
        """
        try:
            with self._client() as f1:
                drivers = self._drivers(f1, event_key)
                _rate_limit()
                grid = f1.starting_grid(session_key=event_key)
        except OpenF1Error as exc:
            raise SourceError(f"Failed to fetch grid for session {event_key}: {exc}") from exc

        slotted = sorted(
            (g for g in grid if g.position is not None and g.driver_number is not None),
            key=lambda g: g.position,  # type: ignore[arg-type, return-value]
        )
        order = [g.driver_number for g in slotted]
        order += sorted(n for n in drivers if n not in order)
        if not order:
            raise SourceError(f"No starting grid published for session {event_key}")

        items: list[DraftableItem] = []
        for rank, number in enumerate(order, start=1):
            driver = drivers.get(number)  # type: ignore[arg-type]
            items.append(DraftableItem(
                item_id=_item_id(number, drivers),  # type: ignore[arg-type]
                start_rank=rank,
                name=driver.full_name if driver else None,
                driver_number=number,
                team_name=driver.team_name if driver else None,
            ))
        return items

    @log_source_call
    def get_outcome(self, event_key: int | str) -> EventOutcome:
        """Return the classification and fastest lap holder for a race."""
        try:
            with self._client() as f1:
                drivers = self._drivers(f1, event_key)
                _rate_limit()
                classification = f1.session_result(session_key=event_key)
                _rate_limit()
                laps = f1.laps(session_key=event_key)
        except OpenF1Error as exc:
            raise SourceError(f"Failed to fetch results for session {event_key}: {exc}") from exc

        results = tuple(
            FinishResult(
                item_id=_item_id(row.driver_number, drivers),
                position=None if row.did_not_finish else row.position,
                dnf=row.did_not_finish,
                source=ResultSource.API,
            )
            for row in classification
            if row.driver_number is not None
        )

        timed = [lap for lap in laps if lap.is_timed_racing_lap and lap.driver_number is not None]
        fastest = min(timed, key=lambda lap: lap.lap_duration, default=None)  # type: ignore[arg-type, return-value]
        return EventOutcome(
            results=results,
            fastest_lap_item_id=_item_id(fastest.driver_number, drivers) if fastest else None,  # type: ignore[arg-type]
        )

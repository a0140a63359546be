"""Live and post-race result entry for a single race."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from datetime import UTC, datetime

from f1draft.call_logging import get_logger, log_service_call
from f1draft.exceptions import ResultsFinalizedError, ResultsIncompleteError
from f1draft.models.participant import Participant
from f1draft.models.pick import Pick
from f1draft.models.race_result import ItemResult, RaceResult
from f1draft.models.results import EventOutcome, FinishResult, ResultSource

from .engine import ParticipantScore, UnscoredPolicy, score_participant


class RaceResultsBoard:
    """Finish positions and the fastest-lap holder for one race.

    Positions arrive from a data feed or by manual entry. A manual override
    sticks: later feed updates for the same item are ignored. Once
    :meth:`finalize` has run, the board is frozen.
    """

    def __init__(
        self,
        race_id: str,
        race_name: str | None = None,
        race_number: int | None = None,
    ) -> None:
        self.race_id = race_id
        self.race_name = race_name
        self.race_number = race_number
        self._results: dict[str, FinishResult] = {}
        self._fastest_lap_item_id: str | None = None
        self._finalized = False

    def __repr__(self) -> str:
        return f"RaceResultsBoard(race_id={self.race_id!r})"

    @property
    def finalized(self) -> bool:
        return self._finalized

    @property
    def fastest_lap_item_id(self) -> str | None:
        return self._fastest_lap_item_id

    def results(self) -> dict[str, FinishResult]:
        return dict(self._results)

    def outcome(self) -> EventOutcome:
        return EventOutcome(
            results=tuple(self._results.values()),
            fastest_lap_item_id=self._fastest_lap_item_id,
        )

    # ── Edits ──────────────────────────────────────────────────

    def apply_feed(self, positions: Mapping[str, int], fastest_lap_item_id: str | None = None) -> int:
        """Apply a batch of feed positions; returns how many were applied."""
        self._check_editable()
        applied = 0
        for item_id, position in positions.items():
            current = self._results.get(item_id)
            if current is not None and current.source is ResultSource.MANUAL:
                continue
            self._store(item_id, position=position, dnf=False, source=ResultSource.API)
            applied += 1
        if fastest_lap_item_id is not None:
            self._fastest_lap_item_id = fastest_lap_item_id
        return applied

    def apply_outcome(self, outcome: EventOutcome) -> int:
        """Apply a full outcome from a data source, respecting manual overrides."""
        self._check_editable()
        applied = 0
        for result in outcome.results:
            current = self._results.get(result.item_id)
            if current is not None and current.source is ResultSource.MANUAL:
                continue
            self._store(result.item_id, position=result.position, dnf=result.dnf, source=result.source)
            applied += 1
        if outcome.fastest_lap_item_id is not None:
            self._fastest_lap_item_id = outcome.fastest_lap_item_id
        return applied

    def override(self, item_id: str, position: int) -> FinishResult:
        """Manually set an item's finish position."""
        self._check_editable()
        return self._store(item_id, position=position, dnf=False, source=ResultSource.MANUAL)

    def mark_dnf(self, item_id: str) -> FinishResult:
        self._check_editable()
        return self._store(item_id, position=None, dnf=True, source=ResultSource.MANUAL)

    def clear(self, item_id: str) -> None:
        """Forget an item's result so feed updates apply again."""
        self._check_editable()
        self._results.pop(item_id, None)

    def set_fastest_lap(self, item_id: str | None) -> None:
        self._check_editable()
        self._fastest_lap_item_id = item_id

    # ── Scoring ────────────────────────────────────────────────

    def live_scores(
        self,
        roster: Sequence[Participant],
        picks: Sequence[Pick],
        policy: UnscoredPolicy = UnscoredPolicy.ASSUME_NO_MOVEMENT,
    ) -> list[ParticipantScore]:
        """Current score for every participant, highest first."""
        scores = [
            score_participant(
                p.participant_id, picks, self._results, self._fastest_lap_item_id, policy=policy,
            )
            for p in roster
        ]
        return sorted(scores, key=lambda s: s.total, reverse=True)

    @log_service_call
    def finalize(self, roster: Sequence[Participant], picks: Sequence[Pick]) -> list[RaceResult]:
        """Freeze the board and return one RaceResult per participant."""
        self._check_editable()
        missing = [p.item_id for p in picks if p.item_id not in self._results]
        if missing:
            raise ResultsIncompleteError(missing)

        finalized_at = datetime.now(UTC)
        race_results: list[RaceResult] = []
        for participant in roster:
            score = score_participant(
                participant.participant_id, picks, self._results, self._fastest_lap_item_id,
            )
            item_results = tuple(
                ItemResult(
                    item_id=item_id,
                    start_rank=s.start_rank,
                    finish_rank=s.finish_rank,
                    is_dnf=s.is_dnf,
                    movement_points=s.movement_points,
                    finish_bonus=s.finish_bonus,
                    fastest_lap_bonus=s.fastest_lap_points,
                    total_points=s.total,
                    source=self._results[item_id].source,
                )
                for item_id, s in score.items.items()
            )
            race_results.append(RaceResult(
                race_id=self.race_id,
                participant_id=participant.participant_id,
                total_points=score.total,
                fastest_lap_item_id=self._fastest_lap_item_id,
                item_results=item_results,
                race_name=self.race_name,
                race_number=self.race_number,
                finalized_at=finalized_at,
            ))

        self._finalized = True
        get_logger().info("RACE FINALIZED: race=%s participants=%d", self.race_id, len(race_results))
        return race_results

    # ── Internals ──────────────────────────────────────────────

    def _check_editable(self) -> None:
        if self._finalized:
            raise ResultsFinalizedError(f"Race {self.race_id!r} has been finalized")

    def _store(
        self,
        item_id: str,
        *,
        position: int | None,
        dnf: bool,
        source: ResultSource,
    ) -> FinishResult:
        previous = self._results.get(item_id)
        result = FinishResult(
            item_id=item_id,
            position=position,
            dnf=dnf,
            source=source,
            previous_source=previous.source if previous is not None else None,
        )
        self._results[item_id] = result
        return result

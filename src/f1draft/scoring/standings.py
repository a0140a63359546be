"""Season standings built from finalized race results."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from f1draft.models.participant import Participant
from f1draft.models.race_result import RaceBreakdown, RaceResult, Standing


def season_standings(
    roster: Sequence[Participant],
    race_results: Iterable[RaceResult],
) -> list[Standing]:
    """Sum finalized race totals per participant, best total first.

    Participants with no finalized races are included with zero points.
    Results for participants not on the roster are ignored.
    """
    totals: dict[str, int] = {p.participant_id: 0 for p in roster}
    breakdowns: dict[str, list[RaceBreakdown]] = {p.participant_id: [] for p in roster}

    for result in race_results:
        if result.participant_id not in totals:
            continue
        totals[result.participant_id] += result.total_points
        breakdowns[result.participant_id].append(RaceBreakdown(
            race_id=result.race_id,
            race_name=result.race_name,
            race_number=result.race_number,
            points=result.total_points,
        ))

    standings = [
        Standing(
            participant_id=p.participant_id,
            display_name=p.display_name,
            color=p.color,
            total_points=totals[p.participant_id],
            races_completed=len(breakdowns[p.participant_id]),
            race_breakdown=tuple(sorted(
                breakdowns[p.participant_id],
                key=lambda b: (b.race_number is None, b.race_number or 0, b.race_id),
            )),
        )
        for p in roster
    ]
    return sorted(standings, key=lambda s: (-s.total_points, s.display_name))


def race_winners(race_results: Iterable[RaceResult]) -> dict[str, list[str]]:
    """Return the top-scoring participant id(s) for each race."""
    best: dict[str, int] = {}
    winners: dict[str, list[str]] = {}
    for result in race_results:
        top = best.get(result.race_id)
        if top is None or result.total_points > top:
            best[result.race_id] = result.total_points
            winners[result.race_id] = [result.participant_id]
        elif result.total_points == top:
            winners[result.race_id].append(result.participant_id)
    return winners

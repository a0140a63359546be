"""Per-item and per-participant race scoring."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from enum import Enum

from f1draft.constants import (
    DNF_PENALTY,
    DNF_POSITION,
    FASTEST_LAP_BONUS,
    FASTEST_LAP_CUTOFF,
    FINISH_BONUS,
    POINTS_PER_POSITION_GAINED,
    POINTS_PER_POSITION_LOST,
)
from f1draft.models.pick import Pick
from f1draft.models.results import FinishResult


class UnscoredPolicy(str, Enum):
    """How to treat a drafted item with no finish result yet."""

    PENDING = "pending"
    ASSUME_NO_MOVEMENT = "assume_no_movement"


@dataclass(frozen=True)
class ItemScore:
    start_rank: int
    finish_rank: int
    is_dnf: bool
    movement: int
    movement_points: int
    finish_bonus: int
    fastest_lap_points: int
    total: int

    @property
    def finish_label(self) -> str:
        return "DNF" if self.is_dnf else f"P{self.finish_rank}"

    @property
    def movement_label(self) -> str:
        if self.is_dnf:
            return f"DNF from P{self.start_rank}"
        return f"{self.movement:+d}"


@dataclass(frozen=True)
class ParticipantScore:
    participant_id: str
    total: int
    items: dict[str, ItemScore]
    pending: tuple[str, ...] = ()

    @property
    def is_complete(self) -> bool:
        return not self.pending


def movement_points(start_rank: int, finish_rank: int, *, dnf_position: int = DNF_POSITION) -> int:
    if finish_rank >= dnf_position:
        return DNF_PENALTY
    movement = start_rank - finish_rank
    if movement > 0:
        return movement * POINTS_PER_POSITION_GAINED
    return movement * POINTS_PER_POSITION_LOST


def finish_bonus(finish_rank: int) -> int:
    return FINISH_BONUS.get(finish_rank, 0)


def fastest_lap_points(finish_rank: int, has_fastest_lap: bool) -> int:
    if has_fastest_lap and finish_rank <= FASTEST_LAP_CUTOFF:
        return FASTEST_LAP_BONUS
    return 0


def score_item(
    start_rank: int,
    finish_rank: int,
    has_fastest_lap: bool,
    *,
    dnf_position: int = DNF_POSITION,
) -> ItemScore:
    """Score one item from its start rank, finish rank and fastest-lap flag.

    Any ``finish_rank`` at or beyond ``dnf_position`` is a DNF and scores a
    flat penalty regardless of where the item started. The three components
    are independent and simply added; the total may be negative.
    """
    if start_rank < 1:
        raise ValueError(f"start_rank must be >= 1, got {start_rank}")
    if finish_rank < 1:
        raise ValueError(f"finish_rank must be >= 1, got {finish_rank}")

    is_dnf = finish_rank >= dnf_position
    move_pts = movement_points(start_rank, finish_rank, dnf_position=dnf_position)
    # a DNF scores the penalty only
    bonus = 0 if is_dnf else finish_bonus(finish_rank)
    fl_pts = 0 if is_dnf else fastest_lap_points(finish_rank, has_fastest_lap)
    return ItemScore(
        start_rank=start_rank,
        finish_rank=finish_rank,
        is_dnf=is_dnf,
        movement=start_rank - finish_rank,
        movement_points=move_pts,
        finish_bonus=bonus,
        fastest_lap_points=fl_pts,
        total=move_pts + bonus + fl_pts,
    )


def score_participant(
    participant_id: str,
    picks: Iterable[Pick],
    results: Mapping[str, FinishResult],
    fastest_lap_item_id: str | None,
    *,
    policy: UnscoredPolicy = UnscoredPolicy.PENDING,
    dnf_position: int = DNF_POSITION,
) -> ParticipantScore:
    """Score every item a participant drafted and sum the totals."""
    items: dict[str, ItemScore] = {}
    pending: list[str] = []
    for pick in picks:
        if pick.participant_id != participant_id:
            continue
        result = results.get(pick.item_id)
        if result is not None:
            finish_rank = result.effective_rank(dnf_position)
        elif policy is UnscoredPolicy.ASSUME_NO_MOVEMENT:
            finish_rank = pick.start_rank
        else:
            pending.append(pick.item_id)
            continue
        items[pick.item_id] = score_item(
            pick.start_rank,
            finish_rank,
            pick.item_id == fastest_lap_item_id,
            dnf_position=dnf_position,
        )

    return ParticipantScore(
        participant_id=participant_id,
        total=sum(s.total for s in items.values()),
        items=items,
        pending=tuple(pending),
    )


def participant_total(
    participant_id: str,
    picks: Iterable[Pick],
    results: Mapping[str, FinishResult],
    fastest_lap_item_id: str | None,
    *,
    policy: UnscoredPolicy = UnscoredPolicy.PENDING,
    dnf_position: int = DNF_POSITION,
) -> int:
    return score_participant(
        participant_id, picks, results, fastest_lap_item_id,
        policy=policy, dnf_position=dnf_position,
    ).total

"""Snake draft order and pick-log queries.

Every function here is pure: the draft's state is the committed pick log plus
the static roster and rules, and each query recomputes its answer from them.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from f1draft.exceptions import InvalidPickLogError
from f1draft.models.item import DraftableItem
from f1draft.models.participant import Participant
from f1draft.models.pick import Pick
from f1draft.models.rules import DraftRules
from f1draft.tiers import group_by_tier, tier_for_rank, tiers_held

from .outcomes import DraftStatus, PickOutcome


@dataclass(frozen=True)
class PickInfo:
    """Who is on the clock for the next pick."""

    pick_number: int
    slot_index: int
    participant: Participant
    total_picks: int
    round_number: int
    pick_in_round: int


def sort_roster(participants: Iterable[Participant]) -> list[Participant]:
    """Return participants ordered by draft slot."""
    return sorted(participants, key=lambda p: p.draft_slot or 0)


def generate_pick_order(participant_count: int, rounds: int) -> list[int]:
    """Return the snake pick order as 0-based slot indices.

    Even rounds (0-indexed) run 0..N-1, odd rounds run N-1..0, so three
    participants over two rounds give ``[0, 1, 2, 2, 1, 0]``.
    """
    if participant_count < 1:
        raise ValueError(f"participant_count must be >= 1, got {participant_count}")
    if rounds < 1:
        raise ValueError(f"rounds must be >= 1, got {rounds}")

    order: list[int] = []
    forward = list(range(participant_count))
    for round_index in range(rounds):
        order.extend(forward if round_index % 2 == 0 else reversed(forward))
    return order


def check_pick_log(picks: Sequence[Pick]) -> None:
    """Raise InvalidPickLogError unless pick numbers are exactly 1..k in order."""
    for expected, pick in enumerate(picks, start=1):
        if pick.pick_number != expected:
            raise InvalidPickLogError(
                f"Pick log has pick_number {pick.pick_number} at position {expected}",
            )


def participant_for_pick(
    roster: Sequence[Participant],
    pick_number: int,
    rounds: int,
) -> Participant | None:
    """Return the participant who owns a 1-based pick number, or None if out of range."""
    sorted_roster = sort_roster(roster)
    order = generate_pick_order(len(sorted_roster), rounds)
    if not 1 <= pick_number <= len(order):
        return None
    return sorted_roster[order[pick_number - 1]]


def current_pick_info(
    roster: Sequence[Participant],
    picks: Sequence[Pick],
    rounds: int,
) -> PickInfo | None:
    """Return the next pick's info, or None when the draft is complete."""
    check_pick_log(picks)
    sorted_roster = sort_roster(roster)
    order = generate_pick_order(len(sorted_roster), rounds)

    index = len(picks)
    if index >= len(order):
        return None

    slot_index = order[index]
    n = len(sorted_roster)
    return PickInfo(
        pick_number=index + 1,
        slot_index=slot_index,
        participant=sorted_roster[slot_index],
        total_picks=len(order),
        round_number=index // n + 1,
        pick_in_round=index % n + 1,
    )


def is_draft_complete(roster: Sequence[Participant], picks: Sequence[Pick], rounds: int) -> bool:
    return len(picks) >= len(roster) * rounds


def draft_status(
    roster: Sequence[Participant],
    picks: Sequence[Pick],
    rounds: int,
) -> DraftStatus:
    """Derive the draft state from the roster and pick log."""
    if not roster or any(p.draft_slot is None for p in roster):
        return DraftStatus.NOT_STARTED
    if is_draft_complete(roster, picks, rounds):
        return DraftStatus.COMPLETE
    return DraftStatus.IN_PROGRESS


def draft_progress(picks_made: int, total_picks: int) -> int:
    """Return draft completion as a rounded percentage."""
    if total_picks <= 0:
        return 0
    return round(picks_made / total_picks * 100)


def available_items(items: Iterable[DraftableItem], picks: Iterable[Pick]) -> list[DraftableItem]:
    """Return items not yet picked, ordered by start_rank."""
    picked = {p.item_id for p in picks}
    return sorted(
        (item for item in items if item.item_id not in picked),
        key=lambda i: i.start_rank,
    )


def available_by_tier(
    items: Iterable[DraftableItem],
    picks: Iterable[Pick],
) -> dict[int, list[DraftableItem]]:
    """Return available items grouped by tier."""
    return group_by_tier(available_items(items, picks))


def picks_for_participant(picks: Iterable[Pick], participant_id: str) -> list[Pick]:
    """Return a participant's picks in commit order."""
    return [p for p in picks if p.participant_id == participant_id]


def validate_pick(
    roster: Sequence[Participant],
    items: Sequence[DraftableItem],
    picks: Sequence[Pick],
    rules: DraftRules,
    item_id: str,
    participant_id: str,
    pick_number: int,
) -> PickOutcome:
    """Check a pick attempt against the current log.

    Preconditions are evaluated in a fixed order and the first failure wins:
    draft complete, unknown item, item taken, wrong participant for the
    claimed pick number, stale pick number, and (with ``one_per_tier``) a
    tier the participant already holds.
    """
    check_pick_log(picks)

    if is_draft_complete(roster, picks, rules.rounds):
        return PickOutcome.DRAFT_ALREADY_COMPLETE

    item = next((i for i in items if i.item_id == item_id), None)
    if item is None:
        return PickOutcome.UNKNOWN_ITEM

    if any(p.item_id == item_id for p in picks):
        return PickOutcome.ITEM_ALREADY_TAKEN

    owner = participant_for_pick(roster, pick_number, rules.rounds)
    if owner is not None and owner.participant_id != participant_id:
        return PickOutcome.NOT_YOUR_TURN

    if pick_number != len(picks) + 1:
        return PickOutcome.STALE_PICK_NUMBER

    if rules.one_per_tier and tier_for_rank(item.start_rank) in tiers_held(picks, participant_id):
        return PickOutcome.TIER_ALREADY_FILLED

    return PickOutcome.OK

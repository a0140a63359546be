"""Setup-time validation and draft slot assignment."""

from __future__ import annotations

import random
from collections import Counter
from collections.abc import Sequence

from f1draft.constants import TIER_COUNT
from f1draft.exceptions import DraftConfigError, InvalidItemPoolError, InvalidRosterError
from f1draft.models.item import DraftableItem
from f1draft.models.participant import Participant
from f1draft.models.rules import DraftRules


def _duplicates(values: Sequence[object]) -> list[object]:
    return sorted((v for v, n in Counter(values).items() if n > 1), key=str)


def validate_roster(participants: Sequence[Participant]) -> None:
    """Raise InvalidRosterError unless draft slots are a permutation of 1..N."""
    if not participants:
        raise InvalidRosterError("Roster is empty")

    dup_ids = _duplicates([p.participant_id for p in participants])
    if dup_ids:
        raise InvalidRosterError(f"Duplicate participant ids: {dup_ids}")

    unassigned = [p.participant_id for p in participants if p.draft_slot is None]
    if unassigned:
        raise InvalidRosterError(f"Draft slots not assigned for: {unassigned}")

    slots = [p.draft_slot for p in participants]
    dup_slots = _duplicates(slots)
    if dup_slots:
        raise InvalidRosterError(f"Duplicate draft slots: {dup_slots}")
    if set(slots) != set(range(1, len(participants) + 1)):
        raise InvalidRosterError(
            f"Draft slots must be 1..{len(participants)}, got {sorted(slots)}",  # type: ignore[type-var]
        )


def validate_item_pool(items: Sequence[DraftableItem]) -> None:
    """Raise InvalidItemPoolError unless ids are unique and ranks are exactly 1..N."""
    if not items:
        raise InvalidItemPoolError("Item pool is empty")

    dup_ids = _duplicates([i.item_id for i in items])
    if dup_ids:
        raise InvalidItemPoolError(f"Duplicate item ids: {dup_ids}")

    ranks = [i.start_rank for i in items]
    dup_ranks = _duplicates(ranks)
    if dup_ranks:
        raise InvalidItemPoolError(f"Duplicate start ranks: {dup_ranks}")
    if set(ranks) != set(range(1, len(items) + 1)):
        raise InvalidItemPoolError(
            f"Start ranks must be 1..{len(items)}, got {sorted(ranks)}",
        )


def validate_draft_setup(
    participants: Sequence[Participant],
    items: Sequence[DraftableItem],
    rules: DraftRules,
) -> None:
    """Validate roster, pool and rules together before a draft may start."""
    validate_roster(participants)
    validate_item_pool(items)

    total_picks = len(participants) * rules.rounds
    if len(items) < total_picks:
        raise InvalidItemPoolError(
            f"Pool has {len(items)} items but the draft needs {total_picks}",
        )
    if rules.one_per_tier and rules.rounds > TIER_COUNT:
        raise DraftConfigError(
            f"{rules.rounds} rounds cannot be drafted one per tier "
            f"with only {TIER_COUNT} tiers",
        )


def assign_draft_slots(
    participants: Sequence[Participant],
    order: Sequence[str] | None = None,
    rng: random.Random | None = None,
) -> list[Participant]:
    """Return participants with draft slots 1..N assigned.

    With ``order`` (participant ids, first pick first) the slots follow it;
    otherwise the roster is shuffled with ``rng``.
    """
    if not participants:
        raise InvalidRosterError("Roster is empty")

    by_id = {p.participant_id: p for p in participants}
    if len(by_id) != len(participants):
        raise InvalidRosterError(
            f"Duplicate participant ids: {_duplicates([p.participant_id for p in participants])}",
        )

    if order is None:
        ordered_ids = list(by_id)
        (rng or random.Random()).shuffle(ordered_ids)
    else:
        if len(order) != len(by_id) or set(order) != set(by_id):
            raise InvalidRosterError("Manual draft order must list every participant exactly once")
        ordered_ids = list(order)

    return [
        by_id[pid].model_copy(update={"draft_slot": slot})
        for slot, pid in enumerate(ordered_ids, start=1)
    ]

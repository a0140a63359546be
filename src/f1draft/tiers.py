"""Grouping of draftable items into fixed start-rank tiers."""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

from f1draft.constants import TIER_BAND_WIDTH, TIER_COUNT, TIER_LABELS

if TYPE_CHECKING:
    from f1draft.models.item import DraftableItem
    from f1draft.models.pick import Pick


def tier_for_rank(start_rank: int) -> int:
    """Return the tier (1..TIER_COUNT) for a starting rank.

    Ranks 1-5 are tier 1, 6-10 tier 2, 11-15 tier 3 and everything from 16
    onwards lands in the last tier.
    """
    if start_rank < 1:
        raise ValueError(f"start_rank must be >= 1, got {start_rank}")
    return min((start_rank - 1) // TIER_BAND_WIDTH + 1, TIER_COUNT)


def tier_label(tier: int) -> str:
    """Return the display heading for a tier."""
    return TIER_LABELS.get(tier, f"Tier {tier}")


def group_by_tier(items: Iterable[DraftableItem]) -> dict[int, list[DraftableItem]]:
    """Group items by tier, each group sorted by start_rank.

    Only non-empty tiers are present; keys are in ascending tier order.
    """
    groups: dict[int, list[DraftableItem]] = {}
    for item in sorted(items, key=lambda i: i.start_rank):
        groups.setdefault(tier_for_rank(item.start_rank), []).append(item)
    return dict(sorted(groups.items()))


def tiers_held(picks: Iterable[Pick], participant_id: str) -> set[int]:
    """Return the tiers already held by a participant, from captured start ranks."""
    return {
        tier_for_rank(p.start_rank) for p in picks
        if p.participant_id == participant_id
    }

"""Run an offline snake draft and score it with made-up results."""

import random

from f1draft import (
    DraftRules,
    DraftService,
    InMemoryPickLogStore,
    Participant,
    RaceResultsBoard,
    assign_draft_slots,
    season_standings,
)
from f1draft.sources import get_source
from f1draft.tiers import tier_label


def main() -> None:
    roster = assign_draft_slots(
        [
            Participant(participant_id="alice", display_name="Alice"),
            Participant(participant_id="bob", display_name="Bob"),
            Participant(participant_id="carol", display_name="Carol"),
        ],
        rng=random.Random(7),
    )
    items = get_source("static").get_items("demo")

    draft = DraftService("demo", InMemoryPickLogStore(), roster, items, DraftRules(rounds=3))

    print("=== Available by tier ===")
    for tier, tier_items in draft.available_by_tier().items():
        print(f"  {tier_label(tier)}: {', '.join(i.item_id for i in tier_items)}")

    # Everyone auto-picks until the draft is done
    print("\n=== Draft ===")
    while (info := draft.current_pick()) is not None:
        result = draft.auto_pick()
        print(f"  #{info.pick_number} (R{info.round_number}) {info.participant.display_name}: {result.pick.item_id}")

    # Reverse the grid, so back-markers gain the most
    board = RaceResultsBoard("demo", race_name="Demo Grand Prix", race_number=1)
    board.apply_feed({i.item_id: len(items) + 1 - i.start_rank for i in items}, fastest_lap_item_id="COL")
    board.mark_dnf("VER")

    print("\n=== Live scores ===")
    for score in board.live_scores(draft.roster, draft.picks()):
        print(f"  {score.participant_id}: {score.total}")
        for item_id, item_score in score.items.items():
            print(f"    {item_id}: {item_score.finish_label} ({item_score.movement_label}) -> {item_score.total}")

    race_results = board.finalize(draft.roster, draft.picks())

    print("\n=== Standings ===")
    for standing in season_standings(draft.roster, race_results):
        print(f"  {standing.display_name}: {standing.total_points}")


if __name__ == "__main__":
    main()

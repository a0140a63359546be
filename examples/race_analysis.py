"""Score a finished draft against a real race from the OpenF1 API."""

from f1draft import DraftRules, DraftService, InMemoryPickLogStore, Participant, RaceResultsBoard
from f1draft.sources import SourceKind, get_source


def analyze_race(year: int, country_name: str) -> None:
    """Draft the real starting grid for a race and score it against the result."""
    source = get_source(SourceKind.OPENF1)
    session_key = source.find_race_session_key(year, country_name)
    if session_key is None:
        print(f"No race session found for {country_name} {year}")
        return

    items = source.get_items(session_key)
    roster = [
        Participant(participant_id="alice", display_name="Alice", draft_slot=1),
        Participant(participant_id="bob", display_name="Bob", draft_slot=2),
    ]
    draft = DraftService(str(session_key), InMemoryPickLogStore(), roster, items, DraftRules(rounds=4))
    while draft.current_pick() is not None:
        draft.auto_pick()

    board = RaceResultsBoard(str(session_key), race_name=f"{country_name} {year}")
    board.apply_outcome(source.get_outcome(session_key))
    print(f"Fastest lap: {board.fastest_lap_item_id or 'n/a'}")

    for result in board.finalize(draft.roster, draft.picks()):
        print(f"\n{result.participant_id}: {result.total_points} pts")
        for item in result.item_results:
            finish = "DNF" if item.is_dnf else f"P{item.finish_rank}"
            print(f"  {item.item_id}: P{item.start_rank} -> {finish}  {item.total_points:+d}")


if __name__ == "__main__":
    analyze_race(2024, "Bahrain")

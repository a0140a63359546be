"""Exceptions raised by the draft and scoring engine.

Expected draft conditions (losing a pick race, acting out of turn) are not
exceptions; see :mod:`f1draft.draft.outcomes`.
"""

from __future__ import annotations


class F1DraftError(Exception):
    """Base exception for all f1draft errors."""


class InvalidRosterError(F1DraftError):
    """Raised when the roster violates the draft slot invariants."""


class InvalidItemPoolError(F1DraftError):
    """Raised when the item pool has duplicate ids or non-contiguous ranks."""


class DraftConfigError(F1DraftError):
    """Raised when the draft rules cannot be satisfied by the roster and pool."""


class InvalidPickLogError(F1DraftError):
    """Raised when a pick log is not a gapless 1..k sequence."""


class PickLogConflictError(F1DraftError):
    """Raised by a pick-log store when a conditional append loses a race."""

    def __init__(self, draft_id: str, expected_length: int, actual_length: int) -> None:
        self.draft_id = draft_id
        self.expected_length = expected_length
        self.actual_length = actual_length
        super().__init__(
            f"Pick log for draft {draft_id!r} has {actual_length} picks, "
            f"expected {expected_length}",
        )


class ResultsFinalizedError(F1DraftError):
    """Raised when race results are edited after finalization."""


class ResultsIncompleteError(F1DraftError):
    """Raised when finalizing a race with drafted items that have no result."""

    def __init__(self, missing: list[str]) -> None:
        self.missing = missing
        super().__init__(f"No finish result recorded for: {', '.join(missing)}")


class SourceError(F1DraftError):
    """Source-agnostic data fetch error. Callers catch only this."""

"""Scoring and tiering constants for the fantasy draft."""

from __future__ import annotations

# ── Field ────────────────────────────────────────────────────────────────────

FIELD_SIZE = 20
DNF_POSITION = FIELD_SIZE + 1  # any finish rank at or beyond this is a DNF

# ── Movement ─────────────────────────────────────────────────────────────────

POINTS_PER_POSITION_GAINED = 2
POINTS_PER_POSITION_LOST = 1
DNF_PENALTY = -8

# ── Bonuses ──────────────────────────────────────────────────────────────────

FINISH_BONUS: dict[int, int] = {
    1: 8,
    2: 4,
    3: 2,
    4: 1,
}

FASTEST_LAP_BONUS = 3
FASTEST_LAP_CUTOFF = 10  # fastest lap only scores at or above this finish rank

# ── Tiers ────────────────────────────────────────────────────────────────────

TIER_BAND_WIDTH = 5
TIER_COUNT = 4

TIER_LABELS: dict[int, str] = {
    1: "Front Runners (P1-P5)",
    2: "Midfield (P6-P10)",
    3: "Back of Grid (P11-P15)",
    4: "Backmarkers (P16+)",
}

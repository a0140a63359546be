"""Shared test fixtures and sample API responses."""

from __future__ import annotations

import logging

import pytest

import f1draft.call_logging as call_logging
from f1draft.draft.service import DraftService
from f1draft.models import DraftableItem, DraftRules, Participant
from f1draft.sources.static_repo import default_grid
from f1draft.store.memory import InMemoryPickLogStore

BASE_URL = "https://api.openf1.org/v1"


SAMPLE_DRIVERS = [
    {"driver_number": 1, "full_name": "Max VERSTAPPEN", "name_acronym": "VER",
     "session_key": 9161, "team_name": "Red Bull Racing"},
    {"driver_number": 16, "full_name": "Charles LECLERC", "name_acronym": "LEC",
     "session_key": 9161, "team_name": "Ferrari"},
    {"driver_number": 44, "full_name": "Lewis HAMILTON", "name_acronym": "HAM",
     "session_key": 9161, "team_name": "Mercedes"},
    {"driver_number": 2, "full_name": "Logan SARGEANT", "name_acronym": "SAR",
     "session_key": 9161, "team_name": "Williams"},
]

SAMPLE_GRID = [
    {"driver_number": 16, "position": 2, "session_key": 9161, "lap_duration": 89.9},
    {"driver_number": 1, "position": 1, "session_key": 9161, "lap_duration": 89.7},
    {"driver_number": 44, "position": 4, "session_key": 9161, "lap_duration": 90.3},
]

SAMPLE_SESSION_RESULT = [
    {"driver_number": 1, "position": 1, "dnf": False, "dns": False, "dsq": False,
     "laps_completed": 57, "session_key": 9161},
    {"driver_number": 44, "position": 2, "dnf": False, "dns": False, "dsq": False,
     "laps_completed": 57, "session_key": 9161},
    {"driver_number": 16, "position": None, "dnf": True, "dns": False, "dsq": False,
     "laps_completed": 39, "session_key": 9161},
    {"driver_number": 2, "position": 3, "dnf": False, "dns": False, "dsq": False,
     "laps_completed": 57, "session_key": 9161},
]

SAMPLE_LAPS = [
    {"driver_number": 1, "lap_number": 1, "lap_duration": 99.1, "is_pit_out_lap": False},
    {"driver_number": 44, "lap_number": 20, "lap_duration": 88.0, "is_pit_out_lap": True},
    {"driver_number": 44, "lap_number": 44, "lap_duration": 94.2, "is_pit_out_lap": False},
    {"driver_number": 1, "lap_number": 44, "lap_duration": 93.8, "is_pit_out_lap": False},
    {"driver_number": 16, "lap_number": 5, "lap_duration": None, "is_pit_out_lap": False},
]

SAMPLE_SESSION = {
    "country_name": "Bahrain",
    "date_start": "2023-03-05T15:00:00",
    "location": "Sakhir",
    "meeting_key": 1219,
    "session_key": 9161,
    "session_name": "Race",
    "session_type": "Race",
    "year": 2023,
}


@pytest.fixture(autouse=True)
def _isolated_call_log(tmp_path):
    """Send the call log to tmp_path for every test."""
    old_logger = call_logging._logger
    old_dir = call_logging._LOG_DIR
    old_file = call_logging._LOG_FILE

    named_logger = logging.getLogger(call_logging.LOGGER_NAME)
    named_logger.handlers.clear()

    call_logging._logger = None
    call_logging._LOG_DIR = str(tmp_path)
    call_logging._LOG_FILE = str(tmp_path / "calls.log")

    yield tmp_path

    for h in named_logger.handlers[:]:
        h.close()
        named_logger.removeHandler(h)
    call_logging._logger = old_logger
    call_logging._LOG_DIR = old_dir
    call_logging._LOG_FILE = old_file


def _make_participant(pid: str, slot: int | None) -> Participant:
    return Participant(participant_id=pid, display_name=pid.title(), draft_slot=slot)


@pytest.fixture
def make_participant():
    return _make_participant


@pytest.fixture
def roster() -> list[Participant]:
    """Three teams, deliberately listed out of slot order."""
    return [
        _make_participant("carol", 3),
        _make_participant("alice", 1),
        _make_participant("bob", 2),
    ]


@pytest.fixture
def items() -> list[DraftableItem]:
    return default_grid()


@pytest.fixture
def rules() -> DraftRules:
    return DraftRules(rounds=3)


@pytest.fixture
def store() -> InMemoryPickLogStore:
    return InMemoryPickLogStore()


@pytest.fixture
def service(store, roster, items, rules) -> DraftService:
    return DraftService("race-1", store, roster, items, rules)

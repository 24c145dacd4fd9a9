"""Shared test fixtures and data loading for court-grid.

All test data lives in data/fixtures/ as JSON files.  This module loads
that data and exposes helper functions + pytest fixtures for the tests.

Reference tournament: data/fixtures/tournament.json, 8 courts, three
series (DH1, DD1, SH) with round ids of the form r-<series>-<number>.
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest

# ---------------------------------------------------------------------------
# Paths
# ---------------------------------------------------------------------------
FIXTURES_DIR = Path(__file__).resolve().parent.parent / "data" / "fixtures"
SCENARIOS_DIR = FIXTURES_DIR / "scenarios"
TOURNAMENT_PATH = FIXTURES_DIR / "tournament.json"


# ---------------------------------------------------------------------------
# Data loaders
# ---------------------------------------------------------------------------
def _load_json(path: Path):
    with open(path) as f:
        return json.load(f)


_tournament = _load_json(TOURNAMENT_PATH)

LANES = _tournament["settings"]["courtCount"]


# ---------------------------------------------------------------------------
# Convenience helpers (importable by test modules)
# ---------------------------------------------------------------------------
def load_scenarios(name: str):
    """Load a scenario file from data/fixtures/scenarios/{name}.json."""
    return _load_json(SCENARIOS_DIR / f"{name}.json")


def tournament_document() -> dict:
    """Fresh copy of the reference tournament document."""
    return json.loads(json.dumps(_tournament))


def make_session():
    """TournamentSession loaded from the reference tournament."""
    from court_grid.loaders import parse_tournament

    return parse_tournament(tournament_document(), source=TOURNAMENT_PATH.name)


def make_roster():
    """Roster of the reference tournament."""
    return make_session().roster


def entries(triples) -> tuple:
    """[["r-dd1-1", 0, 0], ...] → tuple of ScheduledRound."""
    from court_grid.types import ScheduledRound

    return tuple(ScheduledRound(rid, row, col) for rid, row, col in triples)


def make_state(triples=()):
    """ScheduleState with the given placements and an empty history."""
    from court_grid.history import ScheduleState

    return ScheduleState(schedule=entries(triples))


def assert_no_overlap(schedule, roster, lanes: int = LANES) -> None:
    """No cell is covered by two rounds."""
    from court_grid.grid import entry_footprint

    owner: dict = {}
    for entry in schedule:
        for cell in entry_footprint(entry, roster.span, lanes):
            assert cell not in owner, (
                f"{entry.round_id} and {owner[cell]} both cover {cell}"
            )
            owner[cell] = entry.round_id


# ---------------------------------------------------------------------------
# pytest fixtures
# ---------------------------------------------------------------------------
@pytest.fixture
def session():
    return make_session()


@pytest.fixture
def roster():
    return make_roster()


@pytest.fixture
def empty_state():
    return make_state()

"""court-grid: time-slot × court placement engine for tournament rounds."""

from court_grid.autopack import auto_schedule, pack
from court_grid.grid import Cell, cell_at, footprint, linear_index, occupancy
from court_grid.history import HISTORY_LIMIT, ScheduleState, commit, undo
from court_grid.loaders import (
    dump_tournament_json,
    export_tournament,
    load_tournament_json,
)
from court_grid.placement import (
    clear,
    compact,
    move,
    place,
    place_next,
    place_with_push,
    unschedule,
)
from court_grid.roster import Roster
from court_grid.session import TournamentSession
from court_grid.timeslots import (
    DEFAULT_SETTINGS,
    SeriesTimetable,
    TimetableEntry,
    TournamentSettings,
    series_timetable,
)
from court_grid.types import (
    PlacementCheck,
    Round,
    ScheduledRound,
    Series,
    UnknownSeriesError,
)
from court_grid.validation import can_place

__all__ = [
    "Cell",
    "DEFAULT_SETTINGS",
    "HISTORY_LIMIT",
    "PlacementCheck",
    "Roster",
    "Round",
    "ScheduleState",
    "ScheduledRound",
    "Series",
    "SeriesTimetable",
    "TimetableEntry",
    "TournamentSession",
    "TournamentSettings",
    "UnknownSeriesError",
    "auto_schedule",
    "can_place",
    "cell_at",
    "clear",
    "commit",
    "compact",
    "dump_tournament_json",
    "export_tournament",
    "footprint",
    "linear_index",
    "load_tournament_json",
    "move",
    "occupancy",
    "pack",
    "place",
    "place_next",
    "place_with_push",
    "series_timetable",
    "undo",
    "unschedule",
]

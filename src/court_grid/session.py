"""TournamentSession — the single owner of roster, settings and schedule.

The engine modules are pure functions over ScheduleState. A session holds
the current state and swaps it on each call, so a host application talks
to one object. Sessions are not thread-safe; serialise calls externally.
"""

from __future__ import annotations

import logging
from dataclasses import replace

from court_grid import autopack, history, placement
from court_grid.history import ScheduleState
from court_grid.roster import Roster
from court_grid.schema import validate_settings
from court_grid.timeslots import SeriesTimetable, TournamentSettings, series_timetable
from court_grid.types import PlacementCheck, Round, ScheduledRound, Series
from court_grid.validation import can_place

logger = logging.getLogger(__name__)


class TournamentSession:
    """Roster + settings + schedule state, with every engine operation.

    Mutators return True when the schedule changed (and history grew).
    """

    def __init__(
        self,
        settings: TournamentSettings | None = None,
        roster: Roster | None = None,
        state: ScheduleState | None = None,
    ) -> None:
        self.settings = settings or TournamentSettings()
        self.roster = roster if roster is not None else Roster()
        self.state = state or ScheduleState()

    @property
    def lane_count(self) -> int:
        return self.settings.court_count

    @property
    def schedule(self) -> tuple[ScheduledRound, ...]:
        return self.state.schedule

    @property
    def history(self) -> tuple[tuple[ScheduledRound, ...], ...]:
        return self.state.history

    @property
    def can_undo(self) -> bool:
        return self.state.can_undo

    def _apply(self, new: ScheduleState) -> bool:
        changed = new is not self.state
        self.state = new
        return changed

    # ------------------------------------------------------------------
    # Engine operations
    # ------------------------------------------------------------------
    def can_place(
        self,
        round_id: str,
        row: int,
        col: int,
        exclude_round_id: str | None = None,
    ) -> PlacementCheck:
        return can_place(
            self.state.schedule, self.roster, self.lane_count,
            round_id, row, col, exclude_round_id,
        )

    def place(self, round_id: str, row: int, col: int) -> bool:
        return self._apply(placement.place(
            self.state, self.roster, self.lane_count, round_id, row, col
        ))

    def place_with_push(self, round_id: str, row: int, col: int) -> bool:
        return self._apply(placement.place_with_push(
            self.state, self.roster, self.lane_count, round_id, row, col
        ))

    def place_next(self, round_id: str) -> bool:
        return self._apply(placement.place_next(
            self.state, self.roster, self.lane_count, round_id
        ))

    def move(self, round_id: str, new_row: int, new_col: int) -> bool:
        return self._apply(placement.move(self.state, round_id, new_row, new_col))

    def unschedule(self, round_id: str) -> bool:
        return self._apply(placement.unschedule(self.state, round_id))

    def clear(self) -> bool:
        return self._apply(placement.clear(self.state))

    def compact(self, row: int, col: int) -> bool:
        return self._apply(placement.compact(
            self.state, self.roster, self.lane_count, row, col
        ))

    def undo(self) -> bool:
        return self._apply(history.undo(self.state))

    def auto_schedule(self) -> bool:
        return self._apply(autopack.auto_schedule(
            self.state, self.roster, self.lane_count
        ))

    # ------------------------------------------------------------------
    # Roster and settings
    # ------------------------------------------------------------------
    def add_series(
        self, name: str, short_name: str, series_id: str | None = None
    ) -> Series:
        return self.roster.add_series(name, short_name, series_id)

    def update_series(
        self,
        series_id: str,
        name: str | None = None,
        short_name: str | None = None,
    ) -> Series:
        return self.roster.update_series(series_id, name, short_name)

    def remove_series(self, series_id: str) -> None:
        """Drop a series and every placement of its rounds."""
        removed = self.roster.remove_series(series_id)
        self.state = history.forget_rounds(self.state, set(removed))

    def add_round(
        self,
        series_id: str,
        match_count: int,
        label: str,
        round_id: str | None = None,
    ) -> Round:
        return self.roster.add_round(series_id, match_count, label, round_id)

    def update_round(
        self,
        series_id: str,
        round_id: str,
        match_count: int | None = None,
        label: str | None = None,
    ) -> Round:
        return self.roster.update_round(series_id, round_id, match_count, label)

    def remove_round(self, series_id: str, round_id: str) -> None:
        """Drop a round, its placements, and renumber its series."""
        self.roster.remove_round(series_id, round_id)
        self.state = history.forget_rounds(self.state, {round_id})

    def unscheduled_rounds(self) -> list[tuple[Round, Series]]:
        return self.roster.unscheduled(self.state.schedule)

    def timetable(self) -> list[SeriesTimetable]:
        return series_timetable(self.roster, self.state.schedule, self.settings)

    def update_settings(self, **changes) -> TournamentSettings:
        """Replace some settings fields. Raises ValueError if invalid."""
        candidate = replace(self.settings, **changes)
        errors = validate_settings(candidate.to_dict())
        if errors:
            raise ValueError(
                "Invalid settings:\n" + "\n".join(f"  - {e}" for e in errors)
            )
        if candidate.court_count != self.settings.court_count:
            logger.info(
                "Court count changed from %d to %d; placements keep their cells",
                self.settings.court_count, candidate.court_count,
            )
        self.settings = candidate
        return candidate

    def reset(self) -> None:
        """Back to default settings, empty roster, empty schedule."""
        self.settings = TournamentSettings()
        self.roster = Roster()
        self.state = ScheduleState()

"""Boundary: TournamentSettings, row ↔ time-of-day conversion.

Also builds the per-series timetable: each round's start time and the gap
since the previous round of the same series started.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import time
from typing import Iterable

from court_grid.roster import Roster
from court_grid.types import Round, ScheduledRound, Series

# (exclusive upper bound in minutes, band); anything longer is GAP_OVER_3H
GAP_BANDS = ((60, "under-1h"), (120, "1h-2h"), (180, "2h-3h"))
GAP_OVER_3H = "over-3h"


def _minutes(label: str) -> int:
    """Minutes since midnight for an 'HH:MM' label."""
    t = time.fromisoformat(label)
    return t.hour * 60 + t.minute


@dataclass(frozen=True)
class TournamentSettings:
    """Grid dimensions of a tournament day. Immutable.

    Placement algorithms only read court_count. The time fields label rows
    and bound how many rows a day displays.
    """

    court_count: int = 8
    slot_duration: int = 35
    start_time: str = "08:00"
    end_time: str = "18:00"

    @property
    def row_count(self) -> int:
        """Number of whole slots between start_time and end_time."""
        span = _minutes(self.end_time) - _minutes(self.start_time)
        return max(0, span // self.slot_duration)

    def minutes_at(self, row: int) -> int:
        """Start of `row` in minutes since midnight of the first day."""
        return _minutes(self.start_time) + row * self.slot_duration

    def slot_label(self, row: int) -> str:
        """Start time of `row` as 'HH:MM'.

        Rows past midnight keep counting hours ("25:10") so labels stay
        ordered.
        """
        hours, minutes = divmod(self.minutes_at(row), 60)
        return f"{hours:02d}:{minutes:02d}"

    def to_dict(self) -> dict:
        return {
            "courtCount": self.court_count,
            "timeSlotDuration": self.slot_duration,
            "startTime": self.start_time,
            "endTime": self.end_time,
        }

    @classmethod
    def from_dict(cls, data: dict) -> TournamentSettings:
        defaults = cls()
        return cls(
            court_count=data.get("courtCount", defaults.court_count),
            slot_duration=data.get("timeSlotDuration", defaults.slot_duration),
            start_time=data.get("startTime", defaults.start_time),
            end_time=data.get("endTime", defaults.end_time),
        )


DEFAULT_SETTINGS = TournamentSettings()


def gap_band(gap: int | None) -> str | None:
    """Band of a gap between two round starts, None when there is no gap."""
    if gap is None:
        return None
    for limit, band in GAP_BANDS:
        if gap < limit:
            return band
    return GAP_OVER_3H


@dataclass(frozen=True)
class TimetableEntry:
    """One round of a series timetable. Position fields are None when unscheduled."""

    rnd: Round
    row: int | None = None
    col: int | None = None
    time: str | None = None
    minutes: int | None = None
    gap: int | None = None

    @property
    def scheduled(self) -> bool:
        return self.row is not None

    @property
    def band(self) -> str | None:
        return gap_band(self.gap)


@dataclass(frozen=True)
class SeriesTimetable:
    series: Series
    entries: tuple[TimetableEntry, ...]

    @property
    def total_matches(self) -> int:
        return sum(r.match_count for r in self.series.rounds)


def series_timetable(
    roster: Roster,
    schedule: Iterable[ScheduledRound],
    settings: TournamentSettings,
) -> list[SeriesTimetable]:
    """Timetable of every series, in roster order.

    Scheduled rounds come first ordered by start time, then unscheduled
    rounds by round number. A scheduled round after another scheduled
    round carries the minutes elapsed since that round's start.
    """
    by_round = {e.round_id: e for e in schedule}
    result: list[SeriesTimetable] = []

    for series in roster:
        timed: list[TimetableEntry] = []
        untimed: list[TimetableEntry] = []
        for rnd in series.rounds:
            entry = by_round.get(rnd.id)
            if entry is None:
                untimed.append(TimetableEntry(rnd))
                continue
            timed.append(TimetableEntry(
                rnd,
                row=entry.row,
                col=entry.start_col,
                time=settings.slot_label(entry.row),
                minutes=settings.minutes_at(entry.row),
            ))

        # Stable: rounds starting together keep round-number order
        timed.sort(key=lambda t: t.minutes)
        untimed.sort(key=lambda t: t.rnd.round_number)

        entries = [
            TimetableEntry(
                t.rnd, t.row, t.col, t.time, t.minutes,
                gap=t.minutes - timed[i - 1].minutes if i > 0 else None,
            )
            for i, t in enumerate(timed)
        ]
        result.append(SeriesTimetable(series, tuple(entries + untimed)))

    return result

"""Greedy auto-packer: place every round of every series in one pass.

Rounds are taken series by series (ordered by series name), each series in
round-number order. Each round goes to the first start cell, scanning
row-major from the series' next free row, whose footprint is empty and
whose rows hold no other round of the same series. The result is
deterministic but not minimal: no round is ever revisited.
"""

from __future__ import annotations

import logging
from collections import defaultdict

from court_grid.grid import Cell, footprint, rows_spanned
from court_grid.history import ScheduleState, commit
from court_grid.roster import Roster
from court_grid.types import Round, ScheduledRound, Series

logger = logging.getLogger(__name__)


def packing_order(roster: Roster) -> list[tuple[Round, Series]]:
    """All rounds sorted by (series name, round number). Stable.

    Names compare case-insensitively.
    """
    return sorted(
        roster.all_rounds(),
        key=lambda rs: (rs[1].name.casefold(), rs[0].round_number),
    )


def pack(roster: Roster, lane_count: int) -> tuple[ScheduledRound, ...]:
    """Compute a full schedule from scratch. Does NOT touch any state.

    The row scan is unbounded but always terminates: past the last placed
    row every cell is free and no series has been seen.
    """
    result: list[ScheduledRound] = []
    taken: set[Cell] = set()
    row_series: dict[int, set[str]] = defaultdict(set)
    min_row: dict[str, int] = defaultdict(int)

    for rnd, series in packing_order(roster):
        row = min_row[series.id]
        while True:
            cells = _first_fit(row, rnd.match_count, series.id, lane_count, taken, row_series)
            if cells is not None:
                break
            row += 1

        start = cells[0]
        result.append(ScheduledRound(rnd.id, *start))
        taken.update(cells)
        spanned = rows_spanned(cells)
        for r in spanned:
            row_series[r].add(series.id)
        min_row[series.id] = max(spanned) + 1

    return tuple(result)


def _first_fit(
    row: int,
    span: int,
    series_id: str,
    lane_count: int,
    taken: set[Cell],
    row_series: dict[int, set[str]],
) -> list[Cell] | None:
    """Footprint of the first acceptable start column on `row`, if any."""
    for col in range(lane_count):
        cells = footprint(row, col, span, lane_count)
        if any(c in taken for c in cells):
            continue
        if any(series_id in row_series.get(r, ()) for r, _ in cells):
            continue
        return cells
    return None


def auto_schedule(
    state: ScheduleState, roster: Roster, lane_count: int
) -> ScheduleState:
    """Replace the whole schedule with a greedy packing of every round."""
    schedule = pack(roster, lane_count)
    logger.debug("Auto-packed %d rounds", len(schedule))
    return commit(state, schedule)

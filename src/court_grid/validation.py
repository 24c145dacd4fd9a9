"""Read-only placement check for manual drops.

The checks run in a fixed order and stop at the first failure:

1. the round exists
2. it fits on one row, inside the grid
3. none of its target cells is taken by another round
4. its series has no other round on this row
5. earlier rounds of the series sit on rows above or equal, later below
"""

from __future__ import annotations

from typing import Iterable

from court_grid.grid import entry_footprint, occupancy, rows_spanned
from court_grid.roster import Roster
from court_grid.types import OK, PlacementCheck, ScheduledRound


def can_place(
    schedule: Iterable[ScheduledRound],
    roster: Roster,
    lane_count: int,
    round_id: str,
    row: int,
    col: int,
    exclude_round_id: str | None = None,
) -> PlacementCheck:
    """Whether `round_id` may start at (row, col). Does NOT mutate anything.

    Already placed rounds are measured by their wrapped footprints; the
    round being dropped must fit on a single row.
    """
    found = roster.lookup(round_id)
    if found is None:
        return PlacementCheck(False, f"Round {round_id!r} not found")
    target, series = found

    span = target.match_count
    end_col = col + span - 1
    if row < 0:
        return PlacementCheck(False, f"Row {row} is outside the grid")
    if col < 0 or end_col >= lane_count:
        return PlacementCheck(
            False, f"Not enough courts (needs {span} consecutive courts)"
        )

    skip = {round_id, exclude_round_id}
    others = [e for e in schedule if e.round_id not in skip]

    taken = occupancy(others, roster.span, lane_count)
    for c in range(col, end_col + 1):
        if (row, c) in taken:
            return PlacementCheck(False, "One or more courts already occupied")

    series_rounds = {r.id: r for r in series.rounds}
    siblings = [e for e in others if e.round_id in series_rounds]

    for e in siblings:
        if row in rows_spanned(entry_footprint(e, roster.span, lane_count)):
            return PlacementCheck(
                False, f"Series {series.short_name} already has a round on this row"
            )

    for e in siblings:
        other = series_rounds[e.round_id]
        if other.round_number < target.round_number and e.row > row:
            return PlacementCheck(
                False,
                f"Round {other.round_number} must come before "
                f"round {target.round_number}",
            )
        if other.round_number > target.round_number and e.row < row:
            return PlacementCheck(
                False,
                f"Round {target.round_number} must come before "
                f"round {other.round_number}",
            )

    return OK

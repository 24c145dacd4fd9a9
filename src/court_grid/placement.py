"""Layer 2: schedule mutations.

Every operation is a pure function from a ScheduleState to a ScheduleState.
A rejected or degenerate call returns the input state object unchanged
(and logs why); a successful one goes through history.commit.

place             — set a round's position, no validation
place_with_push   — insert at a cell, shifting later rounds forward
place_next        — append after the last occupied row
move / unschedule / clear
compact           — remove an empty cell, shifting later rounds back
"""

from __future__ import annotations

import logging

from court_grid.grid import (
    cell_at,
    entry_footprint,
    footprint,
    linear_index,
    occupancy,
    start_index,
)
from court_grid.history import ScheduleState, commit
from court_grid.roster import Roster
from court_grid.types import ScheduledRound

logger = logging.getLogger(__name__)

# Rows scanned past the last occupied row before giving up on a gap.
APPEND_WINDOW = 5


def _without(state: ScheduleState, round_id: str) -> list[ScheduledRound]:
    return [e for e in state.schedule if e.round_id != round_id]


def _shifted(entry: ScheduledRound, delta: int, lane_count: int) -> ScheduledRound:
    row, col = cell_at(start_index(entry, lane_count) + delta, lane_count)
    return ScheduledRound(entry.round_id, row, col)


def place(
    state: ScheduleState,
    roster: Roster,
    lane_count: int,
    round_id: str,
    row: int,
    col: int,
) -> ScheduleState:
    """Put `round_id` at (row, col), replacing any previous placement.

    Legality is the caller's concern (see validation.can_place).
    """
    if round_id not in roster:
        logger.warning("Cannot place unknown round %r", round_id)
        return state
    schedule = _without(state, round_id)
    schedule.append(ScheduledRound(round_id, row, col))
    return commit(state, tuple(schedule))


def place_with_push(
    state: ScheduleState,
    roster: Roster,
    lane_count: int,
    round_id: str,
    row: int,
    col: int,
) -> ScheduleState:
    """Insert `round_id` at (row, col), pushing conflicting rounds forward.

    Rounds starting at or after the target cell move forward by the
    inserted round's span, preserving their relative order. A target that
    would cover only part of an existing round is rejected.
    """
    found = roster.lookup(round_id)
    if found is None:
        logger.warning("Cannot place unknown round %r", round_id)
        return state
    span = found[0].match_count

    target = set(footprint(row, col, span, lane_count))
    target_start = linear_index(row, col, lane_count)
    remaining = _without(state, round_id)

    any_overlap = False
    for entry in remaining:
        cells = entry_footprint(entry, roster.span, lane_count)
        hits = sum(1 for c in cells if c in target)
        if 0 < hits < len(cells):
            logger.warning(
                "Cannot place round %r at (%d, %d): it would split round %r",
                round_id, row, col, entry.round_id,
            )
            return state
        any_overlap = any_overlap or hits > 0

    placed = ScheduledRound(round_id, row, col)
    if not any_overlap:
        return commit(state, tuple(remaining) + (placed,))

    keep: list[ScheduledRound] = []
    shift: list[ScheduledRound] = []
    for entry in remaining:
        cells = entry_footprint(entry, roster.span, lane_count)
        overlaps = any(c in target for c in cells)
        if overlaps or start_index(entry, lane_count) >= target_start:
            shift.append(entry)
        else:
            keep.append(entry)

    # Descending start index: last in grid moves first
    shift.sort(key=lambda e: start_index(e, lane_count), reverse=True)
    shifted = [_shifted(e, span, lane_count) for e in shift]

    logger.debug(
        "Inserted round %r at (%d, %d), pushed %d rounds by %d cells",
        round_id, row, col, len(shifted), span,
    )
    return commit(state, tuple(keep) + (placed,) + tuple(shifted))


def place_next(
    state: ScheduleState,
    roster: Roster,
    lane_count: int,
    round_id: str,
) -> ScheduleState:
    """Place `round_id` in the first free gap from the last occupied row on."""
    found = roster.lookup(round_id)
    if found is None:
        logger.warning("Cannot place unknown round %r", round_id)
        return state
    span = found[0].match_count

    if not state.schedule:
        return place(state, roster, lane_count, round_id, 0, 0)

    taken = occupancy(state.schedule, roster.span, lane_count)
    max_row = max(r for r, _ in taken)

    for r in range(max_row, max_row + APPEND_WINDOW + 1):
        for c in range(lane_count):
            if not any(cell in taken for cell in footprint(r, c, span, lane_count)):
                return place(state, roster, lane_count, round_id, r, c)

    return place(state, roster, lane_count, round_id, max_row + 1, 0)


def move(
    state: ScheduleState, round_id: str, new_row: int, new_col: int
) -> ScheduleState:
    """Rewrite the position of an already scheduled round. No validation."""
    if state.entry(round_id) is None:
        logger.warning("Cannot move round %r: it is not scheduled", round_id)
        return state
    schedule = tuple(
        ScheduledRound(round_id, new_row, new_col) if e.round_id == round_id else e
        for e in state.schedule
    )
    return commit(state, schedule)


def unschedule(state: ScheduleState, round_id: str) -> ScheduleState:
    if state.entry(round_id) is None:
        logger.warning("Cannot unschedule round %r: it is not scheduled", round_id)
        return state
    return commit(state, tuple(_without(state, round_id)))


def clear(state: ScheduleState) -> ScheduleState:
    return commit(state, ())


def compact(
    state: ScheduleState,
    roster: Roster,
    lane_count: int,
    row: int,
    col: int,
) -> ScheduleState:
    """Remove the empty cell (row, col): later rounds move back one cell.

    Footprints are contiguous in linear order and the cell is empty, so
    no round straddles it and the shift cannot create an overlap.
    """
    if row < 0 or not 0 <= col < lane_count:
        logger.warning("Cannot remove cell (%d, %d): outside the grid", row, col)
        return state
    taken = occupancy(state.schedule, roster.span, lane_count)
    if (row, col) in taken:
        logger.warning(
            "Cannot remove cell (%d, %d): occupied by round %r",
            row, col, taken[(row, col)],
        )
        return state

    t = linear_index(row, col, lane_count)
    keep: list[ScheduledRound] = []
    shift: list[ScheduledRound] = []
    for entry in state.schedule:
        if start_index(entry, lane_count) > t:
            shift.append(entry)
        else:
            keep.append(entry)

    shift.sort(key=lambda e: start_index(e, lane_count))
    shifted = [_shifted(e, -1, lane_count) for e in shift]
    return commit(state, tuple(keep) + tuple(shifted))

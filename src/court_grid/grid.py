"""Layer 1: grid addressing — cells, footprints and linear indices.

A cell is a (row, col) pair: row is the time slot, col is the court.
Cells are ordered row-major, so the linear index of (row, col) is
row * lane_count + col. A footprint walks that order, which is why a
round that does not fit at the end of a row continues on the next one.
"""

from __future__ import annotations

from typing import Callable, Iterable

from court_grid.types import ScheduledRound


# (row, col)
Cell = tuple[int, int]


def linear_index(row: int, col: int, lane_count: int) -> int:
    """Row-major position of (row, col)."""
    return row * lane_count + col


def cell_at(index: int, lane_count: int) -> Cell:
    """Inverse of linear_index."""
    return (index // lane_count, index % lane_count)


def footprint(
    start_row: int, start_col: int, span: int, lane_count: int
) -> list[Cell]:
    """Ordered cells occupied by `span` consecutive courts.

    >>> footprint(0, 6, 4, 8)
    [(0, 6), (0, 7), (1, 0), (1, 1)]
    """
    cells: list[Cell] = []
    row, col = start_row, start_col
    for _ in range(span):
        cells.append((row, col))
        col += 1
        if col >= lane_count:
            col = 0
            row += 1
    return cells


def start_index(entry: ScheduledRound, lane_count: int) -> int:
    """Linear index of the first cell of a placement."""
    return linear_index(entry.row, entry.start_col, lane_count)


def entry_footprint(
    entry: ScheduledRound, span_of: Callable[[str], int], lane_count: int
) -> list[Cell]:
    """Footprint of a scheduled entry, resolving its span by round id."""
    return footprint(entry.row, entry.start_col, span_of(entry.round_id), lane_count)


def occupancy(
    schedule: Iterable[ScheduledRound],
    span_of: Callable[[str], int],
    lane_count: int,
) -> dict[Cell, str]:
    """Map every occupied cell to the id of the round occupying it.

    Later entries win on a shared cell; a well-formed schedule has none.
    """
    cells: dict[Cell, str] = {}
    for entry in schedule:
        for cell in entry_footprint(entry, span_of, lane_count):
            cells[cell] = entry.round_id
    return cells


def rows_spanned(cells: Iterable[Cell]) -> set[int]:
    return {row for row, _ in cells}

"""Shared types: Round, Series, ScheduledRound, PlacementCheck, UnknownSeriesError."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Round:
    """One round of a series. Occupies `match_count` consecutive courts.

    Invariants:
        - match_count >= 1
        - round_number is the 1-indexed position inside its series
    """

    id: str
    series_id: str
    round_number: int
    match_count: int
    label: str


@dataclass(frozen=True)
class Series:
    """An ordered track of rounds. Insertion order is competitive order."""

    id: str
    name: str
    short_name: str
    color: str
    rounds: tuple[Round, ...] = ()

    def round_ids(self) -> set[str]:
        return {r.id for r in self.rounds}


@dataclass(frozen=True)
class ScheduledRound:
    """Placement of a round: starting time-slot row and starting court column.

    The round fills courts left to right from `start_col`, wrapping to
    column 0 of the next row when the row is exhausted.
    """

    round_id: str
    row: int
    start_col: int


@dataclass(frozen=True)
class PlacementCheck:
    """Outcome of a placement validation. `reason` is set when invalid."""

    valid: bool
    reason: str | None = None

    def __bool__(self) -> bool:
        return self.valid


OK = PlacementCheck(valid=True)


class UnknownSeriesError(KeyError):
    """Raised when a roster edit names a series that does not exist."""

    def __init__(self, series_id: str) -> None:
        self.series_id = series_id
        super().__init__(f"Unknown series {series_id!r}")

    def __str__(self) -> str:
        return self.args[0]

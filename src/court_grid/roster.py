"""Roster: the series/round collection and its round-id index.

Series and rounds are immutable values; every edit replaces the affected
series and rebuilds the index so placement code can resolve a round id to
its span and series without scanning.
"""

from __future__ import annotations

import logging
import uuid
from dataclasses import replace
from typing import Iterable, Iterator

from court_grid.types import Round, ScheduledRound, Series, UnknownSeriesError

logger = logging.getLogger(__name__)


def generate_id() -> str:
    return uuid.uuid4().hex[:9]


def series_color(index: int, total: int) -> str:
    """Evenly spaced hue for the index-th of `total` series."""
    hue = (index * 360 // max(total, 1)) % 360
    saturation = 70 + (index % 3) * 10
    lightness = 45 + (index % 2) * 10
    return f"hsl({hue}, {saturation}%, {lightness}%)"


class Roster:
    """Ordered series with an index from round id to (round, series)."""

    def __init__(self, series: Iterable[Series] = ()) -> None:
        self._series: list[Series] = list(series)
        self._index: dict[str, tuple[Round, Series]] = {}
        self._reindex()

    def _reindex(self) -> None:
        self._index = {
            r.id: (r, s) for s in self._series for r in s.rounds
        }

    def _recolor(self) -> None:
        total = len(self._series)
        self._series = [
            replace(s, color=series_color(i, total))
            for i, s in enumerate(self._series)
        ]

    def _position(self, series_id: str) -> int:
        for i, s in enumerate(self._series):
            if s.id == series_id:
                return i
        raise UnknownSeriesError(series_id)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    @property
    def series(self) -> tuple[Series, ...]:
        return tuple(self._series)

    def __iter__(self) -> Iterator[Series]:
        return iter(self._series)

    def __len__(self) -> int:
        return len(self._series)

    def __contains__(self, round_id: object) -> bool:
        return round_id in self._index

    def series_by_id(self, series_id: str) -> Series:
        return self._series[self._position(series_id)]

    def lookup(self, round_id: str) -> tuple[Round, Series] | None:
        return self._index.get(round_id)

    def span(self, round_id: str) -> int:
        """Court count of a round. Unknown ids occupy a single cell."""
        found = self._index.get(round_id)
        return found[0].match_count if found else 1

    def all_rounds(self) -> list[tuple[Round, Series]]:
        return [(r, s) for s in self._series for r in s.rounds]

    def unscheduled(
        self, schedule: Iterable[ScheduledRound]
    ) -> list[tuple[Round, Series]]:
        placed = {entry.round_id for entry in schedule}
        return [(r, s) for r, s in self.all_rounds() if r.id not in placed]

    # ------------------------------------------------------------------
    # Series edits
    # ------------------------------------------------------------------
    def add_series(
        self, name: str, short_name: str, series_id: str | None = None
    ) -> Series:
        new = Series(
            id=series_id or generate_id(),
            name=name,
            short_name=short_name,
            color="",
        )
        self._series.append(new)
        self._recolor()
        self._reindex()
        return self._series[-1]

    def remove_series(self, series_id: str) -> list[str]:
        """Drop a series. Returns the ids of the rounds it held."""
        removed = self._series.pop(self._position(series_id))
        self._recolor()
        self._reindex()
        logger.debug("Removed series %s with %d rounds", series_id, len(removed.rounds))
        return [r.id for r in removed.rounds]

    def update_series(
        self,
        series_id: str,
        name: str | None = None,
        short_name: str | None = None,
    ) -> Series:
        pos = self._position(series_id)
        current = self._series[pos]
        updated = replace(
            current,
            name=current.name if name is None else name,
            short_name=current.short_name if short_name is None else short_name,
        )
        self._series[pos] = updated
        self._reindex()
        return updated

    # ------------------------------------------------------------------
    # Round edits
    # ------------------------------------------------------------------
    def add_round(
        self,
        series_id: str,
        match_count: int,
        label: str,
        round_id: str | None = None,
    ) -> Round:
        if match_count < 1:
            raise ValueError(f"match_count must be >= 1, got {match_count}")
        pos = self._position(series_id)
        current = self._series[pos]
        new = Round(
            id=round_id or generate_id(),
            series_id=series_id,
            round_number=len(current.rounds) + 1,
            match_count=match_count,
            label=label,
        )
        self._series[pos] = replace(current, rounds=current.rounds + (new,))
        self._reindex()
        return new

    def remove_round(self, series_id: str, round_id: str) -> None:
        """Drop a round and renumber the rest of its series 1..N."""
        pos = self._position(series_id)
        current = self._series[pos]
        kept = [r for r in current.rounds if r.id != round_id]
        renumbered = tuple(
            replace(r, round_number=i + 1) for i, r in enumerate(kept)
        )
        self._series[pos] = replace(current, rounds=renumbered)
        self._reindex()

    def update_round(
        self,
        series_id: str,
        round_id: str,
        match_count: int | None = None,
        label: str | None = None,
    ) -> Round:
        if match_count is not None and match_count < 1:
            raise ValueError(f"match_count must be >= 1, got {match_count}")
        pos = self._position(series_id)
        current = self._series[pos]
        updated: Round | None = None
        rounds = []
        for r in current.rounds:
            if r.id == round_id:
                r = replace(
                    r,
                    match_count=r.match_count if match_count is None else match_count,
                    label=r.label if label is None else label,
                )
                updated = r
            rounds.append(r)
        if updated is None:
            raise KeyError(f"Round {round_id!r} not in series {series_id!r}")
        self._series[pos] = replace(current, rounds=tuple(rounds))
        self._reindex()
        return updated

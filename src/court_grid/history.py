"""ScheduleState — the schedule plus its bounded undo log.

States are immutable values. Every mutating operation builds a candidate
schedule and hands it to `commit`, which is the only place history grows.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from court_grid.types import ScheduledRound

logger = logging.getLogger(__name__)

HISTORY_LIMIT = 20

Schedule = tuple[ScheduledRound, ...]


@dataclass(frozen=True)
class ScheduleState:
    """Current schedule and prior snapshots, oldest first.

    Invariants:
        - len(history) <= HISTORY_LIMIT
        - at most one entry per round_id in schedule
    """

    schedule: Schedule = ()
    history: tuple[Schedule, ...] = ()

    def entry(self, round_id: str) -> ScheduledRound | None:
        for e in self.schedule:
            if e.round_id == round_id:
                return e
        return None

    @property
    def can_undo(self) -> bool:
        return bool(self.history)


def same_placements(a: Schedule, b: Schedule) -> bool:
    """True when both schedules hold the same placements, in any order."""
    return len(a) == len(b) and set(a) == set(b)


def commit(state: ScheduleState, schedule: Schedule) -> ScheduleState:
    """Replace the schedule, pushing the old one onto history.

    Returns `state` itself when nothing changed, so callers can test
    `new is state` to detect a no-op.
    """
    schedule = tuple(schedule)
    if same_placements(state.schedule, schedule):
        return state
    history = (state.history + (state.schedule,))[-HISTORY_LIMIT:]
    return ScheduleState(schedule=schedule, history=history)


def undo(state: ScheduleState) -> ScheduleState:
    """Restore the most recent snapshot verbatim. No-op on empty history."""
    if not state.history:
        logger.warning("Nothing to undo")
        return state
    return ScheduleState(schedule=state.history[-1], history=state.history[:-1])


def forget_rounds(state: ScheduleState, round_ids: set[str]) -> ScheduleState:
    """Drop placements of deleted rounds from the schedule and every snapshot.

    Not an undoable edit: history keeps its length.
    """
    if not round_ids:
        return state

    def _strip(schedule: Schedule) -> Schedule:
        return tuple(e for e in schedule if e.round_id not in round_ids)

    return ScheduleState(
        schedule=_strip(state.schedule),
        history=tuple(_strip(s) for s in state.history),
    )

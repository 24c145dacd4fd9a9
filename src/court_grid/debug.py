"""ASCII visualisation for development-time verification.

This module is dev-only and not imported by production code.
"""

from __future__ import annotations

from typing import Iterable

from court_grid.grid import occupancy
from court_grid.roster import Roster
from court_grid.timeslots import TournamentSettings
from court_grid.types import ScheduledRound


def show_schedule(
    roster: Roster,
    schedule: Iterable[ScheduledRound],
    settings: TournamentSettings,
    min_rows: int = 0,
) -> str:
    """Print ASCII grid view of a schedule.

    Legend: '.' = free court, 'A'-'Z' = a round of that series (by roster
    position). Each line is one time slot, each char one court.
    Returns the string and also prints to stdout.
    """
    lines: list[str] = []
    label_chars = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"

    series_labels: dict[str, str] = {}
    for i, s in enumerate(roster):
        series_labels[s.id] = label_chars[i % len(label_chars)]

    cells = occupancy(schedule, roster.span, settings.court_count)
    last_row = max((r for r, _ in cells), default=-1)
    row_total = max(last_row + 1, min_rows)

    header = "".join(str(c % 10) for c in range(settings.court_count))
    lines.append(f"{'':>5s}  {header}")

    for row in range(row_total):
        chars = []
        for col in range(settings.court_count):
            round_id = cells.get((row, col))
            if round_id is None:
                chars.append(".")
                continue
            found = roster.lookup(round_id)
            chars.append(series_labels[found[1].id] if found else "?")
        lines.append(f"{settings.slot_label(row):>5s}  {''.join(chars)}")

    # Legend
    if series_labels:
        legend_parts = [f"{series_labels[s.id]}={s.short_name}" for s in roster]
        lines.append(f"\nLegend: . = free, {', '.join(legend_parts)}")

    result = "\n".join(lines)
    print(result)
    return result

"""Tournament document loading and export.

The JSON document has the shape:
{
    "settings": { "courtCount": 8, "timeSlotDuration": 35,
                  "startTime": "08:00", "endTime": "18:00" },
    "series": [
        { "id": "...", "name": "...", "shortName": "...", "color": "...",
          "rounds": [ { "id": "...", "seriesId": "...", "roundNumber": 1,
                        "matchCount": 4, "label": "..." }, ... ] },
        ...
    ],
    "schedule": [ { "roundId": "...", "row": 0, "startCol": 0 }, ... ]
}
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Iterable

from court_grid.history import ScheduleState
from court_grid.roster import Roster, series_color
from court_grid.schema import validate_schedule, validate_series, validate_settings
from court_grid.session import TournamentSession
from court_grid.timeslots import TournamentSettings
from court_grid.types import Round, ScheduledRound, Series


def export_tournament(
    settings: TournamentSettings,
    roster: Roster,
    schedule: Iterable[ScheduledRound],
) -> dict:
    """Serialisable {settings, series, schedule} document."""
    return {
        "settings": settings.to_dict(),
        "series": [
            {
                "id": s.id,
                "name": s.name,
                "shortName": s.short_name,
                "color": s.color,
                "rounds": [
                    {
                        "id": r.id,
                        "seriesId": r.series_id,
                        "roundNumber": r.round_number,
                        "matchCount": r.match_count,
                        "label": r.label,
                    }
                    for r in s.rounds
                ],
            }
            for s in roster
        ],
        "schedule": [
            {"roundId": e.round_id, "row": e.row, "startCol": e.start_col}
            for e in schedule
        ],
    }


def parse_tournament(data: dict, source: str = "document") -> TournamentSession:
    """Build a session from a parsed document.

    Round numbers are recomputed from list order; colours missing from the
    document are generated. History starts empty.

    Raises ValueError if validation fails.
    """
    if not isinstance(data, dict):
        raise ValueError(f"Validation errors in {source}:\n  - expected an object")

    settings_raw = data.get("settings", {})
    series_raw = data.get("series", [])
    schedule_raw = data.get("schedule", [])

    errors = validate_settings(settings_raw)
    errors.extend(validate_series(series_raw))
    if not errors:
        known = {r["id"] for s in series_raw for r in s.get("rounds", [])}
        errors.extend(validate_schedule(schedule_raw, known))
    if errors:
        raise ValueError(
            f"Validation errors in {source}:\n"
            + "\n".join(f"  - {e}" for e in errors)
        )

    total = len(series_raw)
    series = []
    for i, s in enumerate(series_raw):
        rounds = tuple(
            Round(
                id=r["id"],
                series_id=s["id"],
                round_number=n,
                match_count=r["matchCount"],
                label=r.get("label", ""),
            )
            for n, r in enumerate(s.get("rounds", []), start=1)
        )
        series.append(Series(
            id=s["id"],
            name=s["name"],
            short_name=s.get("shortName", s["name"]),
            color=s.get("color") or series_color(i, total),
            rounds=rounds,
        ))

    schedule = tuple(
        ScheduledRound(e["roundId"], e["row"], e["startCol"]) for e in schedule_raw
    )
    return TournamentSession(
        settings=TournamentSettings.from_dict(settings_raw),
        roster=Roster(series),
        state=ScheduleState(schedule=schedule),
    )


def load_tournament_json(path: str | Path) -> TournamentSession:
    """Load a session from a tournament JSON file.

    Raises ValueError if validation fails.
    """
    path = Path(path)
    with open(path) as f:
        data = json.load(f)
    return parse_tournament(data, source=path.name)


def dump_tournament_json(session: TournamentSession, path: str | Path) -> None:
    """Write the session's settings, series and schedule to `path`."""
    doc = export_tournament(session.settings, session.roster, session.schedule)
    with open(Path(path), "w") as f:
        json.dump(doc, f, indent=2)

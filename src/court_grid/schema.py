"""Input validation for tournament documents."""

from __future__ import annotations

from datetime import time


def _valid_time(value: object) -> bool:
    if not isinstance(value, str) or len(value) != 5:
        return False
    try:
        time.fromisoformat(value)
    except ValueError:
        return False
    return True


def _positive_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value >= 1


def validate_settings(settings: dict) -> list[str]:
    """Validate a settings block. Returns list of error messages (empty = valid).

    Checks:
    - courtCount and timeSlotDuration are positive integers
    - startTime / endTime parse as 'HH:MM'
    - endTime is not before startTime
    """
    if not isinstance(settings, dict):
        return [f"settings must be an object, got {settings!r}"]

    errors: list[str] = []

    for key in ("courtCount", "timeSlotDuration"):
        if key in settings and not _positive_int(settings[key]):
            errors.append(f"{key} must be a positive integer, got {settings[key]!r}")

    times_ok = True
    for key in ("startTime", "endTime"):
        if key in settings and not _valid_time(settings[key]):
            errors.append(f"{key} must be 'HH:MM', got {settings[key]!r}")
            times_ok = False

    if times_ok and "startTime" in settings and "endTime" in settings:
        if settings["endTime"] < settings["startTime"]:
            errors.append(
                f"endTime {settings['endTime']} is before "
                f"startTime {settings['startTime']}"
            )

    return errors


def validate_series(series: list[dict]) -> list[str]:
    """Validate series entries. Returns list of error messages.

    Checks:
    - Each series is an object with a string id and name, ids are unique
    - shortName, when present, is a string
    - rounds is a list of objects
    - Each round has a string id unique across the document
    - matchCount is a positive integer
    """
    errors: list[str] = []
    series_ids: set[str] = set()
    round_ids: set[str] = set()

    if not isinstance(series, list):
        return [f"series must be a list, got {series!r}"]

    for i, entry in enumerate(series):
        if not isinstance(entry, dict):
            errors.append(f"Series {i}: expected an object, got {entry!r}")
            continue
        for field in ("id", "name"):
            if field not in entry:
                errors.append(f"Series {i}: missing '{field}'")
        for field in ("id", "name", "shortName"):
            if field in entry and not isinstance(entry[field], str):
                errors.append(
                    f"Series {i}: {field} must be a string, got {entry[field]!r}"
                )

        sid = entry.get("id")
        if isinstance(sid, str):
            if sid in series_ids:
                errors.append(f"Series {i}: duplicate id {sid!r}")
            series_ids.add(sid)

        rounds = entry.get("rounds", [])
        if not isinstance(rounds, list):
            errors.append(f"Series {i}: rounds must be a list, got {rounds!r}")
            continue

        for j, rnd in enumerate(rounds):
            if not isinstance(rnd, dict):
                errors.append(f"Series {i}, round {j}: expected an object, got {rnd!r}")
                continue
            rid = rnd.get("id")
            if not isinstance(rid, str):
                errors.append(f"Series {i}, round {j}: id must be a string, got {rid!r}")
                continue
            if rid in round_ids:
                errors.append(f"Series {i}, round {j}: duplicate id {rid!r}")
            round_ids.add(rid)
            if not _positive_int(rnd.get("matchCount")):
                errors.append(
                    f"Series {i}, round {j}: matchCount must be a positive "
                    f"integer, got {rnd.get('matchCount')!r}"
                )

    return errors


def validate_schedule(schedule: list[dict], round_ids: set[str]) -> list[str]:
    """Validate schedule entries against the known round ids.

    Checks:
    - schedule is a list of objects
    - roundId refers to a known round, at most once
    - row and startCol are non-negative integers
    """
    errors: list[str] = []
    seen: set[str] = set()

    if not isinstance(schedule, list):
        return [f"schedule must be a list, got {schedule!r}"]

    for i, entry in enumerate(schedule):
        if not isinstance(entry, dict):
            errors.append(f"Schedule entry {i}: expected an object, got {entry!r}")
            continue

        rid = entry.get("roundId")
        if not isinstance(rid, str) or rid not in round_ids:
            errors.append(f"Schedule entry {i}: unknown roundId {rid!r}")
        elif rid in seen:
            errors.append(f"Schedule entry {i}: round {rid!r} scheduled twice")
        else:
            seen.add(rid)

        for field in ("row", "startCol"):
            value = entry.get(field)
            if not isinstance(value, int) or isinstance(value, bool) or value < 0:
                errors.append(
                    f"Schedule entry {i}: {field} must be a non-negative "
                    f"integer, got {value!r}"
                )

    return errors

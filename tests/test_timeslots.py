"""Tests for TournamentSettings row labels and bounds."""

from __future__ import annotations

import pytest


class TestTournamentSettings:

    def test_defaults(self):
        from court_grid.timeslots import DEFAULT_SETTINGS

        assert DEFAULT_SETTINGS.court_count == 8
        assert DEFAULT_SETTINGS.slot_duration == 35
        assert DEFAULT_SETTINGS.row_count == 17

    @pytest.mark.parametrize(
        "row, expected",
        [(0, "08:00"), (1, "08:35"), (2, "09:10"), (12, "15:00")],
    )
    def test_slot_label(self, row, expected):
        from court_grid.timeslots import DEFAULT_SETTINGS

        assert DEFAULT_SETTINGS.slot_label(row) == expected

    def test_label_past_midnight_keeps_counting(self):
        from court_grid.timeslots import TournamentSettings

        settings = TournamentSettings(slot_duration=60, start_time="22:00", end_time="23:00")
        assert settings.slot_label(3) == "25:00"
        assert settings.minutes_at(3) == 25 * 60

    def test_frozen(self):
        from court_grid.timeslots import DEFAULT_SETTINGS

        with pytest.raises(AttributeError):
            DEFAULT_SETTINGS.court_count = 4  # type: ignore[misc]

    def test_dict_round_trip_fills_defaults(self):
        from court_grid.timeslots import TournamentSettings

        settings = TournamentSettings.from_dict({"courtCount": 5})
        assert settings == TournamentSettings(court_count=5)
        assert settings.to_dict()["courtCount"] == 5


class TestGapBand:

    @pytest.mark.parametrize(
        "gap, expected",
        [
            (None, None),
            (0, "under-1h"),
            (59, "under-1h"),
            (60, "1h-2h"),
            (119, "1h-2h"),
            (120, "2h-3h"),
            (179, "2h-3h"),
            (180, "over-3h"),
            (500, "over-3h"),
        ],
    )
    def test_bands(self, gap, expected):
        from court_grid.timeslots import gap_band

        assert gap_band(gap) == expected


class TestSeriesTimetable:

    @pytest.fixture
    def timetable(self, session):
        session.place("r-dh1-1", 0, 0)
        session.place("r-dh1-2", 2, 4)
        session.place("r-dd1-2", 1, 0)
        session.place("r-dd1-1", 3, 2)
        session.place("r-sh-2", 0, 4)
        session.place("r-sh-1", 6, 0)
        session.place("r-sh-3", 7, 0)
        return {t.series.short_name: t for t in session.timetable()}

    def test_roster_order(self, timetable):
        assert list(timetable) == ["DH1", "DD1", "SH"]

    def test_total_matches(self, timetable):
        assert timetable["DH1"].total_matches == 7
        assert timetable["DD1"].total_matches == 6
        assert timetable["SH"].total_matches == 15

    def test_scheduled_by_time_then_unscheduled(self, timetable):
        ids = [e.rnd.id for e in timetable["SH"].entries]
        assert ids == ["r-sh-2", "r-sh-1", "r-sh-3", "r-sh-4"]
        ids = [e.rnd.id for e in timetable["DD1"].entries]
        assert ids == ["r-dd1-2", "r-dd1-1"]

    def test_positions_and_times(self, timetable):
        first, second, third = timetable["DH1"].entries
        assert (first.row, first.col, first.time, first.minutes) == (0, 0, "08:00", 480)
        assert (second.row, second.col, second.time) == (2, 4, "09:10")
        assert not third.scheduled
        assert (third.row, third.col, third.time, third.gap) == (None, None, None, None)

    def test_gaps(self, timetable):
        assert [e.gap for e in timetable["DH1"].entries] == [None, 70, None]
        assert [e.gap for e in timetable["SH"].entries] == [None, 210, 35, None]
        assert [e.band for e in timetable["SH"].entries] == [
            None, "over-3h", "under-1h", None,
        ]

    def test_empty_schedule(self, session):
        for table in session.timetable():
            assert not any(e.scheduled for e in table.entries)
            assert [e.rnd.round_number for e in table.entries] == list(
                range(1, len(table.series.rounds) + 1)
            )

    def test_same_start_keeps_round_order(self):
        from conftest import entries, make_roster
        from court_grid.timeslots import DEFAULT_SETTINGS, series_timetable

        roster = make_roster()
        schedule = entries([["r-dd1-2", 4, 0], ["r-dd1-1", 4, 2]])
        dd1 = series_timetable(roster, schedule, DEFAULT_SETTINGS)[1]
        assert [e.rnd.id for e in dd1.entries] == ["r-dd1-1", "r-dd1-2"]
        assert [e.gap for e in dd1.entries] == [None, 0]

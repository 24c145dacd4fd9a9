"""Tests for tournament document loading, validation and export."""

from __future__ import annotations

import json

import pytest

from conftest import TOURNAMENT_PATH, entries, tournament_document


class TestLoad:

    def test_load_reference(self):
        from court_grid.loaders import load_tournament_json

        session = load_tournament_json(TOURNAMENT_PATH)
        assert session.settings.court_count == 8
        assert [s.short_name for s in session.roster] == ["DH1", "DD1", "SH"]
        assert session.roster.lookup("r-sh-3")[0].round_number == 3
        assert session.schedule == ()
        assert session.history == ()

    def test_missing_colors_generated(self):
        from court_grid.loaders import parse_tournament
        from court_grid.roster import series_color

        session = parse_tournament(tournament_document())
        assert [s.color for s in session.roster] == [series_color(i, 3) for i in range(3)]

    def test_schedule_loaded(self):
        from court_grid.loaders import parse_tournament

        doc = tournament_document()
        doc["schedule"] = [{"roundId": "r-dh1-1", "row": 1, "startCol": 2}]
        session = parse_tournament(doc)
        assert session.schedule == entries([["r-dh1-1", 1, 2]])

    @pytest.mark.parametrize(
        "mutate, message",
        [
            (lambda d: d["settings"].update(courtCount=0), "courtCount"),
            (lambda d: d["settings"].update(startTime="25:00"), "startTime"),
            (lambda d: d["series"][0]["rounds"][0].update(matchCount=0), "matchCount"),
            (lambda d: d["series"][1]["rounds"][0].update(id="r-dh1-1"), "duplicate id"),
            (lambda d: d["series"][2].pop("name"), "missing 'name'"),
            (lambda d: d["schedule"].append({"roundId": "ghost", "row": 0, "startCol": 0}),
             "unknown roundId"),
            (lambda d: d["schedule"].append({"roundId": "r-dh1-1", "row": -1, "startCol": 0}),
             "row must be a non-negative integer"),
            (lambda d: d["series"][0].update(name=5), "name must be a string"),
            (lambda d: d["series"][1].update(shortName=["DD"]), "shortName must be a string"),
            (lambda d: d["series"][0]["rounds"].append(3), "round 3: expected an object"),
            (lambda d: d["series"][2].update(rounds="r-sh-1"), "rounds must be a list"),
            (lambda d: d["series"][0]["rounds"][0].update(id=["r"]), "id must be a string"),
            (lambda d: d["schedule"].append("x"), "Schedule entry 0: expected an object"),
            (lambda d: d["schedule"].append({"roundId": ["r-dh1-1"], "row": 0, "startCol": 0}),
             "unknown roundId"),
            (lambda d: d.update(settings=[8]), "settings must be an object"),
        ],
    )
    def test_invalid_document(self, mutate, message):
        from court_grid.loaders import parse_tournament

        doc = tournament_document()
        mutate(doc)
        with pytest.raises(ValueError) as exc_info:
            parse_tournament(doc, source="broken.json")
        assert "broken.json" in str(exc_info.value)
        assert message in str(exc_info.value)


class TestExport:

    def test_document_shape(self, session):
        from court_grid.loaders import export_tournament

        session.place("r-dd1-2", 3, 1)
        doc = export_tournament(session.settings, session.roster, session.schedule)

        assert set(doc) == {"settings", "series", "schedule"}
        assert doc["settings"] == {
            "courtCount": 8, "timeSlotDuration": 35,
            "startTime": "08:00", "endTime": "18:00",
        }
        dd1 = doc["series"][1]
        assert dd1["shortName"] == "DD1"
        assert dd1["rounds"][1] == {
            "id": "r-dd1-2", "seriesId": "s-dd1", "roundNumber": 2,
            "matchCount": 2, "label": "Finale",
        }
        assert doc["schedule"] == [{"roundId": "r-dd1-2", "row": 3, "startCol": 1}]

    def test_dump_and_reload(self, session, tmp_path):
        from court_grid.loaders import dump_tournament_json, load_tournament_json

        session.auto_schedule()
        path = tmp_path / "tournament.json"
        dump_tournament_json(session, path)

        with open(path) as f:
            assert "schedule" in json.load(f)

        reloaded = load_tournament_json(path)
        assert reloaded.schedule == session.schedule
        assert reloaded.roster.series == session.roster.series
        assert reloaded.settings == session.settings


class TestMalformedInput:

    def test_non_object_document(self):
        from court_grid.loaders import parse_tournament

        with pytest.raises(ValueError, match="expected an object"):
            parse_tournament(["not", "a", "document"], source="list.json")

    def test_every_error_reported(self):
        from court_grid.loaders import parse_tournament

        doc = tournament_document()
        doc["series"][0]["name"] = 5
        doc["series"][1]["rounds"].append(3)
        with pytest.raises(ValueError) as exc_info:
            parse_tournament(doc)
        message = str(exc_info.value)
        assert "Series 0: name must be a string" in message
        assert "Series 1, round 2: expected an object" in message

    def test_accepted_document_packs(self):
        from court_grid.loaders import parse_tournament

        doc = tournament_document()
        doc["series"][0]["name"] = "zz last"
        session = parse_tournament(doc)
        assert session.auto_schedule()
        assert len(session.schedule) == 9

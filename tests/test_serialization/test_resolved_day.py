"""Tests for ResolvedDay JSON serialization."""

from __future__ import annotations

import json
from datetime import date

from training_calendar.models.dataset import CalendarDataset
from training_calendar.resolution.day import resolve_workout_of_day
from training_calendar.serialization import resolved_day_to_dict, resolved_day_to_json


class TestResolvedDayToDict:
    def test_top_level_shape(self, calendar_data: CalendarDataset) -> None:
        day = resolve_workout_of_day(calendar_data, date(2026, 2, 1))
        out = resolved_day_to_dict(day)
        assert out["date"] == "2026-02-01"
        assert out["dayKey"] == "sun"
        assert out["reference"] == "workout-b@v1"
        assert out["season"] == {"seasonId": "season-test", "name": "Test Season"}
        assert out["week"] == {"weekId": "week-1", "index": 0, "startDate": "2026-01-26"}
        assert out["block"]["blockId"] == "block-a"
        assert out["workout"]["version"] == 1
        assert out["workout"]["status"] == "published"

    def test_tiers_always_complete(self, calendar_data: CalendarDataset) -> None:
        out = resolved_day_to_dict(resolve_workout_of_day(calendar_data, date(2026, 2, 1)))
        assert set(out["tiers"]) == {"MED", "LRG", "XL"}
        assert out["tiers"]["XL"]["name"] == "B LRG"
        assert out["tiers"]["XL"]["structure"] == [{"intensity": 7, "durationMin": 45}]
        assert out["tierSources"] == {"MED": "MED", "LRG": "LRG", "XL": "LRG"}


class TestResolvedDayToJson:
    def test_rest_day_is_null(self) -> None:
        assert resolved_day_to_json(None) == "null"

    def test_json_parses_back(self, calendar_data: CalendarDataset) -> None:
        day = resolve_workout_of_day(calendar_data, date(2026, 1, 26))
        parsed = json.loads(resolved_day_to_json(day))
        assert parsed["workout"]["workoutId"] == "workout-a"
        assert parsed["tierSources"]["XL"] == "XL"

"""Tests for CalendarEngine — snapshot binding and orchestration."""

from __future__ import annotations

import dataclasses
from datetime import date, datetime, timedelta, timezone

import pytest

from training_calendar.config import CalendarConfig
from training_calendar.engine import CalendarEngine
from training_calendar.exceptions import DanglingReferenceError, InvalidInputError, InvariantViolation
from training_calendar.models.dataset import CalendarDataset
from training_calendar.models.enums import Tier

PST = timezone(timedelta(hours=-8))


class TestCalendarEngine:
    def test_validates_on_construction(self, calendar_data: CalendarDataset) -> None:
        broken_week = dataclasses.replace(calendar_data.weeks[0], start_date=date(2026, 1, 27))
        data = dataclasses.replace(calendar_data, weeks=(broken_week,) + calendar_data.weeks[1:])
        with pytest.raises(InvariantViolation):
            CalendarEngine(data)

    def test_validation_can_be_disabled(self, calendar_data: CalendarDataset, week_days) -> None:
        draft_week = dataclasses.replace(calendar_data.weeks[0], workouts=week_days(mon="workout-draft@v1"))
        data = dataclasses.replace(calendar_data, weeks=(draft_week,) + calendar_data.weeks[1:])
        engine = CalendarEngine(data, CalendarConfig(validate_on_load=False))
        # Inconsistent data still fails loudly at query time
        with pytest.raises(DanglingReferenceError):
            engine.workout_of_day(date(2026, 1, 26))

    def test_active_season_and_week(self, calendar_data: CalendarDataset) -> None:
        engine = CalendarEngine(calendar_data)
        season = engine.active_season(datetime(2026, 2, 1, 12, tzinfo=PST))
        assert season is not None
        match = engine.week_for_date(season, datetime(2026, 2, 1, 12, tzinfo=PST))
        assert match is not None
        assert match.week.week_id == "week-1"
        assert engine.week_for_date(None, date(2026, 2, 1)) is None

    def test_workout_of_day(self, calendar_data: CalendarDataset) -> None:
        engine = CalendarEngine(calendar_data)
        result = engine.workout_of_day(datetime(2026, 2, 1, 12, tzinfo=PST))
        assert result is not None
        assert result.workout.workout_id == "workout-b"

    def test_tier_for_day(self, calendar_data: CalendarDataset) -> None:
        engine = CalendarEngine(calendar_data)
        variant, source = engine.tier_for_day(date(2026, 2, 1), Tier.XL)
        assert variant.name == "B LRG"
        assert source == Tier.LRG
        variant, source = engine.tier_for_day(date(2026, 2, 1), "MED")
        assert (variant.name, source) == ("B MED", Tier.MED)
        assert engine.tier_for_day(date(2026, 2, 3), Tier.XL) is None

    def test_tier_for_day_rejects_unknown_tier(self, calendar_data: CalendarDataset) -> None:
        with pytest.raises(InvalidInputError):
            CalendarEngine(calendar_data).tier_for_day(date(2026, 2, 1), "S")

    def test_resolve_range(self, calendar_data: CalendarDataset) -> None:
        engine = CalendarEngine(calendar_data)
        days = engine.resolve_range(date(2026, 1, 25), date(2026, 2, 9))
        assert len(days) == 16
        assert days[0] == (date(2026, 1, 25), None)
        assert days[-1] == (date(2026, 2, 9), None)
        scheduled = [d for d, r in days if r is not None]
        # mon, wed, sat, sun in each of two weeks
        assert len(scheduled) == 8
        assert scheduled[0] == date(2026, 1, 26)

    def test_resolve_range_single_day(self, calendar_data: CalendarDataset) -> None:
        days = CalendarEngine(calendar_data).resolve_range(date(2026, 2, 2), date(2026, 2, 2))
        assert len(days) == 1
        assert days[0][1].week.week_id == "week-2"

    def test_resolve_range_rejects_reversed(self, calendar_data: CalendarDataset) -> None:
        with pytest.raises(InvalidInputError, match="before start"):
            CalendarEngine(calendar_data).resolve_range(date(2026, 2, 2), date(2026, 2, 1))

    def test_engine_is_deterministic(self, calendar_data: CalendarDataset) -> None:
        first = CalendarEngine(calendar_data).resolve_range(date(2026, 1, 26), date(2026, 2, 8))
        second = CalendarEngine(calendar_data).resolve_range(date(2026, 1, 26), date(2026, 2, 8))
        assert first == second

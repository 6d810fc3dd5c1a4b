"""Tests for CalendarConfig and environment-based configuration."""

from __future__ import annotations

import pytest

from training_calendar.config import DEFAULT_CONFIG, CalendarConfig, config_from_env
from training_calendar.exceptions import InvalidInputError
from training_calendar.models.enums import Weekday


class TestCalendarConfig:
    def test_defaults(self) -> None:
        assert DEFAULT_CONFIG.timezone == "America/Los_Angeles"
        assert DEFAULT_CONFIG.week_start == Weekday.MON
        assert DEFAULT_CONFIG.validate_on_load is True

    def test_frozen(self) -> None:
        with pytest.raises(AttributeError):
            DEFAULT_CONFIG.timezone = "UTC"  # type: ignore[misc]

    def test_unknown_timezone_rejected(self) -> None:
        with pytest.raises(InvalidInputError):
            CalendarConfig(timezone="Nowhere/Special")

    def test_week_start_must_be_weekday(self) -> None:
        with pytest.raises(InvalidInputError):
            CalendarConfig(week_start="mon")  # type: ignore[arg-type]


class TestConfigFromEnv:
    def test_defaults_without_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        for name in (
            "TRAINING_CALENDAR_TIMEZONE",
            "TRAINING_CALENDAR_WEEK_START",
            "TRAINING_CALENDAR_VALIDATE",
        ):
            monkeypatch.delenv(name, raising=False)
        assert config_from_env() == DEFAULT_CONFIG

    def test_reads_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TRAINING_CALENDAR_TIMEZONE", "Europe/Berlin")
        monkeypatch.setenv("TRAINING_CALENDAR_WEEK_START", "Sun")
        monkeypatch.setenv("TRAINING_CALENDAR_VALIDATE", "false")
        config = config_from_env()
        assert config.timezone == "Europe/Berlin"
        assert config.week_start == Weekday.SUN
        assert config.validate_on_load is False

    def test_bad_week_start(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TRAINING_CALENDAR_WEEK_START", "someday")
        with pytest.raises(InvalidInputError):
            config_from_env()

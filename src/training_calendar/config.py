"""Calendar configuration: the fixed timezone and start-of-week weekday.

Every resolver and the validator receive a ``CalendarConfig`` explicitly so
datasets with different conventions can coexist in one process.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from training_calendar.civil_date import load_zone, weekday_from_label
from training_calendar.exceptions import InvalidInputError
from training_calendar.models.enums import DEFAULT_TIME_ZONE, DEFAULT_WEEK_START, Weekday


@dataclass(frozen=True)
class CalendarConfig:
    """System-wide calendar conventions for one dataset."""

    timezone: str = DEFAULT_TIME_ZONE
    week_start: Weekday = DEFAULT_WEEK_START
    validate_on_load: bool = True

    def __post_init__(self) -> None:
        load_zone(self.timezone)
        if not isinstance(self.week_start, Weekday):
            raise InvalidInputError(f"week_start must be a Weekday, got {self.week_start!r}")


DEFAULT_CONFIG = CalendarConfig()


def _env_flag(value: str) -> bool:
    return value.strip().lower() not in ("0", "false", "no", "off")


def config_from_env() -> CalendarConfig:
    """Build a CalendarConfig from environment variables.

    TRAINING_CALENDAR_TIMEZONE: IANA zone name (default America/Los_Angeles)
    TRAINING_CALENDAR_WEEK_START: weekday label or key, e.g. "Mon" or "sun"
    TRAINING_CALENDAR_VALIDATE: "0"/"false" disables validation on load
    """
    timezone = os.environ.get("TRAINING_CALENDAR_TIMEZONE", DEFAULT_TIME_ZONE)
    week_start = weekday_from_label(
        os.environ.get("TRAINING_CALENDAR_WEEK_START", DEFAULT_WEEK_START.label)
    )
    validate = _env_flag(os.environ.get("TRAINING_CALENDAR_VALIDATE", "1"))
    return CalendarConfig(timezone=timezone, week_start=week_start, validate_on_load=validate)

"""Civil-date math: timezone normalization and calendar-day arithmetic.

A civil date is a plain ``datetime.date``. Instants are converted to a civil
date exactly once, using the zone's real wall-clock rules; every comparison
and offset after that happens on proleptic day ordinals, so a week window is
always seven calendar days even when a DST transition falls inside it.
"""

from __future__ import annotations

import math
import re
from datetime import date, datetime, timezone
from typing import Union
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from training_calendar.exceptions import InvalidInputError
from training_calendar.models.enums import DAYS_PER_WEEK, Weekday

# Anything the normalizer accepts as "a point in time"
Instant = Union[datetime, date, int, float]

_CIVIL_DATE_RE = re.compile(r"([0-9]{4})-([0-9]{2})-([0-9]{2})")

_WEEKDAY_BY_LABEL: dict[str, Weekday] = {day.label: day for day in Weekday}
_WEEKDAY_BY_KEY: dict[str, Weekday] = {day.key: day for day in Weekday}


def load_zone(name: str) -> ZoneInfo:
    """Return the ZoneInfo for an IANA zone name.

    Raises:
        InvalidInputError: If the name is empty or not a known zone.
    """
    if not isinstance(name, str) or not name:
        raise InvalidInputError(f"Invalid timezone: {name!r}")
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError) as exc:
        raise InvalidInputError(f"Unknown timezone: {name!r}") from exc


def to_civil_date(when: Instant, tz_name: str) -> date:
    """Normalize an instant to the civil date observed in *tz_name*.

    Accepts an aware ``datetime``, a POSIX timestamp in seconds, or a
    ``date`` (already civil, returned unchanged).

    Raises:
        InvalidInputError: For naive datetimes, non-finite timestamps or
            unsupported types.
    """
    zone = load_zone(tz_name)

    if isinstance(when, datetime):
        if when.tzinfo is None or when.utcoffset() is None:
            raise InvalidInputError(
                f"Naive datetime {when.isoformat()} has no UTC offset."
            )
        return when.astimezone(zone).date()

    if isinstance(when, date):
        return when

    if isinstance(when, (int, float)) and not isinstance(when, bool):
        if not math.isfinite(when):
            raise InvalidInputError(f"Invalid timestamp: {when!r}")
        try:
            instant = datetime.fromtimestamp(when, tz=timezone.utc)
        except (OverflowError, OSError, ValueError) as exc:
            raise InvalidInputError(f"Timestamp out of range: {when!r}") from exc
        return instant.astimezone(zone).date()

    raise InvalidInputError(f"Invalid date: {when!r}")


def format_civil_date(day: date) -> str:
    """Format a civil date as ``YYYY-MM-DD``."""
    return f"{day.year:04d}-{day.month:02d}-{day.day:02d}"


def parse_civil_date(text: str) -> date:
    """Parse a ``YYYY-MM-DD`` string into a civil date.

    Raises:
        InvalidInputError: If the string is not a real calendar date
            (``2026-02-30`` is rejected).
    """
    if not isinstance(text, str):
        raise InvalidInputError(f"Invalid civil date: {text!r}")
    match = _CIVIL_DATE_RE.fullmatch(text)
    if match is None:
        raise InvalidInputError(f"Invalid civil date: {text!r}")
    year, month, day = (int(part) for part in match.groups())
    try:
        return date(year, month, day)
    except ValueError as exc:
        raise InvalidInputError(f"Invalid civil date: {text!r}") from exc


def add_days(day: date, days: int) -> date:
    """Offset a civil date by whole calendar days."""
    try:
        return date.fromordinal(day.toordinal() + days)
    except (OverflowError, ValueError) as exc:
        raise InvalidInputError(
            f"Cannot add {days} days to {format_civil_date(day)}"
        ) from exc


def days_between(start: date, end: date) -> int:
    """Signed number of calendar days from *start* to *end*."""
    return end.toordinal() - start.toordinal()


def week_window(start: date) -> tuple[date, date]:
    """Inclusive 7-day window beginning on *start*."""
    return start, add_days(start, DAYS_PER_WEEK - 1)


def in_range(day: date, start: date, end: date) -> bool:
    """True if *day* falls in ``[start, end]`` inclusive."""
    return start.toordinal() <= day.toordinal() <= end.toordinal()


def weekday_of(day: date) -> Weekday:
    """Weekday of a civil date."""
    return Weekday(day.isoweekday())


def weekday_from_label(label: str) -> Weekday:
    """Map a short label (``"Mon"``) or day key (``"mon"``) to a Weekday.

    Raises:
        InvalidInputError: For any other value.
    """
    day = None
    if isinstance(label, str):
        day = _WEEKDAY_BY_LABEL.get(label) or _WEEKDAY_BY_KEY.get(label)
    if day is None:
        raise InvalidInputError(f"Unsupported weekday value: {label!r}")
    return day


def day_key_for(when: Instant, tz_name: str) -> str:
    """Weekday key (``"mon"`` .. ``"sun"``) for an instant in *tz_name*."""
    return weekday_of(to_civil_date(when, tz_name)).key

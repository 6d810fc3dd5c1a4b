"""Week-within-season lookup."""

from __future__ import annotations

import logging
from typing import Iterable, Mapping, NamedTuple

from training_calendar.civil_date import (
    Instant,
    format_civil_date,
    in_range,
    to_civil_date,
    week_window,
    weekday_of,
)
from training_calendar.config import DEFAULT_CONFIG, CalendarConfig
from training_calendar.exceptions import ConfigurationError, DanglingReferenceError
from training_calendar.models.plan import Season, Week

logger = logging.getLogger(__name__)


class WeekMatch(NamedTuple):
    """A resolved week and its zero-based index within the season."""

    week: Week
    index: int


def check_week_start(week: Week, config: CalendarConfig) -> None:
    """Raise ConfigurationError unless *week* starts on the configured weekday."""
    if weekday_of(week.start_date) != config.week_start:
        raise ConfigurationError(
            f"Week {week.week_id} must start on {config.week_start.label}, "
            f"got {weekday_of(week.start_date).label} {format_civil_date(week.start_date)}."
        )


def season_weeks(
    season: Season, weeks: Iterable[Week] | Mapping[str, Week]
) -> tuple[Week, ...]:
    """Map ``season.week_ids`` to Week records, in season order.

    Raises:
        DanglingReferenceError: If any id has no matching week.
    """
    if isinstance(weeks, Mapping):
        lookup = weeks
    else:
        lookup = {}
        for week in weeks:
            lookup.setdefault(week.week_id, week)

    ordered = []
    for week_id in season.week_ids:
        week = lookup.get(week_id)
        if week is None:
            raise DanglingReferenceError(f"Week {week_id} not found in weeks data.")
        ordered.append(week)
    return tuple(ordered)


def resolve_week_for_date(
    season: Season | None,
    weeks: Iterable[Week] | Mapping[str, Week],
    when: Instant,
    config: CalendarConfig = DEFAULT_CONFIG,
) -> WeekMatch | None:
    """Return ``(week, index)`` for the season week whose window holds *when*.

    ``index`` is zero-based within ``season.week_ids``. Returns None when
    *season* is None or the date falls in a gap or outside every week.
    """
    if season is None:
        return None

    on_date = to_civil_date(when, config.timezone)
    for index, week in enumerate(season_weeks(season, weeks)):
        start, end = week_window(week.start_date)
        if in_range(on_date, start, end):
            check_week_start(week, config)
            return WeekMatch(week, index)

    logger.debug(
        "Season %s has no week covering %s",
        season.season_id,
        format_civil_date(on_date),
    )
    return None

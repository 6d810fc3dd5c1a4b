"""Active-season lookup."""

from __future__ import annotations

import logging
from typing import Sequence

from training_calendar.civil_date import Instant, format_civil_date, in_range, to_civil_date
from training_calendar.config import DEFAULT_CONFIG, CalendarConfig
from training_calendar.exceptions import ConfigurationError
from training_calendar.models.plan import Season

logger = logging.getLogger(__name__)


def check_season_timezone(season: Season, tz_name: str) -> None:
    """Raise ConfigurationError unless *season* uses the fixed zone."""
    if season.timezone != tz_name:
        raise ConfigurationError(
            f"Season {season.season_id} must use timezone {tz_name}, "
            f"got {season.timezone}."
        )


def resolve_active_season(
    seasons: Sequence[Season],
    when: Instant,
    config: CalendarConfig = DEFAULT_CONFIG,
) -> Season | None:
    """Return the season whose inclusive date range contains *when*.

    When ranges overlap, the most recently started season wins; seasons
    with the same start date are ordered by input position, later first.

    Returns:
        The active Season, or None if no season covers the date.

    Raises:
        ConfigurationError: If any season declares a different timezone.
    """
    on_date = to_civil_date(when, config.timezone)

    active: Season | None = None
    for season in seasons:
        check_season_timezone(season, config.timezone)
        if not in_range(on_date, season.start_date, season.end_date):
            continue
        if active is None or season.start_date >= active.start_date:
            active = season

    if active is None:
        logger.debug("No season covers %s", format_civil_date(on_date))
    return active

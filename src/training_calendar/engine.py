"""CalendarEngine — binds one dataset snapshot to one calendar config."""

from __future__ import annotations

import logging
from datetime import date

from training_calendar.civil_date import Instant, add_days, days_between, format_civil_date, to_civil_date
from training_calendar.config import DEFAULT_CONFIG, CalendarConfig
from training_calendar.exceptions import InvalidInputError
from training_calendar.models.dataset import CalendarDataset
from training_calendar.models.enums import Tier
from training_calendar.models.plan import Season
from training_calendar.models.resolved_day import ResolvedDay
from training_calendar.models.workout import TierVariant
from training_calendar.resolution.day import resolve_workout_of_day
from training_calendar.resolution.season import resolve_active_season
from training_calendar.resolution.tiers import coerce_tier
from training_calendar.resolution.week import WeekMatch, resolve_week_for_date
from training_calendar.validation.validator import validate_calendar

logger = logging.getLogger(__name__)


class CalendarEngine:
    """Answers date queries against a single, validated dataset snapshot.

    Usage:
        engine = CalendarEngine(load_dataset("calendar.json"))
        day = engine.workout_of_day(datetime(2026, 2, 1, 12, tzinfo=tz))
        variant, source = engine.tier_for_day(day_date, Tier.XL)

    The snapshot is validated on construction unless the config disables
    it. Load a new snapshot by building a new engine.
    """

    def __init__(
        self,
        dataset: CalendarDataset,
        config: CalendarConfig | None = None,
    ) -> None:
        self.dataset = dataset
        self.config = config or DEFAULT_CONFIG

        if self.config.validate_on_load:
            validate_calendar(self.dataset, self.config)
        else:
            logger.info("Calendar validation disabled; trusting dataset as loaded")

    def active_season(self, when: Instant) -> Season | None:
        """Season active on the civil date of *when*, or None."""
        return resolve_active_season(self.dataset.seasons, when, self.config)

    def week_for_date(self, season: Season | None, when: Instant) -> WeekMatch | None:
        """``(week, index)`` covering *when* within *season*, or None."""
        return resolve_week_for_date(season, self.dataset.week_by_id, when, self.config)

    def workout_of_day(self, when: Instant) -> ResolvedDay | None:
        """Fully resolved workout for *when*, or None for no plan / rest day."""
        return resolve_workout_of_day(self.dataset, when, self.config)

    def tier_for_day(
        self, when: Instant, tier: Tier | str
    ) -> tuple[TierVariant, Tier] | None:
        """Variant served to *tier* on *when* and its source tier, or None."""
        requested = coerce_tier(tier)
        day = self.workout_of_day(when)
        if day is None:
            return None
        return day.tiers[requested], day.tier_sources[requested]

    def resolve_range(
        self, start: Instant, end: Instant
    ) -> tuple[tuple[date, ResolvedDay | None], ...]:
        """Resolve every civil date in ``[start, end]`` inclusive.

        Raises:
            InvalidInputError: If *end* falls before *start*.
        """
        first = to_civil_date(start, self.config.timezone)
        last = to_civil_date(end, self.config.timezone)
        span = days_between(first, last)
        if span < 0:
            raise InvalidInputError(
                f"Range end {format_civil_date(last)} is before start {format_civil_date(first)}."
            )

        days: list[tuple[date, ResolvedDay | None]] = []
        for offset in range(span + 1):
            on_date = add_days(first, offset)
            days.append((on_date, self.workout_of_day(on_date)))
        return tuple(days)

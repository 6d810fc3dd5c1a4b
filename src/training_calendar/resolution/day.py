"""Workout-of-day resolution: season -> week -> day -> workout -> tiers."""

from __future__ import annotations

import logging

from training_calendar.civil_date import Instant, format_civil_date, to_civil_date, weekday_of
from training_calendar.config import DEFAULT_CONFIG, CalendarConfig
from training_calendar.exceptions import ConfigurationError, DanglingReferenceError
from training_calendar.models.dataset import CalendarDataset
from training_calendar.models.enums import DAY_KEYS
from training_calendar.models.plan import Week
from training_calendar.models.resolved_day import BlockSummary, ResolvedDay, WeekSummary
from training_calendar.resolution.references import resolve_workout
from training_calendar.resolution.season import resolve_active_season
from training_calendar.resolution.tiers import resolve_all_tiers
from training_calendar.resolution.week import resolve_week_for_date

logger = logging.getLogger(__name__)


def check_week_shape(week: Week) -> None:
    """Raise ConfigurationError unless the week has exactly the 7 day keys.

    Each value must be a reference string or None (rest day).
    """
    keys = list(week.workouts)
    if len(keys) != len(DAY_KEYS):
        raise ConfigurationError(
            f"Week {week.week_id} workouts must have exactly {len(DAY_KEYS)} day keys."
        )
    for key in DAY_KEYS:
        if key not in week.workouts:
            raise ConfigurationError(f"Week {week.week_id} workouts.{key} is missing.")
    for key in keys:
        if key not in DAY_KEYS:
            raise ConfigurationError(f"Week {week.week_id} workouts has invalid key: {key!r}")
        value = week.workouts[key]
        if value is not None and not isinstance(value, str):
            raise ConfigurationError(
                f"Week {week.week_id} workouts.{key} must be a string or None."
            )


def resolve_workout_of_day(
    dataset: CalendarDataset,
    when: Instant,
    config: CalendarConfig = DEFAULT_CONFIG,
) -> ResolvedDay | None:
    """Resolve the workout scheduled on the civil date of *when*.

    Returns:
        A ResolvedDay, or None when no season or week covers the date or
        the day is an explicit rest day.

    Raises:
        ConfigurationError: On any dataset inconsistency met on the way
            (dangling or malformed reference, draft target, bad week shape,
            missing block, workout without tiers, timezone mismatch).
    """
    on_date = to_civil_date(when, config.timezone)

    season = resolve_active_season(dataset.seasons, on_date, config)
    if season is None:
        return None

    match = resolve_week_for_date(season, dataset.week_by_id, on_date, config)
    if match is None:
        return None
    week, index = match

    check_week_shape(week)

    day_key = weekday_of(on_date).key
    reference = week.workouts[day_key]
    if reference is None:
        logger.debug("%s is a rest day in week %s", format_civil_date(on_date), week.week_id)
        return None

    workout = resolve_workout(reference, dataset)

    block = dataset.block_by_id.get(week.block_id)
    if block is None:
        raise DanglingReferenceError(f"Block {week.block_id} not found in blocks data.")

    variants, sources = resolve_all_tiers(workout)

    return ResolvedDay(
        on_date=on_date,
        day_key=day_key,
        reference=reference,
        season=season,
        week=WeekSummary(week_id=week.week_id, index=index, start_date=week.start_date),
        block=BlockSummary(block_id=block.block_id, name=block.name, intent=block.intent),
        workout=workout,
        tiers=variants,
        tier_sources=sources,
    )

"""Per-date resolution: season, week, workout reference and tier fallback."""

from training_calendar.resolution.day import check_week_shape, resolve_workout_of_day
from training_calendar.resolution.references import (
    InvalidRef,
    LatestRef,
    PinnedRef,
    parse_reference,
    resolve_reference,
    resolve_workout,
)
from training_calendar.resolution.season import resolve_active_season
from training_calendar.resolution.tiers import resolve_all_tiers, resolve_tier_variant
from training_calendar.resolution.week import WeekMatch, resolve_week_for_date

__all__ = [
    "InvalidRef",
    "LatestRef",
    "PinnedRef",
    "WeekMatch",
    "check_week_shape",
    "parse_reference",
    "resolve_active_season",
    "resolve_all_tiers",
    "resolve_reference",
    "resolve_tier_variant",
    "resolve_week_for_date",
    "resolve_workout",
    "resolve_workout_of_day",
]

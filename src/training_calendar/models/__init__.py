"""Data models for the training calendar."""

from training_calendar.models.dataset import CalendarDataset
from training_calendar.models.enums import (
    DAY_KEYS,
    TIER_FALLBACK_ORDER,
    Tier,
    Weekday,
    WorkoutStatus,
)
from training_calendar.models.plan import Block, Season, Week
from training_calendar.models.resolved_day import BlockSummary, ResolvedDay, WeekSummary
from training_calendar.models.workout import Interval, TierVariant, Workout

__all__ = [
    "Block",
    "BlockSummary",
    "CalendarDataset",
    "DAY_KEYS",
    "Interval",
    "ResolvedDay",
    "Season",
    "TIER_FALLBACK_ORDER",
    "Tier",
    "TierVariant",
    "Week",
    "WeekSummary",
    "Weekday",
    "Workout",
    "WorkoutStatus",
]

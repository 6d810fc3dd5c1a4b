"""Training calendar engine: resolve and validate training-plan calendars."""

from training_calendar.config import CalendarConfig, config_from_env
from training_calendar.engine import CalendarEngine
from training_calendar.exceptions import (
    CalendarError,
    ConfigurationError,
    DanglingReferenceError,
    InvalidInputError,
    InvariantViolation,
    MalformedReferenceError,
)
from training_calendar.loader import dataset_from_dict, load_dataset
from training_calendar.models import CalendarDataset, ResolvedDay, Tier
from training_calendar.resolution import (
    resolve_active_season,
    resolve_week_for_date,
    resolve_workout_of_day,
)
from training_calendar.validation import validate_dataset

__all__ = [
    "CalendarConfig",
    "CalendarDataset",
    "CalendarEngine",
    "CalendarError",
    "ConfigurationError",
    "DanglingReferenceError",
    "InvalidInputError",
    "InvariantViolation",
    "MalformedReferenceError",
    "ResolvedDay",
    "Tier",
    "config_from_env",
    "dataset_from_dict",
    "load_dataset",
    "resolve_active_season",
    "resolve_week_for_date",
    "resolve_workout_of_day",
    "validate_dataset",
]

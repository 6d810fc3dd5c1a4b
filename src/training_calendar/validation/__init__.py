"""Whole-dataset invariant validation."""

from training_calendar.validation.validator import validate_calendar, validate_dataset

__all__ = ["validate_calendar", "validate_dataset"]

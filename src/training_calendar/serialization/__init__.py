"""Serialization module — export resolved days to JSON."""

from training_calendar.serialization.resolved_day import resolved_day_to_dict, resolved_day_to_json

__all__ = ["resolved_day_to_dict", "resolved_day_to_json"]

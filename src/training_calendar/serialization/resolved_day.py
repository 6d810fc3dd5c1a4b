"""JSON serialization for ResolvedDay objects.

Produces the camelCase shape consumed by calendar front-ends. All functions
are pure (no I/O).
"""

from __future__ import annotations

import json

from training_calendar.civil_date import format_civil_date
from training_calendar.models.enums import Tier
from training_calendar.models.resolved_day import ResolvedDay
from training_calendar.models.workout import Interval, TierVariant, Workout


def resolved_day_to_dict(day: ResolvedDay) -> dict:
    """Convert a ResolvedDay to a JSON-compatible dict."""
    return {
        "date": format_civil_date(day.on_date),
        "dayKey": day.day_key,
        "reference": day.reference,
        "season": {
            "seasonId": day.season.season_id,
            "name": day.season.name,
        },
        "week": {
            "weekId": day.week.week_id,
            "index": day.week.index,
            "startDate": format_civil_date(day.week.start_date),
        },
        "block": {
            "blockId": day.block.block_id,
            "name": day.block.name,
            "intent": day.block.intent,
        },
        "workout": _workout_to_dict(day.workout),
        "tiers": {tier.value: _variant_to_dict(day.tiers[tier]) for tier in Tier},
        "tierSources": {tier.value: day.tier_sources[tier].value for tier in Tier},
    }


def resolved_day_to_json(day: ResolvedDay | None, indent: int = 2) -> str:
    """JSON string for a ResolvedDay; ``null`` for rest / no-plan days."""
    payload = None if day is None else resolved_day_to_dict(day)
    return json.dumps(payload, indent=indent)


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _workout_to_dict(workout: Workout) -> dict:
    return {
        "workoutId": workout.workout_id,
        "version": workout.version,
        "status": workout.status.value,
        "name": workout.name,
    }


def _variant_to_dict(variant: TierVariant) -> dict:
    return {
        "name": variant.name,
        "structure": [_interval_to_dict(interval) for interval in variant.intervals],
    }


def _interval_to_dict(interval: Interval) -> dict:
    out: dict = {"intensity": interval.intensity}
    if interval.label:
        out["label"] = interval.label
    if interval.duration_min is not None:
        out["durationMin"] = interval.duration_min
    if interval.distance_km is not None:
        out["distanceKm"] = interval.distance_km
    if interval.hr_zone is not None:
        out["hrZone"] = interval.hr_zone
    if interval.rpe is not None:
        out["rpe"] = interval.rpe
    if interval.notes:
        out["notes"] = interval.notes
    return out

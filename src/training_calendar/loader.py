"""Dataset boundary: parse raw JSON-shaped data into typed records.

The payload uses the camelCase shapes of the published calendar files::

    {
      "seasons":  [{"seasonId", "name", "startDate", "endDate", "timezone", "weekIds"}],
      "blocks":   [{"blockId", "name", "intent", "weekIds"}],
      "weeks":    [{"weekId", "seasonId", "blockId", "startDate", "workouts": {"mon": ...}}],
      "workouts": [{"workoutId", "version", "status", "tiers": {"MED": {"name", "structure"}}}]
    }

Only shapes and types are checked here. Cross-entity rules belong to the
validator.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from training_calendar.civil_date import parse_civil_date
from training_calendar.exceptions import InvalidInputError
from training_calendar.models.dataset import CalendarDataset
from training_calendar.models.enums import Tier, WorkoutStatus
from training_calendar.models.plan import Block, Season, Week
from training_calendar.models.workout import Interval, TierVariant, Workout

logger = logging.getLogger(__name__)


def load_dataset(path: Path | str) -> CalendarDataset:
    """Read a calendar JSON file and parse it into a CalendarDataset."""
    path = Path(path)
    with open(path, encoding="utf-8") as f:
        try:
            payload = json.load(f)
        except json.JSONDecodeError as exc:
            raise InvalidInputError(f"Invalid JSON in {path}: {exc}") from exc
    dataset = dataset_from_dict(payload)
    logger.info("Loaded calendar dataset from %s", path)
    return dataset


def dataset_from_dict(payload: Any) -> CalendarDataset:
    """Convert a decoded JSON payload into a CalendarDataset.

    Missing collections are treated as empty.

    Raises:
        InvalidInputError: On any shape or type error, naming the path.
    """
    if not isinstance(payload, dict):
        raise InvalidInputError("Calendar data must be an object.")
    return CalendarDataset(
        seasons=tuple(
            _season(item, f"seasons[{i}]")
            for i, item in enumerate(_list(payload, "seasons", "data"))
        ),
        blocks=tuple(
            _block(item, f"blocks[{i}]")
            for i, item in enumerate(_list(payload, "blocks", "data"))
        ),
        weeks=tuple(
            _week(item, f"weeks[{i}]")
            for i, item in enumerate(_list(payload, "weeks", "data"))
        ),
        workouts=tuple(
            _workout(item, f"workouts[{i}]")
            for i, item in enumerate(_list(payload, "workouts", "data"))
        ),
    )


# ---------------------------------------------------------------------------
# Record parsers
# ---------------------------------------------------------------------------


def _season(raw: Any, path: str) -> Season:
    obj = _object(raw, path)
    return Season(
        season_id=_str(obj, "seasonId", path),
        name=_str(obj, "name", path),
        start_date=_date(obj, "startDate", path),
        end_date=_date(obj, "endDate", path),
        timezone=_str(obj, "timezone", path),
        week_ids=_str_tuple(obj, "weekIds", path),
    )


def _block(raw: Any, path: str) -> Block:
    obj = _object(raw, path)
    return Block(
        block_id=_str(obj, "blockId", path),
        name=_str(obj, "name", path),
        intent=_str(obj, "intent", path),
        week_ids=_str_tuple(obj, "weekIds", path),
    )


def _week(raw: Any, path: str) -> Week:
    obj = _object(raw, path)
    workouts = _object(_get(obj, "workouts", path), f"{path}.workouts")
    for key, value in workouts.items():
        if value is not None and not isinstance(value, str):
            raise InvalidInputError(f"{path}.workouts.{key} must be a string or null.")
    return Week(
        week_id=_str(obj, "weekId", path),
        season_id=_str(obj, "seasonId", path),
        block_id=_str(obj, "blockId", path),
        start_date=_date(obj, "startDate", path),
        workouts=workouts,
    )


def _workout(raw: Any, path: str) -> Workout:
    obj = _object(raw, path)
    version = _get(obj, "version", path)
    if isinstance(version, bool) or not isinstance(version, int):
        raise InvalidInputError(f"{path}.version must be an integer.")

    status_raw = _str(obj, "status", path)
    try:
        status = WorkoutStatus(status_raw)
    except ValueError as exc:
        raise InvalidInputError(f"{path}.status {status_raw!r} is not a known status.") from exc

    tiers_raw = _object(_get(obj, "tiers", path), f"{path}.tiers")
    tiers: dict[Tier, TierVariant] = {}
    for tier_name, variant_raw in tiers_raw.items():
        try:
            tier = Tier(tier_name)
        except ValueError as exc:
            raise InvalidInputError(f"{path}.tiers has unknown tier {tier_name!r}.") from exc
        if variant_raw is None:
            continue
        tiers[tier] = _variant(variant_raw, f"{path}.tiers.{tier_name}")

    name = _optional_str(obj, "name", path)
    return Workout(
        workout_id=_str(obj, "workoutId", path),
        version=version,
        status=status,
        tiers=tiers,
        name=name,
    )


def _variant(raw: Any, path: str) -> TierVariant:
    obj = _object(raw, path)
    key = "structure" if "structure" in obj else "intervals"
    intervals = _get(obj, key, path)
    if not isinstance(intervals, list):
        raise InvalidInputError(f"{path}.{key} must be an array.")
    name = _optional_str(obj, "name", path)
    return TierVariant(
        name=name,
        intervals=tuple(
            _interval(item, f"{path}.{key}[{i}]") for i, item in enumerate(intervals)
        ),
    )


def _interval(raw: Any, path: str) -> Interval:
    obj = _object(raw, path)
    intensity = _get(obj, "intensity", path)
    if isinstance(intensity, bool) or not isinstance(intensity, (int, float)):
        raise InvalidInputError(f"{path}.intensity must be a number.")
    if isinstance(intensity, float) and intensity.is_integer():
        intensity = int(intensity)
    return Interval(
        intensity=intensity,
        label=_optional_str(obj, "label", path) or _optional_str(obj, "name", path),
        duration_min=_optional_number(obj, "durationMin", path),
        distance_km=_optional_number(obj, "distanceKm", path),
        hr_zone=_optional_int(obj, "hrZone", path),
        rpe=_optional_number(obj, "rpe", path),
        notes=_optional_str(obj, "notes", path),
    )


# ---------------------------------------------------------------------------
# Field helpers
# ---------------------------------------------------------------------------


def _list(payload: dict, key: str, path: str) -> list:
    value = payload.get(key, [])
    if not isinstance(value, list):
        raise InvalidInputError(f"{path}.{key} must be an array.")
    return value


def _object(raw: Any, path: str) -> dict:
    if not isinstance(raw, dict):
        raise InvalidInputError(f"{path} must be an object.")
    return raw


def _get(obj: dict, key: str, path: str) -> Any:
    if key not in obj:
        raise InvalidInputError(f"{path}.{key} is missing.")
    return obj[key]


def _str(obj: dict, key: str, path: str) -> str:
    value = _get(obj, key, path)
    if not isinstance(value, str):
        raise InvalidInputError(f"{path}.{key} must be a string.")
    return value


def _str_tuple(obj: dict, key: str, path: str) -> tuple[str, ...]:
    value = _get(obj, key, path)
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise InvalidInputError(f"{path}.{key} must be an array of strings.")
    return tuple(value)


def _date(obj: dict, key: str, path: str):
    value = _str(obj, key, path)
    try:
        return parse_civil_date(value)
    except InvalidInputError as exc:
        raise InvalidInputError(f"{path}.{key}: {exc}") from exc


def _optional_number(obj: dict, key: str, path: str):
    value = obj.get(key)
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidInputError(f"{path}.{key} must be a number.")
    return value


def _optional_int(obj: dict, key: str, path: str):
    value = obj.get(key)
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidInputError(f"{path}.{key} must be an integer.")
    return value


def _optional_str(obj: dict, key: str, path: str) -> str:
    value = obj.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise InvalidInputError(f"{path}.{key} must be a string.")
    return value

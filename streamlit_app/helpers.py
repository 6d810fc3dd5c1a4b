"""Utility helpers bridging the Streamlit UI and the calendar engine.

Pure functions for formatting, week-grid construction and dataset
discovery.
"""

from __future__ import annotations

from datetime import date
from pathlib import Path

from training_calendar.civil_date import add_days, format_civil_date, weekday_of
from training_calendar.config import CalendarConfig
from training_calendar.engine import CalendarEngine
from training_calendar.models.enums import DAYS_PER_WEEK, Tier
from training_calendar.models.resolved_day import ResolvedDay
from training_calendar.models.workout import Interval, TierVariant

DATA_DIR = Path(__file__).parent / "data"

# ---------------------------------------------------------------------------
# Formatting helpers
# ---------------------------------------------------------------------------


def format_duration(minutes: float | None) -> str:
    """Convert minutes to human string. e.g. 90.0 -> '1h 30m'."""
    if minutes is None or minutes <= 0:
        return "--"
    h = int(minutes) // 60
    m = int(minutes) % 60
    if h > 0 and m > 0:
        return f"{h}h {m}m"
    if h > 0:
        return f"{h}h"
    return f"{m}m"


def format_interval(interval: Interval) -> str:
    """One-line summary, e.g. 'Hill · 8m · I8 · Z4 · RPE 8'."""
    parts = []
    if interval.label:
        parts.append(interval.label)
    if interval.duration_min is not None:
        parts.append(format_duration(interval.duration_min))
    if interval.distance_km is not None:
        parts.append(f"{interval.distance_km:.1f} km")
    parts.append(f"I{interval.intensity}")
    if interval.hr_zone is not None:
        parts.append(f"Z{interval.hr_zone}")
    if interval.rpe is not None:
        parts.append(f"RPE {interval.rpe:g}")
    return " · ".join(parts)


def format_tier_source(requested: Tier, source: Tier) -> str:
    """'XL' for a direct hit, 'XL (from LRG)' for a substitution."""
    if requested == source:
        return requested.value
    return f"{requested.value} (from {source.value})"


def variant_minutes(variant: TierVariant) -> float:
    """Total timed minutes across a variant's intervals."""
    return sum(i.duration_min or 0.0 for i in variant.intervals)


# ---------------------------------------------------------------------------
# Color maps
# ---------------------------------------------------------------------------

# Intensity anchor (1-10) -> bar color, easy to hard
INTENSITY_COLORS: dict[int, str] = {
    1: "#D5DBDB",
    2: "#AED6F1",
    3: "#4A90D9",
    4: "#2ECC71",
    5: "#A9DFBF",
    6: "#F7DC6F",
    7: "#F5B041",
    8: "#FF8C00",
    9: "#E74C3C",
    10: "#922B21",
}


# ---------------------------------------------------------------------------
# Week grid
# ---------------------------------------------------------------------------


def week_start_for(on_date: date, config: CalendarConfig) -> date:
    """Start of the configured week containing *on_date*."""
    offset = (weekday_of(on_date) - config.week_start) % DAYS_PER_WEEK
    return add_days(on_date, -offset)


def week_grid(engine: CalendarEngine, on_date: date, tier: Tier) -> list[dict]:
    """Seven table rows describing the week containing *on_date* for *tier*."""
    start = week_start_for(on_date, engine.config)
    rows = []
    for on_day, resolved in engine.resolve_range(start, add_days(start, DAYS_PER_WEEK - 1)):
        rows.append(_grid_row(on_day, resolved, tier))
    return rows


def _grid_row(on_day: date, resolved: ResolvedDay | None, tier: Tier) -> dict:
    row = {
        "Date": format_civil_date(on_day),
        "Day": weekday_of(on_day).label,
        "Workout": "Rest / no plan",
        "Tier": "",
        "Duration": "",
    }
    if resolved is not None:
        variant = resolved.tiers[tier]
        row["Workout"] = f"{resolved.workout.name or resolved.workout.workout_id} ({resolved.workout.key})"
        row["Tier"] = format_tier_source(tier, resolved.tier_sources[tier])
        row["Duration"] = format_duration(variant_minutes(variant))
    return row


# ---------------------------------------------------------------------------
# Dataset discovery
# ---------------------------------------------------------------------------


def list_datasets(data_dir: Path = DATA_DIR) -> list[str]:
    """Return sorted JSON dataset file names in *data_dir*."""
    if not data_dir.exists():
        return []
    return sorted(p.name for p in data_dir.glob("*.json"))

"""Plan structure records: Season, Block and Week.

These are frozen snapshots of published calendar data. Dates are civil
dates (``datetime.date``); week references are held as ordered tuples.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from types import MappingProxyType
from typing import Mapping, Optional

from training_calendar.models.enums import DAY_KEYS


@dataclass(frozen=True)
class Season:
    """A dated training season made of an ordered run of weeks."""

    season_id: str
    name: str
    start_date: date
    end_date: date
    timezone: str
    week_ids: tuple[str, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class Block:
    """A named group of consecutive weeks sharing one training intent."""

    block_id: str
    name: str
    intent: str
    week_ids: tuple[str, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class Week:
    """Seven day slots starting on the configured start-of-week weekday.

    ``workouts`` maps each day key (``mon`` .. ``sun``) to a workout
    reference string, or to ``None`` for an explicit rest day. The mapping
    is copied into a read-only proxy on construction.
    """

    week_id: str
    season_id: str
    block_id: str
    start_date: date
    workouts: Mapping[str, Optional[str]] = field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "workouts", MappingProxyType(dict(self.workouts)))

    @property
    def is_complete(self) -> bool:
        """True if exactly the seven weekday keys are present."""
        return set(self.workouts) == set(DAY_KEYS) and len(self.workouts) == len(DAY_KEYS)

    @property
    def references(self) -> tuple[tuple[str, str], ...]:
        """(day_key, reference) pairs for non-rest days, in weekday order."""
        return tuple(
            (key, self.workouts[key])
            for key in DAY_KEYS
            if self.workouts.get(key) is not None
        )

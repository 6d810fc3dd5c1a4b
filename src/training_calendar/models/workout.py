"""Versioned workout library records."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

from training_calendar.models.enums import Tier, WorkoutStatus


@dataclass(frozen=True)
class Interval:
    """One interval of a tier variant.

    ``intensity`` is the required 1-10 anchor; the remaining fields are
    optional secondary targets.
    """

    intensity: int
    label: str = ""
    duration_min: float | None = None
    distance_km: float | None = None
    hr_zone: int | None = None
    rpe: float | None = None
    notes: str = ""


@dataclass(frozen=True)
class TierVariant:
    """The prescription for one tier: an ordered, non-empty interval run."""

    name: str
    intervals: tuple[Interval, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class Workout:
    """A single (workout_id, version) entry of the workout library.

    Versions are positive integers that only ever increase per workout_id.
    Draft versions exist in the library but are never resolution targets.
    """

    workout_id: str
    version: int
    status: WorkoutStatus
    tiers: Mapping[Tier, TierVariant] = field(default_factory=dict, hash=False)
    name: str = ""

    def __post_init__(self) -> None:
        object.__setattr__(self, "tiers", MappingProxyType(dict(self.tiers)))

    @property
    def key(self) -> str:
        """Pinned reference string for this version, e.g. ``"tempo-30@v2"``."""
        return f"{self.workout_id}@v{self.version}"

    @property
    def is_draft(self) -> bool:
        return self.status == WorkoutStatus.DRAFT

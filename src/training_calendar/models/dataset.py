"""CalendarDataset — one immutable snapshot of the four plan collections."""

from __future__ import annotations

from dataclasses import dataclass, field
from functools import cached_property
from typing import Mapping

from training_calendar.models.enums import WorkoutStatus
from training_calendar.models.plan import Block, Season, Week
from training_calendar.models.workout import Workout


def _index(records, attr: str) -> dict:
    # First occurrence wins; duplicates are reported by the validator.
    lookup: dict = {}
    for record in records:
        lookup.setdefault(getattr(record, attr), record)
    return lookup


@dataclass(frozen=True)
class CalendarDataset:
    """Frozen snapshot of seasons, blocks, weeks and workouts.

    Id lookups are built lazily on first use and live on the snapshot
    itself, so they are discarded together with it when a new snapshot
    is loaded.
    """

    seasons: tuple[Season, ...] = field(default_factory=tuple)
    blocks: tuple[Block, ...] = field(default_factory=tuple)
    weeks: tuple[Week, ...] = field(default_factory=tuple)
    workouts: tuple[Workout, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        for name in ("seasons", "blocks", "weeks", "workouts"):
            object.__setattr__(self, name, tuple(getattr(self, name)))

    # -- Lookups ----------------------------------------------------------

    @cached_property
    def season_by_id(self) -> Mapping[str, Season]:
        return _index(self.seasons, "season_id")

    @cached_property
    def block_by_id(self) -> Mapping[str, Block]:
        return _index(self.blocks, "block_id")

    @cached_property
    def week_by_id(self) -> Mapping[str, Week]:
        return _index(self.weeks, "week_id")

    @cached_property
    def workout_by_key(self) -> Mapping[tuple[str, int], Workout]:
        """(workout_id, version) -> Workout, drafts included."""
        lookup: dict[tuple[str, int], Workout] = {}
        for workout in self.workouts:
            lookup.setdefault((workout.workout_id, workout.version), workout)
        return lookup

    @cached_property
    def latest_published(self) -> Mapping[str, Workout]:
        """workout_id -> highest-numbered published version."""
        latest: dict[str, Workout] = {}
        for workout in self.workouts:
            if workout.status != WorkoutStatus.PUBLISHED:
                continue
            current = latest.get(workout.workout_id)
            if current is None or workout.version > current.version:
                latest[workout.workout_id] = workout
        return latest

"""Workout reference grammar and library lookup.

A reference is either pinned (``tempo-30@v2``) or bare (``tempo-30``).
Parsing returns a tagged result so callers handle all three outcomes
explicitly; resolution turns an invalid or dangling reference into a
configuration error, never into ``None``.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Union

from training_calendar.exceptions import DanglingReferenceError, MalformedReferenceError
from training_calendar.models.dataset import CalendarDataset
from training_calendar.models.workout import Workout

_PINNED_RE = re.compile(r"([a-z0-9-]+)@v([1-9][0-9]*)")
_LATEST_RE = re.compile(r"([a-z0-9-]+)")


@dataclass(frozen=True)
class PinnedRef:
    workout_id: str
    version: int

    def __str__(self) -> str:
        return f"{self.workout_id}@v{self.version}"


@dataclass(frozen=True)
class LatestRef:
    workout_id: str

    def __str__(self) -> str:
        return self.workout_id


@dataclass(frozen=True)
class InvalidRef:
    raw: object

    def __str__(self) -> str:
        return repr(self.raw)


WorkoutRef = Union[PinnedRef, LatestRef, InvalidRef]


def parse_reference(value: object) -> WorkoutRef:
    """Parse a reference string without raising.

    Non-strings and strings outside the ASCII grammar yield ``InvalidRef``.
    """
    if not isinstance(value, str) or not value.isascii():
        return InvalidRef(value)
    match = _PINNED_RE.fullmatch(value)
    if match is not None:
        return PinnedRef(workout_id=match.group(1), version=int(match.group(2)))
    match = _LATEST_RE.fullmatch(value)
    if match is not None:
        return LatestRef(workout_id=match.group(1))
    return InvalidRef(value)


def require_reference(value: object) -> Union[PinnedRef, LatestRef]:
    """Parse a reference, raising MalformedReferenceError on bad input."""
    ref = parse_reference(value)
    if isinstance(ref, InvalidRef):
        raise MalformedReferenceError(str(value))
    return ref


def resolve_reference(ref: Union[PinnedRef, LatestRef], dataset: CalendarDataset) -> Workout:
    """Resolve a parsed reference against the workout library.

    Pinned references accept any non-draft version (published or
    archived). Bare references resolve to the highest published version.

    Raises:
        DanglingReferenceError: If nothing matches, or the match is a draft.
    """
    if isinstance(ref, PinnedRef):
        workout = dataset.workout_by_key.get((ref.workout_id, ref.version))
        if workout is None or workout.is_draft:
            raise DanglingReferenceError(f"Workout {ref} not found or is draft.")
        return workout

    if isinstance(ref, LatestRef):
        workout = dataset.latest_published.get(ref.workout_id)
        if workout is None:
            raise DanglingReferenceError(
                f"Workout {ref} has no published version."
            )
        return workout

    raise MalformedReferenceError(str(ref))


def resolve_workout(value: object, dataset: CalendarDataset) -> Workout:
    """Parse and resolve a raw reference value in one step."""
    return resolve_reference(require_reference(value), dataset)

"""Whole-dataset invariant validation.

Run once per loaded snapshot, before any per-date resolution is trusted.
The first violated rule raises an InvariantViolation naming the entity
and the rule; there is no partial-success mode.
"""

from __future__ import annotations

import logging
import re
from typing import Sequence

from training_calendar.civil_date import format_civil_date, in_range, week_window, weekday_of
from training_calendar.config import DEFAULT_CONFIG, CalendarConfig
from training_calendar.exceptions import ConfigurationError, InvariantViolation
from training_calendar.models.dataset import CalendarDataset
from training_calendar.models.enums import (
    INTENSITY_ANCHOR_MAX,
    INTENSITY_ANCHOR_MIN,
    Tier,
    WorkoutStatus,
)
from training_calendar.models.plan import Block, Season, Week
from training_calendar.models.workout import Workout
from training_calendar.resolution.day import check_week_shape
from training_calendar.resolution.references import InvalidRef, parse_reference, resolve_reference

logger = logging.getLogger(__name__)

_WORKOUT_ID_RE = re.compile(r"[a-z0-9-]+")

# Rule identifiers carried on InvariantViolation.rule
RULE_DUPLICATE_ID = "duplicate_id"
RULE_TIMEZONE = "timezone"
RULE_DATE_ORDER = "date_order"
RULE_NON_EMPTY_WEEKS = "non_empty_weeks"
RULE_WEEK_EXISTS = "week_exists"
RULE_WEEK_SEASON_MATCH = "week_season_match"
RULE_CHRONOLOGICAL = "chronological_weeks"
RULE_SEASON_CONTAINS_WEEK = "season_contains_week"
RULE_SINGLE_SEASON = "single_season"
RULE_SEASON_EXISTS = "season_exists"
RULE_SEASON_SUPERSET = "season_superset"
RULE_BLOCK_EXISTS = "block_exists"
RULE_BLOCK_CONTAINS_WEEK = "block_contains_week"
RULE_WEEK_START = "week_start_weekday"
RULE_DAY_KEYS = "day_keys"
RULE_REFERENCE_GRAMMAR = "reference_grammar"
RULE_REFERENCE_RESOLVES = "reference_resolves"
RULE_WORKOUT_ID = "workout_id_grammar"
RULE_VERSION = "positive_version"
RULE_STATUS = "status"
RULE_HAS_TIERS = "has_tiers"
RULE_TIER_NAME = "tier_name"
RULE_NON_EMPTY_INTERVALS = "non_empty_intervals"
RULE_INTENSITY_ANCHOR = "intensity_anchor"


def validate_dataset(
    seasons: Sequence[Season],
    blocks: Sequence[Block],
    weeks: Sequence[Week],
    workouts: Sequence[Workout],
    config: CalendarConfig = DEFAULT_CONFIG,
) -> None:
    """Check every structural, referential, ordering and status invariant.

    Raises:
        InvariantViolation: On the first violated rule.
    """
    validate_calendar(
        CalendarDataset(seasons=seasons, blocks=blocks, weeks=weeks, workouts=workouts),
        config,
    )


def validate_calendar(dataset: CalendarDataset, config: CalendarConfig = DEFAULT_CONFIG) -> None:
    """Validate an already-assembled CalendarDataset (see validate_dataset)."""
    _check_unique_ids(dataset)
    for workout in dataset.workouts:
        _check_workout(workout)
    for season in dataset.seasons:
        _check_season(season, dataset, config)
    for block in dataset.blocks:
        _check_block(block, dataset)
    for week in dataset.weeks:
        _check_week(week, dataset, config)

    logger.info(
        "Validated calendar dataset: %d seasons, %d blocks, %d weeks, %d workouts",
        len(dataset.seasons),
        len(dataset.blocks),
        len(dataset.weeks),
        len(dataset.workouts),
    )


# ---------------------------------------------------------------------------
# Internal checks
# ---------------------------------------------------------------------------


def _check_unique_ids(dataset: CalendarDataset) -> None:
    for kind, records, attr in (
        ("Season", dataset.seasons, "season_id"),
        ("Block", dataset.blocks, "block_id"),
        ("Week", dataset.weeks, "week_id"),
    ):
        seen: set[str] = set()
        for record in records:
            entity_id = getattr(record, attr)
            if entity_id in seen:
                raise InvariantViolation(kind, entity_id, RULE_DUPLICATE_ID, "id is not unique.")
            seen.add(entity_id)

    seen_keys: set[tuple[str, int]] = set()
    for workout in dataset.workouts:
        pair = (workout.workout_id, workout.version)
        if pair in seen_keys:
            raise InvariantViolation(
                "Workout", workout.key, RULE_DUPLICATE_ID, "(workout_id, version) is not unique."
            )
        seen_keys.add(pair)


def _check_workout(workout: Workout) -> None:
    entity_id = f"{workout.workout_id}@v{workout.version}"

    def fail(rule: str, message: str) -> InvariantViolation:
        return InvariantViolation("Workout", entity_id, rule, message)

    if not isinstance(workout.workout_id, str) or not _WORKOUT_ID_RE.fullmatch(workout.workout_id):
        raise fail(RULE_WORKOUT_ID, "workout_id must be lowercase letters, digits or hyphens.")
    if isinstance(workout.version, bool) or not isinstance(workout.version, int) or workout.version < 1:
        raise fail(RULE_VERSION, "version must be a positive integer.")
    if not isinstance(workout.status, WorkoutStatus):
        raise fail(RULE_STATUS, f"unknown status {workout.status!r}.")
    if not workout.tiers:
        raise fail(RULE_HAS_TIERS, "must define at least one tier variant.")

    for tier, variant in workout.tiers.items():
        if not isinstance(tier, Tier):
            raise fail(RULE_TIER_NAME, f"unknown tier {tier!r}.")
        if not variant.intervals:
            raise fail(RULE_NON_EMPTY_INTERVALS, f"tier {tier.value} has no intervals.")
        for position, interval in enumerate(variant.intervals):
            anchor = interval.intensity
            if (
                isinstance(anchor, bool)
                or not isinstance(anchor, int)
                or not INTENSITY_ANCHOR_MIN <= anchor <= INTENSITY_ANCHOR_MAX
            ):
                raise fail(
                    RULE_INTENSITY_ANCHOR,
                    f"tier {tier.value} interval {position} intensity must be an integer "
                    f"{INTENSITY_ANCHOR_MIN}-{INTENSITY_ANCHOR_MAX}, got {anchor!r}.",
                )


def _check_season(season: Season, dataset: CalendarDataset, config: CalendarConfig) -> None:
    def fail(rule: str, message: str) -> InvariantViolation:
        return InvariantViolation("Season", season.season_id, rule, message)

    if season.timezone != config.timezone:
        raise fail(RULE_TIMEZONE, f"must use timezone {config.timezone}, got {season.timezone}.")
    if not season.start_date < season.end_date:
        raise fail(RULE_DATE_ORDER, "start_date must be before end_date.")
    if not season.week_ids:
        raise fail(RULE_NON_EMPTY_WEEKS, "must include at least one week.")

    previous: Week | None = None
    for week_id in season.week_ids:
        week = dataset.week_by_id.get(week_id)
        if week is None:
            raise fail(RULE_WEEK_EXISTS, f"references missing week {week_id}.")
        if week.season_id != season.season_id:
            raise fail(
                RULE_WEEK_SEASON_MATCH,
                f"week {week_id} belongs to season {week.season_id}.",
            )
        if previous is not None and not previous.start_date < week.start_date:
            raise fail(
                RULE_CHRONOLOGICAL,
                f"week {week_id} does not start after week {previous.week_id}.",
            )
        start, end = week_window(week.start_date)
        if not (
            in_range(start, season.start_date, season.end_date)
            and in_range(end, season.start_date, season.end_date)
        ):
            raise fail(
                RULE_SEASON_CONTAINS_WEEK,
                f"date range does not contain week {week_id} "
                f"({format_civil_date(start)}..{format_civil_date(end)}).",
            )
        previous = week


def _check_block(block: Block, dataset: CalendarDataset) -> None:
    def fail(rule: str, message: str) -> InvariantViolation:
        return InvariantViolation("Block", block.block_id, rule, message)

    if not block.week_ids:
        raise fail(RULE_NON_EMPTY_WEEKS, "must include at least one week.")

    block_weeks: list[Week] = []
    for week_id in block.week_ids:
        week = dataset.week_by_id.get(week_id)
        if week is None:
            raise fail(RULE_WEEK_EXISTS, f"references missing week {week_id}.")
        if block_weeks and not block_weeks[-1].start_date < week.start_date:
            raise fail(
                RULE_CHRONOLOGICAL,
                f"week {week_id} does not start after week {block_weeks[-1].week_id}.",
            )
        block_weeks.append(week)

    season_id = block_weeks[0].season_id
    for week in block_weeks:
        if week.season_id != season_id:
            raise fail(RULE_SINGLE_SEASON, "cannot mix weeks from different seasons.")

    season = dataset.season_by_id.get(season_id)
    if season is None:
        raise fail(RULE_SEASON_EXISTS, f"season {season_id} not found.")
    for week in block_weeks:
        if week.week_id not in season.week_ids:
            raise fail(
                RULE_SEASON_SUPERSET,
                f"week {week.week_id} is not listed in season {season_id}.",
            )


def _check_week(week: Week, dataset: CalendarDataset, config: CalendarConfig) -> None:
    def fail(rule: str, message: str) -> InvariantViolation:
        return InvariantViolation("Week", week.week_id, rule, message)

    if weekday_of(week.start_date) != config.week_start:
        raise fail(
            RULE_WEEK_START,
            f"must start on {config.week_start.label}, "
            f"{format_civil_date(week.start_date)} is a {weekday_of(week.start_date).label}.",
        )
    if week.season_id not in dataset.season_by_id:
        raise fail(RULE_SEASON_EXISTS, f"season {week.season_id} not found.")
    block = dataset.block_by_id.get(week.block_id)
    if block is None:
        raise fail(RULE_BLOCK_EXISTS, f"block {week.block_id} not found.")
    if week.week_id not in block.week_ids:
        raise fail(RULE_BLOCK_CONTAINS_WEEK, f"is not listed in block {week.block_id}.")

    try:
        check_week_shape(week)
    except ConfigurationError as exc:
        raise fail(RULE_DAY_KEYS, str(exc)) from exc

    for day_key, reference in week.references:
        ref = parse_reference(reference)
        if isinstance(ref, InvalidRef):
            raise fail(RULE_REFERENCE_GRAMMAR, f"{day_key} has malformed reference {reference!r}.")
        try:
            resolve_reference(ref, dataset)
        except ConfigurationError as exc:
            raise fail(RULE_REFERENCE_RESOLVES, f"{day_key}: {exc}") from exc

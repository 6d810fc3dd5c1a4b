"""Tier fallback: pick the closest available tier variant."""

from __future__ import annotations

import logging

from training_calendar.exceptions import ConfigurationError, InvalidInputError
from training_calendar.models.enums import TIER_FALLBACK_ORDER, Tier
from training_calendar.models.workout import TierVariant, Workout

logger = logging.getLogger(__name__)


def coerce_tier(value: Tier | str) -> Tier:
    """Accept a Tier or its name (``"MED"``); reject anything else."""
    try:
        return Tier(value)
    except ValueError as exc:
        raise InvalidInputError(f"Unknown tier: {value!r}") from exc


def resolve_tier_variant(workout: Workout, tier: Tier | str) -> tuple[TierVariant, Tier]:
    """Return the variant served to *tier* and the tier it came from.

    Walks the fixed fallback chain for *tier* and returns the first tier
    present on the workout.

    Raises:
        ConfigurationError: If the workout has no tier variants at all.
    """
    requested = coerce_tier(tier)
    for candidate in TIER_FALLBACK_ORDER[requested]:
        variant = workout.tiers.get(candidate)
        if variant is not None:
            if candidate != requested:
                logger.debug(
                    "Workout %s: tier %s falls back to %s",
                    workout.key,
                    requested.value,
                    candidate.value,
                )
            return variant, candidate
    raise ConfigurationError(f"Workout {workout.key} has no tier variants.")


def resolve_all_tiers(
    workout: Workout,
) -> tuple[dict[Tier, TierVariant], dict[Tier, Tier]]:
    """Resolve every tier so the result shape never depends on the request."""
    variants: dict[Tier, TierVariant] = {}
    sources: dict[Tier, Tier] = {}
    for tier in Tier:
        variants[tier], sources[tier] = resolve_tier_variant(workout, tier)
    return variants, sources

"""ResolvedDay — the answer to "what does tier T do on date D?"."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from types import MappingProxyType
from typing import Mapping

from training_calendar.models.enums import Tier
from training_calendar.models.plan import Season
from training_calendar.models.workout import TierVariant, Workout


@dataclass(frozen=True)
class WeekSummary:
    """The matched week and its zero-based position within the season."""

    week_id: str
    index: int
    start_date: date


@dataclass(frozen=True)
class BlockSummary:
    block_id: str
    name: str
    intent: str


@dataclass(frozen=True)
class ResolvedDay:
    """Fully resolved workout assignment for one civil date.

    ``tiers`` always holds all three tiers. ``tier_sources`` records which
    tier actually supplied each variant, so ``tier_sources[Tier.XL] ==
    Tier.LRG`` means the XL athlete is served the LRG variant.
    """

    on_date: date
    day_key: str
    reference: str
    season: Season
    week: WeekSummary
    block: BlockSummary
    workout: Workout
    tiers: Mapping[Tier, TierVariant] = field(default_factory=dict, hash=False)
    tier_sources: Mapping[Tier, Tier] = field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "tiers", MappingProxyType(dict(self.tiers)))
        object.__setattr__(self, "tier_sources", MappingProxyType(dict(self.tier_sources)))

    def variant_for(self, tier: Tier) -> TierVariant:
        """Variant served to athletes of *tier*."""
        return self.tiers[tier]

    def is_substituted(self, tier: Tier) -> bool:
        """True if *tier* is served another tier's variant."""
        return self.tier_sources[tier] != tier

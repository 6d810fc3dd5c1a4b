"""Tests for tier fallback resolution."""

from __future__ import annotations

import logging

import pytest

from training_calendar.exceptions import ConfigurationError, InvalidInputError
from training_calendar.models.enums import Tier, WorkoutStatus
from training_calendar.models.workout import Interval, TierVariant, Workout
from training_calendar.resolution.tiers import coerce_tier, resolve_all_tiers, resolve_tier_variant


def _workout(*tiers: Tier) -> Workout:
    return Workout(
        workout_id="workout-b",
        version=1,
        status=WorkoutStatus.PUBLISHED,
        tiers={t: TierVariant(name=f"B {t.value}", intervals=(Interval(intensity=5),)) for t in tiers},
    )


class TestResolveTierVariant:
    def test_direct_hit(self) -> None:
        variant, source = resolve_tier_variant(_workout(Tier.MED, Tier.LRG), Tier.MED)
        assert variant.name == "B MED"
        assert source == Tier.MED

    def test_xl_falls_back_to_lrg(self) -> None:
        variant, source = resolve_tier_variant(_workout(Tier.MED, Tier.LRG), Tier.XL)
        assert variant.name == "B LRG"
        assert source == Tier.LRG

    def test_med_falls_back_to_lrg_before_xl(self) -> None:
        _, source = resolve_tier_variant(_workout(Tier.LRG, Tier.XL), Tier.MED)
        assert source == Tier.LRG

    def test_lrg_prefers_med_over_xl(self) -> None:
        _, source = resolve_tier_variant(_workout(Tier.MED, Tier.XL), Tier.LRG)
        assert source == Tier.MED

    def test_single_tier_serves_everyone(self) -> None:
        workout = _workout(Tier.XL)
        for tier in Tier:
            assert resolve_tier_variant(workout, tier)[1] == Tier.XL

    def test_accepts_tier_name(self) -> None:
        assert resolve_tier_variant(_workout(Tier.MED), "MED")[1] == Tier.MED

    def test_unknown_tier(self) -> None:
        with pytest.raises(InvalidInputError, match="Unknown tier"):
            resolve_tier_variant(_workout(Tier.MED), "XXL")

    def test_no_tiers_is_fatal(self) -> None:
        with pytest.raises(ConfigurationError, match="has no tier variants"):
            resolve_tier_variant(_workout(), Tier.MED)

    def test_substitution_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="training_calendar.resolution.tiers"):
            resolve_tier_variant(_workout(Tier.MED), Tier.XL)
        assert "falls back to MED" in caplog.text


class TestResolveAllTiers:
    def test_all_three_present_in_result(self) -> None:
        variants, sources = resolve_all_tiers(_workout(Tier.MED, Tier.LRG))
        assert set(variants) == set(Tier)
        assert sources == {Tier.MED: Tier.MED, Tier.LRG: Tier.LRG, Tier.XL: Tier.LRG}

    def test_coerce_tier(self) -> None:
        assert coerce_tier("XL") is Tier.XL
        assert coerce_tier(Tier.LRG) is Tier.LRG

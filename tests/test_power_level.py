"""Tests for power level assessment."""

import pytest

from deckscope.analysis.power_level import (
    MAX_WEIGHTED_SCORE,
    assess_mana_base,
    assess_power_level,
    get_power_level_factors,
    get_power_level_tier,
    normalize_score,
    score_average_cmc,
    score_combos,
    score_fast_mana,
    score_interaction,
    score_tutors,
    suggest_power_level_adjustments,
)
from deckscope.models.power import Confidence, ManaBaseTier, PowerTier

# =============================================================================
# BUCKETS
# =============================================================================


class TestBuckets:
    """Each factor maps to a fixed 0-10 bucket."""

    @pytest.mark.parametrize(
        ("cmc", "expected"),
        [(2.0, 10), (2.5, 10), (2.51, 8), (3.0, 8), (3.5, 6), (4.0, 4), (4.2, 2)],
    )
    def test_average_cmc(self, cmc: float, expected: int) -> None:
        assert score_average_cmc(cmc) == expected

    @pytest.mark.parametrize(("count", "expected"), [(0, 2), (1, 2), (2, 5), (5, 8), (10, 10)])
    def test_fast_mana(self, count: int, expected: int) -> None:
        assert score_fast_mana(count) == expected

    @pytest.mark.parametrize(("count", "expected"), [(1, 2), (2, 5), (5, 8), (7, 8), (8, 10)])
    def test_tutors(self, count: int, expected: int) -> None:
        assert score_tutors(count) == expected

    @pytest.mark.parametrize(("count", "expected"), [(0, 4), (8, 6), (12, 8), (15, 10)])
    def test_interaction(self, count: int, expected: int) -> None:
        assert score_interaction(count) == expected

    @pytest.mark.parametrize(("count", "expected"), [(0, 2), (1, 4), (2, 7), (3, 10)])
    def test_combos(self, count: int, expected: int) -> None:
        assert score_combos(count) == expected

    def test_max_weighted_score(self) -> None:
        assert MAX_WEIGHTED_SCORE == pytest.approx(110)

    def test_normalize_clamps(self) -> None:
        assert normalize_score(0) == 1
        assert normalize_score(110) == 10
        assert normalize_score(200) == 10


class TestManaBase:
    def test_premium_lands_counted(self, make_card, basics) -> None:
        lands = [
            make_card("Polluted Delta", "Land", 0),
            make_card("Underground Sea", "Land — Island Swamp", 0),
            *basics(8, "Island"),
        ]
        result = assess_mana_base(lands)
        assert result.quality is ManaBaseTier.MEDIUM
        assert result.score == 2
        assert result.premium_count == 2
        assert result.total_lands == 10
        assert result.percentage == 20.0

    def test_basics_only(self, basics) -> None:
        result = assess_mana_base(basics(37))
        assert result.quality is ManaBaseTier.LOW
        assert result.score == 1


# =============================================================================
# ASSESSMENT
# =============================================================================


class TestAssessPowerLevel:
    def test_casual_deck(self, casual_deck) -> None:
        """
        cmc 2*2.5 + fast mana 2*2 + tutors 2*2 + interaction 4*1.5
        + mana base 2.5*1.5 + combos 2*1.5 = 25.75 of 110 -> 2.
        """
        result = assess_power_level(casual_deck)

        assert result.score == 2
        assert result.tier is PowerTier.CASUAL
        assert result.confidence is Confidence.HIGH
        assert result.factors is not None
        assert result.factors.fast_mana_count == 1
        assert result.factors.tutor_count == 1
        assert result.factors.interaction_count == 6
        assert result.factors.combo_count == 0
        assert result.factors.average_cmc == pytest.approx(4.2)

    def test_factor_scores(self, casual_deck) -> None:
        scores = assess_power_level(casual_deck).factor_scores
        assert scores.average_cmc == 2
        assert scores.fast_mana == 2
        assert scores.interaction == 4
        assert scores.mana_base == 2.5

    def test_empty_deck(self) -> None:
        result = assess_power_level([])
        assert result.score == 1
        assert result.tier is PowerTier.CASUAL
        assert result.confidence is Confidence.LOW
        assert result.factors is None
        assert result.breakdown == "Empty or invalid decklist"

    def test_combo_pieces_counted(self, oracle_deck) -> None:
        factors = get_power_level_factors(oracle_deck)
        assert factors.combo_count == 2
        assert factors.tutor_count == 1

    def test_medium_confidence_for_partial_deck(self, fillers) -> None:
        assert assess_power_level(fillers(50)).confidence is Confidence.MEDIUM

    def test_deterministic(self, casual_deck) -> None:
        assert assess_power_level(casual_deck) == assess_power_level(casual_deck)

    def test_breakdown_text(self, casual_deck) -> None:
        breakdown = assess_power_level(casual_deck).breakdown
        assert breakdown.startswith("Power Level: 2/10 (Casual)")
        assert "- Average CMC: 4.2 (High)" in breakdown


class TestTiers:
    @pytest.mark.parametrize(
        ("score", "tier"),
        [
            (1, PowerTier.CASUAL),
            (3, PowerTier.CASUAL),
            (4, PowerTier.FOCUSED),
            (6, PowerTier.FOCUSED),
            (7, PowerTier.OPTIMIZED),
            (9, PowerTier.CEDH),
            (10, PowerTier.CEDH),
        ],
    )
    def test_score_ranges(self, score: int, tier: PowerTier) -> None:
        assert get_power_level_tier(score).key is tier


# =============================================================================
# ADJUSTMENTS
# =============================================================================


class TestPowerAdjustments:
    def test_already_at_target(self, casual_deck) -> None:
        plan = suggest_power_level_adjustments(casual_deck, 2)
        assert plan.direction == "none"
        assert plan.suggestions == []
        assert plan.message == "Deck is already at power level 2"

    def test_increase_ordered_by_distance_from_target_tier(self, casual_deck) -> None:
        plan = suggest_power_level_adjustments(casual_deck, 8)

        assert plan.direction == "increase"
        assert plan.difference == 6
        assert [s.category for s in plan.suggestions] == [
            "Mana Curve",
            "Fast Mana",
            "Consistency",
            "Mana Base",
            "Win Conditions",
            "Interaction",
        ]

    def test_fast_mana_examples_come_from_catalog(self, casual_deck) -> None:
        plan = suggest_power_level_adjustments(casual_deck, 8)
        fast_mana = next(s for s in plan.suggestions if s.category == "Fast Mana")
        assert fast_mana.examples[:2] == ("Sol Ring", "Mana Crypt")

    def test_target_clamped(self, casual_deck) -> None:
        assert suggest_power_level_adjustments(casual_deck, 15).target_score == 10

    def test_decrease(self, make_card, basics) -> None:
        fast = [
            make_card(name, "Artifact", 0)
            for name in (
                "Sol Ring",
                "Mana Crypt",
                "Mana Vault",
                "Chrome Mox",
                "Mox Diamond",
                "Mox Opal",
                "Lotus Petal",
                "Jeweled Lotus",
                "Grim Monolith",
                "Mox Amber",
            )
        ]
        plan = suggest_power_level_adjustments([*fast, *basics(30)], 1)
        assert plan.direction == "decrease"
        assert plan.suggestions[0].category == "Fast Mana"

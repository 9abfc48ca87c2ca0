"""
Tests for budget optimization.

These tests verify:
1. Tier resolution and limits
2. Deck pricing
3. Swap suggestions stay above the per-card ceiling
4. Planning against an arbitrary total
"""

from decimal import Decimal

import pytest

from deckscope.analysis.budget import (
    BUDGET_TIERS,
    analyze_budget_distribution,
    calculate_deck_cost,
    find_budget_alternatives,
    optimize_deck_for_budget,
    recommend_budget_tier,
    resolve_budget_tier,
    suggest_with_budget,
)
from deckscope.models.budget import BudgetTier, format_money, to_money


@pytest.fixture
def crypt_deck(make_card, fillers):
    """Mana Crypt at $150 plus 94 cards at $5: $620 in total."""
    crypt = make_card("Mana Crypt", "Artifact", 0, price="150")
    return [crypt, *fillers(94, price="5")]


# =============================================================================
# TIERS
# =============================================================================


class TestTiers:
    def test_limits(self) -> None:
        assert BUDGET_TIERS[BudgetTier.BUDGET].max_card_price == Decimal("5")
        assert BUDGET_TIERS[BudgetTier.MODERATE].total_budget == Decimal("300")
        assert BUDGET_TIERS[BudgetTier.OPTIMIZED].max_card_price == Decimal("100")
        assert BUDGET_TIERS[BudgetTier.NO_LIMIT].total_budget is None

    @pytest.mark.parametrize(
        ("selector", "tier"),
        [
            (BudgetTier.BUDGET, BudgetTier.BUDGET),
            ("optimized", BudgetTier.OPTIMIZED),
            ("Optimized", BudgetTier.OPTIMIZED),
            ("noLimit", BudgetTier.NO_LIMIT),
            ("no_limit", BudgetTier.NO_LIMIT),
            ("bogus", BudgetTier.MODERATE),
            (None, BudgetTier.MODERATE),
        ],
    )
    def test_resolve(self, selector: BudgetTier | str | None, tier: BudgetTier) -> None:
        assert resolve_budget_tier(selector).tier is tier

    @pytest.mark.parametrize(
        ("cost", "tier"),
        [
            ("50", BudgetTier.BUDGET),
            ("100", BudgetTier.BUDGET),
            ("250", BudgetTier.MODERATE),
            ("700", BudgetTier.OPTIMIZED),
            ("1000", BudgetTier.NO_LIMIT),
        ],
    )
    def test_recommend_tier(self, cost: str, tier: BudgetTier) -> None:
        assert recommend_budget_tier(Decimal(cost)).tier is tier


class TestMoney:
    def test_to_money_quantizes(self) -> None:
        assert to_money(1.005) == Decimal("1.01")
        assert to_money(None) == Decimal("0.00")

    def test_format_money(self) -> None:
        assert format_money(Decimal("320")) == "$320.00"


# =============================================================================
# PRICING
# =============================================================================


class TestDeckCost:
    def test_total_and_breakdown(self, make_card, basics) -> None:
        cards = [
            make_card("Mana Crypt", "Artifact", 0, price="150"),
            make_card("Counterspell", "Instant", 2, "U", price="1.25"),
            make_card("Unpriced Bear"),
            *basics(2),
        ]
        cost = calculate_deck_cost(cards)

        assert cost.total == Decimal("151.25")
        assert cost.breakdown["artifacts"] == Decimal("150.00")
        assert cost.breakdown["instants"] == Decimal("1.25")
        assert cost.breakdown["lands"] == Decimal("0.00")
        assert cost.most_expensive[0].name == "Mana Crypt"
        assert cost.average_card_price == Decimal("30.25")

    def test_empty(self) -> None:
        cost = calculate_deck_cost([])
        assert cost.total == 0
        assert cost.most_expensive == []


class TestBudgetAlternatives:
    def test_curated(self) -> None:
        names = [a.name for a in find_budget_alternatives("Mana Crypt")]
        assert names == ["Sol Ring", "Arcane Signet", "Mind Stone"]

    def test_generic_by_name(self) -> None:
        names = [a.name for a in find_budget_alternatives("Some Expensive Tutor")]
        assert names == ["Diabolic Tutor", "Increasing Ambition"]

    def test_generic_by_oracle_text(self, make_card) -> None:
        card = make_card("Unknown Denial", "Instant", 2, "U", oracle_text="Counter target spell.")
        names = [a.name for a in find_budget_alternatives(card)]
        assert names == ["Counterspell", "Cancel"]

    def test_unknown(self, make_card) -> None:
        assert find_budget_alternatives(make_card("Grizzly Bears")) == []


# =============================================================================
# SWAP SUGGESTIONS
# =============================================================================


class TestSuggestWithBudget:
    def test_over_moderate_budget(self, crypt_deck) -> None:
        report = suggest_with_budget(crypt_deck, "moderate")

        assert report.current_cost == Decimal("620.00")
        assert report.over_budget == Decimal("320.00")
        assert report.message == "Deck exceeds budget by $320.00"
        assert report.expensive_cards_count == 1
        assert len(report.suggestions) == 1
        swap = report.suggestions[0]
        assert swap.replace == "Mana Crypt"
        assert swap.savings == Decimal("125.00")
        assert swap.alternatives == ("Sol Ring", "Arcane Signet", "Mind Stone")
        assert report.potential_savings == Decimal("125.00")
        assert not report.within_budget

    def test_within_budget(self, crypt_deck) -> None:
        report = suggest_with_budget(crypt_deck, BudgetTier.NO_LIMIT)
        assert report.message == "Deck is within budget"
        assert report.suggestions == []
        assert report.within_budget

    def test_card_at_ceiling_never_suggested(self, make_card, fillers) -> None:
        at_ceiling = make_card("Demonic Tutor", "Sorcery", 2, "B", price="25")
        report = suggest_with_budget([at_ceiling, *fillers(60, price="5")], "moderate")

        assert report.over_budget == Decimal("25.00")
        assert report.suggestions == []

    def test_suggestions_all_above_ceiling(self, make_card, fillers) -> None:
        expensive = [
            make_card("Mana Crypt", "Artifact", 0, price="150"),
            make_card("Mana Vault", "Artifact", 1, price="60"),
            make_card("Demonic Tutor", "Sorcery", 2, "B", price="30"),
            make_card("Rhystic Study", "Enchantment", 3, "U", price="20"),
        ]
        report = suggest_with_budget([*expensive, *fillers(50, price="4")], "budget")
        ceiling = BUDGET_TIERS[BudgetTier.BUDGET].max_card_price

        assert report.suggestions
        assert all(s.current_price > ceiling for s in report.suggestions)
        assert [s.replace for s in report.suggestions][:2] == ["Mana Crypt", "Mana Vault"]

    def test_stops_once_overage_covered(self, make_card, fillers) -> None:
        cards = [
            make_card("Mana Crypt", "Artifact", 0, price="150"),
            make_card("Mana Vault", "Artifact", 1, price="60"),
            *fillers(40, price="5"),
        ]
        report = suggest_with_budget(cards, "moderate")
        assert report.over_budget == Decimal("110.00")
        assert [s.replace for s in report.suggestions] == ["Mana Crypt"]

    def test_max_replacements(self, make_card) -> None:
        cards = [
            make_card(name, "Artifact", 0, price="200")
            for name in ("Mana Crypt", "Mana Vault", "Mox Diamond")
        ]
        report = suggest_with_budget(cards, "budget", max_replacements=2)
        assert len(report.suggestions) == 2

    def test_card_without_alternative_saves_nothing(self, make_card) -> None:
        cards = [make_card("Grizzly Bears", price="400")]
        report = suggest_with_budget(cards, "moderate")
        assert report.suggestions[0].alternatives == ()
        assert report.suggestions[0].savings == 0


class TestOptimizeForBudget:
    def test_swaps_until_target(self, make_card, fillers) -> None:
        cards = [make_card("Mana Crypt", "Artifact", 0, price="150"), *fillers(10, price="5")]
        plan = optimize_deck_for_budget(cards, 100)

        assert plan.over_budget == Decimal("100.00")
        assert len(plan.swaps) == 1
        swap = plan.swaps[0]
        assert (swap.remove, swap.add) == ("Mana Crypt", "Sol Ring")
        assert swap.savings == Decimal("145.00")
        assert plan.projected_cost == Decimal("55.00")
        assert plan.remaining_over_budget == Decimal("0.00")
        assert plan.message == "Found 1 swaps to reduce cost by $145.00"

    def test_already_within(self, fillers) -> None:
        plan = optimize_deck_for_budget(fillers(10, price="5"), 100)
        assert plan.message == "Deck is already within budget"
        assert plan.swaps == []


class TestBudgetDistribution:
    def test_cheap_deck(self, make_card, basics) -> None:
        cards = [make_card("Sol Ring", "Artifact", 1, price="2"), *basics(10)]
        result = analyze_budget_distribution(cards)

        assert result.total_cost == Decimal("2.00")
        assert result.distribution["artifacts"].percentage == 100.0
        assert result.top_categories[0] == "artifacts"
        assert result.recommended_tier.tier is BudgetTier.BUDGET
        assert "Budget-friendly deck - good for casual play" in result.insights
        assert "Artifact costs are high - consider budget ramp alternatives" in result.insights

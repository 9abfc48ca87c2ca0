"""
Budget optimization.

Prices a deck, flags cards above a tier's per-card ceiling and proposes
cheaper replacements from the curated alternative table, falling back to a
generic list picked by functional keyword. Cards at or below the ceiling are
never proposed for replacement.
"""

import logging
from decimal import Decimal

from deckscope.analysis.classifier import (
    RAMP_TAGS,
    REMOVAL_TAGS,
    CardClassifier,
    resolve_classifier,
)
from deckscope.config import settings
from deckscope.knowledge.cards import GENERIC_ALTERNATIVES, BudgetAlternative, get_card_knowledge
from deckscope.models.budget import (
    ZERO,
    BudgetDistribution,
    BudgetPlan,
    BudgetReport,
    BudgetSwap,
    BudgetTier,
    CardPrice,
    CategoryCost,
    DeckCost,
    SwapSuggestion,
    TierLimits,
    format_money,
    to_money,
)
from deckscope.models.card import CardStub, DecklistInput, ensure_decklist

logger = logging.getLogger(__name__)

BUDGET_TIERS: dict[BudgetTier, TierLimits] = {
    BudgetTier.BUDGET: TierLimits(
        tier=BudgetTier.BUDGET,
        name="Budget",
        description="Affordable deck for casual play",
        max_card_price=Decimal("5"),
        total_budget=Decimal("100"),
    ),
    BudgetTier.MODERATE: TierLimits(
        tier=BudgetTier.MODERATE,
        name="Moderate",
        description="Balanced budget with some premium cards",
        max_card_price=Decimal("25"),
        total_budget=Decimal("300"),
    ),
    BudgetTier.OPTIMIZED: TierLimits(
        tier=BudgetTier.OPTIMIZED,
        name="Optimized",
        description="High-performance deck with quality cards",
        max_card_price=Decimal("100"),
        total_budget=Decimal("750"),
    ),
    BudgetTier.NO_LIMIT: TierLimits(
        tier=BudgetTier.NO_LIMIT,
        name="No Limit",
        description="Best cards regardless of price",
        max_card_price=None,
        total_budget=None,
    ),
}

# Assumed price of a replacement card when planning against a total target
REPLACEMENT_PRICE = Decimal("5")

MOST_EXPENSIVE_LIMIT = 10
TOP_CATEGORY_LIMIT = 3

COST_CATEGORIES: tuple[tuple[str, str], ...] = (
    ("lands", "land"),
    ("creatures", "creature"),
    ("instants", "instant"),
    ("sorceries", "sorcery"),
    ("artifacts", "artifact"),
    ("enchantments", "enchantment"),
    ("planeswalkers", "planeswalker"),
)


def resolve_budget_tier(tier: BudgetTier | str | None = None) -> TierLimits:
    """
    Limits for a tier selector.

    Accepts the enum, its value, or the camel-case "noLimit". None uses the
    configured default; unknown names fall back to moderate.
    """
    if tier is None:
        tier = settings.default_budget_tier
    if isinstance(tier, BudgetTier):
        return BUDGET_TIERS[tier]

    key = tier.strip()
    key = "no_limit" if key.lower() in ("nolimit", "no_limit", "no-limit") else key.lower()
    try:
        return BUDGET_TIERS[BudgetTier(key)]
    except ValueError:
        logger.debug("Unknown budget tier %r, using moderate", tier)
        return BUDGET_TIERS[BudgetTier.MODERATE]


def card_price(card: CardStub) -> Decimal:
    return to_money(card.price)


def _cost_category(card: CardStub) -> str:
    for category, keyword in COST_CATEGORIES:
        if card.has_type(keyword):
            return category
    return "other"


def _empty_breakdown() -> dict[str, Decimal]:
    return {category: ZERO for category, _ in (*COST_CATEGORIES, ("other", ""))}


def calculate_deck_cost(decklist: DecklistInput) -> DeckCost:
    """Total, per-type breakdown and the ten most expensive cards."""
    cards = ensure_decklist(decklist)
    if not cards:
        return DeckCost()

    breakdown = _empty_breakdown()
    prices: list[CardPrice] = []
    for card in cards:
        price = card_price(card)
        breakdown[_cost_category(card)] += price
        prices.append(CardPrice(name=card.name, price=price, type_line=card.type_line))

    total = to_money(sum((p.price for p in prices), ZERO))
    prices.sort(key=lambda p: p.price, reverse=True)
    return DeckCost(
        total=total,
        breakdown={k: to_money(v) for k, v in breakdown.items()},
        most_expensive=prices[:MOST_EXPENSIVE_LIMIT],
        average_card_price=to_money(total / len(cards)),
    )


def _functional_keyword(card: CardStub | str, classifier: CardClassifier) -> str | None:
    name = card if isinstance(card, str) else card.name
    lowered = name.lower()
    for keyword in GENERIC_ALTERNATIVES:
        if keyword in lowered:
            return keyword

    if isinstance(card, str):
        return None
    tags = classifier.tags(card)
    if "tutor" in tags:
        return "tutor"
    if "counterspell" in tags:
        return "counterspell"
    if tags & REMOVAL_TAGS:
        return "removal"
    if tags & RAMP_TAGS:
        return "ramp"
    return None


def find_budget_alternatives(
    card: CardStub | str,
    classifier: CardClassifier | None = None,
) -> list[BudgetAlternative]:
    """
    Cheaper cards with a similar effect.

    Curated alternatives win. Otherwise a generic list is chosen by a
    functional keyword in the card name, or by the card's classifier tags
    when a CardStub is given.
    """
    name = card if isinstance(card, str) else card.name
    entry = get_card_knowledge(name)
    if entry is not None and entry.budget_alternatives:
        return list(entry.budget_alternatives)

    keyword = _functional_keyword(card, resolve_classifier(classifier))
    if keyword is None:
        logger.debug("No budget alternatives known for %s", name)
        return []
    return list(GENERIC_ALTERNATIVES[keyword])


def suggest_with_budget(
    decklist: DecklistInput,
    budget_tier: BudgetTier | str | None = None,
    max_replacements: int = 10,
    classifier: CardClassifier | None = None,
) -> BudgetReport:
    """
    Replacement plan for a deck over a tier's total budget.

    Cards priced above the per-card ceiling are walked most-expensive-first.
    Each one with a known alternative saves (price - ceiling). The walk stops
    once the accumulated savings cover the overage, the candidates run out, or
    `max_replacements` suggestions have been made.

    Args:
        decklist: Cards with prices
        budget_tier: Tier selector; defaults to the configured tier
        max_replacements: Upper bound on suggestions
        classifier: Used for the generic alternative fallback

    Returns:
        BudgetReport
    """
    cards = ensure_decklist(decklist)
    tier = resolve_budget_tier(budget_tier)
    cost = calculate_deck_cost(cards)

    if tier.total_budget is None or cost.total <= tier.total_budget:
        return BudgetReport(
            message="Deck is within budget",
            current_cost=cost.total,
            target_budget=tier.total_budget,
            tier=tier,
        )

    over_budget = to_money(cost.total - tier.total_budget)
    ceiling = tier.max_card_price if tier.max_card_price is not None else tier.total_budget

    expensive = sorted(
        (card for card in cards if card_price(card) > ceiling),
        key=card_price,
        reverse=True,
    )

    suggestions: list[SwapSuggestion] = []
    accumulated = ZERO
    for card in expensive:
        if accumulated >= over_budget or len(suggestions) >= max_replacements:
            break
        price = card_price(card)
        alternatives = find_budget_alternatives(card, classifier)
        savings = to_money(price - ceiling) if alternatives else ZERO
        suggestions.append(
            SwapSuggestion(
                replace=card.name,
                current_price=price,
                alternatives=tuple(a.name for a in alternatives),
                reasons=tuple(a.reason for a in alternatives),
                savings=savings,
            )
        )
        accumulated += savings

    logger.info(
        "Deck costs %s against %s budget; %d swap suggestions",
        format_money(cost.total),
        tier.name,
        len(suggestions),
    )
    return BudgetReport(
        message=f"Deck exceeds budget by {format_money(over_budget)}",
        current_cost=cost.total,
        target_budget=tier.total_budget,
        tier=tier,
        over_budget=over_budget,
        expensive_cards_count=len(expensive),
        suggestions=suggestions,
        potential_savings=to_money(accumulated),
    )


def optimize_deck_for_budget(
    decklist: DecklistInput,
    target_budget: Decimal | float | int,
    classifier: CardClassifier | None = None,
) -> BudgetPlan:
    """Concrete swaps toward an arbitrary total, assuming $5 replacements."""
    cards = ensure_decklist(decklist)
    target = to_money(target_budget)
    cost = calculate_deck_cost(cards)

    if cost.total <= target:
        return BudgetPlan(
            message="Deck is already within budget",
            current_cost=cost.total,
            target_budget=target,
            projected_cost=cost.total,
        )

    over_budget = to_money(cost.total - target)
    swaps: list[BudgetSwap] = []
    accumulated = ZERO
    for card in sorted(cards, key=card_price, reverse=True):
        if accumulated >= over_budget:
            break
        price = card_price(card)
        if price <= REPLACEMENT_PRICE:
            continue
        alternatives = find_budget_alternatives(card, classifier)
        if not alternatives:
            continue
        best = alternatives[0]
        savings = to_money(price - REPLACEMENT_PRICE)
        swaps.append(
            BudgetSwap(
                remove=card.name,
                remove_price=price,
                add=best.name,
                add_price=REPLACEMENT_PRICE,
                savings=savings,
                reason=best.reason,
            )
        )
        accumulated += savings

    return BudgetPlan(
        message=f"Found {len(swaps)} swaps to reduce cost by {format_money(accumulated)}",
        current_cost=cost.total,
        target_budget=target,
        over_budget=over_budget,
        projected_cost=to_money(cost.total - accumulated),
        swaps=swaps,
        remaining_over_budget=to_money(max(ZERO, over_budget - accumulated)),
    )


def recommend_budget_tier(deck_cost: Decimal | float | int) -> TierLimits:
    """Cheapest tier whose total budget covers the cost."""
    total = to_money(deck_cost)
    for limits in BUDGET_TIERS.values():
        if limits.total_within(total):
            return limits
    return BUDGET_TIERS[BudgetTier.NO_LIMIT]


def _budget_insights(distribution: dict[str, CategoryCost], total: Decimal) -> list[str]:
    insights: list[str] = []
    if distribution["lands"].percentage > 40:
        insights.append(
            "Consider budget land alternatives - lands are taking up a large portion "
            "of your budget"
        )
    if distribution["artifacts"].percentage > 30:
        insights.append("Artifact costs are high - consider budget ramp alternatives")
    if distribution["planeswalkers"].cost > 100:
        insights.append(
            "Planeswalkers are expensive - consider reducing count or finding alternatives"
        )
    if total > 500 and not insights:
        insights.append("Deck has high-quality cards across the board")
    if total < 100:
        insights.append("Budget-friendly deck - good for casual play")
    return insights


def analyze_budget_distribution(decklist: DecklistInput) -> BudgetDistribution:
    cost = calculate_deck_cost(decklist)
    breakdown = cost.breakdown or _empty_breakdown()

    distribution = {
        category: CategoryCost(
            cost=amount,
            percentage=round(float(amount / cost.total * 100), 1) if cost.total > 0 else 0.0,
        )
        for category, amount in breakdown.items()
    }
    top = sorted(distribution, key=lambda c: distribution[c].cost, reverse=True)

    return BudgetDistribution(
        total_cost=cost.total,
        distribution=distribution,
        top_categories=top[:TOP_CATEGORY_LIMIT],
        recommended_tier=recommend_budget_tier(cost.total),
        insights=_budget_insights(distribution, cost.total),
    )

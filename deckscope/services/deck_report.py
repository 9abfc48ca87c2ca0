"""
Full deck report.

Runs every analyzer over one deck and collects the results. Strategy-driven
analyzers (curve, land count, ratios) use the deck's archetype, falling back
to midrange.
"""

import logging
from collections.abc import Iterable

from deckscope.analysis.balance import analyze_deck_balance, suggest_ratio_improvements
from deckscope.analysis.budget import suggest_with_budget
from deckscope.analysis.classifier import CardClassifier, resolve_classifier
from deckscope.analysis.curve import analyze_mana_curve
from deckscope.analysis.features import extract_deck_features
from deckscope.analysis.interaction import get_interaction_report
from deckscope.analysis.mana_base import (
    calculate_color_sources,
    calculate_total_mana_sources,
    recommend_land_count,
)
from deckscope.analysis.power_level import assess_power_level
from deckscope.analysis.synergy import calculate_synergy_score, detect_combos
from deckscope.analysis.validation import validate_deck
from deckscope.analysis.win_conditions import get_win_condition_stats
from deckscope.knowledge.archetypes import archetype_key
from deckscope.knowledge.rules import get_color_combination_name
from deckscope.models.budget import BudgetTier, format_money
from deckscope.models.card import Deck, sort_colors
from deckscope.models.failure import InvalidInputError
from deckscope.models.features import CorpusDeck
from deckscope.models.meta import PlaygroupProfile
from deckscope.models.recommendation import PerformanceModel, Recommendation
from deckscope.models.report import DeckReport
from deckscope.services.recommendations import recommend_cards

logger = logging.getLogger(__name__)


def build_deck_report(
    deck: Deck,
    corpus: Iterable[CorpusDeck] | None = None,
    budget_tier: BudgetTier | str | None = None,
    model: PerformanceModel | None = None,
    profile: PlaygroupProfile | None = None,
    recommendation_count: int = 10,
    classifier: CardClassifier | None = None,
) -> DeckReport:
    """
    Analyze a deck end to end.

    Args:
        deck: Deck to analyze; its archetype selects the strategy baselines
        corpus: Decks to draw card recommendations from (optional)
        budget_tier: Budget tier for swap suggestions; settings default when None
        model: Performance model for recommendation weighting (optional)
        profile: Playgroup profile for recommendation weighting (optional)
        recommendation_count: Number of card recommendations
        classifier: Oracle-text classifier shared by every analyzer

    Returns:
        DeckReport

    Raises:
        InvalidInputError: If `deck` is not a Deck
    """
    if not isinstance(deck, Deck):
        raise InvalidInputError("deck", "a Deck", deck)

    classifier = resolve_classifier(classifier)
    archetype = archetype_key(deck.archetype)
    cards = deck.cards
    features = extract_deck_features(cards, classifier)
    colors = sort_colors(features.color_identity)

    curve = analyze_mana_curve(cards, archetype)
    recommended_lands = recommend_land_count(cards, archetype)

    recommendations: list[Recommendation] = []
    if corpus is not None:
        recommendations = recommend_cards(
            cards, corpus, recommendation_count, model, profile, classifier
        )

    report = DeckReport(
        name=deck.name,
        commander=deck.commander.name if deck.commander else None,
        archetype=archetype,
        colors=colors,
        features=features,
        validation=validate_deck(deck),
        synergy=calculate_synergy_score(cards, classifier),
        combos=detect_combos(cards, classifier),
        power=assess_power_level(cards),
        win_conditions=get_win_condition_stats(cards, classifier),
        interaction=get_interaction_report(cards, colors, classifier),
        curve=curve,
        recommended_lands=recommended_lands,
        color_sources=calculate_color_sources(cards, recommended_lands),
        mana_sources=calculate_total_mana_sources(cards, classifier),
        balance=analyze_deck_balance(cards, classifier),
        ratios=suggest_ratio_improvements(cards, archetype, colors, classifier),
        budget=suggest_with_budget(cards, budget_tier, classifier=classifier),
        recommendations=recommendations,
    )
    logger.info(
        "Report for %s: power %d, synergy %d, %d combos",
        deck.name or "deck",
        report.power.score,
        report.synergy.score,
        len(report.combos),
    )
    return report


def format_deck_report(report: DeckReport) -> str:
    """Format a deck report for display."""
    lines: list[str] = []

    color_name = get_color_combination_name(report.colors)
    title = report.name or report.commander or "Deck"
    lines.append(f"**{title}** ({report.features.deck_size} cards, {color_name})")
    lines.append(f"- Archetype: {report.archetype}")
    if report.features.themes:
        lines.append(f"- Themes: {', '.join(sorted(report.features.themes))}")
    lines.append(
        f"- Power level: {report.power.score}/10 ({report.power.tier.value}, "
        f"{report.power.confidence.value} confidence)"
    )
    lines.append(f"- Synergy: {report.synergy.score}/10 ({report.synergy.rating})")
    lines.append(
        f"- Interaction: {report.interaction.score}/10 ({report.interaction.rating}), "
        f"{report.interaction.total} pieces"
    )
    lines.append(
        f"- Win conditions: {report.win_conditions.total_wincons} "
        f"({report.win_conditions.redundancy.value})"
    )
    lines.append(
        f"- Average CMC: {report.curve.average_cmc}, "
        f"recommended lands: {report.recommended_lands}"
    )
    lines.append(f"- Cost: {format_money(report.budget.current_cost)}")
    lines.append("")

    if report.combos:
        lines.append("**Combos:**")
        for combo in report.combos:
            lines.append(f"- {' + '.join(combo.cards)}: {combo.description}")
        lines.append("")

    issues = [*report.validation.errors, *report.validation.warnings, *report.curve.warnings]
    if issues:
        lines.append("**Issues:**")
        for issue in issues:
            lines.append(f"- {issue}")
        lines.append("")

    if report.budget.suggestions:
        lines.append("**Budget Swaps:**")
        for swap in report.budget.suggestions:
            alternatives = ", ".join(swap.alternatives) or "no known alternative"
            lines.append(
                f"- {swap.replace} ({format_money(swap.current_price)}): {alternatives}"
            )
        lines.append("")

    if report.recommendations:
        lines.append("**Recommended Cards:**")
        for i, rec in enumerate(report.recommendations, 1):
            lines.append(f"{i}. {rec.card} (score {rec.score:.2f})")
        lines.append("")

    lines.append(report.curve.visualization)
    return "\n".join(lines)

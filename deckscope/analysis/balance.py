"""
Deck balance: card advantage, ramp and role ratios per archetype.
"""

from collections.abc import Iterable

from deckscope.analysis.classifier import CardClassifier, resolve_classifier
from deckscope.analysis.scoring import percentage, round_half_up
from deckscope.knowledge.archetypes import ideal_ratios
from deckscope.knowledge.cards import CardRole, has_role
from deckscope.models.balance import (
    BalanceCard,
    CardAdvantageAnalysis,
    DeckBalance,
    IdealRatios,
    RampAnalysis,
    RatioReport,
    RatioSuggestion,
)
from deckscope.models.card import (
    CardStub,
    DecklistInput,
    ensure_colors,
    ensure_decklist,
    sort_colors,
)

# Per-role caps after color adjustments
MAX_RAMP = 15
MAX_DRAW = 18
MAX_INTERACTION = 18

# Counts above ideal + this are flagged as excessive
SURPLUS_TOLERANCE = 5

_DRAW_EXAMPLES = {
    "U": ("Rhystic Study", "Mystic Remora", "Fact or Fiction"),
    "G": ("Harmonize", "Beast Whisperer", "Return of the Wildspeaker"),
}
_DEFAULT_DRAW_EXAMPLES = ("Necropotence", "Phyrexian Arena", "Night's Whisper")
_GREEN_RAMP_EXAMPLES = ("Cultivate", "Nature's Lore", "Three Visits")
_DEFAULT_RAMP_EXAMPLES = ("Sol Ring", "Arcane Signet", "Mind Stone")


def package_quality(count: int) -> str:
    if count >= 12:
        return "excellent"
    if count >= 10:
        return "good"
    if count >= 8:
        return "adequate"
    if count >= 5:
        return "low"
    return "insufficient"


def package_rating(count: int) -> int:
    return min(10, round_half_up(count * 0.8))


def _entry(card: CardStub, quality: str) -> BalanceCard:
    return BalanceCard(name=card.name, type_line=card.type_line, cmc=card.cmc, quality=quality)


def analyze_card_advantage(
    decklist: DecklistInput,
    classifier: CardClassifier | None = None,
) -> CardAdvantageAnalysis:
    """Card draw, impulse draw and recursion. A card may count in several groups."""
    cards = ensure_decklist(decklist)
    classifier = resolve_classifier(classifier)
    analysis = CardAdvantageAnalysis()

    for card in cards:
        tags = classifier.tags(card)
        curated = has_role(card.name, CardRole.CARD_DRAW)
        if curated or "card_draw" in tags:
            analysis.card_draw.append(_entry(card, "high" if curated else "medium"))
        if "impulse_draw" in tags:
            analysis.impulse_draw.append(_entry(card, "medium"))
        if "recursion" in tags:
            analysis.recursion.append(_entry(card, "medium"))

    analysis.quality = package_quality(analysis.count)
    analysis.rating = package_rating(analysis.count)
    analysis.percentage = percentage(analysis.count, len(cards))
    return analysis


def analyze_ramp_package(
    decklist: DecklistInput,
    classifier: CardClassifier | None = None,
) -> RampAnalysis:
    """
    Mana rocks, dorks, land ramp and cost reducers.

    Curated ramp cards the classifier cannot read (no oracle text) are placed
    by type: artifacts as rocks, creatures as dorks, anything else as land ramp.
    """
    cards = ensure_decklist(decklist)
    classifier = resolve_classifier(classifier)
    analysis = RampAnalysis()

    for card in cards:
        tags = classifier.tags(card)
        matched = False
        if card.has_type("artifact") and "mana_rock" in tags:
            analysis.mana_rocks.append(_entry(card, "high" if card.cmc <= 2 else "medium"))
            matched = True
        if card.has_type("creature") and "mana_dork" in tags:
            analysis.mana_dorks.append(_entry(card, "high" if card.cmc == 1 else "medium"))
            matched = True
        if "land_ramp" in tags:
            analysis.land_ramp.append(_entry(card, "high" if card.cmc <= 3 else "medium"))
            matched = True
        if "cost_reducer" in tags:
            analysis.cost_reducers.append(_entry(card, "medium"))
            matched = True

        if matched or not has_role(card.name, CardRole.RAMP):
            continue
        if card.has_type("artifact"):
            analysis.mana_rocks.append(_entry(card, "high" if card.cmc <= 2 else "medium"))
        elif card.has_type("creature"):
            analysis.mana_dorks.append(_entry(card, "high" if card.cmc == 1 else "medium"))
        else:
            analysis.land_ramp.append(_entry(card, "high" if card.cmc <= 3 else "medium"))

    analysis.quality = package_quality(analysis.count)
    analysis.rating = package_rating(analysis.count)
    analysis.percentage = percentage(analysis.count, len(cards))
    return analysis


def get_ideal_ratios(
    archetype: str = "midrange", colors: Iterable[str] | None = None
) -> IdealRatios:
    """
    Archetype ratios adjusted for colors.

    Green adds two ramp slots, blue two draw slots, and white-blue two
    interaction slots, each capped.
    """
    palette = ensure_colors(colors)
    base = ideal_ratios(archetype)
    changes: dict[str, int] = {}
    if "G" in palette:
        changes["ramp"] = min(base.ramp + 2, MAX_RAMP)
    if "U" in palette:
        changes["draw"] = min(base.draw + 2, MAX_DRAW)
    if {"W", "U"} <= palette:
        changes["interaction"] = min(base.interaction + 2, MAX_INTERACTION)
    return base.adjusted(**changes)


def _severity(deficit: int) -> str:
    if deficit >= 5:
        return "high"
    if deficit >= 3:
        return "medium"
    return "low"


def suggest_ratio_improvements(
    decklist: DecklistInput,
    archetype: str = "midrange",
    colors: Iterable[str] | None = None,
    classifier: CardClassifier | None = None,
) -> RatioReport:
    cards = ensure_decklist(decklist)
    palette = ensure_colors(colors)
    draw = analyze_card_advantage(cards, classifier)
    ramp = analyze_ramp_package(cards, classifier)
    ideal = get_ideal_ratios(archetype, palette)

    suggestions: list[RatioSuggestion] = []
    if draw.count < ideal.draw:
        deficit = ideal.draw - draw.count
        if "U" in palette:
            examples = _DRAW_EXAMPLES["U"]
        elif "G" in palette:
            examples = _DRAW_EXAMPLES["G"]
        else:
            examples = _DEFAULT_DRAW_EXAMPLES
        suggestions.append(
            RatioSuggestion(
                category="Card Draw",
                issue=f"Only {draw.count} card draw sources (recommended: {ideal.draw})",
                recommendation=f"Add {deficit} more card draw sources",
                severity=_severity(deficit),
                examples=examples,
            )
        )

    if ramp.count < ideal.ramp:
        deficit = ideal.ramp - ramp.count
        suggestions.append(
            RatioSuggestion(
                category="Ramp",
                issue=f"Only {ramp.count} ramp sources (recommended: {ideal.ramp})",
                recommendation=f"Add {deficit} more ramp sources",
                severity=_severity(deficit),
                examples=_GREEN_RAMP_EXAMPLES if "G" in palette else _DEFAULT_RAMP_EXAMPLES,
            )
        )

    if draw.count > ideal.draw + SURPLUS_TOLERANCE:
        suggestions.append(
            RatioSuggestion(
                category="Card Draw",
                issue=f"Too many card draw sources ({draw.count})",
                recommendation="Consider cutting some card draw for other categories",
                severity="low",
            )
        )
    if ramp.count > ideal.ramp + SURPLUS_TOLERANCE:
        suggestions.append(
            RatioSuggestion(
                category="Ramp",
                issue=f"Too much ramp ({ramp.count})",
                recommendation="Consider cutting some ramp for threats",
                severity="low",
            )
        )

    return RatioReport(
        archetype=archetype,
        colors=sort_colors(palette),
        ideal_ratios=ideal,
        current_draw=draw.count,
        current_ramp=ramp.count,
        overall_rating=min(10, round_half_up((draw.rating + ramp.rating) / 2)),
        suggestions=suggestions,
    )


def analyze_deck_balance(
    decklist: DecklistInput,
    classifier: CardClassifier | None = None,
) -> DeckBalance:
    cards = ensure_decklist(decklist)
    draw = analyze_card_advantage(cards, classifier)
    ramp = analyze_ramp_package(cards, classifier)

    lands = sum(1 for c in cards if c.is_land)
    creatures = sum(1 for c in cards if c.has_type("creature"))
    instants = sum(1 for c in cards if c.has_type("instant"))
    sorceries = sum(1 for c in cards if c.has_type("sorcery"))

    return DeckBalance(
        deck_size=len(cards),
        lands=lands,
        creatures=creatures,
        instants=instants,
        sorceries=sorceries,
        card_draw=draw,
        ramp=ramp,
        lands_percentage=percentage(lands, len(cards)),
        creatures_percentage=percentage(creatures, len(cards)),
        spells_percentage=percentage(instants + sorceries, len(cards)),
        overall_rating=round_half_up((draw.rating + ramp.rating) / 2),
    )

"""
Win condition detection.

Finds the ways a deck can close out a game: catalogued combos, combat
finishers, alternate wins, drain effects, mill finishers and an implied
commander-damage plan for equipment/aura heavy decks. Redundancy is rated on
a fixed ladder by how many win conditions exist and how many kinds.
"""

from collections.abc import Iterable

from deckscope.analysis.classifier import CardClassifier
from deckscope.analysis.synergy import detect_infinite_combos
from deckscope.knowledge.archetypes import archetype_key
from deckscope.knowledge.cards import CardRole, has_role
from deckscope.models.card import (
    DecklistInput,
    ensure_colors,
    ensure_decklist,
    normalize_name,
    unique_cards,
)
from deckscope.models.synergy import WinType
from deckscope.models.win_conditions import (
    RedundancyAssessment,
    RedundancyRating,
    WinCondition,
    WinConditionReport,
    WinConditionStats,
    WinConditionSuggestion,
)

# Equipment + aura count at which a voltron plan is assumed
VOLTRON_THRESHOLD = 10

MAX_SUGGESTIONS = 5

# Curated role -> (win type, description)
_ROLE_WINCONS: tuple[tuple[CardRole, WinType, str], ...] = (
    (CardRole.COMBAT_FINISHER, WinType.COMBAT, "Combat damage finisher"),
    (CardRole.ALTERNATE_WIN, WinType.ALTERNATE, "Alternate win condition"),
    (CardRole.ATTRITION, WinType.ATTRITION, "Life drain/attrition"),
    (CardRole.MILL_WIN, WinType.MILL, "Mill finisher"),
)

_REDUNDANCY_TEXT: dict[RedundancyRating, tuple[str, str]] = {
    RedundancyRating.CRITICAL: (
        "No clear win conditions detected",
        "Add 3-5 win conditions to close out games",
    ),
    RedundancyRating.POOR: (
        "Only one win condition - very vulnerable to disruption",
        "Add 2-4 backup win conditions",
    ),
    RedundancyRating.ADEQUATE: (
        "Minimal win conditions - add more for consistency",
        "Add 1-2 more win conditions",
    ),
    RedundancyRating.GOOD: (
        "Good win condition diversity and redundancy",
        "Win conditions look solid",
    ),
    RedundancyRating.EXCELLENT: (
        "Excellent win condition redundancy",
        "Win conditions are well-covered",
    ),
}


def detect_win_conditions(
    decklist: DecklistInput,
    classifier: CardClassifier | None = None,
) -> WinConditionReport:
    """
    Every win condition in the deck.

    Combos are counted under "combo" whatever their win type.
    """
    cards = ensure_decklist(decklist)
    report = WinConditionReport()

    def add(wincon: WinCondition) -> None:
        report.found.append(wincon)
        key = wincon.type.value
        report.categories[key] = report.categories.get(key, 0) + 1

    for combo in detect_infinite_combos(cards, classifier):
        add(
            WinCondition(
                type=WinType.COMBO,
                name=combo.description,
                description=combo.description,
                cards=combo.cards,
            )
        )

    for card in unique_cards(cards):
        for role, win_type, description in _ROLE_WINCONS:
            if has_role(card.name, role):
                add(
                    WinCondition(
                        type=win_type,
                        name=card.name,
                        description=description,
                        cards=(card.name,),
                    )
                )

    voltron_pieces = sum(1 for c in cards if c.has_type("Equipment") or c.has_type("Aura"))
    if voltron_pieces >= VOLTRON_THRESHOLD:
        add(
            WinCondition(
                type=WinType.COMMANDER,
                name="Commander Damage (Voltron)",
                description=f"{voltron_pieces} equipment/auras for voltron strategy",
            )
        )

    return report


def categorize_win_conditions(
    wincons: Iterable[WinCondition],
) -> dict[str, list[WinCondition]]:
    """Group win conditions by type value."""
    grouped: dict[str, list[WinCondition]] = {}
    for wincon in wincons:
        grouped.setdefault(wincon.type.value, []).append(wincon)
    return grouped


def redundancy_rating(count: int, unique_types: int) -> RedundancyRating:
    if count == 0:
        return RedundancyRating.CRITICAL
    if count == 1:
        return RedundancyRating.POOR
    if count == 2:
        return RedundancyRating.ADEQUATE
    if unique_types >= 2:
        return RedundancyRating.GOOD
    return RedundancyRating.EXCELLENT


def assess_win_condition_redundancy(
    decklist: DecklistInput,
    classifier: CardClassifier | None = None,
) -> RedundancyAssessment:
    detected = detect_win_conditions(decklist, classifier)
    unique_types = len(detected.categories)
    rating = redundancy_rating(detected.count, unique_types)
    message, recommendation = _REDUNDANCY_TEXT[rating]
    return RedundancyAssessment(
        rating=rating,
        message=message,
        recommendation=recommendation,
        total_wincons=detected.count,
        unique_types=unique_types,
        details=detected,
    )


def suggest_win_conditions(
    decklist: DecklistInput,
    archetype: str = "midrange",
    colors: Iterable[str] | None = None,
    classifier: CardClassifier | None = None,
) -> list[WinConditionSuggestion]:
    """
    Archetype- and color-gated win condition ideas.

    Args:
        decklist: Current deck
        archetype: Deck archetype (combo, aggro, tribal, tokens, aristocrats, ...)
        colors: Color identity; defaults to none

    Returns:
        At most five suggestions
    """
    archetype = archetype_key(archetype)
    current = detect_win_conditions(decklist, classifier)
    palette = ensure_colors(colors)
    categories = current.categories
    suggestions: list[WinConditionSuggestion] = []

    if archetype == "combo" and not categories.get(WinType.COMBO.value):
        suggestions.append(
            WinConditionSuggestion(
                name="Thassa's Oracle",
                type=WinType.COMBO,
                reason="Compact combo win condition",
                synergy=("Demonic Consultation", "Tainted Pact"),
            )
        )

    if archetype in ("aggro", "tribal", "tokens") and not categories.get(WinType.COMBAT.value):
        suggestions.append(
            WinConditionSuggestion(
                name="Craterhoof Behemoth",
                type=WinType.COMBAT,
                reason="Ends games with creature armies",
                synergy=("Token generators", "Go-wide strategies"),
            )
        )
        if "G" in palette:
            suggestions.append(
                WinConditionSuggestion(
                    name="Triumph of the Hordes",
                    type=WinType.COMBAT,
                    reason="Alternate combat finisher with infect",
                    synergy=("Wide boards",),
                )
            )

    if (archetype == "aristocrats" or "B" in palette) and not categories.get(
        WinType.ATTRITION.value
    ):
        suggestions.append(
            WinConditionSuggestion(
                name="Blood Artist",
                type=WinType.ATTRITION,
                reason="Drains life from death triggers",
                synergy=("Sacrifice outlets", "Board wipes"),
            )
        )
        suggestions.append(
            WinConditionSuggestion(
                name="Exsanguinate",
                type=WinType.ATTRITION,
                reason="Finisher for mana-generating decks",
                synergy=("Big mana", "Mana doublers"),
            )
        )

    if "U" in palette:
        suggestions.append(
            WinConditionSuggestion(
                name="Thassa's Oracle",
                type=WinType.ALTERNATE,
                reason="Compact alternate win condition",
                synergy=("Self-mill", "Lab Man effects"),
            )
        )

    if current.count < 3 and "G" in palette:
        suggestions.append(
            WinConditionSuggestion(
                name="Finale of Devastation",
                type=WinType.COMBAT,
                reason="Flexible finisher and tutor",
                synergy=("Creature decks",),
            )
        )

    owned = {card.key for card in ensure_decklist(decklist)}
    seen: set[str] = set()
    filtered: list[WinConditionSuggestion] = []
    for suggestion in suggestions:
        key = normalize_name(suggestion.name)
        if key in owned or key in seen:
            continue
        seen.add(key)
        filtered.append(suggestion)
    return filtered[:MAX_SUGGESTIONS]


def get_win_condition_stats(
    decklist: DecklistInput,
    classifier: CardClassifier | None = None,
) -> WinConditionStats:
    redundancy = assess_win_condition_redundancy(decklist, classifier)
    detected = redundancy.details
    return WinConditionStats(
        total_wincons=detected.count,
        by_type=dict(detected.categories),
        redundancy=redundancy.rating,
        diversified=redundancy.diversified,
        recommendation=redundancy.recommendation,
        details=list(detected.found),
    )

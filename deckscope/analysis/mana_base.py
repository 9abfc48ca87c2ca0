"""
Mana base analysis.

Land count per archetype, colored-symbol distribution, color source
allocation and a template mana base by color count and budget.
"""

import math
import re
from collections.abc import Iterable

from deckscope.analysis.classifier import CardClassifier, resolve_classifier
from deckscope.analysis.scoring import average_cmc, clamp, ratio, round_half_up
from deckscope.knowledge.archetypes import base_land_count
from deckscope.knowledge.rules import get_color_combination_name
from deckscope.models.card import (
    COLOR_ORDER,
    DecklistInput,
    ensure_colors,
    ensure_decklist,
    sort_colors,
)
from deckscope.models.curve import (
    ColorSource,
    ManaBaseRecommendation,
    ManaRequirements,
    ManaSources,
)

MIN_LANDS = 33
MAX_LANDS = 40
DEFAULT_LANDS = 37

LOW_CMC = 2.5
HIGH_CMC = 4.0

# Minimum sources as a share of the proportional allocation
MIN_SOURCE_SHARE = 0.7

# Colored-symbol share of the deck above which a color is flagged as intensive
HIGH_INTENSITY = 0.4

_SYMBOL = re.compile(r"\{([^}]*)\}")


def calculate_land_count(strategy: str = "midrange", avg_cmc: float = 3.0) -> int:
    """Archetype base land count, one fewer below 2.5 CMC and one more above 4.0."""
    lands = base_land_count(strategy)
    if avg_cmc < LOW_CMC:
        lands -= 1
    if avg_cmc > HIGH_CMC:
        lands += 1
    return int(clamp(lands, MIN_LANDS, MAX_LANDS))


def recommend_land_count(decklist: DecklistInput, strategy: str = "midrange") -> int:
    return calculate_land_count(strategy, average_cmc(ensure_decklist(decklist)))


def calculate_color_distribution(decklist: DecklistInput) -> dict[str, int]:
    """
    Mana symbols per color across the deck's mana costs.

    Numeric generic costs ({2}) count once toward "C". Hybrid symbols count
    toward every color they name.
    """
    distribution = {color: 0 for color in (*COLOR_ORDER, "C")}
    for card in ensure_decklist(decklist):
        for symbol in _SYMBOL.findall(card.mana_cost.upper()):
            if symbol.isdigit():
                distribution["C"] += 1
                continue
            for color in COLOR_ORDER:
                if color in symbol.split("/"):
                    distribution[color] += 1
    return distribution


def _allocate(shares: dict[str, float], total: int) -> dict[str, int]:
    """Largest-remainder apportionment of `total` by `shares`; sums to total."""
    exact = {color: share * total for color, share in shares.items()}
    allocation = {color: math.floor(value) for color, value in exact.items()}
    leftover = total - sum(allocation.values())
    by_remainder = sorted(exact, key=lambda c: (allocation[c] - exact[c], COLOR_ORDER.index(c)))
    for color in by_remainder[:leftover]:
        allocation[color] += 1
    return allocation


def calculate_color_sources(
    decklist: DecklistInput, total_lands: int = DEFAULT_LANDS
) -> dict[str, ColorSource]:
    """
    Land sources per color, proportional to colored-symbol frequency.

    Recommended sources are apportioned so they sum to exactly `total_lands`.
    The minimum is 70% of a color's proportional share, floored.
    """
    distribution = calculate_color_distribution(decklist)
    colored = {c: n for c, n in distribution.items() if c != "C" and n > 0}
    total_symbols = sum(colored.values())
    if total_symbols == 0:
        return {}

    total_lands = max(total_lands, 0)
    shares = {color: count / total_symbols for color, count in colored.items()}
    allocation = _allocate(shares, total_lands)

    return {
        color: ColorSource(
            color=color,
            symbols=colored[color],
            percentage=round_half_up(shares[color] * 100),
            min_sources=math.floor(shares[color] * total_lands * MIN_SOURCE_SHARE),
            recommended_sources=allocation[color],
        )
        for color in sort_colors(colored)
    }


def generate_mana_base(
    decklist: DecklistInput,
    color_identity: Iterable[str] | str,
    total_lands: int = DEFAULT_LANDS,
    budget: str = "medium",
    include_utility: bool = True,
) -> ManaBaseRecommendation:
    """
    Template mana base for a color identity.

    Args:
        decklist: Deck whose mana costs drive the two-color split
        color_identity: Commander colors, as a string ("WU") or iterable
        total_lands: Land slots to fill
        budget: "low", "medium" or "high"; selects the dual land families
        include_utility: Add utility land suggestions

    Returns:
        ManaBaseRecommendation with basics per color and land suggestions
    """
    colors = sort_colors(ensure_colors(color_identity, "color_identity"))
    recommendation = ManaBaseRecommendation(total_lands=total_lands)

    if len(colors) == 1:
        recommendation.basics[colors[0]] = total_lands - 8
        recommendation.utility = [
            "Command Tower",
            "Myriad Landscape",
            "Reliquary Tower",
            "Rogue's Passage",
        ]
        recommendation.colorless = ["War Room", "Bonders' Enclave"]
        return recommendation

    if len(colors) == 2:
        sources = calculate_color_sources(decklist, total_lands)
        for color in colors:
            need = sources[color].recommended_sources if color in sources else total_lands // 2
            recommendation.basics[color] = math.floor(need * 0.5)

        pair = get_color_combination_name(colors)
        recommendation.duals = [
            "Command Tower",
            "Path of Ancestry",
            f"{pair} Guildgate",
            f"{pair} Tap Land",
        ]
        if budget == "high":
            recommendation.duals += ["Fetchland", "Shockland", "Original Dual"]
        elif budget == "medium":
            recommendation.duals += ["Checkland", "Painland", "Filterland"]
        if include_utility:
            recommendation.utility = ["Reliquary Tower", "Rogue's Passage"]
        return recommendation

    if len(colors) >= 3:
        per_color = math.floor(total_lands * 0.3 / len(colors))
        recommendation.basics = {color: per_color for color in colors}
        recommendation.duals = [
            "Command Tower",
            "Path of Ancestry",
            "Exotic Orchard",
            "Reflecting Pool",
        ]
        if len(colors) == 3:
            recommendation.duals += ["Triland (Triome or Lairs)", "Tri-color Tap Lands"]
        recommendation.duals += ["Evolving Wilds", "Terramorphic Expanse"]
        if budget == "high":
            recommendation.duals += [
                "Fetchlands (all relevant)",
                "Shocklands (all relevant)",
                "Rainbow lands (City of Brass, Mana Confluence)",
            ]
        elif budget == "medium":
            recommendation.duals += ["Checklands", "Painlands", "Battlebond lands"]
        if include_utility:
            recommendation.utility = ["Reliquary Tower"]

    return recommendation


def analyze_mana_requirements(decklist: DecklistInput) -> ManaRequirements:
    cards = ensure_decklist(decklist)
    distribution = calculate_color_distribution(cards)
    requirements = ManaRequirements()

    for color in COLOR_ORDER:
        intensity = ratio(distribution[color], len(cards))
        requirements.color_intensity[color] = round(intensity, 3)
        if intensity > HIGH_INTENSITY:
            requirements.recommendations.append(
                f"High {color} requirement ({round_half_up(intensity * 100)}%). "
                f"Ensure at least {math.ceil(intensity * 40)} {color} sources."
            )
    return requirements


def calculate_total_mana_sources(
    decklist: DecklistInput,
    classifier: CardClassifier | None = None,
) -> ManaSources:
    """Lands, mana rocks, mana dorks and land-fetching spells."""
    classifier = resolve_classifier(classifier)
    lands = rocks = dorks = ramp_spells = 0

    for card in ensure_decklist(decklist):
        if card.is_land:
            lands += 1
            continue
        tags = classifier.tags(card)
        if card.has_type("artifact") and "mana_rock" in tags:
            rocks += 1
        elif card.has_type("creature") and "mana_dork" in tags:
            dorks += 1
        elif (card.has_type("instant") or card.has_type("sorcery")) and "land_ramp" in tags:
            ramp_spells += 1

    return ManaSources(lands=lands, rocks=rocks, dorks=dorks, ramp_spells=ramp_spells)

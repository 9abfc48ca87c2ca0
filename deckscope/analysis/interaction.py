"""
Interaction analysis.

Counts removal, board wipes, counterspells, protection, graveyard hate and
artifact/enchantment removal. A card lands in a category when the knowledge
table gives it the matching role or the classifier tags it from oracle text.
Each category is scored against a fixed target and the six scores are folded
into one 1-10 rating.
"""

from collections.abc import Iterable

from deckscope.analysis.classifier import CardClassifier, resolve_classifier
from deckscope.analysis.features import compute_color_identity
from deckscope.analysis.scoring import clamp, ratio, round_half_up
from deckscope.knowledge.cards import CardRole, has_role
from deckscope.models.card import (
    COLOR_ORDER,
    DecklistInput,
    ensure_colors,
    ensure_decklist,
    normalize_name,
)
from deckscope.models.interaction import (
    CategoryEfficiency,
    CategorySpec,
    InteractionAnalysis,
    InteractionCard,
    InteractionCategory,
    InteractionGap,
    InteractionReport,
    InteractionScore,
    InteractionSuggestion,
    RemovalQuality,
)

# Category scores are capped at 150% of target
OVERSHOOT_CAP = 1.5

MAX_SUGGESTIONS = 5
MAX_EXAMPLES = 3

CATEGORIES: dict[InteractionCategory, CategorySpec] = {
    InteractionCategory.SPOT_REMOVAL: CategorySpec(
        name="Spot Removal",
        description="Single-target removal for creatures and other permanents",
        target=8,
        efficient_cmc=2,
        excellent_cmc=2.5,
        good_cmc=3.5,
    ),
    InteractionCategory.BOARD_WIPES: CategorySpec(
        name="Board Wipes",
        description="Mass removal effects",
        target=3,
        efficient_cmc=4,
        excellent_cmc=4,
        good_cmc=5,
    ),
    InteractionCategory.COUNTERSPELLS: CategorySpec(
        name="Counterspells",
        description="Counter target spell or ability",
        target=5,
        efficient_cmc=2,
        excellent_cmc=2,
        good_cmc=3,
    ),
    InteractionCategory.PROTECTION: CategorySpec(
        name="Protection",
        description="Protect your board from removal",
        target=4,
        efficient_cmc=2,
        excellent_cmc=2,
        good_cmc=3,
    ),
    InteractionCategory.GRAVEYARD_HATE: CategorySpec(
        name="Graveyard Hate",
        description="Exile or disable graveyards",
        target=2,
        efficient_cmc=1,
        excellent_cmc=1.5,
        good_cmc=2.5,
    ),
    InteractionCategory.ARTIFACT_ENCHANTMENT_REMOVAL: CategorySpec(
        name="Artifact/Enchantment Removal",
        description="Remove artifacts and enchantments",
        target=3,
        efficient_cmc=2,
        excellent_cmc=2.5,
        good_cmc=3.5,
    ),
}

# Category -> (curated role, classifier tag)
_CATEGORY_SIGNALS: dict[InteractionCategory, tuple[CardRole, str]] = {
    InteractionCategory.SPOT_REMOVAL: (CardRole.SPOT_REMOVAL, "spot_removal"),
    InteractionCategory.BOARD_WIPES: (CardRole.BOARD_WIPE, "board_wipe"),
    InteractionCategory.COUNTERSPELLS: (CardRole.COUNTERSPELL, "counterspell"),
    InteractionCategory.PROTECTION: (CardRole.PROTECTION, "protection"),
    InteractionCategory.GRAVEYARD_HATE: (CardRole.GRAVEYARD_HATE, "graveyard_hate"),
    InteractionCategory.ARTIFACT_ENCHANTMENT_REMOVAL: (
        CardRole.ARTIFACT_ENCHANTMENT_REMOVAL,
        "artifact_enchantment_removal",
    ),
}

# Color -> example cards, per category. Colorless entries use "C".
_SUGGESTION_TABLE: dict[InteractionCategory, dict[str, tuple[str, ...]]] = {
    InteractionCategory.SPOT_REMOVAL: {
        "W": ("Swords to Plowshares", "Path to Exile", "Generous Gift"),
        "G": ("Beast Within", "Generous Gift"),
        "B": ("Murder", "Hero's Downfall", "Deadly Rollick"),
        "R": ("Chaos Warp", "Abrade"),
    },
    InteractionCategory.BOARD_WIPES: {
        "W": ("Wrath of God", "Austere Command", "Vanquish the Horde"),
        "B": ("Damnation", "Toxic Deluge", "Crux of Fate"),
        "U": ("Cyclonic Rift", "Flood of Tears"),
        "R": ("Blasphemous Act", "Chain Reaction"),
    },
    InteractionCategory.COUNTERSPELLS: {
        "U": ("Counterspell", "Swan Song", "Arcane Denial", "Negate"),
    },
    InteractionCategory.PROTECTION: {
        "G": ("Heroic Intervention", "Wrap in Vigor"),
        "W": ("Teferi's Protection", "Boros Charm", "Flawless Maneuver"),
    },
    InteractionCategory.GRAVEYARD_HATE: {
        "C": ("Bojuka Bog", "Tormod's Crypt", "Soul-Guide Lantern"),
        "W": ("Rest in Peace",),
        "G": ("Scavenging Ooze",),
    },
    InteractionCategory.ARTIFACT_ENCHANTMENT_REMOVAL: {
        "G": ("Nature's Claim", "Reclamation Sage", "Caustic Caterpillar"),
        "W": ("Disenchant",),
    },
}


def _in_category(
    category: InteractionCategory,
    name: str,
    tags: frozenset[str],
) -> bool:
    role, tag = _CATEGORY_SIGNALS[category]
    return has_role(name, role) or tag in tags


def analyze_interaction(
    decklist: DecklistInput,
    classifier: CardClassifier | None = None,
) -> InteractionAnalysis:
    """Sort the deck's interaction into the six categories. A card may land in several."""
    cards = ensure_decklist(decklist)
    classifier = resolve_classifier(classifier)
    analysis = InteractionAnalysis(
        cards={category: [] for category in CATEGORIES},
        deck_size=len(cards),
    )

    for card in cards:
        tags = classifier.tags(card)
        for category, spec in CATEGORIES.items():
            if not _in_category(category, card.name, tags):
                continue
            quality = "high" if card.cmc <= spec.efficient_cmc else "medium"
            analysis.cards[category].append(
                InteractionCard(name=card.name, cmc=card.cmc, quality=quality)
            )
    return analysis


def interaction_rating(score: int) -> str:
    if score >= 8:
        return "excellent"
    if score >= 6:
        return "good"
    if score >= 4:
        return "adequate"
    return "insufficient"


def category_score(actual: int, target: int) -> float:
    """min(actual / target, 1.5) * 10"""
    return min(ratio(actual, target), OVERSHOOT_CAP) * 10


def score_interaction_package(
    decklist: DecklistInput,
    classifier: CardClassifier | None = None,
) -> InteractionScore:
    """
    Overall interaction score.

    Category scores are summed and divided by the 10-per-category maximum,
    then scaled to 1-10. An empty decklist scores 0.
    """
    analysis = analyze_interaction(decklist, classifier)
    scores = {
        category: category_score(analysis.count(category), spec.target)
        for category, spec in CATEGORIES.items()
    }

    if analysis.deck_size == 0:
        score = 0
    else:
        raw = round_half_up(sum(scores.values()) / (10 * len(CATEGORIES)) * 10)
        score = int(clamp(raw, 1, 10))

    return InteractionScore(
        score=score,
        total=analysis.total,
        rating=interaction_rating(score),
        breakdown=analysis.breakdown,
        category_scores=scores,
    )


def _severity(deficit: int) -> str:
    if deficit >= 3:
        return "high"
    if deficit >= 2:
        return "medium"
    return "low"


def identify_interaction_gaps(
    decklist: DecklistInput,
    classifier: CardClassifier | None = None,
) -> list[InteractionGap]:
    """Categories below target, largest deficit first."""
    analysis = analyze_interaction(decklist, classifier)
    gaps: list[InteractionGap] = []
    for category, spec in CATEGORIES.items():
        actual = analysis.count(category)
        if actual >= spec.target:
            continue
        deficit = spec.target - actual
        gaps.append(
            InteractionGap(
                category=category,
                name=spec.name,
                current=actual,
                target=spec.target,
                deficit=deficit,
                severity=_severity(deficit),
                description=spec.description,
            )
        )
    gaps.sort(key=lambda g: g.deficit, reverse=True)
    return gaps


def _examples_for(category: InteractionCategory, colors: frozenset[str]) -> list[str]:
    table = _SUGGESTION_TABLE.get(category, {})
    examples: list[str] = []
    for color in ("C", *COLOR_ORDER):
        if color != "C" and color not in colors:
            continue
        for name in table.get(color, ()):
            if name not in examples:
                examples.append(name)
    return examples


def suggest_interaction(
    decklist: DecklistInput,
    colors: Iterable[str] | None = None,
    classifier: CardClassifier | None = None,
) -> list[InteractionSuggestion]:
    """
    Color-appropriate interaction for each gap.

    Args:
        decklist: Current deck
        colors: Color identity; defaults to the deck's own
        classifier: Oracle-text classifier

    Returns:
        Up to five suggestions, largest deficit first
    """
    cards = ensure_decklist(decklist)
    palette = ensure_colors(colors) if colors is not None else compute_color_identity(cards)
    owned = {card.key for card in cards}

    suggestions: list[InteractionSuggestion] = []
    for gap in identify_interaction_gaps(cards, classifier):
        examples = [
            e for e in _examples_for(gap.category, palette) if normalize_name(e) not in owned
        ]
        if not examples:
            continue
        suggestions.append(
            InteractionSuggestion(
                category=gap.category,
                name=gap.name,
                deficit=gap.deficit,
                severity=gap.severity,
                suggestions=tuple(examples[:MAX_EXAMPLES]),
                reason=f"Need {gap.deficit} more {gap.name.lower()}",
            )
        )
    return suggestions[:MAX_SUGGESTIONS]


def _efficiency(cards: list[InteractionCard], spec: CategorySpec) -> CategoryEfficiency:
    avg = ratio(sum(c.cmc for c in cards), len(cards))
    if avg <= spec.excellent_cmc:
        quality = "excellent"
    elif avg <= spec.good_cmc:
        quality = "good"
    else:
        quality = "poor"
    return CategoryEfficiency(
        count=len(cards),
        average_cmc=round(avg, 2),
        efficient=sum(1 for c in cards if c.cmc <= spec.efficient_cmc),
        quality=quality,
    )


def evaluate_removal_quality(
    decklist: DecklistInput,
    classifier: CardClassifier | None = None,
) -> RemovalQuality:
    """Per-category mana efficiency plus an overall efficient share."""
    analysis = analyze_interaction(decklist, classifier)
    per_category = {
        category: _efficiency(analysis.cards[category], spec)
        for category, spec in CATEGORIES.items()
    }

    efficient = sum(e.efficient for e in per_category.values())
    total = sum(e.count for e in per_category.values())
    share = efficient / max(total, 1)

    if share >= 0.6:
        rating = "excellent"
    elif share >= 0.4:
        rating = "good"
    elif share >= 0.2:
        rating = "adequate"
    else:
        rating = "poor"

    return RemovalQuality(
        categories=per_category,
        overall_efficiency=round(share * 100, 1),
        rating=rating,
    )


def get_interaction_report(
    decklist: DecklistInput,
    colors: Iterable[str] | None = None,
    classifier: CardClassifier | None = None,
) -> InteractionReport:
    cards = ensure_decklist(decklist)
    score = score_interaction_package(cards, classifier)
    return InteractionReport(
        total=score.total,
        score=score.score,
        rating=score.rating,
        breakdown=score.breakdown,
        quality=evaluate_removal_quality(cards, classifier),
        gaps=identify_interaction_gaps(cards, classifier),
        suggestions=suggest_interaction(cards, colors, classifier),
    )

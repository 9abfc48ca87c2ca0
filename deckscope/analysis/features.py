"""
Deck feature extraction.

Turns a decklist into a DeckFeatureVector: color identity, average CMC,
type histogram, theme tags and card frequency. Extraction is pure and
order-insensitive, so the same cards always give the same vector.
"""

import logging
from collections import Counter
from collections.abc import Sequence
from types import MappingProxyType

from deckscope.analysis.classifier import CardClassifier, resolve_classifier
from deckscope.analysis.scoring import average_cmc
from deckscope.models.card import CardStub, DecklistInput, ensure_decklist
from deckscope.models.features import DeckFeatureVector

logger = logging.getLogger(__name__)

# Tribe keywords searched in type lines
TRIBES: tuple[str, ...] = (
    "elf",
    "goblin",
    "zombie",
    "vampire",
    "dragon",
    "wizard",
    "merfolk",
    "soldier",
)

# Theme thresholds (fixed, not learned)
TRIBAL_THRESHOLD = 10
WHEELS_THRESHOLD = 3
TOKENS_THRESHOLD = 10
SUPERFRIENDS_THRESHOLD = 10
COUNTERS_THRESHOLD = 8
ARISTOCRATS_THRESHOLD = 8


def compute_color_identity(cards: Sequence[CardStub]) -> frozenset[str]:
    """
    Union of the colors of every non-land card.

    Lands contribute no color. A commander passed as part of the decklist is
    a non-land card, so its colors are always included.
    """
    colors: set[str] = set()
    for card in cards:
        if not card.is_land:
            colors.update(card.colors)
    return frozenset(colors)


def type_histogram(cards: Sequence[CardStub]) -> dict[str, int]:
    """Copies per primary type token."""
    return dict(Counter(card.primary_type for card in cards))


def detect_themes(
    decklist: DecklistInput,
    classifier: CardClassifier | None = None,
) -> frozenset[str]:
    """
    Detect deck themes by threshold rules.

    Args:
        decklist: Cards to inspect
        classifier: Tags token makers, counters and sacrifice cards

    Returns:
        Theme tags such as "tribal_elf", "wheels" or "superfriends"
    """
    cards = ensure_decklist(decklist)
    classifier = resolve_classifier(classifier)

    names = [card.name.lower() for card in cards]
    type_lines = [card.type_line.lower() for card in cards]
    tags = [classifier.tags(card) for card in cards]

    themes: set[str] = set()
    for tribe in TRIBES:
        if sum(1 for t in type_lines if tribe in t) >= TRIBAL_THRESHOLD:
            themes.add(f"tribal_{tribe}")

    if sum(1 for n in names if "wheel" in n) >= WHEELS_THRESHOLD:
        themes.add("wheels")

    token_cards = sum(
        1 for n, t in zip(names, tags, strict=True) if "token" in n or "token_maker" in t
    )
    if token_cards >= TOKENS_THRESHOLD:
        themes.add("tokens")

    if sum(1 for t in type_lines if "planeswalker" in t) >= SUPERFRIENDS_THRESHOLD:
        themes.add("superfriends")

    counter_cards = sum(
        1
        for n, t in zip(names, tags, strict=True)
        if "counter" in n or "+1/+1" in n or "counters" in t
    )
    if counter_cards >= COUNTERS_THRESHOLD:
        themes.add("counters")

    sacrifice_cards = sum(
        1
        for n, t in zip(names, tags, strict=True)
        if "sacrifice" in n or "death" in n or "aristocrats" in t
    )
    if sacrifice_cards >= ARISTOCRATS_THRESHOLD:
        themes.add("aristocrats")

    return frozenset(themes)


def extract_deck_features(
    decklist: DecklistInput,
    classifier: CardClassifier | None = None,
) -> DeckFeatureVector:
    """
    Build the feature vector for a decklist.

    An empty or absent decklist yields a zeroed vector.
    """
    cards = ensure_decklist(decklist)
    if not cards:
        return DeckFeatureVector()

    features = DeckFeatureVector(
        color_identity=compute_color_identity(cards),
        average_cmc=round(average_cmc(cards), 2),
        card_type_histogram=MappingProxyType(type_histogram(cards)),
        themes=detect_themes(cards, classifier),
        card_frequency=MappingProxyType(dict(Counter(card.name for card in cards))),
        deck_size=len(cards),
    )
    logger.debug(
        "Extracted features: %d cards, colors=%s, themes=%s",
        features.deck_size,
        features.color_key,
        sorted(features.themes),
    )
    return features

"""Small numeric helpers shared by the analyzers."""

import math
from collections.abc import Iterable

from deckscope.config import HIGH_CONFIDENCE_DECK_SIZE, MEDIUM_CONFIDENCE_DECK_SIZE
from deckscope.models.card import CardStub
from deckscope.models.power import Confidence


def round_half_up(value: float) -> int:
    """Round to the nearest integer with .5 going up (2.5 -> 3, not 2)."""
    return math.floor(value + 0.5)


def clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def ratio(numerator: float, denominator: float, default: float = 0.0) -> float:
    """Division guarded against an empty denominator."""
    if not denominator:
        return default
    return numerator / denominator


def non_land_cards(cards: Iterable[CardStub]) -> list[CardStub]:
    return [card for card in cards if not card.is_land]


def average_cmc(cards: Iterable[CardStub]) -> float:
    """Mean CMC over non-land cards; 0 when there are none."""
    spells = non_land_cards(cards)
    return ratio(sum(card.cmc for card in spells), len(spells))


def confidence_for(deck_size: int) -> Confidence:
    if deck_size >= HIGH_CONFIDENCE_DECK_SIZE:
        return Confidence.HIGH
    if deck_size >= MEDIUM_CONFIDENCE_DECK_SIZE:
        return Confidence.MEDIUM
    return Confidence.LOW


def percentage(part: float, whole: float) -> float:
    """part/whole as a percentage with one decimal."""
    return round(ratio(part, whole) * 100, 1)

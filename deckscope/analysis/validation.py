"""
Commander deck validation.

Checks deck size, the singleton rule, the ban list and color identity. Data
problems are reported as errors or warnings, never raised.
"""

import logging

from deckscope.config import DECK_SIZE
from deckscope.knowledge.rules import (
    MAX_RECOMMENDED_LANDS,
    MIN_RECOMMENDED_LANDS,
    is_card_banned,
)
from deckscope.models.card import CardStub, Deck, sort_colors
from deckscope.models.failure import InvalidInputError
from deckscope.models.validation import DeckStats, ValidationResult

logger = logging.getLogger(__name__)


def deck_stats(cards: list[CardStub]) -> DeckStats:
    """Type counts; a card counts once per type it has."""
    return DeckStats(
        total_cards=len(cards),
        lands=sum(1 for c in cards if c.has_type("land")),
        creatures=sum(1 for c in cards if c.has_type("creature")),
        instants=sum(1 for c in cards if c.has_type("instant")),
        sorceries=sum(1 for c in cards if c.has_type("sorcery")),
        enchantments=sum(1 for c in cards if c.has_type("enchantment")),
        artifacts=sum(1 for c in cards if c.has_type("artifact")),
        planeswalkers=sum(1 for c in cards if c.has_type("planeswalker")),
    )


def _duplicates(cards: list[CardStub]) -> dict[str, int]:
    counts: dict[str, int] = {}
    names: dict[str, str] = {}
    for card in cards:
        if card.is_basic_land:
            continue
        counts[card.key] = counts.get(card.key, 0) + 1
        names.setdefault(card.key, card.name)
    return {names[key]: count for key, count in counts.items() if count > 1}


def validate_deck(deck: Deck) -> ValidationResult:
    """
    Check a deck against the Commander format rules.

    Args:
        deck: Deck with its commander set

    Returns:
        ValidationResult; `valid` is False when any error was found

    Raises:
        InvalidInputError: If `deck` is not a Deck
    """
    if not isinstance(deck, Deck):
        raise InvalidInputError("deck", "a Deck", deck)

    cards = deck.cards
    result = ValidationResult(stats=deck_stats(cards))

    if len(cards) != DECK_SIZE:
        result.errors.append(
            f"Deck must be exactly {DECK_SIZE} cards (including commander). "
            f"Current: {len(cards)}"
        )

    result.banned_cards = [card.name for card in cards if is_card_banned(card.name)]
    if result.banned_cards:
        result.errors.append(f"Banned cards detected: {', '.join(result.banned_cards)}")

    result.duplicates = _duplicates(cards)
    if result.duplicates:
        listed = ", ".join(f"{name} ({count}x)" for name, count in result.duplicates.items())
        result.errors.append(f"Singleton violation - duplicate cards: {listed}")

    if deck.commander is None:
        result.warnings.append("No commander set; color identity was not checked")
    else:
        identity = deck.commander.colors
        commander_colors = "".join(sort_colors(identity))
        for card in deck.main_deck:
            if card.colors <= identity:
                continue
            result.off_color_cards.append(card.name)
            result.errors.append(
                f"{card.name}: Color identity {''.join(sort_colors(card.colors))} "
                f"not valid for commander {commander_colors}"
            )

    lands = result.stats.lands
    if lands < MIN_RECOMMENDED_LANDS:
        result.warnings.append(f"Low land count ({lands}). Recommended: 35-38")
    elif lands > MAX_RECOMMENDED_LANDS:
        result.warnings.append(f"High land count ({lands}). Recommended: 35-38")

    stats = result.stats
    result.info = [
        f"Total cards: {stats.total_cards}",
        f"Lands: {stats.lands}",
        f"Creatures: {stats.creatures}",
        f"Instants: {stats.instants}",
        f"Sorceries: {stats.sorceries}",
    ]

    logger.debug(
        "Validated %s: %d errors, %d warnings",
        deck.name or "deck",
        len(result.errors),
        len(result.warnings),
    )
    return result

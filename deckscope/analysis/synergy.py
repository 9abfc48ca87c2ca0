"""
Synergy and combo detection.

Walks the card knowledge table for every card in a deck. Literal partners
present in the deck become synergy pairs. Combo definitions attached to a
present card fire only when every piece is satisfied at once; wildcard
pieces are resolved through PartnerSpec.matches over the whole deck.
"""

import logging
from collections import Counter
from collections.abc import Sequence

from deckscope.analysis.classifier import CardClassifier, resolve_classifier
from deckscope.analysis.scoring import round_half_up
from deckscope.knowledge.cards import get_synergy_record
from deckscope.models.card import (
    CardStub,
    DecklistInput,
    ensure_decklist,
    normalize_name,
    unique_cards,
)
from deckscope.models.synergy import (
    CategoryCount,
    Combo,
    ComboDefinition,
    ComboKind,
    SynergyCategory,
    SynergyPair,
    SynergyScore,
    SynergySuggestion,
)

logger = logging.getLogger(__name__)

# pairs / deck size is multiplied by this before capping at 10
SYNERGY_SCALE = 20


def _pieces_present(
    definition: ComboDefinition,
    main_card: CardStub,
    cards: Sequence[CardStub],
    classifier: CardClassifier,
) -> bool:
    """True when every piece is matched by some card other than the main card."""
    others = [card for card in cards if card.key != main_card.key]
    return all(
        any(piece.matches(card, classifier) for card in others) for piece in definition.pieces
    )


def detect_combos(
    decklist: DecklistInput,
    classifier: CardClassifier | None = None,
    kinds: frozenset[ComboKind] | None = None,
) -> list[Combo]:
    """
    Every catalogued combo whose pieces are all in the deck.

    Args:
        decklist: Cards to inspect
        classifier: Resolves AnyWithTag pieces
        kinds: Restrict to these combo kinds (default: all)

    Returns:
        One Combo per satisfied definition, in decklist order
    """
    cards = unique_cards(ensure_decklist(decklist))
    classifier = resolve_classifier(classifier)

    combos: list[Combo] = []
    for card in cards:
        record = get_synergy_record(card.name)
        if record is None:
            continue
        for definition in record.combos:
            if kinds is not None and definition.kind not in kinds:
                continue
            if not _pieces_present(definition, card, cards, classifier):
                continue
            combos.append(
                Combo(
                    main_card=card.name,
                    pieces=tuple(definition.labels),
                    description=definition.description,
                    type=definition.win_type,
                    kind=definition.kind,
                    categories=tuple(c.value for c in record.categories),
                )
            )
    return combos


def detect_infinite_combos(
    decklist: DecklistInput,
    classifier: CardClassifier | None = None,
) -> list[Combo]:
    """Infinite combos fully present in the deck."""
    return detect_combos(decklist, classifier, kinds=frozenset({ComboKind.INFINITE}))


def find_synergy_pairs(
    decklist: DecklistInput,
    classifier: CardClassifier | None = None,
) -> list[SynergyPair]:
    """
    Synergy pairs present in a deck.

    Only literal partners form pairs; a partnership listed on both cards is
    reported once. Each satisfied combo adds one more pair whose second
    member is the joined piece labels.
    """
    cards = unique_cards(ensure_decklist(decklist))
    present = {card.key: card for card in cards}

    pairs: list[SynergyPair] = []
    seen: set[frozenset[str]] = set()
    for card in cards:
        record = get_synergy_record(card.name)
        if record is None:
            continue
        for partner_name in record.literal_partners:
            other = present.get(normalize_name(partner_name))
            if other is None or other.key == card.key:
                continue
            pair_key = frozenset({card.key, other.key})
            if pair_key in seen:
                continue
            seen.add(pair_key)
            pairs.append(
                SynergyPair(
                    card1=card.name,
                    card2=other.name,
                    categories=tuple(c.value for c in record.categories),
                    description=record.description,
                )
            )

    for combo in detect_combos(cards, classifier):
        pairs.append(
            SynergyPair(
                card1=combo.main_card,
                card2=" + ".join(combo.pieces),
                categories=(SynergyCategory.COMBO.value,),
                description=combo.description,
                combo_kind=combo.kind,
            )
        )
    return pairs


def synergy_rating(score: int) -> str:
    if score >= 8:
        return "Excellent"
    if score >= 6:
        return "Good"
    if score >= 4:
        return "Moderate"
    return "Low"


def calculate_synergy_score(
    decklist: DecklistInput,
    classifier: CardClassifier | None = None,
) -> SynergyScore:
    """
    Deck synergy on a 0-10 scale.

    score = min(10, round(pairs / max(1, deck size) * 20))
    """
    cards = ensure_decklist(decklist)
    pairs = find_synergy_pairs(cards, classifier)

    breakdown: Counter[str] = Counter()
    for pair in pairs:
        breakdown.update(pair.categories)

    deck_size = len(cards)
    score = min(10, round_half_up(len(pairs) / max(1, deck_size) * SYNERGY_SCALE))
    return SynergyScore(
        score=score,
        total_pairs=len(pairs),
        deck_size=deck_size,
        category_breakdown=dict(breakdown),
        rating=synergy_rating(score),
        analysis=f"Found {len(pairs)} synergy pairs across {deck_size} cards",
    )


def suggest_synergy_cards(decklist: DecklistInput, count: int = 10) -> list[SynergySuggestion]:
    """
    Catalogued partners of the deck's cards that the deck does not run.

    Each owned card that lists a partner adds its power multiplier to that
    partner's score.
    """
    cards = unique_cards(ensure_decklist(decklist))
    owned = {card.key for card in cards}

    suggestions: dict[str, SynergySuggestion] = {}
    for card in cards:
        record = get_synergy_record(card.name)
        if record is None:
            continue
        for partner_name in record.literal_partners:
            key = normalize_name(partner_name)
            if key in owned:
                continue
            suggestion = suggestions.setdefault(
                key, SynergySuggestion(card=partner_name, score=0.0)
            )
            suggestion.reasons.append(f"Synergizes with {card.name}")
            for category in record.categories:
                if category.value not in suggestion.categories:
                    suggestion.categories.append(category.value)
            suggestion.score += record.power_multiplier

    ranked = sorted(suggestions.values(), key=lambda s: s.score, reverse=True)
    return ranked[: max(count, 0)]


def get_deck_synergy_categories(decklist: DecklistInput) -> list[CategoryCount]:
    """Synergy categories of the deck's catalogued cards, most common first."""
    counts: Counter[str] = Counter()
    for card in unique_cards(ensure_decklist(decklist)):
        record = get_synergy_record(card.name)
        if record is None:
            continue
        counts.update(category.value for category in record.categories)
    return [CategoryCount(category=c, count=n) for c, n in counts.most_common()]

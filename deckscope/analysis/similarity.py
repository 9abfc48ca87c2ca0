"""
Deck similarity.

Scores two decks on five weighted signals (colors, average CMC, type mix,
themes, shared cards) and runs nearest-neighbour search over a corpus. The
neighbour set feeds card recommendations: every card the neighbours play and
the target does not is scored by the similarity of the decks that play it.
"""

import logging
from collections.abc import Iterable, Mapping

from deckscope.analysis.classifier import CardClassifier, resolve_classifier
from deckscope.analysis.features import extract_deck_features
from deckscope.config import (
    AVERAGE_CMC_WEIGHT,
    CARD_TYPE_WEIGHT,
    CMC_CLOSENESS_SPAN,
    COLOR_IDENTITY_WEIGHT,
    MAX_SOURCE_DECKS,
    SHARED_CARD_WEIGHT,
    THEME_WEIGHT,
    settings,
)
from deckscope.models.card import (
    BASIC_LAND_NAMES,
    DecklistInput,
    ensure_decklist,
    normalize_name,
)
from deckscope.models.failure import InvalidInputError
from deckscope.models.features import CorpusDeck, DeckFeatureVector, SimilarityResult
from deckscope.models.recommendation import Recommendation, SourceDeck

logger = logging.getLogger(__name__)


def jaccard(a: Iterable[str], b: Iterable[str]) -> float:
    """
    Jaccard index of two sets.

    Two empty sets are identical, so they score 1.0.
    """
    left, right = set(a), set(b)
    union = left | right
    if not union:
        return 1.0
    return len(left & right) / len(union)


def cmc_closeness(a: float, b: float) -> float:
    return max(0.0, 1.0 - abs(a - b) / CMC_CLOSENESS_SPAN)


def type_overlap(a: Mapping[str, int], b: Mapping[str, int]) -> float:
    """Per-type min/max ratio averaged over every type present in either deck."""
    types = set(a) | set(b)
    if not types:
        return 1.0
    total = 0.0
    for type_name in types:
        left, right = a.get(type_name, 0), b.get(type_name, 0)
        largest = max(left, right)
        if largest > 0:
            total += min(left, right) / largest
    return total / len(types)


def _nonbasic_names(frequency: Mapping[str, int]) -> set[str]:
    keys = {normalize_name(name) for name in frequency}
    return keys - BASIC_LAND_NAMES


def calculate_deck_similarity(a: DeckFeatureVector, b: DeckFeatureVector) -> float:
    """
    Weighted similarity of two feature vectors, in [0, 1], three decimals.

    Every component is symmetric, so the score is too.
    """
    score = (
        COLOR_IDENTITY_WEIGHT * jaccard(a.color_identity, b.color_identity)
        + AVERAGE_CMC_WEIGHT * cmc_closeness(a.average_cmc, b.average_cmc)
        + CARD_TYPE_WEIGHT * type_overlap(a.card_type_histogram, b.card_type_histogram)
        + THEME_WEIGHT * jaccard(a.themes, b.themes)
        + SHARED_CARD_WEIGHT
        * jaccard(_nonbasic_names(a.card_frequency), _nonbasic_names(b.card_frequency))
    )
    return round(min(1.0, max(0.0, score)), 3)


def ensure_corpus(corpus: Iterable[CorpusDeck] | None) -> list[CorpusDeck]:
    if corpus is None:
        return []
    if isinstance(corpus, (str, bytes, Mapping)) or not isinstance(corpus, Iterable):
        raise InvalidInputError("corpus", "a sequence of CorpusDeck", corpus)
    decks = list(corpus)
    for deck in decks:
        if not isinstance(deck, CorpusDeck):
            raise InvalidInputError("corpus element", "a CorpusDeck", deck)
    return decks


def find_similar_decks(
    target: DecklistInput,
    corpus: Iterable[CorpusDeck] | None,
    limit: int | None = None,
    threshold: float | None = None,
    classifier: CardClassifier | None = None,
) -> list[SimilarityResult]:
    """
    Nearest neighbours of a decklist within a corpus.

    Args:
        target: Deck to compare
        corpus: Candidate decks
        limit: Maximum results (defaults to settings.similar_deck_limit)
        threshold: Scores at or below this are dropped
            (defaults to settings.similarity_threshold)
        classifier: Passed through to feature extraction

    Returns:
        Results sorted by similarity, highest first
    """
    cards = ensure_decklist(target, "target")
    decks = ensure_corpus(corpus)
    limit = settings.similar_deck_limit if limit is None else limit
    threshold = settings.similarity_threshold if threshold is None else threshold

    target_features = extract_deck_features(cards, classifier)
    results: list[SimilarityResult] = []
    for deck in decks:
        features = extract_deck_features(deck.decklist, classifier)
        similarity = calculate_deck_similarity(target_features, features)
        if similarity <= threshold:
            continue
        results.append(
            SimilarityResult(
                deck=deck,
                similarity=similarity,
                matched_themes=tuple(sorted(features.themes & target_features.themes)),
                color_match=features.color_identity == target_features.color_identity,
            )
        )

    results.sort(key=lambda r: r.similarity, reverse=True)
    logger.debug("Found %d similar decks out of %d", len(results), len(decks))
    return results[: max(limit, 0)]


def recommend_from_similar_decks(
    target: DecklistInput,
    corpus: Iterable[CorpusDeck] | None,
    count: int = 10,
    classifier: CardClassifier | None = None,
) -> list[Recommendation]:
    """
    Rank cards played by neighbour decks that the target lacks.

    Each appearance adds the neighbour's similarity to the card's score.
    Basic lands and cards already in the target are skipped. Candidates carry
    their classifier tags as categories.
    """
    cards = ensure_decklist(target, "target")
    classifier = resolve_classifier(classifier)
    neighbours = find_similar_decks(
        cards, corpus, limit=settings.neighbor_pool_size, classifier=classifier
    )
    owned = {card.key for card in cards}

    candidates: dict[str, Recommendation] = {}
    for result in neighbours:
        seen_in_deck: set[str] = set()
        for card in result.deck.decklist:
            if card.key in owned or card.is_basic_land or card.key in seen_in_deck:
                continue
            seen_in_deck.add(card.key)

            rec = candidates.get(card.key)
            if rec is None:
                rec = Recommendation(
                    card=card.name,
                    score=0.0,
                    base_score=0.0,
                    type_line=card.type_line,
                    cmc=card.cmc,
                    categories=sorted(classifier.tags(card)),
                )
                candidates[card.key] = rec
            rec.appearances += 1
            rec.base_score += result.similarity
            rec.score = rec.base_score
            if len(rec.source_decks) < MAX_SOURCE_DECKS:
                rec.source_decks.append(
                    SourceDeck(
                        name=result.deck.name,
                        commander=result.deck.commander,
                        similarity=round(result.similarity, 2),
                    )
                )

    for rec in candidates.values():
        average = rec.base_score / rec.appearances
        rec.reasons.append(
            f"Found in {rec.appearances} similar decks (avg similarity: {average:.2f})"
        )

    ranked = sorted(candidates.values(), key=lambda r: r.score, reverse=True)
    return ranked[: max(count, 0)]

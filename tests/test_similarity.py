"""Tests for deck similarity and neighbour-based recommendations."""

from types import MappingProxyType

import pytest

from deckscope.analysis.features import extract_deck_features
from deckscope.analysis.similarity import (
    calculate_deck_similarity,
    cmc_closeness,
    find_similar_decks,
    jaccard,
    recommend_from_similar_decks,
    type_overlap,
)
from deckscope.models.failure import InvalidInputError
from deckscope.models.features import CorpusDeck, DeckFeatureVector


def _vector(
    colors: str = "",
    cmc: float = 0.0,
    types: dict[str, int] | None = None,
    themes: frozenset[str] = frozenset(),
    frequency: dict[str, int] | None = None,
) -> DeckFeatureVector:
    return DeckFeatureVector(
        color_identity=frozenset(colors),
        average_cmc=cmc,
        card_type_histogram=MappingProxyType(types or {}),
        themes=themes,
        card_frequency=MappingProxyType(frequency or {}),
        deck_size=sum((frequency or {}).values()),
    )


@pytest.fixture
def esper_tokens() -> DeckFeatureVector:
    return _vector("WUB", 3.0, {"Creature": 3, "Instant": 5}, frozenset({"tokens"}), {"Card A": 1})


@pytest.fixture
def esper_wheels() -> DeckFeatureVector:
    return _vector("WUB", 3.0, {"Creature": 5, "Instant": 3}, frozenset({"wheels"}), {"Card B": 1})


# =============================================================================
# COMPONENTS
# =============================================================================


class TestComponents:
    def test_jaccard_of_empty_sets_is_one(self) -> None:
        assert jaccard(set(), set()) == 1.0

    def test_jaccard_disjoint(self) -> None:
        assert jaccard({"W"}, {"U"}) == 0.0

    def test_jaccard_partial(self) -> None:
        assert jaccard({"W", "U"}, {"U", "B"}) == pytest.approx(1 / 3)

    def test_cmc_closeness_floors_at_zero(self) -> None:
        assert cmc_closeness(2.0, 8.0) == 0.0

    def test_cmc_closeness_linear(self) -> None:
        assert cmc_closeness(3.0, 4.0) == pytest.approx(0.8)

    def test_type_overlap_empty(self) -> None:
        assert type_overlap({}, {}) == 1.0

    def test_type_overlap_averages_min_max_ratio(self) -> None:
        assert type_overlap({"Creature": 3, "Instant": 5}, {"Creature": 5, "Instant": 3}) == (
            pytest.approx(0.6)
        )

    def test_type_missing_on_one_side_scores_zero(self) -> None:
        assert type_overlap({"Creature": 4}, {"Instant": 4}) == 0.0


# =============================================================================
# DECK SIMILARITY
# =============================================================================


class TestCalculateDeckSimilarity:
    """Weighted five-signal similarity."""

    def test_same_colors_different_themes(self, esper_tokens, esper_wheels) -> None:
        """0.25 colors + 0.15 cmc + 0.20 * 0.6 types + 0 themes + 0 cards."""
        assert calculate_deck_similarity(esper_tokens, esper_wheels) == pytest.approx(0.52)

    def test_symmetric(self, esper_tokens, esper_wheels) -> None:
        assert calculate_deck_similarity(esper_tokens, esper_wheels) == (
            calculate_deck_similarity(esper_wheels, esper_tokens)
        )

    def test_identical_decks_score_one(self, oracle_deck) -> None:
        features = extract_deck_features(oracle_deck)
        assert calculate_deck_similarity(features, features) == 1.0

    def test_bounded(self, esper_tokens) -> None:
        opposite = _vector("G", 9.0, {"Land": 40}, frozenset({"wheels"}), {"Forest": 40})
        score = calculate_deck_similarity(esper_tokens, opposite)
        assert 0.0 <= score <= 1.0

    def test_basic_lands_ignored_for_shared_cards(self) -> None:
        a = _vector(frequency={"Forest": 30, "Sol Ring": 1})
        b = _vector(frequency={"Forest": 30, "Arcane Signet": 1})
        assert calculate_deck_similarity(a, b) == pytest.approx(0.85)

    def test_three_decimals(self, esper_tokens) -> None:
        other = _vector("WU", 3.3, {"Creature": 7}, frozenset(), {"Card A": 1})
        score = calculate_deck_similarity(esper_tokens, other)
        assert score == round(score, 3)


# =============================================================================
# NEIGHBOUR SEARCH
# =============================================================================


@pytest.fixture
def blue_target(fillers):
    return fillers(10, colors="U")


@pytest.fixture
def corpus(fillers, make_card) -> list[CorpusDeck]:
    twin = CorpusDeck(name="Twin", decklist=fillers(10, colors="U"), commander="Talrand")
    far = CorpusDeck(
        name="Far",
        decklist=[make_card(f"Burn {i}", "Instant", 7, "R") for i in range(10)],
    )
    return [far, twin]


class TestFindSimilarDecks:
    def test_drops_decks_at_or_below_threshold(self, blue_target, corpus) -> None:
        results = find_similar_decks(blue_target, corpus)

        assert [r.deck.name for r in results] == ["Twin"]
        assert results[0].similarity == 1.0
        assert results[0].color_match is True

    def test_threshold_override(self, blue_target, corpus) -> None:
        results = find_similar_decks(blue_target, corpus, threshold=0.2)
        assert [r.deck.name for r in results] == ["Twin", "Far"]
        assert results[1].similarity == pytest.approx(0.25)

    def test_limit(self, blue_target, corpus) -> None:
        results = find_similar_decks(blue_target, corpus, limit=1, threshold=0.0)
        assert len(results) == 1

    def test_empty_corpus(self, blue_target) -> None:
        assert find_similar_decks(blue_target, []) == []
        assert find_similar_decks(blue_target, None) == []

    def test_corpus_must_hold_corpus_decks(self, blue_target) -> None:
        with pytest.raises(InvalidInputError):
            find_similar_decks(blue_target, [{"name": "deck"}])  # type: ignore[list-item]

    def test_corpus_mapping_rejected(self, blue_target) -> None:
        with pytest.raises(InvalidInputError):
            find_similar_decks(blue_target, {"name": "deck"})  # type: ignore[arg-type]


class TestRecommendFromSimilarDecks:
    """Candidates are scored by the similarity of the decks that play them."""

    @pytest.fixture
    def neighbours(self, fillers, make_card, basics) -> list[CorpusDeck]:
        study = make_card("Rhystic Study", "Enchantment", 3, "U")
        remora = make_card("Mystic Remora", "Enchantment", 1, "U")
        return [
            CorpusDeck(
                name="Study Deck",
                decklist=[*fillers(10, colors="U"), study, *basics(1, "Island")],
            ),
            CorpusDeck(
                name="Remora Deck",
                decklist=[*fillers(10, colors="U"), study, remora],
                commander="Talrand",
            ),
        ]

    def test_ranks_by_summed_similarity(self, blue_target, neighbours) -> None:
        recs = recommend_from_similar_decks(blue_target, neighbours)

        assert [r.card for r in recs] == ["Rhystic Study", "Mystic Remora"]
        study = recs[0]
        expected = sum(r.similarity for r in find_similar_decks(blue_target, neighbours))
        assert study.appearances == 2
        assert study.base_score == pytest.approx(expected)
        assert study.score == pytest.approx(study.base_score)
        assert study.reasons[0].startswith("Found in 2 similar decks (avg similarity: ")

    def test_skips_owned_cards_and_basics(self, blue_target, neighbours) -> None:
        names = {r.card for r in recommend_from_similar_decks(blue_target, neighbours)}
        assert "Island" not in names
        assert not any(name.startswith("Filler Card") for name in names)

    def test_source_decks_recorded(self, blue_target, neighbours) -> None:
        recs = recommend_from_similar_decks(blue_target, neighbours)
        remora = next(r for r in recs if r.card == "Mystic Remora")
        assert [s.name for s in remora.source_decks] == ["Remora Deck"]
        assert remora.source_decks[0].commander == "Talrand"

    def test_count(self, blue_target, neighbours) -> None:
        assert len(recommend_from_similar_decks(blue_target, neighbours, count=1)) == 1

    def test_no_neighbours(self, blue_target) -> None:
        assert recommend_from_similar_decks(blue_target, []) == []

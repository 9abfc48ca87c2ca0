"""
Recommendation aggregation.

Candidates come from the decks most similar to the target. They are then
weighted by an optional performance model (win rates by theme and by color
identity, trained on corpus decks that carry game records) and an optional
playgroup profile.
"""

import logging
from collections.abc import Iterable

import pandas as pd

from deckscope.analysis.classifier import CardClassifier
from deckscope.analysis.features import extract_deck_features
from deckscope.analysis.similarity import ensure_corpus, recommend_from_similar_decks
from deckscope.models.card import DecklistInput, ensure_decklist
from deckscope.models.features import CorpusDeck, DeckFeatureVector
from deckscope.models.meta import PlaygroupProfile
from deckscope.models.recommendation import PerformanceGroup, PerformanceModel, Recommendation
from deckscope.services.playgroup_meta import adapt_recommendations

logger = logging.getLogger(__name__)

# Win rate w in a matching group multiplies the score by (1 + w / PERFORMANCE_SCALE)
PERFORMANCE_SCALE = 10

# Candidates fetched per requested recommendation, so reweighting can reorder
CANDIDATE_POOL_FACTOR = 2

# Classifier tag -> playgroup strategy the card answers
STRATEGY_ANSWERS: dict[str, str] = {
    "graveyard_hate": "graveyard",
    "counterspell": "combo",
    "spot_removal": "aggro",
    "board_wipe": "aggro",
    "artifact_enchantment_removal": "stax",
}


# =============================================================================
# PERFORMANCE MODEL
# =============================================================================


def _performance_frame(
    corpus: Iterable[CorpusDeck], classifier: CardClassifier | None
) -> pd.DataFrame:
    rows = []
    for deck in ensure_corpus(corpus):
        if deck.games <= 0:
            logger.warning("Skipping %s: no games recorded", deck.name or "unnamed deck")
            continue
        features = extract_deck_features(deck.decklist, classifier)
        rows.append(
            {
                "deck": deck.name,
                "color_key": features.color_key,
                "themes": sorted(features.themes),
                "win_rate": deck.wins / deck.games,
            }
        )
    return pd.DataFrame(rows, columns=["deck", "color_key", "themes", "win_rate"])


def _group_means(df: pd.DataFrame, column: str) -> dict[str, PerformanceGroup]:
    grouped = df.groupby(column)["win_rate"].agg(["mean", "count"])
    return {
        str(key): PerformanceGroup(
            key=str(key), mean_win_rate=float(row["mean"]), samples=int(row["count"])
        )
        for key, row in grouped.iterrows()
    }


def train_performance_model(
    corpus: Iterable[CorpusDeck],
    classifier: CardClassifier | None = None,
) -> PerformanceModel:
    """
    Mean win rate (wins / games) by theme and by color identity.

    Decks without games are skipped with a warning. A deck counts toward
    every theme it has.

    Args:
        corpus: Decks with win and game counts
        classifier: Oracle-text classifier used for theme detection

    Returns:
        PerformanceModel; empty when no deck has games
    """
    df = _performance_frame(corpus, classifier)
    if df.empty:
        return PerformanceModel(message="No training data provided")

    themes = df.explode("themes").dropna(subset=["themes"])
    model = PerformanceModel(
        theme_performance=_group_means(themes, "themes"),
        color_performance=_group_means(df, "color_key"),
        average_win_rate=float(df["win_rate"].mean()),
        total_decks=len(df),
        message=f"Trained on {len(df)} decks",
    )
    logger.info(
        "Performance model: %d decks, %d themes, %d color groups",
        model.total_decks,
        len(model.theme_performance),
        len(model.color_performance),
    )
    return model


def performance_boost(features: DeckFeatureVector, model: PerformanceModel | None) -> float:
    """Product of (1 + win_rate / 10) over the target's themes and its color group."""
    boost = 1.0
    if model is None or model.is_empty:
        return boost
    for theme in sorted(features.themes):
        group = model.theme_performance.get(theme)
        if group is not None:
            boost *= 1 + group.mean_win_rate / PERFORMANCE_SCALE
    group = model.color_performance.get(features.color_key)
    if group is not None:
        boost *= 1 + group.mean_win_rate / PERFORMANCE_SCALE
    return boost


# =============================================================================
# AGGREGATION
# =============================================================================


def _rank(recommendations: list[Recommendation], count: int) -> list[Recommendation]:
    recommendations.sort(key=lambda r: r.score, reverse=True)
    return recommendations[: max(count, 0)]


def get_weighted_recommendations(
    target: DecklistInput,
    corpus: Iterable[CorpusDeck] | None,
    model: PerformanceModel | None,
    count: int = 10,
    classifier: CardClassifier | None = None,
) -> list[Recommendation]:
    cards = ensure_decklist(target, "target")
    candidates = recommend_from_similar_decks(
        cards, corpus, count * CANDIDATE_POOL_FACTOR, classifier
    )
    boost = performance_boost(extract_deck_features(cards, classifier), model)
    if boost != 1.0:
        for rec in candidates:
            rec.apply_boost(boost, f"Performance boost x{boost:.2f} for similar decks")
    return _rank(candidates, count)


def _add_strategy_answers(rec: Recommendation) -> None:
    for tag, strategy in STRATEGY_ANSWERS.items():
        if tag in rec.categories and strategy not in rec.categories:
            rec.categories.append(strategy)


def recommend_cards(
    target: DecklistInput,
    corpus: Iterable[CorpusDeck] | None,
    count: int = 10,
    model: PerformanceModel | None = None,
    profile: PlaygroupProfile | None = None,
    classifier: CardClassifier | None = None,
) -> list[Recommendation]:
    """
    Final ranked card recommendations for a deck.

    Args:
        target: Deck to recommend for
        corpus: Decks to compare against
        count: Number of recommendations
        model: Optional performance model from train_performance_model
        profile: Optional playgroup profile from analyze_playgroup_meta
        classifier: Oracle-text classifier

    Returns:
        Recommendations best first; each carries its base score, the product
        of every multiplier applied and the reasons behind them
    """
    candidates = get_weighted_recommendations(
        target, corpus, model, count * CANDIDATE_POOL_FACTOR, classifier
    )
    for rec in candidates:
        _add_strategy_answers(rec)

    if profile is not None:
        candidates = adapt_recommendations(candidates, profile)

    ranked = _rank(candidates, count)
    logger.info("Recommended %d cards", len(ranked))
    return ranked

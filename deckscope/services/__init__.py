"""
DeckScope services.

Pipelines that combine analyzers: recommendation aggregation, playgroup
meta adaptation and full deck reports.
"""

from deckscope.services.deck_report import build_deck_report, format_deck_report
from deckscope.services.playgroup_meta import (
    GameHistoryStore,
    adapt_recommendations,
    analyze_playgroup_meta,
    get_deck_win_rate,
    suggest_meta_counters,
)
from deckscope.services.recommendations import (
    get_weighted_recommendations,
    recommend_cards,
    train_performance_model,
)

__all__ = [
    "GameHistoryStore",
    "adapt_recommendations",
    "analyze_playgroup_meta",
    "build_deck_report",
    "format_deck_report",
    "get_deck_win_rate",
    "get_weighted_recommendations",
    "recommend_cards",
    "suggest_meta_counters",
    "train_performance_model",
]

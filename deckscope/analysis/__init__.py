"""
Deck analyzers.

Every function here is a pure computation over a decklist snapshot and the
static card knowledge.
"""

from deckscope.analysis.balance import (
    analyze_card_advantage,
    analyze_deck_balance,
    analyze_ramp_package,
    get_ideal_ratios,
    suggest_ratio_improvements,
)
from deckscope.analysis.budget import (
    analyze_budget_distribution,
    calculate_deck_cost,
    find_budget_alternatives,
    optimize_deck_for_budget,
    recommend_budget_tier,
    suggest_with_budget,
)
from deckscope.analysis.classifier import CardClassifier, KeywordClassifier
from deckscope.analysis.curve import (
    analyze_mana_curve,
    calculate_mana_curve,
    compare_curve_to_ideal,
    get_cards_by_cmc,
    get_ideal_curve,
    visualize_mana_curve,
)
from deckscope.analysis.features import detect_themes, extract_deck_features
from deckscope.analysis.interaction import (
    analyze_interaction,
    evaluate_removal_quality,
    get_interaction_report,
    identify_interaction_gaps,
    score_interaction_package,
    suggest_interaction,
)
from deckscope.analysis.mana_base import (
    analyze_mana_requirements,
    calculate_color_distribution,
    calculate_color_sources,
    calculate_land_count,
    calculate_total_mana_sources,
    generate_mana_base,
    recommend_land_count,
)
from deckscope.analysis.power_level import (
    assess_power_level,
    get_power_level_factors,
    suggest_power_level_adjustments,
)
from deckscope.analysis.similarity import (
    calculate_deck_similarity,
    find_similar_decks,
    recommend_from_similar_decks,
)
from deckscope.analysis.synergy import (
    calculate_synergy_score,
    detect_combos,
    detect_infinite_combos,
    find_synergy_pairs,
    get_deck_synergy_categories,
    suggest_synergy_cards,
)
from deckscope.analysis.validation import validate_deck
from deckscope.analysis.win_conditions import (
    assess_win_condition_redundancy,
    detect_win_conditions,
    get_win_condition_stats,
    suggest_win_conditions,
)

__all__ = [
    "CardClassifier",
    "KeywordClassifier",
    "analyze_budget_distribution",
    "analyze_card_advantage",
    "analyze_deck_balance",
    "analyze_interaction",
    "analyze_mana_curve",
    "analyze_mana_requirements",
    "analyze_ramp_package",
    "assess_power_level",
    "assess_win_condition_redundancy",
    "calculate_color_distribution",
    "calculate_color_sources",
    "calculate_deck_cost",
    "calculate_deck_similarity",
    "calculate_land_count",
    "calculate_mana_curve",
    "calculate_synergy_score",
    "calculate_total_mana_sources",
    "compare_curve_to_ideal",
    "detect_combos",
    "detect_infinite_combos",
    "detect_themes",
    "detect_win_conditions",
    "evaluate_removal_quality",
    "extract_deck_features",
    "find_budget_alternatives",
    "find_similar_decks",
    "find_synergy_pairs",
    "generate_mana_base",
    "get_cards_by_cmc",
    "get_deck_synergy_categories",
    "get_ideal_curve",
    "get_ideal_ratios",
    "get_interaction_report",
    "get_power_level_factors",
    "get_win_condition_stats",
    "identify_interaction_gaps",
    "optimize_deck_for_budget",
    "recommend_budget_tier",
    "recommend_from_similar_decks",
    "recommend_land_count",
    "score_interaction_package",
    "suggest_interaction",
    "suggest_power_level_adjustments",
    "suggest_ratio_improvements",
    "suggest_synergy_cards",
    "suggest_win_conditions",
    "suggest_with_budget",
    "validate_deck",
    "visualize_mana_curve",
]

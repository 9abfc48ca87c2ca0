"""
Playgroup meta adaptation.

Game results live in a GameHistoryStore owned by the caller. The store is
append-only and single-writer: a host serving several users keeps one store
per user and serializes `record` calls itself. Every other function here is a
pure transformation over a sequence of results or a profile.
"""

import logging
from collections import Counter
from collections.abc import Iterable, Sequence
from dataclasses import replace
from datetime import UTC, datetime

from deckscope.analysis.scoring import ratio
from deckscope.knowledge.cards import CardRole, cards_with_role, estimate_card_power, has_role
from deckscope.models.card import normalize_name
from deckscope.models.meta import (
    CommanderAppearance,
    DeckWinRate,
    GameOutcome,
    GameResult,
    MetaAnalysis,
    MetaCounter,
    MetaStats,
    PlaygroupProfile,
)
from deckscope.models.recommendation import Recommendation

logger = logging.getLogger(__name__)

# Game length assumed when a result has no turn count
DEFAULT_GAME_TURNS = 10

FREQUENT_COMMANDER_LIMIT = 10
COMMON_STRATEGY_LIMIT = 5

# =============================================================================
# MULTIPLIERS
# =============================================================================

HATED_MULTIPLIER = 0.5
POWER_MATCH_MULTIPLIER = 1.2
POWER_MISMATCH_MULTIPLIER = 0.8
STRATEGY_MULTIPLIER = 1.3
COMBO_META_INTERACTION_MULTIPLIER = 1.4

STRATEGY_KEYWORDS: dict[str, tuple[str, ...]] = {
    "combo": ("combo", "infinite", "win con"),
    "control": ("counter", "removal", "board wipe", "control"),
    "aggro": ("aggro", "combat", "attack", "voltron"),
    "stax": ("stax", "tax", "lock", "denial"),
    "graveyard": ("graveyard", "reanimator", "recursion"),
}

NEGATIVE_SENTIMENT = ("hate", "annoying", "unfun")

INTERACTION_NAME_KEYWORDS = (
    "counter",
    "removal",
    "destroy",
    "exile",
    "bounce",
    "path",
    "swords",
    "wrath",
    "board wipe",
)

_INTERACTION_ROLES = (
    CardRole.STAPLE_INTERACTION,
    CardRole.SPOT_REMOVAL,
    CardRole.BOARD_WIPE,
    CardRole.COUNTERSPELL,
)

_INTERACTION_CATEGORIES = frozenset(
    {"interaction", "removal", "spot_removal", "board_wipe", "counterspell"}
)


# =============================================================================
# GAME HISTORY
# =============================================================================


class GameHistoryStore:
    """Append-only log of game results for one player."""

    def __init__(self, games: Iterable[GameResult] = ()):
        self._games: list[GameResult] = []
        self._ids: set[str] = set()
        self._next_id = 1
        for game in games:
            self.record(game)

    def __len__(self) -> int:
        return len(self._games)

    def record(self, game: GameResult) -> GameResult:
        """
        Append a result and return it with its id and timestamp filled in.

        Results that already carry an id keep it. Generated ids skip any id
        already in the log.
        """
        stored = replace(
            game,
            game_id=game.game_id or self._new_id(),
            recorded_at=game.recorded_at or datetime.now(UTC),
        )
        self._games.append(stored)
        self._ids.add(stored.game_id)
        logger.debug(
            "Recorded %s (%s) as %s", stored.deck_used, stored.result.value, stored.game_id
        )
        return stored

    def _new_id(self) -> str:
        while f"game_{self._next_id}" in self._ids:
            self._next_id += 1
        game_id = f"game_{self._next_id}"
        self._next_id += 1
        return game_id

    def games(self) -> tuple[GameResult, ...]:
        """Snapshot of every recorded result, oldest first."""
        return tuple(self._games)

    def clear(self) -> None:
        self._games.clear()
        self._ids.clear()
        self._next_id = 1

    def deck_win_rate(self, deck_name: str) -> DeckWinRate:
        return get_deck_win_rate(deck_name, self._games)


def _turns(game: GameResult) -> int:
    return game.turns if game.turns else DEFAULT_GAME_TURNS


# =============================================================================
# PROFILE
# =============================================================================


def _power_from_turns(avg_turns: float) -> int:
    if avg_turns <= 5:
        return 9
    if avg_turns <= 7:
        return 8
    if avg_turns <= 10:
        return 7
    if avg_turns <= 12:
        return 6
    return 5


def _game_length(avg_turns: float) -> str:
    if avg_turns <= 6:
        return "short"
    if avg_turns <= 12:
        return "medium"
    return "long"


def _combo_frequency(share: float) -> str:
    if share > 0.6:
        return "high"
    if share > 0.3:
        return "medium"
    return "low"


def _hated_cards(games: Sequence[GameResult]) -> list[str]:
    """Salty cards mentioned in notes that also carry a negative keyword."""
    hated: list[str] = []
    candidates = cards_with_role(CardRole.SALTY)
    for game in games:
        notes = game.notes.lower()
        if not any(word in notes for word in NEGATIVE_SENTIMENT):
            continue
        for card in candidates:
            if card.lower() in notes and card not in hated:
                hated.append(card)
    return hated


def analyze_playgroup_meta(games: Sequence[GameResult] | GameHistoryStore) -> MetaAnalysis:
    """
    Build a playgroup profile from game results.

    Args:
        games: Results to aggregate, or a store to snapshot

    Returns:
        MetaAnalysis; the default profile when there are no games
    """
    if isinstance(games, GameHistoryStore):
        games = games.games()
    if not games:
        return MetaAnalysis(profile=PlaygroupProfile(), message="No game history available")

    avg_turns = sum(_turns(g) for g in games) / len(games)
    power = _power_from_turns(avg_turns)

    commanders = Counter(c for g in games for c in g.opponent_commanders)
    frequent = [
        CommanderAppearance(commander=name, appearances=count)
        for name, count in commanders.most_common(FREQUENT_COMMANDER_LIMIT)
    ]

    strategies: Counter[str] = Counter()
    for game in games:
        notes = game.notes.lower()
        for strategy, keywords in STRATEGY_KEYWORDS.items():
            if any(k in notes for k in keywords):
                strategies[strategy] += 1

    combo_games = sum(1 for g in games if "combo" in g.notes.lower())
    length = _game_length(avg_turns)

    profile = PlaygroupProfile(
        power_level=power,
        common_strategies=[s for s, _ in strategies.most_common(COMMON_STRATEGY_LIMIT)],
        frequent_commanders=frequent,
        hated_cards=_hated_cards(games),
        preferred_game_length=length,
        avg_turns_to_win=round(avg_turns, 1),
        combo_frequency=_combo_frequency(combo_games / len(games)),
        interaction_level="high" if power >= 7 else "medium",
        politics_level="high" if length == "long" else "medium",
    )
    logger.info("Playgroup profile from %d games: power %d", len(games), power)
    return MetaAnalysis(
        profile=profile,
        stats=MetaStats(
            total_games=len(games),
            avg_game_length=round(avg_turns, 1),
            unique_commanders=len(commanders),
        ),
    )


# =============================================================================
# ADAPTATION
# =============================================================================


def is_interaction(recommendation: Recommendation) -> bool:
    name = recommendation.card.lower()
    if any(keyword in name for keyword in INTERACTION_NAME_KEYWORDS):
        return True
    if any(has_role(recommendation.card, role) for role in _INTERACTION_ROLES):
        return True
    return bool(_INTERACTION_CATEGORIES & set(recommendation.categories))


def _adapt(rec: Recommendation, profile: PlaygroupProfile) -> Recommendation:
    adapted = replace(rec, reasons=list(rec.reasons))
    before = adapted.score
    key = normalize_name(rec.card)

    if any(normalize_name(hated) in key for hated in profile.hated_cards):
        adapted.apply_boost(HATED_MULTIPLIER, "Card is disliked in your playgroup")

    card_power = estimate_card_power(rec.card)
    gap = abs(card_power - profile.power_level)
    if gap <= 1:
        adapted.apply_boost(POWER_MATCH_MULTIPLIER, "Matches playgroup power level")
    elif gap > 3:
        direction = "too strong" if card_power > profile.power_level else "too weak"
        adapted.apply_boost(POWER_MISMATCH_MULTIPLIER, f"May be {direction} for your meta")

    if set(profile.common_strategies) & set(rec.categories):
        adapted.apply_boost(STRATEGY_MULTIPLIER, "Counters common strategies in your meta")

    if profile.combo_frequency == "high" and is_interaction(rec):
        adapted.apply_boost(
            COMBO_META_INTERACTION_MULTIPLIER,
            "Extra interaction valuable in combo-heavy meta",
        )

    adapted.score = round(adapted.score, 2)
    if adapted.score > before:
        adapted.meta_relevance = "high"
    elif adapted.score < before:
        adapted.meta_relevance = "low"
    else:
        adapted.meta_relevance = "neutral"
    return adapted


def adapt_recommendations(
    recommendations: Iterable[Recommendation],
    profile: PlaygroupProfile | None = None,
) -> list[Recommendation]:
    """
    Reweight candidates for a playgroup.

    Inputs are not modified; adapted copies are returned, best first.
    """
    profile = profile or PlaygroupProfile()
    adapted = [_adapt(rec, profile) for rec in recommendations]
    adapted.sort(key=lambda r: r.score, reverse=True)
    return adapted


# =============================================================================
# COUNTER TECH
# =============================================================================

_ANTI_COMBO = (
    MetaCounter("Silence", "Prevents combo turns", "Anti-Combo", "high"),
    MetaCounter("Grand Abolisher", "Protects your combo turns", "Anti-Combo", "high"),
    MetaCounter("Rule of Law", "Slows down storm and combo", "Stax", "high"),
)
_FREE_COUNTERS = (
    MetaCounter("Force of Will", "Stops a combo turn without mana", "Free Counter", "high"),
    MetaCounter(
        "Fierce Guardianship", "Free counter with your commander out", "Free Counter", "high"
    ),
    MetaCounter("Pact of Negation", "Protects or stops the win turn", "Free Counter", "high"),
    MetaCounter("Force of Negation", "Free on opponents' turns", "Free Counter", "medium"),
)
_GRAVEYARD_HATE = (
    MetaCounter("Rest in Peace", "Shuts down graveyard strategies", "Graveyard Hate", "high"),
    MetaCounter("Bojuka Bog", "Flexible graveyard hate", "Graveyard Hate", "high"),
    MetaCounter("Scavenging Ooze", "Repeatable graveyard hate", "Graveyard Hate", "medium"),
)
_COMMANDER_HATE = (
    MetaCounter(
        "Darksteel Mutation", "Neutralizes problematic commanders", "Commander Hate", "high"
    ),
    MetaCounter("Song of the Dryads", "Removes commander abilities", "Commander Hate", "high"),
)
_FAST_MANA = (
    MetaCounter("Mana Crypt", "Keeps pace with high-power meta", "Fast Mana", "high"),
    MetaCounter("Jeweled Lotus", "Fast commander deployment", "Fast Mana", "high"),
)
_PROTECTION = (
    MetaCounter(
        "Teferi's Protection", "Ultimate protection in high-interaction meta", "Protection", "high"
    ),
    MetaCounter("Heroic Intervention", "Protects board from removal", "Protection", "high"),
)
_LONG_GAME_DRAW = (
    MetaCounter("Rhystic Study", "Value engine for long games", "Card Draw", "high"),
    MetaCounter("Mystic Remora", "Early game draw", "Card Draw", "medium"),
)


def suggest_meta_counters(
    profile: PlaygroupProfile | None = None, count: int = 10
) -> list[MetaCounter]:
    """Static tech suggestions gated by profile flags."""
    profile = profile or PlaygroupProfile()
    suggestions: list[MetaCounter] = []
    if profile.combo_frequency == "high":
        suggestions.extend(_ANTI_COMBO)
        suggestions.extend(_FREE_COUNTERS)
    if "graveyard" in profile.common_strategies:
        suggestions.extend(_GRAVEYARD_HATE)
    if profile.frequent_commanders:
        suggestions.extend(_COMMANDER_HATE)
    if profile.power_level >= 8:
        suggestions.extend(_FAST_MANA)
    if profile.interaction_level == "high":
        suggestions.extend(_PROTECTION)
    if profile.preferred_game_length == "long":
        suggestions.extend(_LONG_GAME_DRAW)
    return suggestions[:count]


def get_deck_win_rate(deck_name: str, games: Sequence[GameResult]) -> DeckWinRate:
    played = [g for g in games if g.deck_used == deck_name]
    if not played:
        return DeckWinRate(deck_name=deck_name, message="No games found for this deck")

    wins = sum(1 for g in played if g.result is GameOutcome.WIN)
    losses = sum(1 for g in played if g.result is GameOutcome.LOSS)
    return DeckWinRate(
        deck_name=deck_name,
        games_played=len(played),
        wins=wins,
        losses=losses,
        win_rate=round(ratio(wins, len(played)) * 100, 1),
        avg_turns=round(sum(_turns(g) for g in played) / len(played), 1),
    )

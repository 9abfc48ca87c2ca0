"""Playgroup game results and the meta profile derived from them."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum


class GameOutcome(str, Enum):
    WIN = "win"
    LOSS = "loss"
    DRAW = "draw"


@dataclass(frozen=True, slots=True)
class GameResult:
    """
    One recorded game.

    Attributes:
        deck_used: Deck or commander name the player piloted
        result: Outcome for the player
        turns: Game length in turns, None when not recorded
        opponent_commanders: Commanders faced
        notes: Free-text notes, scanned for strategy and sentiment keywords
        game_id: Assigned by GameHistoryStore.record
        recorded_at: Assigned by GameHistoryStore.record
    """

    deck_used: str
    result: GameOutcome
    turns: int | None = None
    opponent_commanders: tuple[str, ...] = ()
    notes: str = ""
    game_id: str = ""
    recorded_at: datetime | None = None


@dataclass(frozen=True, slots=True)
class CommanderAppearance:
    commander: str
    appearances: int


@dataclass
class PlaygroupProfile:
    """Aggregate tendencies of a playgroup. Defaults describe an unknown group."""

    power_level: int = 7
    common_strategies: list[str] = field(default_factory=list)
    frequent_commanders: list[CommanderAppearance] = field(default_factory=list)
    hated_cards: list[str] = field(default_factory=list)
    preferred_game_length: str = "medium"
    avg_turns_to_win: float = 8.0
    combo_frequency: str = "medium"
    interaction_level: str = "medium"
    politics_level: str = "medium"


@dataclass(frozen=True, slots=True)
class MetaStats:
    total_games: int
    avg_game_length: float
    unique_commanders: int


@dataclass
class MetaAnalysis:
    profile: PlaygroupProfile
    stats: MetaStats | None = None
    message: str = ""


@dataclass(frozen=True, slots=True)
class MetaCounter:
    """A tech card suggested against the local meta."""

    name: str
    reason: str
    category: str
    relevance: str


@dataclass(frozen=True, slots=True)
class DeckWinRate:
    deck_name: str
    games_played: int = 0
    wins: int = 0
    losses: int = 0
    win_rate: float = 0.0
    avg_turns: float = 0.0
    message: str = ""

"""Card recommendation records."""

from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class SourceDeck:
    """A neighbour deck that contributed a recommendation."""

    name: str
    commander: str | None
    similarity: float


@dataclass
class Recommendation:
    """
    A ranked candidate card.

    Attributes:
        card: Card name
        score: Final score after every boost
        base_score: Score before boosts (sum of neighbour similarities)
        boost: Product of the multipliers applied to base_score
        appearances: Number of neighbour decks containing the card
        reasons: Human-readable justifications
        source_decks: Up to three contributing neighbour decks
        categories: Functional categories used by meta weighting
        type_line: Type line of the candidate, when known
        cmc: Mana value of the candidate, when known
    """

    card: str
    score: float
    base_score: float
    boost: float = 1.0
    appearances: int = 0
    reasons: list[str] = field(default_factory=list)
    source_decks: list[SourceDeck] = field(default_factory=list)
    categories: list[str] = field(default_factory=list)
    type_line: str = ""
    cmc: float = 0.0
    meta_relevance: str | None = None

    def apply_boost(self, multiplier: float, reason: str | None = None) -> None:
        """Scale the score and record the multiplier."""
        self.boost *= multiplier
        self.score = self.base_score * self.boost
        if reason:
            self.reasons.append(reason)


@dataclass(frozen=True, slots=True)
class PerformanceGroup:
    """Mean win rate of one group with the number of decks behind it."""

    key: str
    mean_win_rate: float
    samples: int


@dataclass
class PerformanceModel:
    """
    Win rates by theme and by color key.

    Means are raw; small groups are not shrunk toward the overall mean, so
    check `samples` before trusting a group.
    """

    theme_performance: dict[str, PerformanceGroup] = field(default_factory=dict)
    color_performance: dict[str, PerformanceGroup] = field(default_factory=dict)
    average_win_rate: float = 0.0
    total_decks: int = 0
    message: str = ""

    @property
    def is_empty(self) -> bool:
        return self.total_decks == 0

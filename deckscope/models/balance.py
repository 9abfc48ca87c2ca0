"""Deck balance records (card draw, ramp, ratios)."""

from dataclasses import dataclass, field, replace


@dataclass(frozen=True, slots=True)
class IdealRatios:
    """Recommended counts per role for an archetype."""

    ramp: int
    draw: int
    interaction: int
    threats: int
    lands: int

    def adjusted(self, **changes: int) -> "IdealRatios":
        return replace(self, **changes)


@dataclass(frozen=True, slots=True)
class BalanceCard:
    name: str
    type_line: str
    cmc: float
    quality: str


@dataclass
class CardAdvantageAnalysis:
    card_draw: list[BalanceCard] = field(default_factory=list)
    impulse_draw: list[BalanceCard] = field(default_factory=list)
    recursion: list[BalanceCard] = field(default_factory=list)
    quality: str = "insufficient"
    rating: int = 0
    percentage: float = 0.0

    @property
    def count(self) -> int:
        return len(self.card_draw) + len(self.impulse_draw) + len(self.recursion)


@dataclass
class RampAnalysis:
    mana_rocks: list[BalanceCard] = field(default_factory=list)
    mana_dorks: list[BalanceCard] = field(default_factory=list)
    land_ramp: list[BalanceCard] = field(default_factory=list)
    cost_reducers: list[BalanceCard] = field(default_factory=list)
    quality: str = "insufficient"
    rating: int = 0
    percentage: float = 0.0

    @property
    def count(self) -> int:
        return (
            len(self.mana_rocks)
            + len(self.mana_dorks)
            + len(self.land_ramp)
            + len(self.cost_reducers)
        )


@dataclass(frozen=True, slots=True)
class RatioSuggestion:
    category: str
    issue: str
    recommendation: str
    severity: str
    examples: tuple[str, ...] = ()


@dataclass
class RatioReport:
    archetype: str
    colors: tuple[str, ...]
    ideal_ratios: IdealRatios
    current_draw: int
    current_ramp: int
    overall_rating: int
    suggestions: list[RatioSuggestion] = field(default_factory=list)


@dataclass
class DeckBalance:
    deck_size: int
    lands: int
    creatures: int
    instants: int
    sorceries: int
    card_draw: CardAdvantageAnalysis
    ramp: RampAnalysis
    lands_percentage: float
    creatures_percentage: float
    spells_percentage: float
    overall_rating: int

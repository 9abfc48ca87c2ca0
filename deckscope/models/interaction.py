"""Interaction analysis records."""

from dataclasses import dataclass, field
from enum import Enum


class InteractionCategory(str, Enum):
    SPOT_REMOVAL = "spot_removal"
    BOARD_WIPES = "board_wipes"
    COUNTERSPELLS = "counterspells"
    PROTECTION = "protection"
    GRAVEYARD_HATE = "graveyard_hate"
    ARTIFACT_ENCHANTMENT_REMOVAL = "artifact_enchantment_removal"


@dataclass(frozen=True, slots=True)
class CategorySpec:
    """Target count and efficiency thresholds for one category."""

    name: str
    description: str
    target: int
    # Cards at or below this CMC count as efficient
    efficient_cmc: float
    # Average CMC at or below these is excellent / good
    excellent_cmc: float
    good_cmc: float


@dataclass(frozen=True, slots=True)
class InteractionCard:
    name: str
    cmc: float
    quality: str


@dataclass
class InteractionAnalysis:
    cards: dict[InteractionCategory, list[InteractionCard]] = field(default_factory=dict)
    deck_size: int = 0

    @property
    def breakdown(self) -> dict[InteractionCategory, int]:
        return {category: len(cards) for category, cards in self.cards.items()}

    @property
    def total(self) -> int:
        return sum(len(cards) for cards in self.cards.values())

    def count(self, category: InteractionCategory) -> int:
        return len(self.cards.get(category, []))


@dataclass
class InteractionScore:
    score: int
    total: int
    rating: str
    breakdown: dict[InteractionCategory, int]
    category_scores: dict[InteractionCategory, float]


@dataclass(frozen=True, slots=True)
class InteractionGap:
    category: InteractionCategory
    name: str
    current: int
    target: int
    deficit: int
    severity: str
    description: str


@dataclass(frozen=True, slots=True)
class InteractionSuggestion:
    category: InteractionCategory
    name: str
    deficit: int
    severity: str
    suggestions: tuple[str, ...]
    reason: str


@dataclass(frozen=True, slots=True)
class CategoryEfficiency:
    count: int
    average_cmc: float
    efficient: int
    quality: str


@dataclass
class RemovalQuality:
    categories: dict[InteractionCategory, CategoryEfficiency]
    overall_efficiency: float
    rating: str


@dataclass
class InteractionReport:
    total: int
    score: int
    rating: str
    breakdown: dict[InteractionCategory, int]
    quality: RemovalQuality
    gaps: list[InteractionGap] = field(default_factory=list)
    suggestions: list[InteractionSuggestion] = field(default_factory=list)

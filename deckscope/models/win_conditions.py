"""Win condition records."""

from dataclasses import dataclass, field
from enum import Enum

from deckscope.models.synergy import WinType


class RedundancyRating(str, Enum):
    """Ordered from worst to best."""

    CRITICAL = "critical"
    POOR = "poor"
    ADEQUATE = "adequate"
    GOOD = "good"
    EXCELLENT = "excellent"

    @property
    def rank(self) -> int:
        return list(RedundancyRating).index(self)


@dataclass(frozen=True, slots=True)
class WinCondition:
    type: WinType
    name: str
    description: str
    cards: tuple[str, ...] = ()


@dataclass
class WinConditionReport:
    found: list[WinCondition] = field(default_factory=list)
    categories: dict[str, int] = field(default_factory=dict)

    @property
    def count(self) -> int:
        return len(self.found)

    @property
    def has_sufficient_wincons(self) -> bool:
        return self.count >= 3


@dataclass
class RedundancyAssessment:
    rating: RedundancyRating
    message: str
    recommendation: str
    total_wincons: int
    unique_types: int
    details: WinConditionReport

    @property
    def has_backup(self) -> bool:
        return self.total_wincons >= 3

    @property
    def diversified(self) -> bool:
        return self.unique_types >= 2


@dataclass(frozen=True, slots=True)
class WinConditionSuggestion:
    name: str
    type: WinType
    reason: str
    synergy: tuple[str, ...] = ()


@dataclass
class WinConditionStats:
    total_wincons: int
    by_type: dict[str, int]
    redundancy: RedundancyRating
    diversified: bool
    recommendation: str
    details: list[WinCondition] = field(default_factory=list)

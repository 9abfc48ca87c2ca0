"""Power level assessment records."""

from dataclasses import dataclass, field
from enum import Enum


class PowerTier(str, Enum):
    CASUAL = "casual"
    FOCUSED = "focused"
    OPTIMIZED = "optimized"
    CEDH = "cedh"


class Confidence(str, Enum):
    """How much of a full deck the result was computed from."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class ManaBaseTier(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    OPTIMAL = "optimal"


@dataclass(frozen=True, slots=True)
class TierInfo:
    """Static description of a power tier."""

    key: PowerTier
    name: str
    score_range: tuple[int, int]
    description: str
    characteristics: dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class ManaBaseAssessment:
    quality: ManaBaseTier
    score: int
    premium_count: int
    total_lands: int
    percentage: float


@dataclass(frozen=True, slots=True)
class PowerLevelFactors:
    """Raw inputs to the power level score."""

    average_cmc: float
    fast_mana_count: int
    tutor_count: int
    interaction_count: int
    combo_count: int
    mana_base: ManaBaseAssessment
    deck_size: int


@dataclass(frozen=True, slots=True)
class FactorScores:
    """Bucketed 0-10 score per factor, before weighting."""

    average_cmc: float = 0.0
    fast_mana: float = 0.0
    tutors: float = 0.0
    interaction: float = 0.0
    mana_base: float = 0.0
    combos: float = 0.0


@dataclass
class PowerLevelAssessment:
    """
    Overall power level.

    score is always an integer in 1..10; factors is None only for an empty
    decklist.
    """

    score: int
    tier: PowerTier
    tier_info: TierInfo
    confidence: Confidence
    factors: PowerLevelFactors | None
    factor_scores: FactorScores
    breakdown: str


@dataclass(frozen=True, slots=True)
class PowerAdjustment:
    category: str
    suggestion: str
    impact: str
    examples: tuple[str, ...] = ()


@dataclass
class PowerAdjustmentPlan:
    current_score: int
    target_score: int
    direction: str
    difference: int
    message: str
    suggestions: list[PowerAdjustment] = field(default_factory=list)

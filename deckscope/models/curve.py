"""Mana curve and mana base records."""

from dataclasses import dataclass, field

# Curve bucket labels, in display order
CURVE_BUCKETS: tuple[str, ...] = ("0", "1", "2", "3", "4", "5", "6", "7+")


def empty_curve() -> dict[str, int]:
    return {bucket: 0 for bucket in CURVE_BUCKETS}


@dataclass(frozen=True, slots=True)
class ExpectedCmc:
    """Average CMC window expected for a strategy."""

    minimum: float
    maximum: float
    optimal: float


@dataclass
class ManaCurve:
    curve: dict[str, int] = field(default_factory=empty_curve)
    average_cmc: float = 0.0
    total_non_land_cards: int = 0


@dataclass(frozen=True, slots=True)
class CurveDeviation:
    """A bucket whose share differs from the ideal by more than the tolerance."""

    bucket: str
    actual_percentage: float
    ideal_percentage: float

    @property
    def difference(self) -> float:
        return round(self.actual_percentage - self.ideal_percentage, 1)


@dataclass
class CurveReport:
    curve: dict[str, int]
    average_cmc: float
    total_non_land_cards: int
    strategy: str
    expected: ExpectedCmc
    recommendations: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    dead_zones: list[int] = field(default_factory=list)
    deviations: list[CurveDeviation] = field(default_factory=list)
    visualization: str = ""


@dataclass(frozen=True, slots=True)
class CurveBucketComparison:
    actual: int
    ideal: int

    @property
    def difference(self) -> int:
        return self.actual - self.ideal


@dataclass
class CurveComparison:
    comparison: dict[str, CurveBucketComparison]
    average_cmc: float
    strategy: str


@dataclass(frozen=True, slots=True)
class ColorSource:
    """Land sources recommended for one color."""

    color: str
    symbols: int
    percentage: int
    min_sources: int
    recommended_sources: int


@dataclass
class ManaBaseRecommendation:
    total_lands: int
    basics: dict[str, int] = field(default_factory=dict)
    duals: list[str] = field(default_factory=list)
    utility: list[str] = field(default_factory=list)
    colorless: list[str] = field(default_factory=list)


@dataclass(frozen=True, slots=True)
class ManaSources:
    lands: int = 0
    rocks: int = 0
    dorks: int = 0
    ramp_spells: int = 0

    @property
    def total(self) -> int:
        return self.lands + self.rocks + self.dorks + self.ramp_spells


@dataclass
class ManaRequirements:
    """Colored-symbol intensity per color, relative to deck size."""

    color_intensity: dict[str, float] = field(default_factory=dict)
    recommendations: list[str] = field(default_factory=list)

from deckscope.models.budget import (
    BudgetDistribution,
    BudgetPlan,
    BudgetReport,
    BudgetTier,
    DeckCost,
    SwapSuggestion,
    TierLimits,
)
from deckscope.models.card import (
    COLOR_ORDER,
    CardStub,
    Deck,
    DeckEntry,
    DecklistInput,
    ensure_colors,
    ensure_decklist,
    normalize_name,
)
from deckscope.models.curve import ColorSource, CurveReport, ManaCurve, ManaSources
from deckscope.models.failure import (
    CardDataError,
    FailureDetail,
    FailureKind,
    InvalidInputError,
    KnownError,
    RecordError,
)
from deckscope.models.features import CorpusDeck, DeckFeatureVector, SimilarityResult
from deckscope.models.interaction import InteractionCategory, InteractionReport
from deckscope.models.meta import GameOutcome, GameResult, MetaAnalysis, PlaygroupProfile
from deckscope.models.power import PowerLevelAssessment, PowerTier
from deckscope.models.recommendation import PerformanceModel, Recommendation
from deckscope.models.report import DeckReport
from deckscope.models.serialization import to_dict
from deckscope.models.synergy import Combo, ComboKind, SynergyScore, WinType
from deckscope.models.validation import ValidationResult
from deckscope.models.win_conditions import WinCondition, WinConditionReport

__all__ = [
    "COLOR_ORDER",
    "BudgetDistribution",
    "BudgetPlan",
    "BudgetReport",
    "BudgetTier",
    "CardDataError",
    "CardStub",
    "ColorSource",
    "Combo",
    "ComboKind",
    "CorpusDeck",
    "CurveReport",
    "Deck",
    "DeckCost",
    "DeckEntry",
    "DeckFeatureVector",
    "DeckReport",
    "DecklistInput",
    "FailureDetail",
    "FailureKind",
    "GameOutcome",
    "GameResult",
    "InteractionCategory",
    "InteractionReport",
    "InvalidInputError",
    "KnownError",
    "ManaCurve",
    "ManaSources",
    "MetaAnalysis",
    "PerformanceModel",
    "PlaygroupProfile",
    "PowerLevelAssessment",
    "PowerTier",
    "Recommendation",
    "RecordError",
    "SimilarityResult",
    "SwapSuggestion",
    "SynergyScore",
    "TierLimits",
    "ValidationResult",
    "WinCondition",
    "WinConditionReport",
    "WinType",
    "ensure_colors",
    "ensure_decklist",
    "normalize_name",
    "to_dict",
]

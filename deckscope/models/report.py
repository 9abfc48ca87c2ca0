"""Combined deck report record."""

from dataclasses import dataclass, field

from deckscope.models.balance import DeckBalance, RatioReport
from deckscope.models.budget import BudgetReport
from deckscope.models.curve import ColorSource, CurveReport, ManaSources
from deckscope.models.features import DeckFeatureVector
from deckscope.models.interaction import InteractionReport
from deckscope.models.power import PowerLevelAssessment
from deckscope.models.recommendation import Recommendation
from deckscope.models.synergy import Combo, SynergyScore
from deckscope.models.validation import ValidationResult
from deckscope.models.win_conditions import WinConditionStats


@dataclass
class DeckReport:
    """
    Every analyzer's output for one deck.

    Attributes:
        name: Deck name, empty when unnamed
        commander: Commander name, None when the deck has none
        archetype: Archetype the strategy-dependent analyzers ran with
        colors: Color identity in WUBRG order
        recommended_lands: Land count suggested for the archetype and curve
        recommendations: Card suggestions; empty when no corpus was given
    """

    name: str
    commander: str | None
    archetype: str
    colors: tuple[str, ...]
    features: DeckFeatureVector
    validation: ValidationResult
    synergy: SynergyScore
    combos: list[Combo]
    power: PowerLevelAssessment
    win_conditions: WinConditionStats
    interaction: InteractionReport
    curve: CurveReport
    recommended_lands: int
    color_sources: dict[str, ColorSource]
    mana_sources: ManaSources
    balance: DeckBalance
    ratios: RatioReport
    budget: BudgetReport
    recommendations: list[Recommendation] = field(default_factory=list)

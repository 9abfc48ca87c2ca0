"""
Budget tiers and price reports.

All money is Decimal, quantized to cents.
"""

from dataclasses import dataclass, field
from decimal import ROUND_HALF_UP, Decimal
from enum import Enum

CENT = Decimal("0.01")
ZERO = Decimal("0")


def to_money(value: Decimal | float | int | str | None) -> Decimal:
    """Coerce a price to a cent-quantized Decimal; None becomes 0."""
    if value is None:
        return ZERO.quantize(CENT)
    amount = value if isinstance(value, Decimal) else Decimal(str(value))
    return amount.quantize(CENT, rounding=ROUND_HALF_UP)


def format_money(amount: Decimal) -> str:
    return f"${to_money(amount)}"


class BudgetTier(str, Enum):
    BUDGET = "budget"
    MODERATE = "moderate"
    OPTIMIZED = "optimized"
    NO_LIMIT = "no_limit"


@dataclass(frozen=True, slots=True)
class TierLimits:
    """
    Spending limits for a tier.

    None means unbounded.
    """

    tier: BudgetTier
    name: str
    description: str
    max_card_price: Decimal | None
    total_budget: Decimal | None

    def total_within(self, total: Decimal) -> bool:
        return self.total_budget is None or total <= self.total_budget


@dataclass(frozen=True, slots=True)
class CardPrice:
    name: str
    price: Decimal
    type_line: str = ""


@dataclass
class DeckCost:
    total: Decimal = ZERO
    breakdown: dict[str, Decimal] = field(default_factory=dict)
    most_expensive: list[CardPrice] = field(default_factory=list)
    average_card_price: Decimal = ZERO
    currency: str = "USD"


@dataclass(frozen=True, slots=True)
class SwapSuggestion:
    """An over-ceiling card and what could replace it."""

    replace: str
    current_price: Decimal
    alternatives: tuple[str, ...]
    reasons: tuple[str, ...]
    savings: Decimal


@dataclass
class BudgetReport:
    message: str
    current_cost: Decimal
    target_budget: Decimal | None
    tier: TierLimits
    over_budget: Decimal = ZERO
    expensive_cards_count: int = 0
    suggestions: list[SwapSuggestion] = field(default_factory=list)
    potential_savings: Decimal = ZERO

    @property
    def within_budget(self) -> bool:
        return self.over_budget <= 0


@dataclass(frozen=True, slots=True)
class BudgetSwap:
    remove: str
    remove_price: Decimal
    add: str
    add_price: Decimal
    savings: Decimal
    reason: str


@dataclass
class BudgetPlan:
    message: str
    current_cost: Decimal
    target_budget: Decimal
    over_budget: Decimal = ZERO
    projected_cost: Decimal = ZERO
    swaps: list[BudgetSwap] = field(default_factory=list)
    remaining_over_budget: Decimal = ZERO


@dataclass(frozen=True, slots=True)
class CategoryCost:
    cost: Decimal
    percentage: float


@dataclass
class BudgetDistribution:
    total_cost: Decimal
    distribution: dict[str, CategoryCost]
    top_categories: list[str]
    recommended_tier: TierLimits
    insights: list[str] = field(default_factory=list)

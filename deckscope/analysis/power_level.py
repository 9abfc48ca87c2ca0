"""
Power level assessment.

Scores a deck 1-10 from six bucketed factors: average CMC, fast mana,
tutors, staple interaction, mana base quality and combo pieces. Card counts
come from curated roles in the card knowledge table. Each factor is scored
0-10, weighted, and the weighted sum is normalized by its maximum.
"""

import logging

from deckscope.analysis.scoring import (
    average_cmc,
    clamp,
    confidence_for,
    percentage,
    round_half_up,
)
from deckscope.knowledge.cards import CardRole, cards_with_role, count_with_role
from deckscope.models.card import DecklistInput, ensure_decklist
from deckscope.models.power import (
    Confidence,
    FactorScores,
    ManaBaseAssessment,
    ManaBaseTier,
    PowerAdjustment,
    PowerAdjustmentPlan,
    PowerLevelAssessment,
    PowerLevelFactors,
    PowerTier,
    TierInfo,
)

logger = logging.getLogger(__name__)

FACTOR_WEIGHTS: dict[str, float] = {
    "average_cmc": 2.5,
    "fast_mana": 2.0,
    "tutors": 2.0,
    "interaction": 1.5,
    "mana_base": 1.5,
    "combos": 1.5,
}

MAX_WEIGHTED_SCORE = sum(FACTOR_WEIGHTS.values()) * 10

# Mana base tier (1-4) is stretched onto the 0-10 factor scale
MANA_BASE_SCALE = 2.5

TIERS: dict[PowerTier, TierInfo] = {
    PowerTier.CASUAL: TierInfo(
        key=PowerTier.CASUAL,
        name="Casual",
        score_range=(1, 3),
        description="Precon-level, theme over optimization",
        characteristics={
            "average_cmc": "3.5-4.5",
            "fast_mana": "0-2",
            "tutors": "0-2",
            "interaction": "5-8",
            "win_turns": "12+",
            "mana_base_quality": "low",
        },
    ),
    PowerTier.FOCUSED: TierInfo(
        key=PowerTier.FOCUSED,
        name="Focused",
        score_range=(4, 6),
        description="Clear strategy, some optimization, budget considerations",
        characteristics={
            "average_cmc": "3.0-4.0",
            "fast_mana": "2-5",
            "tutors": "2-5",
            "interaction": "8-12",
            "win_turns": "8-12",
            "mana_base_quality": "medium",
        },
    ),
    PowerTier.OPTIMIZED: TierInfo(
        key=PowerTier.OPTIMIZED,
        name="Optimized",
        score_range=(7, 8),
        description="Strong synergies, efficient mana base, clear win conditions",
        characteristics={
            "average_cmc": "2.5-3.5",
            "fast_mana": "5-10",
            "tutors": "5-10",
            "interaction": "12-18",
            "win_turns": "5-8",
            "mana_base_quality": "high",
        },
    ),
    PowerTier.CEDH: TierInfo(
        key=PowerTier.CEDH,
        name="cEDH",
        score_range=(9, 10),
        description="Competitive, fast combos, optimal card choices",
        characteristics={
            "average_cmc": "1.5-2.5",
            "fast_mana": "10+",
            "tutors": "8+",
            "interaction": "15+",
            "win_turns": "3-5",
            "mana_base_quality": "optimal",
        },
    ),
}

# Factor scores typical of each tier, used to order adjustment suggestions
TIER_FACTOR_TARGETS: dict[PowerTier, FactorScores] = {
    PowerTier.CASUAL: FactorScores(4, 2, 2, 4, 2.5, 2),
    PowerTier.FOCUSED: FactorScores(6, 5, 5, 6, 5.0, 4),
    PowerTier.OPTIMIZED: FactorScores(8, 8, 8, 8, 7.5, 7),
    PowerTier.CEDH: FactorScores(10, 10, 10, 10, 10.0, 10),
}


# =============================================================================
# BUCKETS
# =============================================================================


def score_average_cmc(value: float) -> int:
    if value <= 2.5:
        return 10
    if value <= 3.0:
        return 8
    if value <= 3.5:
        return 6
    if value <= 4.0:
        return 4
    return 2


def score_fast_mana(count: int) -> int:
    if count >= 10:
        return 10
    if count >= 5:
        return 8
    if count >= 2:
        return 5
    return 2


def score_tutors(count: int) -> int:
    if count >= 8:
        return 10
    if count >= 5:
        return 8
    if count >= 2:
        return 5
    return 2


def score_interaction(count: int) -> int:
    if count >= 15:
        return 10
    if count >= 12:
        return 8
    if count >= 8:
        return 6
    return 4


def score_combos(count: int) -> int:
    if count >= 3:
        return 10
    if count >= 2:
        return 7
    if count >= 1:
        return 4
    return 2


def assess_mana_base(decklist: DecklistInput) -> ManaBaseAssessment:
    """Mana base tier from the number of premium lands among the deck's lands."""
    lands = [card for card in ensure_decklist(decklist) if card.is_land]
    premium = count_with_role((card.name for card in lands), CardRole.PREMIUM_LAND)

    if premium >= 10:
        quality, score = ManaBaseTier.OPTIMAL, 4
    elif premium >= 5:
        quality, score = ManaBaseTier.HIGH, 3
    elif premium >= 2:
        quality, score = ManaBaseTier.MEDIUM, 2
    else:
        quality, score = ManaBaseTier.LOW, 1

    return ManaBaseAssessment(
        quality=quality,
        score=score,
        premium_count=premium,
        total_lands=len(lands),
        percentage=percentage(premium, len(lands)),
    )


# =============================================================================
# ASSESSMENT
# =============================================================================


def get_power_level_factors(decklist: DecklistInput) -> PowerLevelFactors:
    """Raw counts behind the power level score."""
    cards = ensure_decklist(decklist)
    names = [card.name for card in cards]
    return PowerLevelFactors(
        average_cmc=round(average_cmc(cards), 2),
        fast_mana_count=count_with_role(names, CardRole.FAST_MANA),
        tutor_count=count_with_role(names, CardRole.TUTOR),
        interaction_count=count_with_role(names, CardRole.STAPLE_INTERACTION),
        combo_count=count_with_role(names, CardRole.COMBO_PIECE),
        mana_base=assess_mana_base(cards),
        deck_size=len(cards),
    )


def score_factors(factors: PowerLevelFactors) -> FactorScores:
    return FactorScores(
        average_cmc=score_average_cmc(factors.average_cmc),
        fast_mana=score_fast_mana(factors.fast_mana_count),
        tutors=score_tutors(factors.tutor_count),
        interaction=score_interaction(factors.interaction_count),
        mana_base=factors.mana_base.score * MANA_BASE_SCALE,
        combos=score_combos(factors.combo_count),
    )


def weighted_score(scores: FactorScores) -> float:
    return sum(getattr(scores, name) * weight for name, weight in FACTOR_WEIGHTS.items())


def normalize_score(raw: float) -> int:
    """Weighted sum -> integer 1..10."""
    return int(clamp(round_half_up(raw / MAX_WEIGHTED_SCORE * 10), 1, 10))


def get_power_level_tier(score: int) -> TierInfo:
    """Tier whose range contains the score; casual when out of range."""
    for info in TIERS.values():
        low, high = info.score_range
        if low <= score <= high:
            return info
    return TIERS[PowerTier.CASUAL]


def _label(value: float, high: float, high_label: str, low_label: str) -> str:
    return high_label if value >= high else low_label


def generate_breakdown(score: int, factors: PowerLevelFactors, tier: TierInfo) -> str:
    """Human-readable multi-line summary of an assessment."""
    if factors.average_cmc <= 3.0:
        cmc_label = "(Efficient)"
    elif factors.average_cmc <= 4.0:
        cmc_label = "(Moderate)"
    else:
        cmc_label = "(High)"

    lines = [
        f"Power Level: {score}/10 ({tier.name})",
        "",
        "Key Factors:",
        f"- Average CMC: {factors.average_cmc} {cmc_label}",
        f"- Fast Mana: {factors.fast_mana_count} cards "
        f"{_label(factors.fast_mana_count, 5, '(High)', '(Low)')}",
        f"- Tutors: {factors.tutor_count} cards "
        f"{_label(factors.tutor_count, 5, '(High)', '(Low)')}",
        f"- Interaction: {factors.interaction_count} cards "
        f"{_label(factors.interaction_count, 12, '(High)', '(Moderate)')}",
        f"- Combo Pieces: {factors.combo_count} cards",
        f"- Mana Base Quality: {factors.mana_base.quality.value} "
        f"({factors.mana_base.premium_count} premium lands)",
    ]
    return "\n".join(lines)


def assess_power_level(decklist: DecklistInput) -> PowerLevelAssessment:
    """
    Overall power level of a deck.

    Returns:
        PowerLevelAssessment; an empty decklist scores 1 (casual, low
        confidence) with zeroed factor scores
    """
    cards = ensure_decklist(decklist)
    if not cards:
        return PowerLevelAssessment(
            score=1,
            tier=PowerTier.CASUAL,
            tier_info=TIERS[PowerTier.CASUAL],
            confidence=Confidence.LOW,
            factors=None,
            factor_scores=FactorScores(),
            breakdown="Empty or invalid decklist",
        )

    factors = get_power_level_factors(cards)
    scores = score_factors(factors)
    score = normalize_score(weighted_score(scores))
    tier = get_power_level_tier(score)

    logger.debug("Power level %d (%s) for %d cards", score, tier.key.value, len(cards))
    return PowerLevelAssessment(
        score=score,
        tier=tier.key,
        tier_info=tier,
        confidence=confidence_for(len(cards)),
        factors=factors,
        factor_scores=scores,
        breakdown=generate_breakdown(score, factors, tier),
    )


# =============================================================================
# ADJUSTMENTS
# =============================================================================


def _examples(role: CardRole, limit: int = 5) -> tuple[str, ...]:
    return tuple(cards_with_role(role)[:limit])


def suggest_power_level_adjustments(
    decklist: DecklistInput,
    target_power_level: int,
) -> PowerAdjustmentPlan:
    """
    Rule-table suggestions for moving a deck toward a target power level.

    Suggestions whose factor sits furthest from the target tier's typical
    factor score come first.
    """
    target = int(clamp(target_power_level, 1, 10))
    current = assess_power_level(decklist)

    if current.score == target:
        return PowerAdjustmentPlan(
            current_score=current.score,
            target_score=target,
            direction="none",
            difference=0,
            message=f"Deck is already at power level {target}",
        )

    direction = "increase" if target > current.score else "decrease"
    factors = current.factors or get_power_level_factors([])
    ranked: list[tuple[str, PowerAdjustment]] = []

    if direction == "increase":
        if factors.average_cmc > 3.5:
            ranked.append(
                (
                    "average_cmc",
                    PowerAdjustment(
                        category="Mana Curve",
                        suggestion="Lower average CMC by replacing high-cost cards "
                        "with more efficient options",
                        impact="Medium",
                        examples=("Replace 6+ CMC cards with 2-4 CMC alternatives",),
                    ),
                )
            )
        if factors.fast_mana_count < 5:
            ranked.append(
                (
                    "fast_mana",
                    PowerAdjustment(
                        category="Fast Mana",
                        suggestion="Add more fast mana sources",
                        impact="High",
                        examples=_examples(CardRole.FAST_MANA),
                    ),
                )
            )
        if factors.tutor_count < 5:
            ranked.append(
                (
                    "tutors",
                    PowerAdjustment(
                        category="Consistency",
                        suggestion="Add tutors to increase consistency",
                        impact="High",
                        examples=_examples(CardRole.TUTOR),
                    ),
                )
            )
        if factors.interaction_count < 12:
            ranked.append(
                (
                    "interaction",
                    PowerAdjustment(
                        category="Interaction",
                        suggestion="Add more removal and counterspells",
                        impact="Medium",
                        examples=_examples(CardRole.STAPLE_INTERACTION),
                    ),
                )
            )
        if factors.mana_base.score < 3:
            ranked.append(
                (
                    "mana_base",
                    PowerAdjustment(
                        category="Mana Base",
                        suggestion="Upgrade mana base with fetch lands and dual lands",
                        impact="Medium",
                        examples=("Fetch lands", "Shock lands", "Original dual lands"),
                    ),
                )
            )
        if factors.combo_count < 2 and target >= 7:
            ranked.append(
                (
                    "combos",
                    PowerAdjustment(
                        category="Win Conditions",
                        suggestion="Add combo pieces for faster wins",
                        impact="High",
                        examples=_examples(CardRole.COMBO_PIECE),
                    ),
                )
            )
    else:
        if factors.fast_mana_count > 5:
            ranked.append(
                (
                    "fast_mana",
                    PowerAdjustment(
                        category="Fast Mana",
                        suggestion="Remove some fast mana to slow down the deck",
                        impact="High",
                        examples=("Remove Mana Crypt, Mana Vault, or other fast mana",),
                    ),
                )
            )
        if factors.tutor_count > 5:
            ranked.append(
                (
                    "tutors",
                    PowerAdjustment(
                        category="Consistency",
                        suggestion="Replace tutors with card draw to reduce consistency",
                        impact="Medium",
                        examples=("Replace tutors with card draw spells",),
                    ),
                )
            )
        if factors.combo_count > 2:
            ranked.append(
                (
                    "combos",
                    PowerAdjustment(
                        category="Win Conditions",
                        suggestion="Remove combo pieces, focus on fair win conditions",
                        impact="High",
                        examples=("Replace infinite combos with creature beatdown",),
                    ),
                )
            )
        if factors.average_cmc < 3.0 and target <= 5:
            ranked.append(
                (
                    "average_cmc",
                    PowerAdjustment(
                        category="Mana Curve",
                        suggestion="Include more fun high-cost bombs",
                        impact="Low",
                        examples=("Add big splashy spells that are fun but less efficient",),
                    ),
                )
            )

    goal = TIER_FACTOR_TARGETS[get_power_level_tier(target).key]
    have = current.factor_scores
    ranked.sort(key=lambda item: abs(getattr(goal, item[0]) - getattr(have, item[0])), reverse=True)

    return PowerAdjustmentPlan(
        current_score=current.score,
        target_score=target,
        direction=direction,
        difference=abs(target - current.score),
        message=f"To {direction} power level from {current.score} to {target}:",
        suggestions=[adjustment for _, adjustment in ranked],
    )

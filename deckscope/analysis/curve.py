"""
Mana curve analysis.

Buckets non-land cards by CMC (0-6 and 7+), checks the average against the
strategy's expected window, flags empty buckets and buckets that stray more
than ten percentage points from the strategy's ideal distribution, and draws
an ASCII bar chart.
"""

import math
from collections.abc import Mapping

from deckscope.analysis.scoring import non_land_cards, ratio, round_half_up
from deckscope.knowledge.archetypes import (
    archetype_key,
    expected_cmc,
    ideal_curve_distribution,
)
from deckscope.models.card import CardStub, DecklistInput, ensure_decklist
from deckscope.models.curve import (
    CURVE_BUCKETS,
    CurveBucketComparison,
    CurveComparison,
    CurveDeviation,
    CurveReport,
    ManaCurve,
    empty_curve,
)

# Percentage points a bucket may stray from the ideal before it is flagged
DEVIATION_TOLERANCE = 10.0

BAR_WIDTH = 20
RULE_WIDTH = 30

DEFAULT_NON_LAND_CARDS = 63


def curve_bucket(cmc: float) -> str:
    if cmc >= 7:
        return "7+"
    return str(max(0, math.floor(cmc)))


def calculate_mana_curve(decklist: DecklistInput) -> ManaCurve:
    """CMC histogram and average over non-land cards."""
    spells = non_land_cards(ensure_decklist(decklist))
    curve = empty_curve()
    for card in spells:
        curve[curve_bucket(card.cmc)] += 1
    return ManaCurve(
        curve=curve,
        average_cmc=round(ratio(sum(c.cmc for c in spells), len(spells)), 2),
        total_non_land_cards=len(spells),
    )


def visualize_mana_curve(curve: Mapping[str, int]) -> str:
    """ASCII bar chart, longest bar twenty blocks."""
    largest = max(curve.values(), default=0)
    lines = ["", "Mana Curve:", "─" * RULE_WIDTH]
    for bucket, count in curve.items():
        length = round_half_up(count / largest * BAR_WIDTH) if largest > 0 else 0
        lines.append(f"{bucket:>3}: {'█' * length} {count}")
    lines.append("─" * RULE_WIDTH)
    return "\n".join(lines) + "\n"


def get_ideal_curve(
    strategy: str = "midrange", total_cards: int = DEFAULT_NON_LAND_CARDS
) -> dict[str, int]:
    """Ideal card count per bucket for a strategy and non-land card count."""
    distribution = ideal_curve_distribution(strategy)
    return {bucket: round_half_up(total_cards * share) for bucket, share in distribution.items()}


def _deviations(curve: Mapping[str, int], total: int, strategy: str) -> list[CurveDeviation]:
    if total == 0:
        return []
    distribution = ideal_curve_distribution(strategy)
    flagged: list[CurveDeviation] = []
    for bucket in CURVE_BUCKETS:
        actual = curve[bucket] / total * 100
        ideal = distribution.get(bucket, 0.0) * 100
        if abs(actual - ideal) > DEVIATION_TOLERANCE:
            flagged.append(
                CurveDeviation(
                    bucket=bucket,
                    actual_percentage=round(actual, 1),
                    ideal_percentage=round(ideal, 1),
                )
            )
    return flagged


def analyze_mana_curve(decklist: DecklistInput, strategy: str = "midrange") -> CurveReport:
    """
    Curve health for a strategy.

    Args:
        decklist: Cards to inspect; lands are ignored
        strategy: aggro, midrange, control or combo (others use midrange)

    Returns:
        CurveReport with warnings, recommendations and a visualization
    """
    strategy = archetype_key(strategy)
    mana_curve = calculate_mana_curve(decklist)
    curve = mana_curve.curve
    avg = mana_curve.average_cmc
    expected = expected_cmc(strategy)

    report = CurveReport(
        curve=curve,
        average_cmc=avg,
        total_non_land_cards=mana_curve.total_non_land_cards,
        strategy=strategy,
        expected=expected,
    )

    window = f"{expected.minimum}-{expected.maximum}"
    if avg < expected.minimum:
        report.warnings.append(
            f"Average CMC ({avg}) is lower than expected for {strategy} ({window}). "
            "Deck may lack impactful late-game cards."
        )
    elif avg > expected.maximum:
        report.warnings.append(
            f"Average CMC ({avg}) is higher than expected for {strategy} ({window}). "
            "Deck may be too slow."
        )

    early = curve["1"] + curve["2"]
    if strategy == "aggro" and early < 15:
        report.warnings.append(
            f"Aggro deck should have more early plays (1-2 CMC). Currently: {early}"
        )
    elif early < 8:
        report.recommendations.append(
            f"Consider adding more early plays (1-2 CMC) for consistency. Currently: {early}"
        )

    mid = curve["3"] + curve["4"]
    if mid < 15:
        report.recommendations.append(f"Consider more mid-game plays (3-4 CMC). Currently: {mid}")

    late = curve["6"] + curve["7+"]
    if strategy == "control" and late < 8:
        report.recommendations.append(
            f"Control decks benefit from more finishers (6+ CMC). Currently: {late}"
        )
    elif late > 15:
        report.warnings.append(
            f"Many high-cost cards ({late} cards at 6+ CMC). May have consistency issues."
        )

    for cmc in range(1, 7):
        if curve[str(cmc)] == 0:
            report.dead_zones.append(cmc)
            report.recommendations.append(
                f"Gap in curve at {cmc} CMC. Consider filling this slot for smoother gameplay."
            )

    report.deviations = _deviations(curve, mana_curve.total_non_land_cards, strategy)
    for deviation in report.deviations:
        direction = "over" if deviation.difference > 0 else "under"
        report.recommendations.append(
            f"{deviation.bucket} CMC slot is {direction}-represented "
            f"({deviation.actual_percentage}% vs ideal {deviation.ideal_percentage}%)."
        )

    report.visualization = visualize_mana_curve(curve)
    return report


def compare_curve_to_ideal(
    decklist: DecklistInput, strategy: str = "midrange"
) -> CurveComparison:
    mana_curve = calculate_mana_curve(decklist)
    ideal = get_ideal_curve(strategy, mana_curve.total_non_land_cards)
    return CurveComparison(
        comparison={
            bucket: CurveBucketComparison(actual=count, ideal=ideal.get(bucket, 0))
            for bucket, count in mana_curve.curve.items()
        },
        average_cmc=mana_curve.average_cmc,
        strategy=strategy,
    )


def get_cards_by_cmc(
    decklist: DecklistInput, min_cmc: float, max_cmc: float | None = None
) -> list[CardStub]:
    """Non-land cards with min_cmc <= cmc (<= max_cmc when given)."""
    return [
        card
        for card in non_land_cards(ensure_decklist(decklist))
        if card.cmc >= min_cmc and (max_cmc is None or card.cmc <= max_cmc)
    ]

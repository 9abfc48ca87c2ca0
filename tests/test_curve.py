"""Tests for mana curve analysis."""

import pytest

from deckscope.analysis.curve import (
    analyze_mana_curve,
    calculate_mana_curve,
    compare_curve_to_ideal,
    curve_bucket,
    get_cards_by_cmc,
    get_ideal_curve,
    visualize_mana_curve,
)


def _spells(make_card, cmcs: list[float]):
    return [make_card(f"Spell {i}", "Sorcery", cmc) for i, cmc in enumerate(cmcs)]


class TestCalculateManaCurve:
    @pytest.mark.parametrize(
        ("cmc", "bucket"), [(0, "0"), (1, "1"), (2.5, "2"), (6, "6"), (7, "7+"), (12, "7+")]
    )
    def test_bucket(self, cmc: float, bucket: str) -> None:
        assert curve_bucket(cmc) == bucket

    def test_histogram_ignores_lands(self, make_card, basics) -> None:
        cards = [*_spells(make_card, [0, 1, 2, 7, 9]), *basics(3)]
        result = calculate_mana_curve(cards)

        assert result.curve == {"0": 1, "1": 1, "2": 1, "3": 0, "4": 0, "5": 0, "6": 0, "7+": 2}
        assert result.total_non_land_cards == 5
        assert result.average_cmc == 3.8

    def test_empty(self) -> None:
        result = calculate_mana_curve([])
        assert result.average_cmc == 0.0
        assert sum(result.curve.values()) == 0


class TestVisualize:
    def test_longest_bar_is_twenty(self) -> None:
        chart = visualize_mana_curve({"1": 4, "2": 8, "3": 2})
        lines = chart.splitlines()

        assert "Mana Curve:" in lines
        assert "  2: " + "█" * 20 + " 8" in lines
        assert "  1: " + "█" * 10 + " 4" in lines

    def test_empty_curve(self) -> None:
        chart = visualize_mana_curve({"1": 0})
        assert "  1:  0" in chart.splitlines()


class TestAnalyzeManaCurve:
    def test_aggro_needs_early_plays(self, make_card) -> None:
        report = analyze_mana_curve(_spells(make_card, [3] * 20), "aggro")
        assert any("Aggro deck should have more early plays" in w for w in report.warnings)

    def test_strategy_name_is_case_insensitive(self, make_card) -> None:
        cards = _spells(make_card, [3] * 20)
        assert analyze_mana_curve(cards, "Aggro").warnings == (
            analyze_mana_curve(cards, "aggro").warnings
        )

    def test_unknown_strategy_uses_midrange(self, make_card) -> None:
        report = analyze_mana_curve(_spells(make_card, [3] * 20), "landfall")
        assert report.strategy == "midrange"
        assert report.expected.optimal == 3.2

    def test_high_average_warns(self, make_card) -> None:
        report = analyze_mana_curve(_spells(make_card, [5] * 20), "midrange")
        assert report.warnings[0].startswith("Average CMC (5.0) is higher than expected")

    def test_low_average_warns(self, make_card) -> None:
        report = analyze_mana_curve(_spells(make_card, [1] * 20), "control")
        assert report.warnings[0].startswith("Average CMC (1.0) is lower than expected")

    def test_dead_zones(self, make_card) -> None:
        report = analyze_mana_curve(_spells(make_card, [5] * 20))
        assert report.dead_zones == [1, 2, 3, 4, 6]

    def test_deviations_flagged(self, make_card) -> None:
        report = analyze_mana_curve(_spells(make_card, [5] * 20))
        five = next(d for d in report.deviations if d.bucket == "5")
        assert five.actual_percentage == 100.0
        assert five.ideal_percentage == 15.0
        assert five.difference == 85.0
        assert any("5 CMC slot is over-represented" in r for r in report.recommendations)

    def test_many_finishers_warn(self, make_card) -> None:
        report = analyze_mana_curve(_spells(make_card, [7] * 16))
        assert any("Many high-cost cards (16 cards at 6+ CMC)" in w for w in report.warnings)

    def test_control_wants_finishers(self, make_card) -> None:
        report = analyze_mana_curve(_spells(make_card, [4] * 20), "control")
        assert any("Control decks benefit from more finishers" in r for r in report.recommendations)

    def test_visualization_attached(self, make_card) -> None:
        report = analyze_mana_curve(_spells(make_card, [2, 3]))
        assert "Mana Curve:" in report.visualization


class TestIdealCurve:
    def test_midrange_hundred(self) -> None:
        ideal = get_ideal_curve("midrange", 100)
        assert ideal == {"0": 2, "1": 5, "2": 18, "3": 22, "4": 20, "5": 15, "6": 10, "7+": 8}

    def test_compare(self, make_card) -> None:
        comparison = compare_curve_to_ideal(_spells(make_card, [2] * 10), "midrange")
        assert comparison.comparison["2"].actual == 10
        assert comparison.comparison["2"].ideal == 2
        assert comparison.comparison["2"].difference == 8


class TestCardsByCmc:
    def test_range(self, make_card, basics) -> None:
        cards = [*_spells(make_card, [1, 2, 3, 4]), *basics(2)]
        assert [c.cmc for c in get_cards_by_cmc(cards, 2, 3)] == [2, 3]

    def test_open_ended(self, make_card) -> None:
        assert [c.cmc for c in get_cards_by_cmc(_spells(make_card, [1, 6, 8]), 6)] == [6, 8]

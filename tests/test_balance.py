"""Tests for card advantage, ramp and ratio analysis."""

import pytest

from deckscope.analysis.balance import (
    analyze_card_advantage,
    analyze_deck_balance,
    analyze_ramp_package,
    get_ideal_ratios,
    package_quality,
    package_rating,
    suggest_ratio_improvements,
)


class TestPackageQuality:
    @pytest.mark.parametrize(
        ("count", "quality"),
        [(12, "excellent"), (10, "good"), (8, "adequate"), (5, "low"), (4, "insufficient")],
    )
    def test_quality(self, count: int, quality: str) -> None:
        assert package_quality(count) == quality

    def test_rating_capped(self) -> None:
        assert package_rating(5) == 4
        assert package_rating(20) == 10
        assert package_rating(0) == 0


class TestCardAdvantage:
    def test_curated_draw_is_high_quality(self, make_card) -> None:
        analysis = analyze_card_advantage([make_card("Rhystic Study", "Enchantment", 3, "U")])
        assert [c.quality for c in analysis.card_draw] == ["high"]

    def test_oracle_draw_is_medium(self, make_card) -> None:
        card = make_card("Unknown Insight", "Sorcery", 3, "U", oracle_text="Draw three cards.")
        analysis = analyze_card_advantage([card])
        assert [c.quality for c in analysis.card_draw] == ["medium"]

    def test_impulse_and_recursion(self, make_card) -> None:
        cards = [
            make_card(
                "Unknown Impulse",
                "Sorcery",
                3,
                "R",
                oracle_text="Exile the top two cards. You may play them this turn.",
            ),
            make_card(
                "Unknown Raise",
                "Sorcery",
                2,
                "B",
                oracle_text="Return target creature card from your graveyard to your hand.",
            ),
        ]
        analysis = analyze_card_advantage(cards)
        assert len(analysis.impulse_draw) == 1
        assert len(analysis.recursion) == 1
        assert analysis.count == 2

    def test_percentage_of_deck(self, make_card, fillers) -> None:
        cards = [make_card("Rhystic Study", "Enchantment", 3, "U"), *fillers(9)]
        analysis = analyze_card_advantage(cards)
        assert analysis.percentage == 10.0
        assert analysis.quality == "insufficient"


class TestRampPackage:
    def test_curated_rock_placed_by_type(self, make_card) -> None:
        analysis = analyze_ramp_package([make_card("Sol Ring", "Artifact", 1)])
        assert [c.name for c in analysis.mana_rocks] == ["Sol Ring"]
        assert analysis.mana_rocks[0].quality == "high"

    def test_dorks_and_land_ramp(self, make_card) -> None:
        cards = [
            make_card("Unknown Elf", "Creature — Elf", 1, "G", oracle_text="{T}: Add {G}."),
            make_card(
                "Unknown Growth",
                "Sorcery",
                4,
                "G",
                oracle_text="Search your library for two basic land cards "
                "and put them onto the battlefield.",
            ),
        ]
        analysis = analyze_ramp_package(cards)
        assert [c.quality for c in analysis.mana_dorks] == ["high"]
        assert [c.quality for c in analysis.land_ramp] == ["medium"]
        assert analysis.count == 2

    def test_non_ramp_ignored(self, fillers) -> None:
        assert analyze_ramp_package(fillers(5)).count == 0


class TestIdealRatios:
    def test_midrange_baseline(self) -> None:
        ratios = get_ideal_ratios("midrange")
        assert (ratios.ramp, ratios.draw, ratios.interaction) == (10, 10, 10)
        assert (ratios.threats, ratios.lands) == (30, 37)

    def test_color_adjustments(self) -> None:
        assert get_ideal_ratios("midrange", "G").ramp == 12
        assert get_ideal_ratios("midrange", "U").draw == 12
        assert get_ideal_ratios("midrange", "WU").interaction == 12
        assert get_ideal_ratios("midrange", "U").interaction == 10

    def test_caps(self) -> None:
        assert get_ideal_ratios("combo", "UG").draw == 17
        assert get_ideal_ratios("control", "WU").interaction == 17

    def test_unknown_archetype_is_midrange(self) -> None:
        assert get_ideal_ratios("landfall") == get_ideal_ratios("midrange")


class TestRatioSuggestions:
    def test_blue_deck_without_draw(self, fillers) -> None:
        report = suggest_ratio_improvements(fillers(20), "midrange", "U")
        draw = next(s for s in report.suggestions if s.category == "Card Draw")

        assert draw.issue == "Only 0 card draw sources (recommended: 12)"
        assert draw.severity == "high"
        assert draw.examples == ("Rhystic Study", "Mystic Remora", "Fact or Fiction")

    def test_ramp_examples_default(self, fillers) -> None:
        report = suggest_ratio_improvements(fillers(20), "midrange", "B")
        ramp = next(s for s in report.suggestions if s.category == "Ramp")
        assert ramp.examples == ("Sol Ring", "Arcane Signet", "Mind Stone")

    def test_small_deficit_is_low(self, make_card) -> None:
        draw = [
            make_card(f"Draw {i}", "Sorcery", 2, oracle_text="Draw two cards.") for i in range(9)
        ]
        report = suggest_ratio_improvements(draw, "midrange", "B")
        suggestion = next(s for s in report.suggestions if s.category == "Card Draw")
        assert suggestion.severity == "low"

    def test_surplus_flagged(self, make_card) -> None:
        draw = [
            make_card(f"Draw {i}", "Sorcery", 2, oracle_text="Draw two cards.") for i in range(16)
        ]
        report = suggest_ratio_improvements(draw, "midrange", "B")
        assert any(s.issue == "Too many card draw sources (16)" for s in report.suggestions)


class TestDeckBalance:
    def test_type_counts(self, casual_deck) -> None:
        balance = analyze_deck_balance(casual_deck)

        assert balance.deck_size == 100
        assert balance.lands == 37
        assert balance.instants == 6
        assert balance.sorceries == 1
        assert balance.lands_percentage == 37.0

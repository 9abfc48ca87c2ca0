"""Tests for win condition detection and redundancy."""

import pytest

from deckscope.analysis.win_conditions import (
    assess_win_condition_redundancy,
    categorize_win_conditions,
    detect_win_conditions,
    get_win_condition_stats,
    redundancy_rating,
    suggest_win_conditions,
)
from deckscope.models.synergy import WinType
from deckscope.models.win_conditions import RedundancyRating


class TestDetectWinConditions:
    def test_oracle_deck(self, oracle_deck) -> None:
        report = detect_win_conditions(oracle_deck)

        assert report.count == 2
        assert report.categories == {"combo": 1, "alternate": 1}
        combo = report.found[0]
        assert combo.type is WinType.COMBO
        assert combo.cards == ("Thassa's Oracle", "Demonic Consultation")
        assert report.found[1].name == "Thassa's Oracle"

    def test_curated_finisher(self, make_card) -> None:
        report = detect_win_conditions([make_card("Craterhoof Behemoth", "Creature — Beast", 8)])
        assert report.categories == {"combat": 1}
        assert report.found[0].description == "Combat damage finisher"

    def test_voltron_at_ten_equipment_and_auras(self, make_card) -> None:
        pieces = [make_card(f"Sword {i}", "Artifact — Equipment", 3) for i in range(6)]
        pieces += [make_card(f"Blessing {i}", "Enchantment — Aura", 2) for i in range(4)]
        report = detect_win_conditions(pieces)

        assert report.categories == {"commander": 1}
        assert report.found[0].description == "10 equipment/auras for voltron strategy"

    def test_nine_pieces_is_not_voltron(self, make_card) -> None:
        pieces = [make_card(f"Sword {i}", "Artifact — Equipment", 3) for i in range(9)]
        assert detect_win_conditions(pieces).count == 0

    def test_copies_count_once(self, make_card) -> None:
        hoof = make_card("Craterhoof Behemoth", "Creature — Beast", 8)
        assert detect_win_conditions([hoof, hoof]).count == 1

    def test_categorize(self, oracle_deck) -> None:
        grouped = categorize_win_conditions(detect_win_conditions(oracle_deck).found)
        assert set(grouped) == {"combo", "alternate"}


class TestRedundancy:
    """Fixed ladder by count and type diversity."""

    @pytest.mark.parametrize(
        ("count", "types", "rating"),
        [
            (0, 0, RedundancyRating.CRITICAL),
            (1, 1, RedundancyRating.POOR),
            (2, 1, RedundancyRating.ADEQUATE),
            (2, 2, RedundancyRating.ADEQUATE),
            (3, 2, RedundancyRating.GOOD),
            (5, 3, RedundancyRating.GOOD),
            (3, 1, RedundancyRating.EXCELLENT),
        ],
    )
    def test_ladder(self, count: int, types: int, rating: RedundancyRating) -> None:
        assert redundancy_rating(count, types) is rating

    @pytest.mark.parametrize("types", [1, 2, 3])
    def test_more_wincons_never_lower_rating(self, types: int) -> None:
        ranks = [redundancy_rating(count, types).rank for count in range(8)]
        assert ranks == sorted(ranks)

    def test_oracle_deck_is_adequate(self, oracle_deck) -> None:
        result = assess_win_condition_redundancy(oracle_deck)
        assert result.rating is RedundancyRating.ADEQUATE
        assert result.recommendation == "Add 1-2 more win conditions"
        assert result.diversified is True
        assert result.has_backup is False

    def test_empty_deck_is_critical(self) -> None:
        result = assess_win_condition_redundancy([])
        assert result.rating is RedundancyRating.CRITICAL
        assert result.message == "No clear win conditions detected"


class TestSuggestWinConditions:
    def test_combo_archetype_without_combo(self) -> None:
        suggestions = suggest_win_conditions([], "combo")
        assert suggestions[0].name == "Thassa's Oracle"
        assert suggestions[0].type is WinType.COMBO

    def test_archetype_case_insensitive(self) -> None:
        assert suggest_win_conditions([], "Combo") == suggest_win_conditions([], "combo")

    def test_same_card_suggested_once(self) -> None:
        names = [s.name for s in suggest_win_conditions([], "combo", "U")]
        assert names.count("Thassa's Oracle") == 1

    def test_owned_cards_filtered(self, thassa_oracle) -> None:
        names = [s.name for s in suggest_win_conditions([thassa_oracle], "combo", "U")]
        assert "Thassa's Oracle" not in names

    def test_black_gets_attrition(self) -> None:
        names = [s.name for s in suggest_win_conditions([], "midrange", "B")]
        assert names == ["Blood Artist", "Exsanguinate"]

    def test_capped_at_five(self) -> None:
        suggestions = suggest_win_conditions([], "tokens", "WUBRG")
        assert len(suggestions) == 5
        assert suggestions[0].name == "Craterhoof Behemoth"


class TestWinConditionStats:
    def test_stats(self, oracle_deck) -> None:
        stats = get_win_condition_stats(oracle_deck)
        assert stats.total_wincons == 2
        assert stats.by_type == {"combo": 1, "alternate": 1}
        assert stats.redundancy is RedundancyRating.ADEQUATE
        assert stats.diversified is True
        assert len(stats.details) == 2

"""Tests for the static card, archetype and format knowledge."""

import pytest

from deckscope.knowledge import (
    ARCHETYPES,
    BANNED_CARDS,
    CardRole,
    archetype_key,
    cards_with_role,
    estimate_card_power,
    get_archetype,
    get_card_knowledge,
    get_color_combination_name,
    has_role,
    is_card_banned,
)
from deckscope.knowledge.archetypes import (
    base_land_count,
    expected_cmc,
    ideal_curve_distribution,
    ideal_ratios,
)
from deckscope.knowledge.cards import count_with_role, get_synergy_record, synergy_catalog


class TestCardKnowledge:
    def test_lookup_is_case_and_quote_insensitive(self) -> None:
        entry = get_card_knowledge("thassa’s oracle")
        assert entry is not None
        assert entry.name == "Thassa's Oracle"

    def test_unknown_card(self) -> None:
        assert get_card_knowledge("Grizzly Bears") is None
        assert estimate_card_power("Grizzly Bears") == 6

    def test_roles_merged_across_lists(self) -> None:
        assert has_role("Sol Ring", CardRole.FAST_MANA)
        assert has_role("Sol Ring", CardRole.RAMP)
        assert not has_role("Sol Ring", CardRole.TUTOR)

    def test_power_estimates(self) -> None:
        assert estimate_card_power("Mana Crypt") == 9
        assert estimate_card_power("Sol Ring") == 7

    def test_budget_alternatives(self) -> None:
        entry = get_card_knowledge("Mana Crypt")
        assert entry is not None
        assert entry.budget_alternatives[0].name == "Sol Ring"

    def test_salty_cards(self) -> None:
        salty = cards_with_role(CardRole.SALTY)
        assert "Cyclonic Rift" in salty
        assert len(salty) == len(set(salty))

    def test_count_with_role_counts_duplicates(self) -> None:
        names = ["Sol Ring", "Sol Ring", "Grizzly Bears", "Mana Crypt"]
        assert count_with_role(names, CardRole.FAST_MANA) == 3

    def test_synergy_records(self) -> None:
        assert get_synergy_record("Grizzly Bears") is None
        catalog = synergy_catalog()
        assert "Rhystic Study" in catalog
        assert all(record is not None for record in catalog.values())


class TestArchetypes:
    @pytest.mark.parametrize(
        ("name", "key"),
        [
            ("Combo", "combo"),
            (" control ", "control"),
            ("landfall", "midrange"),
            (None, "midrange"),
        ],
    )
    def test_archetype_key(self, name: str | None, key: str) -> None:
        assert archetype_key(name) == key

    def test_every_archetype_has_a_description(self) -> None:
        assert all(baseline.description for baseline in ARCHETYPES.values())

    def test_unset_fields_fall_back_to_midrange(self) -> None:
        assert get_archetype("tokens").ratios is None
        assert ideal_ratios("tokens") == ideal_ratios("midrange")
        assert base_land_count("tokens") == 37
        assert expected_cmc("tokens") == expected_cmc("midrange")
        assert ideal_curve_distribution("tokens") == ideal_curve_distribution("midrange")

    @pytest.mark.parametrize("name", ["aggro", "midrange", "control", "combo"])
    def test_curve_distributions_sum_to_one(self, name: str) -> None:
        assert sum(ideal_curve_distribution(name).values()) == pytest.approx(1.0)

    def test_control_baseline(self) -> None:
        assert base_land_count("control") == 38
        assert expected_cmc("control").optimal == 4.0


class TestRules:
    def test_banned(self) -> None:
        assert is_card_banned("Primeval Titan")
        assert is_card_banned("primeval titan")
        assert not is_card_banned("Sol Ring")
        assert len(BANNED_CARDS) == len(set(BANNED_CARDS))

    @pytest.mark.parametrize(
        ("colors", "name"),
        [
            ("", "Colorless"),
            ("G", "Mono-Green"),
            ("UW", "Azorius"),
            ("wu", "Azorius"),
            ("BUG", "Sultai"),
            ("WUBRG", "Five-Color"),
            ("WUBG", "Witch"),
        ],
    )
    def test_color_combination_name(self, colors: str, name: str) -> None:
        assert get_color_combination_name(colors) == name

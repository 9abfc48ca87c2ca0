"""Tests for the end-to-end deck report."""

import json

import pytest

from deckscope.models.card import Deck
from deckscope.models.failure import InvalidInputError
from deckscope.models.features import CorpusDeck
from deckscope.models.serialization import to_dict
from deckscope.services.deck_report import build_deck_report, format_deck_report


@pytest.fixture
def oracle_commander_deck(thassa_oracle, demonic_consultation, fillers) -> Deck:
    return Deck.from_cards(
        [demonic_consultation, *fillers(98)],
        commander=thassa_oracle,
        archetype="Combo",
        name="Oracle",
    )


class TestBuildDeckReport:
    def test_report(self, oracle_commander_deck) -> None:
        report = build_deck_report(oracle_commander_deck)

        assert report.name == "Oracle"
        assert report.commander == "Thassa's Oracle"
        assert report.archetype == "combo"
        assert report.colors == ("U", "B")
        assert report.features.deck_size == 100
        assert len(report.combos) == 1
        assert report.win_conditions.total_wincons == 2
        assert report.recommendations == []

    def test_off_color_card_reported(self, oracle_commander_deck) -> None:
        validation = build_deck_report(oracle_commander_deck).validation
        assert validation.off_color_cards == ["Demonic Consultation"]

    def test_unknown_archetype_uses_midrange(self, oracle_commander_deck) -> None:
        oracle_commander_deck.archetype = "landfall"
        assert build_deck_report(oracle_commander_deck).archetype == "midrange"

    def test_recommendations_from_corpus(self, oracle_commander_deck, make_card) -> None:
        study = make_card("Rhystic Study", "Enchantment", 3, "U")
        corpus = [CorpusDeck(name="Twin", decklist=[*oracle_commander_deck.cards, study])]
        report = build_deck_report(oracle_commander_deck, corpus=corpus)

        assert [r.card for r in report.recommendations] == ["Rhystic Study"]

    def test_rejects_card_list(self, oracle_deck) -> None:
        with pytest.raises(InvalidInputError):
            build_deck_report(oracle_deck)

    def test_json_serializable(self, oracle_commander_deck) -> None:
        data = to_dict(build_deck_report(oracle_commander_deck))
        decoded = json.loads(json.dumps(data))

        assert decoded["archetype"] == "combo"
        assert decoded["colors"] == ["U", "B"]
        assert decoded["budget"]["current_cost"] == 0.0


class TestFormatDeckReport:
    def test_sections(self, oracle_commander_deck) -> None:
        text = format_deck_report(build_deck_report(oracle_commander_deck))
        lines = text.splitlines()

        assert lines[0] == "**Oracle** (100 cards, Dimir)"
        assert "- Archetype: combo" in lines
        assert "**Combos:**" in lines
        assert "**Issues:**" in lines
        assert "Mana Curve:" in lines

    def test_commander_name_as_title(self, oracle_commander_deck) -> None:
        oracle_commander_deck.name = ""
        text = format_deck_report(build_deck_report(oracle_commander_deck))
        assert text.startswith("**Thassa's Oracle** (100 cards, Dimir)")

    def test_recommended_cards_listed(self, oracle_commander_deck, make_card) -> None:
        study = make_card("Rhystic Study", "Enchantment", 3, "U")
        corpus = [CorpusDeck(name="Twin", decklist=[*oracle_commander_deck.cards, study])]
        text = format_deck_report(build_deck_report(oracle_commander_deck, corpus=corpus))

        assert "**Recommended Cards:**" in text
        assert "1. Rhystic Study (score " in text

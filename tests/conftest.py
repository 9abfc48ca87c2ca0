from collections.abc import Callable
from decimal import Decimal
from typing import Any

import pytest

from deckscope.models.card import CardStub

CardFactory = Callable[..., CardStub]


def _card(
    name: str,
    type_line: str = "Creature — Bear",
    cmc: float = 2.0,
    colors: str = "",
    oracle_text: str = "",
    price: Decimal | str | None = None,
    mana_cost: str = "",
) -> CardStub:
    return CardStub(
        name=name,
        colors=frozenset(colors),
        cmc=cmc,
        type_line=type_line,
        oracle_text=oracle_text,
        price=Decimal(price) if isinstance(price, str) else price,
        mana_cost=mana_cost,
    )


@pytest.fixture
def make_card() -> CardFactory:
    """Factory for CardStub objects with test-friendly defaults."""
    return _card


@pytest.fixture
def fillers() -> Callable[..., list[CardStub]]:
    """Factory for distinct vanilla creatures named "Filler Card N"."""

    def build(count: int, start: int = 0, **kwargs: Any) -> list[CardStub]:
        return [_card(f"Filler Card {i}", **kwargs) for i in range(start, start + count)]

    return build


@pytest.fixture
def basics() -> Callable[..., list[CardStub]]:
    """Factory for basic lands."""

    def build(count: int, name: str = "Forest") -> list[CardStub]:
        return [_card(name, type_line=f"Basic Land — {name}", cmc=0) for _ in range(count)]

    return build


@pytest.fixture
def thassa_oracle() -> CardStub:
    return _card("Thassa's Oracle", "Creature — Merfolk Wizard", 2, "U", mana_cost="{U}{U}")


@pytest.fixture
def demonic_consultation() -> CardStub:
    return _card("Demonic Consultation", "Instant", 1, "B", mana_cost="{B}")


@pytest.fixture
def oracle_deck(
    thassa_oracle: CardStub,
    demonic_consultation: CardStub,
    fillers: Callable[..., list[CardStub]],
) -> list[CardStub]:
    """100 cards: Thassa's Oracle, Demonic Consultation and 98 vanilla fillers."""
    return [thassa_oracle, demonic_consultation, *fillers(98)]


@pytest.fixture
def casual_deck(
    fillers: Callable[..., list[CardStub]],
    basics: Callable[..., list[CardStub]],
) -> list[CardStub]:
    """
    100 cards with one fast mana piece, one tutor and six staple interaction
    spells. Every spell costs 4.2 and every land is a basic Forest.
    """
    spells = [
        _card("Sol Ring", "Artifact", 4.2),
        _card("Demonic Tutor", "Sorcery", 4.2),
        _card("Counterspell", "Instant", 4.2),
        _card("Swords to Plowshares", "Instant", 4.2),
        _card("Path to Exile", "Instant", 4.2),
        _card("Beast Within", "Instant", 4.2),
        _card("Generous Gift", "Instant", 4.2),
        _card("Chaos Warp", "Instant", 4.2),
    ]
    return [*spells, *fillers(55, cmc=4.2), *basics(37)]

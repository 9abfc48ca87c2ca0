"""Tests for rendering result records to JSON-compatible structures."""

import json
from dataclasses import dataclass, field
from datetime import UTC, datetime
from decimal import Decimal
from types import MappingProxyType

import pytest

from deckscope.analysis.budget import suggest_with_budget
from deckscope.models.budget import BudgetTier
from deckscope.models.interaction import InteractionCategory
from deckscope.models.serialization import to_dict, to_json_value


@dataclass
class _Inner:
    tier: BudgetTier
    price: Decimal


@dataclass
class _Outer:
    inner: _Inner
    colors: frozenset[str]
    counts: MappingProxyType
    by_category: dict[InteractionCategory, int]
    when: datetime
    items: list[_Inner] = field(default_factory=list)


class TestToJsonValue:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (BudgetTier.NO_LIMIT, "no_limit"),
            (Decimal("1.25"), 1.25),
            (frozenset({"U", "B", "W"}), ["B", "U", "W"]),
            ((1, 2), [1, 2]),
            ("plain", "plain"),
            (None, None),
        ],
    )
    def test_scalars(self, value: object, expected: object) -> None:
        assert to_json_value(value) == expected

    def test_datetime(self) -> None:
        when = datetime(2024, 5, 1, 12, 0, tzinfo=UTC)
        assert to_json_value(when) == "2024-05-01T12:00:00+00:00"


class TestToDict:
    def test_nested_records(self) -> None:
        record = _Outer(
            inner=_Inner(BudgetTier.BUDGET, Decimal("5.00")),
            colors=frozenset("UB"),
            counts=MappingProxyType({"Creature": 3}),
            by_category={InteractionCategory.COUNTERSPELLS: 2},
            when=datetime(2024, 5, 1, tzinfo=UTC),
            items=[_Inner(BudgetTier.MODERATE, Decimal("25"))],
        )
        data = to_dict(record)

        assert data["inner"] == {"tier": "budget", "price": 5.0}
        assert data["colors"] == ["B", "U"]
        assert data["counts"] == {"Creature": 3}
        assert data["by_category"] == {InteractionCategory.COUNTERSPELLS.value: 2}
        assert data["items"] == [{"tier": "moderate", "price": 25.0}]
        json.dumps(data)

    def test_engine_record_round_trips_through_json(self, make_card) -> None:
        crypt = make_card("Mana Crypt", "Artifact", 0, price="150")
        report = suggest_with_budget([crypt], "budget")
        decoded = json.loads(json.dumps(to_dict(report)))

        assert decoded["over_budget"] == 50.0
        assert decoded["tier"]["tier"] == "budget"
        assert decoded["suggestions"][0]["alternatives"] == [
            "Sol Ring",
            "Arcane Signet",
            "Mind Stone",
        ]

    @pytest.mark.parametrize("value", [{"a": 1}, _Inner, "text"])
    def test_rejects_non_records(self, value: object) -> None:
        with pytest.raises(TypeError):
            to_dict(value)

"""
Oracle-text classification.

Analyzers never read oracle text directly. They ask a CardClassifier for a
card's functional tags ("spot_removal", "mana_rock", ...). The default
KeywordClassifier is a substring heuristic over lower-cased oracle and type
text, driven by the keyword tables below. A real rules-text parser can be
dropped in later by implementing the same protocol.
"""

import re
from collections.abc import Callable
from dataclasses import dataclass
from functools import lru_cache
from typing import Protocol, runtime_checkable

from deckscope.models.card import CardStub


@runtime_checkable
class CardClassifier(Protocol):
    """Anything that can tag a card with functional roles."""

    def tags(self, card: CardStub) -> frozenset[str]: ...


@dataclass(frozen=True, slots=True)
class _CardText:
    """Lower-cased views of the fields the keyword rules look at."""

    name: str
    type_line: str
    oracle: str

    def has(self, *keywords: str) -> bool:
        """True when every keyword appears in the oracle text."""
        return all(k in self.oracle for k in keywords)

    def has_any(self, *keywords: str) -> bool:
        return any(k in self.oracle for k in keywords)


_ALL_WORD = re.compile(r"\ball\b")


def _spot_removal(t: _CardText) -> bool:
    return t.has_any("destroy", "exile") and "target" in t.oracle and not _ALL_WORD.search(t.oracle)


def _board_wipe(t: _CardText) -> bool:
    return t.has_any("destroy all", "exile all") and "creature" in t.oracle


def _counterspell(t: _CardText) -> bool:
    return "instant" in t.type_line and "counter target" in t.oracle


def _protection(t: _CardText) -> bool:
    return t.has_any("indestructible", "hexproof") and "you control" in t.oracle


def _graveyard_hate(t: _CardText) -> bool:
    return t.has("exile", "graveyard") and not t.has_any("may play", "may cast")


def _artifact_enchantment_removal(t: _CardText) -> bool:
    return (
        t.has_any("destroy", "exile")
        and t.has_any("artifact", "enchantment")
        and "target" in t.oracle
    )


def _card_draw(t: _CardText) -> bool:
    return "draw" in t.oracle and "card" in t.oracle


def _impulse_draw(t: _CardText) -> bool:
    return "exile" in t.oracle and t.has_any("may play", "may cast")


def _recursion(t: _CardText) -> bool:
    return t.has_any("return", "reanimate") and "graveyard" in t.oracle


def _mana_rock(t: _CardText) -> bool:
    return "artifact" in t.type_line and "land" not in t.type_line and "add" in t.oracle


def _mana_dork(t: _CardText) -> bool:
    return "creature" in t.type_line and "{t}: add" in t.oracle


def _land_ramp(t: _CardText) -> bool:
    if "land" in t.type_line:
        return False
    return t.has("search", "land") or t.has("put", "land", "battlefield")


def _cost_reducer(t: _CardText) -> bool:
    return "cost" in t.oracle and t.has_any("less", "reduce")


def _tutor(t: _CardText) -> bool:
    return "search your library for" in t.oracle and "land card" not in t.oracle


def _token_maker(t: _CardText) -> bool:
    return t.has("create", "token")


def _counters(t: _CardText) -> bool:
    return t.has_any("+1/+1 counter", "proliferate")


def _aristocrats(t: _CardText) -> bool:
    return t.has_any("sacrifice", "dies")


def _sacrifice_outlet(t: _CardText) -> bool:
    return t.has_any("sacrifice a creature", "sacrifice another creature")


# Tag -> rule. Each rule sees lower-cased name, type line and oracle text.
KEYWORD_RULES: dict[str, Callable[[_CardText], bool]] = {
    "spot_removal": _spot_removal,
    "board_wipe": _board_wipe,
    "counterspell": _counterspell,
    "protection": _protection,
    "graveyard_hate": _graveyard_hate,
    "artifact_enchantment_removal": _artifact_enchantment_removal,
    "card_draw": _card_draw,
    "impulse_draw": _impulse_draw,
    "recursion": _recursion,
    "mana_rock": _mana_rock,
    "mana_dork": _mana_dork,
    "land_ramp": _land_ramp,
    "cost_reducer": _cost_reducer,
    "tutor": _tutor,
    "token_maker": _token_maker,
    "counters": _counters,
    "aristocrats": _aristocrats,
    "sacrifice_outlet": _sacrifice_outlet,
}

# Convenience groupings used by several analyzers
RAMP_TAGS = frozenset({"mana_rock", "mana_dork", "land_ramp", "cost_reducer"})
DRAW_TAGS = frozenset({"card_draw", "impulse_draw", "recursion"})
REMOVAL_TAGS = frozenset({"spot_removal", "board_wipe"})


class KeywordClassifier:
    """Substring classifier over oracle text and type line."""

    def __init__(self, rules: dict[str, Callable[[_CardText], bool]] | None = None):
        self._rules = rules if rules is not None else KEYWORD_RULES

    def tags(self, card: CardStub) -> frozenset[str]:
        if not card.oracle_text:
            return frozenset()
        text = _CardText(
            name=card.name.lower(),
            type_line=card.type_line.lower(),
            oracle=card.oracle_text.lower(),
        )
        return frozenset(tag for tag, rule in self._rules.items() if rule(text))


class _CachingClassifier(KeywordClassifier):
    """Keyword classifier memoized per card; CardStub is immutable."""

    @lru_cache(maxsize=4096)  # noqa: B019 - one process-wide instance
    def tags(self, card: CardStub) -> frozenset[str]:
        return super().tags(card)


_DEFAULT = _CachingClassifier()


def default_classifier() -> CardClassifier:
    """The shared keyword classifier used when callers do not supply one."""
    return _DEFAULT


def resolve_classifier(classifier: CardClassifier | None) -> CardClassifier:
    return classifier if classifier is not None else _DEFAULT

"""
Synergy and combo records.

SynergyRecord is static knowledge attached to one card. Its partners and
combo pieces are PartnerSpec values: a closed set of three variants, each
answering `matches(card, classifier)` so wildcard pieces ("any zombie",
"mana rocks") are evaluated the same way as literal names.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

from deckscope.models.card import CardStub, normalize_name

if TYPE_CHECKING:
    from deckscope.analysis.classifier import CardClassifier


class SynergyCategory(str, Enum):
    COMBO = "combo"
    ENGINE = "engine"
    TRIBAL = "tribal"
    COUNTERS = "counters"
    TOKENS = "tokens"
    GRAVEYARD = "graveyard"
    ETB = "etb"
    SACRIFICE = "sacrifice"
    PLANESWALKERS = "planeswalkers"
    ARTIFACTS = "artifacts"
    LANDFALL = "landfall"
    SPELLSLINGER = "spellslinger"


class ComboKind(str, Enum):
    FINITE = "finite"
    INFINITE = "infinite"


class WinType(str, Enum):
    """How a card or combo ends the game."""

    COMBO = "combo"
    COMBAT = "combat"
    ALTERNATE = "alternate"
    ATTRITION = "attrition"
    COMMANDER = "commander"
    MILL = "mill"


# =============================================================================
# PARTNER SPECS
# =============================================================================


@dataclass(frozen=True, slots=True)
class LiteralCard:
    """A specific card, matched by normalized name."""

    name: str

    @property
    def label(self) -> str:
        return self.name

    def matches(self, card: CardStub, classifier: CardClassifier | None = None) -> bool:
        return card.key == normalize_name(self.name)


@dataclass(frozen=True, slots=True)
class AnyOfType:
    """Any card whose type line contains a keyword, optionally with oracle text."""

    type_keyword: str
    oracle_keyword: str | None = None

    @property
    def label(self) -> str:
        return f"any {self.type_keyword.lower()}"

    def matches(self, card: CardStub, classifier: CardClassifier | None = None) -> bool:
        if not card.has_type(self.type_keyword):
            return False
        if self.oracle_keyword is None:
            return True
        return self.oracle_keyword.lower() in card.oracle_text.lower()


@dataclass(frozen=True, slots=True)
class AnyWithTag:
    """Any card the classifier tags with `tag` (e.g. "mana_rock")."""

    tag: str
    description: str = ""

    @property
    def label(self) -> str:
        return self.description or f"any {self.tag.replace('_', ' ')}"

    def matches(self, card: CardStub, classifier: CardClassifier | None = None) -> bool:
        if classifier is None:
            from deckscope.analysis.classifier import default_classifier

            classifier = default_classifier()
        return self.tag in classifier.tags(card)


PartnerSpec = LiteralCard | AnyOfType | AnyWithTag


# =============================================================================
# STATIC KNOWLEDGE
# =============================================================================


@dataclass(frozen=True, slots=True)
class ComboDefinition:
    """
    A multi-card interaction anchored on one card.

    Every piece must be present alongside the anchor for the combo to fire.
    """

    pieces: tuple[PartnerSpec, ...]
    description: str
    kind: ComboKind = ComboKind.INFINITE
    win_type: WinType = WinType.COMBO

    @property
    def labels(self) -> list[str]:
        return [piece.label for piece in self.pieces]


@dataclass(frozen=True, slots=True)
class SynergyRecord:
    """Synergy facts for one card."""

    categories: tuple[SynergyCategory, ...]
    partners: tuple[PartnerSpec, ...] = ()
    combos: tuple[ComboDefinition, ...] = ()
    anti_synergies: tuple[str, ...] = ()
    power_multiplier: float = 1.0
    description: str = ""

    @property
    def literal_partners(self) -> list[str]:
        return [p.name for p in self.partners if isinstance(p, LiteralCard)]


# =============================================================================
# DETECTION RESULTS
# =============================================================================


@dataclass(frozen=True, slots=True)
class SynergyPair:
    """Two present cards (or a card and a combo package) that work together."""

    card1: str
    card2: str
    categories: tuple[str, ...]
    description: str
    combo_kind: ComboKind | None = None


@dataclass(frozen=True, slots=True)
class Combo:
    """A combo whose pieces are all present in the deck."""

    main_card: str
    pieces: tuple[str, ...]
    description: str
    type: WinType
    kind: ComboKind
    categories: tuple[str, ...] = ()

    @property
    def cards(self) -> tuple[str, ...]:
        return (self.main_card, *self.pieces)


@dataclass
class SynergyScore:
    """Deck-level synergy score (0-10)."""

    score: int
    total_pairs: int
    deck_size: int
    category_breakdown: dict[str, int] = field(default_factory=dict)
    rating: str = "Low"
    analysis: str = ""


@dataclass
class SynergySuggestion:
    """A catalogued partner the deck does not run yet."""

    card: str
    score: float
    reasons: list[str] = field(default_factory=list)
    categories: list[str] = field(default_factory=list)


@dataclass(frozen=True, slots=True)
class CategoryCount:
    category: str
    count: int

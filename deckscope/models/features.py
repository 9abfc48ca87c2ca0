"""
Deck feature vectors and similarity results.

A DeckFeatureVector is derived from a decklist snapshot and never stored;
recompute it whenever the decklist changes.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from deckscope.models.card import CardStub, sort_colors


@dataclass(frozen=True, slots=True)
class DeckFeatureVector:
    """
    Structural summary of a decklist.

    Attributes:
        color_identity: Color symbols present among non-land cards
        average_cmc: Mean CMC of non-land cards, two decimals (0 when none)
        card_type_histogram: Primary type token -> copies
        themes: Theme tags that crossed their detection threshold
        card_frequency: Card name -> copies
        deck_size: Number of physical cards
    """

    color_identity: frozenset[str] = frozenset()
    average_cmc: float = 0.0
    card_type_histogram: Mapping[str, int] = field(
        default_factory=lambda: MappingProxyType({})
    )
    themes: frozenset[str] = frozenset()
    card_frequency: Mapping[str, int] = field(default_factory=lambda: MappingProxyType({}))
    deck_size: int = 0

    @property
    def color_key(self) -> str:
        """Colors in WUBRG order joined into one string, e.g. "WUB"."""
        return "".join(sort_colors(self.color_identity))

    @property
    def is_empty(self) -> bool:
        return self.deck_size == 0


@dataclass
class CorpusDeck:
    """One deck of the comparison corpus, plus optional performance data."""

    name: str
    decklist: list[CardStub] = field(default_factory=list)
    commander: str | None = None
    wins: int = 0
    games: int = 0


@dataclass(frozen=True, slots=True)
class SimilarityResult:
    """A corpus deck scored against a target."""

    deck: CorpusDeck
    similarity: float
    matched_themes: tuple[str, ...] = ()
    color_match: bool = False

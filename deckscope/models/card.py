"""
Card and deck value types shared by every analyzer.

A decklist is a flat sequence of CardStub objects, one per physical copy.
Deck is the richer container (entries with quantities, commander, archetype)
and expands to a decklist through `Deck.cards`.
"""

from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass, field
from decimal import Decimal

from deckscope.models.failure import InvalidInputError

COLOR_ORDER: tuple[str, ...] = ("W", "U", "B", "R", "G")

BASIC_LAND_NAMES = frozenset(
    {
        "plains",
        "island",
        "swamp",
        "mountain",
        "forest",
        "wastes",
        "snow-covered plains",
        "snow-covered island",
        "snow-covered swamp",
        "snow-covered mountain",
        "snow-covered forest",
    }
)


def normalize_name(name: str) -> str:
    """Normalize a card name for lookups (case-folded, trimmed, straight quotes)."""
    return name.replace("’", "'").strip().casefold()


def sort_colors(colors: Iterable[str]) -> tuple[str, ...]:
    """Order color symbols as W, U, B, R, G; unknown symbols are dropped."""
    present = set(colors)
    return tuple(c for c in COLOR_ORDER if c in present)


@dataclass(frozen=True, slots=True)
class CardStub:
    """
    The minimal card description the engine needs.

    Attributes:
        name: Card name, the identity key
        colors: Color symbols (subset of W, U, B, R, G)
        cmc: Converted mana cost
        type_line: Full type line, e.g. "Legendary Creature — Elf Druid"
        oracle_text: Rules text, empty when unknown
        price: Market price in USD, None when unknown
        mana_cost: Mana cost string, e.g. "{1}{U}{U}"
    """

    name: str
    colors: frozenset[str] = frozenset()
    cmc: float = 0.0
    type_line: str = ""
    oracle_text: str = ""
    price: Decimal | None = None
    mana_cost: str = ""

    def __post_init__(self) -> None:
        if not isinstance(self.colors, frozenset):
            object.__setattr__(self, "colors", frozenset(self.colors))

    @property
    def key(self) -> str:
        return normalize_name(self.name)

    @property
    def is_land(self) -> bool:
        return "Land" in self.type_line

    @property
    def is_basic_land(self) -> bool:
        return self.is_land and (
            "Basic" in self.type_line or normalize_name(self.name) in BASIC_LAND_NAMES
        )

    @property
    def primary_type(self) -> str:
        return primary_type(self.type_line)

    def has_type(self, keyword: str) -> bool:
        """Case-insensitive substring test against the type line."""
        return keyword.lower() in self.type_line.lower()


def primary_type(type_line: str) -> str:
    """
    Primary type token of a type line.

    Takes the segment before the first dash (em dash or hyphen) and returns its
    last whitespace-delimited word: "Legendary Creature — Elf" -> "Creature".
    """
    head = type_line.replace("—", "-").split("-")[0].strip()
    if not head:
        return "Unknown"
    return head.split()[-1]


@dataclass(frozen=True, slots=True)
class DeckEntry:
    """A card together with the number of copies in the deck."""

    card: CardStub
    quantity: int = 1


@dataclass
class Deck:
    """
    An ordered collection of deck entries.

    The commander, when set, counts toward the deck and is the first card of
    the expanded decklist.
    """

    entries: list[DeckEntry] = field(default_factory=list)
    commander: CardStub | None = None
    archetype: str | None = None
    name: str = ""

    @property
    def main_deck(self) -> list[CardStub]:
        """Expanded decklist without the commander."""
        cards: list[CardStub] = []
        for entry in self.entries:
            cards.extend([entry.card] * max(entry.quantity, 0))
        return cards

    @property
    def cards(self) -> list[CardStub]:
        """Expanded decklist, one CardStub per physical copy."""
        if self.commander is None:
            return self.main_deck
        return [self.commander, *self.main_deck]

    @property
    def size(self) -> int:
        return len(self.cards)

    @classmethod
    def from_cards(
        cls,
        cards: Iterable[CardStub],
        commander: CardStub | None = None,
        archetype: str | None = None,
        name: str = "",
    ) -> "Deck":
        """Build a deck from a flat card sequence, folding duplicates into quantities."""
        counts: dict[str, int] = {}
        first_seen: dict[str, CardStub] = {}
        for card in ensure_decklist(cards):
            counts[card.name] = counts.get(card.name, 0) + 1
            first_seen.setdefault(card.name, card)
        entries = [DeckEntry(card=first_seen[n], quantity=q) for n, q in counts.items()]
        return cls(entries=entries, commander=commander, archetype=archetype, name=name)


DecklistInput = Deck | Iterable[CardStub] | None


def ensure_decklist(decklist: DecklistInput, argument: str = "decklist") -> list[CardStub]:
    """
    Coerce analyzer input into a list of CardStub objects.

    None yields an empty list (absent decklists produce zeroed results).
    Anything that is not a Deck or an iterable of CardStub raises
    InvalidInputError.
    """
    if decklist is None:
        return []
    if isinstance(decklist, Deck):
        return decklist.cards
    if isinstance(decklist, (str, bytes, Mapping)) or not isinstance(decklist, Iterable):
        raise InvalidInputError(argument, "a Deck or a sequence of CardStub", decklist)

    cards = list(decklist)
    for card in cards:
        if not isinstance(card, CardStub):
            raise InvalidInputError(f"{argument} element", "a CardStub", card)
    return cards


def ensure_colors(colors: Iterable[str] | None, argument: str = "colors") -> frozenset[str]:
    """Coerce a color selection into a frozenset of known symbols."""
    if colors is None:
        return frozenset()
    if isinstance(colors, str):
        return frozenset(c for c in colors.upper() if c in COLOR_ORDER)
    if not isinstance(colors, Iterable):
        raise InvalidInputError(argument, "an iterable of color symbols", colors)
    return frozenset(str(c).upper() for c in colors if str(c).upper() in COLOR_ORDER)


def unique_cards(decklist: Sequence[CardStub]) -> list[CardStub]:
    """First copy of each distinct card name, in decklist order."""
    seen: set[str] = set()
    result: list[CardStub] = []
    for card in decklist:
        if card.key in seen:
            continue
        seen.add(card.key)
        result.append(card)
    return result

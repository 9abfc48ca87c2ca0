"""
Parser for plain-text decklists.

Format:
    <quantity>[x] <card name> [(<set_code>) <collector_number>]

Example:
    Commander
    1 Atraxa, Praetors' Voice

    Deck
    1 Sol Ring (C21) 263
    1x Arcane Signet
    35 Forest

Sections are separated by headers: Commander, Deck, Mainboard, Sideboard,
Maybeboard, Companion. A trailing colon and leading "//" are accepted on a
header. Cards before any header belong to the deck.
"""

import logging
import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from deckscope.models.card import CardStub, Deck, DeckEntry, normalize_name
from deckscope.parsers.records import CardRecord, parse_card

logger = logging.getLogger(__name__)

# "1 Sol Ring (C21) 263" or "1x Sol Ring (C21) 263a"
FULL_PATTERN = re.compile(r"^(\d+)x?\s+(.+?)\s+\(([A-Za-z0-9]+)\)\s+(\S+)$")

# "1 Sol Ring" or "1x Sol Ring"
SIMPLE_PATTERN = re.compile(r"^(\d+)x?\s+(.+)$")

COMMANDER_SECTIONS = frozenset({"commander", "commanders"})
DECK_SECTIONS = frozenset({"deck", "main", "mainboard", "main deck"})
SIDE_SECTIONS = frozenset({"sideboard", "maybeboard", "companion", "considering"})


@dataclass(frozen=True, slots=True)
class TextEntry:
    quantity: int
    name: str
    section: str
    line_number: int


@dataclass
class ParsedDecklist:
    """
    Structure extracted from decklist text.

    Card names are as written; nothing has been resolved against card data.
    """

    commanders: list[TextEntry] = field(default_factory=list)
    main: list[TextEntry] = field(default_factory=list)
    sideboard: list[TextEntry] = field(default_factory=list)
    unparseable_lines: list[tuple[int, str]] = field(default_factory=list)

    @property
    def main_count(self) -> int:
        return sum(entry.quantity for entry in self.main)


def _section_name(line: str) -> str | None:
    header = line.lstrip("/").strip().rstrip(":").strip().lower()
    if header in COMMANDER_SECTIONS:
        return "commander"
    if header in DECK_SECTIONS:
        return "deck"
    if header in SIDE_SECTIONS:
        return "sideboard"
    return None


def parse_decklist_text(text: str) -> ParsedDecklist:
    """
    Parse decklist text into sections.

    Args:
        text: Raw decklist text (clipboard paste or file contents)

    Returns:
        ParsedDecklist. Lines that are neither a header nor a card line are
        collected in `unparseable_lines` with their line numbers.
    """
    parsed = ParsedDecklist()
    if not text or not text.strip():
        return parsed

    section = "deck"
    for line_number, raw in enumerate(text.splitlines(), 1):
        line = raw.strip()
        if not line:
            continue

        header = _section_name(line)
        if header is not None:
            section = header
            continue

        match = FULL_PATTERN.match(line) or SIMPLE_PATTERN.match(line)
        if match is None:
            parsed.unparseable_lines.append((line_number, line))
            continue

        entry = TextEntry(
            quantity=int(match.group(1)),
            name=match.group(2).strip(),
            section=section,
            line_number=line_number,
        )
        if section == "commander":
            parsed.commanders.append(entry)
        elif section == "sideboard":
            parsed.sideboard.append(entry)
        else:
            parsed.main.append(entry)

    if parsed.unparseable_lines:
        logger.debug("Skipped %d unparseable decklist lines", len(parsed.unparseable_lines))
    return parsed


CardLookup = Mapping[str, CardStub | CardRecord | Mapping[str, Any]]


def _resolve(name: str, lookup: CardLookup) -> CardStub:
    data = lookup.get(normalize_name(name))
    if data is None:
        logger.debug("No card data for %s; using name only", name)
        return CardStub(name=name)
    if isinstance(data, CardStub):
        return data
    return parse_card(data)


def build_deck(
    parsed: ParsedDecklist,
    card_data: CardLookup | None = None,
    archetype: str | None = None,
    name: str = "",
) -> Deck:
    """
    Resolve a parsed decklist into a Deck.

    Args:
        parsed: Output of parse_decklist_text
        card_data: Card name -> CardStub or card record; unknown names become
            name-only cards
        archetype: Archetype to attach to the deck
        name: Deck name

    Returns:
        Deck with the first commander entry as commander; the sideboard is
        dropped
    """
    lookup = {normalize_name(key): value for key, value in (card_data or {}).items()}

    commander = _resolve(parsed.commanders[0].name, lookup) if parsed.commanders else None
    entries = [
        DeckEntry(card=_resolve(entry.name, lookup), quantity=entry.quantity)
        for entry in parsed.main
    ]
    # Partner commanders beyond the first stay in the deck
    entries.extend(
        DeckEntry(card=_resolve(entry.name, lookup), quantity=entry.quantity)
        for entry in parsed.commanders[1:]
    )
    return Deck(entries=entries, commander=commander, archetype=archetype, name=name)

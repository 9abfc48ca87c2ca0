from deckscope.parsers.decklist_text import (
    ParsedDecklist,
    TextEntry,
    build_deck,
    parse_decklist_text,
)
from deckscope.parsers.records import (
    CardRecord,
    CorpusDeckRecord,
    DeckRecord,
    GameResultRecord,
    parse_card,
    parse_cards,
    parse_corpus,
    parse_deck,
    parse_game_result,
)

__all__ = [
    "CardRecord",
    "CorpusDeckRecord",
    "DeckRecord",
    "GameResultRecord",
    "ParsedDecklist",
    "TextEntry",
    "build_deck",
    "parse_card",
    "parse_cards",
    "parse_corpus",
    "parse_deck",
    "parse_decklist_text",
    "parse_game_result",
]

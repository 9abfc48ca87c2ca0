"""
JSON-compatible input records.

Card dicts, deck records, corpus entries and game results arrive from
outside the engine with loose shapes: Scryfall field names or short aliases,
missing numbers, prices as strings. The pydantic models here accept those
shapes with soft defaults and convert them to the domain types the analyzers
take. A card without a name raises CardDataError; any other malformed record
raises RecordError.
"""

import logging
import math
from collections.abc import Iterable, Mapping
from decimal import Decimal, InvalidOperation
from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, ValidationError, field_validator

from deckscope.models.card import CardStub, Deck, DeckEntry, ensure_colors, normalize_name
from deckscope.models.failure import CardDataError, FailureKind, RecordError
from deckscope.models.features import CorpusDeck
from deckscope.models.meta import GameOutcome, GameResult

logger = logging.getLogger(__name__)


def _to_decimal(value: Any) -> Decimal | None:
    if value is None or value == "":
        return None
    try:
        price = Decimal(str(value))
    except InvalidOperation:
        logger.debug("Ignoring unparseable price %r", value)
        return None
    return price if price.is_finite() and price >= 0 else None


def _number_or_zero(value: Any, field: str, cast: type[int] | type[float]) -> Any:
    """Blank or unparseable numbers become 0; real numbers pass through to validation."""
    if value is None or value == "":
        return cast(0)
    if isinstance(value, int | float) and not isinstance(value, bool):
        number = value
    else:
        try:
            number = cast(str(value).strip())
        except ValueError:
            logger.debug("Ignoring unparseable %s %r", field, value)
            return cast(0)
    if not math.isfinite(number):
        logger.debug("Ignoring non-finite %s %r", field, value)
        return cast(0)
    return number


def _card_input(value: Any) -> Any:
    """Bare card names are shorthand for {"name": ...}."""
    if isinstance(value, str):
        return {"name": value}
    return value


class CardRecord(BaseModel):
    """A card as it arrives from Scryfall or a hand-written deck file."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    name: str = ""
    colors: list[str] = Field(default_factory=list)
    cmc: float = Field(default=0.0, validation_alias=AliasChoices("cmc", "mana_value"))
    type_line: str = Field(default="", validation_alias=AliasChoices("type_line", "type"))
    oracle_text: str = Field(default="", validation_alias=AliasChoices("oracle_text", "text"))
    mana_cost: str = ""
    price: Decimal | None = None
    prices: dict[str, Any] = Field(default_factory=dict)
    quantity: int = Field(default=1, ge=0)

    @field_validator("name", "type_line", "oracle_text", "mana_cost", mode="before")
    @classmethod
    def _text_or_empty(cls, value: Any) -> Any:
        return "" if value is None else value

    @field_validator("colors", mode="before")
    @classmethod
    def _split_colors(cls, value: Any) -> Any:
        if value is None:
            return []
        if isinstance(value, str):
            return list(value)
        return value

    @field_validator("cmc", mode="before")
    @classmethod
    def _cmc_or_zero(cls, value: Any) -> Any:
        return _number_or_zero(value, "cmc", float)

    @field_validator("quantity", mode="before")
    @classmethod
    def _parse_quantity(cls, value: Any) -> Any:
        if value is None or value == "":
            return 1
        return _number_or_zero(value, "quantity", int)

    @field_validator("price", mode="before")
    @classmethod
    def _parse_price(cls, value: Any) -> Decimal | None:
        return _to_decimal(value)

    @field_validator("prices", mode="before")
    @classmethod
    def _prices_or_empty(cls, value: Any) -> Any:
        return {} if value is None else value

    @property
    def market_price(self) -> Decimal | None:
        """Explicit price first, then Scryfall's prices.usd."""
        if self.price is not None:
            return self.price
        return _to_decimal(self.prices.get("usd"))

    def to_domain(self) -> CardStub:
        if not self.name.strip():
            raise CardDataError(
                "card has no name", self.model_dump(), kind=FailureKind.MISSING_REQUIRED
            )
        return CardStub(
            name=self.name.strip(),
            colors=ensure_colors(self.colors),
            cmc=self.cmc,
            type_line=self.type_line,
            oracle_text=self.oracle_text,
            price=self.market_price,
            mana_cost=self.mana_cost,
        )


class DeckRecord(BaseModel):
    """A deck: card entries with quantities, plus an optional commander."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    name: str = ""
    commander: CardRecord | None = None
    archetype: str | None = Field(
        default=None, validation_alias=AliasChoices("archetype", "strategy")
    )
    cards: list[CardRecord] = Field(
        default_factory=list, validation_alias=AliasChoices("cards", "decklist")
    )

    @field_validator("commander", mode="before")
    @classmethod
    def _commander_input(cls, value: Any) -> Any:
        return _card_input(value)

    @field_validator("cards", mode="before")
    @classmethod
    def _card_inputs(cls, value: Any) -> Any:
        if value is None:
            return []
        return [_card_input(v) for v in value]

    def to_domain(self) -> Deck:
        """
        Build a Deck.

        A commander given only by name takes the matching card record from
        the list when there is one; that copy then leaves the main deck.
        """
        cards = list(self.cards)
        commander: CardStub | None = None
        if self.commander is not None:
            commander = self.commander.to_domain()
            key = normalize_name(commander.name)
            for i, record in enumerate(cards):
                if normalize_name(record.name) != key:
                    continue
                if not self.commander.type_line:
                    commander = record.to_domain()
                if record.quantity <= 1:
                    cards.pop(i)
                else:
                    cards[i] = record.model_copy(update={"quantity": record.quantity - 1})
                break

        entries = [DeckEntry(card=r.to_domain(), quantity=r.quantity) for r in cards]
        return Deck(entries=entries, commander=commander, archetype=self.archetype, name=self.name)


class CorpusDeckRecord(BaseModel):
    """One comparison deck, optionally with its game record."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    name: str = ""
    commander: str | None = None
    decklist: list[CardRecord] = Field(
        default_factory=list, validation_alias=AliasChoices("decklist", "cards")
    )
    wins: int = Field(default=0, ge=0)
    games: int = Field(default=0, ge=0)

    @field_validator("commander", mode="before")
    @classmethod
    def _commander_name(cls, value: Any) -> Any:
        if isinstance(value, Mapping):
            return value.get("name")
        return value

    @field_validator("decklist", mode="before")
    @classmethod
    def _card_inputs(cls, value: Any) -> Any:
        if value is None:
            return []
        return [_card_input(v) for v in value]

    @field_validator("wins", "games", mode="before")
    @classmethod
    def _count_or_zero(cls, value: Any) -> Any:
        return 0 if value is None else value

    def to_domain(self) -> CorpusDeck:
        decklist: list[CardStub] = []
        for record in self.decklist:
            decklist.extend([record.to_domain()] * record.quantity)
        return CorpusDeck(
            name=self.name,
            decklist=decklist,
            commander=self.commander,
            wins=self.wins,
            games=self.games,
        )


class GameResultRecord(BaseModel):
    """A game result as submitted by a client."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    deck_used: str = Field(validation_alias=AliasChoices("deckUsed", "deck_used"))
    result: GameOutcome
    turns: int | None = Field(default=None, ge=0)
    opponent_commanders: list[str] = Field(
        default_factory=list,
        validation_alias=AliasChoices("opponentCommanders", "opponent_commanders"),
    )
    notes: str = ""

    @field_validator("result", mode="before")
    @classmethod
    def _lower_result(cls, value: Any) -> Any:
        return value.strip().lower() if isinstance(value, str) else value

    @field_validator("notes", mode="before")
    @classmethod
    def _notes_or_empty(cls, value: Any) -> Any:
        return "" if value is None else value

    @field_validator("opponent_commanders", mode="before")
    @classmethod
    def _commanders_or_empty(cls, value: Any) -> Any:
        return [] if value is None else value

    def to_domain(self) -> GameResult:
        return GameResult(
            deck_used=self.deck_used,
            result=self.result,
            turns=self.turns or None,
            opponent_commanders=tuple(self.opponent_commanders),
            notes=self.notes,
        )


# =============================================================================
# ENTRY POINTS
# =============================================================================


def _validate(model: type[BaseModel], data: Any, record_type: str) -> Any:
    if isinstance(data, model):
        return data
    try:
        return model.model_validate(data)
    except ValidationError as exc:
        first = exc.errors()[0]
        location = ".".join(str(part) for part in first["loc"])
        reason = f"{location}: {first['msg']}" if location else first["msg"]
        missing = first["type"] == "missing"
        kind = FailureKind.MISSING_REQUIRED if missing else FailureKind.INVALID_INPUT
        if record_type == "card":
            raise CardDataError(reason, data, kind) from exc
        raise RecordError(reason, data, record_type, kind) from exc


def parse_card(data: Mapping[str, Any] | CardRecord | str) -> CardStub:
    """
    Convert one card record to a CardStub.

    Raises:
        CardDataError: If the record has no name or a malformed field
    """
    record: CardRecord = _validate(CardRecord, _card_input(data), "card")
    return record.to_domain()


def parse_cards(data: Iterable[Mapping[str, Any] | CardRecord | str]) -> list[CardStub]:
    """Convert card records to a decklist, expanding quantities."""
    cards: list[CardStub] = []
    for item in data:
        record: CardRecord = _validate(CardRecord, _card_input(item), "card")
        cards.extend([record.to_domain()] * record.quantity)
    return cards


def parse_deck(data: Mapping[str, Any] | DeckRecord) -> Deck:
    record: DeckRecord = _validate(DeckRecord, data, "deck")
    return record.to_domain()


def parse_corpus(data: Iterable[Mapping[str, Any] | CorpusDeckRecord]) -> list[CorpusDeck]:
    """Convert corpus entries to CorpusDeck objects; malformed entries raise RecordError."""
    corpus = [_validate(CorpusDeckRecord, item, "corpus deck").to_domain() for item in data]
    logger.debug("Parsed corpus of %d decks", len(corpus))
    return corpus


def parse_game_result(data: Mapping[str, Any] | GameResultRecord) -> GameResult:
    """
    Convert a game result record.

    Raises:
        RecordError: If deckUsed is missing or result is not win, loss or draw
    """
    record: GameResultRecord = _validate(GameResultRecord, data, "game result")
    return record.to_domain()

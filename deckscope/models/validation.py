"""Deck legality report."""

from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class DeckStats:
    total_cards: int = 0
    lands: int = 0
    creatures: int = 0
    instants: int = 0
    sorceries: int = 0
    enchantments: int = 0
    artifacts: int = 0
    planeswalkers: int = 0


@dataclass
class ValidationResult:
    """
    Outcome of a legality check.

    Errors make the deck illegal; warnings are structural advice.
    """

    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    info: list[str] = field(default_factory=list)
    stats: DeckStats = field(default_factory=DeckStats)
    banned_cards: list[str] = field(default_factory=list)
    duplicates: dict[str, int] = field(default_factory=dict)
    off_color_cards: list[str] = field(default_factory=list)

    @property
    def valid(self) -> bool:
        return not self.errors

"""
Archetype baselines.

Per-strategy targets used by the curve, mana base and balance analyzers.
Any field an archetype leaves unset falls back to the midrange baseline, and
unknown archetype names resolve to midrange.
"""

from dataclasses import dataclass

from deckscope.models.balance import IdealRatios
from deckscope.models.curve import ExpectedCmc

DEFAULT_ARCHETYPE = "midrange"


@dataclass(frozen=True, slots=True)
class ArchetypeBaseline:
    name: str
    description: str
    expected_cmc: ExpectedCmc | None = None
    ideal_curve: dict[str, float] | None = None
    base_lands: int | None = None
    ratios: IdealRatios | None = None


ARCHETYPES: dict[str, ArchetypeBaseline] = {
    "aggro": ArchetypeBaseline(
        name="Aggro",
        description="Win through early, aggressive creature-based combat",
        expected_cmc=ExpectedCmc(minimum=2.0, maximum=3.0, optimal=2.5),
        ideal_curve={
            "0": 0.02,
            "1": 0.08,
            "2": 0.20,
            "3": 0.22,
            "4": 0.20,
            "5": 0.15,
            "6": 0.08,
            "7+": 0.05,
        },
        base_lands=35,
        ratios=IdealRatios(ramp=8, draw=8, interaction=6, threats=35, lands=35),
    ),
    "midrange": ArchetypeBaseline(
        name="Midrange",
        description="Flexible value creatures backed by interaction",
        expected_cmc=ExpectedCmc(minimum=3.0, maximum=3.5, optimal=3.2),
        ideal_curve={
            "0": 0.02,
            "1": 0.05,
            "2": 0.18,
            "3": 0.22,
            "4": 0.20,
            "5": 0.15,
            "6": 0.10,
            "7+": 0.08,
        },
        base_lands=37,
        ratios=IdealRatios(ramp=10, draw=10, interaction=10, threats=30, lands=37),
    ),
    "control": ArchetypeBaseline(
        name="Control",
        description="Control the game through counterspells, removal, and card advantage",
        expected_cmc=ExpectedCmc(minimum=3.5, maximum=4.5, optimal=4.0),
        ideal_curve={
            "0": 0.02,
            "1": 0.03,
            "2": 0.15,
            "3": 0.18,
            "4": 0.20,
            "5": 0.18,
            "6": 0.12,
            "7+": 0.12,
        },
        base_lands=38,
        ratios=IdealRatios(ramp=12, draw=12, interaction=15, threats=20, lands=38),
    ),
    "combo": ArchetypeBaseline(
        name="Combo",
        description="Win through specific card combinations that create infinite loops "
        "or instant wins",
        expected_cmc=ExpectedCmc(minimum=2.5, maximum=3.5, optimal=3.0),
        ideal_curve={
            "0": 0.03,
            "1": 0.08,
            "2": 0.20,
            "3": 0.22,
            "4": 0.18,
            "5": 0.15,
            "6": 0.08,
            "7+": 0.06,
        },
        base_lands=35,
        ratios=IdealRatios(ramp=12, draw=15, interaction=8, threats=25, lands=36),
    ),
    "tribal": ArchetypeBaseline(
        name="Tribal",
        description="Creature type synergies and lords",
        ratios=IdealRatios(ramp=8, draw=10, interaction=8, threats=35, lands=36),
    ),
    "voltron": ArchetypeBaseline(
        name="Voltron",
        description="Suit up the commander and win through commander damage",
        ratios=IdealRatios(ramp=8, draw=10, interaction=8, threats=35, lands=36),
    ),
    "aristocrats": ArchetypeBaseline(
        name="Aristocrats",
        description="Sacrifice creatures for value and drain opponents",
    ),
    "tokens": ArchetypeBaseline(
        name="Tokens",
        description="Go wide with creature tokens and anthem effects",
    ),
    "superfriends": ArchetypeBaseline(
        name="Superfriends",
        description="Planeswalker-focused strategy",
    ),
    "spellslinger": ArchetypeBaseline(
        name="Spellslinger",
        description="Cast many instants and sorceries for value",
    ),
    "stax": ArchetypeBaseline(
        name="Stax",
        description="Restrict opponents' resources while breaking symmetry",
    ),
}


def archetype_key(name: str | None) -> str:
    """Lowercase catalogue key for an archetype name; unknown names map to midrange."""
    key = (name or DEFAULT_ARCHETYPE).strip().lower()
    return key if key in ARCHETYPES else DEFAULT_ARCHETYPE


def get_archetype(name: str | None) -> ArchetypeBaseline:
    """Baseline for an archetype name; unknown names resolve to midrange."""
    return ARCHETYPES[archetype_key(name)]


def _fallback() -> ArchetypeBaseline:
    return ARCHETYPES[DEFAULT_ARCHETYPE]


def expected_cmc(name: str | None) -> ExpectedCmc:
    value = get_archetype(name).expected_cmc
    return value if value is not None else _fallback().expected_cmc  # type: ignore[return-value]


def ideal_curve_distribution(name: str | None) -> dict[str, float]:
    value = get_archetype(name).ideal_curve
    return value if value is not None else _fallback().ideal_curve  # type: ignore[return-value]


def base_land_count(name: str | None) -> int:
    value = get_archetype(name).base_lands
    return value if value is not None else _fallback().base_lands  # type: ignore[return-value]


def ideal_ratios(name: str | None) -> IdealRatios:
    value = get_archetype(name).ratios
    return value if value is not None else _fallback().ratios  # type: ignore[return-value]

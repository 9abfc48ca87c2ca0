"""
Commander format rules and color-combination names.
"""

from collections.abc import Iterable

from deckscope.models.card import COLOR_ORDER, normalize_name, sort_colors

STARTING_LIFE = 40
COMMANDER_DAMAGE = 21

# Land counts outside this window draw a structural warning
MIN_RECOMMENDED_LANDS = 34
MAX_RECOMMENDED_LANDS = 40

BANNED_CARDS: tuple[str, ...] = (
    "Ancestral Recall",
    "Balance",
    "Biorhythm",
    "Black Lotus",
    "Braids, Cabal Minion",
    "Channel",
    "Chaos Orb",
    "Coalition Victory",
    "Emrakul, the Aeons Torn",
    "Erayo, Soratami Ascendant",
    "Falling Star",
    "Fastbond",
    "Flash",
    "Gifts Ungiven",
    "Golos, Tireless Pilgrim",
    "Griselbrand",
    "Hullbreacher",
    "Iona, Shield of Emeria",
    "Karakas",
    "Leovold, Emissary of Trest",
    "Library of Alexandria",
    "Limited Resources",
    "Lutri, the Spellchaser",
    "Mox Emerald",
    "Mox Jet",
    "Mox Pearl",
    "Mox Ruby",
    "Mox Sapphire",
    "Panoptic Mirror",
    "Paradox Engine",
    "Primeval Titan",
    "Prophet of Kruphix",
    "Recurring Nightmare",
    "Rofellos, Llanowar Emissary",
    "Shahrazad",
    "Sundering Titan",
    "Sway of the Stars",
    "Sylvan Primordial",
    "Time Vault",
    "Time Walk",
    "Tinker",
    "Tolarian Academy",
    "Trade Secrets",
    "Upheaval",
    "Worldfire",
    "Yawgmoth's Bargain",
)

_BANNED_KEYS = frozenset(normalize_name(name) for name in BANNED_CARDS)


def is_card_banned(name: str) -> bool:
    return normalize_name(name) in _BANNED_KEYS


COLOR_NAMES: dict[str, str] = {
    "W": "White",
    "U": "Blue",
    "B": "Black",
    "R": "Red",
    "G": "Green",
}

_COMBINATION_NAMES: dict[frozenset[str], str] = {
    frozenset(): "Colorless",
    frozenset("W"): "Mono-White",
    frozenset("U"): "Mono-Blue",
    frozenset("B"): "Mono-Black",
    frozenset("R"): "Mono-Red",
    frozenset("G"): "Mono-Green",
    frozenset("WU"): "Azorius",
    frozenset("UB"): "Dimir",
    frozenset("BR"): "Rakdos",
    frozenset("RG"): "Gruul",
    frozenset("GW"): "Selesnya",
    frozenset("WB"): "Orzhov",
    frozenset("UR"): "Izzet",
    frozenset("BG"): "Golgari",
    frozenset("RW"): "Boros",
    frozenset("GU"): "Simic",
    frozenset("WUB"): "Esper",
    frozenset("UBR"): "Grixis",
    frozenset("BRG"): "Jund",
    frozenset("RGW"): "Naya",
    frozenset("GWU"): "Bant",
    frozenset("WBG"): "Abzan",
    frozenset("URW"): "Jeskai",
    frozenset("BGU"): "Sultai",
    frozenset("RWB"): "Mardu",
    frozenset("GUR"): "Temur",
    frozenset("WUBR"): "Yore",
    frozenset("UBRG"): "Glint",
    frozenset("BRGW"): "Dune",
    frozenset("RGWU"): "Ink",
    frozenset("GWUB"): "Witch",
    frozenset(COLOR_ORDER): "Five-Color",
}


def get_color_combination_name(colors: Iterable[str]) -> str:
    """Guild, shard or wedge name; falls back to the WUBRG string."""
    palette = frozenset(c.upper() for c in colors if c.upper() in COLOR_ORDER)
    return _COMBINATION_NAMES.get(palette, "".join(sort_colors(palette)))

"""
Card knowledge table.

One data-only table keyed by normalized card name. Each entry records the
roles a card plays (fast mana, tutor, board wipe, ...), its synergy record,
an estimated per-card power level and known budget alternatives. Every
analyzer reads from this table instead of declaring its own name lists.

Bump KNOWLEDGE_VERSION whenever entries change so cached results can be
invalidated by callers.
"""

from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import Enum

from deckscope.models.card import normalize_name
from deckscope.models.synergy import (
    AnyOfType,
    AnyWithTag,
    ComboDefinition,
    LiteralCard,
    SynergyCategory,
    SynergyRecord,
    WinType,
)

KNOWLEDGE_VERSION = "2024.10.1"

DEFAULT_POWER_ESTIMATE = 6


class CardRole(str, Enum):
    """Curated roles a card can play."""

    # Power level signals
    FAST_MANA = "fast_mana"
    TUTOR = "tutor"
    STAPLE_INTERACTION = "staple_interaction"
    PREMIUM_LAND = "premium_land"
    COMBO_PIECE = "combo_piece"

    # Win conditions
    COMBAT_FINISHER = "combat_finisher"
    ALTERNATE_WIN = "alternate_win"
    ATTRITION = "attrition"
    MILL_WIN = "mill_win"

    # Interaction categories
    SPOT_REMOVAL = "spot_removal"
    BOARD_WIPE = "board_wipe"
    COUNTERSPELL = "counterspell"
    PROTECTION = "protection"
    GRAVEYARD_HATE = "graveyard_hate"
    ARTIFACT_ENCHANTMENT_REMOVAL = "artifact_enchantment_removal"

    # Deck balance
    CARD_DRAW = "card_draw"
    RAMP = "ramp"

    # Cards playgroups commonly complain about
    SALTY = "salty"


@dataclass(frozen=True, slots=True)
class BudgetAlternative:
    name: str
    reason: str


@dataclass(frozen=True, slots=True)
class CardKnowledge:
    """Everything the engine knows about one card."""

    name: str
    roles: frozenset[CardRole] = frozenset()
    synergy: SynergyRecord | None = None
    power_estimate: int = DEFAULT_POWER_ESTIMATE
    budget_alternatives: tuple[BudgetAlternative, ...] = field(default_factory=tuple)

    def has_role(self, role: CardRole) -> bool:
        return role in self.roles


# =============================================================================
# ROLE MEMBERSHIP
# =============================================================================

_ROLE_MEMBERS: dict[CardRole, tuple[str, ...]] = {
    CardRole.FAST_MANA: (
        "Sol Ring",
        "Mana Crypt",
        "Mana Vault",
        "Chrome Mox",
        "Mox Diamond",
        "Mox Opal",
        "Lion's Eye Diamond",
        "Lotus Petal",
        "Jeweled Lotus",
        "Ancient Tomb",
        "Grim Monolith",
        "Mox Amber",
        "Simian Spirit Guide",
        "Elvish Spirit Guide",
    ),
    CardRole.TUTOR: (
        "Demonic Tutor",
        "Vampiric Tutor",
        "Mystical Tutor",
        "Worldly Tutor",
        "Enlightened Tutor",
        "Imperial Seal",
        "Grim Tutor",
        "Diabolic Intent",
        "Survival of the Fittest",
        "Chord of Calling",
        "Green Sun's Zenith",
        "Expedition Map",
        "Crop Rotation",
        "Gamble",
        "Personal Tutor",
        "Merchant Scroll",
        "Muddle the Mixture",
        "Fabricate",
        "Whir of Invention",
        "Tainted Pact",
        "Demonic Consultation",
    ),
    CardRole.STAPLE_INTERACTION: (
        "Counterspell",
        "Force of Will",
        "Force of Negation",
        "Fierce Guardianship",
        "Swan Song",
        "Pact of Negation",
        "Swords to Plowshares",
        "Path to Exile",
        "Beast Within",
        "Generous Gift",
        "Chaos Warp",
        "Cyclonic Rift",
        "Wrath of God",
        "Damnation",
        "Toxic Deluge",
        "Nature's Claim",
        "Abrupt Decay",
        "Assassin's Trophy",
        "Heroic Intervention",
        "Teferi's Protection",
    ),
    CardRole.PREMIUM_LAND: (
        "Polluted Delta",
        "Flooded Strand",
        "Bloodstained Mire",
        "Wooded Foothills",
        "Windswept Heath",
        "Marsh Flats",
        "Scalding Tarn",
        "Verdant Catacombs",
        "Arid Mesa",
        "Misty Rainforest",
        "Underground Sea",
        "Volcanic Island",
        "Tropical Island",
        "Bayou",
        "Savannah",
        "Scrubland",
        "Taiga",
        "Tundra",
        "Badlands",
        "Plateau",
        "Mana Confluence",
        "City of Brass",
        "Cavern of Souls",
        "Ancient Tomb",
        "Gaea's Cradle",
    ),
    CardRole.COMBO_PIECE: (
        "Thassa's Oracle",
        "Demonic Consultation",
        "Tainted Pact",
        "Laboratory Maniac",
        "Isochron Scepter",
        "Dramatic Reversal",
        "Basalt Monolith",
        "Rings of Brighthearth",
        "Kiki-Jiki, Mirror Breaker",
        "Splinter Twin",
        "Deceiver Exarch",
        "Pestermite",
        "Worldgorger Dragon",
        "Animate Dead",
        "Deadeye Navigator",
    ),
    CardRole.COMBAT_FINISHER: (
        "Craterhoof Behemoth",
        "Triumph of the Hordes",
        "Overwhelming Stampede",
        "Finale of Devastation",
        "Beastmaster Ascension",
        "Overrun",
        "Pathbreaker Ibex",
        "End-Raze Forerunners",
        "Coat of Arms",
        "Door of Destinies",
    ),
    CardRole.ALTERNATE_WIN: (
        "Thassa's Oracle",
        "Laboratory Maniac",
        "Jace, Wielder of Mysteries",
        "Approach of the Second Sun",
        "Felidar Sovereign",
        "Test of Endurance",
        "Mortal Combat",
        "Mayael's Aria",
    ),
    CardRole.ATTRITION: (
        "Torment of Hailfire",
        "Exsanguinate",
        "Gray Merchant of Asphodel",
        "Blood Artist",
        "Zulaport Cutthroat",
        "Syr Konrad, the Grim",
        "Rakdos Charm",
        "Vito, Thorn of the Dusk Rose",
        "Sanguine Bond",
    ),
    CardRole.MILL_WIN: (
        "Bruvac the Grandiloquent",
        "Maddening Cacophony",
        "Traumatize",
        "Keening Stone",
        "Phenax, God of Deception",
    ),
    CardRole.SPOT_REMOVAL: (
        "Swords to Plowshares",
        "Path to Exile",
        "Beast Within",
        "Generous Gift",
        "Chaos Warp",
        "Murder",
        "Terminate",
        "Anguished Unmaking",
        "Assassin's Trophy",
        "Abrupt Decay",
        "Vindicate",
        "Utter End",
        "Hero's Downfall",
        "Grasp of Fate",
        "Oblation",
    ),
    CardRole.BOARD_WIPE: (
        "Wrath of God",
        "Damnation",
        "Cyclonic Rift",
        "Toxic Deluge",
        "Blasphemous Act",
        "Austere Command",
        "Vanquish the Horde",
        "Day of Judgment",
        "Supreme Verdict",
        "Merciless Eviction",
        "Devastation Tide",
        "Flood of Tears",
        "Curse of the Swine",
    ),
    CardRole.COUNTERSPELL: (
        "Counterspell",
        "Swan Song",
        "Arcane Denial",
        "Negate",
        "Fierce Guardianship",
        "Force of Will",
        "Pact of Negation",
        "Mana Drain",
        "Force of Negation",
        "Dispel",
        "Flusterstorm",
        "Dovin's Veto",
        "An Offer You Can't Refuse",
        "Spell Pierce",
    ),
    CardRole.PROTECTION: (
        "Heroic Intervention",
        "Teferi's Protection",
        "Boros Charm",
        "Deflecting Swat",
        "Flawless Maneuver",
        "Wrap in Vigor",
        "Guardian Augmenter",
        "Veil of Summer",
        "Autumn's Veil",
    ),
    CardRole.GRAVEYARD_HATE: (
        "Rest in Peace",
        "Bojuka Bog",
        "Scavenging Ooze",
        "Tormod's Crypt",
        "Soul-Guide Lantern",
        "Grafdigger's Cage",
        "Relic of Progenitus",
        "Nihil Spellbomb",
        "Ground Seal",
    ),
    CardRole.ARTIFACT_ENCHANTMENT_REMOVAL: (
        "Nature's Claim",
        "Disenchant",
        "Assassin's Trophy",
        "Abrupt Decay",
        "Reclamation Sage",
        "Caustic Caterpillar",
    ),
    CardRole.CARD_DRAW: (
        "Rhystic Study",
        "Mystic Remora",
        "Esper Sentinel",
        "Phyrexian Arena",
        "Necropotence",
        "Sylvan Library",
        "Wheel of Fortune",
        "Windfall",
        "Harmonize",
        "Sign in Blood",
        "Night's Whisper",
        "Read the Bones",
        "Ponder",
        "Preordain",
        "Brainstorm",
        "Fact or Fiction",
        "Blue Sun's Zenith",
        "Pull from Tomorrow",
        "Stroke of Genius",
        "Rishkar's Expertise",
        "Return of the Wildspeaker",
        "Shamanic Revelation",
        "Skullclamp",
        "Consecrated Sphinx",
        "The One Ring",
        "Bident of Thassa",
    ),
    CardRole.RAMP: (
        "Sol Ring",
        "Arcane Signet",
        "Rampant Growth",
        "Cultivate",
        "Kodama's Reach",
        "Three Visits",
        "Nature's Lore",
        "Farseek",
        "Sakura-Tribe Elder",
        "Wood Elves",
        "Farhaven Elf",
        "Solemn Simulacrum",
        "Mana Crypt",
        "Mana Vault",
        "Chrome Mox",
        "Mox Diamond",
        "Llanowar Elves",
        "Birds of Paradise",
        "Elvish Mystic",
        "Noble Hierarch",
        "Fellwar Stone",
        "Mind Stone",
        "Worn Powerstone",
        "Thran Dynamo",
        "Gilded Lotus",
    ),
    CardRole.SALTY: (
        "Rhystic Study",
        "Smothering Tithe",
        "Cyclonic Rift",
        "Winter Orb",
        "Stasis",
        "Armageddon",
    ),
}


# =============================================================================
# SYNERGY CATALOG
# =============================================================================

# Each combo is recorded once, on the card that anchors it.
_SYNERGIES: dict[str, SynergyRecord] = {
    "Doubling Season": SynergyRecord(
        categories=(
            SynergyCategory.PLANESWALKERS,
            SynergyCategory.COUNTERS,
            SynergyCategory.TOKENS,
        ),
        partners=(
            AnyOfType("Planeswalker"),
            LiteralCard("Hardened Scales"),
            LiteralCard("Parallel Lives"),
            LiteralCard("Anointed Procession"),
            AnyWithTag("counters", "+1/+1 counter cards"),
            AnyWithTag("token_maker", "token generators"),
        ),
        anti_synergies=("Solemnity",),
        power_multiplier=1.5,
        description="Doubles tokens and counters, including planeswalker loyalty",
    ),
    "Thassa's Oracle": SynergyRecord(
        categories=(SynergyCategory.COMBO,),
        partners=(
            LiteralCard("Demonic Consultation"),
            LiteralCard("Tainted Pact"),
            LiteralCard("Leveler"),
            LiteralCard("Paradigm Shift"),
        ),
        combos=(
            ComboDefinition(
                pieces=(LiteralCard("Demonic Consultation"),),
                description="Exile library, win on ETB",
                win_type=WinType.ALTERNATE,
            ),
            ComboDefinition(
                pieces=(LiteralCard("Tainted Pact"),),
                description="Exile library, win on ETB",
                win_type=WinType.ALTERNATE,
            ),
        ),
        power_multiplier=2.0,
        description="Wins the game with an empty library",
    ),
    "Demonic Consultation": SynergyRecord(
        categories=(SynergyCategory.COMBO,),
        partners=(
            LiteralCard("Thassa's Oracle"),
            LiteralCard("Laboratory Maniac"),
            LiteralCard("Jace, Wielder of Mysteries"),
        ),
        power_multiplier=1.8,
        description="Can exile entire library for combo wins",
    ),
    "Isochron Scepter": SynergyRecord(
        categories=(SynergyCategory.COMBO, SynergyCategory.ENGINE),
        partners=(
            LiteralCard("Dramatic Reversal"),
            LiteralCard("Counterspell"),
            LiteralCard("Swan Song"),
            LiteralCard("Enlightened Tutor"),
            AnyOfType("Instant"),
        ),
        combos=(
            ComboDefinition(
                pieces=(
                    LiteralCard("Dramatic Reversal"),
                    AnyWithTag("mana_rock", "mana rocks"),
                ),
                description="Infinite mana and storm",
            ),
        ),
        power_multiplier=1.7,
        description="Repeatable instant casting",
    ),
    "Rhystic Study": SynergyRecord(
        categories=(SynergyCategory.ENGINE,),
        partners=(
            LiteralCard("Smothering Tithe"),
            LiteralCard("Mystic Remora"),
        ),
        power_multiplier=1.4,
        description="Powerful card advantage engine",
    ),
    "Smothering Tithe": SynergyRecord(
        categories=(SynergyCategory.ENGINE,),
        partners=(
            LiteralCard("Windfall"),
            LiteralCard("Wheel of Fortune"),
            LiteralCard("Teferi's Puzzle Box"),
        ),
        power_multiplier=1.5,
        description="Explosive treasure generation with wheels",
    ),
    "Craterhoof Behemoth": SynergyRecord(
        categories=(SynergyCategory.TOKENS,),
        partners=(
            AnyWithTag("token_maker", "token generators"),
            LiteralCard("Avenger of Zendikar"),
            LiteralCard("Natural Order"),
            LiteralCard("Chord of Calling"),
        ),
        power_multiplier=1.6,
        description="Game-ending with go-wide strategies",
    ),
    "Phyrexian Altar": SynergyRecord(
        categories=(SynergyCategory.COMBO, SynergyCategory.SACRIFICE),
        partners=(
            LiteralCard("Gravecrawler"),
            LiteralCard("Blood Artist"),
            LiteralCard("Zulaport Cutthroat"),
            LiteralCard("Pitiless Plunderer"),
        ),
        combos=(
            ComboDefinition(
                pieces=(LiteralCard("Gravecrawler"), AnyOfType("Zombie")),
                description="Infinite mana, ETB and death triggers",
            ),
        ),
        power_multiplier=1.7,
        description="Converts creatures to mana for combos",
    ),
    "Blood Artist": SynergyRecord(
        categories=(SynergyCategory.SACRIFICE, SynergyCategory.COMBO),
        partners=(
            LiteralCard("Zulaport Cutthroat"),
            LiteralCard("Phyrexian Altar"),
            LiteralCard("Grave Pact"),
            LiteralCard("Dictate of Erebos"),
            AnyWithTag("sacrifice_outlet", "sacrifice outlets"),
        ),
        power_multiplier=1.3,
        description="Drains life from creature deaths",
    ),
    "Panharmonicon": SynergyRecord(
        categories=(SynergyCategory.ETB, SynergyCategory.ENGINE),
        partners=(
            LiteralCard("Mulldrifter"),
            LiteralCard("Solemn Simulacrum"),
            LiteralCard("Ephemerate"),
        ),
        power_multiplier=1.5,
        description="Doubles ETB triggers for massive value",
    ),
    "Animate Dead": SynergyRecord(
        categories=(SynergyCategory.GRAVEYARD, SynergyCategory.COMBO),
        partners=(
            LiteralCard("Worldgorger Dragon"),
            LiteralCard("Entomb"),
            LiteralCard("Buried Alive"),
        ),
        power_multiplier=1.6,
        description="Cheap reanimation",
    ),
    "Worldgorger Dragon": SynergyRecord(
        categories=(SynergyCategory.GRAVEYARD, SynergyCategory.COMBO),
        partners=(
            LiteralCard("Animate Dead"),
            LiteralCard("Dance of the Dead"),
            LiteralCard("Necromancy"),
        ),
        combos=(
            ComboDefinition(
                pieces=(LiteralCard("Animate Dead"),),
                description="Infinite mana and ETB triggers",
            ),
            ComboDefinition(
                pieces=(LiteralCard("Dance of the Dead"),),
                description="Infinite mana and ETB triggers",
            ),
        ),
        power_multiplier=1.8,
        description="Goes infinite with reanimation spells",
    ),
    "Aetherflux Reservoir": SynergyRecord(
        categories=(SynergyCategory.COMBO, SynergyCategory.SPELLSLINGER),
        partners=(
            LiteralCard("Bolas's Citadel"),
            LiteralCard("Sensei's Divining Top"),
            LiteralCard("Ad Nauseam"),
        ),
        power_multiplier=1.5,
        description="Life gain and storm win condition",
    ),
    "Atraxa, Praetors' Voice": SynergyRecord(
        categories=(SynergyCategory.COUNTERS, SynergyCategory.PLANESWALKERS),
        partners=(
            AnyOfType("Planeswalker"),
            LiteralCard("Doubling Season"),
            AnyWithTag("counters", "+1/+1 counter cards"),
        ),
        power_multiplier=1.4,
        description="Proliferates all counters",
    ),
    "Urza, Lord High Artificer": SynergyRecord(
        categories=(SynergyCategory.ARTIFACTS, SynergyCategory.COMBO),
        partners=(
            AnyWithTag("mana_rock", "mana rocks"),
            LiteralCard("Winter Orb"),
        ),
        power_multiplier=1.7,
        description="Artifact synergies and asymmetric mana",
    ),
    "Deadeye Navigator": SynergyRecord(
        categories=(SynergyCategory.ETB, SynergyCategory.COMBO),
        partners=(
            LiteralCard("Peregrine Drake"),
            LiteralCard("Palinchron"),
            LiteralCard("Cloud of Faeries"),
        ),
        combos=(
            ComboDefinition(
                pieces=(LiteralCard("Peregrine Drake"),),
                description="Infinite mana and blinks",
            ),
            ComboDefinition(
                pieces=(LiteralCard("Palinchron"),),
                description="Infinite mana and blinks",
            ),
        ),
        power_multiplier=1.6,
        description="Repeatable blink for ETB abuse",
    ),
    "The Gitrog Monster": SynergyRecord(
        categories=(SynergyCategory.LANDFALL, SynergyCategory.GRAVEYARD),
        partners=(
            LiteralCard("Crucible of Worlds"),
            LiteralCard("Dakmor Salvage"),
            LiteralCard("Azusa, Lost but Seeking"),
        ),
        combos=(
            ComboDefinition(
                pieces=(LiteralCard("Dakmor Salvage"),),
                description="Infinite draw with discard outlet",
            ),
        ),
        power_multiplier=1.6,
        description="Landfall and graveyard synergies",
    ),
    "Kiki-Jiki, Mirror Breaker": SynergyRecord(
        categories=(SynergyCategory.COMBO,),
        partners=(
            LiteralCard("Deceiver Exarch"),
            LiteralCard("Pestermite"),
            LiteralCard("Zealous Conscripts"),
        ),
        combos=tuple(
            ComboDefinition(
                pieces=(LiteralCard(piece),),
                description="Infinite creature tokens",
            )
            for piece in ("Deceiver Exarch", "Pestermite", "Zealous Conscripts")
        ),
        power_multiplier=1.7,
        description="Copies creatures that untap it",
    ),
    "Walking Ballista": SynergyRecord(
        categories=(SynergyCategory.COMBO, SynergyCategory.COUNTERS),
        partners=(
            LiteralCard("Heliod, Sun-Crowned"),
            LiteralCard("Mikaeus, the Unhallowed"),
        ),
        combos=(
            ComboDefinition(
                pieces=(LiteralCard("Heliod, Sun-Crowned"),),
                description="Infinite damage",
            ),
            ComboDefinition(
                pieces=(LiteralCard("Mikaeus, the Unhallowed"),),
                description="Infinite damage with sac outlet",
            ),
        ),
        power_multiplier=1.5,
        description="Flexible counter sink and combo finisher",
    ),
    "Basalt Monolith": SynergyRecord(
        categories=(SynergyCategory.COMBO, SynergyCategory.ARTIFACTS),
        partners=(LiteralCard("Rings of Brighthearth"),),
        combos=(
            ComboDefinition(
                pieces=(LiteralCard("Rings of Brighthearth"),),
                description="Infinite colorless mana",
            ),
        ),
        power_multiplier=1.4,
        description="Untap-based mana combo",
    ),
    "Mikaeus, the Unhallowed": SynergyRecord(
        categories=(SynergyCategory.COMBO, SynergyCategory.COUNTERS),
        partners=(LiteralCard("Walking Ballista"), LiteralCard("Triskelion")),
        combos=(
            ComboDefinition(
                pieces=(LiteralCard("Triskelion"),),
                description="Infinite damage",
            ),
        ),
        power_multiplier=1.5,
        description="Undying loops with counter-removing creatures",
    ),
    "Cyclonic Rift": SynergyRecord(
        categories=(SynergyCategory.ENGINE,),
        power_multiplier=1.5,
        description="One-sided board wipe",
    ),
    "Sol Ring": SynergyRecord(
        categories=(SynergyCategory.ENGINE,),
        power_multiplier=1.4,
        description="Fast mana staple",
    ),
    "Mana Crypt": SynergyRecord(
        categories=(SynergyCategory.ENGINE,),
        power_multiplier=1.5,
        description="Explosive fast mana",
    ),
}


# =============================================================================
# PER-CARD POWER ESTIMATES
# =============================================================================

_POWER_ESTIMATES: dict[str, int] = {
    "Mana Crypt": 9,
    "Thassa's Oracle": 9,
    "Demonic Consultation": 9,
    "Timetwister": 9,
    "Mana Vault": 8,
    "Force of Will": 8,
    "Cyclonic Rift": 8,
    "Rhystic Study": 8,
    "Sol Ring": 7,
    "Arcane Signet": 7,
    "Command Tower": 7,
}


# =============================================================================
# BUDGET ALTERNATIVES
# =============================================================================


def _alts(*pairs: tuple[str, str]) -> tuple[BudgetAlternative, ...]:
    return tuple(BudgetAlternative(name=name, reason=reason) for name, reason in pairs)


_BUDGET_ALTERNATIVES: dict[str, tuple[BudgetAlternative, ...]] = {
    "Mana Crypt": _alts(
        ("Sol Ring", "Similar fast mana, much cheaper"),
        ("Arcane Signet", "Reliable 2-mana rock"),
        ("Mind Stone", "Ramp with card draw option"),
    ),
    "Mana Vault": _alts(
        ("Sol Ring", "Best budget fast mana"),
        ("Worn Powerstone", "Slower but safer"),
        ("Thran Dynamo", "Permanent colorless burst"),
    ),
    "Gaea's Cradle": _alts(
        ("Growing Rites of Itlimoc", "Transforms into Cradle effect"),
        ("Nykthos, Shrine to Nyx", "Devotion-based mana"),
        ("Wirewood Lodge", "Untap elf dorks"),
    ),
    "The Tabernacle at Pendrell Vale": _alts(
        ("Pendrell Mists", "Similar taxing effect"),
        ("Magus of the Tabernacle", "Creature version"),
        ("Mudslide", "Budget creature tax"),
    ),
    "Timetwister": _alts(
        ("Wheel of Fortune", "Similar wheel effect"),
        ("Windfall", "Budget wheel"),
        ("Reforge the Soul", "Miracle wheel"),
    ),
    "Force of Will": _alts(
        ("Fierce Guardianship", "Free counter in Commander"),
        ("Pact of Negation", "Free counter with delayed cost"),
        ("Counterspell", "Efficient hard counter"),
    ),
    "Mox Diamond": _alts(
        ("Chrome Mox", "Similar 0-cost mana"),
        ("Sol Ring", "Best budget alternative"),
        ("Jeweled Lotus", "Commander-specific fast mana"),
    ),
    "Lion's Eye Diamond": _alts(
        ("Lotus Petal", "One-shot mana boost"),
        ("Dark Ritual", "Fast black mana"),
        ("Desperate Ritual", "Fast red mana"),
    ),
    "Demonic Tutor": _alts(
        ("Diabolic Tutor", "2 more mana, same effect"),
        ("Grim Tutor", "One more mana, life cost"),
        ("Diabolic Intent", "Requires sacrifice"),
    ),
    "Vampiric Tutor": _alts(
        ("Mystical Tutor", "Instant/sorcery tutor"),
        ("Worldly Tutor", "Creature tutor"),
        ("Imperial Seal", "Similar but sorcery speed"),
    ),
    "Cyclonic Rift": _alts(
        ("Flood of Tears", "Returns all nonlands"),
        ("Evacuation", "Returns all creatures"),
        ("Engulf the Shore", "Budget bounce all creatures"),
    ),
    "Doubling Season": _alts(
        ("Parallel Lives", "Doubles tokens only"),
        ("Anointed Procession", "Doubles tokens in white"),
        ("Primal Vigor", "Symmetric doubling"),
    ),
    "Rhystic Study": _alts(
        ("Mystic Remora", "Similar tax-based draw"),
        ("Esper Sentinel", "Tax-based draw on creature"),
        ("Consecrated Sphinx", "Powerful card draw"),
    ),
    "Smothering Tithe": _alts(
        ("Monologue Tax", "Similar taxing effect"),
        ("Treasure Map", "Treasure generation"),
        ("Curse of Opulence", "Political treasure gen"),
    ),
}

# Land cycles share one set of alternatives
_FETCH_LAND_ALTERNATIVES = _alts(
    ("Evolving Wilds", "Budget fetch"),
    ("Terramorphic Expanse", "Budget fetch"),
    ("Fabled Passage", "Better budget fetch"),
)
_DUAL_LAND_ALTERNATIVES = _alts(
    ("Shock lands", "Fetchable duals"),
    ("Check lands", "Conditional untapped"),
    ("Pain lands", "Always untapped, life cost"),
)
for _name in (
    "Polluted Delta",
    "Flooded Strand",
    "Bloodstained Mire",
    "Wooded Foothills",
    "Windswept Heath",
    "Marsh Flats",
    "Scalding Tarn",
    "Verdant Catacombs",
    "Arid Mesa",
    "Misty Rainforest",
):
    _BUDGET_ALTERNATIVES[_name] = _FETCH_LAND_ALTERNATIVES
for _name in (
    "Underground Sea",
    "Volcanic Island",
    "Tropical Island",
    "Bayou",
    "Savannah",
    "Scrubland",
    "Taiga",
    "Tundra",
    "Badlands",
    "Plateau",
):
    _BUDGET_ALTERNATIVES[_name] = _DUAL_LAND_ALTERNATIVES

# Generic replacements keyed by functional tag, used when a card has no entry
GENERIC_ALTERNATIVES: dict[str, tuple[BudgetAlternative, ...]] = {
    "tutor": _alts(
        ("Diabolic Tutor", "Budget black tutor"),
        ("Increasing Ambition", "Tutor with flashback"),
    ),
    "removal": _alts(
        ("Murder", "Simple creature removal"),
        ("Doom Blade", "Efficient removal"),
    ),
    "counterspell": _alts(
        ("Counterspell", "Classic hard counter"),
        ("Cancel", "Budget hard counter"),
    ),
    "ramp": _alts(
        ("Rampant Growth", "Basic land ramp"),
        ("Cultivate", "Ramp and card advantage"),
    ),
}


# =============================================================================
# TABLE
# =============================================================================


def _build_table() -> dict[str, CardKnowledge]:
    names: dict[str, str] = {}
    roles: dict[str, set[CardRole]] = {}

    def register(name: str) -> str:
        key = normalize_name(name)
        names.setdefault(key, name)
        roles.setdefault(key, set())
        return key

    for role, members in _ROLE_MEMBERS.items():
        for name in members:
            roles[register(name)].add(role)
    for name in (*_SYNERGIES, *_POWER_ESTIMATES, *_BUDGET_ALTERNATIVES):
        register(name)

    synergies = {normalize_name(n): r for n, r in _SYNERGIES.items()}
    estimates = {normalize_name(n): p for n, p in _POWER_ESTIMATES.items()}
    alternatives = {normalize_name(n): a for n, a in _BUDGET_ALTERNATIVES.items()}

    return {
        key: CardKnowledge(
            name=names[key],
            roles=frozenset(roles[key]),
            synergy=synergies.get(key),
            power_estimate=estimates.get(key, DEFAULT_POWER_ESTIMATE),
            budget_alternatives=alternatives.get(key, ()),
        )
        for key in names
    }


CARD_KNOWLEDGE: dict[str, CardKnowledge] = _build_table()


def get_card_knowledge(name: str) -> CardKnowledge | None:
    """Look up a card by name; unknown names return None."""
    return CARD_KNOWLEDGE.get(normalize_name(name))


def has_role(name: str, role: CardRole) -> bool:
    entry = get_card_knowledge(name)
    return entry is not None and role in entry.roles


def cards_with_role(role: CardRole) -> list[str]:
    """Display names of every card with a role, in catalog order."""
    return [entry.name for entry in CARD_KNOWLEDGE.values() if role in entry.roles]


def get_synergy_record(name: str) -> SynergyRecord | None:
    entry = get_card_knowledge(name)
    return entry.synergy if entry is not None else None


def synergy_catalog() -> dict[str, SynergyRecord]:
    """Every card that carries a synergy record, keyed by display name."""
    return {
        entry.name: entry.synergy for entry in CARD_KNOWLEDGE.values() if entry.synergy is not None
    }


def estimate_card_power(name: str) -> int:
    entry = get_card_knowledge(name)
    return entry.power_estimate if entry is not None else DEFAULT_POWER_ESTIMATE


def count_with_role(names: Iterable[str], role: CardRole) -> int:
    """Count names (duplicates included) that carry a role."""
    return sum(1 for name in names if has_role(name, role))

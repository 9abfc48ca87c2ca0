"""
Static Magic knowledge: curated card roles, combos, archetype baselines and
format rules.
"""

from deckscope.knowledge.archetypes import ARCHETYPES, archetype_key, get_archetype
from deckscope.knowledge.cards import (
    KNOWLEDGE_VERSION,
    CardRole,
    cards_with_role,
    estimate_card_power,
    get_card_knowledge,
    has_role,
)
from deckscope.knowledge.rules import BANNED_CARDS, get_color_combination_name, is_card_banned

__all__ = [
    "ARCHETYPES",
    "BANNED_CARDS",
    "KNOWLEDGE_VERSION",
    "CardRole",
    "archetype_key",
    "cards_with_role",
    "estimate_card_power",
    "get_archetype",
    "get_card_knowledge",
    "get_color_combination_name",
    "has_role",
    "is_card_banned",
]

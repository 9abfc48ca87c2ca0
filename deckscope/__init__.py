"""
DeckScope.

Heuristic scoring and recommendation engine for 100-card singleton
(Commander) decks.
"""

__version__ = "0.1.0"

"""
Deep Thought Core - Cards, hands, actions and table state.

This module contains everything the decision engine reads, without any
network dependencies.
"""

from deepthought.core.card import Card, Rank, Suit, parse_cards
from deepthought.core.rules import Phase, ActionType
from deepthought.core.actions import Action, LegalActions
from deepthought.core.hand import HandCategory, BestHand, classify_hand
from deepthought.core.table import TableState, TableSnapshot

__all__ = [
    "Card",
    "Rank",
    "Suit",
    "parse_cards",
    "Phase",
    "ActionType",
    "Action",
    "LegalActions",
    "HandCategory",
    "BestHand",
    "classify_hand",
    "TableState",
    "TableSnapshot",
]

"""
Deep Thought - Texas Hold'em decision agent

A rule-based poker agent with:
- Starting-hand win statistics per table size
- Phase-specific rule chains over the legal actions offered by the server
- Per-table state fed by table events
- FastAPI adapter for game clients

Usage:
    from deepthought.agents import DeepThoughtAgent
    from deepthought.config import load_config

    agent = DeepThoughtAgent.from_config(load_config())
"""

__version__ = "0.2.0"

from deepthought.core.card import Card, parse_cards
from deepthought.core.actions import Action, LegalActions
from deepthought.core.rules import ActionType, Phase
from deepthought.strategy.statistics import StartingHandStatistics
from deepthought.strategy.engine import DecisionEngine

__all__ = [
    "Card",
    "parse_cards",
    "Action",
    "LegalActions",
    "ActionType",
    "Phase",
    "StartingHandStatistics",
    "DecisionEngine",
    "__version__",
]

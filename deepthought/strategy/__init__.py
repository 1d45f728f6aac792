"""
Deep Thought Strategy - Starting-hand statistics, premium ranking and the
rule chains that turn a table snapshot into an action.
"""

from deepthought.strategy.translator import starting_hand_key, translate
from deepthought.strategy.statistics import StartingHandStatistics
from deepthought.strategy.premium import premium_pair_rank
from deepthought.strategy.context import DecisionContext, RaiseCounter
from deepthought.strategy.engine import DecisionEngine

__all__ = [
    "starting_hand_key",
    "translate",
    "StartingHandStatistics",
    "premium_pair_rank",
    "DecisionContext",
    "RaiseCounter",
    "DecisionEngine",
]

"""
Inputs shared by the round evaluators.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional

from deepthought.config import BotConfig
from deepthought.core.actions import LegalActions
from deepthought.core.hand import HandCategory
from deepthought.core.rules import Phase
from deepthought.core.table import TableSnapshot
from deepthought.strategy.statistics import StartingHandStatistics


class RaiseCounter:
    """
    Consecutive raises seen by one agent.

    Raised by other seats' raises, reset when the agent checks, calls or
    folds through certain rules. Nothing reads it yet beyond bookkeeping.
    """

    __slots__ = ("_value",)

    def __init__(self, value: int = 0):
        self._value = value

    @property
    def value(self) -> int:
        return self._value

    def increment(self) -> int:
        self._value += 1
        return self._value

    def reset(self) -> None:
        self._value = 0

    def __int__(self) -> int:
        return self._value

    def __repr__(self) -> str:
        return f"RaiseCounter({self._value})"


@dataclass(frozen=True)
class DecisionContext:
    """Everything a round evaluator may consult for one action request."""
    phase: Phase
    legal: LegalActions
    snapshot: TableSnapshot
    best_hand: Optional[HandCategory]
    counter: RaiseCounter
    statistics: StartingHandStatistics
    config: BotConfig

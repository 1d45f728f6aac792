"""
The Deep Thought agent.

Plays one table: feeds table events into its own AgentState and, when an
action is requested, hands a snapshot of that state to the decision engine.
The engine and its statistics are shared; the AgentState is not.
"""

from __future__ import annotations
from typing import Iterable, Optional
import logging

from deepthought.agents.base import BaseAgent
from deepthought.agents.handlers import AgentState, handle_event
from deepthought.config import BotConfig
from deepthought.core.actions import Action, LegalActions
from deepthought.core.events import TableEvent
from deepthought.core.rules import COMMUNITY_CARDS, phase_for_community_cards
from deepthought.core.table import TableSnapshot
from deepthought.strategy.engine import DecisionEngine
from deepthought.strategy.statistics import StartingHandStatistics


logger = logging.getLogger(__name__)


class DeepThoughtAgent(BaseAgent):
    """
    Rule-based agent driven by starting-hand statistics.

    Usage:
        agent = DeepThoughtAgent.from_config(load_config())
        agent.observe(PlayIsStarted(...))
        action = agent.act(legal_actions)
    """

    def __init__(self, engine: DecisionEngine, name: Optional[str] = None):
        super().__init__(name or engine.config.name)
        self.engine = engine
        self.state = AgentState.for_player(self.name)

    @classmethod
    def from_config(
        cls,
        config: BotConfig,
        statistics: Optional[StartingHandStatistics] = None,
    ) -> DeepThoughtAgent:
        """Build an agent, loading statistics unless an existing table is shared in."""
        if statistics is None:
            statistics = StartingHandStatistics.load(
                config.stats_dir, missing_probability=config.missing_probability
            )
        return cls(DecisionEngine(statistics, config), name=config.name)

    @property
    def raise_counter(self) -> int:
        return self.state.counter.value

    def observe(self, event: TableEvent) -> None:
        handle_event(self.state, event)

    def snapshot(self) -> TableSnapshot:
        return self.state.table.snapshot()

    def act(self, legal_actions: LegalActions | Iterable[Action]) -> Action:
        legal = LegalActions.of(legal_actions)
        snapshot = self.snapshot()
        self._check_board(snapshot)

        action = self.engine.decide(snapshot.phase, legal, snapshot, counter=self.state.counter)
        logger.info(
            f"I'm going to {action.action_type.value}"
            f"{f' with {action.amount}' if action.amount > 0 else ''}"
        )
        return action

    def _check_board(self, snapshot: TableSnapshot) -> None:
        """Warn when the board does not match the phase the table reported."""
        if snapshot.phase not in COMMUNITY_CARDS:
            return
        count = len(snapshot.community_cards)
        try:
            dealt = phase_for_community_cards(count)
        except ValueError:
            dealt = None
        if dealt is not snapshot.phase:
            logger.warning(
                f"Table is in {snapshot.phase.value} but the board has {count} cards"
            )

    def reset(self) -> None:
        self.state = AgentState.for_player(self.name)

"""
One agent per table.

The registry hands every table its own DeepThoughtAgent, so no mutable state
is shared between tables. The starting-hand statistics are read-only and are
shared by all of them.
"""

from __future__ import annotations
from typing import Dict, Optional
import logging

from deepthought.agents.deep_thought import DeepThoughtAgent
from deepthought.config import BotConfig
from deepthought.strategy.engine import DecisionEngine
from deepthought.strategy.statistics import StartingHandStatistics


logger = logging.getLogger(__name__)


class TableRegistry:
    """
    Agents keyed by table id.

    Usage:
        registry = TableRegistry(config, statistics)
        agent = registry.get_or_create("table-1")
        registry.drop("table-1")
    """

    def __init__(self, config: BotConfig, statistics: StartingHandStatistics):
        self.config = config
        self.statistics = statistics
        self.engine = DecisionEngine(statistics, config)
        self._agents: Dict[str, DeepThoughtAgent] = {}

    def get(self, table_id: str) -> Optional[DeepThoughtAgent]:
        return self._agents.get(table_id)

    def get_or_create(self, table_id: str) -> DeepThoughtAgent:
        agent = self._agents.get(table_id)
        if agent is None:
            agent = DeepThoughtAgent(self.engine, name=self.config.name)
            self._agents[table_id] = agent
            logger.info(f"Seated {agent.name} at table {table_id}")
        return agent

    def drop(self, table_id: str) -> bool:
        """Forget a table. Returns False if it was not known."""
        if self._agents.pop(table_id, None) is None:
            return False
        logger.info(f"Left table {table_id}")
        return True

    def __contains__(self, table_id: str) -> bool:
        return table_id in self._agents

    def __len__(self) -> int:
        return len(self._agents)

"""
Base Agent Interface for Deep Thought.

An agent sits at one table. It observes every table event and, whenever the
server asks, returns one of the legal actions it was offered.

Usage:
    class MyAgent(BaseAgent):
        def observe(self, event):
            # Update table bookkeeping
            pass

        def act(self, legal_actions):
            # Return one of the offered actions, unmodified
            return legal_actions.fold
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Iterable

from deepthought.core.actions import Action, LegalActions
from deepthought.core.events import TableEvent


class BaseAgent(ABC):
    """
    Abstract base class for poker agents.

    Attributes:
        name: Name the agent plays under; must be unique at the table
    """

    def __init__(self, name: str):
        self.name = name

    @abstractmethod
    def observe(self, event: TableEvent) -> None:
        """
        Observe a table event.

        Called for every event the server sends, including the ones about
        the agent's own actions.
        """

    @abstractmethod
    def act(self, legal_actions: LegalActions | Iterable[Action]) -> Action:
        """
        Choose an action.

        It is not allowed to change any value of the offered actions: the
        amount to CALL or RAISE is fixed by the server. Returning anything
        that is not in legal_actions gets the agent folded.

        Args:
            legal_actions: The actions the server offers at this point

        Returns:
            One of legal_actions
        """

    def reset(self) -> None:
        """
        Forget everything about the current table.

        Override this method if your agent keeps state between hands.
        """

    def observe_all(self, events: Iterable[TableEvent]) -> None:
        """Observe several events in order."""
        for event in events:
            self.observe(event)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.name})"


"""
Actions offered by the game server.

At each decision point the server sends a small set of legal actions, at most
one per ActionType, each with an amount the agent is not allowed to change.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, Iterable, Iterator, List, Optional

from deepthought.core.rules import ActionType
from deepthought.exceptions import NoLegalActionsError


@dataclass(frozen=True)
class Action:
    """A single action with its server-fixed amount."""
    action_type: ActionType
    amount: int = 0

    def to_dict(self) -> Dict:
        return {"type": self.action_type.value, "amount": self.amount}

    def __str__(self) -> str:
        if self.amount > 0:
            return f"{self.action_type.value} {self.amount}"
        return self.action_type.value


class LegalActions:
    """
    The legal actions for one decision point, indexed by type.

    Lookups hand back the very objects the server supplied, so whatever the
    agent returns is always a member of the original collection.
    """

    def __init__(self, actions: Iterable[Action]):
        self._actions: List[Action] = list(actions)
        if not self._actions:
            raise NoLegalActionsError("No legal actions supplied")

        self._by_type: Dict[ActionType, Action] = {}
        for action in self._actions:
            if action.action_type in self._by_type:
                raise ValueError(f"Duplicate legal action: {action.action_type.value}")
            self._by_type[action.action_type] = action

    @classmethod
    def of(cls, actions: LegalActions | Iterable[Action]) -> LegalActions:
        if isinstance(actions, LegalActions):
            return actions
        return cls(actions)

    def get(self, action_type: ActionType) -> Optional[Action]:
        return self._by_type.get(action_type)

    @property
    def fold(self) -> Optional[Action]:
        return self.get(ActionType.FOLD)

    @property
    def check(self) -> Optional[Action]:
        return self.get(ActionType.CHECK)

    @property
    def call(self) -> Optional[Action]:
        return self.get(ActionType.CALL)

    @property
    def raise_(self) -> Optional[Action]:
        return self.get(ActionType.RAISE)

    @property
    def call_amount(self) -> int:
        """Cost to call, or -1 when CALL is not offered."""
        return self.call.amount if self.call else -1

    @property
    def raise_amount(self) -> int:
        """Amount of the offered raise, or -1 when RAISE is not offered."""
        return self.raise_.amount if self.raise_ else -1

    def __contains__(self, action: object) -> bool:
        return any(action is a or action == a for a in self._actions)

    def __iter__(self) -> Iterator[Action]:
        return iter(self._actions)

    def __len__(self) -> int:
        return len(self._actions)

    def __repr__(self) -> str:
        return f"LegalActions([{', '.join(str(a) for a in self._actions)}])"

"""
Decision Engine - routes an action request to the evaluator for its phase.

The engine holds no per-table state of its own. Everything that changes
between requests (the raise counter, the table snapshot) is passed in, so a
single engine can serve any number of agents.
"""

from __future__ import annotations
from typing import Callable, Dict, Iterable, Optional
import logging

from deepthought.config import BotConfig
from deepthought.core.actions import Action, LegalActions
from deepthought.core.hand import HandCategory, best_hand_category
from deepthought.core.rules import Phase
from deepthought.core.table import TableSnapshot
from deepthought.exceptions import UnhandledPhaseError
from deepthought.strategy.context import DecisionContext, RaiseCounter
from deepthought.strategy.evaluators import (
    evaluate_pre_flop, evaluate_flop, evaluate_turn, evaluate_river,
)
from deepthought.strategy.statistics import StartingHandStatistics


logger = logging.getLogger(__name__)

Evaluator = Callable[[DecisionContext], Action]

EVALUATORS: Dict[Phase, Evaluator] = {
    Phase.PRE_FLOP: evaluate_pre_flop,
    Phase.FLOP: evaluate_flop,
    Phase.TURN: evaluate_turn,
    Phase.RIVER: evaluate_river,
}


class DecisionEngine:
    """
    Picks one legal action per request.

    Usage:
        engine = DecisionEngine(StartingHandStatistics.load())
        action = engine.decide(Phase.FLOP, legal_actions, snapshot, best_hand, counter)
    """

    def __init__(
        self,
        statistics: StartingHandStatistics,
        config: Optional[BotConfig] = None,
    ):
        self.statistics = statistics
        self.config = config or BotConfig()

    def decide(
        self,
        phase: Phase,
        legal_actions: LegalActions | Iterable[Action],
        snapshot: TableSnapshot,
        best_hand: Optional[HandCategory] = None,
        counter: Optional[RaiseCounter] = None,
    ) -> Action:
        """
        Choose an action for the current phase.

        Args:
            phase: Betting phase the request was made in
            legal_actions: Actions offered by the server
            snapshot: Table snapshot taken for this request
            best_hand: Best-hand category; classified from the snapshot when
                omitted after the flop
            counter: The requesting agent's raise counter

        Returns:
            One of the supplied legal actions, unmodified

        Raises:
            NoLegalActionsError: If no legal action was supplied.
            UnhandledPhaseError: If the phase has no evaluator and either the
                engine is strict or FOLD is not legal.
            NoFoldAvailableError: If a rule chain falls through to FOLD and
                FOLD is not legal.
        """
        legal = LegalActions.of(legal_actions)
        counter = counter if counter is not None else RaiseCounter()

        evaluator = EVALUATORS.get(phase)
        if evaluator is None:
            return self._unhandled_phase(phase, legal)

        if best_hand is None and phase != Phase.PRE_FLOP:
            best_hand = best_hand_category(snapshot.hole_cards, snapshot.community_cards)

        ctx = DecisionContext(
            phase=phase,
            legal=legal,
            snapshot=snapshot,
            best_hand=best_hand,
            counter=counter,
            statistics=self.statistics,
            config=self.config,
        )
        action = evaluator(ctx)
        logger.debug(f"{phase.value}: chose {action} from {legal!r} (raises={counter.value})")
        return action

    def _unhandled_phase(self, phase: Phase, legal: LegalActions) -> Action:
        logger.error(f"No evaluator for phase {phase}, legal actions {legal!r}")
        if self.config.strict:
            raise UnhandledPhaseError(f"No evaluator for phase {phase}")
        if legal.fold is None:
            raise UnhandledPhaseError(f"No evaluator for phase {phase} and FOLD is not legal")
        return legal.fold

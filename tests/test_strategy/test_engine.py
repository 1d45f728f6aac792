"""
Tests for the decision engine: phase dispatch and error handling.
"""

from itertools import combinations
import logging

import pytest
from deepthought.core.actions import Action, LegalActions
from deepthought.core.card import Card
from deepthought.core.hand import HandCategory
from deepthought.core.rules import ActionType, Phase
from deepthought.exceptions import NoLegalActionsError, UnhandledPhaseError
from deepthought.strategy.context import DecisionContext, RaiseCounter
from deepthought.strategy.engine import EVALUATORS, DecisionEngine
from deepthought.strategy.evaluators import evaluate_flop


class TestDispatch:
    """Tests for routing requests to phase evaluators."""

    def test_every_betting_phase_has_an_evaluator(self):
        """Test that each betting phase has an evaluator."""
        assert set(EVALUATORS) == {Phase.PRE_FLOP, Phase.FLOP, Phase.TURN, Phase.RIVER}

    def test_turn_and_river_follow_flop(self, engine, make_snapshot, make_actions):
        """Test that turn and river decide like the flop."""
        actions = make_actions(FOLD=0, CALL=40, RAISE=80)
        results = set()
        for phase, board in [(Phase.FLOP, "2c 9h Kd"), (Phase.TURN, "2c 9h Kd 4s"), (Phase.RIVER, "2c 9h Kd 4s 5c")]:
            snapshot = make_snapshot(hole="Js Jd", community=board, phase=phase)
            results.add(engine.decide(phase, actions, snapshot, HandCategory.ONE_PAIR))
        # Jacks score 6, above the premium raise score
        assert results == {Action(ActionType.RAISE, 80)}

    def test_counter_defaults_to_fresh(self, engine, make_snapshot, make_actions):
        """Test that decide works without a counter."""
        action = engine.decide(Phase.PRE_FLOP, make_actions(FOLD=0, CHECK=0), make_snapshot(hole="2c 7d"))
        assert action.action_type == ActionType.CHECK

    def test_accepts_legal_actions(self, engine, make_snapshot, make_actions):
        """Test that decide accepts a prepared LegalActions."""
        legal = LegalActions(make_actions(FOLD=0, CHECK=0))
        action = engine.decide(Phase.PRE_FLOP, legal, make_snapshot(hole="2c 7d"))
        assert action is legal.check


class TestUnhandledPhase:
    """Tests for phases without an evaluator."""

    def test_showdown_folds(self, engine, make_snapshot, make_actions, caplog):
        """Test that an unhandled phase folds and logs an error."""
        snapshot = make_snapshot(phase=Phase.SHOWDOWN)
        with caplog.at_level(logging.ERROR):
            action = engine.decide(Phase.SHOWDOWN, make_actions(FOLD=0, CHECK=0), snapshot)
        assert action.action_type == ActionType.FOLD
        assert "No evaluator for phase" in caplog.text

    def test_showdown_without_fold(self, engine, make_snapshot, make_actions):
        """Test the error when an unhandled phase cannot fold."""
        snapshot = make_snapshot(phase=Phase.SHOWDOWN)
        with pytest.raises(UnhandledPhaseError):
            engine.decide(Phase.SHOWDOWN, make_actions(CHECK=0), snapshot)

    def test_strict_engine_raises(self, stats, strict_config, make_snapshot, make_actions):
        """Test that a strict engine raises instead of folding."""
        engine = DecisionEngine(stats, strict_config)
        snapshot = make_snapshot(phase=Phase.SHOWDOWN)
        with pytest.raises(UnhandledPhaseError):
            engine.decide(Phase.SHOWDOWN, make_actions(FOLD=0, CHECK=0), snapshot)

    def test_strict_engine_handles_betting_phases(self, stats, strict_config, make_snapshot, make_actions):
        """Test that strict mode leaves betting phases alone."""
        engine = DecisionEngine(stats, strict_config)
        action = engine.decide(Phase.PRE_FLOP, make_actions(FOLD=0, CHECK=0), make_snapshot(hole="2c 7d"))
        assert action.action_type == ActionType.CHECK


class TestLegalActionContract:
    """Tests that decisions always come from the offered actions."""

    def test_no_legal_actions(self, engine, make_snapshot):
        """Test that an empty offer raises NoLegalActionsError."""
        with pytest.raises(NoLegalActionsError):
            engine.decide(Phase.PRE_FLOP, [], make_snapshot())

    @pytest.mark.parametrize("phase", [Phase.PRE_FLOP, Phase.FLOP, Phase.TURN, Phase.RIVER])
    def test_result_is_a_supplied_action(self, engine, make_snapshot, make_actions, phase):
        """Test that every decision is one of the supplied objects."""
        board = {Phase.PRE_FLOP: "", Phase.FLOP: "2c 9h Kd", Phase.TURN: "2c 9h Kd 4s",
                 Phase.RIVER: "2c 9h Kd 4s 5c"}[phase]
        offers = [
            make_actions(FOLD=0, CHECK=0),
            make_actions(FOLD=0, CALL=30),
            make_actions(FOLD=0, CALL=30, RAISE=60),
            make_actions(FOLD=0, CHECK=0, RAISE=60, ALL_IN=1000),
            make_actions(FOLD=0, CALL=5000, ALL_IN=1000),
        ]
        hands = ["As Ah", "Ks Ad", "7c 7d", "Tc Jd", "2d 7d", "Qc 4d", "9d 8d"]
        for hole in hands:
            snapshot = make_snapshot(hole=hole, community=board, phase=phase)
            for offer in offers:
                action = engine.decide(phase, offer, snapshot)
                assert any(action is supplied for supplied in offer)

    def test_every_starting_hand_gets_a_supplied_action(self, engine, make_snapshot, make_actions):
        """Test pre-flop decisions over many starting hands."""
        offer = make_actions(FOLD=0, CALL=100, RAISE=200)
        cards = [Card.from_int(i) for i in range(0, 52, 3)]
        for first, second in combinations(cards, 2):
            snapshot = make_snapshot(hole=f"{first.short_str} {second.short_str}")
            action = engine.decide(Phase.PRE_FLOP, offer, snapshot)
            assert action in offer

    def test_idempotent(self, engine, make_snapshot, make_actions):
        """Test that equal inputs give the same action."""
        snapshot = make_snapshot(hole="9d 8d", community="2c 9h Kd", phase=Phase.FLOP)
        offer = make_actions(FOLD=0, CALL=30, RAISE=60)
        first = engine.decide(Phase.FLOP, offer, snapshot, counter=RaiseCounter(3))
        second = engine.decide(Phase.FLOP, offer, snapshot, counter=RaiseCounter(3))
        assert first is second


class TestEvaluatorDirect:
    """Tests for calling an evaluator without the engine."""

    def test_evaluate_flop_reads_context(self, stats, config, make_snapshot, make_actions):
        """Test the flop chain against a hand-built context."""
        ctx = DecisionContext(
            phase=Phase.FLOP,
            legal=LegalActions(make_actions(FOLD=0, CALL=10)),
            snapshot=make_snapshot(hole="As 7d", community="2c 9h Kd", phase=Phase.FLOP),
            best_hand=HandCategory.TWO_PAIRS,
            counter=RaiseCounter(4),
            statistics=stats,
            config=config,
        )
        assert evaluate_flop(ctx) == Action(ActionType.CALL, 10)
        assert ctx.counter.value == 0

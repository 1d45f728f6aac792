"""
Round evaluators: the rule chains that pick an action for each phase.

Every evaluator walks its rules top to bottom and returns the first action
that applies. All returned actions come straight out of the legal set.
Chains end in FOLD, which the game rules guarantee is offered at every
non-terminal decision point.
"""

import logging

from deepthought.core.actions import Action
from deepthought.core.hand import HandCategory
from deepthought.core.rules import Phase
from deepthought.exceptions import NoFoldAvailableError
from deepthought.strategy.context import DecisionContext
from deepthought.strategy.premium import premium_pair_rank
from deepthought.strategy.translator import translate


logger = logging.getLogger(__name__)

# Post-flop: raise with at least this much, or with a premium score above
# PREMIUM_RAISE_SCORE (JJ or better)
RAISE_CATEGORY = HandCategory.THREE_OF_A_KIND
PREMIUM_RAISE_SCORE = 5


def pre_flop_win_probability(ctx: DecisionContext) -> float:
    """Table win percentage for the hole cards, plus the dealer's positional bonus."""
    snapshot = ctx.snapshot
    key = translate(snapshot.hole_cards)
    win_probability = ctx.statistics.lookup(key, snapshot.number_of_players)
    if snapshot.am_i_dealer:
        win_probability += ctx.config.dealer_bonus
    logger.debug(f"{key} at {snapshot.number_of_players} players: {win_probability}%")
    return win_probability


def evaluate_pre_flop(ctx: DecisionContext) -> Action:
    legal = ctx.legal
    win_probability = pre_flop_win_probability(ctx)

    if win_probability > ctx.config.raise_threshold and legal.raise_:
        ctx.counter.reset()
        return legal.raise_

    if premium_pair_rank(ctx.snapshot.hole_cards) > 0:
        if legal.raise_:
            return legal.raise_
        if legal.call:
            return legal.call

    if legal.check:
        ctx.counter.reset()
        return legal.check

    if legal.call:
        for min_win, max_call in ctx.config.call_thresholds:
            if win_probability > min_win and legal.call_amount <= max_call:
                return legal.call

    ctx.counter.reset()
    logger.info(f"Folding with {win_probability}%")
    return _fold(ctx)


def evaluate_flop(ctx: DecisionContext) -> Action:
    legal = ctx.legal
    best_hand = ctx.best_hand

    if legal.raise_ and (
        best_hand >= RAISE_CATEGORY
        or premium_pair_rank(ctx.snapshot.hole_cards) > PREMIUM_RAISE_SCORE
    ):
        return legal.raise_

    if legal.check:
        ctx.counter.reset()
        return legal.check

    if best_hand.is_better_than(HandCategory.ONE_PAIR) and legal.call:
        ctx.counter.reset()
        return legal.call

    # Unreachable while the first rule raises from THREE_OF_A_KIND up; kept
    # so the chain survives a change to RAISE_CATEGORY
    if best_hand.is_better_than(HandCategory.TWO_PAIRS) and legal.raise_:
        ctx.counter.reset()
        return legal.raise_

    # Never true here: this chain only runs after the flop. Left in place
    # until someone decides what small-blind play was meant to be.
    if ctx.snapshot.am_i_small_blind and ctx.phase == Phase.PRE_FLOP and legal.call:
        ctx.counter.reset()
        return legal.call

    return _fold(ctx)


def evaluate_turn(ctx: DecisionContext) -> Action:
    return evaluate_flop(ctx)


def evaluate_river(ctx: DecisionContext) -> Action:
    return evaluate_flop(ctx)


def _fold(ctx: DecisionContext) -> Action:
    fold = ctx.legal.fold
    if fold is None:
        raise NoFoldAvailableError(
            f"No rule matched in {ctx.phase.value} and FOLD is not legal: {ctx.legal!r}"
        )
    return fold

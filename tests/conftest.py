"""
Pytest configuration and shared fixtures for Deep Thought tests.
"""

import pytest
from deepthought.config import BotConfig
from deepthought.core.actions import Action
from deepthought.core.card import Card, Rank, Suit, parse_cards
from deepthought.core.rules import ActionType, Phase
from deepthought.core.table import TableSnapshot
from deepthought.strategy.context import RaiseCounter
from deepthought.strategy.engine import DecisionEngine
from deepthought.strategy.statistics import StartingHandStatistics, TABLE_SIZES


# Win percentages used by the strategy tests, identical for every table size
TEST_PROBABILITIES = {
    "KAs": 65.0,
    "KA": 58.0,
    "AA": 85.0,
    "77": 50.0,
    "TJ": 16.0,
    "89s": 23.0,
    "27": 10.0,
    "23": 12.0,
}


@pytest.fixture
def config():
    """Default agent configuration."""
    return BotConfig()


@pytest.fixture
def strict_config():
    """Configuration that raises on unhandled phases."""
    return BotConfig(strict=True)


@pytest.fixture
def stats():
    """Statistics with the same small table for every table size."""
    return StartingHandStatistics.from_tables(
        {size: TEST_PROBABILITIES for size in TABLE_SIZES}
    )


@pytest.fixture
def engine(stats, config):
    """Decision engine on the test statistics."""
    return DecisionEngine(stats, config)


@pytest.fixture
def counter():
    """A raise counter that has already seen two raises."""
    return RaiseCounter(2)


@pytest.fixture
def make_snapshot():
    """Factory for table snapshots; cards are given as strings like "As Kd"."""
    def _make(hole="As Kd", community="", phase=Phase.PRE_FLOP, players=6,
              dealer="Bob", small_blind_player="Carol", my_name="Deep_Thought"):
        return TableSnapshot(
            my_name=my_name,
            hole_cards=tuple(parse_cards(hole)),
            community_cards=tuple(parse_cards(community)),
            phase=phase,
            number_of_players=players,
            dealer=dealer,
            small_blind_player=small_blind_player,
            big_blind_player="Dave",
            big_blind=20,
            small_blind=10,
        )
    return _make


@pytest.fixture
def make_actions():
    """Factory for legal actions: make_actions(FOLD=0, CALL=50)."""
    def _make(**amounts):
        return [Action(ActionType[name], amount) for name, amount in amounts.items()]
    return _make


@pytest.fixture
def sample_hand():
    """Create a sample 5-card hand (pair of aces)."""
    return [
        Card(Rank.ACE, Suit.SPADES),
        Card(Rank.ACE, Suit.HEARTS),
        Card(Rank.KING, Suit.DIAMONDS),
        Card(Rank.QUEEN, Suit.CLUBS),
        Card(Rank.JACK, Suit.SPADES),
    ]


@pytest.fixture
def royal_flush():
    """Create a royal flush hand."""
    return [
        Card(Rank.ACE, Suit.SPADES),
        Card(Rank.KING, Suit.SPADES),
        Card(Rank.QUEEN, Suit.SPADES),
        Card(Rank.JACK, Suit.SPADES),
        Card(Rank.TEN, Suit.SPADES),
    ]


@pytest.fixture
def straight_flush():
    """Create a straight flush (9-high)."""
    return [
        Card(Rank.NINE, Suit.HEARTS),
        Card(Rank.EIGHT, Suit.HEARTS),
        Card(Rank.SEVEN, Suit.HEARTS),
        Card(Rank.SIX, Suit.HEARTS),
        Card(Rank.FIVE, Suit.HEARTS),
    ]


@pytest.fixture
def wheel_straight():
    """Create a wheel straight (A-2-3-4-5)."""
    return [
        Card(Rank.ACE, Suit.SPADES),
        Card(Rank.TWO, Suit.HEARTS),
        Card(Rank.THREE, Suit.DIAMONDS),
        Card(Rank.FOUR, Suit.CLUBS),
        Card(Rank.FIVE, Suit.SPADES),
    ]

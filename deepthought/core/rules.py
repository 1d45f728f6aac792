"""
Texas Hold'em phases, action kinds and table constants.

The game server drives a hand through PRE_FLOP, FLOP, TURN and RIVER before
the SHOWDOWN. Only the four betting phases ever ask the agent for an action.
"""

from enum import Enum
from typing import Dict


class Phase(Enum):
    """Phases of a hand as reported by the table."""
    PRE_FLOP = "PRE_FLOP"
    FLOP = "FLOP"
    TURN = "TURN"
    RIVER = "RIVER"
    SHOWDOWN = "SHOWDOWN"


class ActionType(Enum):
    """Possible player actions. Amounts are always fixed by the server."""
    FOLD = "FOLD"
    CHECK = "CHECK"
    CALL = "CALL"
    RAISE = "RAISE"
    ALL_IN = "ALL_IN"


# Starting-hand statistics exist for these table sizes only
MIN_PLAYERS = 2
MAX_PLAYERS = 10

HOLE_CARDS = 2

# Community cards visible once a phase has been dealt
COMMUNITY_CARDS: Dict[Phase, int] = {
    Phase.PRE_FLOP: 0,
    Phase.FLOP: 3,
    Phase.TURN: 4,
    Phase.RIVER: 5,
}


def is_valid_table_size(number_of_players: int) -> bool:
    """True if starting-hand statistics cover a table of this size."""
    return MIN_PLAYERS <= number_of_players <= MAX_PLAYERS


def check_table_size(number_of_players: int) -> int:
    """
    Reject table sizes the statistics do not cover.

    Raises:
        ValueError: If number_of_players is outside 2-10.
    """
    if not is_valid_table_size(number_of_players):
        raise ValueError(
            f"Number of players must be {MIN_PLAYERS}-{MAX_PLAYERS}, "
            f"got {number_of_players}"
        )
    return number_of_players


def phase_for_community_cards(count: int) -> Phase:
    """Betting phase implied by the number of community cards on the board."""
    for phase, cards in COMMUNITY_CARDS.items():
        if cards == count:
            return phase
    raise ValueError(f"No betting phase has {count} community cards")

"""
Event handlers for one table.

Each table event type has exactly one handler. A handler takes the table's
AgentState and the event, and updates the state in place. handle_event is
the single entry point the transport layer feeds events into.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Callable, Dict, Type
import logging

from deepthought.core.events import (
    TableEvent, PlayIsStarted, TableChangedState, YouHaveBeenDealtACard,
    CommunityHasBeenDealtACard, PlayerBetSmallBlind, PlayerBetBigBlind,
    PlayerFolded, PlayerForcedFolded, PlayerCalled, PlayerRaised,
    PlayerWentAllIn, PlayerChecked, YouWonAmount, ShowDown, PlayerQuit,
    TableIsDone, ServerIsShuttingDown,
)
from deepthought.core.hand import classify_hand
from deepthought.core.table import TableState
from deepthought.strategy.context import RaiseCounter


logger = logging.getLogger(__name__)


@dataclass
class AgentState:
    """Everything one agent knows about one table."""
    table: TableState
    counter: RaiseCounter = field(default_factory=RaiseCounter)

    @classmethod
    def for_player(cls, name: str) -> AgentState:
        return cls(table=TableState(my_name=name))

    @property
    def my_name(self) -> str:
        return self.table.my_name


Handler = Callable[[AgentState, TableEvent], None]

HANDLERS: Dict[Type[TableEvent], Handler] = {}


def handles(event_type: Type[TableEvent]) -> Callable[[Handler], Handler]:
    """Register a function as the handler for an event type."""
    def register(handler: Handler) -> Handler:
        HANDLERS[event_type] = handler
        return handler
    return register


def handle_event(state: AgentState, event: TableEvent) -> None:
    """
    Apply one event to the table state.

    Raises:
        TypeError: If no handler is registered for the event's type.
    """
    handler = HANDLERS.get(type(event))
    if handler is None:
        raise TypeError(f"No handler for event {type(event).__name__}")
    handler(state, event)


@handles(PlayIsStarted)
def on_play_is_started(state: AgentState, event: PlayIsStarted) -> None:
    state.table.start_hand(
        players=list(event.players),
        dealer=event.dealer,
        small_blind_player=event.small_blind_player,
        big_blind_player=event.big_blind_player,
        small_blind=event.small_blind,
        big_blind=event.big_blind,
        table_id=event.table_id,
    )
    logger.debug(f"Play is started, hand #{state.table.hand_number} with {len(event.players)} players")


@handles(TableChangedState)
def on_table_changed_state(state: AgentState, event: TableChangedState) -> None:
    state.table.phase = event.phase
    logger.debug(f"Table changed state: {event.phase.value}")


@handles(YouHaveBeenDealtACard)
def on_you_have_been_dealt_a_card(state: AgentState, event: YouHaveBeenDealtACard) -> None:
    state.table.deal_hole_card(event.card)
    logger.debug(f"I, {state.my_name}, got a card: {event.card}")


@handles(CommunityHasBeenDealtACard)
def on_community_has_been_dealt_a_card(state: AgentState, event: CommunityHasBeenDealtACard) -> None:
    state.table.deal_community_card(event.card)
    logger.debug(f"Community got a card: {event.card}")


@handles(PlayerBetSmallBlind)
def on_player_bet_small_blind(state: AgentState, event: PlayerBetSmallBlind) -> None:
    state.table.small_blind_player = event.player
    state.table.small_blind = event.small_blind
    logger.debug(f"{event.player} placed small blind with amount {event.small_blind}")


@handles(PlayerBetBigBlind)
def on_player_bet_big_blind(state: AgentState, event: PlayerBetBigBlind) -> None:
    state.table.big_blind_player = event.player
    state.table.big_blind = event.big_blind
    logger.debug(f"{event.player} placed big blind with amount {event.big_blind}")


@handles(PlayerFolded)
def on_player_folded(state: AgentState, event: PlayerFolded) -> None:
    state.table.fold(event.player)
    logger.debug(f"{event.player} folded after putting {event.investment_in_pot} in the pot")


@handles(PlayerForcedFolded)
def on_player_forced_folded(state: AgentState, event: PlayerForcedFolded) -> None:
    state.table.fold(event.player)
    logger.debug(
        f"{event.player} was forced to fold after putting {event.investment_in_pot} "
        f"in the pot because exceeding the time limit"
    )


@handles(PlayerCalled)
def on_player_called(state: AgentState, event: PlayerCalled) -> None:
    logger.debug(f"{event.player} called with amount {event.call_bet}")


@handles(PlayerRaised)
def on_player_raised(state: AgentState, event: PlayerRaised) -> None:
    if event.player != state.my_name:
        state.counter.increment()
    logger.debug(f"{event.player} raised with bet {event.raise_bet}")


@handles(PlayerWentAllIn)
def on_player_went_all_in(state: AgentState, event: PlayerWentAllIn) -> None:
    logger.debug(f"{event.player} went all in with amount {event.all_in_amount}")


@handles(PlayerChecked)
def on_player_checked(state: AgentState, event: PlayerChecked) -> None:
    logger.debug(f"{event.player} checked")


@handles(YouWonAmount)
def on_you_won_amount(state: AgentState, event: YouWonAmount) -> None:
    state.table.my_chips = event.chips_after
    logger.debug(f"I, {state.my_name}, won: {event.won_amount}")


@handles(ShowDown)
def on_show_down(state: AgentState, event: ShowDown) -> None:
    if logger.isEnabledFor(logging.INFO):
        logger.info(format_show_down(event))


@handles(PlayerQuit)
def on_player_quit(state: AgentState, event: PlayerQuit) -> None:
    state.table.remove_player(event.player)
    logger.debug(f"Player {event.player} has quit")


@handles(TableIsDone)
def on_table_is_done(state: AgentState, event: TableIsDone) -> None:
    state.table.done = True
    state.table.my_chips = event.chips
    logger.debug(f"Table is done, I'm leaving the table with ${event.chips}")


@handles(ServerIsShuttingDown)
def on_server_is_shutting_down(state: AgentState, event: ServerIsShuttingDown) -> None:
    logger.debug("Server is shutting down")


def format_show_down(event: ShowDown) -> str:
    """One line per player: name, winnings (or Fold), hand category and cards."""
    lines = ["ShowDown:"]
    for psd in event.players_show_down:
        won = "Fold" if psd.folded else str(psd.won_amount)
        hand = ""
        if len(psd.cards) >= 2:
            try:
                hand = classify_hand(psd.cards).category.display_name
            except ValueError as e:
                logger.warning(f"Cannot classify {psd.player}'s show down cards: {e}")
        cards = " | ".join(f"{str(c):<3}" for c in psd.cards)
        lines.append(f"{psd.player:<13} won: {won:>6}  hand: {hand:<15}  cards: | {cards} |")
    return "\n".join(lines)

"""
Table events delivered by the game server.

Every event is an immutable record. The agent funnels all of them through a
single update path (see deepthought.agents.handlers) so that decisions read a
consistent table snapshot.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Tuple

from deepthought.core.card import Card
from deepthought.core.rules import Phase


@dataclass(frozen=True)
class TableEvent:
    """Base class for all table events."""


@dataclass(frozen=True)
class PlayIsStarted(TableEvent):
    """A new hand starts. Players are listed in seat order."""
    players: Tuple[str, ...]
    dealer: str
    small_blind_player: str
    big_blind_player: str
    small_blind: int
    big_blind: int
    table_id: int = 0


@dataclass(frozen=True)
class TableChangedState(TableEvent):
    phase: Phase


@dataclass(frozen=True)
class YouHaveBeenDealtACard(TableEvent):
    card: Card


@dataclass(frozen=True)
class CommunityHasBeenDealtACard(TableEvent):
    card: Card


@dataclass(frozen=True)
class PlayerBetSmallBlind(TableEvent):
    player: str
    small_blind: int


@dataclass(frozen=True)
class PlayerBetBigBlind(TableEvent):
    player: str
    big_blind: int


@dataclass(frozen=True)
class PlayerFolded(TableEvent):
    player: str
    investment_in_pot: int = 0


@dataclass(frozen=True)
class PlayerForcedFolded(TableEvent):
    """A player exceeded the time limit and was folded by the server."""
    player: str
    investment_in_pot: int = 0


@dataclass(frozen=True)
class PlayerCalled(TableEvent):
    player: str
    call_bet: int


@dataclass(frozen=True)
class PlayerRaised(TableEvent):
    player: str
    raise_bet: int


@dataclass(frozen=True)
class PlayerWentAllIn(TableEvent):
    player: str
    all_in_amount: int


@dataclass(frozen=True)
class PlayerChecked(TableEvent):
    player: str


@dataclass(frozen=True)
class YouWonAmount(TableEvent):
    won_amount: int
    chips_after: int


@dataclass(frozen=True)
class PlayerShowDown:
    """One line of a showdown: who, what they held and what they won."""
    player: str
    cards: Tuple[Card, ...] = ()
    won_amount: int = 0
    folded: bool = False


@dataclass(frozen=True)
class ShowDown(TableEvent):
    players_show_down: Tuple[PlayerShowDown, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class PlayerQuit(TableEvent):
    player: str


@dataclass(frozen=True)
class TableIsDone(TableEvent):
    chips: int = 0


@dataclass(frozen=True)
class ServerIsShuttingDown(TableEvent):
    pass

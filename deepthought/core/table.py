"""
Table-state tracking for one table.

TableState is the only mutable view of a table and is updated exclusively
from table events. Decisions never read it directly: they work on a frozen
TableSnapshot taken when the action request arrives.
"""

from __future__ import annotations
from typing import List, Optional, Tuple
from dataclasses import dataclass, field
import logging

from deepthought.core.card import Card
from deepthought.core.rules import Phase, HOLE_CARDS, check_table_size


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TableSnapshot:
    """
    Read-only view of a hand at the moment an action is requested.

    Attributes:
        my_name: Name the agent plays under
        hole_cards: The agent's two private cards
        community_cards: Board cards revealed so far (0, 3, 4 or 5)
        phase: Current betting phase
        number_of_players: Players seated at the table
        dealer: Name of the dealer
        small_blind_player: Name of the small-blind player
        big_blind_player: Name of the big-blind player
        big_blind: Current big blind
        small_blind: Current small blind
        table_id: Server table id
        my_chips: The agent's chip count
    """
    my_name: str
    hole_cards: Tuple[Card, ...]
    community_cards: Tuple[Card, ...]
    phase: Phase
    number_of_players: int
    dealer: Optional[str] = None
    small_blind_player: Optional[str] = None
    big_blind_player: Optional[str] = None
    big_blind: int = 0
    small_blind: int = 0
    table_id: int = 0
    my_chips: int = 0

    @property
    def am_i_dealer(self) -> bool:
        return self.dealer is not None and self.dealer == self.my_name

    @property
    def am_i_small_blind(self) -> bool:
        return self.small_blind_player is not None and self.small_blind_player == self.my_name

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "my_name": self.my_name,
            "hole_cards": [c.short_str for c in self.hole_cards],
            "community_cards": [c.short_str for c in self.community_cards],
            "phase": self.phase.value,
            "number_of_players": self.number_of_players,
            "dealer": self.dealer,
            "small_blind_player": self.small_blind_player,
            "big_blind_player": self.big_blind_player,
            "big_blind": self.big_blind,
            "small_blind": self.small_blind,
            "table_id": self.table_id,
            "my_chips": self.my_chips,
        }


@dataclass
class TableState:
    """
    Mutable bookkeeping for one table, owned by a single agent.

    Attributes:
        my_name: Name the agent plays under
        players: Seated players in seat order
        folded: Players who folded in the current hand
        hole_cards: Cards dealt to the agent this hand
        community_cards: Board cards dealt this hand
        phase: Phase last reported by the table
        done: True once the table has finished
    """
    my_name: str
    players: List[str] = field(default_factory=list)
    folded: List[str] = field(default_factory=list)
    hole_cards: List[Card] = field(default_factory=list)
    community_cards: List[Card] = field(default_factory=list)
    phase: Phase = Phase.PRE_FLOP
    dealer: Optional[str] = None
    small_blind_player: Optional[str] = None
    big_blind_player: Optional[str] = None
    small_blind: int = 0
    big_blind: int = 0
    table_id: int = 0
    my_chips: int = 0
    hand_number: int = 0
    done: bool = False

    def start_hand(
        self,
        players: List[str],
        dealer: str,
        small_blind_player: str,
        big_blind_player: str,
        small_blind: int,
        big_blind: int,
        table_id: int = 0,
    ) -> None:
        """Reset per-hand state for a new hand."""
        self.players = list(players)
        self.folded = []
        self.hole_cards = []
        self.community_cards = []
        self.phase = Phase.PRE_FLOP
        self.dealer = dealer
        self.small_blind_player = small_blind_player
        self.big_blind_player = big_blind_player
        self.small_blind = small_blind
        self.big_blind = big_blind
        self.table_id = table_id
        self.hand_number += 1

    def deal_hole_card(self, card: Card) -> None:
        if len(self.hole_cards) >= HOLE_CARDS:
            raise ValueError(f"Already holding {HOLE_CARDS} cards, got {card}")
        self.hole_cards.append(card)

    def deal_community_card(self, card: Card) -> None:
        if len(self.community_cards) >= 5:
            raise ValueError(f"Board already complete, got {card}")
        self.community_cards.append(card)

    def fold(self, player: str) -> None:
        if player not in self.folded:
            self.folded.append(player)

    def remove_player(self, player: str) -> None:
        if player in self.players:
            self.players.remove(player)

    @property
    def number_of_players(self) -> int:
        return len(self.players)

    @property
    def number_of_folded_players(self) -> int:
        return len(self.folded)

    def snapshot(self) -> TableSnapshot:
        """
        Take a consistent, immutable view of the table.

        Raises:
            ValueError: If the agent does not hold exactly two cards or the
                seat count is outside 2-10.
        """
        if len(self.hole_cards) != HOLE_CARDS:
            raise ValueError(
                f"Expected {HOLE_CARDS} hole cards, holding {len(self.hole_cards)}"
            )
        check_table_size(self.number_of_players)

        return TableSnapshot(
            my_name=self.my_name,
            hole_cards=tuple(self.hole_cards),
            community_cards=tuple(self.community_cards),
            phase=self.phase,
            number_of_players=self.number_of_players,
            dealer=self.dealer,
            small_blind_player=self.small_blind_player,
            big_blind_player=self.big_blind_player,
            big_blind=self.big_blind,
            small_blind=self.small_blind,
            table_id=self.table_id,
            my_chips=self.my_chips,
        )

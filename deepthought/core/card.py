"""
Card model for the Deep Thought agent.

Cards are dealt by the game server and arrive as short strings ("As", "Td",
"A♠"). Once parsed they never change: the agent only reads rank and suit.
"""

from __future__ import annotations
from typing import List, Sequence
from enum import IntEnum


class Suit(IntEnum):
    """Card suits. Order carries no meaning for strategy."""
    CLUBS = 0     # ♣
    DIAMONDS = 1  # ♦
    HEARTS = 2    # ♥
    SPADES = 3    # ♠


class Rank(IntEnum):
    """Card ranks from 2 (lowest) to Ace (highest)."""
    TWO = 0
    THREE = 1
    FOUR = 2
    FIVE = 3
    SIX = 4
    SEVEN = 5
    EIGHT = 6
    NINE = 7
    TEN = 8
    JACK = 9
    QUEEN = 10
    KING = 11
    ACE = 12


SUIT_SYMBOLS = {
    Suit.CLUBS: "♣",
    Suit.DIAMONDS: "♦",
    Suit.HEARTS: "♥",
    Suit.SPADES: "♠",
}

SUIT_CHARS = {
    Suit.CLUBS: "c",
    Suit.DIAMONDS: "d",
    Suit.HEARTS: "h",
    Suit.SPADES: "s",
}

# One character per rank; the statistics tables are keyed on these
RANK_CHARS = {
    Rank.TWO: "2",
    Rank.THREE: "3",
    Rank.FOUR: "4",
    Rank.FIVE: "5",
    Rank.SIX: "6",
    Rank.SEVEN: "7",
    Rank.EIGHT: "8",
    Rank.NINE: "9",
    Rank.TEN: "T",
    Rank.JACK: "J",
    Rank.QUEEN: "Q",
    Rank.KING: "K",
    Rank.ACE: "A",
}

CHAR_TO_RANK = {v: k for k, v in RANK_CHARS.items()}
CHAR_TO_SUIT = {v: k for k, v in SUIT_CHARS.items()}
SYMBOL_TO_SUIT = {v: k for k, v in SUIT_SYMBOLS.items()}


class Card:
    """
    An immutable playing card.

    Cards can be created from:
    - Rank and Suit enums: Card(Rank.ACE, Suit.SPADES)
    - String notation: Card.from_string("As"), Card.from_string("A♠"),
      Card.from_string("10h")
    - Integer (0-51): Card.from_int(51) = Ace of Spades
    """

    __slots__ = ("_rank", "_suit")

    def __init__(self, rank: Rank, suit: Suit):
        object.__setattr__(self, "_rank", Rank(rank))
        object.__setattr__(self, "_suit", Suit(suit))

    def __setattr__(self, name, value):
        raise AttributeError("Card is immutable")

    def __reduce__(self):
        # copy and pickle rebuild through __init__, never through __setattr__
        return (Card, (self._rank, self._suit))

    @property
    def rank(self) -> Rank:
        return self._rank

    @property
    def suit(self) -> Suit:
        return self._suit

    @classmethod
    def from_string(cls, s: str) -> Card:
        """
        Create a card from string notation.

        The rank is everything but the last character ("10" is accepted for
        Ten), the suit is the last character as a letter or a symbol.
        """
        s = s.strip()
        if len(s) < 2:
            raise ValueError(f"Invalid card string: {s!r}")

        rank_part, suit_part = s[:-1].upper(), s[-1]
        if rank_part == "10":
            rank_part = "T"
        if rank_part not in CHAR_TO_RANK:
            raise ValueError(f"Invalid rank: {rank_part!r}")

        if suit_part.lower() in CHAR_TO_SUIT:
            suit = CHAR_TO_SUIT[suit_part.lower()]
        elif suit_part in SYMBOL_TO_SUIT:
            suit = SYMBOL_TO_SUIT[suit_part]
        else:
            raise ValueError(f"Invalid suit: {suit_part!r}")

        return cls(CHAR_TO_RANK[rank_part], suit)

    @classmethod
    def from_int(cls, card_int: int) -> Card:
        """Create a card from integer (0-51), encoded as rank * 4 + suit."""
        if not 0 <= card_int <= 51:
            raise ValueError(f"Card int must be 0-51, got {card_int}")
        return cls(Rank(card_int // 4), Suit(card_int % 4))

    def to_int(self) -> int:
        return int(self._rank) * 4 + int(self._suit)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Card):
            return self._rank == other._rank and self._suit == other._suit
        return NotImplemented

    def __hash__(self) -> int:
        return self.to_int()

    def __lt__(self, other: Card) -> bool:
        """Compare by rank only (for sorting)."""
        return self._rank < other._rank

    def __repr__(self) -> str:
        return f"Card({self.short_str})"

    def __str__(self) -> str:
        return f"{RANK_CHARS[self._rank]}{SUIT_SYMBOLS[self._suit]}"

    @property
    def rank_char(self) -> str:
        return RANK_CHARS[self._rank]

    @property
    def short_str(self) -> str:
        """Short string like 'As', 'Kh'."""
        return f"{RANK_CHARS[self._rank]}{SUIT_CHARS[self._suit]}"


def parse_cards(cards: str | Sequence[str]) -> List[Card]:
    """
    Parse several cards at once.

    Accepts a space-separated string ("As Kh Td"), a packed string of
    two-character cards ("AsKhTd") or a sequence of card strings.
    """
    if not isinstance(cards, str):
        return [Card.from_string(c) for c in cards]

    cards = cards.strip()
    if not cards:
        return []
    if " " in cards:
        return [Card.from_string(s) for s in cards.split()]
    if len(cards) % 2:
        raise ValueError(f"Cannot parse cards: {cards!r}")
    return [Card.from_string(cards[i:i + 2]) for i in range(0, len(cards), 2)]

"""
Translate two hole cards into the key the starting-hand statistics use.

Ranks are written low to high followed by "s" when suited, so A♠ K♦ and
K♦ A♠ both become "KA", K♠ A♠ becomes "KAs" and a pair of sevens "77".
"""

from typing import List, Sequence, Tuple

from deepthought.core.card import Card, Rank, Suit, CHAR_TO_RANK, RANK_CHARS
from deepthought.core.rules import HOLE_CARDS

SUITED_MARKER = "s"


def starting_hand_key(first: Card, second: Card) -> str:
    """Canonical statistics key for a pair of hole cards."""
    low, high = (second, first) if first.rank > second.rank else (first, second)
    key = low.rank_char + high.rank_char
    if first.suit == second.suit:
        key += SUITED_MARKER
    return key


def translate(cards: Sequence[Card]) -> str:
    """
    Canonical statistics key for a two-card sequence.

    Raises:
        ValueError: If not exactly two cards are given.
    """
    if len(cards) != HOLE_CARDS:
        raise ValueError(f"Need {HOLE_CARDS} hole cards, got {len(cards)}")
    return starting_hand_key(cards[0], cards[1])


def all_starting_hand_keys() -> List[str]:
    """The 169 distinct keys: 13 pairs, 78 suited and 78 offsuit hands."""
    keys = []
    for low in Rank:
        for high in Rank:
            if high < low:
                continue
            base = RANK_CHARS[low] + RANK_CHARS[high]
            keys.append(base)
            if high != low:
                keys.append(base + SUITED_MARKER)
    return keys


def cards_for_key(key: str) -> Tuple[Card, Card]:
    """
    One concrete holding that translates to the given key.

    Raises:
        ValueError: If the key is not a valid starting-hand key.
    """
    suited = key.endswith(SUITED_MARKER) and len(key) == 3
    ranks = key[:2]
    if len(key) != (3 if suited else 2) or any(r not in CHAR_TO_RANK for r in ranks):
        raise ValueError(f"Invalid starting-hand key: {key!r}")

    low, high = CHAR_TO_RANK[ranks[0]], CHAR_TO_RANK[ranks[1]]
    if low > high or (suited and low == high):
        raise ValueError(f"Invalid starting-hand key: {key!r}")
    return Card(low, Suit.SPADES), Card(high, Suit.SPADES if suited else Suit.HEARTS)

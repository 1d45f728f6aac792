"""
Scores for the ten marquee starting hands.

AA scores 10 down to 77 at 1; any other holding scores 0. Suits and card order
are ignored.
"""

from typing import Sequence, Tuple

from deepthought.core.card import Card, Rank
from deepthought.core.rules import HOLE_CARDS


# Highest first; the first holding that matches decides the score
PREMIUM_HOLDINGS: Tuple[Tuple[Rank, Rank, int], ...] = (
    (Rank.ACE, Rank.ACE, 10),
    (Rank.KING, Rank.KING, 9),
    (Rank.QUEEN, Rank.QUEEN, 8),
    (Rank.ACE, Rank.KING, 7),
    (Rank.JACK, Rank.JACK, 6),
    (Rank.TEN, Rank.TEN, 5),
    (Rank.NINE, Rank.NINE, 4),
    (Rank.EIGHT, Rank.EIGHT, 3),
    (Rank.ACE, Rank.QUEEN, 2),
    (Rank.SEVEN, Rank.SEVEN, 1),
)


def holds(cards: Sequence[Card], rank1: Rank, rank2: Rank) -> bool:
    """True if the two cards are rank1 and rank2 in either order."""
    first, second = cards[0].rank, cards[1].rank
    return (first == rank1 and second == rank2) or (first == rank2 and second == rank1)


def premium_pair_rank(cards: Sequence[Card]) -> int:
    """
    Score two hole cards from 0 (not premium) to 10 (pocket Aces).

    Raises:
        ValueError: If not exactly two cards are given.
    """
    if len(cards) != HOLE_CARDS:
        raise ValueError(f"Need {HOLE_CARDS} hole cards, got {len(cards)}")

    for rank1, rank2, score in PREMIUM_HOLDINGS:
        if holds(cards, rank1, rank2):
            return score
    return 0

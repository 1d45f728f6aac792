"""
Best-hand classification for Texas Hold'em.

Classifies the agent's hole cards plus whatever community cards are visible
(2-7 cards in total) into the best poker-hand category obtainable.

Categories carry an order value, higher is better:

0. High Card
1. One Pair
2. Two Pairs
3. Three of a Kind
4. Straight
5. Flush
6. Full House
7. Four of a Kind
8. Straight Flush
9. Royal Flush

With five or more cards every 5-card combination is ranked and the best kept.
With fewer (pre-flop, or an incomplete board) only rank multiplicity can be
judged, so straights and flushes are never reported.

Note: Ace can be low in A-2-3-4-5 straight (wheel).
"""

from __future__ import annotations
from typing import List, Sequence, Tuple, Optional
from dataclasses import dataclass
from itertools import combinations
from enum import IntEnum
from collections import Counter

from deepthought.core.card import Card, Rank


class HandCategory(IntEnum):
    """Poker-hand categories; the value is the order value."""
    HIGH_CARD = 0
    ONE_PAIR = 1
    TWO_PAIRS = 2
    THREE_OF_A_KIND = 3
    STRAIGHT = 4
    FLUSH = 5
    FULL_HOUSE = 6
    FOUR_OF_A_KIND = 7
    STRAIGHT_FLUSH = 8
    ROYAL_FLUSH = 9

    @property
    def display_name(self) -> str:
        return HAND_CATEGORY_NAMES[self]

    def is_better_than(self, other: HandCategory) -> bool:
        return self.value > other.value


HAND_CATEGORY_NAMES = {
    HandCategory.ROYAL_FLUSH: "Royal Flush",
    HandCategory.STRAIGHT_FLUSH: "Straight Flush",
    HandCategory.FOUR_OF_A_KIND: "Four of a Kind",
    HandCategory.FULL_HOUSE: "Full House",
    HandCategory.FLUSH: "Flush",
    HandCategory.STRAIGHT: "Straight",
    HandCategory.THREE_OF_A_KIND: "Three of a Kind",
    HandCategory.TWO_PAIRS: "Two Pairs",
    HandCategory.ONE_PAIR: "One Pair",
    HandCategory.HIGH_CARD: "High Card",
}

MIN_CARDS = 2
MAX_CARDS = 7


@dataclass(frozen=True)
class BestHand:
    """
    Result of a classification.

    Attributes:
        category: Best category found
        cards: The cards making up that hand, most significant first
        strength: (category, tie-break ranks...); compares correctly across
            hands built from the same number of cards
    """
    category: HandCategory
    cards: Tuple[Card, ...]
    strength: Tuple[int, ...]

    @property
    def order_value(self) -> int:
        return int(self.category)

    def __str__(self) -> str:
        return f"{self.category.display_name} [{' '.join(str(c) for c in self.cards)}]"


def classify_hand(cards: Sequence[Card]) -> BestHand:
    """
    Find the best hand obtainable from 2-7 cards.

    Raises:
        ValueError: If fewer than 2 or more than 7 cards are given, or a card
            is repeated.
    """
    cards = list(cards)
    if len(cards) < MIN_CARDS or len(cards) > MAX_CARDS:
        raise ValueError(f"Need {MIN_CARDS}-{MAX_CARDS} cards, got {len(cards)}")
    if len(set(cards)) != len(cards):
        raise ValueError(f"Duplicate cards: {cards}")

    if len(cards) < 5:
        return _classify_by_multiplicity(cards)

    best: Optional[BestHand] = None
    for combo in combinations(cards, 5):
        hand = _classify_5_cards(list(combo))
        if best is None or hand.strength > best.strength:
            best = hand
    return best


def best_hand_category(hole_cards: Sequence[Card], community_cards: Sequence[Card]) -> HandCategory:
    """Category of the best hand from hole plus community cards."""
    return classify_hand(list(hole_cards) + list(community_cards)).category


def _classify_5_cards(cards: List[Card]) -> BestHand:
    """Classify exactly 5 cards."""
    sorted_cards = sorted(cards, key=lambda c: c.rank, reverse=True)
    ranks = [c.rank for c in sorted_cards]

    is_flush = len({c.suit for c in sorted_cards}) == 1
    straight_high = _straight_high(ranks)
    rank_counts = Counter(ranks)
    counts = sorted(rank_counts.values(), reverse=True)
    grouped = _group_ranks(rank_counts)

    if straight_high is not None:
        if straight_high == Rank.FIVE:
            sorted_cards = _reorder_wheel(sorted_cards)
        if is_flush:
            category = (HandCategory.ROYAL_FLUSH if straight_high == Rank.ACE
                        else HandCategory.STRAIGHT_FLUSH)
        else:
            category = HandCategory.STRAIGHT
        return _best(category, sorted_cards, [straight_high])

    if counts == [4, 1]:
        category = HandCategory.FOUR_OF_A_KIND
    elif counts == [3, 2]:
        category = HandCategory.FULL_HOUSE
    elif is_flush:
        return _best(HandCategory.FLUSH, sorted_cards, ranks)
    elif counts == [3, 1, 1]:
        category = HandCategory.THREE_OF_A_KIND
    elif counts == [2, 2, 1]:
        category = HandCategory.TWO_PAIRS
    elif counts == [2, 1, 1, 1]:
        category = HandCategory.ONE_PAIR
    else:
        return _best(HandCategory.HIGH_CARD, sorted_cards, ranks)

    return _best(category, _sort_by_count(sorted_cards, rank_counts), grouped)


def _classify_by_multiplicity(cards: List[Card]) -> BestHand:
    """Classify 2-4 cards, where only pairs, trips and quads can be made."""
    sorted_cards = sorted(cards, key=lambda c: c.rank, reverse=True)
    rank_counts = Counter(c.rank for c in sorted_cards)
    counts = sorted(rank_counts.values(), reverse=True)

    if counts[0] == 4:
        category = HandCategory.FOUR_OF_A_KIND
    elif counts[0] == 3:
        category = HandCategory.THREE_OF_A_KIND
    elif counts[:2] == [2, 2]:
        category = HandCategory.TWO_PAIRS
    elif counts[0] == 2:
        category = HandCategory.ONE_PAIR
    else:
        category = HandCategory.HIGH_CARD

    return _best(category, _sort_by_count(sorted_cards, rank_counts), _group_ranks(rank_counts))


def _best(category: HandCategory, cards: List[Card], tie_break: Sequence[Rank]) -> BestHand:
    return BestHand(
        category=category,
        cards=tuple(cards),
        strength=(int(category),) + tuple(int(r) for r in tie_break),
    )


def _straight_high(ranks: List[Rank]) -> Optional[Rank]:
    """High card of the straight formed by 5 ranks, or None."""
    unique_ranks = sorted(set(ranks), reverse=True)
    if len(unique_ranks) != 5:
        return None

    if unique_ranks[0] - unique_ranks[4] == 4:
        return unique_ranks[0]

    if unique_ranks == [Rank.ACE, Rank.FIVE, Rank.FOUR, Rank.THREE, Rank.TWO]:
        return Rank.FIVE

    return None


def _group_ranks(rank_counts: Counter) -> List[Rank]:
    """Distinct ranks ordered by count, then rank, both descending."""
    return sorted(rank_counts, key=lambda r: (rank_counts[r], r), reverse=True)


def _sort_by_count(cards: List[Card], rank_counts: Counter) -> List[Card]:
    """Sort cards by count (descending), then by rank (descending)."""
    return sorted(cards, key=lambda c: (rank_counts[c.rank], c.rank), reverse=True)


def _reorder_wheel(cards: List[Card]) -> List[Card]:
    """Reorder wheel straight so Ace is last (5-4-3-2-A)."""
    ace = [c for c in cards if c.rank == Rank.ACE][0]
    others = sorted([c for c in cards if c.rank != Rank.ACE],
                    key=lambda c: c.rank, reverse=True)
    return others + [ace]

"""
Tests for the Card class and card parsing.
"""

import copy
import dataclasses
import pickle

import pytest
from deepthought.core.card import Card, Rank, Suit, parse_cards
from deepthought.core.rules import Phase
from deepthought.core.table import TableSnapshot


class TestCard:
    """Tests for Card class."""

    def test_card_creation(self):
        """Test creating a card from Rank and Suit."""
        card = Card(Rank.ACE, Suit.SPADES)
        assert card.rank == Rank.ACE
        assert card.suit == Suit.SPADES

    def test_card_from_string(self):
        """Test creating cards from string notation."""
        # Standard notation
        card1 = Card.from_string("As")
        assert card1.rank == Rank.ACE
        assert card1.suit == Suit.SPADES

        # With symbol
        card2 = Card.from_string("K♥")
        assert card2.rank == Rank.KING
        assert card2.suit == Suit.HEARTS

        # Ten, both spellings
        assert Card.from_string("Td") == Card(Rank.TEN, Suit.DIAMONDS)
        assert Card.from_string("10d") == Card(Rank.TEN, Suit.DIAMONDS)

    def test_card_from_string_lowercase_rank(self):
        """Test that rank letters are case-insensitive."""
        assert Card.from_string("qc") == Card(Rank.QUEEN, Suit.CLUBS)

    @pytest.mark.parametrize("text", ["", "A", "Xs", "Az", "11h"])
    def test_card_from_invalid_string(self, text):
        """Test that malformed card strings are rejected."""
        with pytest.raises(ValueError):
            Card.from_string(text)

    def test_card_from_int(self):
        """Test creating cards from integer."""
        # First card (2 of clubs)
        card1 = Card.from_int(0)
        assert card1.rank == Rank.TWO
        assert card1.suit == Suit.CLUBS

        # Last card (Ace of spades)
        card2 = Card.from_int(51)
        assert card2.rank == Rank.ACE
        assert card2.suit == Suit.SPADES

    def test_card_from_int_out_of_range(self):
        """Test that integers outside 0-51 are rejected."""
        with pytest.raises(ValueError):
            Card.from_int(52)

    def test_card_to_int(self):
        """Test the rank * 4 + suit encoding."""
        card = Card(Rank.ACE, Suit.SPADES)
        assert card.to_int() == 51

        card2 = Card(Rank.TWO, Suit.CLUBS)
        assert card2.to_int() == 0

    def test_card_equality(self):
        """Test that equal cards compare and hash alike."""
        card1 = Card(Rank.ACE, Suit.SPADES)
        card2 = Card(Rank.ACE, Suit.SPADES)
        card3 = Card(Rank.KING, Suit.SPADES)

        assert card1 == card2
        assert card1 != card3

    def test_card_comparison(self):
        """Test card comparison (by rank)."""
        ace = Card(Rank.ACE, Suit.SPADES)
        king = Card(Rank.KING, Suit.HEARTS)
        two = Card(Rank.TWO, Suit.CLUBS)

        assert two < king < ace

    def test_card_str(self):
        """Test the symbol string form."""
        card = Card(Rank.ACE, Suit.SPADES)
        assert str(card) == "A♠"
        assert repr(card) == "Card(As)"
        assert card.short_str == "As"
        assert card.rank_char == "A"

    def test_card_is_immutable(self):
        """Test that attributes cannot be reassigned."""
        card = Card(Rank.ACE, Suit.SPADES)
        with pytest.raises(AttributeError):
            card.rank = Rank.KING

    def test_card_hash(self):
        """Test card hashing (for use in sets/dicts)."""
        card1 = Card(Rank.ACE, Suit.SPADES)
        card2 = Card(Rank.ACE, Suit.SPADES)

        card_set = {card1}
        assert card2 in card_set


class TestParseCards:
    """Tests for parse_cards function."""

    def test_parse_space_separated(self):
        """Test parsing a space-separated string."""
        cards = parse_cards("As Kh Qd")
        assert len(cards) == 3
        assert cards[0].rank == Rank.ACE
        assert cards[1].rank == Rank.KING
        assert cards[2].rank == Rank.QUEEN

    def test_parse_no_separator(self):
        """Test parsing packed two-character cards."""
        cards = parse_cards("AsKhQd")
        assert len(cards) == 3

    def test_parse_with_symbols(self):
        """Test parsing suit symbols."""
        cards = parse_cards("A♠ K♥ Q♦")
        assert len(cards) == 3
        assert cards[0] == Card(Rank.ACE, Suit.SPADES)

    def test_parse_sequence(self):
        """Test parsing a list of card strings."""
        assert parse_cards(["As", "Kh"]) == [Card(Rank.ACE, Suit.SPADES), Card(Rank.KING, Suit.HEARTS)]

    def test_parse_empty(self):
        """Test that an empty string gives no cards."""
        assert parse_cards("") == []

    def test_parse_odd_length(self):
        """Test that a packed string of odd length is rejected."""
        with pytest.raises(ValueError):
            parse_cards("AsK")


class TestCardCopying:
    """Tests for copying and pickling cards."""

    def test_copy(self):
        """Test that shallow and deep copies equal the original."""
        card = Card.from_string("As")
        assert copy.copy(card) == card
        assert copy.deepcopy(card) == card

    def test_copy_is_still_immutable(self):
        """Test that a copied card rejects attribute assignment."""
        card = copy.deepcopy(Card.from_string("Td"))
        with pytest.raises(AttributeError):
            card._rank = Rank.ACE

    def test_pickle(self):
        """Test that a card survives a pickle round trip."""
        card = Card.from_string("Qh")
        restored = pickle.loads(pickle.dumps(card))
        assert restored == card
        assert restored.rank == Rank.QUEEN
        assert restored.suit == Suit.HEARTS

    def test_snapshot_as_dict(self):
        """Test that dataclasses.asdict copies the cards inside a snapshot."""
        snapshot = TableSnapshot(
            my_name="Deep_Thought",
            hole_cards=tuple(parse_cards("As Kd")),
            community_cards=tuple(parse_cards("2c 9h Kh")),
            phase=Phase.FLOP,
            number_of_players=3,
        )
        data = dataclasses.asdict(snapshot)
        assert data["hole_cards"] == tuple(parse_cards("As Kd"))
        assert data["phase"] == Phase.FLOP

    def test_snapshot_pickle(self):
        """Test that a whole snapshot survives a pickle round trip."""
        snapshot = TableSnapshot(
            my_name="Deep_Thought",
            hole_cards=tuple(parse_cards("7s 7d")),
            community_cards=(),
            phase=Phase.PRE_FLOP,
            number_of_players=6,
        )
        assert pickle.loads(pickle.dumps(snapshot)) == snapshot

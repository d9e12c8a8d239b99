"""Tests for card value types."""

import pytest
from freecell.model.card import Card, Color, Rank, Suit


def test_card_immutability() -> None:
    """Test Card is immutable."""
    card = Card(rank=Rank.ACE, suit=Suit.HEARTS)

    with pytest.raises(AttributeError):
        card.rank = Rank.KING  # type: ignore


def test_cards_equal_by_value() -> None:
    assert Card(Rank.TEN, Suit.CLUBS) == Card(Rank.TEN, Suit.CLUBS)
    assert len({Card(Rank.TEN, Suit.CLUBS), Card(Rank.TEN, Suit.CLUBS)}) == 1


@pytest.mark.parametrize("suit,color", [
    (Suit.HEARTS, Color.RED),
    (Suit.DIAMONDS, Color.RED),
    (Suit.CLUBS, Color.BLACK),
    (Suit.SPADES, Color.BLACK),
])
def test_suit_color(suit: Suit, color: Color) -> None:
    assert suit.color is color
    assert Card(Rank.FIVE, suit).color is color


def test_rank_ordering() -> None:
    assert Rank.ACE < Rank.TWO < Rank.TEN < Rank.KING
    assert len(Rank) == 13


def test_rank_next_and_previous() -> None:
    assert Rank.ACE.next is Rank.TWO
    assert Rank.QUEEN.next is Rank.KING
    assert Rank.KING.next is None
    assert Rank.TWO.previous is Rank.ACE
    assert Rank.ACE.previous is None


def test_adjacency_helpers() -> None:
    black_eight = Card(Rank.EIGHT, Suit.SPADES)
    red_seven = Card(Rank.SEVEN, Suit.HEARTS)
    black_seven = Card(Rank.SEVEN, Suit.CLUBS)

    assert red_seven.is_one_below(black_eight)
    assert not black_eight.is_one_below(red_seven)
    assert red_seven.opposite_color(black_eight)
    assert not black_seven.opposite_color(black_eight)


def test_str_uses_rank_symbol_and_suit_letter() -> None:
    assert str(Card(Rank.TEN, Suit.HEARTS)) == "10H"
    assert str(Card(Rank.QUEEN, Suit.SPADES)) == "QS"


class TestParse:
    """Tests for Card.parse."""

    def test_parses_face_and_number_cards(self):
        assert Card.parse("10H") == Card(Rank.TEN, Suit.HEARTS)
        assert Card.parse("qs") == Card(Rank.QUEEN, Suit.SPADES)
        assert Card.parse(" AD ") == Card(Rank.ACE, Suit.DIAMONDS)

    @pytest.mark.parametrize("text", ["", "A", "1H", "AX", "11C", "KK"])
    def test_rejects_bad_text(self, text):
        with pytest.raises(ValueError):
            Card.parse(text)

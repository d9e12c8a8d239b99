"""Playing card value types."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Optional


class Color(Enum):
    """Card colors."""

    RED = "red"
    BLACK = "black"


class Suit(Enum):
    """Playing card suits."""

    HEARTS = "H"
    DIAMONDS = "D"
    CLUBS = "C"
    SPADES = "S"

    @property
    def color(self) -> Color:
        if self in (Suit.HEARTS, Suit.DIAMONDS):
            return Color.RED
        return Color.BLACK

    @property
    def symbol(self) -> str:
        return SUIT_SYMBOLS[self]


SUIT_SYMBOLS = {
    Suit.HEARTS: "♥",
    Suit.DIAMONDS: "♦",
    Suit.CLUBS: "♣",
    Suit.SPADES: "♠",
}


class Rank(IntEnum):
    """Playing card ranks, Ace low."""

    ACE = 1
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13

    @property
    def next(self) -> Optional["Rank"]:
        """Rank one above, or None for King."""
        if self is Rank.KING:
            return None
        return Rank(self.value + 1)

    @property
    def previous(self) -> Optional["Rank"]:
        """Rank one below, or None for Ace."""
        if self is Rank.ACE:
            return None
        return Rank(self.value - 1)

    @property
    def symbol(self) -> str:
        return RANK_SYMBOLS.get(self, str(self.value))

    @classmethod
    def from_symbol(cls, text: str) -> "Rank":
        for rank in cls:
            if rank.symbol == text.upper():
                return rank
        raise ValueError(f"Unknown rank symbol: {text!r}")


RANK_SYMBOLS = {
    Rank.ACE: "A",
    Rank.JACK: "J",
    Rank.QUEEN: "Q",
    Rank.KING: "K",
}


@dataclass(frozen=True)
class Card:
    """Immutable playing card."""

    rank: Rank
    suit: Suit

    def __str__(self) -> str:
        return f"{self.rank.symbol}{self.suit.value}"

    @property
    def color(self) -> Color:
        return self.suit.color

    def is_one_below(self, other: Card) -> bool:
        """True if this card's rank sits directly under ``other``'s."""
        return self.rank.next is other.rank

    def opposite_color(self, other: Card) -> bool:
        return self.color is not other.color

    @classmethod
    def parse(cls, text: str) -> Card:
        """Build a card from text such as ``"10H"`` or ``"qs"``."""
        text = text.strip()
        if len(text) < 2:
            raise ValueError(f"Invalid card: {text!r}")
        try:
            suit = Suit(text[-1].upper())
        except ValueError:
            raise ValueError(f"Unknown suit in card: {text!r}") from None
        return cls(rank=Rank.from_symbol(text[:-1]), suit=suit)

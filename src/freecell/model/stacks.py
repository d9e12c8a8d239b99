"""Card stacks: tableau piles, freecells and foundations.

All three share one contract. ``push`` is atomic: it either places the card
on top and returns None, or leaves the stack untouched and hands the card
back to the caller.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List, Optional

from freecell.model.card import Card, Rank, Suit


class EmptyPopError(IndexError):
    """Raised when popping a stack that holds no cards."""


class Stack(ABC):
    """Base class for every place a card can sit."""

    @abstractmethod
    def legal_push(self, card: Card) -> bool:
        """Check whether ``card`` may be placed on top of this stack."""
        pass

    @abstractmethod
    def top(self) -> Optional[Card]:
        """Top card, or None when empty."""
        pass

    @abstractmethod
    def cards(self) -> tuple[Card, ...]:
        """All cards held, bottom to top."""
        pass

    @abstractmethod
    def _place(self, card: Card) -> None:
        pass

    @abstractmethod
    def _remove(self) -> Card:
        pass

    def push(self, card: Card) -> Optional[Card]:
        """Place ``card`` on top.

        Returns:
            None if the card was accepted, otherwise the same card.
        """
        if not self.legal_push(card):
            return card
        self._place(card)
        return None

    def pop(self) -> Card:
        """Remove and return the top card.

        Raises:
            EmptyPopError: If the stack is empty
        """
        if self.top() is None:
            raise EmptyPopError(f"Cannot pop from empty {type(self).__name__}")
        return self._remove()

    def __len__(self) -> int:
        return len(self.cards())

    def __repr__(self) -> str:
        shown = " ".join(str(c) for c in self.cards())
        return f"{type(self).__name__}([{shown}])"


class TableauPile(Stack):
    """Column of cards built down in alternating colors."""

    def __init__(self, cards: Optional[List[Card]] = None) -> None:
        self._cards: List[Card] = list(cards or [])

    def deal(self, cards: List[Card]) -> None:
        """Lay dealt cards on the pile without applying the build rule."""
        self._cards.extend(cards)

    def legal_push(self, card: Card) -> bool:
        top = self.top()
        if top is None:
            return True
        return card.is_one_below(top) and card.opposite_color(top)

    def top(self) -> Optional[Card]:
        return self._cards[-1] if self._cards else None

    def cards(self) -> tuple[Card, ...]:
        return tuple(self._cards)

    def _place(self, card: Card) -> None:
        self._cards.append(card)

    def _remove(self) -> Card:
        return self._cards.pop()


class Freecell(Stack):
    """Single-card holding slot."""

    def __init__(self, card: Optional[Card] = None) -> None:
        self._card = card

    def legal_push(self, card: Card) -> bool:
        return self._card is None

    def top(self) -> Optional[Card]:
        return self._card

    def cards(self) -> tuple[Card, ...]:
        return () if self._card is None else (self._card,)

    def _place(self, card: Card) -> None:
        self._card = card

    def _remove(self) -> Card:
        card = self._card
        assert card is not None
        self._card = None
        return card


class Foundation(Stack):
    """Ascending run of one suit, stored as a count of cards placed.

    A foundation holding ``count`` cards contains Ace..Rank(count) of its
    suit. Popping lowers the count by one and returns the departing card.
    """

    def __init__(self, suit: Suit, count: int = 0) -> None:
        if not 0 <= count <= len(Rank):
            raise ValueError(f"Foundation count must be 0-{len(Rank)}, got {count}")
        self.suit = suit
        self.count = count

    @property
    def rank(self) -> Optional[Rank]:
        """Highest rank placed so far."""
        return Rank(self.count) if self.count else None

    def legal_push(self, card: Card) -> bool:
        if card.suit is not self.suit:
            return False
        return card.rank == self.count + 1

    def top(self) -> Optional[Card]:
        rank = self.rank
        return None if rank is None else Card(rank=rank, suit=self.suit)

    def cards(self) -> tuple[Card, ...]:
        return tuple(Card(rank=Rank(v), suit=self.suit) for v in range(1, self.count + 1))

    def _place(self, card: Card) -> None:
        self.count += 1

    def _remove(self) -> Card:
        card = self.top()
        assert card is not None
        self.count -= 1
        return card

    def __len__(self) -> int:
        return self.count

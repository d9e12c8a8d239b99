"""Deck construction and shuffling."""

import random
from typing import List, Optional

from freecell.model.card import Card, Rank, Suit

DECK_SIZE = 52


def new_deck() -> List[Card]:
    """Return a sorted 52-card deck, suit-major with Ace..King in each suit."""
    return [Card(rank=rank, suit=suit) for suit in Suit for rank in Rank]


def shuffle(deck: List[Card], rng: Optional[random.Random] = None) -> None:
    """Shuffle the deck in place.

    ``rng`` is the only source of randomness used while setting up a game;
    pass a seeded ``random.Random`` for a reproducible order.
    """
    if rng is None:
        rng = random.Random()
    rng.shuffle(deck)


def shuffled_deck(seed: Optional[int] = None) -> List[Card]:
    """Create a new deck and shuffle it with an optionally seeded RNG."""
    deck = new_deck()
    shuffle(deck, random.Random(seed))
    return deck

"""Dealing a new game."""

import logging
import random
from typing import List, Optional, Sequence

from freecell.model.card import Card
from freecell.model.deck import new_deck, shuffle
from freecell.model.game import DEFAULT_TABLEAU_COUNT, Game

logger = logging.getLogger(__name__)


def deal(deck: Sequence[Card], tableau_count: int = DEFAULT_TABLEAU_COUNT) -> Game:
    """Deal ``deck`` round-robin into the tableau of an empty game.

    Card ``i`` lands on pile ``i % tableau_count``; freecells and
    foundations start empty.
    """
    game = Game(tableau_count=tableau_count)
    columns: List[List[Card]] = [[] for _ in range(tableau_count)]
    for i, card in enumerate(deck):
        columns[i % tableau_count].append(card)
    for pile, cards in zip(game.piles, columns):
        pile.deal(cards)
    return game


def new_game(
    rng: Optional[random.Random] = None,
    tableau_count: int = DEFAULT_TABLEAU_COUNT,
) -> Game:
    """Shuffle a fresh deck and deal it."""
    deck = new_deck()
    shuffle(deck, rng)
    game = deal(deck, tableau_count=tableau_count)
    logger.debug(f"Dealt {len(deck)} cards into {tableau_count} piles")
    return game

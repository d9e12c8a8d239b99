"""FreeCell game model: cards, stacks, moves and dealing."""

from freecell.model.card import Card, Color, Rank, Suit
from freecell.model.deck import new_deck, shuffle, shuffled_deck
from freecell.model.stacks import EmptyPopError, Foundation, Freecell, Stack, TableauPile
from freecell.model.address import Address, Zone
from freecell.model.game import Board, Game, MoveError, MoveResult
from freecell.model.dealer import deal, new_game

__all__ = [
    "Card",
    "Color",
    "Rank",
    "Suit",
    "new_deck",
    "shuffle",
    "shuffled_deck",
    "EmptyPopError",
    "Foundation",
    "Freecell",
    "Stack",
    "TableauPile",
    "Address",
    "Zone",
    "Board",
    "Game",
    "MoveError",
    "MoveResult",
    "deal",
    "new_game",
]

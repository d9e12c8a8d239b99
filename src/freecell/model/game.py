"""Game state and the move transaction."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional, Sequence

from freecell.model.address import Address, Zone
from freecell.model.card import Card, Suit
from freecell.model.stacks import Foundation, Freecell, Stack, TableauPile

logger = logging.getLogger(__name__)

DEFAULT_TABLEAU_COUNT = 8
DEFAULT_FREECELL_COUNT = 4


class MoveError(Enum):
    """Reasons a move is rejected."""

    INVALID_ADDRESS = "invalid_address"
    EMPTY_SOURCE = "empty_source"
    ILLEGAL_MOVE = "illegal_move"


@dataclass(frozen=True)
class MoveResult:
    """Outcome of ``Game.move``.

    ``card`` is the card that moved, or on ILLEGAL_MOVE the card that was
    refused (it is still on its source stack).
    """

    source: Optional[Address]
    destination: Optional[Address]
    error: Optional[MoveError] = None
    card: Optional[Card] = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass(frozen=True)
class Board:
    """Immutable snapshot of every stack, for rendering."""

    tableau: tuple[tuple[Card, ...], ...]
    freecells: tuple[Optional[Card], ...]
    foundations: tuple[tuple[Suit, Optional[Card]], ...]

    def foundation(self, suit: Suit) -> Optional[Card]:
        return dict(self.foundations)[suit]


class Game:
    """A FreeCell playing field.

    Owns the tableau piles, freecells and one foundation per suit. The only
    mutating operation is ``move``.
    """

    def __init__(
        self,
        tableau_count: int = DEFAULT_TABLEAU_COUNT,
        freecell_count: int = DEFAULT_FREECELL_COUNT,
    ) -> None:
        if tableau_count < 1:
            raise ValueError(f"tableau_count must be at least 1, got {tableau_count}")
        if freecell_count < 0:
            raise ValueError(f"freecell_count must not be negative, got {freecell_count}")

        self.piles: List[TableauPile] = [TableauPile() for _ in range(tableau_count)]
        self.cells: List[Freecell] = [Freecell() for _ in range(freecell_count)]
        self.foundations: List[Foundation] = [Foundation(suit) for suit in Suit]
        self.move_count = 0

        self._stacks: Dict[Address, Stack] = {}
        self._register(Zone.FOUNDATION, self.foundations)
        self._register(Zone.FREECELL, self.cells)
        self._register(Zone.TABLEAU, self.piles)

        expected = tableau_count + freecell_count + len(self.foundations)
        if len(self._stacks) != expected:
            raise RuntimeError(
                f"Addressing table has {len(self._stacks)} entries, expected {expected}"
            )

    def _register(self, zone: Zone, stacks: Sequence[Stack]) -> None:
        for index, stack in enumerate(stacks):
            address = Address(zone, index)
            if address in self._stacks:
                raise RuntimeError(f"Duplicate stack address {address}")
            self._stacks[address] = stack

    @classmethod
    def new(
        cls,
        rng: Optional[random.Random] = None,
        tableau_count: int = DEFAULT_TABLEAU_COUNT,
    ) -> Game:
        """Start a session with a freshly shuffled deal."""
        from freecell.model.dealer import new_game

        return new_game(rng=rng, tableau_count=tableau_count)

    @property
    def tableau_count(self) -> int:
        return len(self.piles)

    @property
    def freecell_count(self) -> int:
        return len(self.cells)

    def addresses(self) -> List[Address]:
        return list(self._stacks)

    def resolve(self, address: Optional[Address]) -> Optional[Stack]:
        """Look up the stack at ``address``; None if nothing lives there."""
        if not isinstance(address, Address):
            return None
        return self._stacks.get(address)

    def move(self, source: Optional[Address], destination: Optional[Address]) -> MoveResult:
        """Move the top card of ``source`` onto ``destination``.

        The destination is checked before the source is touched, so a
        rejected move leaves every stack exactly as it was.
        """
        src = self.resolve(source)
        dst = self.resolve(destination)
        if src is None or dst is None:
            logger.debug(f"Rejected move {source} -> {destination}: invalid address")
            return MoveResult(source, destination, error=MoveError.INVALID_ADDRESS)

        card = src.top()
        if card is None:
            logger.debug(f"Rejected move {source} -> {destination}: source empty")
            return MoveResult(source, destination, error=MoveError.EMPTY_SOURCE)

        if not dst.legal_push(card):
            logger.debug(f"Rejected move {card} {source} -> {destination}: illegal")
            return MoveResult(source, destination, error=MoveError.ILLEGAL_MOVE, card=card)

        moved = src.pop()
        if dst.push(moved) is not None:
            raise RuntimeError(f"{destination} refused {moved} after accepting it")

        self.move_count += 1
        logger.debug(f"Moved {moved} {source} -> {destination}")
        return MoveResult(source, destination, card=moved)

    def tableau(self, index: int) -> tuple[Card, ...]:
        return self.piles[index].cards()

    def freecell(self, index: int) -> Optional[Card]:
        return self.cells[index].top()

    def foundation(self, suit: Suit) -> Optional[Card]:
        return self.foundations[list(Suit).index(suit)].top()

    def all_cards(self) -> List[Card]:
        """Every card on the board, in no particular order."""
        cards: List[Card] = []
        for stack in self._stacks.values():
            cards.extend(stack.cards())
        return cards

    def snapshot(self) -> Board:
        return Board(
            tableau=tuple(pile.cards() for pile in self.piles),
            freecells=tuple(cell.top() for cell in self.cells),
            foundations=tuple((f.suit, f.top()) for f in self.foundations),
        )

"""Terminal display for cards and the board."""

from __future__ import annotations

from itertools import zip_longest
from typing import Optional

from freecell.model.card import Card, Color
from freecell.model.game import Board, MoveError, MoveResult
from freecell.model.address import Address, Zone
from freecell.play.keymap import KeyMap

RED = "\x1b[31m"
RESET = "\x1b[0m"
EMPTY_SLOT = "[  ]"
CELL_WIDTH = 5

ERROR_MESSAGES = {
    MoveError.INVALID_ADDRESS: "No stack at that key.",
    MoveError.EMPTY_SOURCE: "Nothing to move from there.",
    MoveError.ILLEGAL_MOVE: "{card} can't go there.",
}


def format_card(card: Card, color: bool = True) -> str:
    """Rank padded to two columns plus the suit symbol, red suits in red."""
    text = f"{card.rank.symbol:>2}{card.suit.symbol}"
    if color and card.color is Color.RED:
        return f"{RED}{text}{RESET}"
    return text


def format_result(result: MoveResult, color: bool = True) -> str:
    """Describe a move outcome for the player."""
    if result.ok:
        assert result.card is not None
        return f"Moved {format_card(result.card, color).strip()}."
    assert result.error is not None
    card = format_card(result.card, color).strip() if result.card else ""
    return ERROR_MESSAGES[result.error].format(card=card)


class BoardRenderer:
    """Renders a board snapshot as plain text."""

    def __init__(self, keymap: Optional[KeyMap] = None, color: bool = True) -> None:
        self.keymap = keymap or KeyMap()
        self.color = color

    def _slot(self, card: Optional[Card]) -> str:
        if card is None:
            return f"{EMPTY_SLOT:<{CELL_WIDTH}}"
        # Escape codes take no columns, so pad the visible text only.
        text = format_card(card, self.color)
        return text + " " * (CELL_WIDTH - 3)

    def _label(self, address: Address) -> str:
        key = self.keymap.key_for(address) or " "
        return f"{'(' + key + ')':<{CELL_WIDTH}}"

    def render(self, board: Board) -> str:
        lines: list[str] = []

        cell_row = "".join(self._slot(card) for card in board.freecells)
        foundation_row = "".join(self._slot(card) for _, card in board.foundations)
        lines.append(f"{cell_row}  {foundation_row}")

        cell_keys = "".join(
            self._label(Address(Zone.FREECELL, i)) for i in range(len(board.freecells))
        )
        foundation_keys = "".join(
            self._label(Address(Zone.FOUNDATION, i)) for i in range(len(board.foundations))
        )
        lines.append(f"{cell_keys}  {foundation_keys}")
        lines.append("")

        for row in zip_longest(*board.tableau):
            lines.append(
                "".join(
                    self._slot(card) if card else " " * CELL_WIDTH for card in row
                ).rstrip()
            )

        lines.append(
            "".join(
                self._label(Address(Zone.TABLEAU, i)) for i in range(len(board.tableau))
            ).rstrip()
        )
        return "\n".join(lines)

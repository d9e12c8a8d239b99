"""Player input handling."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional

from freecell.model.address import Address
from freecell.play.keymap import KeyMap

HELP_TEXT = """\
Type two keys and Enter to move the top card from one stack to another,
e.g. '3a' moves from tableau pile 3 to the first freecell.
  a s d f   freecells
  h j k l   foundations (hearts, diamonds, clubs, spades)
  1-{last}       tableau piles
  n  new game    ?  help    q  quit"""


@dataclass
class Command:
    """Result of reading one line of player input."""

    source: Optional[Address] = None
    destination: Optional[Address] = None
    quit: bool = False
    new_game: bool = False
    help: bool = False
    error: Optional[str] = None
    keys: str = ""

    @property
    def is_move(self) -> bool:
        return self.error is None and len(self.keys) == 2


class PlayerInput:
    """Reads commands from the player."""

    def __init__(self, keymap: Optional[KeyMap] = None, read_fn: Callable[[str], str] = input) -> None:
        self.keymap = keymap or KeyMap()
        self.read_fn = read_fn

    def parse(self, raw: str) -> Command:
        """Turn one line of text into a command."""
        keys = "".join(raw.split()).lower()

        if keys in ("q", "quit", "exit"):
            return Command(quit=True)
        if keys in ("n", "new"):
            return Command(new_game=True)
        if keys in ("?", "help"):
            return Command(help=True)
        if len(keys) != 2:
            return Command(error=f"Invalid input '{raw.strip()}'. Enter two keys or '?' for help.")

        # Unbound keys pass through as None and are reported by the game.
        return Command(
            source=self.keymap.translate(keys[0]),
            destination=self.keymap.translate(keys[1]),
            keys=keys,
        )

    def read_command(self, prompt: str = "> ") -> Command:
        try:
            raw = self.read_fn(prompt)
        except (EOFError, KeyboardInterrupt):
            return Command(quit=True)
        return self.parse(raw)

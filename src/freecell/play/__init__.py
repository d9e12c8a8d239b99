"""Terminal play on top of the game model."""

from freecell.play.display import BoardRenderer, format_card, format_result
from freecell.play.keymap import KeyMap
from freecell.play.input import Command, PlayerInput
from freecell.play.session import PlaySession, SessionConfig

__all__ = [
    "BoardRenderer",
    "format_card",
    "format_result",
    "KeyMap",
    "Command",
    "PlayerInput",
    "PlaySession",
    "SessionConfig",
]

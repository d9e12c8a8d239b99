"""Interactive play session."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Callable, Optional

from freecell.model.game import DEFAULT_TABLEAU_COUNT, Game, MoveResult
from freecell.model.dealer import new_game
from freecell.play.display import BoardRenderer, format_result
from freecell.play.input import HELP_TEXT, PlayerInput
from freecell.play.keymap import KeyMap

logger = logging.getLogger(__name__)


@dataclass
class SessionConfig:
    """Configuration for a play session."""

    seed: Optional[int] = None
    tableau_count: int = DEFAULT_TABLEAU_COUNT
    color: bool = True
    show_help: bool = True

    def __post_init__(self):
        """Generate seed if not provided."""
        if self.seed is None:
            self.seed = random.randint(0, 2**32 - 1)


class PlaySession:
    """Runs games until the player quits."""

    def __init__(self, config: SessionConfig, player_input: Optional[PlayerInput] = None):
        self.config = config
        self.seed = config.seed
        self.rng = random.Random(self.seed)

        self.keymap = KeyMap.for_tableau(config.tableau_count)
        self.renderer = BoardRenderer(self.keymap, color=config.color)
        self.player_input = player_input or PlayerInput(self.keymap)

        self.move_history: list[dict] = []
        self.games_played = 0
        self.game: Optional[Game] = None

    def _record_move(self, result: MoveResult) -> None:
        """Record an applied move in history."""
        self.move_history.append({
            "game": self.games_played,
            "card": str(result.card),
            "source": str(result.source),
            "destination": str(result.destination),
        })

    def new_game(self) -> Game:
        self.game = new_game(rng=self.rng, tableau_count=self.config.tableau_count)
        self.games_played += 1
        logger.info(f"Started game {self.games_played} (seed {self.seed})")
        return self.game

    def help_text(self) -> str:
        return HELP_TEXT.format(last=self.config.tableau_count)

    def run(self, output_fn: Callable[[str], None] = print) -> None:
        """Run the session loop.

        Args:
            output_fn: Function to output text (default: print)
        """
        game = self.new_game()
        if self.config.show_help:
            output_fn(self.help_text())
            output_fn(f"Seed: {self.seed} (use --seed {self.seed} to replay)")
            output_fn("")

        while True:
            output_fn(self.renderer.render(game.snapshot()))
            command = self.player_input.read_command()

            if command.quit:
                break
            if command.new_game:
                game = self.new_game()
                continue
            if command.help:
                output_fn(self.help_text())
                continue
            if command.error:
                output_fn(command.error)
                continue

            result = game.move(command.source, command.destination)
            if result.ok:
                self._record_move(result)
            output_fn(format_result(result, color=self.config.color))

        logger.info(f"Session ended after {len(self.move_history)} moves")

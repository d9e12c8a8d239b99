"""CLI command that prints a freshly shuffled deck."""

from __future__ import annotations

import click

from freecell.model.deck import shuffled_deck
from freecell.play.display import format_card


@click.command()
@click.option("--seed", type=int, default=None, help="Random seed for reproducibility")
@click.option("--color/--no-color", default=True, help="Show red suits in red")
def main(seed: int | None, color: bool):
    """Shuffle a 52-card deck and print it, one card per line."""
    for card in shuffled_deck(seed):
        click.echo(format_card(card, color=color))


if __name__ == "__main__":
    main()

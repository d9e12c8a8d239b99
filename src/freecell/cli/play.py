"""CLI command for playing FreeCell in the terminal."""

from __future__ import annotations

import logging

import click

from freecell.play.session import PlaySession, SessionConfig

logger = logging.getLogger(__name__)


@click.command()
@click.option("--seed", type=int, default=None, help="Random seed for reproducible deals")
@click.option(
    "--tableau-count",
    type=click.IntRange(1, 9),
    default=8,
    show_default=True,
    help="Number of tableau piles",
)
@click.option("--color/--no-color", default=True, help="Show red suits in red")
@click.option("--show-help/--no-help", default=True, help="Display key help at start")
@click.option("-v", "--verbose", is_flag=True, help="Verbose logging")
def main(
    seed: int | None,
    tableau_count: int,
    color: bool,
    show_help: bool,
    verbose: bool,
):
    """Play FreeCell in the terminal."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG)
    else:
        logging.basicConfig(level=logging.INFO)

    config = SessionConfig(
        seed=seed,
        tableau_count=tableau_count,
        color=color,
        show_help=show_help,
    )
    session = PlaySession(config)

    try:
        session.run(output_fn=click.echo)
    except KeyboardInterrupt:
        click.echo("\n\nGame interrupted.")

    click.echo(f"\n{len(session.move_history)} moves played. Thanks for playing!")


if __name__ == "__main__":
    main()

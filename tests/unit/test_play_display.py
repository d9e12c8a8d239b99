"""Tests for display components."""

from freecell.model.address import freecell, tableau
from freecell.model.card import Card
from freecell.model.game import Game, MoveError, MoveResult
from freecell.play.display import BoardRenderer, format_card, format_result
from freecell.play.keymap import KeyMap


def make_card(text: str) -> Card:
    """Helper to create cards."""
    return Card.parse(text)


class TestFormatCard:
    """Tests for format_card."""

    def test_black_card_plain(self):
        assert format_card(make_card("AS")) == " A♠"

    def test_red_card_colored(self):
        assert format_card(make_card("10H")) == "\x1b[31m10♥\x1b[0m"

    def test_color_disabled(self):
        assert format_card(make_card("QD"), color=False) == " Q♦"


class TestFormatResult:
    """Tests for format_result."""

    def test_success(self):
        result = MoveResult(tableau(0), freecell(0), card=make_card("7C"))

        assert format_result(result, color=False) == "Moved 7♣."

    def test_illegal_names_card(self):
        result = MoveResult(
            tableau(0), tableau(1), error=MoveError.ILLEGAL_MOVE, card=make_card("KH"),
        )

        assert "K♥" in format_result(result, color=False)

    def test_empty_source(self):
        result = MoveResult(freecell(0), tableau(1), error=MoveError.EMPTY_SOURCE)

        assert format_result(result) == "Nothing to move from there."


class TestBoardRenderer:
    """Tests for BoardRenderer."""

    def make_game(self) -> Game:
        game = Game()
        game.piles[0].deal([make_card("9C"), make_card("8H")])
        game.piles[2].deal([make_card("AS")])
        return game

    def test_renders_tableau_columns(self):
        renderer = BoardRenderer(color=False)

        output = renderer.render(self.make_game().snapshot())
        lines = output.splitlines()

        assert lines[3] == " 9♣" + " " * 8 + "A♠"
        assert lines[4] == " 8♥"

    def test_renders_key_labels(self):
        output = BoardRenderer(KeyMap(), color=False).render(Game().snapshot())

        assert "(a)" in output and "(h)" in output
        assert output.splitlines()[-1].startswith("(1)  (2)")

    def test_renders_freecells_and_foundations(self):
        game = self.make_game()
        game.move(tableau(2), freecell(1))

        output = BoardRenderer(color=False).render(game.snapshot())

        assert output.splitlines()[0].startswith("[  ]  A♠  [  ]")

    def test_color_output_wraps_red_cards(self):
        output = BoardRenderer(color=True).render(self.make_game().snapshot())

        assert "\x1b[31m 8♥\x1b[0m" in output

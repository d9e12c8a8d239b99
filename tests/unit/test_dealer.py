"""Tests for dealing."""

import random
from collections import Counter

import pytest
from freecell.model.deck import new_deck
from freecell.model.dealer import deal, new_game


def test_deal_round_robin_into_eight_piles() -> None:
    deck = new_deck()
    random.Random(99).shuffle(deck)

    game = deal(deck)

    sizes = [len(game.tableau(i)) for i in range(8)]
    assert sizes == [7, 7, 7, 7, 6, 6, 6, 6]
    assert sum(sizes) == 52
    for i in range(8):
        assert game.tableau(i) == tuple(deck[i::8])


def test_deal_leaves_cells_and_foundations_empty() -> None:
    game = deal(new_deck())

    assert all(game.freecell(i) is None for i in range(4))
    assert all(len(f) == 0 for f in game.foundations)


def test_deal_other_pile_counts() -> None:
    game = deal(new_deck(), tableau_count=10)

    assert [len(game.tableau(i)) for i in range(10)] == [6, 6, 5, 5, 5, 5, 5, 5, 5, 5]


def test_deal_rejects_zero_piles() -> None:
    with pytest.raises(ValueError):
        deal(new_deck(), tableau_count=0)


def test_new_game_is_reproducible_with_seeded_rng() -> None:
    first = new_game(rng=random.Random(5))
    second = new_game(rng=random.Random(5))

    assert first.snapshot() == second.snapshot()


def test_new_game_holds_every_card_once() -> None:
    game = new_game()

    assert Counter(game.all_cards()) == Counter(new_deck())
    assert len(game.all_cards()) == 52

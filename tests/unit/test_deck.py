"""Tests for deck construction and shuffling."""

import random

from freecell.model.card import Card, Rank, Suit
from freecell.model.deck import DECK_SIZE, new_deck, shuffle, shuffled_deck


def test_new_deck_has_every_card_once() -> None:
    deck = new_deck()

    assert len(deck) == DECK_SIZE == 52
    assert len(set(deck)) == 52


def test_new_deck_is_suit_major() -> None:
    deck = new_deck()

    assert deck[0] == Card(Rank.ACE, Suit.HEARTS)
    assert deck[12] == Card(Rank.KING, Suit.HEARTS)
    assert deck[13] == Card(Rank.ACE, Suit.DIAMONDS)
    assert deck[-1] == Card(Rank.KING, Suit.SPADES)


def test_new_deck_order_is_fixed() -> None:
    assert new_deck() == new_deck()


def test_shuffle_is_a_permutation() -> None:
    deck = new_deck()
    shuffle(deck, random.Random(7))

    assert sorted(deck, key=str) == sorted(new_deck(), key=str)
    assert deck != new_deck()


def test_shuffle_with_same_seed_is_reproducible() -> None:
    first = new_deck()
    second = new_deck()
    shuffle(first, random.Random(42))
    shuffle(second, random.Random(42))

    assert first == second


def test_shuffle_without_rng_still_permutes() -> None:
    deck = new_deck()
    shuffle(deck)

    assert set(deck) == set(new_deck())


def test_shuffled_deck_seeded() -> None:
    assert shuffled_deck(3) == shuffled_deck(3)
    assert len(shuffled_deck()) == 52

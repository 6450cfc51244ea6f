"""
Pytest configuration for tests at the root level.

This module contains pytest fixtures for building cards, stacked decks and
games whose deal order is known in advance.
"""

import random
from functools import partial

import pytest

from twentyone.blackjack.blackjack import BlackjackGame
from twentyone.common.card import Card, Rank, Suit
from twentyone.common.deck import Deck
from twentyone.common.io_interface import TestIOInterface

SUITS = list(Suit)


class NoShuffleRandom(random.Random):
    """A random source whose shuffle leaves a stacked deck in place."""

    def shuffle(self, x):
        pass


def cards_from_ranks(*ranks):
    """Build cards from rank numbers, cycling through the suits."""
    return [Card(SUITS[i % len(SUITS)], Rank(rank)) for i, rank in enumerate(ranks)]


@pytest.fixture
def make_cards():
    """Return a helper that turns rank numbers into cards."""
    return cards_from_ranks


@pytest.fixture
def test_io():
    return TestIOInterface()


@pytest.fixture
def stacked_game(test_io):
    """
    Return a helper building a game whose deck deals the given ranks in order.

    The opening deal goes dealer, player, dealer, player, so the first four
    ranks are the dealer's first card, the player's first card and so on.
    The deck holds only the listed cards; dealing past them is an error.
    """

    def build(ranks, actions=()):
        cards = cards_from_ranks(*ranks)
        deck_factory = partial(Deck, list(reversed(cards)))
        test_io.add_player_action(*actions)
        return BlackjackGame(test_io, rng=NoShuffleRandom(), deck_factory=deck_factory)

    return build

"""
This module contains the Deck class, which represents a deck of cards.

>>> deck = Deck()
>>> deck.size
52
>>> deck.deal()
Card(Suit.CLUBS, Rank.KING)
>>> deck.size
51
"""

import logging
import random
from typing import List, Optional

from twentyone.common.card import Card, Rank, Suit

logger = logging.getLogger(__name__)


class EmptyDeckError(Exception):
    """
    Raised when a card is dealt from a deck with no cards left.

    A single deck cannot run out during a two-party round, so this signals a
    broken invariant rather than a game situation to recover from.
    """


class Deck:
    """
    A class representing a deck of cards.

    The deck only ever changes by being shuffled or by having its last card
    dealt, so a card can never be dealt twice from the same deck.
    """

    # Precompute the default deck, suit outer loop, rank inner loop
    _default_deck = [
        Card(suit, rank)
        for suit in [Suit.HEARTS, Suit.DIAMONDS, Suit.SPADES, Suit.CLUBS]
        for rank in Rank
    ]

    def __init__(
        self,
        cards: Optional[List[Card]] = None,
        rng: Optional[random.Random] = None,
    ):
        """
        Initialize a Deck instance.

        :param cards: A list of Card instances to populate the deck (optional).
                      If not provided, a default deck will be constructed.
        :param rng: Random source used by shuffle (optional). Defaults to the
                    process-level ``random`` module, which ``random.seed``
                    reseeds.
        >>> deck = Deck()
        >>> deck.size
        52
        """
        if cards is None:
            self.cards: List[Card] = self._default_deck.copy()
        else:
            self.cards = cards.copy()
        self._rng = rng if rng is not None else random

    def shuffle(self):
        """
        Shuffle the cards in the deck with a uniform random permutation.

        >>> deck = Deck()
        >>> original_order = deck.cards.copy()
        >>> _ = deck.shuffle()
        >>> sorted(deck.cards, key=repr) == sorted(original_order, key=repr)
        True
        """
        self._rng.shuffle(self.cards)
        logger.debug("Shuffled deck of %d cards", len(self.cards))
        return self

    def deal(self) -> Card:
        """
        Remove and return the card on top of the deck (the end of the list).

        :return: A card instance.
        :raises EmptyDeckError: If there are no cards left.
        """
        if not self.cards:
            raise EmptyDeckError("Cannot deal from an empty deck.")
        card = self.cards.pop()
        logger.debug("Dealt %r, %d cards left", card, len(self.cards))
        return card

    @property
    def size(self) -> int:
        """
        Return the number of remaining cards in the deck.

        :return: The size of the deck.
        """
        return len(self.cards)

    def is_empty(self) -> bool:
        """
        Check if the deck is empty.

        :return: True if the deck is empty, False otherwise.
        """
        return len(self.cards) == 0

    def __repr__(self) -> str:
        return f"Deck({[repr(card) for card in self.cards]})"

    def __str__(self) -> str:
        return f"Deck of {len(self.cards)} cards"

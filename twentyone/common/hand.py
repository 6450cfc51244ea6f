"""
This module contains the Hand class, which represents a hand of cards.

A hand only grows: cards are added one at a time and are never taken back
during a round.
"""
from typing import List, Tuple

from twentyone.common.card import Card


class Hand:
    """
    A hand of cards, kept in the order they were received.

    Game-specific hands subclass this to add scoring.
    """

    def __init__(self, cards: List[Card] = None):
        self._cards: List[Card] = list(cards) if cards else []

    @property
    def cards(self) -> Tuple[Card, ...]:
        """Returns the cards in the hand, in the order they were received."""
        return tuple(self._cards)

    def add_card(self, card: Card) -> None:
        """
        Adds a card to the hand.

        Args:
            card: The card to add.
        """
        self._cards.append(card)

    def __len__(self) -> int:
        return len(self._cards)

    def __repr__(self) -> str:
        """
        Returns a string representation of the hand for debugging.

        Returns:
            A string in the form "Hand([Card(...), ...])".
        """
        return f"{self.__class__.__name__}({list(self._cards)!r})"

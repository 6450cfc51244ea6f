"""
Blackjack hand scoring.

`calculate_total` is the scoring algorithm: every ace starts out soft (11)
and is turned hard (1) one at a time while the total is over 21. The result
only depends on which ranks are in the hand, not on their order.
"""

from typing import Iterable, Tuple

from twentyone.blackjack.constants import (
    ACE_ADJUSTMENT,
    BLACKJACK,
    get_blackjack_value,
)
from twentyone.common.card import Card, Rank
from twentyone.common.hand import Hand


def _score(cards: Iterable[Card]) -> Tuple[int, int]:
    """Return the adjusted total and the number of aces still counted as 11."""
    total = 0
    soft_aces = 0
    for card in cards:
        total += get_blackjack_value(card.rank)
        if card.rank == Rank.ACE:
            soft_aces += 1

    while total > BLACKJACK and soft_aces > 0:
        total -= ACE_ADJUSTMENT
        soft_aces -= 1

    return total, soft_aces


def calculate_total(cards: Iterable[Card]) -> int:
    """
    Calculate the blackjack total of a sequence of cards.

    A total above 21 is returned as is; that hand is bust.

    >>> from twentyone.common.card import Suit
    >>> calculate_total([Card(Suit.HEARTS, Rank.ACE), Card(Suit.SPADES, Rank.KING)])
    21
    >>> calculate_total([])
    0
    """
    return _score(cards)[0]


class BlackjackHand(Hand):
    """A hand in the game of Blackjack. Its total is never cached."""

    def value(self) -> int:
        """Calculate the value of the hand with ace handling."""
        return calculate_total(self._cards)

    @property
    def is_soft(self) -> bool:
        """Determine if the hand is soft (contains an ace counted as 11)."""
        return _score(self._cards)[1] > 0

    @property
    def is_busted(self) -> bool:
        return self.value() > BLACKJACK

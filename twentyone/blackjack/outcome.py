"""Defines the Outcome enum for the ways a round of blackjack can end."""
from enum import Enum

from twentyone.blackjack.constants import BLACKJACK


class Outcome(Enum):
    """
    Enum for the result of a round.

    Each member's value is the message announced at the end of the round.
    """

    PLAYER_BUST = "Player busts! Dealer wins."
    DEALER_BUST = "Dealer busts! Player wins."
    PLAYER_WIN = "Player wins!"
    DEALER_WIN = "Dealer wins!"
    TIE = "It's a tie!"

    @property
    def message(self) -> str:
        return self.value

    @property
    def winner(self) -> str:
        """Which side the round went to: "player", "dealer" or "draw"."""
        if self in (Outcome.DEALER_BUST, Outcome.PLAYER_WIN):
            return "player"
        if self in (Outcome.PLAYER_BUST, Outcome.DEALER_WIN):
            return "dealer"
        return "draw"


def resolve_outcome(
    player_total: int, dealer_total: int, bust_limit: int = BLACKJACK
) -> Outcome:
    """
    Decide the round from the final totals.

    A player bust is checked first, so it loses even if the dealer also
    busted.

    >>> resolve_outcome(20, 22)
    <Outcome.DEALER_BUST: 'Dealer busts! Player wins.'>
    >>> resolve_outcome(19, 19)
    <Outcome.TIE: "It's a tie!">
    """
    if player_total > bust_limit:
        return Outcome.PLAYER_BUST
    if dealer_total > bust_limit:
        return Outcome.DEALER_BUST
    if player_total > dealer_total:
        return Outcome.PLAYER_WIN
    if dealer_total > player_total:
        return Outcome.DEALER_WIN
    return Outcome.TIE

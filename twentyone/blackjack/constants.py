"""Blackjack-specific constants and value mappings."""

from twentyone.common.card import Rank

BLACKJACK = 21
DEALER_STAND_TOTAL = 17

# An ace counts 11 until the hand would bust, then drops to 1
SOFT_ACE_VALUE = 11
ACE_ADJUSTMENT = 10

# Base values indexed by Rank.value
_BLACKJACK_VALUE_ARRAY = [
    0,   # unused
    SOFT_ACE_VALUE,  # ACE (1)
    2,   # TWO (2)
    3,   # THREE (3)
    4,   # FOUR (4)
    5,   # FIVE (5)
    6,   # SIX (6)
    7,   # SEVEN (7)
    8,   # EIGHT (8)
    9,   # NINE (9)
    10,  # TEN (10)
    10,  # JACK (11)
    10,  # QUEEN (12)
    10,  # KING (13)
]


def get_blackjack_value(rank: Rank) -> int:
    """Get the base blackjack value for a given rank, counting an ace as 11."""
    return _BLACKJACK_VALUE_ARRAY[rank.value]

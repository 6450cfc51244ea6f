from twentyone.blackjack.constants import BLACKJACK, DEALER_STAND_TOTAL
from twentyone.blackjack.hand import BlackjackHand


class Rules:
    """
    Table rules for a round.

    The defaults are standard Blackjack: a hand over 21 is bust, two cards
    each on the deal and a dealer that stands on any 17, soft or hard.
    """

    def __init__(
        self,
        bust_limit: int = BLACKJACK,
        dealer_stand_total: int = DEALER_STAND_TOTAL,
        initial_cards: int = 2,
    ):
        if bust_limit < 1:
            raise ValueError(f"bust_limit must be positive, got {bust_limit}")
        if not 0 < dealer_stand_total <= bust_limit:
            raise ValueError(
                f"dealer_stand_total must be between 1 and {bust_limit}, "
                f"got {dealer_stand_total}"
            )
        if initial_cards < 1:
            raise ValueError(f"initial_cards must be positive, got {initial_cards}")
        self.bust_limit = bust_limit
        self.dealer_stand_total = dealer_stand_total
        self.initial_cards = initial_cards

    def to_dict(self) -> dict:
        """Convert rules to a dictionary for serialization."""
        return {
            "bust_limit": self.bust_limit,
            "dealer_stand_total": self.dealer_stand_total,
            "initial_cards": self.initial_cards,
        }

    def should_dealer_hit(self, hand: BlackjackHand) -> bool:
        """The dealer draws while below the stand total and never after."""
        return hand.value() < self.dealer_stand_total

    def is_bust(self, hand: BlackjackHand) -> bool:
        return hand.value() > self.bust_limit

    def __repr__(self) -> str:
        return f"Rules({self.to_dict()})"

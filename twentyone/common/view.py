"""
Card views turn a card into text for the presentation layer.

Two interchangeable views are provided; an IO interface picks one when it is
created and uses it for every card it shows:

- `AlphaCardView`: word form, e.g. "Jack of Hearts".
- `GlyphCardView`: symbol form, e.g. "J♥".

Both need nothing but the card's rank and suit.
"""

from abc import ABC, abstractmethod
from typing import Iterable

from twentyone.common.card import Card, Rank, Suit


class CardView(ABC):
    """
    Abstract base class for rendering a card as text.
    """

    @abstractmethod
    def draw(self, card: Card) -> str:
        """Render a single card."""

    def draw_hand(self, cards: Iterable[Card]) -> str:
        """Render several cards, separated by commas."""
        return ", ".join(self.draw(card) for card in cards)

    def __str__(self) -> str:
        return self.__class__.__name__


class AlphaCardView(CardView):
    """
    Renders cards in word form.

    >>> AlphaCardView().draw(Card(Suit.HEARTS, Rank.JACK))
    'Jack of Hearts'
    >>> AlphaCardView().draw(Card(Suit.CLUBS, Rank.SEVEN))
    '7 of Clubs'
    """

    def draw(self, card: Card) -> str:
        if card.rank == Rank.ACE or card.rank.is_face:
            rank = str(card.rank)
        else:
            rank = str(card.rank.value)
        return f"{rank} of {card.suit}"


class GlyphCardView(CardView):
    """
    Renders cards in symbol form.

    >>> GlyphCardView().draw(Card(Suit.HEARTS, Rank.JACK))
    'J♥'
    >>> GlyphCardView().draw(Card(Suit.SPADES, Rank.TEN))
    '10♠'
    """

    SUIT_GLYPHS = {
        Suit.HEARTS: "♥",
        Suit.DIAMONDS: "♦",
        Suit.SPADES: "♠",
        Suit.CLUBS: "♣",
    }

    def draw(self, card: Card) -> str:
        if card.rank == Rank.ACE or card.rank.is_face:
            rank = card.rank.name[0]
        else:
            rank = str(card.rank.value)
        return f"{rank}{self.SUIT_GLYPHS[card.suit]}"


CARD_VIEWS = {
    "alpha": AlphaCardView,
    "glyph": GlyphCardView,
}


def get_card_view(name: str) -> CardView:
    """
    Look up a card view by its command-line name.

    :raises ValueError: If no view has that name.
    """
    try:
        return CARD_VIEWS[name]()
    except KeyError as exc:
        raise ValueError(
            f"Unknown card view {name!r}, expected one of {sorted(CARD_VIEWS)}"
        ) from exc

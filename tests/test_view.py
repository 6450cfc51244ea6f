import pytest

from twentyone.common.card import Card, Rank, Suit
from twentyone.common.view import (
    AlphaCardView,
    CardView,
    GlyphCardView,
    get_card_view,
)


@pytest.mark.parametrize(
    "card, expected",
    [
        (Card(Suit.HEARTS, Rank.JACK), "Jack of Hearts"),
        (Card(Suit.SPADES, Rank.ACE), "Ace of Spades"),
        (Card(Suit.DIAMONDS, Rank.QUEEN), "Queen of Diamonds"),
        (Card(Suit.CLUBS, Rank.TEN), "10 of Clubs"),
        (Card(Suit.CLUBS, Rank.TWO), "2 of Clubs"),
    ],
)
def test_alpha_view(card, expected):
    assert AlphaCardView().draw(card) == expected


@pytest.mark.parametrize(
    "card, expected",
    [
        (Card(Suit.HEARTS, Rank.JACK), "J♥"),
        (Card(Suit.SPADES, Rank.ACE), "A♠"),
        (Card(Suit.DIAMONDS, Rank.KING), "K♦"),
        (Card(Suit.CLUBS, Rank.TEN), "10♣"),
    ],
)
def test_glyph_view(card, expected):
    assert GlyphCardView().draw(card) == expected


def test_draw_hand_joins_cards():
    cards = [Card(Suit.HEARTS, Rank.ACE), Card(Suit.SPADES, Rank.NINE)]
    assert AlphaCardView().draw_hand(cards) == "Ace of Hearts, 9 of Spades"
    assert GlyphCardView().draw_hand(cards) == "A♥, 9♠"
    assert GlyphCardView().draw_hand([]) == ""


def test_every_card_renders_in_both_views():
    for view in (AlphaCardView(), GlyphCardView()):
        rendered = {
            view.draw(Card(suit, rank)) for suit in Suit for rank in Rank
        }
        assert len(rendered) == 52


def test_get_card_view():
    assert isinstance(get_card_view("alpha"), AlphaCardView)
    assert isinstance(get_card_view("glyph"), GlyphCardView)
    with pytest.raises(ValueError):
        get_card_view("braille")


def test_card_view_is_abstract():
    with pytest.raises(TypeError):
        CardView()

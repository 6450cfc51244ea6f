import random
from collections import Counter

import pytest

from twentyone.common.card import Card, Rank, Suit
from twentyone.common.deck import Deck, EmptyDeckError


def test_deck_initialization():
    deck = Deck()
    assert isinstance(deck.cards, list)
    assert len(deck.cards) == 52


def test_deck_has_no_duplicates():
    deck = Deck()
    assert len(set(deck.cards)) == 52
    assert {(card.suit, card.rank) for card in deck.cards} == {
        (suit, rank) for suit in Suit for rank in Rank
    }


def test_deck_default_order_is_suit_major():
    deck = Deck()
    assert deck.cards[0] == Card(Suit.HEARTS, Rank.ACE)
    assert deck.cards[12] == Card(Suit.HEARTS, Rank.KING)
    assert deck.cards[13] == Card(Suit.DIAMONDS, Rank.ACE)
    assert deck.cards[-1] == Card(Suit.CLUBS, Rank.KING)


def test_deck_initialization_with_custom_cards():
    cards = [
        Card(Suit.HEARTS, Rank.TWO),
        Card(Suit.DIAMONDS, Rank.ACE),
        Card(Suit.CLUBS, Rank.JACK),
    ]
    deck = Deck(cards)
    assert deck.cards == cards
    deck.deal()
    assert len(cards) == 3


def test_deck_shuffle():
    deck = Deck(rng=random.Random(7))
    original_order = deck.cards.copy()
    deck.shuffle()
    assert deck.cards != original_order
    assert Counter(deck.cards) == Counter(original_order)


def test_deck_shuffle_is_reproducible_with_seed():
    first = Deck(rng=random.Random(1234)).shuffle()
    second = Deck(rng=random.Random(1234)).shuffle()
    assert first.cards == second.cards


def test_deck_shuffle_uses_process_random_by_default():
    random.seed(99)
    first = Deck().shuffle().cards
    random.seed(99)
    second = Deck().shuffle().cards
    assert first == second


def test_deck_deal():
    deck = Deck()
    size = deck.size
    last = deck.cards[-1]
    card = deck.deal()
    assert card == last
    assert deck.size == size - 1
    assert card not in deck.cards


def test_deck_str():
    deck = Deck()
    assert str(deck) == "Deck of 52 cards"


def test_deck_repr():
    deck = Deck()
    assert repr(deck) == f"Deck({[repr(card) for card in deck.cards]})"


def test_deck_deal_until_empty():
    deck = Deck(rng=random.Random(3)).shuffle()
    dealt = [deck.deal() for _ in range(52)]
    assert deck.is_empty()
    assert len(set(dealt)) == 52


def test_deck_deal_from_empty_deck():
    deck = Deck([])
    with pytest.raises(EmptyDeckError):
        deck.deal()
    assert deck.size == 0


def test_deck_only_changes_by_shuffle_and_deal():
    deck = Deck()
    assert not hasattr(deck, "reset")
    first = deck.deal()
    deck.shuffle()
    rest = [deck.deal() for _ in range(deck.size)]
    assert first not in rest
    assert len(set(rest)) == 51


def test_shuffle_spreads_cards_evenly():
    # Track where the top card ends up; every position should be equally likely.
    rng = random.Random(2024)
    trials = 5200
    positions = [0] * 52
    top = Card(Suit.HEARTS, Rank.ACE)
    for _ in range(trials):
        deck = Deck(rng=rng).shuffle()
        positions[deck.cards.index(top)] += 1

    expected = trials / 52
    chi_square = sum((count - expected) ** 2 / expected for count in positions)
    # 51 degrees of freedom; 100 is far beyond the 0.1% critical value
    assert chi_square < 100

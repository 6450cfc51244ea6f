import pytest

from twentyone.blackjack.outcome import Outcome, resolve_outcome


@pytest.mark.parametrize(
    "player_total, dealer_total, expected",
    [
        (22, 18, Outcome.PLAYER_BUST),
        (24, 26, Outcome.PLAYER_BUST),
        (20, 22, Outcome.DEALER_BUST),
        (21, 20, Outcome.PLAYER_WIN),
        (17, 21, Outcome.DEALER_WIN),
        (19, 19, Outcome.TIE),
        (21, 21, Outcome.TIE),
    ],
)
def test_resolve_outcome(player_total, dealer_total, expected):
    assert resolve_outcome(player_total, dealer_total) == expected


def test_outcome_winner():
    assert Outcome.PLAYER_WIN.winner == "player"
    assert Outcome.DEALER_BUST.winner == "player"
    assert Outcome.DEALER_WIN.winner == "dealer"
    assert Outcome.PLAYER_BUST.winner == "dealer"
    assert Outcome.TIE.winner == "draw"


def test_outcome_messages():
    assert Outcome.PLAYER_BUST.message == "Player busts! Dealer wins."
    assert Outcome.TIE.message == "It's a tie!"


def test_resolve_outcome_with_bust_limit():
    assert resolve_outcome(24, 18, bust_limit=25) == Outcome.PLAYER_WIN
    assert resolve_outcome(20, 26, bust_limit=25) == Outcome.DEALER_BUST
    assert resolve_outcome(26, 18, bust_limit=25) == Outcome.PLAYER_BUST

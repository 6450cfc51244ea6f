"""
This module provides the round state machine for a Blackjack game. It uses
the state design pattern to manage the stages of a round and the transitions
between them:

DealingState -> PlayerTurnState -> DealerTurnState -> EndRoundState

A player bust jumps from PlayerTurnState straight to EndRoundState, so the
dealer never plays against a hand that has already lost.

Classes:

GameState: An abstract base class for game states.
DealingState: A fresh deck is shuffled and the opening cards are dealt.
PlayerTurnState: The player hits or stands until standing or busting.
DealerTurnState: The dealer draws by the fixed house policy.
EndRoundState: The outcome is decided and announced.

The handle method in each game state class is responsible for performing the
actions required in that state, notifying the interface, and transitioning to
the next state. Each game state class also overrides the str method to return
the state name.
"""

import logging
from abc import ABC, abstractmethod

from twentyone.blackjack.action import Action
from twentyone.blackjack.outcome import Outcome, resolve_outcome

logger = logging.getLogger(__name__)

VALID_ACTIONS = [Action.HIT, Action.STAND]


class GameState(ABC):
    """
    Abstract base class for game states.
    """

    @abstractmethod
    def handle(self, game) -> None:
        """The method that handles the game state."""

    def __str__(self) -> str:
        return self.__class__.__name__


class DealingState(GameState):
    """
    The game state where the dealer is dealing the cards.
    """

    def handle(self, game):
        """
        Shuffles a fresh deck, deals the opening hands and changes the game state to PlayerTurnState.
        """
        game.deck = game.new_deck()
        game.deck.shuffle()
        self.deal(game)
        game.set_state(PlayerTurnState())

    def deal(self, game):
        """
        Deals one card at a time, dealer first, until both hands hold the opening count.
        """
        for _ in range(game.rules.initial_cards):
            game.dealer_hand.add_card(game.deck.deal())
            game.player_hand.add_card(game.deck.deal())

        up_card = game.dealer_hand.cards[0]
        game.io_interface.output(f"Dealer shows {game.io_interface.describe(up_card)}.")


class PlayerTurnState(GameState):
    """The game state where it's the player's turn to play."""

    def handle(self, game):
        """
        Asks for decisions until the player stands or busts.

        Invalid decisions are reported and asked for again; they never touch
        the hand.
        """
        while True:
            game.io_interface.show_hand("Player", game.player_hand)
            action = game.io_interface.get_player_action(
                game.player_hand, list(VALID_ACTIONS)
            )

            if action not in VALID_ACTIONS:
                logger.debug("Rejected player decision %r", action)
                game.io_interface.output("Invalid choice, please enter 'h' or 's'.")
                continue

            if action == Action.STAND:
                game.io_interface.output("Player stands.")
                game.set_state(DealerTurnState())
                return

            card = game.deck.deal()
            game.player_hand.add_card(card)
            game.io_interface.output(
                f"Player hits and gets {game.io_interface.describe(card)}."
            )
            if game.rules.is_bust(game.player_hand):
                game.set_state(EndRoundState())
                return


class DealerTurnState(GameState):
    """
    The game state where it's the dealer's turn to play.
    """

    def handle(self, game):
        """Draws while the rules say so and changes the game state to EndRoundState."""
        while game.rules.should_dealer_hit(game.dealer_hand):
            self.dealer_action(game)

        if not game.rules.is_bust(game.dealer_hand):
            game.io_interface.output("Dealer stands.")
        game.set_state(EndRoundState())

    def dealer_action(self, game):
        """
        Handles a dealer hit and notifies the interface.
        """
        card = game.deck.deal()
        game.dealer_hand.add_card(card)
        game.io_interface.output(f"Dealer hits and gets {game.io_interface.describe(card)}.")
        game.io_interface.show_hand("Dealer", game.dealer_hand)


class EndRoundState(GameState):
    """
    The game state where the round is ending.
    """

    def handle(self, game) -> Outcome:
        """
        Decides the outcome, announces it and records it on the game.

        :raises RuntimeError: If the round already has an outcome.
        """
        if game.outcome is not None:
            raise RuntimeError("Round has already been resolved.")

        outcome = resolve_outcome(
            game.player_hand.value(),
            game.dealer_hand.value(),
            game.rules.bust_limit,
        )
        self.output_results(game, outcome)
        game.outcome = outcome
        logger.info(
            "Round resolved: %s (player %d, dealer %d)",
            outcome.name,
            game.player_hand.value(),
            game.dealer_hand.value(),
        )
        return outcome

    def output_results(self, game, outcome):
        """Outputs both final hands and the result of the round."""
        game.io_interface.show_hand("Dealer", game.dealer_hand)
        game.io_interface.show_hand("Player", game.player_hand)
        game.io_interface.output(outcome.message)

"""
This module is used to execute a game of Blackjack.

It can be used to play a game in different modes:
- Interactive console mode, where the user plays against the dealer round after round.
- Simulation mode, where rounds are played automatically and the outcomes are tallied.
- Logging mode, where automatic rounds are written to a specified file.

To run the game in different modes, specific command line arguments are used.
For example, `--console` runs the game in interactive console mode,
`--simulate` runs the game in simulation mode and `--log_file` followed by a
filename runs the game in logging mode. `--view` picks how cards are shown.
"""

import argparse
import logging
import random
import sys
import time
from typing import Callable, Optional

from twentyone.blackjack.hand import BlackjackHand
from twentyone.blackjack.outcome import Outcome
from twentyone.blackjack.rules import Rules
from twentyone.blackjack.state import DealingState, EndRoundState, GameState
from twentyone.blackjack.stats import SimulationStats
from twentyone.common.deck import Deck, EmptyDeckError
from twentyone.common.io_interface import (
    ConsoleIOInterface,
    DummyIOInterface,
    IOInterface,
    LoggingIOInterface,
)
from twentyone.common.view import CARD_VIEWS, get_card_view

logger = logging.getLogger(__name__)


class BlackjackGame:
    """
    A class to represent a game of Blackjack between one player and the dealer.

    Attributes
    ----------
    io_interface : IOInterface
        Interface for input and output operations.
    rules : Rules
        Object defining game rules.
    rng : random.Random
        Random source handed to every new deck, or None for the process-level one.
    deck : Deck
        The deck of the round in progress.
    player_hand, dealer_hand : BlackjackHand
        The hands of the round in progress.
    current_state : GameState
        Current state of the round.
    outcome : Outcome
        Result of the round, None until it has been resolved.
    """

    def __init__(
        self,
        io_interface: IOInterface,
        rules: Optional[Rules] = None,
        rng: Optional[random.Random] = None,
        deck_factory: Callable[..., Deck] = Deck,
    ):
        self.io_interface = io_interface
        self.rules = rules if rules is not None else Rules()
        self.rng = rng
        self.deck_factory = deck_factory
        self.deck: Optional[Deck] = None
        self.player_hand = BlackjackHand()
        self.dealer_hand = BlackjackHand()
        self.current_state: GameState = DealingState()
        self.outcome: Optional[Outcome] = None

    def new_deck(self) -> Deck:
        """Create the deck for a new round."""
        return self.deck_factory(rng=self.rng)

    def set_state(self, state: GameState):
        """Change the current state of the round."""
        logger.debug("Changing state from %s to %s", self.current_state, state)
        self.current_state = state

    def reset(self):
        """Discard the previous round's deck, hands and outcome."""
        self.deck = None
        self.player_hand = BlackjackHand()
        self.dealer_hand = BlackjackHand()
        self.outcome = None
        self.current_state = DealingState()

    def play_round(self) -> Outcome:
        """Play a round of the game until it reaches the end state."""
        self.reset()
        while not isinstance(self.current_state, EndRoundState):
            self.current_state.handle(self)
        return self.current_state.handle(self)


def play_again(io_interface: IOInterface) -> bool:
    """Ask whether to play another round; only "y" means yes."""
    answer = io_interface.input("\nDo you want to play again? (y/n): ")
    return answer.strip().lower() == "y"


def play_console(game: BlackjackGame):
    """Play rounds interactively until the player declines another."""
    while True:
        game.play_round()
        if not play_again(game.io_interface):
            break


def run_simulation(game: BlackjackGame, num_games: int) -> SimulationStats:
    """Play ``num_games`` unattended rounds and tally their outcomes."""
    stats = SimulationStats()
    for _ in range(num_games):
        stats.update(game.play_round())
    return stats


def print_report(stats: SimulationStats, duration: float):
    """Print a summary of a simulation run."""
    report = stats.report()
    games_per_second = report["games_played"] / duration if duration > 0 else 0

    print("Simulation completed.")
    print(f"Games played: {report['games_played']:,}")
    print(f"Player wins: {report['player_wins']:,}")
    print(f"Dealer wins: {report['dealer_wins']:,}")
    print(f"Draws: {report['draws']:,}")
    print(f"Player busts: {report['player_busts']:,}")
    print(f"Dealer busts: {report['dealer_busts']:,}")
    print(f"\nDuration of simulation: {duration:.2f} seconds")
    print(f"Games simulated per second: {games_per_second:,.2f}")


def create_io_interface(args) -> IOInterface:
    """Create the IO interface based on the command line arguments."""
    view = get_card_view(args.view)
    if args.console:
        return ConsoleIOInterface(view=view)
    if args.log_file:
        return LoggingIOInterface(args.log_file, view=view)
    if args.simulate:
        return DummyIOInterface(view=view)
    return ConsoleIOInterface(view=view)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Play Blackjack against the dealer.")
    parser.add_argument(
        "--console",
        action="store_true",
        help="Play interactively in the console (the default). Overrides other modes if present.",
        default=False,
    )
    parser.add_argument(
        "--simulate",
        action="store_true",
        help="Play rounds automatically and report the outcomes.",
        default=False,
    )
    parser.add_argument(
        "--num_games", type=int, default=1, help="Number of rounds to simulate"
    )
    parser.add_argument(
        "--log_file",
        type=str,
        help="Play rounds automatically and append the output to the specified file.",
    )
    parser.add_argument(
        "--view",
        choices=sorted(CARD_VIEWS),
        default="glyph",
        help="How cards are shown: 'glyph' (J♥) or 'alpha' (Jack of Hearts).",
    )
    parser.add_argument("--seed", type=int, help="Random seed for reproducible shuffles")
    parser.add_argument(
        "--verbose", action="store_true", help="Log engine internals to stderr."
    )
    return parser.parse_args(argv)


def main(argv=None) -> int:
    """
    Main function to start the game.

    It handles command-line arguments to determine the mode of operation of the game,
    creates the game, and then plays either interactively or unattended.
    """
    args = parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    rng = random.Random(args.seed) if args.seed is not None else None
    io_interface = create_io_interface(args)
    game = BlackjackGame(io_interface, rng=rng)
    interactive = args.console or not (args.simulate or args.log_file)

    try:
        if interactive:
            play_console(game)
        else:
            start_time = time.time()
            stats = run_simulation(game, args.num_games)
            print_report(stats, time.time() - start_time)
    except EmptyDeckError:
        logger.critical("Deck ran out of cards mid-round", exc_info=True)
        return 1
    except (KeyboardInterrupt, EOFError):
        print()
    return 0


if __name__ == "__main__":
    sys.exit(main())

"""
This module contains the SimulationStats class which is responsible for
tracking the outcomes of unattended rounds.
"""

from twentyone.blackjack.outcome import Outcome


class SimulationStats:
    """
    A class that holds the statistics of the simulation.
    """

    def __init__(self):
        """
        Initializes the SimulationStats with default values.
        """
        self.games_played = 0
        self.player_wins = 0
        self.dealer_wins = 0
        self.draws = 0
        self.outcomes = {outcome: 0 for outcome in Outcome}

    def update(self, outcome: Outcome):
        """Updates the statistics with the outcome of one round."""
        self.games_played += 1
        self.outcomes[outcome] += 1

        if outcome.winner == "player":
            self.player_wins += 1
        elif outcome.winner == "dealer":
            self.dealer_wins += 1
        else:
            self.draws += 1

    def report(self):
        """
        Returns a dictionary containing the current statistics.
        """
        return {
            "games_played": self.games_played,
            "player_wins": self.player_wins,
            "dealer_wins": self.dealer_wins,
            "draws": self.draws,
            "player_busts": self.outcomes[Outcome.PLAYER_BUST],
            "dealer_busts": self.outcomes[Outcome.DEALER_BUST],
        }

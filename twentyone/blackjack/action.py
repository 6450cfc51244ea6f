"""Defines the Action enum for the decisions a player can make in a round of blackjack."""
from enum import Enum


class Action(Enum):
    """Enum for the decisions a player can make in a round of blackjack."""

    HIT = "hit"
    STAND = "stand"

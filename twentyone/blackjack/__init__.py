"""Blackjack scoring, round state machine and command-line entry point."""

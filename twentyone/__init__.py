"""
twentyone: a two-party Blackjack engine.

The ``common`` package holds the generic card model (cards, decks, hands,
card views and IO interfaces). The ``blackjack`` package holds the scoring
rules, the round state machine and the command-line entry point.
"""

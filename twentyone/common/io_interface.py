"""
This module contains the IOInterface abstract base class and its implementations.

An IO interface is everything the round engine knows about the outside world:
it is the sink for status text and hands, and the source of the player's
decisions. The engine never prints or reads anything itself.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, List, Optional

import aiofiles

from twentyone.blackjack.action import Action
from twentyone.blackjack.constants import DEALER_STAND_TOTAL
from twentyone.common.view import CardView, GlyphCardView

if TYPE_CHECKING:
    from twentyone.blackjack.hand import BlackjackHand
    from twentyone.common.card import Card


def threshold_action(
    hand: BlackjackHand, valid_actions: List[Action], stand_total: int
) -> Action:
    """Hit below ``stand_total``, stand otherwise, the way an unattended seat plays."""
    if not valid_actions:
        raise ValueError("No valid actions available.")
    wanted = Action.HIT if hand.value() < stand_total else Action.STAND
    return wanted if wanted in valid_actions else valid_actions[0]


class IOInterface(ABC):
    """
    Abstract base class for an IO interface.

    This class defines the interface for input/output operations in the game.
    The card view is chosen once, when the interface is created.
    """

    def __init__(self, view: Optional[CardView] = None):
        self.view = view if view is not None else GlyphCardView()

    @abstractmethod
    def output(self, message: str) -> None:
        """Output a message to the interface."""
        pass

    @abstractmethod
    def input(self, prompt: str) -> str:
        """Get input from the user with a prompt."""
        pass

    @abstractmethod
    def get_player_action(
        self, hand: BlackjackHand, valid_actions: List[Action]
    ) -> Any:
        """
        Retrieve the player's next decision.

        Implementations may return anything; the caller accepts only values
        found in ``valid_actions``.
        """
        pass

    def describe(self, card: Card) -> str:
        """Render one card with this interface's view."""
        return self.view.draw(card)

    def show_hand(self, owner: str, hand: BlackjackHand) -> None:
        """Output a hand's total followed by its cards."""
        self.output(f"{owner}'s hand total: {hand.value()}")
        self.output(f"Hand: {self.view.draw_hand(hand.cards)}")


class DummyIOInterface(IOInterface):
    """
    A dummy IO interface for simulation purposes. Does not perform any actual IO.

    Decisions are made without input: hit below ``stand_total``, stand
    otherwise.
    """

    def __init__(
        self, view: Optional[CardView] = None, stand_total: int = DEALER_STAND_TOTAL
    ):
        super().__init__(view)
        self.stand_total = stand_total

    def output(self, message: str) -> None:
        """Simulates output operation."""
        pass

    def input(self, prompt: str) -> str:
        """Simulates input operation."""
        return ""

    def show_hand(self, owner: str, hand: BlackjackHand) -> None:
        pass

    def get_player_action(
        self, hand: BlackjackHand, valid_actions: List[Action]
    ) -> Action:
        return threshold_action(hand, valid_actions, self.stand_total)


class TestIOInterface(IOInterface):
    """
    A test IO interface for testing purposes. Collects output messages and replays queued decisions.

    Queued decisions are returned as they are, so a test can queue values that
    are not valid actions to exercise the retry path.
    """

    __test__ = False

    def __init__(self, view: Optional[CardView] = None):
        super().__init__(view)
        self.sent_messages = []
        self.player_actions = []
        self.input_responses = []
        self.decision_requests = 0

    def output(self, message: str) -> None:
        self.sent_messages.append(message)

    def input(self, prompt: str) -> str:
        if self.input_responses:
            return self.input_responses.pop(0)
        return "test_input"

    def add_player_action(self, *actions: Any):
        """Add player decisions to the queue."""
        self.player_actions.extend(actions)

    def get_player_action(
        self, hand: BlackjackHand, valid_actions: List[Action]
    ) -> Any:
        self.decision_requests += 1
        if self.player_actions:
            return self.player_actions.pop(0)
        else:
            raise ValueError("No more actions left in TestIOInterface queue.")


class ConsoleIOInterface(IOInterface):
    """
    A console IO interface for interactive gameplay.

    ``h`` or ``hit`` hits, ``s`` or ``stand`` stands. Anything else is handed
    back unchanged and rejected by the round.
    """

    ACTION_KEYS = {
        "h": Action.HIT,
        "hit": Action.HIT,
        "s": Action.STAND,
        "stand": Action.STAND,
    }

    def output(self, message: str) -> None:
        print(message)

    def input(self, prompt: str) -> str:
        return input(prompt)

    def get_player_action(
        self, hand: BlackjackHand, valid_actions: List[Action]
    ) -> Any:
        choice = self.input("Do you want to (h)it or (s)tand? ").strip().lower()
        action = self.ACTION_KEYS.get(choice)
        if action in valid_actions:
            return action
        return choice


class LoggingIOInterface(IOInterface):
    """
    A logging IO interface for recording purposes. Writes output messages to a log file.

    Decisions are made the same way as in `DummyIOInterface`.
    """

    def __init__(
        self,
        log_file_path: str,
        view: Optional[CardView] = None,
        stand_total: int = DEALER_STAND_TOTAL,
    ):
        super().__init__(view)
        self.log_file_path = log_file_path
        self.stand_total = stand_total

    def output(self, message: str) -> None:
        """Write an output message to the log file."""
        with open(self.log_file_path, "a", encoding="utf-8") as log_file:
            log_file.write(message + "\n")

    def input(self, prompt: str) -> str:
        """Log the prompt and return empty string."""
        self.output(f"[INPUT PROMPT] {prompt}")
        return ""

    def get_player_action(
        self, hand: BlackjackHand, valid_actions: List[Action]
    ) -> Action:
        action = threshold_action(hand, valid_actions, self.stand_total)
        self.output(f"[DECISION] {action.value}")
        return action

    async def output_async(self, message: str) -> None:
        """Async version of output for callers running inside an event loop."""
        async with aiofiles.open(
            self.log_file_path, mode="a", encoding="utf-8"
        ) as log_file:
            await log_file.write(message + "\n")

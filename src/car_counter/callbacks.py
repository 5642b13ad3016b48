# Area: Presentation Callbacks
"""
car_counter.callbacks — The presentation boundary
=================================================

The RoundController never draws, plays sounds or switches screens.
It calls the four methods of a GamePresenter instead, so any front
end (terminal, GUI, web socket) can be plugged in by subclassing.

    from car_counter import GamePresenter, RoundOutcome, HudSnapshot

    class MyPresenter(GamePresenter):
        def display_item_count(self, count): ...
        def show_outcome(self, outcome): ...
        def clear_outcome(self): ...
        def update_hud(self, snapshot): ...
"""

from abc import ABC, abstractmethod

from ._core.outcome import RoundOutcome
from .types import HudSnapshot


class GamePresenter(ABC):
    """
    Abstract base class for game front ends.

    Every method is called synchronously from the controller, on the
    same thread as the player's input and the countdown ticks.
    """

    @abstractmethod
    def display_item_count(self, count: int) -> None:
        """
        Called exactly once when a round starts.

        Parameters
        ----------
        count : int
            Number of items (>= 0) to show. This is the hidden answer,
            so do not print the number itself.
        """

    @abstractmethod
    def show_outcome(self, outcome: RoundOutcome) -> None:
        """
        Called after a round is resolved and after a rejected submission.

        Parameters
        ----------
        outcome : RoundOutcome
            ``outcome.kind`` is one of CORRECT, INCORRECT(correct_count),
            TIMED_OUT(correct_count) or VALIDATION_ERROR. The round is
            still open after a VALIDATION_ERROR.
        """

    @abstractmethod
    def clear_outcome(self) -> None:
        """Called when a round starts; remove any outcome message."""

    @abstractmethod
    def update_hud(self, snapshot: HudSnapshot) -> None:
        """
        Called after every change to round, score, best or time left.

        Parameters
        ----------
        snapshot : HudSnapshot
            {
                "round": int,
                "score": int,
                "best": int,
                "time_left": int,
                "time_level": "normal" | "warn" | "panic"
            }
        """

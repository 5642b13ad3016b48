"""
car_counter.types — TypedDict schemas passed to presenters
==========================================================

Presenters receive a HudSnapshot after every change to the round,
score, best score or remaining time:

    {"round": 3, "score": 2, "best": 5, "time_left": 4, "time_level": "warn"}
"""

from typing import TypedDict, Literal


class HudSnapshot(TypedDict):
    """Values shown on the heads-up display.

    Fields
    ------
    round : int
        The current round number (1, 2, 3, ...).
    score : int
        Correct answers in this game.
    best : int
        Best score ever reached, across sessions.
    time_left : int
        Seconds left in the current round.
    time_level : str
        "normal", "warn" or "panic", from the configured thresholds.
    """
    round: int
    score: int
    best: int
    time_left: int
    time_level: Literal["normal", "warn", "panic"]

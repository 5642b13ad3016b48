"""
car_counter._core.state — Game state
====================================

Mutable fields of one game session. The RoundController owns the
only instance and is the only component that writes to it.
"""

from __future__ import annotations
from dataclasses import dataclass

from .enums import RoundPhase


@dataclass
class GameState:
    """
    State of one game session.

    ``score`` and ``best`` mirror the ScoreTracker after every scoring
    operation; ``current_item_count`` is the answer of the active round.
    """
    round: int = 1
    score: int = 0
    best: int = 0
    current_item_count: int = 0
    max_items_for_round: int = 0
    time_limit_for_round: int = 0
    time_left: int = 0
    checked: bool = False
    phase: RoundPhase = RoundPhase.IDLE

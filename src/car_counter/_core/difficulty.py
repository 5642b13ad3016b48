# Area: Core
"""
car_counter._core.difficulty — Difficulty scaling
=================================================

Pure functions mapping a round number to its item ceiling and time
limit. Both scale linearly and are capped independently:

    max_items  = min(start_max_items + (round - 1) * max_items_increment, max_items_cap)
    time_limit = max(start_time_limit - (round - 1) * time_decrement, min_time_limit)
"""

from __future__ import annotations
from dataclasses import dataclass

from ..config import GameConfig
from .enums import TimeLevel


@dataclass(frozen=True)
class RoundParams:
    """Difficulty of a single round."""
    max_items: int
    time_limit: int


def params_for_round(round_number: int, config: GameConfig) -> RoundParams:
    """Return the item ceiling and time limit for ``round_number`` (1-based)."""
    steps = round_number - 1
    max_items = min(
        config.start_max_items + steps * config.max_items_increment,
        config.max_items_cap,
    )
    time_limit = max(
        config.start_time_limit - steps * config.time_decrement,
        config.min_time_limit,
    )
    return RoundParams(max_items=max_items, time_limit=time_limit)


def time_level(time_left: int, config: GameConfig) -> TimeLevel:
    """Classify the remaining time for the HUD."""
    if time_left <= config.panic_time_threshold:
        return TimeLevel.PANIC
    if time_left <= config.warn_time_threshold:
        return TimeLevel.WARN
    return TimeLevel.NORMAL

# Area: Core
"""
car_counter._core.enums — Round State Machine Enums
===================================================

Defines the phases and events of the round lifecycle state machine,
and the kinds of outcome a round can produce.
"""

from enum import Enum


class RoundPhase(Enum):
    """
    Phases of the round lifecycle.

    Phase transitions:
    IDLE -> ROUND_ACTIVE (on START_GAME, START_ROUND or RESET)
    ROUND_ACTIVE -> ROUND_RESOLVED (on RESOLVE)
    ROUND_RESOLVED -> ROUND_ACTIVE (on ADVANCE, START_ROUND, START_GAME or RESET)
    ROUND_ACTIVE -> ROUND_ACTIVE (on START_ROUND, START_GAME or RESET)
    Any phase -> IDLE (on RETURN_TO_MENU)
    """
    IDLE = "idle"
    ROUND_ACTIVE = "round_active"
    ROUND_RESOLVED = "round_resolved"


class RoundEvent(Enum):
    """
    Events that trigger phase transitions.

    Events are triggered by:
    - START_GAME: player starts a game from the menu
    - START_ROUND: the current round is (re)dealt
    - RESOLVE: a valid answer was submitted or the countdown expired
    - ADVANCE: player moves on to the next round
    - RESET: player restarts the game
    - RETURN_TO_MENU: player leaves the game screen
    """
    START_GAME = "START_GAME"
    START_ROUND = "START_ROUND"
    RESOLVE = "RESOLVE"
    ADVANCE = "ADVANCE"
    RESET = "RESET"
    RETURN_TO_MENU = "RETURN_TO_MENU"


class OutcomeKind(Enum):
    """How a submission or expiry was judged."""
    CORRECT = "correct"
    INCORRECT = "incorrect"
    TIMED_OUT = "timed_out"
    VALIDATION_ERROR = "validation_error"


class TimeLevel(Enum):
    """HUD urgency class of the remaining time."""
    NORMAL = "normal"
    WARN = "warn"
    PANIC = "panic"

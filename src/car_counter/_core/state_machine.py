# Area: Core
"""
car_counter._core.state_machine — Round State Machine
=====================================================

Tracks which phase of the round lifecycle the game is in and
validates transitions triggered by player actions and the countdown.
"""

import logging
from typing import Optional

from .enums import RoundPhase, RoundEvent

logger = logging.getLogger("car_counter.state_machine")


# Valid phase transitions: {current_phase: {event: next_phase}}
TRANSITIONS = {
    RoundPhase.IDLE: {
        RoundEvent.START_GAME: RoundPhase.ROUND_ACTIVE,
        RoundEvent.START_ROUND: RoundPhase.ROUND_ACTIVE,
        RoundEvent.RESET: RoundPhase.ROUND_ACTIVE,
        RoundEvent.RETURN_TO_MENU: RoundPhase.IDLE,
    },
    RoundPhase.ROUND_ACTIVE: {
        RoundEvent.RESOLVE: RoundPhase.ROUND_RESOLVED,
        RoundEvent.START_GAME: RoundPhase.ROUND_ACTIVE,
        RoundEvent.START_ROUND: RoundPhase.ROUND_ACTIVE,
        RoundEvent.RESET: RoundPhase.ROUND_ACTIVE,
        RoundEvent.RETURN_TO_MENU: RoundPhase.IDLE,
    },
    RoundPhase.ROUND_RESOLVED: {
        RoundEvent.ADVANCE: RoundPhase.ROUND_ACTIVE,
        RoundEvent.START_GAME: RoundPhase.ROUND_ACTIVE,
        RoundEvent.START_ROUND: RoundPhase.ROUND_ACTIVE,
        RoundEvent.RESET: RoundPhase.ROUND_ACTIVE,
        RoundEvent.RETURN_TO_MENU: RoundPhase.IDLE,
    },
}


class RoundStateMachine:
    """
    State machine for the round lifecycle.

    Attributes:
        current_phase: The phase the game is currently in
        previous_phase: The phase before the last transition
    """

    def __init__(self):
        """Initialize state machine in IDLE."""
        self.current_phase = RoundPhase.IDLE
        self.previous_phase: Optional[RoundPhase] = None

    def can_transition(self, event: RoundEvent) -> bool:
        """
        Check if a transition is valid from the current phase.

        Args:
            event: The event to check

        Returns:
            True if the transition is valid, False otherwise
        """
        return event in TRANSITIONS.get(self.current_phase, {})

    def transition(self, event: RoundEvent) -> RoundPhase:
        """
        Execute a phase transition.

        Args:
            event: The event triggering the transition

        Returns:
            The new phase after transition

        Raises:
            ValueError: If the transition is not valid
        """
        if not self.can_transition(event):
            raise ValueError(
                f"Invalid transition: {event.value} from {self.current_phase.value}"
            )

        next_phase = TRANSITIONS[self.current_phase][event]
        if next_phase != self.current_phase:
            logger.debug(
                "Phase: %s → %s (%s)",
                self.current_phase.value, next_phase.value, event.value,
            )
        self.previous_phase = self.current_phase
        self.current_phase = next_phase
        return next_phase

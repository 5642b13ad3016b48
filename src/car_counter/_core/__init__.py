# Area: Core
"""
Core round lifecycle: difficulty scaling, countdown, scoring and the
RoundController state machine. Nothing in here draws or reads input.
"""

from .enums import RoundPhase, RoundEvent, OutcomeKind, TimeLevel
from .difficulty import RoundParams, params_for_round, time_level
from .round_timer import RoundTimer, CountdownToken
from .score_tracker import ScoreTracker, BestScoreStore
from .answer import parse_answer
from .outcome import RoundOutcome
from .state import GameState
from .state_machine import RoundStateMachine, TRANSITIONS
from .controller import RoundController

__all__ = [
    "RoundPhase",
    "RoundEvent",
    "OutcomeKind",
    "TimeLevel",
    "RoundParams",
    "params_for_round",
    "time_level",
    "RoundTimer",
    "CountdownToken",
    "ScoreTracker",
    "BestScoreStore",
    "parse_answer",
    "RoundOutcome",
    "GameState",
    "RoundStateMachine",
    "TRANSITIONS",
    "RoundController",
]

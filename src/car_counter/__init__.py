"""
car_counter — Timed car counting mini-game
==========================================

Each round shows a random number of cars; type how many you saw
before the countdown runs out. Rounds get harder: more cars, less time.

Quick Start (terminal):
    from car_counter import GameRunner
    GameRunner(config={}).run()

Custom Front End:
    from car_counter import GamePresenter, RoundController, ScoreTracker
    class MyPresenter(GamePresenter): ...  # Implement 4 methods
    controller = RoundController(config, MyPresenter(), scores)
    controller.start_game()
    controller.submit_answer("12")

Type Definitions
----------------
    from car_counter import HudSnapshot, RoundOutcome, OutcomeKind
"""

from .callbacks import GamePresenter
from .config import GameConfig, build_game_config
from .console import ConsolePresenter
from .runner import GameRunner
from .errors import (
    CarCounterError,
    InvalidAnswerError,
    StorageError,
    ConfigError,
)
from .types import HudSnapshot
from ._core import (
    RoundController,
    RoundTimer,
    ScoreTracker,
    RoundOutcome,
    OutcomeKind,
    RoundPhase,
    RoundParams,
    GameState,
    params_for_round,
)
from ._store import BestScoreRepository, MemoryBestScoreStore

__all__ = [
    # Main classes
    "GameRunner",
    "RoundController",
    "GamePresenter",
    "ConsolePresenter",
    # Components
    "GameConfig",
    "build_game_config",
    "RoundTimer",
    "ScoreTracker",
    "BestScoreRepository",
    "MemoryBestScoreStore",
    "params_for_round",
    # Errors
    "CarCounterError",
    "InvalidAnswerError",
    "StorageError",
    "ConfigError",
    # Types
    "HudSnapshot",
    "RoundOutcome",
    "OutcomeKind",
    "RoundPhase",
    "RoundParams",
    "GameState",
]
__version__ = "1.0.0"

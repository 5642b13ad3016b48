"""
car_counter.runner — Main game loop
===================================

The GameRunner wires the controller to a presenter, a best score store
and the terminal, then runs a single-threaded loop:

    wait for a line of input (at most poll_interval seconds)
    → fire any countdown ticks that are due
    → handle the line as a command or an answer

No other thread touches the game, so the countdown can only expire
between two input lines, never in the middle of one. An answer typed
after the deadline finds its round already timed out.
"""

from __future__ import annotations

import logging
import random
import select
import signal
import sys
from typing import Any, Dict, Optional, TextIO

from ._core.controller import RoundController
from ._core.enums import RoundPhase
from ._core.score_tracker import BestScoreStore, ScoreTracker
from ._shared.display import COMMANDS, NEXT_ROUND_HINT
from ._shared.logging_config import setup_logging, enable_quiet_mode, disable_quiet_mode
from ._store.database import DEFAULT_DB_PATH
from ._store.repo_best_score import BestScoreRepository, MemoryBestScoreStore
from .callbacks import GamePresenter
from .config import build_game_config
from .console import ConsolePresenter

logger = logging.getLogger("car_counter.runner")


class GameRunner:
    """
    Terminal entry point.

    Usage
    -----
        from car_counter import GameRunner

        config = {
            "db_path": "car_counter.db",
            "log_file": "car_counter.log",
            "seed": 42,
            "start_time_limit": 20,
        }

        GameRunner(config=config).run()

    Config keys
    -----------
    Every GameConfig field, plus:
        db_path           SQLite file for the best score
        no_save           keep the best score in memory only
        log_file          JSON log file (None disables it)
        log_level         logging level, default INFO
        seed              seed for the item counts
        poll_interval     seconds between countdown checks, default 0.1
        tick_seconds      length of one countdown tick, default 1.0
        color             ANSI colors in the terminal, default True
        setup_logging     configure package logging, default True
    """

    def __init__(
        self,
        config: Dict[str, Any],
        presenter: Optional[GamePresenter] = None,
        store: Optional[BestScoreStore] = None,
        input_stream: Optional[TextIO] = None,
    ):
        self.config = config
        self._running = False

        if config.get("setup_logging", True):
            setup_logging(
                log_file_path=config.get("log_file", "car_counter.log"),
                level=config.get("log_level", logging.INFO),
            )

        self.game_config = build_game_config(config)
        self.presenter = presenter or ConsolePresenter(
            icon=self.game_config.icon,
            color=config.get("color", True),
        )
        self.store = store or self._build_store(config)
        self.scores = ScoreTracker(self.store, self.game_config.best_score_key)

        seed = config.get("seed")
        self.controller = RoundController(
            config=self.game_config,
            presenter=self.presenter,
            scores=self.scores,
            rng=random.Random(seed),
            tick_seconds=float(config.get("tick_seconds", 1.0)),
        )

        self.input_stream = input_stream or sys.stdin
        self.poll_interval = float(config.get("poll_interval", 0.1))

    @staticmethod
    def _build_store(config: Dict[str, Any]) -> BestScoreStore:
        if config.get("no_save"):
            return MemoryBestScoreStore()
        return BestScoreRepository(config.get("db_path", DEFAULT_DB_PATH))

    # ── Main loop ─────────────────────────────────────────────

    def run(self) -> None:
        """
        Show the menu and play until the player quits. Blocks until
        'q', end of input or Ctrl+C.
        """
        self._running = True

        # Graceful shutdown on Ctrl+C
        def _signal_handler(sig, frame):
            logger.info("Shutting down gracefully...")
            self._running = False
        previous_handler = signal.signal(signal.SIGINT, _signal_handler)

        logger.info("=" * 60)
        logger.info("  Car Counter — Starting")
        logger.info(f"  Best:     {self.scores.best}")
        logger.info(f"  Items:    {self.game_config.min_items}-{self.game_config.start_max_items}"
                    f" (cap {self.game_config.max_items_cap})")
        logger.info(f"  Time:     {self.game_config.start_time_limit}s"
                    f" (min {self.game_config.min_time_limit}s)")
        logger.info("=" * 60)

        enable_quiet_mode()
        self._show_menu()
        try:
            while self._running:
                line = self._read_line(self.poll_interval)
                # Overdue ticks fire before the line is judged
                self._poll_timer()
                if line is not None and not self.handle_line(line):
                    break
        finally:
            self.controller.timer.stop()
            disable_quiet_mode()
            signal.signal(signal.SIGINT, previous_handler)
            self._running = False
            logger.info("Runner stopped (best=%d).", self.scores.best)

    def handle_line(self, line: str) -> bool:
        """
        Process one line of player input.

        Returns:
            False when the player asked to quit
        """
        text = line.strip()
        command = COMMANDS.get(text.lower())
        phase = self.controller.phase

        if command == "quit":
            return False

        if phase is RoundPhase.IDLE:
            if command == "play" or not text:
                self.controller.start_game()
            return True

        if command == "next" or (not text and phase is RoundPhase.ROUND_RESOLVED):
            self.controller.advance_round()
        elif command == "restart":
            self.controller.reset_game()
        elif command == "menu":
            self.controller.return_to_menu()
            self._show_menu()
        elif phase is RoundPhase.ROUND_ACTIVE:
            outcome = self.controller.submit_answer(text)
            if outcome is not None and outcome.resolves_round:
                self._show_notice(NEXT_ROUND_HINT)
        return True

    def _poll_timer(self) -> None:
        """Fire due countdown ticks; hint at the next round on expiry."""
        was_active = self.controller.phase is RoundPhase.ROUND_ACTIVE
        self.controller.timer.poll()
        if was_active and self.controller.phase is RoundPhase.ROUND_RESOLVED:
            self._show_notice(NEXT_ROUND_HINT)

    def _show_menu(self) -> None:
        if isinstance(self.presenter, ConsolePresenter):
            self.presenter.show_menu(self.scores.best)

    def _show_notice(self, text: str) -> None:
        if isinstance(self.presenter, ConsolePresenter):
            self.presenter.show_notice(text)

    def _read_line(self, timeout: float) -> Optional[str]:
        """
        Wait up to ``timeout`` seconds for a line of input.

        Returns:
            The line, None if nothing arrived in time, "q" at end of input
        """
        stream = self.input_stream
        try:
            ready, _, _ = select.select([stream], [], [], timeout)
        except (OSError, ValueError, TypeError):
            # Streams without a file descriptor (or Windows consoles) block
            ready = [stream]
        if not ready:
            return None
        line = stream.readline()
        if line == "":
            return "q"
        return line

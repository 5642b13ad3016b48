# Area: Core
"""
car_counter._core.controller — Round lifecycle controller
=========================================================

The RoundController runs the game: it draws each round's hidden item
count, drives the countdown, judges answers, keeps score and tells the
presenter what to show. It owns the only GameState of the session.

Player entry points (all synchronous):
    start_game()       menu → first round
    submit_answer(x)   judge a guess for the active round
    advance_round()    resolved round → next round
    reset_game()       restart from round 1, best score kept
    return_to_menu()   stop the countdown and go idle

The countdown is the only other entry point (on_timer_expired). The
``checked`` flag is tested and set before any scoring happens, so
whichever of submit and expiry comes first resolves the round and the
other becomes a no-op.
"""

from __future__ import annotations

import logging
import random
from typing import TYPE_CHECKING, Any, Optional

from ..config import GameConfig
from ..errors import InvalidAnswerError
from ..types import HudSnapshot
from .answer import parse_answer
from .difficulty import params_for_round, time_level
from .enums import RoundEvent, RoundPhase
from .outcome import RoundOutcome
from .round_timer import RoundTimer
from .score_tracker import ScoreTracker
from .state import GameState
from .state_machine import RoundStateMachine

if TYPE_CHECKING:
    from ..callbacks import GamePresenter

logger = logging.getLogger("car_counter.controller")


class RoundController:
    """
    Orchestrates rounds using the difficulty scaler, timer and score tracker.

    Args:
        config: Difficulty parameters
        presenter: Front end receiving items, outcomes and HUD snapshots
        scores: Score tracker (holds the persisted best score)
        rng: Random source for item counts; seed it for reproducible games
        tick_seconds: Wall-clock length of one countdown tick
    """

    def __init__(
        self,
        config: GameConfig,
        presenter: "GamePresenter",
        scores: ScoreTracker,
        rng: Optional[random.Random] = None,
        tick_seconds: float = 1.0,
    ):
        self.config = config
        self.presenter = presenter
        self.scores = scores
        self.rng = rng or random.Random()
        self.state_machine = RoundStateMachine()
        self.timer = RoundTimer(
            on_tick=self._on_timer_tick,
            on_expire=self.on_timer_expired,
            tick_seconds=tick_seconds,
        )
        self.state = GameState(
            best=scores.best,
            time_limit_for_round=config.start_time_limit,
            time_left=config.start_time_limit,
            max_items_for_round=config.start_max_items,
        )

    # ── Read-only views ─────────────────────────────────────────

    @property
    def phase(self) -> RoundPhase:
        return self.state.phase

    def snapshot(self) -> HudSnapshot:
        """Current HUD values."""
        return {
            "round": self.state.round,
            "score": self.state.score,
            "best": self.state.best,
            "time_left": self.state.time_left,
            "time_level": time_level(self.state.time_left, self.config).value,
        }

    # ── Player entry points ─────────────────────────────────────

    def start_game(self) -> None:
        """Start a fresh game at round 1 (from the menu or mid-game)."""
        self.timer.stop()
        self.state.round = 1
        self.scores.reset()
        self._sync_scores()
        self._transition(RoundEvent.START_GAME)
        logger.info("Game started (best=%d)", self.state.best)
        self._emit_hud()
        self._deal_round()

    def start_round(self) -> None:
        """Deal the current round again: difficulty, hidden count, countdown."""
        self._transition(RoundEvent.START_ROUND)
        self._deal_round()

    def _deal_round(self) -> None:
        state = self.state
        state.checked = False
        self.presenter.clear_outcome()

        params = params_for_round(state.round, self.config)
        state.max_items_for_round = params.max_items
        state.time_limit_for_round = params.time_limit
        state.current_item_count = self.rng.randint(self.config.min_items, params.max_items)

        logger.info(
            "Round %d: %d items (range %d-%d), %ds",
            state.round, state.current_item_count,
            self.config.min_items, params.max_items, params.time_limit,
        )
        self.presenter.display_item_count(state.current_item_count)

        self.timer.start(params.time_limit)
        state.time_left = params.time_limit
        self._emit_hud()

    def submit_answer(self, raw_input: Any) -> Optional[RoundOutcome]:
        """
        Judge a guess for the active round.

        Returns:
            The outcome, or None if there is no open round to answer
        """
        state = self.state
        if state.phase is not RoundPhase.ROUND_ACTIVE or state.checked:
            logger.debug("Submission %r ignored (phase=%s, checked=%s)",
                         raw_input, state.phase.value, state.checked)
            return None

        try:
            guess = parse_answer(raw_input)
        except InvalidAnswerError as e:
            logger.info("Rejected answer %r: %s", raw_input, e.reason)
            outcome = RoundOutcome.validation_error(raw_input, e.reason)
            self.presenter.show_outcome(outcome)
            return outcome

        state.checked = True
        self.timer.stop()

        if guess == state.current_item_count:
            self.scores.record_round_result(True)
            improved = self.scores.maybe_update_best()
            outcome = RoundOutcome.correct(state.current_item_count, best_improved=improved)
        else:
            self.scores.record_round_result(False)
            outcome = RoundOutcome.incorrect(state.current_item_count, guess)

        self._sync_scores()
        self._resolve(outcome)
        self._emit_hud()
        return outcome

    def on_timer_expired(self) -> Optional[RoundOutcome]:
        """Resolve the active round as timed out, unless it already is."""
        state = self.state
        if state.phase is not RoundPhase.ROUND_ACTIVE or state.checked:
            logger.debug("Stale expiry ignored (round %d)", state.round)
            return None

        state.checked = True
        state.time_left = 0
        self.scores.record_round_result(False)
        outcome = RoundOutcome.timed_out(state.current_item_count)
        self._resolve(outcome)
        return outcome

    def advance_round(self) -> bool:
        """
        Move on to the next round.

        Returns:
            False (and does nothing) unless the current round is resolved
        """
        if not self.state_machine.can_transition(RoundEvent.ADVANCE):
            logger.warning("Cannot advance from %s", self.state.phase.value)
            return False
        self._transition(RoundEvent.ADVANCE)
        self.state.round += 1
        self._deal_round()
        return True

    def reset_game(self) -> None:
        """Restart from round 1 with a zero score; the best score is kept."""
        self.timer.stop()
        self._transition(RoundEvent.RESET)
        self.state.round = 1
        self.scores.reset()
        self._sync_scores()
        logger.info("Game reset (best=%d)", self.state.best)
        self._deal_round()

    def return_to_menu(self) -> None:
        """Stop the countdown and go idle."""
        self.timer.stop()
        self._transition(RoundEvent.RETURN_TO_MENU)
        logger.info("Returned to menu at round %d (score=%d)",
                    self.state.round, self.state.score)

    # ── Internals ───────────────────────────────────────────────

    def _on_timer_tick(self, remaining: int) -> None:
        self.state.time_left = max(remaining, 0)
        self._emit_hud()

    def _resolve(self, outcome: RoundOutcome) -> None:
        self._transition(RoundEvent.RESOLVE)
        logger.info(
            "Round %d resolved: %s (answer %s)",
            self.state.round, outcome.kind.value, outcome.correct_count,
            extra={
                "round": self.state.round,
                "outcome": outcome.kind.value,
                "score": self.state.score,
                "best": self.state.best,
            },
        )
        self.presenter.show_outcome(outcome)

    def _transition(self, event: RoundEvent) -> None:
        self.state.phase = self.state_machine.transition(event)

    def _sync_scores(self) -> None:
        self.state.score = self.scores.score
        self.state.best = self.scores.best

    def _emit_hud(self) -> None:
        self.presenter.update_hud(self.snapshot())

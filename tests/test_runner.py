# Area: Runtime Tests
"""Tests for GameRunner — command handling and the input loop."""

import io
from unittest.mock import patch

import pytest

from car_counter.console import ConsolePresenter
from car_counter.errors import ConfigError
from car_counter.runner import GameRunner
from car_counter._core.enums import OutcomeKind, RoundPhase
from car_counter._shared.display import NEXT_ROUND_HINT
from car_counter._shared.logging_config import is_quiet_mode_enabled
from car_counter._store.repo_best_score import BestScoreRepository, MemoryBestScoreStore


MOCK_TIME = "car_counter._core.round_timer.time"


class ScriptedInput:
    """Line source without a file descriptor, so reads block like a console.

    Each step is a line, or a callable run at read time that returns one.
    """

    def __init__(self, steps):
        self.steps = list(steps)

    def readline(self):
        if not self.steps:
            return ""
        step = self.steps.pop(0)
        return step() if callable(step) else step


@pytest.fixture
def runner(presenter, store):
    return GameRunner(
        config={"setup_logging": False, "seed": 5},
        presenter=presenter,
        store=store,
    )


class TestGameRunnerInit:
    """Tests for wiring."""

    def test_config_reaches_controller(self, presenter, store):
        runner = GameRunner(
            config={"setup_logging": False, "start_time_limit": 20},
            presenter=presenter,
            store=store,
        )
        assert runner.game_config.start_time_limit == 20
        assert runner.controller.config is runner.game_config

    def test_invalid_config_raises(self, presenter, store):
        with pytest.raises(ConfigError):
            GameRunner(config={"setup_logging": False, "min_items": 0},
                       presenter=presenter, store=store)

    def test_no_save_uses_memory_store(self, presenter):
        runner = GameRunner(config={"setup_logging": False, "no_save": True},
                            presenter=presenter)
        assert isinstance(runner.store, MemoryBestScoreStore)

    def test_default_store_is_sqlite(self, presenter, tmp_path):
        db_path = str(tmp_path / "scores.db")
        runner = GameRunner(config={"setup_logging": False, "db_path": db_path},
                            presenter=presenter)
        assert isinstance(runner.store, BestScoreRepository)
        assert runner.store.db_path == db_path

    def test_default_presenter_is_console(self, store):
        runner = GameRunner(config={"setup_logging": False, "icon": "C"}, store=store)
        assert isinstance(runner.presenter, ConsolePresenter)
        assert runner.presenter.icon == "C"


class TestHandleLine:
    """Tests for command dispatch."""

    def test_play_starts_game(self, runner):
        assert runner.handle_line("p\n") is True
        assert runner.controller.phase == RoundPhase.ROUND_ACTIVE

    def test_enter_in_menu_starts_game(self, runner):
        runner.handle_line("\n")
        assert runner.controller.phase == RoundPhase.ROUND_ACTIVE

    def test_answer_in_menu_is_ignored(self, runner):
        runner.handle_line("12")
        assert runner.controller.phase == RoundPhase.IDLE

    def test_quit(self, runner):
        assert runner.handle_line("q") is False
        assert runner.handle_line(" Q ") is False

    def test_answer_is_submitted(self, runner, presenter):
        runner.handle_line("p")
        count = runner.controller.state.current_item_count
        runner.handle_line(f"{count}\n")
        assert presenter.outcomes[-1].kind == OutcomeKind.CORRECT
        assert runner.controller.phase == RoundPhase.ROUND_RESOLVED

    def test_enter_after_resolution_advances(self, runner):
        runner.handle_line("p")
        runner.handle_line("0")
        runner.handle_line("")
        assert runner.controller.state.round == 2
        assert runner.controller.phase == RoundPhase.ROUND_ACTIVE

    def test_enter_during_round_is_validation_error(self, runner, presenter):
        runner.handle_line("p")
        runner.handle_line("")
        assert presenter.outcomes[-1].kind == OutcomeKind.VALIDATION_ERROR
        assert runner.controller.phase == RoundPhase.ROUND_ACTIVE

    def test_next_during_round_does_nothing(self, runner):
        runner.handle_line("p")
        runner.handle_line("n")
        assert runner.controller.state.round == 1
        assert runner.controller.phase == RoundPhase.ROUND_ACTIVE

    def test_restart(self, runner):
        runner.handle_line("p")
        runner.handle_line("0")
        runner.handle_line("n")
        runner.handle_line("r")
        assert runner.controller.state.round == 1

    def test_menu(self, runner):
        runner.handle_line("p")
        runner.handle_line("m")
        assert runner.controller.phase == RoundPhase.IDLE
        assert runner.controller.timer.is_running is False


class TestRun:
    """Tests for the input loop."""

    def test_play_then_quit(self, presenter, store):
        runner = GameRunner(
            config={"setup_logging": False, "poll_interval": 0.0},
            presenter=presenter,
            store=store,
            input_stream=io.StringIO("p\nq\n"),
        )
        runner.run()
        assert len(presenter.items) == 1
        assert runner.controller.timer.is_running is False
        assert is_quiet_mode_enabled() is False

    def test_end_of_input_quits(self, presenter, store):
        runner = GameRunner(
            config={"setup_logging": False, "poll_interval": 0.0},
            presenter=presenter,
            store=store,
            input_stream=io.StringIO("p\n"),
        )
        runner.run()
        assert runner.controller.timer.is_running is False

    def test_menu_shown_on_console(self, store):
        output = io.StringIO()
        runner = GameRunner(
            config={"setup_logging": False},
            presenter=ConsolePresenter(stream=output, color=False),
            store=store,
            input_stream=io.StringIO("q\n"),
        )
        runner.run()
        assert "CAR COUNTER" in output.getvalue()

    def test_answer_after_deadline_times_out(self, presenter, store):
        with patch(MOCK_TIME) as mock_time:
            mock_time.monotonic.return_value = 0.0

            def late_correct_answer():
                # The player takes far longer than the round allows
                mock_time.monotonic.return_value = 100.0
                return f"{runner.controller.state.current_item_count}\n"

            runner = GameRunner(
                config={"setup_logging": False, "poll_interval": 0.0},
                presenter=presenter,
                store=store,
                input_stream=ScriptedInput(["p\n", late_correct_answer, "q\n"]),
            )
            runner.run()

        assert [o.kind for o in presenter.outcomes] == [OutcomeKind.TIMED_OUT]
        assert runner.controller.state.score == 0
        assert runner.controller.state.time_left == 0

    def test_answer_in_time_counts(self, presenter, store):
        with patch(MOCK_TIME) as mock_time:
            mock_time.monotonic.return_value = 0.0

            def prompt_answer():
                mock_time.monotonic.return_value = 2.5
                return f"{runner.controller.state.current_item_count}\n"

            runner = GameRunner(
                config={"setup_logging": False, "poll_interval": 0.0},
                presenter=presenter,
                store=store,
                input_stream=ScriptedInput(["p\n", prompt_answer, "q\n"]),
            )
            runner.run()

        assert [o.kind for o in presenter.outcomes] == [OutcomeKind.CORRECT]
        assert runner.controller.state.time_left == 12


class TestNextRoundHint:
    """The console is told how to move on once a round is resolved."""

    @pytest.fixture
    def output(self):
        return io.StringIO()

    @pytest.fixture
    def console_runner(self, output, store):
        return GameRunner(
            config={"setup_logging": False, "seed": 5},
            presenter=ConsolePresenter(stream=output, color=False),
            store=store,
        )

    def test_hint_after_answer(self, console_runner, output):
        console_runner.handle_line("p")
        console_runner.handle_line("0")
        assert output.getvalue().endswith(NEXT_ROUND_HINT + "\n")

    def test_no_hint_after_rejected_answer(self, console_runner, output):
        console_runner.handle_line("p")
        console_runner.handle_line("abc")
        assert NEXT_ROUND_HINT not in output.getvalue()

    def test_hint_after_expiry(self, console_runner, output):
        with patch(MOCK_TIME) as mock_time:
            mock_time.monotonic.return_value = 0.0
            console_runner.handle_line("p")
            mock_time.monotonic.return_value = 100.0
            console_runner._poll_timer()
        assert console_runner.controller.phase == RoundPhase.ROUND_RESOLVED
        assert output.getvalue().endswith(NEXT_ROUND_HINT + "\n")

# Area: Core Tests
"""Tests for RoundOutcome constructors and properties."""

from car_counter._core.enums import OutcomeKind
from car_counter._core.outcome import RoundOutcome


class TestRoundOutcome:
    """Unit tests for the outcome value object."""

    def test_correct(self):
        outcome = RoundOutcome.correct(8, best_improved=True)
        assert outcome.kind == OutcomeKind.CORRECT
        assert outcome.submitted == 8
        assert outcome.is_correct is True
        assert outcome.resolves_round is True

    def test_incorrect_and_timed_out_resolve(self):
        for outcome in (RoundOutcome.incorrect(8, 5), RoundOutcome.timed_out(8)):
            assert outcome.correct_count == 8
            assert outcome.is_correct is False
            assert outcome.resolves_round is True
            assert outcome.best_improved is False

    def test_validation_error_keeps_round_open(self):
        outcome = RoundOutcome.validation_error("abc", "not a whole number")
        assert outcome.resolves_round is False
        assert outcome.is_correct is False
        assert outcome.correct_count is None
        assert outcome.reason == "not a whole number"

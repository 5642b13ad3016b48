"""
car_counter._core.outcome — Round outcome events
================================================

A RoundOutcome is produced once per resolution and once per rejected
submission, and handed to the presenter.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Optional

from .enums import OutcomeKind


@dataclass(frozen=True)
class RoundOutcome:
    """
    Result of a submission or of the countdown expiring.

    Fields
    ------
    kind : OutcomeKind
        How the round was judged.
    correct_count : int or None
        The hidden item count. None only for validation errors.
    submitted : int or None
        The parsed guess, for CORRECT and INCORRECT.
    raw_input : Any
        What the player typed, for VALIDATION_ERROR.
    reason : str or None
        Why the input was rejected, for VALIDATION_ERROR.
    best_improved : bool
        True when a CORRECT answer raised the best score.
    """
    kind: OutcomeKind
    correct_count: Optional[int] = None
    submitted: Optional[int] = None
    raw_input: Any = None
    reason: Optional[str] = None
    best_improved: bool = False

    @property
    def resolves_round(self) -> bool:
        return self.kind is not OutcomeKind.VALIDATION_ERROR

    @property
    def is_correct(self) -> bool:
        return self.kind is OutcomeKind.CORRECT

    @classmethod
    def correct(cls, count: int, best_improved: bool = False) -> "RoundOutcome":
        return cls(OutcomeKind.CORRECT, correct_count=count, submitted=count,
                   best_improved=best_improved)

    @classmethod
    def incorrect(cls, count: int, submitted: int) -> "RoundOutcome":
        return cls(OutcomeKind.INCORRECT, correct_count=count, submitted=submitted)

    @classmethod
    def timed_out(cls, count: int) -> "RoundOutcome":
        return cls(OutcomeKind.TIMED_OUT, correct_count=count)

    @classmethod
    def validation_error(cls, raw_input: Any, reason: str) -> "RoundOutcome":
        return cls(OutcomeKind.VALIDATION_ERROR, raw_input=raw_input, reason=reason)

"""
car_counter.errors — Custom exception classes
==============================================

Defines the exception hierarchy for the game.
Each exception stores enough context for structured logging.

None of these errors ends a game in progress:

- InvalidAnswerError is turned into a validation outcome by the controller.
- StorageError is logged by the score tracker and the game carries on.
- ConfigError is raised before any game starts.
"""

from __future__ import annotations
from typing import Any, Dict, List, Optional

from .error_formatter import format_error_block


class CarCounterError(Exception):
    """Base exception for all car_counter errors."""
    pass


class InvalidAnswerError(CarCounterError):
    """Raised when a submitted answer is not a non-negative integer."""

    def __init__(self, raw_input: Any, reason: str):
        self.raw_input = raw_input
        self.reason = reason
        super().__init__(f"Invalid answer {raw_input!r}: {reason}")


class StorageError(CarCounterError):
    """Raised when the best-score store cannot be read or written."""

    def __init__(self, operation: str, key: str, cause: Optional[BaseException] = None):
        self.operation = operation
        self.key = key
        self.cause = cause
        detail = f": {cause}" if cause is not None else ""
        super().__init__(f"Storage {operation} failed for key '{key}'{detail}")


class ConfigError(CarCounterError):
    """Raised when the game configuration is invalid."""

    def __init__(self, errors: List[str], payload: Optional[Dict[str, Any]] = None):
        self.errors = errors
        self.payload = payload
        super().__init__(f"Invalid configuration: {errors}")

    def format_error_log(self) -> str:
        return format_error_block(
            error_type="INVALID_CONFIGURATION",
            source="GameConfig",
            payload=self.payload,
            errors=self.errors,
        )

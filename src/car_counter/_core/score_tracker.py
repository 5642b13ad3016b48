# Area: Core
"""
car_counter._core.score_tracker — Score and best score
======================================================

Holds the current score of the session and the best score across
sessions. The best score is loaded from a store when the tracker is
created and written back only when the score beats it.

Storage problems never reach the game: a failed read counts as a best
of 0, a failed write leaves the best un-persisted for this session.
"""

from __future__ import annotations

import logging
from typing import Protocol

from ..errors import StorageError

logger = logging.getLogger("car_counter.scores")


class BestScoreStore(Protocol):
    """What the tracker needs from a best score store."""

    def load_best(self, key: str) -> int: ...

    def save_best(self, key: str, best: int) -> None: ...


class ScoreTracker:
    """
    Current score plus the persisted best score.

    Args:
        store: Where the best score is persisted
        key: Storage key of the best score
    """

    def __init__(self, store: BestScoreStore, key: str):
        self.store = store
        self.key = key
        self.score = 0
        self.best = self._load_best()

    def _load_best(self) -> int:
        try:
            best = self.store.load_best(self.key)
        except StorageError as e:
            logger.warning(f"Could not load best score, starting from 0: {e}")
            return 0
        if not isinstance(best, int) or best < 0:
            logger.warning(f"Ignoring unusable stored best score {best!r}")
            return 0
        return best

    def record_round_result(self, correct: bool) -> None:
        """Count a resolved round; only correct answers score."""
        if correct:
            self.score += 1

    def maybe_update_best(self) -> bool:
        """
        Raise the best score to the current score if it was beaten.

        Returns:
            True if the best score changed
        """
        if self.score <= self.best:
            return False
        self.best = self.score
        try:
            self.store.save_best(self.key, self.best)
        except StorageError as e:
            logger.warning(f"Best score {self.best} not persisted: {e}")
        return True

    def reset(self) -> None:
        """Start a new session score. The best score is kept."""
        self.score = 0

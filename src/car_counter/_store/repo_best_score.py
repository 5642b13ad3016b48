# Area: Store
"""
car_counter._store.repo_best_score — Best score storage
=======================================================

Durable storage of the best score under a fixed key.

Reading is forgiving: a missing row or a value that is not a
non-negative integer reads as 0. Database failures surface as
StorageError and are handled by the ScoreTracker.
"""

import logging
import re
import sqlite3
from typing import Dict, Optional

from ..errors import StorageError
from .database import BaseRepository, DEFAULT_DB_PATH, init_database

logger = logging.getLogger("car_counter.store")

_DIGITS_RE = re.compile(r"[0-9]+")


def parse_best(value: Optional[str]) -> int:
    """Interpret a stored value as a best score; anything unusable is 0."""
    if value is None:
        return 0
    text = str(value).strip()
    if not _DIGITS_RE.fullmatch(text):
        return 0
    try:
        return int(text)
    except ValueError:
        # Longer than the interpreter's int string conversion limit
        return 0


class BestScoreRepository(BaseRepository):
    """
    Repository for best scores in the kv_store table.

    The schema is created lazily on first use.
    """

    def __init__(self, db_path: str = DEFAULT_DB_PATH):
        super().__init__(db_path)
        self._initialized = False

    def _ensure_schema(self) -> None:
        if not self._initialized:
            init_database(self.db_path)
            self._initialized = True

    def load_best(self, key: str) -> int:
        """
        Load the best score stored under ``key``.

        Raises:
            StorageError: If the database cannot be read
        """
        try:
            self._ensure_schema()
            row = self._fetch_one("SELECT value FROM kv_store WHERE key = ?", (key,))
        except (sqlite3.Error, OSError) as e:
            raise StorageError("read", key, e) from e
        best = parse_best(row["value"] if row else None)
        logger.debug("Loaded best=%d for %s", best, key)
        return best

    def save_best(self, key: str, best: int) -> None:
        """
        Store ``best`` under ``key``, replacing any previous value.

        Raises:
            StorageError: If the database cannot be written
        """
        query = """
            INSERT INTO kv_store (key, value, updated_at)
            VALUES (?, ?, CURRENT_TIMESTAMP)
            ON CONFLICT(key) DO UPDATE
            SET value = excluded.value, updated_at = CURRENT_TIMESTAMP
        """
        try:
            self._ensure_schema()
            self._execute(query, (key, str(best)))
        except (sqlite3.Error, OSError) as e:
            raise StorageError("write", key, e) from e
        logger.info("Saved best=%d for %s", best, key)

    def clear(self, key: str) -> None:
        """Remove the record stored under ``key``."""
        try:
            self._ensure_schema()
            self._execute("DELETE FROM kv_store WHERE key = ?", (key,))
        except (sqlite3.Error, OSError) as e:
            raise StorageError("delete", key, e) from e
        logger.info("Cleared best score for %s", key)


class MemoryBestScoreStore:
    """In-process best score store for sessions that should not persist."""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._values: Dict[str, str] = dict(initial or {})

    def load_best(self, key: str) -> int:
        return parse_best(self._values.get(key))

    def save_best(self, key: str, best: int) -> None:
        self._values[key] = str(best)

    def clear(self, key: str) -> None:
        self._values.pop(key, None)

# Area: Store
"""
car_counter._store — Best score persistence
===========================================

SQLite-backed key-value storage for the best score, plus an
in-memory store for sessions that should not persist.
"""

from .database import init_database, get_connection, BaseRepository, DEFAULT_DB_PATH
from .repo_best_score import BestScoreRepository, MemoryBestScoreStore, parse_best

__all__ = [
    "init_database",
    "get_connection",
    "BaseRepository",
    "DEFAULT_DB_PATH",
    "BestScoreRepository",
    "MemoryBestScoreStore",
    "parse_best",
]

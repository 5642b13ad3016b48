# Area: Store
"""
car_counter._store.database — Database Initialization
=====================================================

Handles SQLite database initialization and connection management
for the persisted key-value records.
"""

import sqlite3
from contextlib import closing
import logging
from pathlib import Path
from typing import Optional

logger = logging.getLogger("car_counter.store.database")

# Path to schema file
SCHEMA_PATH = Path(__file__).parent / "schema.sql"

DEFAULT_DB_PATH = "car_counter.db"


def get_connection(db_path: str = DEFAULT_DB_PATH) -> sqlite3.Connection:
    """
    Get a database connection.

    Args:
        db_path: Path to the SQLite database file

    Returns:
        SQLite connection with row factory set
    """
    conn = sqlite3.connect(db_path)
    conn.row_factory = sqlite3.Row
    return conn


def init_database(db_path: str = DEFAULT_DB_PATH) -> None:
    """
    Initialize the database with schema. Safe to call repeatedly.

    Args:
        db_path: Path to the SQLite database file
    """
    parent = Path(db_path).parent
    if str(parent) not in ("", "."):
        parent.mkdir(parents=True, exist_ok=True)
    conn = get_connection(db_path)
    try:
        schema = SCHEMA_PATH.read_text(encoding="utf-8")
        conn.executescript(schema)
        conn.commit()
        logger.info(f"Database initialized at {db_path}")
    finally:
        conn.close()


class BaseRepository:
    """
    Base class for repositories backed by one SQLite file.

    Each call opens and closes its own connection.
    """

    def __init__(self, db_path: str = DEFAULT_DB_PATH):
        self.db_path = db_path

    def _get_conn(self) -> sqlite3.Connection:
        return get_connection(self.db_path)

    def _execute(self, query: str, params: tuple = ()) -> None:
        """Execute a write statement and commit it."""
        with closing(self._get_conn()) as conn:
            conn.execute(query, params)
            conn.commit()

    def _fetch_one(self, query: str, params: tuple = ()) -> Optional[dict]:
        """Execute a query and return the first row as a dict, if any."""
        with closing(self._get_conn()) as conn:
            row = conn.execute(query, params).fetchone()
        return dict(row) if row is not None else None

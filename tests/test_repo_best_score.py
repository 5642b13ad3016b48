# Area: Store Tests
"""Tests for the SQLite best score repository."""

import os
import sqlite3
import tempfile
from unittest.mock import patch

import pytest

from car_counter.errors import StorageError
from car_counter._store.database import get_connection, init_database
from car_counter._store.repo_best_score import BestScoreRepository, parse_best


KEY = "carCounterBestScore"


class TestBestScoreRepository:
    """Tests for BestScoreRepository class."""

    @pytest.fixture
    def db_path(self):
        """Create temporary database path for testing."""
        fd, path = tempfile.mkstemp(suffix=".db")
        os.close(fd)
        yield path
        os.unlink(path)

    @pytest.fixture
    def repo(self, db_path):
        """Create repository with test database."""
        return BestScoreRepository(db_path)

    def test_missing_key_reads_zero(self, repo):
        assert repo.load_best(KEY) == 0

    def test_save_and_load(self, repo):
        repo.save_best(KEY, 7)
        assert repo.load_best(KEY) == 7

    def test_save_replaces_previous(self, repo):
        repo.save_best(KEY, 3)
        repo.save_best(KEY, 9)
        assert repo.load_best(KEY) == 9

    def test_survives_new_repository_instance(self, db_path, repo):
        repo.save_best(KEY, 12)
        assert BestScoreRepository(db_path).load_best(KEY) == 12

    def test_keys_are_independent(self, repo):
        repo.save_best(KEY, 4)
        assert repo.load_best("otherGame") == 0

    def test_corrupt_value_reads_zero(self, db_path):
        init_database(db_path)
        conn = get_connection(db_path)
        conn.execute("INSERT INTO kv_store (key, value) VALUES (?, ?)", (KEY, "lots"))
        conn.commit()
        conn.close()
        assert BestScoreRepository(db_path).load_best(KEY) == 0

    @pytest.mark.parametrize("value", ["²", "9" * 5000])
    def test_unconvertible_digits_read_zero(self, db_path, value):
        init_database(db_path)
        conn = get_connection(db_path)
        conn.execute("INSERT INTO kv_store (key, value) VALUES (?, ?)", (KEY, value))
        conn.commit()
        conn.close()
        assert BestScoreRepository(db_path).load_best(KEY) == 0

    def test_clear(self, repo):
        repo.save_best(KEY, 5)
        repo.clear(KEY)
        assert repo.load_best(KEY) == 0

    def test_database_error_becomes_storage_error(self, repo):
        with patch(
            "car_counter._store.database.sqlite3.connect",
            side_effect=sqlite3.OperationalError("unable to open database file"),
        ):
            with pytest.raises(StorageError) as exc_info:
                repo.save_best(KEY, 1)
        assert exc_info.value.operation == "write"
        assert exc_info.value.key == KEY


class TestParseBest:
    """Stored values that are not non-negative integers read as 0."""

    @pytest.mark.parametrize("value, expected", [
        (None, 0),
        ("", 0),
        ("abc", 0),
        ("-3", 0),
        ("2.5", 0),
        ("0", 0),
        ("15", 15),
        (" 8 ", 8),
        ("²", 0),
        ("٣", 0),
        ("9" * 5000, 0),
    ])
    def test_parse_best(self, value, expected):
        assert parse_best(value) == expected

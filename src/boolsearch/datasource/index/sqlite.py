"""
SQLite-based Term Index.

This module provides a persistent term index using SQLite. Each row holds
the number of occurrences of one term in one document.

Features:
- Thread-safe operations with locking
- Connection reuse for better performance
- Context manager support for proper resource cleanup
- Configurable connection timeout

Example:
    Using context manager (recommended):

    >>> with SQLiteTermIndex(db_path="./terms.db") as index:
    ...     index.add_counts("https://en.wikipedia.org/wiki/Java", {"java": 3})
    ...     counts = index.lookup_term("java")
    >>> # Connection automatically closed
"""

import contextlib
import sqlite3
import threading
from collections.abc import Mapping
from pathlib import Path

from loguru import logger

from boolsearch.utils.text import normalize_term

from .base import BaseTermIndex


class SQLiteTermIndex(BaseTermIndex):
    """
    Persistent Term Index using SQLite.

    This implementation uses a single reusable connection with proper
    thread synchronization to avoid "database is locked" errors in
    concurrent scenarios.

    Attributes:
        db_path: Path to the SQLite database file
        table_name: Name of the table storing term counts
        timeout: Connection timeout in seconds (default: 30.0)
    """

    def __init__(
        self,
        db_path: str = "term_index.db",
        table_name: str = "term_counts",
        timeout: float = 30.0
    ):
        """
        Initialize SQLite term index.

        Args:
            db_path: Path to SQLite database file (":memory:" for a throwaway index)
            table_name: Table name for term counts
            timeout: Connection timeout in seconds (default: 30.0)
        """
        super().__init__()
        self.db_path = db_path
        self.table_name = table_name
        self.timeout = timeout
        self._lock = threading.RLock()

        if db_path != ":memory:":
            Path(db_path).parent.mkdir(parents=True, exist_ok=True)

        self._connection = sqlite3.connect(
            self.db_path,
            timeout=self.timeout,
            check_same_thread=False  # Allow multi-thread access with our lock
        )
        # Enable WAL mode for better concurrent read performance
        self._connection.execute("PRAGMA journal_mode=WAL")

        self._init_db()
        logger.debug(f"SQLiteTermIndex initialized: {db_path}, table={table_name}")

    def _init_db(self) -> None:
        with self._lock:
            self._connection.execute(f"""
                CREATE TABLE IF NOT EXISTS {self.table_name} (
                    term TEXT NOT NULL,
                    doc_id TEXT NOT NULL,
                    count INTEGER NOT NULL CHECK (count > 0),
                    PRIMARY KEY (term, doc_id)
                )
            """)
            self._connection.execute(
                f"CREATE INDEX IF NOT EXISTS idx_{self.table_name}_doc ON {self.table_name} (doc_id)"
            )
            self._connection.commit()

    def lookup_term(self, term: str) -> dict[str, int]:
        self._check_closed()
        query = f"SELECT doc_id, count FROM {self.table_name} WHERE term = ?"

        with self._lock:
            cursor = self._connection.execute(query, (normalize_term(term),))
            rows = cursor.fetchall()

        return {doc_id: count for doc_id, count in rows}

    def add_counts(self, doc_id: str, counts: Mapping[str, int]) -> None:
        self._check_closed()
        prepared = self._prepare_counts(counts)
        params = [(term, doc_id, count) for term, count in prepared.items()]

        with self._lock:
            # One transaction: readers never see a half-replaced document
            with self._connection:
                self._connection.execute(f"DELETE FROM {self.table_name} WHERE doc_id = ?", (doc_id,))
                self._connection.executemany(
                    f"INSERT INTO {self.table_name} (term, doc_id, count) VALUES (?, ?, ?)",
                    params,
                )
        logger.debug(f"Indexed {len(params)} terms for document {doc_id}")

    def delete_document(self, doc_id: str) -> None:
        self._check_closed()
        with self._lock:
            with self._connection:
                self._connection.execute(f"DELETE FROM {self.table_name} WHERE doc_id = ?", (doc_id,))

    def close(self) -> None:
        """
        Close the database connection.

        After calling close(), the index cannot be used. Any subsequent
        operation raises IndexStoreError.
        """
        if self._closed:
            return

        with self._lock:
            try:
                self._connection.close()
                logger.debug(f"SQLiteTermIndex connection closed: {self.db_path}")
            except sqlite3.Error as e:
                logger.warning(f"Error closing SQLiteTermIndex connection: {e}")
            finally:
                self._closed = True

    def __del__(self):
        # __del__ is not guaranteed to be called
        if not getattr(self, "_closed", True):
            with contextlib.suppress(Exception):
                self.close()

import threading
from collections.abc import Mapping
from pathlib import Path

from loguru import logger

from boolsearch.utils.text import normalize_term

from .base import BaseTermIndex

try:
    import duckdb
    DUCKDB_AVAILABLE = True
except ImportError:
    DUCKDB_AVAILABLE = False


class DuckDBTermIndex(BaseTermIndex):
    """
    DuckDB implementation of the term index.
    Stores one row per (term, document) with its occurrence count.

    The single connection is shared between threads; every use of it
    holds the index lock, so transactions never interleave.
    """

    def __init__(
        self,
        database_path: str = ":memory:",  # or path to db file
        table_name: str = "term_counts"
    ):
        super().__init__()
        if not DUCKDB_AVAILABLE:
            raise ImportError("duckdb is required. Install with: pip install 'boolsearch[duckdb]'")

        self.database_path = database_path
        self.table_name = table_name
        self._lock = threading.RLock()

        if database_path != ":memory:":
            Path(database_path).parent.mkdir(parents=True, exist_ok=True)

        self._connection = duckdb.connect(self.database_path)
        self._init_db()
        logger.debug(f"DuckDBTermIndex initialized: {database_path}, table={table_name}")

    def _init_db(self):
        # Uniqueness of (term, doc_id) is kept by add_counts replacing whole documents
        schema = f"""
        CREATE TABLE IF NOT EXISTS {self.table_name} (
            term VARCHAR NOT NULL,
            doc_id VARCHAR NOT NULL,
            count INTEGER NOT NULL
        )
        """
        with self._lock:
            self._connection.execute(schema)

    def lookup_term(self, term: str) -> dict[str, int]:
        self._check_closed()
        sql = f"SELECT doc_id, count FROM {self.table_name} WHERE term = ?"
        with self._lock:
            rows = self._connection.execute(sql, [normalize_term(term)]).fetchall()
        return {doc_id: count for doc_id, count in rows}

    def add_counts(self, doc_id: str, counts: Mapping[str, int]) -> None:
        self._check_closed()
        prepared = self._prepare_counts(counts)
        data = [(term, doc_id, count) for term, count in prepared.items()]

        with self._lock:
            self._connection.begin()
            try:
                self._connection.execute(f"DELETE FROM {self.table_name} WHERE doc_id = ?", [doc_id])
                if data:
                    self._connection.executemany(f"INSERT INTO {self.table_name} VALUES (?, ?, ?)", data)
                self._connection.commit()
            except duckdb.Error:
                self._connection.rollback()
                raise
        logger.debug(f"Indexed {len(data)} terms for document {doc_id}")

    def delete_document(self, doc_id: str) -> None:
        self._check_closed()
        with self._lock:
            self._connection.execute(f"DELETE FROM {self.table_name} WHERE doc_id = ?", [doc_id])

    def close(self) -> None:
        if self._closed:
            return
        with self._lock:
            try:
                self._connection.close()
                logger.debug(f"DuckDBTermIndex connection closed: {self.database_path}")
            finally:
                self._closed = True

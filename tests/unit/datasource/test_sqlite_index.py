import sqlite3
from concurrent.futures import ThreadPoolExecutor

import pytest

from boolsearch.datasource.index.sqlite import SQLiteTermIndex
from boolsearch.errors import IndexStoreError


class TestSQLiteTermIndex:

    def test_lookup(self, sqlite_index):
        assert sqlite_index.lookup_term("java") == {"docA": 3, "docB": 1}
        assert sqlite_index.lookup_term("Programming") == {"docB": 2, "docC": 5}

    def test_unindexed_term_is_empty(self, sqlite_index):
        assert sqlite_index.lookup_term("cobol") == {}

    def test_persistence(self, sqlite_db_path):
        # Instance 1: Write
        with SQLiteTermIndex(db_path=str(sqlite_db_path)) as index:
            index.add_counts("https://example.org/java", {"java": 4})

        # Instance 2: Read
        with SQLiteTermIndex(db_path=str(sqlite_db_path)) as index:
            assert index.lookup_term("java") == {"https://example.org/java": 4}

    def test_add_counts_replaces_document(self, sqlite_index):
        sqlite_index.add_counts("docA", {"coffee": 4})
        assert sqlite_index.lookup_term("java") == {"docB": 1}
        assert sqlite_index.lookup_term("coffee") == {"docA": 4}

    def test_zero_counts_not_stored(self, sqlite_index):
        sqlite_index.add_counts("docD", {"java": 0})
        assert "docD" not in sqlite_index.lookup_term("java")

    def test_delete_document(self, sqlite_index):
        sqlite_index.delete_document("docC")
        assert sqlite_index.lookup_term("programming") == {"docB": 2}

    def test_special_chars_in_doc_id(self, tmp_path):
        with SQLiteTermIndex(db_path=str(tmp_path / "special.db")) as index:
            doc_id = "https://example.org/?q='; DROP TABLE term_counts; --"
            index.add_counts(doc_id, {"java": 1})
            assert index.lookup_term("java") == {doc_id: 1}

    def test_concurrency(self, tmp_path):
        index = SQLiteTermIndex(db_path=str(tmp_path / "concurrent.db"))

        def write_task(i):
            index.add_counts(f"doc_{i}", {"java": i + 1})

        count = 50
        with ThreadPoolExecutor(max_workers=8) as executor:
            list(executor.map(write_task, range(count)))

        counts = index.lookup_term("java")
        assert len(counts) == count
        assert counts["doc_0"] == 1
        index.close()

    def test_in_memory_database(self):
        with SQLiteTermIndex(db_path=":memory:") as index:
            index.index_text("page", "java java")
            assert index.lookup_term("java") == {"page": 2}

    def test_close_idempotent(self, sqlite_db_path):
        index = SQLiteTermIndex(db_path=str(sqlite_db_path))
        index.close()
        index.close()
        assert index.closed is True

    def test_closed_index_raises(self, sqlite_db_path):
        index = SQLiteTermIndex(db_path=str(sqlite_db_path))
        index.close()
        with pytest.raises(IndexStoreError):
            index.lookup_term("java")

    def test_schema(self, sqlite_index, sqlite_db_path):
        conn = sqlite3.connect(sqlite_db_path)
        try:
            columns = [row[1] for row in conn.execute("PRAGMA table_info(term_counts)")]
        finally:
            conn.close()
        assert columns == ["term", "doc_id", "count"]

"""Pytest configuration and global fixtures for boolsearch tests."""

from pathlib import Path

import pytest

from boolsearch.datasource.index.in_memory import InMemoryTermIndex
from boolsearch.datasource.index.sqlite import SQLiteTermIndex

# Import shared fixtures
from tests.fixtures.common import (  # noqa: F401
    java_result,
    programming_result,
    empty_result,
    sample_pages,
    sample_counts,
)


# ==================== Index Fixtures ====================

@pytest.fixture
def in_memory_index(sample_counts):
    index = InMemoryTermIndex()
    for doc_id, counts in sample_counts.items():
        index.add_counts(doc_id, counts)
    yield index
    index.close()


@pytest.fixture
def sqlite_db_path(tmp_path) -> Path:
    return tmp_path / "term_index.db"


@pytest.fixture
def sqlite_index(sqlite_db_path, sample_counts):
    index = SQLiteTermIndex(db_path=str(sqlite_db_path))
    for doc_id, counts in sample_counts.items():
        index.add_counts(doc_id, counts)
    yield index
    index.close()


@pytest.fixture
def failing_index(mocker):
    """An index whose lookups always blow up like an unreachable store."""
    from boolsearch.datasource.index.base import BaseTermIndex
    mock = mocker.Mock(spec=BaseTermIndex)
    mock.lookup_term.side_effect = ConnectionRefusedError("connection refused by index host")
    return mock

# ==================== Pytest Configuration ====================

def pytest_configure(config):
    config.addinivalue_line("markers", "unit: Unit tests")
    config.addinivalue_line("markers", "integration: Integration tests")

def pytest_collection_modifyitems(config, items):
    for item in items:
        rel_path = Path(item.fspath).relative_to(Path(__file__).parent)
        if "unit" in rel_path.parts:
            item.add_marker(pytest.mark.unit)
        elif "integration" in rel_path.parts:
            item.add_marker(pytest.mark.integration)

from .base import BaseTermIndex
from .duckdb import DuckDBTermIndex
from .factory import TermIndexFactory
from .in_memory import InMemoryTermIndex
from .sqlite import SQLiteTermIndex

__all__ = [
    "BaseTermIndex",
    "InMemoryTermIndex",
    "SQLiteTermIndex",
    "DuckDBTermIndex",
    "TermIndexFactory",
]

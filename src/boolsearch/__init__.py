"""
boolsearch - Boolean query algebra over term relevance results.

Look terms up in a term index, combine the results with OR / AND / MINUS,
and rank the outcome by relevance.
"""

__version__ = "0.1.0"

from .datasource.index import (
    BaseTermIndex,
    DuckDBTermIndex,
    InMemoryTermIndex,
    SQLiteTermIndex,
    TermIndexFactory,
)
from .engine import SearchEngine
from .entities import RankingStrategy, ScoreRanking, SearchResult, SortOrder
from .errors import (
    BoolSearchError,
    ConfigurationError,
    ExternalLookupError,
    IndexStoreError,
    is_retryable,
)
from .search import BooleanOperator, combine, search, search_all

__all__ = [
    # Version
    "__version__",
    # Algebra
    "SearchResult",
    "BooleanOperator",
    "combine",
    # Ranking
    "RankingStrategy",
    "ScoreRanking",
    "SortOrder",
    # Term lookup
    "search",
    "search_all",
    "SearchEngine",
    # Term indexes
    "BaseTermIndex",
    "InMemoryTermIndex",
    "SQLiteTermIndex",
    "DuckDBTermIndex",
    "TermIndexFactory",
    # Errors
    "BoolSearchError",
    "ExternalLookupError",
    "IndexStoreError",
    "ConfigurationError",
    "is_retryable",
]

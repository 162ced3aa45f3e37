"""Search Engine - owns the term index connection and runs queries against it."""

from collections.abc import Iterable

from loguru import logger

from .config.settings import Settings, settings as default_settings
from .datasource.index.base import BaseTermIndex
from .datasource.index.factory import TermIndexFactory
from .entities.ranking import Entry, RankingStrategy, SortOrder
from .entities.search_result import SearchResult
from .errors import ConfigurationError, IndexStoreError
from .search import BooleanOperator, search, search_all


class SearchEngine:
    """High-level entry point for boolean term queries.

    The engine is handed its term index explicitly and is responsible for
    closing it. Open it at startup, close it at shutdown (or use it as a
    context manager).

    Attributes:
        index: The term index every lookup goes to
        default_order: Ranking used by ``rank`` when no order is given
    """

    def __init__(
        self,
        index: BaseTermIndex,
        default_order: RankingStrategy | SortOrder | str = SortOrder.DESCENDING,
    ):
        self.index = index
        self.default_order = default_order
        self._closed = False
        logger.info(f"Search engine opened on {type(index).__name__}")

    @classmethod
    def from_settings(cls, settings: Settings | None = None, **index_params) -> "SearchEngine":
        """Build an engine and its index from settings.

        Raises:
            ConfigurationError: If the backend or sort order is unknown
        """
        settings = settings or default_settings
        try:
            order = SortOrder(settings.SORT_ORDER.lower())
        except ValueError as e:
            raise ConfigurationError(
                f"Invalid SORT_ORDER: '{settings.SORT_ORDER}'",
                details={"available": [o.value for o in SortOrder]},
                original_error=e,
            ) from e

        index = TermIndexFactory.create(settings.INDEX_BACKEND, config=settings, **index_params)
        return cls(index, default_order=order)

    def search(self, term: str) -> SearchResult:
        """Leaf result for one term."""
        self._check_closed()
        return search(term, self.index)

    def query(
        self,
        terms: Iterable[str],
        operator: BooleanOperator | str = BooleanOperator.AND,
    ) -> SearchResult:
        """Search every term and fold the results with ``operator``."""
        self._check_closed()
        return search_all(terms, self.index, operator)

    def rank(
        self,
        result: SearchResult,
        order: RankingStrategy | SortOrder | str | None = None,
    ) -> list[Entry]:
        """Order ``result`` for display; defaults to the engine's order."""
        return result.sort(order if order is not None else self.default_order)

    def close(self) -> None:
        """Close the underlying index. Safe to call more than once."""
        if self._closed:
            return
        self.index.close()
        self._closed = True
        logger.info("Search engine closed")

    def _check_closed(self) -> None:
        if self._closed:
            raise IndexStoreError("Cannot perform operation: SearchEngine has been closed")

    def __enter__(self) -> "SearchEngine":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

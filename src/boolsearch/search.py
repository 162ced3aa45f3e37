"""Building leaf results from a term index and folding them into queries."""

from collections.abc import Iterable, Mapping
from enum import StrEnum

from loguru import logger
from opentelemetry import trace
from pydantic import ValidationError

from .datasource.index.base import BaseTermIndex
from .entities.search_result import SearchResult
from .errors import ExternalLookupError, wrap_lookup_error
from .observability import trace_span


class BooleanOperator(StrEnum):
    """Combination operators of the query algebra."""
    OR = "or"
    AND = "and"
    MINUS = "minus"


@trace_span("boolsearch.search", attributes={"component": "search"})
def search(term: str, index: BaseTermIndex) -> SearchResult:
    """Look up ``term`` in ``index`` and wrap the counts in a leaf result.

    An unindexed term gives an empty result, not an error.

    Raises:
        ExternalLookupError: If the index cannot answer or answers garbage
    """
    trace.get_current_span().set_attribute("search.term", term)

    try:
        counts = index.lookup_term(term)
    except Exception as e:
        logger.error(f"Term lookup failed for '{term}': {e}")
        raise wrap_lookup_error(e, term) from e

    if not isinstance(counts, Mapping):
        raise ExternalLookupError(
            f"Index returned {type(counts).__name__} instead of a mapping for term '{term}'",
            term=term,
        )

    try:
        result = SearchResult.from_scores(counts)
    except ValidationError as e:
        raise ExternalLookupError(
            f"Index returned malformed counts for term '{term}'",
            term=term,
            original_error=e,
        ) from e

    trace.get_current_span().set_attribute("search.documents", len(result))
    logger.debug(f"Term '{term}' matched {len(result)} documents")
    return result


def combine(results: Iterable[SearchResult], operator: BooleanOperator | str = BooleanOperator.AND) -> SearchResult:
    """Left-fold ``results`` with one operator.

    ``combine([a, b, c], "minus")`` is ``(a - b) - c``. No results at all
    gives the empty result.
    """
    operator = BooleanOperator(operator)
    iterator = iter(results)
    try:
        combined = next(iterator)
    except StopIteration:
        return SearchResult.empty()

    for result in iterator:
        if operator is BooleanOperator.OR:
            combined = combined.or_(result)
        elif operator is BooleanOperator.AND:
            combined = combined.and_(result)
        else:
            combined = combined.minus(result)
    return combined


def search_all(
    terms: Iterable[str],
    index: BaseTermIndex,
    operator: BooleanOperator | str = BooleanOperator.AND,
) -> SearchResult:
    """Search every term and fold the leaf results with ``operator``."""
    return combine((search(term, index) for term in terms), operator)

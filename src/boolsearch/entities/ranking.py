"""Ranking strategies for ordering search results by relevance."""

from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable
from enum import StrEnum
from operator import itemgetter
from typing import Any

Entry = tuple[str, int]


class SortOrder(StrEnum):
    """Direction in which scores are ordered.

    Attributes:
        ASCENDING: Lowest score first
        DESCENDING: Highest score first
    """
    ASCENDING = "ascending"
    DESCENDING = "descending"


class RankingStrategy(ABC):
    """Turns (document, score) entries into an ordered list."""

    @abstractmethod
    def rank(self, entries: Iterable[Entry]) -> list[Entry]:
        """Return every entry exactly once, in ranked order."""
        pass


class ScoreRanking(RankingStrategy):
    """
    Orders entries by score.

    Sorting is stable: entries with equal scores keep their input order
    unless a ``tie_breaker`` is given, in which case ties are ordered by
    that key (always ascending, whatever the score direction).

    Example:
        >>> ranking = ScoreRanking(SortOrder.DESCENDING, tie_breaker=lambda e: e[0])
        >>> ranking.rank([("b", 3), ("a", 3), ("c", 5)])
        [('c', 5), ('a', 3), ('b', 3)]
    """

    def __init__(
        self,
        order: SortOrder = SortOrder.ASCENDING,
        tie_breaker: Callable[[Entry], Any] | None = None,
    ):
        self.order = SortOrder(order)
        self.tie_breaker = tie_breaker

    def rank(self, entries: Iterable[Entry]) -> list[Entry]:
        ranked = list(entries)
        if self.tie_breaker is not None:
            ranked.sort(key=self.tie_breaker)
        # reverse=True keeps equal elements in their current order
        ranked.sort(key=itemgetter(1), reverse=self.order is SortOrder.DESCENDING)
        return ranked

    def __repr__(self) -> str:
        return f"ScoreRanking(order={self.order.value!r}, tie_breaker={self.tie_breaker!r})"


def resolve_ranking(order: "RankingStrategy | SortOrder | str | None" = None) -> RankingStrategy:
    """
    Normalize the ``order`` argument accepted by ranking APIs.

    Args:
        order: None (ascending), a SortOrder, its string value, or a strategy

    Raises:
        ValueError: If ``order`` cannot be interpreted
    """
    if order is None:
        return ScoreRanking()
    if isinstance(order, RankingStrategy):
        return order
    if isinstance(order, str):
        try:
            return ScoreRanking(SortOrder(order.lower()))
        except ValueError:
            pass
    available = ", ".join(o.value for o in SortOrder)
    raise ValueError(f"Unknown sort order: {order!r}. Available orders: {available}")

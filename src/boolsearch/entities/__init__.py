"""Value types of the boolean query algebra."""

from .ranking import RankingStrategy, ScoreRanking, SortOrder, resolve_ranking
from .search_result import SearchResult

__all__ = [
    "SearchResult",
    "RankingStrategy",
    "ScoreRanking",
    "SortOrder",
    "resolve_ranking",
]

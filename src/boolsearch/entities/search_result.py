"""SearchResult entity: a sparse mapping from document to relevance score."""

from collections.abc import Mapping
from types import MappingProxyType
from typing import Annotated

from pydantic import AfterValidator, BaseModel, ConfigDict, Field, NonNegativeInt, field_serializer

from .ranking import Entry, RankingStrategy, SortOrder, resolve_ranking


def _read_only(scores: Mapping[str, int]) -> Mapping[str, int]:
    return MappingProxyType(dict(scores))


ScoreMap = Annotated[Mapping[str, NonNegativeInt], AfterValidator(_read_only)]


class SearchResult(BaseModel):
    """Relevance-scored set of documents produced by one or more terms.

    A result is built either from a single term's index lookup (a leaf
    result) or by combining two results with ``or_``, ``and_`` or
    ``minus``. Combinations always return a new instance and never touch
    their operands, so a result can be shared freely between readers.

    Missing documents have relevance 0. Explicit zero entries are accepted
    and read back as 0 as well, but they still count as keys for ``minus``.

    Attributes:
        scores: Document identifier -> non-negative relevance score

    Example:
        >>> java = SearchResult(scores={"docA": 3, "docB": 1})
        >>> programming = SearchResult(scores={"docB": 2, "docC": 5})
        >>> dict((java & programming).scores)
        {'docB': 3}
    """

    model_config = ConfigDict(frozen=True)

    # Validation copies the input mapping and hands out a read-only view of the copy
    scores: ScoreMap = Field(default_factory=dict, validate_default=True)

    @classmethod
    def from_scores(cls, scores: Mapping[str, int] | None = None) -> "SearchResult":
        """Build a result from any mapping; ``None`` means no documents."""
        return cls(scores=dict(scores or {}))

    @classmethod
    def empty(cls) -> "SearchResult":
        """The zero-document result."""
        return cls()

    def get_relevance(self, doc: str) -> int:
        """Relevance of ``doc``, or 0 if it is not part of this result."""
        return self.scores.get(doc) or 0

    def total_relevance(self, rel1: int, rel2: int) -> int:
        """Combine two relevance scores.

        Relevance is the sum of the term frequencies. Overrides must stay
        commutative and non-decreasing in each argument.
        """
        return rel1 + rel2

    def or_(self, other: "SearchResult") -> "SearchResult":
        """Union: every document relevant to either operand."""
        combined: dict[str, int] = {}
        # Own documents first, then the ones only ``other`` has
        for doc in dict.fromkeys([*self.scores, *other.scores]):
            combined[doc] = self.total_relevance(self.get_relevance(doc), other.get_relevance(doc))
        return self._derive(combined)

    def and_(self, other: "SearchResult") -> "SearchResult":
        """Intersection: documents of this result that ``other`` finds relevant."""
        combined: dict[str, int] = {}
        for doc in self.scores:
            # Nonzero relevance, not key presence
            if other.get_relevance(doc) != 0:
                combined[doc] = self.total_relevance(self.get_relevance(doc), other.get_relevance(doc))
        return self._derive(combined)

    def minus(self, other: "SearchResult") -> "SearchResult":
        """Difference: documents of this result that are not keys of ``other``."""
        remaining = {
            doc: self.get_relevance(doc)
            for doc in self.scores
            if doc not in other.scores
        }
        return self._derive(remaining)

    def sort(self, order: RankingStrategy | SortOrder | str | None = None) -> list[Entry]:
        """Entries as (document, score) pairs, ascending by score unless told otherwise.

        Args:
            order: A ``SortOrder`` (or its value) or any ``RankingStrategy``
        """
        return resolve_ranking(order).rank(self.scores.items())

    @property
    def documents(self) -> frozenset[str]:
        return frozenset(self.scores)

    def is_empty(self) -> bool:
        return not self.scores

    @field_serializer("scores")
    def _dump_scores(self, scores: Mapping[str, int]) -> dict[str, int]:
        return dict(scores)

    def _derive(self, scores: dict[str, int]) -> "SearchResult":
        return type(self)(scores=scores)

    def __hash__(self) -> int:
        return hash((type(self), frozenset(self.scores.items())))

    def __or__(self, other: "SearchResult") -> "SearchResult":
        if not isinstance(other, SearchResult):
            return NotImplemented
        return self.or_(other)

    def __and__(self, other: "SearchResult") -> "SearchResult":
        if not isinstance(other, SearchResult):
            return NotImplemented
        return self.and_(other)

    def __sub__(self, other: "SearchResult") -> "SearchResult":
        if not isinstance(other, SearchResult):
            return NotImplemented
        return self.minus(other)

    def __len__(self) -> int:
        return len(self.scores)

    def __contains__(self, doc: object) -> bool:
        return doc in self.scores

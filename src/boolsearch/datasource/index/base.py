from abc import ABC, abstractmethod
from collections.abc import Mapping

from boolsearch.errors import IndexStoreError
from boolsearch.utils.text import count_terms, normalize_term


class BaseTermIndex(ABC):
    """
    Abstract base class for term indexes.

    A term index maps a term to the documents containing it and the number
    of times it occurs in each. It is the only collaborator the search layer
    talks to; how it is populated and stored is up to the implementation.

    Terms are normalized with ``normalize_term`` on the way in and on lookup.
    Only strictly positive counts are stored.
    """

    def __init__(self):
        self._closed = False

    @abstractmethod
    def lookup_term(self, term: str) -> dict[str, int]:
        """
        Documents containing ``term`` and its occurrence count in each.

        Returns an empty dict when the term is not indexed.
        """
        pass

    @abstractmethod
    def add_counts(self, doc_id: str, counts: Mapping[str, int]) -> None:
        """Replace everything stored for ``doc_id`` with ``counts``."""
        pass

    @abstractmethod
    def delete_document(self, doc_id: str) -> None:
        pass

    def index_text(self, doc_id: str, text: str) -> None:
        """Count the terms of ``text`` and store them for ``doc_id``."""
        self.add_counts(doc_id, count_terms(text))

    def close(self) -> None:
        """Release the underlying storage. Safe to call more than once."""
        self._closed = True

    @property
    def closed(self) -> bool:
        return self._closed

    def _check_closed(self) -> None:
        """Raise an error if the index has been closed."""
        if self._closed:
            raise IndexStoreError(
                f"Cannot perform operation: {type(self).__name__} has been closed",
            )

    @staticmethod
    def _prepare_counts(counts: Mapping[str, int]) -> dict[str, int]:
        """Normalize terms, drop zero counts and reject negative ones."""
        prepared: dict[str, int] = {}
        for term, count in counts.items():
            if count < 0:
                raise ValueError(f"Negative count {count} for term '{term}'")
            key = normalize_term(term)
            if count == 0 or not key:
                continue
            prepared[key] = prepared.get(key, 0) + int(count)
        return prepared

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

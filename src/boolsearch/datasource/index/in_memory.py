import threading
from collections.abc import Mapping

from loguru import logger

from boolsearch.utils.text import normalize_term

from .base import BaseTermIndex


class InMemoryTermIndex(BaseTermIndex):
    """
    Simple In-Memory Term Index.
    Not persistent.
    """

    def __init__(self):
        super().__init__()
        self._postings: dict[str, dict[str, int]] = {}
        self._doc_terms: dict[str, set[str]] = {}
        self._lock = threading.RLock()

    def lookup_term(self, term: str) -> dict[str, int]:
        self._check_closed()
        with self._lock:
            return dict(self._postings.get(normalize_term(term), {}))

    def add_counts(self, doc_id: str, counts: Mapping[str, int]) -> None:
        self._check_closed()
        prepared = self._prepare_counts(counts)
        with self._lock:
            self._remove(doc_id)
            for term, count in prepared.items():
                self._postings.setdefault(term, {})[doc_id] = count
            self._doc_terms[doc_id] = set(prepared)
        logger.debug(f"Indexed {len(prepared)} terms for document {doc_id}")

    def delete_document(self, doc_id: str) -> None:
        self._check_closed()
        with self._lock:
            self._remove(doc_id)

    def _remove(self, doc_id: str) -> None:
        for term in self._doc_terms.pop(doc_id, set()):
            postings = self._postings.get(term)
            if postings is None:
                continue
            postings.pop(doc_id, None)
            if not postings:
                del self._postings[term]

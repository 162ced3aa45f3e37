"""Text helpers used when populating a term index."""

import re
from collections import Counter

_TOKEN_PATTERN = re.compile(r"[a-z0-9]+")


def normalize_term(term: str) -> str:
    """Canonical form of a term as stored in the index."""
    return term.strip().lower()


def tokenize(text: str) -> list[str]:
    """Split text into lower-cased alphanumeric words."""
    return _TOKEN_PATTERN.findall(text.lower())


def count_terms(text: str) -> dict[str, int]:
    """Occurrences of every term in ``text``."""
    return dict(Counter(tokenize(text)))

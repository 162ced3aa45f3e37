"""Utility functions for boolsearch."""

from .text import count_terms, normalize_term, tokenize

__all__ = [
    "count_terms",
    "normalize_term",
    "tokenize",
]

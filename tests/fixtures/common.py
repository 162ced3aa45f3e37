"""Shared test fixtures for all test types."""

import pytest

from boolsearch import SearchResult


@pytest.fixture
def java_result() -> SearchResult:
    """Leaf result for the term "java"."""
    return SearchResult(scores={"docA": 3, "docB": 1})


@pytest.fixture
def programming_result() -> SearchResult:
    """Leaf result for the term "programming"."""
    return SearchResult(scores={"docB": 2, "docC": 5})


@pytest.fixture
def empty_result() -> SearchResult:
    return SearchResult.empty()


@pytest.fixture
def sample_counts() -> dict[str, dict[str, int]]:
    """Per-document term counts matching the java / programming results."""
    return {
        "docA": {"java": 3, "coffee": 1},
        "docB": {"java": 1, "programming": 2},
        "docC": {"programming": 5, "language": 2},
    }


@pytest.fixture
def sample_pages() -> dict[str, str]:
    """Raw page texts keyed by URL."""
    return {
        "https://en.wikipedia.org/wiki/Java_(programming_language)": (
            "Java is a programming language. Java runs on the Java virtual machine."
        ),
        "https://en.wikipedia.org/wiki/Programming_language": (
            "A programming language is a notation for writing programs. Programming is fun."
        ),
        "https://en.wikipedia.org/wiki/Java": "Java is an island. Java coffee.",
    }

#!/usr/bin/env python3
"""
boolsearch Demo Application

Indexes a handful of pages in memory, then runs single-term and boolean
queries against them and prints the ranked results.
"""

import sys

from loguru import logger

from boolsearch import InMemoryTermIndex, SearchEngine, SearchResult, SortOrder
from boolsearch.config.settings import settings
from boolsearch.observability import init_tracer, shutdown_tracer

# Setup logging
logger.remove()
logger.add(sys.stdout, level=settings.LOG_LEVEL, format="{time:HH:mm:ss} | {level} | {name} - {message}")


SAMPLE_PAGES = {
    "https://en.wikipedia.org/wiki/Java_(programming_language)": (
        "Java is a high-level, class-based, object-oriented programming language. "
        "Java applications are compiled to bytecode that runs on any Java virtual machine."
    ),
    "https://en.wikipedia.org/wiki/Programming_language": (
        "A programming language is a system of notation for writing computer programs. "
        "Programming languages are described by their syntax and semantics."
    ),
    "https://en.wikipedia.org/wiki/Java": (
        "Java is an island of Indonesia. Java coffee takes its name from the island."
    ),
    "https://en.wikipedia.org/wiki/Python_(programming_language)": (
        "Python is a programming language that emphasizes code readability."
    ),
}


def print_result(title: str, result: SearchResult, engine: SearchEngine) -> None:
    logger.info(f"Query: {title} ({len(result)} documents)")
    for url, relevance in engine.rank(result):
        logger.info(f"  {relevance:3d}  {url}")


def main():
    if settings.TRACING_ENABLED:
        init_tracer(service_name=settings.OTEL_SERVICE_NAME, enable_console_export=True)

    index = InMemoryTermIndex()
    for url, text in SAMPLE_PAGES.items():
        index.index_text(url, text)

    with SearchEngine(index, default_order=SortOrder.DESCENDING) as engine:
        java = engine.search("java")
        print_result("java", java, engine)

        programming = engine.search("programming")
        print_result("programming", programming, engine)

        print_result("java AND programming", java & programming, engine)
        print_result("java OR programming", java | programming, engine)
        print_result("java MINUS programming", java - programming, engine)

    shutdown_tracer()
    logger.info("Demo complete!")


if __name__ == "__main__":
    main()

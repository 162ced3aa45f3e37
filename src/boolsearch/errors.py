"""
boolsearch Error Classification.

The boolean algebra itself never fails on well-formed inputs. Errors only
surface at the edge where a term is resolved against an index, or where the
library is configured.

Error Categories:
-----------------
1. Lookup Errors: resolving a term against the index failed
   - Index backend unreachable, locked or timed out (retryable)
   - Index backend closed or corrupt (permanent)

2. Index Store Errors: a backend refused an operation
   - Using an index after close()

3. Configuration Errors: invalid settings
   - Unknown index backend
   - Unknown sort order

Usage:
------
    from boolsearch.errors import ExternalLookupError, is_retryable

    try:
        result = search("java", index)
    except ExternalLookupError as e:
        if is_retryable(e):
            logger.warning(f"Index busy while looking up '{e.term}'")
        raise
"""

from typing import Any


class BoolSearchError(Exception):
    """
    Base exception for all boolsearch errors.

    Attributes:
        message: Human-readable error description
        details: Additional context about the error (optional)
        original_error: The underlying exception that caused this error (optional)
    """

    def __init__(
        self,
        message: str,
        details: dict[str, Any] | None = None,
        original_error: Exception | None = None
    ):
        super().__init__(message)
        self.message = message
        self.details = details or {}
        self.original_error = original_error

    def __str__(self) -> str:
        base = self.message
        if self.details:
            base += f" | Details: {self.details}"
        if self.original_error:
            base += f" | Caused by: {type(self.original_error).__name__}: {self.original_error}"
        return base

    def to_dict(self) -> dict[str, Any]:
        """Convert error to dictionary for logging/serialization."""
        return {
            "error_type": type(self).__name__,
            "message": self.message,
            "details": self.details,
            "original_error": str(self.original_error) if self.original_error else None
        }


class ExternalLookupError(BoolSearchError):
    """
    Raised when a term cannot be resolved against the index.

    This is the only error a caller sees while building a leaf result.
    It is never retried by the library; ``retryable`` tells the caller
    whether trying again may help.

    Attributes:
        term: The term being looked up
        retryable: True if the failure looks transient (lock, timeout, network)
    """

    def __init__(
        self,
        message: str = "Term lookup failed",
        term: str | None = None,
        retryable: bool = False,
        details: dict[str, Any] | None = None,
        original_error: Exception | None = None
    ):
        details = details or {}
        if term is not None:
            details["term"] = term
        super().__init__(message, details, original_error)
        self.term = term
        self.retryable = retryable


class IndexStoreError(BoolSearchError):
    """Raised by an index backend that cannot serve the request (e.g. closed)."""
    pass


class ConfigurationError(BoolSearchError):
    """
    Raised when there's a configuration problem.

    Common causes:
    - Unknown index backend name
    - Invalid sort order
    """

    def __init__(
        self,
        message: str = "Configuration error",
        details: dict[str, Any] | None = None,
        original_error: Exception | None = None
    ):
        super().__init__(message, details, original_error)


_TRANSIENT_MARKERS = (
    "timeout",
    "timed out",
    "locked",
    "busy",
    "connection",
    "connect",
    "network",
    "unavailable",
)


def is_retryable(error: Exception) -> bool:
    """
    Check if an error is worth retrying.

    Only ``ExternalLookupError`` instances flagged as retryable qualify.
    """
    return isinstance(error, ExternalLookupError) and error.retryable


def wrap_lookup_error(error: Exception, term: str) -> ExternalLookupError:
    """
    Wrap a collaborator failure into an ``ExternalLookupError``.

    The message of the original exception is inspected to decide whether
    the failure is transient.

    Example:
        try:
            counts = index.lookup_term(term)
        except Exception as e:
            raise wrap_lookup_error(e, term) from e
    """
    if isinstance(error, ExternalLookupError):
        return error

    error_str = str(error).lower()
    # A closed store stays closed, whatever its message says
    retryable = not isinstance(error, IndexStoreError) and any(
        marker in error_str for marker in _TRANSIENT_MARKERS
    )

    return ExternalLookupError(
        message=f"Lookup of term '{term}' failed: {error}",
        term=term,
        retryable=retryable,
        original_error=error,
    )

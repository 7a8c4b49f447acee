"""Error taxonomy raised by the indexing and query engine."""


class SearchServerError(Exception):
    """Base class for all engine errors."""


class InvalidArgumentError(SearchServerError, ValueError):
    """Raised for invalid ids, text with control characters or malformed queries."""


class OutOfRangeError(SearchServerError, IndexError):
    """Raised when a positional lookup falls outside the recorded documents."""


class PreconditionViolationError(SearchServerError, LookupError):
    """Raised when metadata is requested for a document that was never added."""

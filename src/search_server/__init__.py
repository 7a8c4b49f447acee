"""In-memory TF-IDF document index and ranked retrieval engine."""

from search_server.search.errors import (
    InvalidArgumentError,
    OutOfRangeError,
    PreconditionViolationError,
    SearchServerError,
)
from search_server.search.models import Document, DocumentStatus
from search_server.search_server import SearchServer


__all__ = [
    "Document",
    "DocumentStatus",
    "InvalidArgumentError",
    "OutOfRangeError",
    "PreconditionViolationError",
    "SearchServer",
    "SearchServerError",
]

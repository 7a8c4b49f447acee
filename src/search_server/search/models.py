"""Search data models."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum


class DocumentStatus(str, Enum):
    """Lifecycle status assigned to a document when it is added."""

    ACTUAL = "actual"
    IRRELEVANT = "irrelevant"
    BANNED = "banned"
    REMOVED = "removed"


DocumentPredicate = Callable[[int, DocumentStatus, int], bool]
"""Filter over ``(document_id, status, rating)``."""


def status_predicate(status: DocumentStatus) -> DocumentPredicate:
    """Return a predicate accepting only documents with ``status``."""

    def predicate(_document_id: int, document_status: DocumentStatus, _rating: int) -> bool:
        return document_status == status

    return predicate


@dataclass(frozen=True, slots=True)
class Document:
    """A ranked search result."""

    id: int
    relevance: float = 0.0
    rating: int = 0

    def __str__(self) -> str:
        return f"{{ document_id = {self.id}, relevance = {self.relevance:g}, rating = {self.rating} }}"


@dataclass(frozen=True, slots=True)
class DocumentData:
    """Metadata recorded for every indexed document."""

    status: DocumentStatus
    rating: int


@dataclass(frozen=True)
class Query:
    """Parsed query: words that add relevance and words that disqualify."""

    plus_words: frozenset[str] = field(default_factory=frozenset)
    minus_words: frozenset[str] = field(default_factory=frozenset)

    def is_empty(self) -> bool:
        return not self.plus_words and not self.minus_words

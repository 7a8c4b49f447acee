"""Append-only inverted index with per-document metadata.

Structure: term -> {document_id -> term frequency}. Alongside the postings
the index keeps each document's status and average rating, plus the ids in
insertion order for positional lookup.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
import logging
from types import MappingProxyType

from search_server.search.errors import InvalidArgumentError, OutOfRangeError, PreconditionViolationError
from search_server.search.models import DocumentData, DocumentStatus
from search_server.search.stats import compute_average_rating, compute_term_frequencies
from search_server.search.stop_words import StopWordSet
from search_server.search.tokenizer import SpaceTokenizer, Tokenizer, validate_text


logger = logging.getLogger(__name__)

_EMPTY_POSTINGS: Mapping[int, float] = MappingProxyType({})


class InvertedIndex:
    """In-memory inverted index.

    Responsibilities:
    - Validate and index documents (no update or removal)
    - Expose read-only postings per term
    - Keep status/rating metadata and insertion order of ids
    """

    def __init__(self, stop_words: StopWordSet | None = None, *, tokenizer: Tokenizer | None = None) -> None:
        self.stop_words = stop_words if stop_words is not None else StopWordSet()
        self.tokenizer = tokenizer or SpaceTokenizer()
        self._postings: dict[str, dict[int, float]] = {}
        self._documents: dict[int, DocumentData] = {}
        self._document_ids: list[int] = []

    def add_document(
        self,
        document_id: int,
        text: str,
        status: DocumentStatus,
        ratings: Iterable[int],
    ) -> DocumentData:
        """Index a document.

        Args:
            document_id: Unique, non-negative id
            text: Raw document text
            status: Status recorded for filtering
            ratings: Ratings averaged into the stored rating

        Returns:
            The metadata recorded for the document

        Raises:
            InvalidArgumentError: For a negative or duplicate id, or text with
                control characters. The index is left unchanged.
        """

        if document_id < 0:
            raise InvalidArgumentError(f"Attempt to add a document with a negative id: {document_id}")
        if document_id in self._documents:
            raise InvalidArgumentError(f"Attempt to add a document with an existing id: {document_id}")
        validate_text(text, what="Document text")

        words = self.stop_words.filter(self.tokenizer(text))
        frequencies = compute_term_frequencies(words)
        data = DocumentData(status=status, rating=compute_average_rating(tuple(ratings)))

        # Nothing above mutates the index; commit postings and metadata together
        for term, frequency in frequencies.items():
            self._postings.setdefault(term, {})[document_id] = frequency
        self._documents[document_id] = data
        self._document_ids.append(document_id)

        logger.debug(
            "Document %s indexed: %d words, %d unique terms",
            document_id,
            len(words),
            len(set(words)),
        )
        return data

    @property
    def document_count(self) -> int:
        return len(self._document_ids)

    def __len__(self) -> int:
        return self.document_count

    def __contains__(self, document_id: object) -> bool:
        return document_id in self._documents

    @property
    def document_ids(self) -> tuple[int, ...]:
        """Document ids in insertion order."""
        return tuple(self._document_ids)

    def document_id_at(self, position: int) -> int:
        """Return the id added at ``position`` (0-based insertion order)."""

        if not 0 <= position < len(self._document_ids):
            raise OutOfRangeError(
                f"Document position {position} is out of range [0, {len(self._document_ids)})"
            )
        return self._document_ids[position]

    def term_postings(self, term: str) -> Mapping[int, float]:
        """Return a read-only ``document_id -> frequency`` map for ``term``."""

        postings = self._postings.get(term)
        if postings is None:
            return _EMPTY_POSTINGS
        return MappingProxyType(postings)

    def has_term(self, term: str) -> bool:
        return term in self._postings

    def document_data(self, document_id: int) -> DocumentData:
        """Return status and rating for an indexed document."""

        try:
            return self._documents[document_id]
        except KeyError:
            raise PreconditionViolationError(f"Document {document_id} was never added") from None

    def get_stats(self) -> dict[str, float]:
        """Return index statistics."""
        num_terms = len(self._postings)
        return {
            "num_terms": num_terms,
            "num_documents": self.document_count,
            "avg_postings_per_term": (
                sum(len(postings) for postings in self._postings.values()) / num_terms if num_terms else 0
            ),
        }

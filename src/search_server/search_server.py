"""Public search engine API.

``SearchServer`` wires the stop word set, inverted index, query parser and
TF-IDF ranker together. All operations are synchronous; the instance holds
no locks, so embedders that share one across threads must serialize
``add_document`` against reads themselves.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from contextlib import contextmanager, nullcontext
import logging
from typing import TYPE_CHECKING, Any, Union

from search_server.observability.metrics import DOCUMENTS_ADDED, QUERY_COUNT, QUERY_LATENCY, track_latency
from search_server.observability.tracing import create_span
from search_server.search.errors import SearchServerError
from search_server.search.index import InvertedIndex
from search_server.search.models import Document, DocumentPredicate, DocumentStatus, status_predicate
from search_server.search.query_parser import QueryParser
from search_server.search.ranker import DEFAULT_MAX_RESULT_DOCUMENT_COUNT, DEFAULT_RELEVANCE_EPSILON, TfIdfRanker
from search_server.search.stop_words import StopWordSet


if TYPE_CHECKING:
    from search_server.config import Settings


logger = logging.getLogger(__name__)

DocumentFilter = Union[DocumentStatus, DocumentPredicate, None]


class SearchServer:
    """Index documents and answer ranked TF-IDF queries."""

    def __init__(
        self,
        stop_words: str | Iterable[str] = "",
        *,
        max_result_document_count: int = DEFAULT_MAX_RESULT_DOCUMENT_COUNT,
        relevance_epsilon: float = DEFAULT_RELEVANCE_EPSILON,
        tracing_enabled: bool = True,
    ) -> None:
        self.stop_words = StopWordSet(stop_words)
        self.index = InvertedIndex(self.stop_words)
        self.parser = QueryParser(self.stop_words)
        self.ranker = TfIdfRanker(
            max_result_document_count=max_result_document_count,
            relevance_epsilon=relevance_epsilon,
        )
        self.tracing_enabled = tracing_enabled

    @classmethod
    def from_settings(cls, settings: Settings, stop_words: str | Iterable[str] | None = None) -> SearchServer:
        """Build a server from settings; explicit ``stop_words`` win over the configured ones."""

        return cls(
            settings.stop_words if stop_words is None else stop_words,
            max_result_document_count=settings.max_result_document_count,
            relevance_epsilon=settings.relevance_epsilon,
            tracing_enabled=settings.tracing_enabled,
        )

    @property
    def max_result_document_count(self) -> int:
        return self.ranker.max_result_document_count

    @property
    def relevance_epsilon(self) -> float:
        return self.ranker.relevance_epsilon

    def set_stop_words(self, text: str) -> None:
        """Extend the stop word set with the space-separated words of ``text``.

        Documents already indexed keep the postings they were added with.
        """

        self.stop_words.add_text(text)

    def add_document(
        self,
        document_id: int,
        document: str,
        status: DocumentStatus = DocumentStatus.ACTUAL,
        ratings: Iterable[int] = (),
    ) -> None:
        """Index ``document`` under ``document_id``.

        Raises:
            InvalidArgumentError: Negative or duplicate id, or control
                characters in the text.
        """

        with self._span("add_document", {"document.id": document_id, "document.status": status}):
            self.index.add_document(document_id, document, status, ratings)
        DOCUMENTS_ADDED.labels(status=status.value).inc()

    def find_top_documents(self, raw_query: str, document_filter: DocumentFilter = None) -> list[Document]:
        """Return up to ``max_result_document_count`` documents for ``raw_query``.

        Args:
            raw_query: Space-separated words; ``-word`` excludes documents
            document_filter: A status to match exactly, a predicate over
                ``(document_id, status, rating)``, or None for ACTUAL documents

        Returns:
            Documents ordered by relevance, near-equal relevance by rating
        """

        predicate = _resolve_filter(document_filter)
        with self._observe_query("find_top_documents", raw_query) as span:
            query = self.parser.parse(raw_query)
            matched = self.ranker.find_all_documents(self.index, query, predicate)
            results = self.ranker.rank(matched)
            if span is not None:
                span.set_attribute("search.matched", len(matched))
                span.set_attribute("search.returned", len(results))

        QUERY_COUNT.labels(operation="find_top_documents", outcome="hit" if results else "empty").inc()
        logger.debug("Query %r matched %d documents, returning %d", raw_query, len(matched), len(results))
        return results

    def get_document_count(self) -> int:
        return self.index.document_count

    def get_document_id(self, index: int) -> int:
        """Return the id of the document added at position ``index``.

        Raises:
            OutOfRangeError: ``index`` is outside ``[0, get_document_count())``.
        """

        return self.index.document_id_at(index)

    def match_document(self, raw_query: str, document_id: int) -> tuple[list[str], DocumentStatus]:
        """Return the query's plus words found in a document, with its status.

        The word list is sorted and empty when the document contains any
        minus word.

        Raises:
            InvalidArgumentError: Malformed query.
            PreconditionViolationError: ``document_id`` was never added.
        """

        with self._observe_query("match_document", raw_query):
            query = self.parser.parse(raw_query)
            data = self.index.document_data(document_id)

            excluded = any(document_id in self.index.term_postings(word) for word in query.minus_words)
            if excluded:
                matched_words: list[str] = []
            else:
                matched_words = sorted(word for word in query.plus_words if document_id in self.index.term_postings(word))

        QUERY_COUNT.labels(operation="match_document", outcome="hit" if matched_words else "empty").inc()
        return matched_words, data.status

    def __len__(self) -> int:
        return self.index.document_count

    @contextmanager
    def _observe_query(self, operation: str, raw_query: str) -> Iterator[Any]:
        with track_latency(QUERY_LATENCY, operation=operation):
            try:
                with self._span(operation, {"search.query": raw_query}) as span:
                    yield span
            except SearchServerError:
                QUERY_COUNT.labels(operation=operation, outcome="error").inc()
                raise

    def _span(self, operation: str, attributes: dict[str, Any]):
        if not self.tracing_enabled:
            return nullcontext()
        return create_span(operation, attributes=attributes)


def _resolve_filter(document_filter: DocumentFilter) -> DocumentPredicate:
    if document_filter is None:
        return status_predicate(DocumentStatus.ACTUAL)
    if isinstance(document_filter, DocumentStatus):
        return status_predicate(document_filter)
    if callable(document_filter):
        return document_filter
    raise TypeError(f"Unsupported document filter: {document_filter!r}")

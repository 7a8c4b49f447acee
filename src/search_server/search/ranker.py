"""TF-IDF scoring and top-K ordering over an inverted index."""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Iterable
from functools import cmp_to_key

from search_server.search.index import InvertedIndex
from search_server.search.models import Document, DocumentPredicate, Query
from search_server.search.stats import calculate_idf


DEFAULT_MAX_RESULT_DOCUMENT_COUNT = 5
DEFAULT_RELEVANCE_EPSILON = 1e-6


class TfIdfRanker:
    """Compute TF-IDF relevance for candidate documents and order them."""

    def __init__(
        self,
        *,
        max_result_document_count: int = DEFAULT_MAX_RESULT_DOCUMENT_COUNT,
        relevance_epsilon: float = DEFAULT_RELEVANCE_EPSILON,
    ) -> None:
        if max_result_document_count < 1:
            raise ValueError("max_result_document_count must be >= 1")
        if relevance_epsilon <= 0:
            raise ValueError("relevance_epsilon must be > 0")
        self.max_result_document_count = max_result_document_count
        self.relevance_epsilon = relevance_epsilon
        self._sort_key = cmp_to_key(self._compare)

    def find_all_documents(
        self,
        index: InvertedIndex,
        query: Query,
        predicate: DocumentPredicate,
    ) -> list[Document]:
        """Return every matching document, unordered by relevance.

        Plus words accumulate ``idf * tf``; any minus word hit removes the
        document regardless of its score. Survivors of ``predicate`` come
        back in ascending id order.
        """

        doc_relevance: dict[int, float] = defaultdict(float)
        total_docs = index.document_count

        for word in sorted(query.plus_words):
            postings = index.term_postings(word)
            if not postings:
                continue
            idf = calculate_idf(len(postings), total_docs)
            for document_id, term_freq in postings.items():
                doc_relevance[document_id] += idf * term_freq

        for word in query.minus_words:
            for document_id in index.term_postings(word):
                doc_relevance.pop(document_id, None)

        matched: list[Document] = []
        for document_id in sorted(doc_relevance):
            data = index.document_data(document_id)
            if predicate(document_id, data.status, data.rating):
                matched.append(Document(id=document_id, relevance=doc_relevance[document_id], rating=data.rating))
        return matched

    def rank(self, documents: Iterable[Document]) -> list[Document]:
        """Sort by relevance (rating breaks near-ties) and keep the top K."""

        ranked = sorted(documents, key=self._sort_key)
        return ranked[: self.max_result_document_count]

    def _compare(self, lhs: Document, rhs: Document) -> int:
        if abs(lhs.relevance - rhs.relevance) < self.relevance_epsilon:
            return rhs.rating - lhs.rating
        return -1 if lhs.relevance > rhs.relevance else 1

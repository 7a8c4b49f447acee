"""Sliding-window tracker for queries that returned no documents."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
import logging

from search_server.search.models import Document
from search_server.search_server import DocumentFilter, SearchServer


logger = logging.getLogger(__name__)

DEFAULT_WINDOW_SIZE = 1440  # one "day" of minute-sized ticks


@dataclass(frozen=True, slots=True)
class QueryResult:
    """Outcome of one tracked request."""

    timestamp: int
    result_count: int


class RequestQueue:
    """Forward queries to a search server and count recent empty results.

    Time is logical: every request advances the clock by one tick, and only
    the last ``window_size`` ticks are kept.
    """

    def __init__(self, search_server: SearchServer, *, window_size: int = DEFAULT_WINDOW_SIZE) -> None:
        if window_size < 1:
            raise ValueError("window_size must be >= 1")
        self.search_server = search_server
        self.window_size = window_size
        self._requests: deque[QueryResult] = deque()
        self._no_result_requests = 0
        self._current_time = 0

    def add_find_request(self, raw_query: str, document_filter: DocumentFilter = None) -> list[Document]:
        """Run ``find_top_documents`` and record how many documents it returned.

        A request that raises is not recorded.
        """

        results = self.search_server.find_top_documents(raw_query, document_filter)
        self._add_result(len(results))
        return results

    def get_no_result_requests(self) -> int:
        return self._no_result_requests

    @property
    def current_time(self) -> int:
        return self._current_time

    def __len__(self) -> int:
        return len(self._requests)

    def _add_result(self, result_count: int) -> None:
        self._current_time += 1
        while self._requests and self._requests[0].timestamp <= self._current_time - self.window_size:
            expired = self._requests.popleft()
            if expired.result_count == 0:
                self._no_result_requests -= 1

        self._requests.append(QueryResult(timestamp=self._current_time, result_count=result_count))
        if result_count == 0:
            self._no_result_requests += 1
            logger.debug(
                "Request %d returned no documents (%d empty in window)",
                self._current_time,
                self._no_result_requests,
            )

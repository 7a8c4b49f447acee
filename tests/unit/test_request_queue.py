"""Unit tests for the empty-result request tracker."""

from __future__ import annotations

import pytest

from search_server.request_queue import DEFAULT_WINDOW_SIZE, RequestQueue
from search_server.search.errors import InvalidArgumentError
from search_server.search.models import DocumentStatus
from search_server.search_server import SearchServer


pytestmark = pytest.mark.unit


@pytest.fixture
def populated_server() -> SearchServer:
    server = SearchServer("and in at", tracing_enabled=False)
    server.add_document(1, "curly cat curly tail", DocumentStatus.ACTUAL, [7, 2, 7])
    server.add_document(2, "curly dog and fancy collar", DocumentStatus.ACTUAL, [1, 2, 3])
    server.add_document(3, "big cat fancy collar", DocumentStatus.ACTUAL, [1, 2, 8])
    server.add_document(4, "big dog sparrow Eugene", DocumentStatus.ACTUAL, [1, 3, 2])
    server.add_document(5, "big dog sparrow Vasiliy", DocumentStatus.ACTUAL, [1, 1, 1])
    return server


def test_default_window_is_one_day_of_minutes(populated_server) -> None:
    assert RequestQueue(populated_server).window_size == DEFAULT_WINDOW_SIZE == 1440


def test_forwards_results_unchanged(populated_server) -> None:
    queue = RequestQueue(populated_server)

    assert queue.add_find_request("curly dog") == populated_server.find_top_documents("curly dog")


def test_forwards_status_and_predicate_filters(populated_server) -> None:
    queue = RequestQueue(populated_server)

    assert queue.add_find_request("curly dog", DocumentStatus.BANNED) == []
    results = queue.add_find_request("big", lambda document_id, _status, _rating: document_id == 4)
    assert [document.id for document in results] == [4]
    assert queue.get_no_result_requests() == 1


def test_counts_empty_results(populated_server) -> None:
    queue = RequestQueue(populated_server)

    queue.add_find_request("empty request")
    queue.add_find_request("curly dog")
    queue.add_find_request("another empty")

    assert queue.get_no_result_requests() == 2
    assert queue.current_time == 3


def test_old_requests_leave_the_window(populated_server) -> None:
    queue = RequestQueue(populated_server)

    for _ in range(1439):
        queue.add_find_request("empty request")
    assert queue.get_no_result_requests() == 1439

    queue.add_find_request("curly dog")
    assert queue.get_no_result_requests() == 1439
    assert len(queue) == 1440

    queue.add_find_request("big collar")
    assert queue.get_no_result_requests() == 1438

    queue.add_find_request("sparrow")
    assert queue.get_no_result_requests() == 1437
    assert len(queue) == 1440


def test_small_window(populated_server) -> None:
    queue = RequestQueue(populated_server, window_size=2)

    queue.add_find_request("nothing")
    queue.add_find_request("nothing")
    queue.add_find_request("curly")

    assert queue.get_no_result_requests() == 1
    assert len(queue) == 2


def test_failed_request_is_not_recorded(populated_server) -> None:
    queue = RequestQueue(populated_server)

    with pytest.raises(InvalidArgumentError):
        queue.add_find_request("--curly")

    assert queue.current_time == 0
    assert queue.get_no_result_requests() == 0


def test_rejects_invalid_window(populated_server) -> None:
    with pytest.raises(ValueError):
        RequestQueue(populated_server, window_size=0)

"""Shared test fixtures and configuration."""

import os

import pytest

from search_server.search.models import DocumentStatus
from search_server.search_server import SearchServer


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Drop SEARCH_SERVER_* overrides inherited from the developer's shell."""
    for key in list(os.environ):
        if key.upper().startswith("SEARCH_SERVER_"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture
def server() -> SearchServer:
    """Empty search server with no stop words and tracing off."""
    return SearchServer(tracing_enabled=False)


@pytest.fixture
def pet_server() -> SearchServer:
    """Two pet documents sharing 'funny pet', stop words 'and with'."""
    server = SearchServer("and with", tracing_enabled=False)
    server.add_document(1, "funny pet and nasty rat", DocumentStatus.ACTUAL, [7, 2, 7])
    server.add_document(2, "funny pet with curly hair", DocumentStatus.ACTUAL, [1, 2, 3])
    return server


@pytest.fixture
def cat_server() -> SearchServer:
    """Three documents with mixed-sign ratings and stop words 'and in on'."""
    server = SearchServer("and in on", tracing_enabled=False)
    server.add_document(0, "white cat and fancy collar", DocumentStatus.ACTUAL, [8, -3])
    server.add_document(1, "fluffy cat fluffy tail", DocumentStatus.ACTUAL, [7, 2, 7])
    server.add_document(2, "groomed dog expressive eyes", DocumentStatus.ACTUAL, [5, -12, 2, 1])
    return server

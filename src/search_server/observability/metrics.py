"""Prometheus metrics for indexing and query golden signals."""

from __future__ import annotations

from contextlib import contextmanager
import time
from typing import TYPE_CHECKING

from prometheus_client import CONTENT_TYPE_LATEST, Counter, Histogram, generate_latest


if TYPE_CHECKING:
    from collections.abc import Generator


DOCUMENTS_ADDED = Counter(
    "search_server_documents_added_total",
    "Documents accepted into the index",
    ["status"],
)

QUERY_COUNT = Counter(
    "search_server_queries_total",
    "Queries executed, by outcome",
    ["operation", "outcome"],
)

QUERY_LATENCY = Histogram(
    "search_server_query_latency_seconds",
    "Query latency in seconds",
    ["operation"],
    buckets=(0.0005, 0.001, 0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5),
)


@contextmanager
def track_latency(histogram: Histogram, **labels: str) -> Generator[None, None, None]:
    """Context manager to track operation latency."""
    start = time.perf_counter()
    try:
        yield
    finally:
        histogram.labels(**labels).observe(time.perf_counter() - start)


def get_metrics() -> bytes:
    """Generate Prometheus metrics output."""
    return generate_latest()


def get_metrics_content_type() -> str:
    """Get content type for the metrics exposition format."""
    return CONTENT_TYPE_LATEST

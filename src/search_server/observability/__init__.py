"""Observability module for OpenTelemetry-aligned tracing, metrics, and logging."""

from search_server.observability.context import bind_correlation_ids, correlation_ids, span_ids
from search_server.observability.logging import JsonFormatter, configure_logging
from search_server.observability.metrics import (
    DOCUMENTS_ADDED,
    QUERY_COUNT,
    QUERY_LATENCY,
    get_metrics,
    get_metrics_content_type,
    track_latency,
)
from search_server.observability.tracing import create_span, get_tracer, init_tracing


__all__ = [
    "DOCUMENTS_ADDED",
    "QUERY_COUNT",
    "QUERY_LATENCY",
    "JsonFormatter",
    "bind_correlation_ids",
    "configure_logging",
    "correlation_ids",
    "create_span",
    "get_metrics",
    "get_metrics_content_type",
    "get_tracer",
    "init_tracing",
    "span_ids",
    "track_latency",
]

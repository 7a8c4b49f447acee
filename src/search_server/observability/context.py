"""Correlation ids attached to log records."""

from __future__ import annotations

from contextvars import ContextVar
from typing import TYPE_CHECKING
from uuid import uuid4

from opentelemetry import trace


if TYPE_CHECKING:
    from opentelemetry.trace import Span

_fallback_ids: ContextVar[tuple[str, str] | None] = ContextVar("search_server_log_ids", default=None)


def span_ids(span: Span) -> tuple[str, str]:
    """Return the hex ``(trace_id, span_id)`` pair of ``span``."""
    ctx = span.get_span_context()
    return format(ctx.trace_id, "032x"), format(ctx.span_id, "016x")


def correlation_ids() -> tuple[str, str]:
    """Return the ``(trace_id, span_id)`` for a log line emitted now.

    Inside an engine span these are the span's ids. Elsewhere a random pair
    is generated once per context, so lines from one console run group
    together.
    """
    span = trace.get_current_span()
    if span.get_span_context().is_valid:
        return span_ids(span)
    ids = _fallback_ids.get()
    if ids is None:
        ids = (uuid4().hex, uuid4().hex[:16])
        _fallback_ids.set(ids)
    return ids


def bind_correlation_ids(trace_id: str, span_id: str) -> None:
    """Pin the ids used for log lines emitted outside any span."""
    _fallback_ids.set((trace_id, span_id))

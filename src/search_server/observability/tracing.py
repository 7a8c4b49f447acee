"""OpenTelemetry spans around engine operations.

Spans are produced by a module-owned tracer provider, so embedding
applications keep control of the global provider. Attach span processors
through :func:`init_tracing` to export them.
"""

from __future__ import annotations

from collections.abc import Iterable
from contextlib import contextmanager
from enum import Enum
import logging
from typing import TYPE_CHECKING, Any

from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.trace import SpanKind, Status, StatusCode


if TYPE_CHECKING:
    from collections.abc import Generator

    from opentelemetry.sdk.trace import SpanProcessor
    from opentelemetry.trace import Span, Tracer

logger = logging.getLogger(__name__)

SPAN_PREFIX = "search."

_tracer_holder: dict[str, Tracer | None] = {"tracer": None}


def init_tracing(
    service_name: str = "search-server",
    *,
    span_processors: Iterable[SpanProcessor] = (),
) -> TracerProvider:
    """Install a fresh tracer provider for engine spans and return it."""
    provider = TracerProvider(resource=Resource.create({"service.name": service_name}))
    for processor in span_processors:
        provider.add_span_processor(processor)
    _tracer_holder["tracer"] = provider.get_tracer("search_server")
    logger.debug("Tracing initialized for service: %s", service_name)
    return provider


def get_tracer() -> Tracer:
    """Get the engine tracer, initializing tracing on first use."""
    if _tracer_holder["tracer"] is None:
        init_tracing()
    return _tracer_holder["tracer"]  # type: ignore[return-value]


def _attribute_value(value: Any) -> Any:
    # OTel attributes only take primitives and homogeneous sequences
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, (bool, int, float, str)):
        return value
    if isinstance(value, (set, frozenset, list, tuple)):
        return sorted(str(item) for item in value)
    return str(value)


@contextmanager
def create_span(
    operation: str,
    kind: SpanKind = SpanKind.INTERNAL,
    attributes: dict[str, Any] | None = None,
) -> Generator[Span, None, None]:
    """Run the block inside a ``search.<operation>`` span.

    An exception marks the span as failed and propagates unchanged.
    """
    with get_tracer().start_as_current_span(
        f"{SPAN_PREFIX}{operation}",
        kind=kind,
        record_exception=False,
        set_status_on_exception=False,
    ) as span:
        for key, value in (attributes or {}).items():
            span.set_attribute(key, _attribute_value(value))
        try:
            yield span
        except Exception as exc:
            span.set_status(Status(StatusCode.ERROR, str(exc)))
            span.record_exception(exc)
            raise

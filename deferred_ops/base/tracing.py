"""Lightweight tracing facade with no-op fallback.

Drive loops annotate each operation run with a span without taking a hard
dependency on OpenTelemetry. If ``opentelemetry.trace`` is importable, a real
tracer is used (install the ``tracing`` extra); otherwise a no-op tracer keeps
calls safe.

Policy notes
- No side effects on import.
- Spans expose ``set_attribute``, ``record_exception`` and the context
  manager protocol.
"""
from __future__ import annotations

from .trace_support import _NoOpSpan, _NoOpTracer


def get_tracer(service_name: str = "deferred_ops"):
    """Return an OpenTelemetry tracer when available, else a no-op tracer."""
    try:  # local import to avoid hard dependency
        from opentelemetry import trace  # type: ignore

        return trace.get_tracer(service_name)
    except ImportError:
        return _NoOpTracer(service_name)


def start_span(name: str, *, service_name: str = "deferred_ops"):
    """Start and return a span context manager.

    Usage:

        with start_span("deferred_ops.drive") as span:
            span.set_attribute("operation", "bounded_read")
    """
    tracer = get_tracer(service_name)
    if hasattr(tracer, "start_as_current_span"):
        return tracer.start_as_current_span(name)  # type: ignore[no-any-return]
    return _NoOpSpan(name)


__all__ = ["get_tracer", "start_span"]

"""Distributed tracing module using OpenTelemetry."""

from .otel_config import Tracing, configure_tracing, mark_span_error

__all__ = ["Tracing", "configure_tracing", "mark_span_error"]

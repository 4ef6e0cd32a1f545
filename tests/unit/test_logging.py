"""
Unit tests for structlog processors.
"""

from shared.logging.structured_logger import APP_NAME, _app_context_processor, add_trace_context


def test_trace_context_added_inside_span(tracing):
    with tracing.get_tracer("test").start_as_current_span("work") as span:
        event = add_trace_context(None, "info", {"event": "cep_resolved"})

    context = span.get_span_context()
    assert event["trace_id"] == f"{context.trace_id:032x}"
    assert event["span_id"] == f"{context.span_id:016x}"


def test_trace_context_absent_outside_span():
    event = add_trace_context(None, "info", {"event": "request_started"})

    assert "trace_id" not in event
    assert "span_id" not in event


def test_app_context_processor():
    processor = _app_context_processor("staging", "edge-gateway")

    event = processor(None, "info", {"event": "request_completed"})

    assert event["app"] == APP_NAME
    assert event["environment"] == "staging"
    assert event["service"] == "edge-gateway"


def test_app_context_processor_without_service():
    event = _app_context_processor("development")(None, "info", {"event": "x"})

    assert "service" not in event

"""Structured logging configuration using structlog.

Provides JSON-formatted logs with correlation IDs, timestamps, and context.
Integrates with OpenTelemetry for trace correlation.
"""

import logging
import sys
from typing import Optional

import structlog
from opentelemetry import trace
from structlog.types import EventDict, Processor

APP_NAME = "cep-weather"


def _app_context_processor(environment: str, service_name: Optional[str] = None) -> Processor:
    """Build a processor that tags entries with application context.

    Args:
        environment: Deployment environment name
        service_name: Service name, omitted from entries when None

    Returns:
        structlog processor
    """

    def add_app_context(logger: logging.Logger, method_name: str, event_dict: EventDict) -> EventDict:
        event_dict["app"] = APP_NAME
        event_dict["environment"] = environment
        if service_name:
            event_dict["service"] = service_name
        return event_dict

    return add_app_context


def add_trace_context(logger: logging.Logger, method_name: str, event_dict: EventDict) -> EventDict:
    """Add OpenTelemetry trace context to log entries.

    Args:
        logger: The logger instance
        method_name: The logging method name
        event_dict: The event dictionary

    Returns:
        Updated event dictionary with trace context
    """
    span = trace.get_current_span()
    span_context = span.get_span_context()
    if span_context.is_valid:
        event_dict["trace_id"] = format(span_context.trace_id, "032x")
        event_dict["span_id"] = format(span_context.span_id, "016x")
    return event_dict


def configure_logging(
    log_level: str = "INFO",
    json_logs: bool = True,
    service_name: Optional[str] = None,
    environment: str = "development",
) -> None:
    """Configure structured logging for the application.

    Args:
        log_level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        json_logs: Whether to output logs in JSON format
        service_name: Name of the service for log tagging
        environment: Deployment environment reported on every entry
    """
    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
        _app_context_processor(environment, service_name),
        add_trace_context,
    ]

    if json_logs:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, log_level.upper()),
    )

"""Prometheus metrics definitions and helpers.

Each app owns its own registry so the HTTP metrics can be registered again
whenever an app is built.
"""

from typing import Callable, Optional

from prometheus_client import (
    CONTENT_TYPE_LATEST,
    CollectorRegistry,
    Counter,
    Gauge,
    Histogram,
    generate_latest,
)


class HTTPMetrics:
    """Request metrics observed by the HTTP middleware."""

    def __init__(self, registry: Optional[CollectorRegistry] = None) -> None:
        """Initialize HTTP metrics.

        Args:
            registry: Prometheus registry to use, a fresh one if omitted
        """
        self.registry = registry or CollectorRegistry()

        self.requests_total = Counter(
            "http_requests_total",
            "Total HTTP requests",
            ["method", "endpoint", "status"],
            registry=self.registry,
        )

        self.request_duration = Histogram(
            "http_request_duration_seconds",
            "HTTP request duration in seconds",
            ["method", "endpoint"],
            buckets=[0.01, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0, 30.0, 60.0],
            registry=self.registry,
        )

        self.requests_in_progress = Gauge(
            "http_requests_in_progress",
            "HTTP requests currently in progress",
            ["method"],
            registry=self.registry,
        )


def get_metrics_handler(registry: CollectorRegistry) -> Callable[[], bytes]:
    """Get metrics handler for HTTP endpoint.

    Args:
        registry: Registry to expose

    Returns:
        Function that generates Prometheus metrics output
    """

    def metrics_handler() -> bytes:
        return generate_latest(registry)

    return metrics_handler


__all__ = ["CONTENT_TYPE_LATEST", "HTTPMetrics", "get_metrics_handler"]

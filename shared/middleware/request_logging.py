"""Request logging and metrics middleware shared by both services."""

import time
import uuid

import structlog
from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.responses import Response
from starlette.types import ASGIApp

from shared.metrics import HTTPMetrics

logger = structlog.get_logger(__name__)

CORRELATION_HEADER = "X-Correlation-ID"
UNMATCHED_ENDPOINT = "unmatched"


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Middleware for request logging, correlation IDs and HTTP metrics."""

    def __init__(self, app: ASGIApp, metrics: HTTPMetrics) -> None:
        super().__init__(app)
        self.metrics = metrics

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        correlation_id = request.headers.get(CORRELATION_HEADER) or str(uuid.uuid4())
        method = request.method
        path = request.url.path
        client_ip = request.client.host if request.client else "unknown"

        structlog.contextvars.bind_contextvars(correlation_id=correlation_id)
        start_time = time.perf_counter()

        logger.info("request_started", method=method, path=path, client_ip=client_ip)

        in_progress = self.metrics.requests_in_progress.labels(method=method)
        in_progress.inc()
        try:
            response = await call_next(request)
        except Exception as e:
            duration = time.perf_counter() - start_time
            self._observe(request, method, 500, duration)
            logger.error(
                "request_failed",
                method=method,
                path=path,
                error=str(e),
                duration=f"{duration:.3f}s",
                exc_info=True,
            )
            raise
        finally:
            in_progress.dec()
            structlog.contextvars.unbind_contextvars("correlation_id")

        duration = time.perf_counter() - start_time
        self._observe(request, method, response.status_code, duration)

        logger.info(
            "request_completed",
            method=method,
            path=path,
            status_code=response.status_code,
            duration=f"{duration:.3f}s",
            correlation_id=correlation_id,
        )

        response.headers[CORRELATION_HEADER] = correlation_id
        return response

    def _observe(self, request: Request, method: str, status_code: int, duration: float) -> None:
        endpoint = self._endpoint_label(request)
        self.metrics.requests_total.labels(method=method, endpoint=endpoint, status=status_code).inc()
        self.metrics.request_duration.labels(method=method, endpoint=endpoint).observe(duration)

    @staticmethod
    def _endpoint_label(request: Request) -> str:
        """Label requests by route template so /{cep} stays one series.

        Only valid after dispatch: routing stores the matched route in the scope.
        """
        route = request.scope.get("route")
        if route is None:
            return UNMATCHED_ENDPOINT
        return getattr(route, "path_format", None) or getattr(route, "path", None) or UNMATCHED_ENDPOINT

"""FastAPI middleware and exception handlers shared by both services."""

from shared.middleware.error_handlers import register_exception_handlers
from shared.middleware.request_logging import CORRELATION_HEADER, RequestLoggingMiddleware

__all__ = [
    "CORRELATION_HEADER",
    "RequestLoggingMiddleware",
    "register_exception_handlers",
]
